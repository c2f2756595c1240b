"""NumPy compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for NumPy so the random
source backend is chosen once, by capability probing, with consistent error
messaging when the preferred backend is requested explicitly.

Design Rationale:
    proptrial supports two installation modes:
    - Standard: `pip install proptrial` (no external dependencies; the
      general-purpose random.Random backend is used)
    - Accelerated: `pip install proptrial[numpy]` (PCG64 backend, wider
      reproducible seed range)

    This module ensures that:
    1. Standard installations never trigger NumPy imports at call sites
    2. The backend probe runs once per process (cached)
    3. Explicit requests for the NumPy backend fail fast with install guidance

Usage Pattern:
    from proptrial.core.numpy_compat import require_numpy

    def make_source(seed: int) -> RandomSource:
        require_numpy("NumpyRandomSource")  # Raises NumpyImportError if missing
        import numpy  # Safe to import NumPy now
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from types import ModuleType

from proptrial.diagnostics import Diagnostic, ErrorTemplate

__all__ = [
    "NumpyImportError",
    "get_numpy_random",
    "is_numpy_available",
    "require_numpy",
]


@lru_cache(maxsize=1)
def _check_numpy_available() -> bool:
    """Check if NumPy is installed (computed once, cached via lru_cache)."""
    try:
        import numpy  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class NumpyImportError(ImportError):
    """Raised when NumPy is required but not installed.

    Attributes:
        feature: Name of the feature that needed NumPy
        diagnostic: Structured diagnostic with install hint
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/class requiring NumPy
        """
        self.diagnostic: Diagnostic = ErrorTemplate.backend_unavailable(feature, "numpy")
        super().__init__(f"{self.diagnostic.message}. {self.diagnostic.hint}")
        self.feature = feature


def is_numpy_available() -> bool:
    """Check if NumPy is installed.

    Public API for checking NumPy availability. Uses cached result to avoid
    repeated import attempts.

    Returns:
        True if NumPy is installed and importable, False otherwise.
    """
    return _check_numpy_available()


def require_numpy(feature: str) -> None:
    """Assert that NumPy is available, raising NumpyImportError if not.

    Args:
        feature: Name of the feature requiring NumPy (for error message)

    Raises:
        NumpyImportError: If NumPy is not installed
    """
    if not _check_numpy_available():
        raise NumpyImportError(feature)


def get_numpy_random() -> ModuleType:
    """Get the numpy.random module.

    Returns:
        The numpy.random module

    Raises:
        NumpyImportError: If NumPy is not installed
    """
    require_numpy("get_numpy_random")
    from numpy import random  # noqa: PLC0415

    return random
