"""Random sources.

The backend is chosen once, at import, by probing for NumPy: the PCG64
backend when NumPy is importable, otherwise the random.Random backend.
Call sites only ever see the RandomSource interface.

Exports:
    RandomSource: Abstract capability interface
    NumpyRandomSource, StdlibRandomSource: Concrete backends
    DefaultRandomSource: The backend selected for this process
    new_rng: Construct a source of the selected (or a given) backend

Python 3.13+.
"""

import logging
import time

from proptrial.constants import BITS_OF_ACCURACY
from proptrial.core.numpy_compat import is_numpy_available

from .backends import NumpyRandomSource, StdlibRandomSource
from .base import RandomSource

__all__ = [
    "BITS_OF_ACCURACY",
    "DefaultRandomSource",
    "NumpyRandomSource",
    "RandomSource",
    "StdlibRandomSource",
    "new_rng",
    "select_backend",
]

logger = logging.getLogger(__name__)


def select_backend() -> type[RandomSource]:
    """Return the preferred backend class available in this process."""
    if is_numpy_available():
        return NumpyRandomSource
    return StdlibRandomSource


DefaultRandomSource: type[RandomSource] = select_backend()
logger.debug(
    "Random source backend: %s (seed limit 2**%d)",
    DefaultRandomSource.backend_name,
    DefaultRandomSource.limit.bit_length() - 1,
)


def new_rng(seed: int | None = None, *, backend: type[RandomSource] | None = None) -> RandomSource:
    """Construct a random source.

    Args:
        seed: Initial seed (default: current wall-clock time in seconds)
        backend: Backend class (default: DefaultRandomSource)

    Returns:
        A seeded RandomSource

    Example:
        >>> rng = new_rng(1234)
        >>> rng.get_seed()
        1234
    """
    cls = backend if backend is not None else DefaultRandomSource
    return cls(int(time.time()) if seed is None else seed)
