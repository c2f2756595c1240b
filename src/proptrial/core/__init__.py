"""Core utilities shared across the rng and runtime layers.

Exports:
    NumpyImportError: Raised when the NumPy backend is requested but missing
    is_numpy_available: Cached probe for the optional NumPy dependency
    require_numpy: Fail-fast guard for NumPy-only features

Python 3.13+.
"""

from .numpy_compat import NumpyImportError, is_numpy_available, require_numpy

__all__ = ["NumpyImportError", "is_numpy_available", "require_numpy"]
