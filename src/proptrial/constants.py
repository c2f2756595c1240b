"""Shared constants for proptrial.

Centralized defaults and limits used across the rng, syntax and runtime
packages. Placing them here avoids circular imports between those layers.

Constants are grouped by domain:
- Host precision: bits of integer precision of the host float
- Seed limits: per-backend maximum reproducible seed
- Runner defaults: trial count, skip budget, progress interval
- Pattern limits: compiled pattern cache bound, character class range

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Host precision
    "BITS_OF_ACCURACY",
    # Seed limits
    "SEED_LIMIT_CAP",
    "NUMPY_SEED_LIMIT",
    "STDLIB_SEED_LIMIT",
    # Runner defaults
    "DEFAULT_COUNT",
    "DEFAULT_SKIPS",
    "DEFAULT_PROGRESS",
    "ENV_PREFIX",
    # Pattern limits
    "PATTERN_CACHE_SIZE",
    "CHARCLASS_CODE_POINTS",
]


def _determine_accuracy() -> int:
    """Probe how many bits of integer precision the host float carries.

    Returns the exponent just below the first power of two at which adding
    one is no longer representable. IEEE-754 doubles yield 52.
    """
    for i in range(1, 129):
        if 2.0**i == 2.0**i + 1:
            return i - 1
    return 128


# ============================================================================
# HOST PRECISION
# ============================================================================

BITS_OF_ACCURACY: int = _determine_accuracy()

# ============================================================================
# SEED LIMITS
# ============================================================================

# The general-purpose backend cannot faithfully reproduce seeds above 2**30.
SEED_LIMIT_CAP: int = 2**30

NUMPY_SEED_LIMIT: int = 2**BITS_OF_ACCURACY

STDLIB_SEED_LIMIT: int = min(SEED_LIMIT_CAP, 2**BITS_OF_ACCURACY)

# ============================================================================
# RUNNER DEFAULTS
# ============================================================================

DEFAULT_COUNT: int = 100

# Skipped trials tolerated before a run is aborted as incomplete.
DEFAULT_SKIPS: int = 50

# A progress dot is written every DEFAULT_PROGRESS trials in non-verbose mode.
DEFAULT_PROGRESS: int = 10

# Environment overrides: PROPTRIAL_COUNT, PROPTRIAL_SEED, ...
ENV_PREFIX: str = "PROPTRIAL_"

# ============================================================================
# PATTERN LIMITS
# ============================================================================

# Compiled patterns kept per PatternCompiler instance.
PATTERN_CACHE_SIZE: int = 256

# Character classes (%a, %d, ...) expand over code points 0..255.
CHARCLASS_CODE_POINTS: int = 256
