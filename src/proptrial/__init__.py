"""proptrial - Randomized property testing with replayable seeds.

Runs a predicate against many randomly generated argument tuples. Each trial
is seeded independently, and the seed of every failing trial is reported so
the exact arguments can be regenerated.

Public API:
    Tester - Runs randomized trials of a predicate
    TesterConfig - Immutable runner configuration
    new_rng - Construct a seeded random source
    RandomSource - Random source interface (get_int, get_float, get_string, ...)
    Outcome - Per-trial classification (pass, fail, skip, error)
    TrialSkipped, TrialFailed - Raised by predicates to classify a trial
    SelfGenerating - Protocol for types that generate their own random values

Exceptions:
    ProptrialError - Base exception class
    ConfigurationError - Invalid patterns, bounds, seeds or options
    GenerationError - Descriptors that cannot be generated

Submodules:
    proptrial.syntax - Random string pattern language
    proptrial.rng - Random source backends
    proptrial.runtime - Trial runner internals
    proptrial.diagnostics - Error codes, diagnostics and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import ConfigurationError, GenerationError, ProptrialError
from .enums import Outcome, RunStatus, Verbosity
from .rng import RandomSource, new_rng
from .runtime import (
    RunResult,
    SelfGenerating,
    Tester,
    TesterConfig,
    TrialFailed,
    TrialPassed,
    TrialRecord,
    TrialSkipped,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("proptrial")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "GenerationError",
    "Outcome",
    "ProptrialError",
    "RandomSource",
    "RunResult",
    "RunStatus",
    "SelfGenerating",
    "Tester",
    "TesterConfig",
    "TrialFailed",
    "TrialPassed",
    "TrialRecord",
    "TrialSkipped",
    "Verbosity",
    "__version__",
    "new_rng",
]
