"""Enumerations for proptrial type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so report lines and log records
receive plain strings ("pass", "FAIL") without boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Outcome(StrEnum):
    """Classification of a single trial.

    StrEnum provides automatic string conversion: str(Outcome.PASS) == "pass"
    """

    PASS = "pass"
    """Predicate held for the generated arguments."""

    FAIL = "fail"
    """Predicate returned a falsy value or signalled failure."""

    SKIP = "skip"
    """Predicate declined the generated arguments (precondition not met)."""

    ERROR = "error"
    """Predicate raised an unexpected exception."""


class Verbosity(StrEnum):
    """How much the runner writes per trial.

    StrEnum provides automatic string conversion: str(Verbosity.ERROR_ONLY) == "error_only"
    """

    QUIET = "quiet"
    """Progress dots, failure and error reports."""

    VERBOSE = "verbose"
    """One line per trial, plus failure and error reports."""

    ERROR_ONLY = "error_only"
    """Progress dots and error reports; individual failures are not written."""


class RunStatus(StrEnum):
    """Overall status of one test() run."""

    PASS = "PASS"
    """Every requested trial passed."""

    FAIL = "FAIL"
    """At least one trial did not pass."""

    INCOMPLETE = "INCOMPLETE"
    """The skip budget was exhausted before all trials ran."""


__all__ = [
    "Outcome",
    "RunStatus",
    "Verbosity",
]
