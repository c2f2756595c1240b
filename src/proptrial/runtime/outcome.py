"""Trial classification and run bookkeeping.

A predicate reports its verdict by returning:
    - an Outcome member (explicit: Outcome.SKIP when a precondition fails)
    - any other value, classified by truthiness (pass / fail)

or by raising:
    - TrialSkipped / TrialFailed / TrialPassed (explicit signals)
    - any exception whose message ends in "pass", "fail" or "skip"
      (compatibility; issues a DeprecationWarning)
    - any other Exception, classified as error

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import ClassVar

from proptrial.deprecation import warn_deprecated
from proptrial.enums import Outcome, RunStatus

__all__ = [
    "RunResult",
    "TrialCounters",
    "TrialFailed",
    "TrialPassed",
    "TrialRecord",
    "TrialSignal",
    "TrialSkipped",
    "TrialVerdict",
    "classify",
    "describe_payload",
]

_SUFFIX_OUTCOMES: dict[str, Outcome] = {
    "pass": Outcome.PASS,
    "fail": Outcome.FAIL,
    "skip": Outcome.SKIP,
}


class TrialSignal(Exception):  # noqa: N818 - signals, not errors
    """Raised by a predicate to classify the current trial explicitly.

    The message always ends with the outcome tag, so code matching on the
    message suffix classifies it identically.

    Attributes:
        reason: Optional free-text reason
    """

    outcome: ClassVar[Outcome]

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        tag = self.outcome.value
        super().__init__(f"{reason}: {tag}" if reason else tag)


class TrialSkipped(TrialSignal):
    """The generated arguments do not meet the predicate's precondition."""

    outcome = Outcome.SKIP


class TrialFailed(TrialSignal):
    """The property does not hold for the generated arguments."""

    outcome = Outcome.FAIL


class TrialPassed(TrialSignal):
    """The property holds; raised to leave a predicate early."""

    outcome = Outcome.PASS


@dataclass(frozen=True, slots=True)
class TrialVerdict:
    """Outcome of one predicate invocation, with the exception if one was raised."""

    outcome: Outcome
    payload: BaseException | None = None


def describe_payload(payload: BaseException | None) -> str:
    """Printable form of an exception payload for reports."""
    if payload is None:
        return "(no exception)"
    text = str(payload)
    name = type(payload).__name__
    return f"{name}: {text}" if text else name


def _suffix_outcome(exc: Exception) -> Outcome | None:
    return _SUFFIX_OUTCOMES.get(str(exc)[-4:])


def classify(predicate: Callable[..., object], args: Sequence[object]) -> TrialVerdict:
    """Invoke predicate with args and classify the result.

    Exceptions that are not Exception subclasses (KeyboardInterrupt,
    SystemExit) propagate.

    Example:
        >>> classify(lambda x: x > 0, (5,)).outcome
        <Outcome.PASS: 'pass'>
        >>> classify(lambda x: 1 // x, (0,)).outcome
        <Outcome.ERROR: 'error'>
    """
    try:
        result = predicate(*args)
    except TrialSignal as signal:
        return TrialVerdict(signal.outcome, signal)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        tagged = _suffix_outcome(exc)
        if tagged is None:
            return TrialVerdict(Outcome.ERROR, exc)
        warn_deprecated(
            "Classifying trials by exception message suffix",
            removal_version="1.0.0",
            alternative="returning an Outcome or raising TrialSkipped/TrialFailed",
            stacklevel=3,
        )
        return TrialVerdict(tagged, exc)

    if isinstance(result, Outcome):
        return TrialVerdict(result)
    # Ambiguous truth values (numpy arrays, pandas objects) raise in __bool__.
    try:
        held = bool(result)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        return TrialVerdict(Outcome.ERROR, exc)
    return TrialVerdict(Outcome.PASS if held else Outcome.FAIL)


@dataclass(slots=True)
class TrialCounters:
    """Per-run outcome counters.

    Counters only ever increase, and always sum to the trials executed.
    """

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errored: int = 0

    def record(self, outcome: Outcome) -> None:
        """Count one trial."""
        match outcome:
            case Outcome.PASS:
                self.passed += 1
            case Outcome.FAIL:
                self.failed += 1
            case Outcome.SKIP:
                self.skipped += 1
            case Outcome.ERROR:
                self.errored += 1

    @property
    def total(self) -> int:
        """Trials counted so far."""
        return self.passed + self.failed + self.skipped + self.errored

    def as_tuple(self) -> tuple[int, int, int, int]:
        """(passed, failed, skipped, errored)."""
        return (self.passed, self.failed, self.skipped, self.errored)

    def snapshot(self) -> TrialCounters:
        """Independent copy of the current counts."""
        return replace(self)

    def summary(self) -> str:
        """Compact form used in report lines: '+p, -f, sN, eN'."""
        return f"+{self.passed}, -{self.failed}, s{self.skipped}, e{self.errored}"


@dataclass(frozen=True, slots=True)
class TrialRecord:
    """One executed trial.

    Attributes:
        trial: 1-based trial index within the run (0 for replays)
        seed: Seed the random source was set to before generating args
        outcome: Classification
        args: Generated argument tuple
        payload: Exception raised by the predicate, if any
    """

    trial: int
    seed: int
    outcome: Outcome
    args: tuple[object, ...]
    payload: BaseException | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class RunResult:
    """Result of one Tester.test() call.

    Truthiness is the success indicator: ``if tester.test(...)`` holds only
    when every requested trial passed.

    Attributes:
        name: Test name ("" when unnamed)
        seed: Seed the run started from (replays the whole run)
        status: PASS, FAIL or INCOMPLETE
        counters: Final counter snapshot
        count: Trials requested
        failures: Records of failed and erroring trials, in order
    """

    name: str
    seed: int
    status: RunStatus
    counters: TrialCounters
    count: int
    failures: tuple[TrialRecord, ...] = ()

    @property
    def trials_executed(self) -> int:
        """Trials actually run (fewer than count when aborted)."""
        return self.counters.total

    @property
    def aborted(self) -> bool:
        """True if the skip budget stopped the run early."""
        return self.status is RunStatus.INCOMPLETE

    @property
    def passed(self) -> bool:
        """True if every requested trial passed."""
        return self.status is RunStatus.PASS

    def __bool__(self) -> bool:
        return self.status is RunStatus.PASS
