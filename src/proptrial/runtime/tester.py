"""Randomized trial runner.

Tester runs a predicate against freshly generated arguments many times. Each
trial draws its own seed from the random source and reseeds the source with
it before generating arguments, so every failing trial can be replayed from
the seed printed in its report.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Protocol

from proptrial.diagnostics import ErrorTemplate, PredicateMissingError
from proptrial.enums import Outcome, RunStatus, Verbosity
from proptrial.rng import RandomSource, new_rng

from .arbitrary import generate_arguments
from .config import TesterConfig
from .outcome import (
    RunResult,
    TrialCounters,
    TrialRecord,
    classify,
    describe_payload,
)
from .progress import ProgressHook, default_show_progress

__all__ = ["LogSink", "Tester"]

logger = logging.getLogger(__name__)


class LogSink(Protocol):
    """Anything with write(text); the runner ignores the return value."""

    def write(self, text: str, /) -> object:
        ...  # pragma: no cover  # Protocol stub - not executable


class Tester:
    """Runs randomized trials of a predicate.

    Example:
        >>> tester = Tester(count=100, seed=1234)
        >>> result = tester.test("reverse twice", lambda s: s[::-1][::-1] == s, "0,20 %w")
        reverse twice:	100 trials, seed       1234: .......... PASS (+100, -0, s0, e0)
        >>> bool(result)
        True

    Argument descriptors are documented in proptrial.runtime.arbitrary.
    """

    def __init__(
        self,
        config: TesterConfig | None = None,
        *,
        count: int | None = None,
        seed: int | None = None,
        skips: int | None = None,
        verbose: bool | str | Verbosity | None = None,
        progress: int | None = None,
        log: LogSink | None = None,
        show_progress: ProgressHook | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        """Initialize Tester.

        Args:
            config: Base configuration (default: TesterConfig(), wall-clock seed)
            count: Trials per test() call (default: 100)
            seed: Initial seed (default: wall-clock time)
            skips: Skip budget (default: 50)
            verbose: True, False or "error_only" (default: False)
            progress: Progress dot interval (default: 10)
            log: Report sink with write(text) (default: sys.stdout at write time)
            show_progress: Replacement progress hook
            rng: Random source (default: new source of the selected backend)

        Keyword options override the matching fields of config.

        Raises:
            InvalidOptionError: If an option fails validation
        """
        overrides = {
            key: value
            for key, value in (
                ("count", count),
                ("seed", seed),
                ("skips", skips),
                ("verbose", verbose),
                ("progress", progress),
            )
            if value is not None
        }
        base = config if config is not None else TesterConfig()
        self._config: TesterConfig = replace(base, **overrides) if overrides else base
        self._out = log
        self._show_progress: ProgressHook = (
            show_progress if show_progress is not None else default_show_progress
        )
        self.rng: RandomSource = rng if rng is not None else new_rng(self._config.seed)
        self._seed = self._config.seed
        self.set_seed(self._config.seed)

        logger.info(
            "Tester initialized (seed=%d, count=%d, skips=%d, verbose=%s, backend=%s)",
            self._config.seed,
            self._config.count,
            self._config.skips,
            self._config.verbose,
            self.rng.backend_name,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> TesterConfig:
        """Configuration in effect (read-only)."""
        return self._config

    @property
    def seed(self) -> int:
        """Current seed: the initial seed, or the seed of the latest trial."""
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Set the tester's seed and reseed its random source."""
        self.rng.set_seed(seed)
        self._seed = seed

    def report(self, text: str) -> None:
        """Write text to the report sink and flush it when possible."""
        out = self._out if self._out is not None else sys.stdout
        out.write(text)
        flush = getattr(out, "flush", None)
        if callable(flush):
            flush()

    def __repr__(self) -> str:
        config = self._config
        return (
            f"Tester(seed={self._seed}, verbose={config.verbose.value}, "
            f"progress={config.progress}, skips_allowed={config.skips})"
        )

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def test(self, *args: object, name: str | None = None) -> RunResult:
        """Run count trials of a predicate.

        Args:
            *args: ``[name,] predicate, *descriptors``. A leading str is the
                test name; the predicate receives one generated value per
                descriptor, in order.
            name: Test name (alternative to the positional form)

        Returns:
            RunResult; truthy only if every trial passed

        Raises:
            PredicateMissingError: If no callable predicate is given
            GenerationError: If a descriptor cannot be generated
            PatternError: If a string descriptor does not compile
            InvalidArgumentError: If a numeric descriptor spans an empty range
        """
        test_name, predicate, descriptors = self._split_args(args, name)
        padded_name = f"{test_name}:\t" if test_name else ""
        config = self._config
        verbose = config.verbose is Verbosity.VERBOSE

        # Restart from the current seed so the header seed replays this run.
        start_seed = self._seed
        self.set_seed(start_seed)

        self.report(f"{padded_name}{config.count} trials, seed {start_seed:>10}: ")
        if verbose:
            self.report("\n")

        counters = TrialCounters()
        failures: list[TrialRecord] = []
        status: RunStatus | None = None

        for trial in range(1, config.count + 1):
            trial_seed = self.rng.get_int(self.rng.limit)
            self.set_seed(trial_seed)

            record = self._execute(trial, trial_seed, predicate, descriptors)
            # Failure lines carry the counts from before this trial.
            self._report_trial(padded_name, record, counters)
            counters.record(record.outcome)
            if record.outcome in (Outcome.FAIL, Outcome.ERROR):
                failures.append(record)

            if record.outcome is Outcome.SKIP and counters.skipped > config.skips:
                self.report(
                    f"\n{padded_name}Warning -- {config.skips} skips at {trial} of "
                    f"{config.count} trials (+{counters.passed}, -{counters.failed}).\n"
                )
                logger.warning(
                    "%s",
                    ErrorTemplate.skip_budget_exhausted(
                        test_name, config.skips, trial, config.count
                    ).message,
                )
                status = RunStatus.INCOMPLETE
                break

            self._show_progress(self, record, counters)

        if status is None:
            status = RunStatus.PASS if counters.passed == config.count else RunStatus.FAIL

        if verbose:
            self.report(f"total {test_name}")
        self.report(f" {status} ({counters.summary()})\n")
        if verbose:
            self.report("\n")

        logger.info(
            "Test %r finished: %s (%s) after %d of %d trials",
            test_name,
            status,
            counters.summary(),
            counters.total,
            config.count,
        )
        return RunResult(
            name=test_name,
            seed=start_seed,
            status=status,
            counters=counters.snapshot(),
            count=config.count,
            failures=tuple(failures),
        )

    def replay(self, seed: int, *args: object, name: str | None = None) -> TrialRecord:
        """Re-run the single trial that was reported with ``seed``.

        Seeds the random source directly (bypassing the per-trial seed draw),
        generates the same arguments the original trial saw, and reports the
        trial like test() would.

        Args:
            seed: Trial seed from a Failed/ERROR report line
            *args: ``[name,] predicate, *descriptors`` as passed to test()
            name: Test name (alternative to the positional form)

        Returns:
            TrialRecord of the replayed trial (trial index 0)
        """
        test_name, predicate, descriptors = self._split_args(args, name)
        padded_name = f"{test_name}:\t" if test_name else ""

        self.set_seed(seed)
        self.report(f"{padded_name}replay seed {seed}: ")
        record = self._execute(0, seed, predicate, descriptors)

        self._report_trial(padded_name, record, TrialCounters())
        self.report(f" {record.outcome.value.upper()}\n")
        return record

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _split_args(
        args: Sequence[object], name: str | None
    ) -> tuple[str, Callable[..., object], tuple[object, ...]]:
        items = list(args)
        test_name = name or ""
        if items and isinstance(items[0], str):
            positional_name = items.pop(0)
            if name is None:
                test_name = positional_name

        predicate = items.pop(0) if items else None
        if not callable(predicate):
            raise PredicateMissingError(ErrorTemplate.predicate_missing(predicate))
        return test_name, predicate, tuple(items)

    def _execute(
        self,
        trial: int,
        seed: int,
        predicate: Callable[..., object],
        descriptors: tuple[object, ...],
    ) -> TrialRecord:
        args = generate_arguments(self.rng, descriptors)
        verdict = classify(predicate, args)
        logger.debug("Trial %d (seed %d): %s", trial, seed, verdict.outcome)
        return TrialRecord(
            trial=trial,
            seed=seed,
            outcome=verdict.outcome,
            args=args,
            payload=verdict.payload,
        )

    def _report_trial(
        self, padded_name: str, record: TrialRecord, counters: TrialCounters
    ) -> None:
        match record.outcome:
            case Outcome.FAIL:
                if self._config.verbose is Verbosity.ERROR_ONLY:
                    return
                self.report(
                    f"\n{padded_name}Failed -- {record.seed} "
                    f"(+{counters.passed}, -{counters.failed})"
                )
                self._dump_args(record.args)
            case Outcome.ERROR:
                payload = describe_payload(record.payload)
                self.report(f"\nERROR: seed {record.seed}, {payload}")
                logger.warning(
                    "%s", ErrorTemplate.predicate_raised(record.seed, payload).message
                )
                self._dump_args(record.args)
            case _:
                pass

    def _dump_args(self, args: tuple[object, ...]) -> None:
        self.report("\n")
        for index, arg in enumerate(args, start=1):
            self.report(f"    {index} -- {arg!r}\n")
