"""Progress reporting hooks.

A hook is called once per executed trial, after counters are updated. The
default writes one line per trial in verbose mode, otherwise a dot every
``progress`` trials. Pass ``show_progress=`` to Tester to replace it.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from proptrial.enums import Verbosity

if TYPE_CHECKING:
    from .outcome import TrialCounters, TrialRecord
    from .tester import Tester

__all__ = ["ProgressHook", "default_show_progress", "quiet_progress"]


class ProgressHook(Protocol):
    """Protocol for per-trial progress hooks."""

    def __call__(
        self,
        tester: Tester,
        record: TrialRecord,
        counters: TrialCounters,
        /,
    ) -> None:
        ...  # pragma: no cover  # Protocol stub - not executable


def default_show_progress(tester: Tester, record: TrialRecord, counters: TrialCounters) -> None:
    """Show progress according to the tester's verbosity."""
    config = tester.config
    if config.verbose is Verbosity.VERBOSE:
        tester.report(f"{record.outcome.value:<4} {record.seed:<20} ({counters.summary()})\n")
    elif record.trial % config.progress == 0 and config.count > 0:
        tester.report(".")


def quiet_progress(tester: Tester, record: TrialRecord, counters: TrialCounters) -> None:
    """Write nothing per trial."""
