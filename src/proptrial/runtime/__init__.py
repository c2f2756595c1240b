"""Trial runner: argument generation, classification, reporting.

Exports:
    Tester: Runs randomized trials of a predicate
    TesterConfig: Immutable runner configuration
    RunResult, TrialRecord, TrialCounters: Run bookkeeping
    TrialSkipped, TrialFailed, TrialPassed: Explicit predicate signals
    SelfGenerating: Capability protocol for custom value domains
    generate, generate_arguments: Descriptor dispatch

Python 3.13+.
"""

from .arbitrary import Descriptor, SelfGenerating, generate, generate_arguments, generate_number
from .config import TesterConfig, normalize_verbosity
from .outcome import (
    RunResult,
    TrialCounters,
    TrialFailed,
    TrialPassed,
    TrialRecord,
    TrialSignal,
    TrialSkipped,
    TrialVerdict,
    classify,
    describe_payload,
)
from .progress import ProgressHook, default_show_progress, quiet_progress
from .tester import LogSink, Tester

__all__ = [
    "Descriptor",
    "LogSink",
    "ProgressHook",
    "RunResult",
    "SelfGenerating",
    "Tester",
    "TesterConfig",
    "TrialCounters",
    "TrialFailed",
    "TrialPassed",
    "TrialRecord",
    "TrialSignal",
    "TrialSkipped",
    "TrialVerdict",
    "classify",
    "default_show_progress",
    "describe_payload",
    "generate",
    "generate_arguments",
    "generate_number",
    "normalize_verbosity",
    "quiet_progress",
]
