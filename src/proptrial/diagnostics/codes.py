"""Diagnostic codes and data structures.

Defines error codes, pattern spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (random string spec compilation)
        2000-2999: Random source errors (bounds, seeds, optional backends)
        3000-3999: Generation errors (argument descriptors)
        4000-4999: Configuration errors (tester options, predicate)
        5000-5999: Run diagnostics (skip budget, predicate defects)
    """

    # Pattern errors (1000-1999)
    PATTERN_SPEC_INVALID = 1001
    PATTERN_LENGTH_INVERTED = 1002
    CHARACTER_RANGE_INVALID = 1003
    CHARACTER_CLASS_UNKNOWN = 1004
    PATTERN_ESCAPE_DANGLING = 1005
    CHARSET_EMPTY = 1006

    # Random source errors (2000-2999)
    BOUND_INVALID = 2001
    RANGE_INVALID = 2002
    BOUND_NOT_INTEGRAL = 2003
    SEED_INVALID = 2004
    BACKEND_UNAVAILABLE = 2005

    # Generation errors (3000-3999)
    DESCRIPTOR_UNSUPPORTED = 3001
    CAPABILITY_MISSING = 3002

    # Configuration errors (4000-4999)
    PREDICATE_MISSING = 4001
    OPTION_INVALID = 4002

    # Run diagnostics (5000-5999)
    SKIP_BUDGET_EXHAUSTED = 5001
    PREDICATE_RAISED = 5002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a pattern spec for error reporting.

    Patterns are single-line, so line is always 1 for spans produced by the
    pattern compiler; the field is kept so spans format uniformly.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        for name, minimum in (("start", 0), ("line", 1), ("column", 1)):
            value = getattr(self, name)
            if value < minimum:
                msg = f"SourceSpan.{name} must be >= {minimum}, got {value}"
                raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) precedes start ({self.start})"
            raise ValueError(msg)

    @classmethod
    def at(cls, start: int, end: int | None = None) -> "SourceSpan":
        """Span on the single line of a pattern, column derived from start."""
        return cls(start=start, end=start + 1 if end is None else end, column=start + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for humans reading a failed run and for tooling consuming JSON output.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside a pattern spec (None for non-pattern errors)
        hint: Suggestion for fixing the error
        source: The offending spec, option or descriptor, as text
        expected_type: Expected type or shape (generation errors)
        received_type: Actual type received (generation errors)
        seed: Trial seed the diagnostic relates to (run diagnostics)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    seed: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Render with the default (rust-style) DiagnosticFormatter.

        Example output:
            error[CHARACTER_RANGE_INVALID]: Invalid character range '9-0' in pattern '9-0'
              --> pattern '9-0', column 1
               |
               | 9-0
               | ^^^
              = help: Ranges are low-to-high and must add at least one character, e.g. '0-9'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
