"""Rendering of diagnostics for humans and tools.

Three renderings share one DiagnosticFormatter:
    rust    multi-line report with the offending pattern underlined
    simple  CODE: message, one line (log-friendly)
    json    one JSON object per diagnostic

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter", "OutputFormat"]

_ANSI_BY_SEVERITY = {"error": "\033[1;31m", "warning": "\033[1;33m"}
_ANSI_RESET = "\033[0m"

# Optional Diagnostic fields rendered as "  = label: value" detail lines.
_DETAIL_FIELDS: tuple[tuple[str, str], ...] = (
    ("seed", "seed"),
    ("expected_type", "expected"),
    ("received_type", "received"),
)


class OutputFormat(StrEnum):
    """Rendering styles for DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders Diagnostic objects.

    Attributes:
        output_format: Rendering style (default: rust)
        sanitize: Truncate long messages, sources and hints
        color: Color the severity label with ANSI codes
        max_content_length: Truncation length when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.character_range_invalid("a9-0", 2)
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[CHARACTER_RANGE_INVALID]: Invalid character range '9-0' in pattern 'a9-0'
          --> pattern 'a9-0', column 2
           |
           | a9-0
           |  ^^^
          = help: Ranges are low-to-high and must add at least one character, e.g. '0-9'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        label = diagnostic.severity
        if self.color:
            label = f"{_ANSI_BY_SEVERITY[label]}{label}{_ANSI_RESET}"

        lines = [
            f"{label}[{diagnostic.code.name}]: {self._escape_control(diagnostic.message)}"
        ]
        span = diagnostic.span
        if span is not None and diagnostic.source is not None:
            source = self._escape_control(self._maybe_sanitize(diagnostic.source))
            lines.append(f"  --> pattern {source!r}, column {span.column}")
            # Carets only line up when escaping and truncation left the text intact.
            if source == diagnostic.source and span.end <= len(source):
                underline = " " * span.start + "^" * max(1, span.end - span.start)
                lines.extend(("   |", f"   | {source}", f"   | {underline}"))

        for attribute, caption in _DETAIL_FIELDS:
            value = getattr(diagnostic, attribute)
            if value is not None:
                lines.append(f"  = {caption}: {value}")

        if diagnostic.hint:
            lines.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")
        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        message = self._escape_control(self._maybe_sanitize(diagnostic.message))
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": self._maybe_sanitize(diagnostic.message),
        }
        if diagnostic.span is not None:
            span = diagnostic.span
            payload |= {
                "line": span.line,
                "column": span.column,
                "start": span.start,
                "end": span.end,
            }
        for key in ("source", "hint"):
            text = getattr(diagnostic, key)
            if text is not None:
                payload[key] = self._maybe_sanitize(text)
        for attribute, _caption in _DETAIL_FIELDS:
            value = getattr(diagnostic, attribute)
            if value is not None:
                payload[attribute] = value
        return json.dumps(payload, ensure_ascii=False)

    @staticmethod
    def _escape_control(text: str) -> str:
        """Escape control characters so generated values cannot forge report lines."""
        return "".join(
            c if c.isprintable() or c == " " else c.encode("unicode_escape").decode("ascii")
            for c in text
        )

    def _maybe_sanitize(self, text: str) -> str:
        limit = self.max_content_length
        if not self.sanitize or len(text) <= limit:
            return text
        return f"{text[:limit]}..."
