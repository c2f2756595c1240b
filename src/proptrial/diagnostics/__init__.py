"""Diagnostic system for proptrial errors.

Provides structured error diagnostics with codes, pattern spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CharacterRangeError,
    ConfigurationError,
    EmptyCharsetError,
    GenerationError,
    InvalidArgumentError,
    InvalidOptionError,
    MissingCapabilityError,
    PatternError,
    PatternSyntaxError,
    PredicateMissingError,
    ProptrialError,
    UnknownCharacterClassError,
    UnsupportedDescriptorError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CharacterRangeError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyCharsetError",
    "ErrorTemplate",
    "GenerationError",
    "InvalidArgumentError",
    "InvalidOptionError",
    "MissingCapabilityError",
    "OutputFormat",
    "PatternError",
    "PatternSyntaxError",
    "PredicateMissingError",
    "ProptrialError",
    "SourceSpan",
    "UnknownCharacterClassError",
    "UnsupportedDescriptorError",
]
