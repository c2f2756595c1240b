"""proptrial exception hierarchy with structured diagnostics.

All library exceptions accept either a message string or a Diagnostic and
keep the Diagnostic for rich error information.

Configuration errors also derive from ValueError and generation errors from
TypeError, so callers that catch the builtin categories keep working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CharacterRangeError",
    "ConfigurationError",
    "EmptyCharsetError",
    "GenerationError",
    "InvalidArgumentError",
    "InvalidOptionError",
    "MissingCapabilityError",
    "PatternError",
    "PatternSyntaxError",
    "PredicateMissingError",
    "ProptrialError",
    "UnknownCharacterClassError",
    "UnsupportedDescriptorError",
]


class ProptrialError(Exception):
    """Base exception for all proptrial errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ProptrialError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(ProptrialError, ValueError):
    """Misconfigured test: bad pattern, bad bound, bad option, no predicate.

    Raised immediately to the caller of test() or of pattern compilation.
    Never counted as a trial outcome.
    """


class PatternError(ConfigurationError):
    """Random string spec could not be compiled."""


class PatternSyntaxError(PatternError):
    """Spec does not match '<low>[,<high>] <pattern>' or has a dangling '%'."""


class CharacterRangeError(PatternError):
    """Character range X-Y adds no characters (empty or inverted)."""


class UnknownCharacterClassError(PatternError):
    """'%' is followed by a letter or digit that names no character class."""


class EmptyCharsetError(PatternError):
    """Pattern compiles to an empty charset."""


class InvalidArgumentError(ConfigurationError):
    """Random source called with an invalid bound, range, or seed."""


class InvalidOptionError(ConfigurationError):
    """Tester option fails validation."""


class PredicateMissingError(ConfigurationError):
    """test() called without a callable predicate."""


class GenerationError(ProptrialError, TypeError):
    """Argument descriptor cannot be turned into a random value.

    Aborts the current trial before the predicate runs and propagates to the
    caller of test(); a misconfigured descriptor is not a predicate failure.
    """


class UnsupportedDescriptorError(GenerationError):
    """Descriptor has no recognized shape."""


class MissingCapabilityError(UnsupportedDescriptorError):
    """Composite descriptor does not expose custom_generate(rng).

    Example:
        >>> generate(rng, [1, 2, 3])
        Traceback (most recent call last):
        ...
        MissingCapabilityError: list has no custom_generate method
    """
