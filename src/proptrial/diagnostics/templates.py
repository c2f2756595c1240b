"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Pattern errors
    # ------------------------------------------------------------------

    @staticmethod
    def pattern_spec_invalid(spec: str) -> Diagnostic:
        """Random string spec does not match '<low>[,<high>] <pattern>'.

        Args:
            spec: The full spec string

        Returns:
            Diagnostic for PATTERN_SPEC_INVALID
        """
        msg = f"Invalid random string spec: {spec!r}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_SPEC_INVALID,
            message=msg,
            hint="Write '<count> <pattern>' or '<low>,<high> <pattern>', e.g. '10,20 %l'",
            source=spec,
        )

    @staticmethod
    def pattern_length_inverted(spec: str, low: int, high: int) -> Diagnostic:
        """Length range has low greater than high."""
        msg = f"Invalid length range {low},{high} in spec {spec!r}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_LENGTH_INVERTED,
            message=msg,
            hint=f"Write the shorter length first: '{high},{low}'",
            source=spec,
        )

    @staticmethod
    def character_range_invalid(pattern: str, position: int) -> Diagnostic:
        """Character range X-Y is empty or inverted.

        Args:
            pattern: The charset pattern
            position: Offset of the '-' operator

        Returns:
            Diagnostic for CHARACTER_RANGE_INVALID
        """
        fragment = pattern[position - 1 : position + 2]
        msg = f"Invalid character range {fragment!r} in pattern {pattern!r}"
        return Diagnostic(
            code=DiagnosticCode.CHARACTER_RANGE_INVALID,
            message=msg,
            span=SourceSpan.at(position - 1, position + 2),
            hint="Ranges are low-to-high and must add at least one character, e.g. '0-9'",
            source=pattern,
        )

    @staticmethod
    def character_class_unknown(pattern: str, position: int, tag: str) -> Diagnostic:
        """Unrecognized %-class tag."""
        msg = f"Unknown character class '%{tag}' in pattern {pattern!r}"
        return Diagnostic(
            code=DiagnosticCode.CHARACTER_CLASS_UNKNOWN,
            message=msg,
            span=SourceSpan.at(position, position + 2),
            hint="Known classes: %a %c %d %g %l %p %s %u %w %x (upper case negates)",
            source=pattern,
        )

    @staticmethod
    def pattern_escape_dangling(pattern: str, position: int) -> Diagnostic:
        """Pattern ends with a lone '%'."""
        msg = f"Pattern {pattern!r} ends with '%'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_ESCAPE_DANGLING,
            message=msg,
            span=SourceSpan.at(position),
            hint="Use '%%' for a literal percent sign",
            source=pattern,
        )

    @staticmethod
    def charset_empty(pattern: str) -> Diagnostic:
        """Compiled charset has no characters."""
        msg = f"Empty charset for pattern {pattern!r}"
        return Diagnostic(
            code=DiagnosticCode.CHARSET_EMPTY,
            message=msg,
            hint="A pattern must yield at least one character to draw from",
            source=pattern,
        )

    # ------------------------------------------------------------------
    # Random source errors
    # ------------------------------------------------------------------

    @staticmethod
    def bound_invalid(operation: str, bound: object, minimum: str) -> Diagnostic:
        """Single-bound draw with a bound that is too small.

        Args:
            operation: Method name (get_int, get_float)
            bound: The rejected bound
            minimum: Human description of the requirement ("> 1")

        Returns:
            Diagnostic for BOUND_INVALID
        """
        msg = f"For {operation}(n), n must be {minimum}, got {bound!r}"
        return Diagnostic(
            code=DiagnosticCode.BOUND_INVALID,
            message=msg,
            source=repr(bound),
        )

    @staticmethod
    def range_invalid(operation: str, low: object, high: object) -> Diagnostic:
        """Two-bound draw with high <= low."""
        msg = f"Bad range for {operation}({low!r}, {high!r}): high must be greater than low"
        return Diagnostic(
            code=DiagnosticCode.RANGE_INVALID,
            message=msg,
            source=f"{low!r}, {high!r}",
        )

    @staticmethod
    def bound_not_integral(operation: str, value: object) -> Diagnostic:
        """Integer draw with a non-integral or non-numeric bound."""
        msg = f"{operation}() bounds must be integral numbers, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.BOUND_NOT_INTEGRAL,
            message=msg,
            expected_type="int",
            received_type=type(value).__name__,
            source=repr(value),
        )

    @staticmethod
    def seed_invalid(seed: object) -> Diagnostic:
        """Seed is not a non-negative integer."""
        msg = f"Seed must be a non-negative integer, got {seed!r}"
        return Diagnostic(
            code=DiagnosticCode.SEED_INVALID,
            message=msg,
            expected_type="int",
            received_type=type(seed).__name__,
            source=repr(seed),
        )

    @staticmethod
    def backend_unavailable(backend: str, extra: str) -> Diagnostic:
        """Optional random backend requested but not installed."""
        msg = f"{backend} requires an optional dependency"
        return Diagnostic(
            code=DiagnosticCode.BACKEND_UNAVAILABLE,
            message=msg,
            hint=f"Install with: pip install proptrial[{extra}]",
        )

    # ------------------------------------------------------------------
    # Generation errors
    # ------------------------------------------------------------------

    @staticmethod
    def descriptor_unsupported(descriptor: object) -> Diagnostic:
        """Descriptor shape is not number, str, bool, callable or self-generating.

        Args:
            descriptor: The rejected argument descriptor

        Returns:
            Diagnostic for DESCRIPTOR_UNSUPPORTED
        """
        type_name = type(descriptor).__name__
        msg = f"Cannot randomly generate values of type {type_name}."
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_UNSUPPORTED,
            message=msg,
            hint="Pass a number, a pattern string, a bool, or a callable taking the rng",
            expected_type="int | float | str | bool | Callable[[RandomSource], object]",
            received_type=type_name,
        )

    @staticmethod
    def self_generating_class(descriptor: type) -> Diagnostic:
        """A class with custom_generate was passed where an instance belongs."""
        type_name = descriptor.__name__
        msg = f"Cannot generate from the class {type_name}; custom_generate needs an instance."
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_UNSUPPORTED,
            message=msg,
            hint=f"Pass {type_name}() instead of {type_name}",
            expected_type="SelfGenerating",
            received_type="type",
        )

    @staticmethod
    def capability_missing(descriptor: object) -> Diagnostic:
        """Composite descriptor without a custom_generate method."""
        type_name = type(descriptor).__name__
        msg = f"{type_name} has no custom_generate method"
        return Diagnostic(
            code=DiagnosticCode.CAPABILITY_MISSING,
            message=msg,
            hint=f"Define {type_name}.custom_generate(self, rng) or pass a generator function",
            expected_type="SelfGenerating",
            received_type=type_name,
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def predicate_missing(received: object) -> Diagnostic:
        """test() called without a callable predicate."""
        type_name = type(received).__name__
        msg = "First argument (after optional name) must be trial function."
        return Diagnostic(
            code=DiagnosticCode.PREDICATE_MISSING,
            message=msg,
            hint="Call test([name,] predicate, *descriptors)",
            expected_type="Callable[..., object]",
            received_type=type_name,
        )

    @staticmethod
    def option_invalid(option: str, value: object, requirement: str) -> Diagnostic:
        """Tester option fails validation."""
        msg = f"Option '{option}' must be {requirement}, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_INVALID,
            message=msg,
            source=option,
        )

    # ------------------------------------------------------------------
    # Run diagnostics
    # ------------------------------------------------------------------

    @staticmethod
    def skip_budget_exhausted(name: str, skips: int, trial: int, count: int) -> Diagnostic:
        """Run aborted because too many trials were skipped."""
        label = name or "<unnamed>"
        msg = f"Test {label} skipped more than {skips} trials (at trial {trial} of {count})"
        return Diagnostic(
            code=DiagnosticCode.SKIP_BUDGET_EXHAUSTED,
            message=msg,
            hint="Narrow the generators so the precondition holds more often, or raise 'skips'",
            severity="warning",
        )

    @staticmethod
    def predicate_raised(seed: int, payload: str) -> Diagnostic:
        """Predicate raised an unclassified exception."""
        msg = f"Predicate raised on seed {seed}: {payload}"
        return Diagnostic(
            code=DiagnosticCode.PREDICATE_RAISED,
            message=msg,
            seed=seed,
            hint=f"Replay with Tester().replay({seed}, predicate, *descriptors)",
        )
