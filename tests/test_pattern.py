"""Tests for the random string pattern compiler.

Covers spec parsing, charset construction (literals, ranges, classes,
escapes), error reporting with spans, generation and the per-source cache.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from proptrial.diagnostics import (
    CharacterRangeError,
    DiagnosticCode,
    EmptyCharsetError,
    PatternError,
    PatternSyntaxError,
    UnknownCharacterClassError,
)
from proptrial.rng import RandomSource, StdlibRandomSource
from proptrial.syntax import (
    CompiledPattern,
    PatternCompiler,
    compile_charset,
    compile_pattern,
    expand_class,
    make_char_generator,
    parse_spec,
)
from tests.strategies import literal_charsets, pattern_by_shape, seeds, string_specs

# ============================================================================
# SPEC PARSING
# ============================================================================


class TestParseSpec:
    """'<low>[,<high>] <pattern>' parsing."""

    def test_fixed_length(self) -> None:
        """A single count is both bounds."""
        assert parse_spec("5 abc") == (5, 5, "abc")

    def test_length_range(self) -> None:
        """'low,high' gives an inclusive range."""
        assert parse_spec("2,4 a-c") == (2, 4, "a-c")

    def test_pattern_keeps_spaces(self) -> None:
        """Everything after the first space is the pattern."""
        assert parse_spec("3 a b") == (3, 3, "a b")

    def test_zero_length(self) -> None:
        """Zero-length specs are valid."""
        assert parse_spec("0 x") == (0, 0, "x")

    @pytest.mark.parametrize(
        "spec",
        ["abc", "5abc", " 5 abc", "x,5 abc", "5, abc", "-1 abc", "5 ", "", "1.5 ab"],
    )
    def test_malformed_spec(self, spec: str) -> None:
        """Malformed count parts and empty patterns are rejected."""
        with pytest.raises(PatternError):
            compile_pattern(spec)

    def test_missing_count_is_syntax_error(self) -> None:
        """A spec without a count is a PatternSyntaxError with a diagnostic."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            parse_spec("abc")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PATTERN_SPEC_INVALID
        assert exc_info.value.diagnostic.source == "abc"

    def test_inverted_length_range(self) -> None:
        """low > high is rejected."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            parse_spec("5,2 abc")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PATTERN_LENGTH_INVERTED


# ============================================================================
# CHARSET CONSTRUCTION
# ============================================================================


class TestCompileCharset:
    """Charset mini-language."""

    def test_literals(self) -> None:
        """Plain characters add themselves in order."""
        assert compile_charset("abc") == "abc"

    def test_digit_range(self) -> None:
        """'0-9' is the ten digits."""
        assert compile_charset("0-9") == "0123456789"

    def test_letter_range(self) -> None:
        """'a-c' is a, b, c."""
        assert compile_charset("a-c") == "abc"

    def test_adjacent_range(self) -> None:
        """'a-b' adds exactly one character after the start."""
        assert compile_charset("a-b") == "ab"

    def test_chained_ranges(self) -> None:
        """A range end can start the next range."""
        assert compile_charset("a-c-e") == "abcde"

    def test_leading_dash_literal(self) -> None:
        """A leading '-' is literal."""
        assert compile_charset("-a-c") == "-abc"

    def test_trailing_dash_literal(self) -> None:
        """A trailing '-' is literal."""
        assert compile_charset("ab-") == "ab-"

    def test_lone_dash(self) -> None:
        """A pattern of only '-' is the dash itself."""
        assert compile_charset("-") == "-"

    def test_dash_after_class_literal(self) -> None:
        """'-' after a class is literal, not a range operator."""
        assert compile_charset("%d-z") == "0123456789-z"

    def test_duplicates_kept(self) -> None:
        """Duplicates are harmless and kept (they weight the draw)."""
        assert compile_charset("aab") == "aab"

    def test_class_expansion(self) -> None:
        """'%d' expands to the digits."""
        assert compile_charset("%d") == "0123456789"

    def test_negated_class(self) -> None:
        """Upper-case tag is the complement over 0..255."""
        charset = compile_charset("%D")
        assert len(charset) == 246
        assert not set(charset) & set("0123456789")

    def test_class_mixed_with_literals(self) -> None:
        """Classes and literals combine."""
        assert compile_charset("_%d") == "_0123456789"

    @pytest.mark.parametrize(("pattern", "expected"), [("%%", "%"), ("%-", "-"), ("%.", ".")])
    def test_escaped_literal(self, pattern: str, expected: str) -> None:
        """'%' plus a non-alphanumeric character is that character."""
        assert compile_charset(pattern) == expected

    def test_escaped_character_starts_range(self) -> None:
        """An escaped character acts like a literal for ranges."""
        assert compile_charset("%!-#") == '!"#'

    def test_non_ascii_literals(self) -> None:
        """Any character is a literal, including non-ASCII."""
        assert compile_charset("éß") == "éß"

    @pytest.mark.parametrize("pattern", ["9-0", "a-a", "z-a"])
    def test_inverted_or_empty_range(self, pattern: str) -> None:
        """Ranges that add nothing are rejected with a span on the range."""
        with pytest.raises(CharacterRangeError) as exc_info:
            compile_charset(pattern)
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.CHARACTER_RANGE_INVALID
        assert diagnostic.span is not None
        assert diagnostic.span.start == 0
        assert diagnostic.span.end == 3

    def test_unknown_class(self) -> None:
        """'%q' names no class."""
        with pytest.raises(UnknownCharacterClassError, match="%q") as exc_info:
            compile_charset("ab%q")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.span is not None
        assert diagnostic.span.column == 3

    def test_unknown_digit_class(self) -> None:
        """Digits are alphanumeric, so '%5' is an unknown class too."""
        with pytest.raises(UnknownCharacterClassError):
            compile_charset("%5")

    def test_dangling_percent(self) -> None:
        """A trailing lone '%' is a syntax error."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            compile_charset("abc%")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PATTERN_ESCAPE_DANGLING

    def test_empty_pattern(self) -> None:
        """An empty pattern has nothing to draw from."""
        with pytest.raises(EmptyCharsetError):
            compile_charset("")

    @given(pattern=literal_charsets())
    def test_literal_patterns_are_identity(self, pattern: str) -> None:
        """Property: a pattern of plain characters compiles to itself."""
        assert compile_charset(pattern) == pattern

    @given(pattern=pattern_by_shape())
    def test_valid_patterns_never_empty(self, pattern: str) -> None:
        """Property: every valid pattern yields a non-empty charset."""
        assert compile_charset(pattern)


# ============================================================================
# GENERATION
# ============================================================================


class TestGeneration:
    """CompiledPattern.generate and RandomSource.get_string."""

    def test_fixed_length(self, rng: RandomSource) -> None:
        """'5 abc' always gives 5 characters from {a, b, c}."""
        for _ in range(50):
            value = rng.get_string("5 abc")
            assert len(value) == 5
            assert set(value) <= set("abc")

    def test_length_range_inclusive(self, rng: RandomSource) -> None:
        """'2,4 a-c' gives lengths 2, 3 and 4."""
        lengths = {len(rng.get_string("2,4 a-c")) for _ in range(200)}
        assert lengths == {2, 3, 4}

    def test_every_character_reachable(self, rng: RandomSource) -> None:
        """All charset members are drawn eventually."""
        seen = set("".join(rng.get_string("20 0-9") for _ in range(20)))
        assert seen == set("0123456789")

    def test_lowercase_class(self, rng: RandomSource) -> None:
        """'10,20 %l' yields lowercase ASCII letters."""
        value = rng.get_string("10,20 %l")
        assert 10 <= len(value) <= 20
        assert set(value) <= set(expand_class("l"))

    def test_zero_length(self, rng: RandomSource) -> None:
        """'0 abc' is always the empty string."""
        assert rng.get_string("0 abc") == ""

    def test_single_character_charset_makes_no_draw(self) -> None:
        """A one-character charset never consumes randomness."""
        rng = StdlibRandomSource(10)
        reference = StdlibRandomSource(10)
        assert rng.get_string("4 x") == "xxxx"
        assert rng.get_int(1000) == reference.get_int(1000)

    def test_fixed_length_makes_no_length_draw(self) -> None:
        """A fixed length draws exactly one value per character."""
        rng = StdlibRandomSource(10)
        reference = StdlibRandomSource(10)
        rng.get_string("3 ab")
        for _ in range(3):
            reference.get_int(2)
        assert rng.get_int(1000) == reference.get_int(1000)

    def test_invalid_spec_raises_from_source(self, rng: RandomSource) -> None:
        """Pattern errors propagate out of get_string."""
        with pytest.raises(CharacterRangeError):
            rng.get_string("5 9-0")

    @given(spec_info=string_specs(), seed=seeds)
    def test_length_law(self, spec_info: tuple[str, int, int], seed: int) -> None:
        """Property: generated length is within [low, high] and chars are in the charset."""
        spec, low, high = spec_info
        compiled = compile_pattern(spec)
        value = compiled.generate(StdlibRandomSource(seed))
        assert low <= len(value) <= high
        assert set(value) <= set(compiled.charset)

    @given(spec_info=string_specs(), seed=seeds)
    def test_generation_is_deterministic(self, spec_info: tuple[str, int, int], seed: int) -> None:
        """Property: equal seeds give equal strings."""
        spec = spec_info[0]
        assert StdlibRandomSource(seed).get_string(spec) == StdlibRandomSource(seed).get_string(
            spec
        )


class TestCompiledPattern:
    """CompiledPattern value object and char generators."""

    def test_compile_pattern_fields(self) -> None:
        """compile_pattern records spec, bounds and charset."""
        compiled = compile_pattern("2,4 a-c")
        assert isinstance(compiled, CompiledPattern)
        assert (compiled.spec, compiled.low, compiled.high, compiled.charset) == (
            "2,4 a-c",
            2,
            4,
            "abc",
        )

    def test_compiled_patterns_compare_by_content(self) -> None:
        """Generator closures do not take part in equality."""
        assert compile_pattern("3 ab") == compile_pattern("3 ab")

    def test_compiled_pattern_is_frozen(self) -> None:
        """CompiledPattern is immutable."""
        compiled = compile_pattern("3 ab")
        with pytest.raises(AttributeError):
            compiled.low = 0  # type: ignore[misc]

    def test_char_generator_draws_from_charset(self) -> None:
        """make_char_generator draws members of its charset."""
        draw = make_char_generator("xyz")
        rng = StdlibRandomSource(3)
        assert {draw(rng) for _ in range(100)} == set("xyz")


# ============================================================================
# COMPILER CACHE
# ============================================================================


class TestPatternCompiler:
    """PatternCompiler LRU cache."""

    def test_same_spec_returns_cached_object(self) -> None:
        """Compiling a spec twice returns the same object."""
        compiler = PatternCompiler()
        assert compiler.compile("5 abc") is compiler.compile("5 abc")
        assert len(compiler) == 1

    def test_eviction_is_least_recently_used(self) -> None:
        """The oldest unused spec is evicted first."""
        compiler = PatternCompiler(maxsize=2)
        compiler.compile("1 a")
        compiler.compile("1 b")
        compiler.compile("1 a")
        compiler.compile("1 c")
        assert "1 a" in compiler
        assert "1 b" not in compiler
        assert "1 c" in compiler

    def test_clear(self) -> None:
        """clear() drops all entries."""
        compiler = PatternCompiler()
        compiler.compile("1 a")
        compiler.clear()
        assert len(compiler) == 0

    def test_failed_compile_not_cached(self) -> None:
        """Errors are raised each time and never cached."""
        compiler = PatternCompiler()
        for _ in range(2):
            with pytest.raises(CharacterRangeError):
                compiler.compile("1 9-0")
        assert len(compiler) == 0

    @pytest.mark.parametrize("maxsize", [0, -1])
    def test_maxsize_must_be_positive(self, maxsize: int) -> None:
        """maxsize <= 0 is rejected."""
        with pytest.raises(ValueError, match="maxsize"):
            PatternCompiler(maxsize=maxsize)
