"""Random string pattern compiler.

Compiles specs of the form ``"<low>[,<high>] <pattern>"`` into a length range
and a charset, and builds a reusable character generator over a random source.

Spec grammar:
    spec       := count SPACE pattern
    count      := DIGITS | DIGITS "," DIGITS
    pattern    := (literal | range | class | escape)+

Charset mini-language:
    literal    any character adds itself (duplicates are harmless)
    range      "X-Y" adds ord(X)+1 .. ord(Y); X was already added as a literal.
               A leading or trailing "-", or one after a class, is literal.
    class      "%a", "%d", ... expand over 0..255 (see syntax.charclass)
    escape     "%" + non-alphanumeric character is that character ("%%")

Examples:
    "5 abc"     exactly 5 characters from {a, b, c}
    "2,4 a-c"   2 to 4 characters from {a, b, c}
    "10,20 %l"  10 to 20 lowercase ASCII letters
    "8 -%d"     8 characters from "-" and the digits

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from proptrial.constants import PATTERN_CACHE_SIZE
from proptrial.diagnostics import (
    CharacterRangeError,
    EmptyCharsetError,
    ErrorTemplate,
    PatternSyntaxError,
    UnknownCharacterClassError,
)

from .charclass import expand_class, is_class_tag
from .cursor import Cursor

if TYPE_CHECKING:
    from proptrial.rng.base import RandomSource

__all__ = [
    "CharGenerator",
    "CompiledPattern",
    "PatternCompiler",
    "compile_charset",
    "compile_pattern",
    "make_char_generator",
    "parse_spec",
]

logger = logging.getLogger(__name__)

type CharGenerator = Callable[["RandomSource"], str]

_SPEC_RE = re.compile(r"([0-9]+)(?:,([0-9]+))? (.*)", re.DOTALL)


def parse_spec(spec: str) -> tuple[int, int, str]:
    """Split a spec into its length range and charset pattern.

    Args:
        spec: Spec string, e.g. "2,4 a-c"

    Returns:
        (low, high, pattern) with low <= high

    Raises:
        PatternSyntaxError: If the count part is malformed or absent, or the
            length range is inverted
    """
    match = _SPEC_RE.fullmatch(spec)
    if match is None:
        raise PatternSyntaxError(ErrorTemplate.pattern_spec_invalid(spec))

    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) is not None else low
    if low > high:
        raise PatternSyntaxError(ErrorTemplate.pattern_length_inverted(spec, low, high))
    return low, high, match.group(3)


def compile_charset(pattern: str) -> str:
    """Expand a charset pattern into the characters it allows.

    Args:
        pattern: Charset pattern, e.g. "a-z_%d"

    Returns:
        Charset string, in pattern order (may contain duplicates)

    Raises:
        CharacterRangeError: If a range adds no characters ("9-0", "a-a")
        UnknownCharacterClassError: If '%' precedes an unknown class tag
        PatternSyntaxError: If the pattern ends with a lone '%'
        EmptyCharsetError: If the pattern is empty

    Example:
        >>> compile_charset("0-9")
        '0123456789'
        >>> compile_charset("-a-c")
        '-abc'
    """
    if not pattern:
        raise EmptyCharsetError(ErrorTemplate.charset_empty(pattern))

    parts: list[str] = []
    # Last token was a plain character, so a following '-' may open a range.
    range_start: str | None = None
    cursor = Cursor(pattern, 0)

    while not cursor.is_eof:
        char = cursor.current

        if char == "-" and range_start is not None and not cursor.is_last:
            range_end = cursor.advance().current
            low = ord(range_start) + 1
            high = ord(range_end)
            if low > high:
                raise CharacterRangeError(
                    ErrorTemplate.character_range_invalid(pattern, cursor.pos)
                )
            parts.append("".join(map(chr, range(low, high + 1))))
            range_start = range_end
            cursor = cursor.advance(2)
            continue

        if char == "%":
            tag = cursor.peek(1)
            if tag is None:
                raise PatternSyntaxError(
                    ErrorTemplate.pattern_escape_dangling(pattern, cursor.pos)
                )
            if tag.isascii() and tag.isalnum():
                if not is_class_tag(tag):
                    raise UnknownCharacterClassError(
                        ErrorTemplate.character_class_unknown(pattern, cursor.pos, tag)
                    )
                parts.append(expand_class(tag))
                range_start = None
            else:
                parts.append(tag)
                range_start = tag
            cursor = cursor.advance(2)
            continue

        parts.append(char)
        range_start = char
        cursor = cursor.advance()

    charset = "".join(parts)
    if not charset:
        raise EmptyCharsetError(ErrorTemplate.charset_empty(pattern))
    return charset


def make_char_generator(charset: str) -> CharGenerator:
    """Build a closure drawing one uniformly random character from charset.

    A single-character charset needs no draw and never touches the source.
    """
    size = len(charset)
    if size == 1:
        return lambda _rng: charset

    def draw(rng: RandomSource) -> str:
        return charset[rng.get_int(size)]

    return draw


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled random string spec.

    Attributes:
        spec: The spec string this was compiled from
        low: Minimum generated length (inclusive)
        high: Maximum generated length (inclusive)
        charset: Characters eligible for generation
        char_generator: Closure drawing one character from charset
    """

    spec: str
    low: int
    high: int
    charset: str
    char_generator: CharGenerator = field(compare=False, repr=False)

    def generate(self, rng: RandomSource) -> str:
        """Generate one string: a length in [low, high], then that many characters."""
        if self.low == self.high:
            length = self.low
        else:
            length = rng.get_int(self.low, self.high + 1)
        draw = self.char_generator
        return "".join(draw(rng) for _ in range(length))


def compile_pattern(spec: str) -> CompiledPattern:
    """Compile a random string spec.

    Args:
        spec: Spec string, e.g. "10,20 %l"

    Returns:
        CompiledPattern reusable across any number of draws

    Raises:
        PatternError: Any of the pattern errors from parse_spec or compile_charset
    """
    low, high, pattern = parse_spec(spec)
    charset = compile_charset(pattern)
    logger.debug("Compiled pattern %r: length %d..%d, %d chars", spec, low, high, len(charset))
    return CompiledPattern(
        spec=spec,
        low=low,
        high=high,
        charset=charset,
        char_generator=make_char_generator(charset),
    )


class PatternCompiler:
    """Compiles specs and keeps recently used results.

    Each random source owns one compiler, so there is no state shared between
    sources. Cached and uncached compilation produce identical patterns, so
    caching never changes the generated distribution.

    Example:
        >>> compiler = PatternCompiler()
        >>> compiler.compile("5 abc") is compiler.compile("5 abc")
        True
        >>> len(compiler)
        1
    """

    __slots__ = ("_cache", "_maxsize")

    def __init__(self, maxsize: int = PATTERN_CACHE_SIZE) -> None:
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)
        self._maxsize = maxsize
        self._cache: OrderedDict[str, CompiledPattern] = OrderedDict()

    def compile(self, spec: str) -> CompiledPattern:
        """Return the compiled pattern for spec, compiling on first use."""
        compiled = self._cache.get(spec)
        if compiled is not None:
            self._cache.move_to_end(spec)
            return compiled

        compiled = compile_pattern(spec)
        self._cache[spec] = compiled
        if len(self._cache) > self._maxsize:
            self._cache.popitem(last=False)
        return compiled

    def clear(self) -> None:
        """Drop all cached patterns."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, spec: object) -> bool:
        return spec in self._cache
