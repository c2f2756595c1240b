"""Character classes for random string patterns.

A class tag after '%' expands to every code point 0..255 belonging to the
class. Membership follows the C locale: only ASCII code points are letters,
digits, punctuation or whitespace; 128..255 belong to no class (and so to
every complement class).

Tags:
    a letters        c control chars   d digits         g printable, not space
    l lowercase      p punctuation     s whitespace     u uppercase
    w alphanumerics  x hex digits

An upper-case tag is the complement of its lower-case class over 0..255.

Python 3.13+. Zero external dependencies.
"""

import string
from collections.abc import Callable
from functools import cache

from proptrial.constants import CHARCLASS_CODE_POINTS

__all__ = ["CLASS_TAGS", "expand_class", "is_class_tag"]

_WHITESPACE = frozenset(" \t\n\r\x0b\x0c")
_PUNCTUATION = frozenset(string.punctuation)
_HEXDIGITS = frozenset(string.hexdigits)


def _is_control(c: str) -> bool:
    return ord(c) < 0x20 or ord(c) == 0x7F


_PREDICATES: dict[str, Callable[[str], bool]] = {
    "a": lambda c: c.isascii() and c.isalpha(),
    "c": _is_control,
    "d": lambda c: "0" <= c <= "9",
    "g": lambda c: 0x21 <= ord(c) <= 0x7E,
    "l": lambda c: "a" <= c <= "z",
    "p": lambda c: c in _PUNCTUATION,
    "s": lambda c: c in _WHITESPACE,
    "u": lambda c: "A" <= c <= "Z",
    "w": lambda c: c.isascii() and c.isalnum(),
    "x": lambda c: c in _HEXDIGITS,
}

CLASS_TAGS: frozenset[str] = frozenset(_PREDICATES) | frozenset(t.upper() for t in _PREDICATES)


def is_class_tag(tag: str) -> bool:
    """Check whether tag names a character class (either case)."""
    return tag in CLASS_TAGS


@cache
def expand_class(tag: str) -> str:
    """Return every character 0..255 in the class named by tag, in code order.

    Pure function; results are cached per tag.

    Args:
        tag: Single class tag character, e.g. "d" or "D"

    Returns:
        Charset string

    Raises:
        KeyError: If tag is not a class tag

    Example:
        >>> expand_class("d")
        '0123456789'
        >>> len(expand_class("D"))
        246
    """
    predicate = _PREDICATES[tag.lower()]
    negate = tag.isupper()
    return "".join(
        c
        for c in map(chr, range(CHARCLASS_CODE_POINTS))
        if predicate(c) != negate
    )
