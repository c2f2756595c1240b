"""Random string pattern syntax.

Parses "<low>[,<high>] <pattern>" specs and the charset mini-language
(literals, X-Y ranges, %-classes) into reusable compiled patterns.

Python 3.13+.
"""

from .charclass import CLASS_TAGS, expand_class
from .cursor import Cursor
from .pattern import (
    CompiledPattern,
    PatternCompiler,
    compile_charset,
    compile_pattern,
    make_char_generator,
    parse_spec,
)

__all__ = [
    "CLASS_TAGS",
    "CompiledPattern",
    "Cursor",
    "PatternCompiler",
    "compile_charset",
    "compile_pattern",
    "expand_class",
    "make_char_generator",
    "parse_spec",
]
