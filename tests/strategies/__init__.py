"""Hypothesis strategies for proptrial property-based testing.

Strategies are organized by domain:

- patterns: charset patterns and full random string specs
- rng: seeds and numeric bounds accepted by RandomSource

Usage:
    from tests.strategies import seeds, string_specs
    from tests.strategies.patterns import literal_charsets, class_tags
"""

from .patterns import (
    class_tags,
    length_ranges,
    literal_charsets,
    pattern_by_shape,
    string_specs,
)
from .rng import float_ranges, int_bounds, int_ranges, seeds

__all__ = [
    "class_tags",
    "float_ranges",
    "int_bounds",
    "int_ranges",
    "length_ranges",
    "literal_charsets",
    "pattern_by_shape",
    "seeds",
    "string_specs",
]
