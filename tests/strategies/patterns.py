"""Hypothesis strategies for random string specs.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - pattern_shape: Charset pattern shape (literal|range|class|mixed)
    - spec_length: Length form of a spec (fixed|ranged)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from proptrial.syntax.charclass import CLASS_TAGS

# Characters with no meaning in the charset mini-language.
_PLAIN_ALPHABET = st.characters(
    codec="utf-8",
    exclude_characters="%-",
    exclude_categories=("Cs",),
)

class_tags = st.sampled_from(sorted(CLASS_TAGS))


@st.composite
def literal_charsets(draw: st.DrawFn) -> str:
    """Patterns made only of plain characters (each one adds itself)."""
    return draw(st.text(alphabet=_PLAIN_ALPHABET, min_size=1, max_size=12))


@st.composite
def _ascending_range(draw: st.DrawFn) -> str:
    low = draw(st.integers(min_value=0x21, max_value=0x7D))
    high = draw(st.integers(min_value=low + 1, max_value=0x7E))
    if chr(low) in "%-" or chr(high) in "%-":
        return "a-z"
    return f"{chr(low)}-{chr(high)}"


@st.composite
def pattern_by_shape(draw: st.DrawFn) -> str:
    """Valid charset patterns across the language's constructs.

    Events emitted:
    - pattern_shape={literal|range|class|mixed}
    """
    shape = draw(st.sampled_from(["literal", "range", "class", "mixed"]))
    event(f"pattern_shape={shape}")
    match shape:
        case "literal":
            return draw(literal_charsets())
        case "range":
            return draw(_ascending_range())
        case "class":
            return "%" + draw(class_tags)
        case _:
            return draw(literal_charsets()) + draw(_ascending_range()) + "%" + draw(class_tags)


@st.composite
def length_ranges(draw: st.DrawFn) -> tuple[int, int]:
    """(low, high) length pairs with low <= high, kept small."""
    low = draw(st.integers(min_value=0, max_value=20))
    high = draw(st.integers(min_value=low, max_value=low + 20))
    return low, high


@st.composite
def string_specs(draw: st.DrawFn) -> tuple[str, int, int]:
    """Full specs with their declared length range.

    Events emitted:
    - spec_length={fixed|ranged}

    Returns:
        (spec, low, high)
    """
    low, high = draw(length_ranges())
    pattern = draw(pattern_by_shape())
    if low == high:
        event("spec_length=fixed")
        return f"{low} {pattern}", low, high
    event("spec_length=ranged")
    return f"{low},{high} {pattern}", low, high
