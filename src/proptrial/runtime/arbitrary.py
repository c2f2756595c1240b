"""Type-directed generation of arbitrary argument values.

A descriptor declares the random domain of one predicate argument:

    bool            -> rng.get_bool()
    integral n      -> int in [0, n), or [n, -n) when n is negative
    real n          -> float in [0, n), or [n, -n) when n is negative
    str spec        -> rng.get_string(spec), e.g. "10,20 %l"
    SelfGenerating  -> descriptor.custom_generate(rng)
    callable f      -> f(rng)

New domains plug in by implementing custom_generate or by passing a
generator function; the dispatcher itself never changes.

Python 3.13+.
"""

from __future__ import annotations

import inspect
import math
import numbers
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from proptrial.diagnostics import (
    ErrorTemplate,
    MissingCapabilityError,
    UnsupportedDescriptorError,
)

if TYPE_CHECKING:
    from proptrial.rng.base import RandomSource

__all__ = [
    "Descriptor",
    "SelfGenerating",
    "generate",
    "generate_arguments",
    "generate_number",
]


@runtime_checkable
class SelfGenerating(Protocol):
    """Capability for values that generate random instances of their domain.

    Example:
        >>> class Point:
        ...     def custom_generate(self, rng):
        ...         return (rng.get_int(-10, 10), rng.get_int(-10, 10))
        >>> generate(rng, Point())
        (3, -7)
    """

    def custom_generate(self, rng: RandomSource, /) -> object:
        ...  # pragma: no cover  # Protocol stub - not executable


type Descriptor = (
    bool | numbers.Real | str | SelfGenerating | Callable[[RandomSource], object]
)

# Scalars that are neither descriptors nor composites able to carry
# the custom_generate capability.
_SCALAR_TYPES: tuple[type, ...] = (type(None), numbers.Number, bytes, bytearray)


def generate_number(rng: RandomSource, number: numbers.Real) -> int | float:
    """Generate a number shaped like ``number``.

    The sign selects the range: negative n draws from [n, -n), otherwise
    [0, n). Integral descriptors (int, numpy integers) draw an int and
    floats draw a float. Other reals such as Fraction draw an int when their
    value is whole and a float otherwise.

    Raises:
        InvalidArgumentError: If the range is empty (0, or 1 for ints)
    """
    if isinstance(number, numbers.Integral):
        number = int(number)
    elif not isinstance(number, float):
        number = int(number) if math.floor(number) == number else float(number)

    draw = rng.get_float if isinstance(number, float) else rng.get_int
    if number < 0:
        return draw(number, -number)
    return draw(number)


def generate(rng: RandomSource, descriptor: object) -> object:
    """Create an arbitrary value of the domain described by descriptor.

    Args:
        rng: Random source to draw from
        descriptor: Argument descriptor (see module docstring)

    Returns:
        Generated value

    Raises:
        MissingCapabilityError: If descriptor is a composite value without
            custom_generate
        UnsupportedDescriptorError: If descriptor has no recognized shape
        PatternError: If a string descriptor does not compile
        InvalidArgumentError: If a numeric descriptor spans an empty range
    """
    # bool before numbers: bool is an int subclass.
    if isinstance(descriptor, bool):
        return rng.get_bool()
    if isinstance(descriptor, numbers.Real):
        return generate_number(rng, descriptor)
    if isinstance(descriptor, str):
        return rng.get_string(descriptor)
    if isinstance(descriptor, type):
        # The protocol check also matches the class itself; only a
        # classmethod or staticmethod hook runs without an instance.
        if isinstance(descriptor, SelfGenerating):
            hook = inspect.getattr_static(descriptor, "custom_generate")
            if not isinstance(hook, classmethod | staticmethod):
                raise UnsupportedDescriptorError(ErrorTemplate.self_generating_class(descriptor))
            return descriptor.custom_generate(rng)
        return descriptor(rng)
    if isinstance(descriptor, SelfGenerating):
        return descriptor.custom_generate(rng)
    if callable(descriptor):
        return descriptor(rng)
    if isinstance(descriptor, _SCALAR_TYPES):
        raise UnsupportedDescriptorError(ErrorTemplate.descriptor_unsupported(descriptor))
    raise MissingCapabilityError(ErrorTemplate.capability_missing(descriptor))


def generate_arguments(rng: RandomSource, descriptors: Iterable[object]) -> tuple[object, ...]:
    """Generate one value per descriptor, in declaration order."""
    return tuple(generate(rng, descriptor) for descriptor in descriptors)
