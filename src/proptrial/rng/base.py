"""Random source capability interface.

Every backend supplies three primitives (reseed, a unit float, an integer in
a half-open range) and a seed limit. This class builds the public surface on
top of them, so argument validation, float composition and string generation
behave identically whichever backend is active.

Public surface:
    get_bool()            -> random bool
    get_int(bound)        -> int 0 <= x < bound        (bound > 1)
    get_int(low, high)    -> int low <= x < high       (high > low)
    get_float(bound)      -> float 0 <= x < bound      (bound > 0)
    get_float(low, high)  -> float low <= x < high     (high > low)
    get_string(spec)      -> str according to a pattern spec
    get_seed() / seed     -> current seed
    set_seed(s)           -> reseed; later draws depend only on s and draw order
    limit                 -> largest seed the backend reproduces faithfully

Python 3.13+.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar

from proptrial.diagnostics import ErrorTemplate, InvalidArgumentError
from proptrial.syntax.pattern import PatternCompiler

__all__ = ["RandomSource"]


def _integral(operation: str, value: object) -> int:
    """Coerce an integer bound, accepting integral floats such as 5.0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidArgumentError(ErrorTemplate.bound_not_integral(operation, value))
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidArgumentError(ErrorTemplate.bound_not_integral(operation, value))
        return int(value)
    return value


def _real(operation: str, value: object) -> float | int:
    """Validate a float bound: a finite int or float, never bool."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidArgumentError(ErrorTemplate.bound_not_integral(operation, value))
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(ErrorTemplate.bound_invalid(operation, value, "finite"))
    return value


class RandomSource(ABC):
    """Seedable uniform random source.

    Subclasses implement _reseed, _unit and _between and set ``limit``.
    Instances are not reentrant: one test run owns a source for its duration.

    Example:
        >>> rng = StdlibRandomSource(42)
        >>> 0 <= rng.get_int(10) < 10
        True
        >>> other = StdlibRandomSource(42)
        >>> rng.set_seed(7); other.set_seed(7)
        >>> rng.get_string("8 %x") == other.get_string("8 %x")
        True
    """

    __slots__ = ("_patterns", "_seed")

    limit: ClassVar[int]
    backend_name: ClassVar[str]

    def __init__(self, seed: int) -> None:
        self._patterns = PatternCompiler()
        self._seed = 0
        self.set_seed(seed)

    # ------------------------------------------------------------------
    # Backend primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def _reseed(self, seed: int) -> None:
        """Reset the underlying generator so its sequence depends only on seed."""

    @abstractmethod
    def _unit(self) -> float:
        """Return a uniform float in [0, 1)."""

    @abstractmethod
    def _between(self, low: int, high: int) -> int:
        """Return a uniform int in [low, high). Callers guarantee high > low."""

    # ------------------------------------------------------------------
    # Seed management
    # ------------------------------------------------------------------

    @property
    def seed(self) -> int:
        """Current seed (read-only; use set_seed to change)."""
        return self._seed

    def get_seed(self) -> int:
        """Return the current seed."""
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Reseed the source.

        Args:
            seed: Non-negative integer seed

        Raises:
            InvalidArgumentError: If seed is not a non-negative integer
        """
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise InvalidArgumentError(ErrorTemplate.seed_invalid(seed))
        self._seed = seed
        self._reseed(seed)

    # ------------------------------------------------------------------
    # Draws
    # ------------------------------------------------------------------

    def get_bool(self) -> bool:
        """Return a uniformly random bool (same draw as get_int(2) == 1)."""
        return self.get_int(2) == 1

    def get_int(self, low: int | float, high: int | float | None = None) -> int:
        """Return a random int.

        rng.get_int(3)       ->   0 <= x < 3
        rng.get_int(-2, 10)  ->  -2 <= x < 10

        Raises:
            InvalidArgumentError: If the single bound is <= 1, if high <= low,
                or if a bound is not an integral number
        """
        if high is None:
            bound = _integral("get_int", low)
            if bound <= 1:
                raise InvalidArgumentError(ErrorTemplate.bound_invalid("get_int", low, "> 1"))
            return self._between(0, bound)

        int_low = _integral("get_int", low)
        int_high = _integral("get_int", high)
        if int_high <= int_low:
            raise InvalidArgumentError(ErrorTemplate.range_invalid("get_int", low, high))
        return self._between(int_low, int_high)

    def get_float(self, low: int | float, high: int | float | None = None) -> float:
        """Return a random float as an integer draw plus a unit fraction.

        rng.get_float(3, 5)  ->  3.0 <= x < 5.0

        The integer part is drawn over [floor(low), ceil(high)); a sum that
        falls outside [low, high) (non-integral bounds, or rounding at very
        large magnitudes) is redrawn, so results always honour the interval.

        Raises:
            InvalidArgumentError: If the single bound is <= 0, if high <= low,
                or if a bound is not a finite number
        """
        if high is None:
            real_low: float | int = 0
            real_high = _real("get_float", low)
            if real_high <= 0:
                raise InvalidArgumentError(ErrorTemplate.bound_invalid("get_float", low, "> 0"))
        else:
            real_low = _real("get_float", low)
            real_high = _real("get_float", high)
            if real_high <= real_low:
                raise InvalidArgumentError(ErrorTemplate.range_invalid("get_float", low, high))

        int_low = math.floor(real_low)
        int_high = math.ceil(real_high)
        while True:
            value = self._between(int_low, int_high) + self._unit()
            if real_low <= value < real_high:
                return value

    def get_string(self, spec: str) -> str:
        """Return a random string according to spec.

        Use with e.g. "20 listoftwentycharstogenerate" or "10,20 %l".

        Raises:
            PatternError: If spec does not compile
        """
        return self._patterns.compile(spec).generate(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"
