"""Random source backends.

NumpyRandomSource:
    Preferred. PCG64 bit generator from numpy.random; reproduces seeds up to
    2**BITS_OF_ACCURACY. Requires `pip install proptrial[numpy]`.

StdlibRandomSource:
    Fallback. A private random.Random (Mersenne Twister) per source, never
    the module-global generator; seeds are bounded by SEED_LIMIT_CAP.

Both satisfy the RandomSource contract; which one is active is decided once
in proptrial.rng, never at call sites.

Python 3.13+.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, ClassVar

from proptrial.constants import NUMPY_SEED_LIMIT, STDLIB_SEED_LIMIT
from proptrial.core.numpy_compat import get_numpy_random

from .base import RandomSource

if TYPE_CHECKING:
    from numpy.random import Generator

__all__ = ["NumpyRandomSource", "StdlibRandomSource"]

# numpy's integers() draws int64; wider spans are assembled from raw bytes.
_INT64_SPAN: int = 2**63


class StdlibRandomSource(RandomSource):
    """Random source backed by a private random.Random instance."""

    __slots__ = ("_random",)

    limit: ClassVar[int] = STDLIB_SEED_LIMIT
    backend_name: ClassVar[str] = "stdlib"

    def __init__(self, seed: int) -> None:
        self._random = random.Random()  # noqa: S311 - test data, not crypto
        super().__init__(seed)

    def _reseed(self, seed: int) -> None:
        self._random.seed(seed)

    def _unit(self) -> float:
        return self._random.random()

    def _between(self, low: int, high: int) -> int:
        return self._random.randrange(low, high)


class NumpyRandomSource(RandomSource):
    """Random source backed by numpy.random.Generator(PCG64(seed)).

    Raises:
        NumpyImportError: At construction, if NumPy is not installed
    """

    __slots__ = ("_generator", "_np_random")

    limit: ClassVar[int] = NUMPY_SEED_LIMIT
    backend_name: ClassVar[str] = "numpy"

    def __init__(self, seed: int) -> None:
        self._np_random = get_numpy_random()
        self._generator: Generator | None = None
        super().__init__(seed)

    def _reseed(self, seed: int) -> None:
        self._generator = self._np_random.Generator(self._np_random.PCG64(seed))

    @property
    def _gen(self) -> Generator:
        generator = self._generator
        assert generator is not None  # noqa: S101 - set by __init__ via set_seed
        return generator

    def _unit(self) -> float:
        return float(self._gen.random())

    def _between(self, low: int, high: int) -> int:
        span = high - low
        if span < _INT64_SPAN:
            return low + int(self._gen.integers(0, span))

        # Rejection sampling over the smallest covering bit width.
        bits = span.bit_length()
        nbytes = (bits + 7) // 8
        excess = nbytes * 8 - bits
        while True:
            candidate = int.from_bytes(self._gen.bytes(nbytes), "little") >> excess
            if candidate < span:
                return low + candidate
