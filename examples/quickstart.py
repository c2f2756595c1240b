"""Quickstart example for proptrial.

This example demonstrates random value generation and randomized trial runs.

Note: Examples use fixed seeds so their output is the same on every run. In
real test suites, leave the seed unset (wall clock) or take it from
PROPTRIAL_SEED so each run explores new inputs.
"""

import io

from proptrial import Outcome, Tester, TrialSkipped, new_rng

# Example 1: Random values
print("=" * 50)
print("Example 1: Random Values")
print("=" * 50)

rng = new_rng(1234)
print(rng.get_int(10))          # 0 <= x < 10
print(rng.get_int(-5, 5))       # -5 <= x < 5
print(rng.get_float(3, 5))      # 3.0 <= x < 5.0
print(rng.get_string("10,20 %l"))  # 10 to 20 lowercase letters
print(rng.get_string("8 %x"))   # 8 hex digits

# Example 2: A passing property
print("\n" + "=" * 50)
print("Example 2: Passing Property")
print("=" * 50)

tester = Tester(count=100, seed=1234)
result = tester.test("reverse twice", lambda s: s[::-1][::-1] == s, "0,20 %w")
print(f"passed: {bool(result)}")

# Example 3: A failing property, replayed from its seed
print("\n" + "=" * 50)
print("Example 3: Failure and Replay")
print("=" * 50)


def sum_is_small(a: int, b: int) -> bool:
    return a + b < 150


tester = Tester(count=20, seed=99)
result = tester.test("small sums", sum_is_small, 100, 100)
if result.failures:
    seed = result.failures[0].seed
    record = tester.replay(seed, "small sums", sum_is_small, 100, 100)
    print(f"replayed seed {seed}: args {record.args}")

# Example 4: Skipping trials whose inputs do not apply
print("\n" + "=" * 50)
print("Example 4: Skips")
print("=" * 50)


def reciprocal_round_trips(x: float) -> object:
    if x == 0:
        raise TrialSkipped("x == 0")
    return abs(1 / (1 / x) - x) < 1e-9 * max(1.0, abs(x))


def even_only(n: int) -> object:
    return Outcome.SKIP if n % 2 else n % 2 == 0


Tester(count=50, seed=7).test("reciprocal", reciprocal_round_trips, -10.0)
report = io.StringIO()
result = Tester(count=50, seed=7, skips=5, log=report).test("evens", even_only, 10)
print(f"evens status: {result.status} after {result.trials_executed} trials")

# Example 5: Custom generators
print("\n" + "=" * 50)
print("Example 5: Custom Generators")
print("=" * 50)


class Point:
    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y

    def custom_generate(self, rng):
        return Point(rng.get_int(-10, 10), rng.get_int(-10, 10))

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


Tester(count=30, seed=5).test(
    "manhattan",
    lambda p, q: abs(p.x - q.x) + abs(p.y - q.y) >= 0,
    Point(),
    lambda r: Point(r.get_int(2), r.get_int(2)),
)
