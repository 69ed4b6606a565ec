"""Compute Utilities — deliberately slow pure functions used as memoization fodder.

Invariants:
    - fibonacci is the exponential recursive definition, never cached internally
    - busy_noise draws from an injected random.Random — seeded input gives reproducible output
    - calculate_statistics never mutates its input
    - Negative sizes and empty statistics inputs raise InvalidArgumentError

Design Decisions:
    - Random source injected, not module-level random: tests and NOISE_SEED pin results
"""

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from memolab.core.domain_types import NOISE_ITERATIONS_PER_UNIT
from memolab.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class NumberStatistics:
    """Summary of a plain number sequence."""
    sum: float
    average: float
    min: float
    max: float
    median: float
    count: int


def fibonacci(n: int) -> int:
    """Classic exponential-time Fibonacci. fib(0)=0, fib(1)=1."""
    if n < 0:
        raise InvalidArgumentError(
            f"fibonacci is undefined for negative n ({n})", "n",
        )
    return _fib(n)


def _fib(n: int) -> int:
    if n <= 1:
        return n
    return _fib(n - 1) + _fib(n - 2)


def busy_noise(
    n: int,
    rng: random.Random | None = None,
    iterations_per_unit: int = NOISE_ITERATIONS_PER_UNIT,
) -> float:
    """Sum n * iterations_per_unit terms of random() * sin(i) * cos(i), rounded to 2 decimals."""
    if n < 0:
        raise InvalidArgumentError(
            f"busy_noise size must be non-negative, got {n}", "n",
        )
    rng = rng or random.Random()  # nosec B311
    total = 0.0
    for i in range(n * iterations_per_unit):
        total += rng.random() * math.sin(i) * math.cos(i)
    return round(total, 2)


def calculate_statistics(numbers: Sequence[float]) -> NumberStatistics:
    """Sum, average, min, max, median and count of a non-empty sequence."""
    if not numbers:
        raise InvalidArgumentError(
            "statistics require at least one number", "numbers",
        )
    ordered = sorted(numbers)
    count = len(ordered)
    middle = count // 2
    if count % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) / 2
    else:
        median = ordered[middle]
    total = sum(ordered)
    return NumberStatistics(
        sum=total,
        average=total / count,
        min=ordered[0],
        max=ordered[-1],
        median=median,
        count=count,
    )
