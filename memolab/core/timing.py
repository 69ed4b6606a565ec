"""Execution Timer — run a zero-argument computation once and report its duration.

Invariants:
    - fn is called exactly once, synchronously, on the caller's thread
    - elapsed_ms is rounded to 3 decimals (sub-millisecond resolution)
    - Exceptions from fn propagate unchanged; no trace line is emitted for them
"""

import logging
import time
from collections.abc import Callable
from typing import Generic, NamedTuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimedResult(NamedTuple, Generic[T]):
    """Immutable (value, elapsed_ms) pair from one invocation."""
    value: T
    elapsed_ms: float


def measure_execution_time(
    fn: Callable[[], T],
    label: str = "Operation",
    clock: Callable[[], float] = time.perf_counter,
) -> TimedResult[T]:
    """Invoke fn once and pair its result with the wall-clock duration."""
    start = clock()
    value = fn()
    elapsed_ms = round((clock() - start) * 1000, 3)
    logger.info(
        f"{label}: {elapsed_ms:.3f}ms",
        extra={"label": label, "elapsed_ms": elapsed_ms},
    )
    return TimedResult(value, elapsed_ms)
