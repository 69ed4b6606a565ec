"""Memo Cell — one cached value keyed by a dependency list.

Invariants:
    - compute() runs on the first get() and whenever any dependency changed; otherwise
      the stored object itself (same identity) is returned
    - Dependencies are "the same" when they are the same object, or equal immutable
      scalars of the same type (NaN equals NaN); containers compare by identity only
    - A dependency list of different length always counts as changed
    - Every recompute increments counter["<label>:compute"] when a counter is attached

Design Decisions:
    - Identity comparison for containers mirrors the hook this models: a freshly built
      dict/list in the deps list forces a recompute on every call
"""

import math
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Generic, TypeVar

from memolab.core.render_counter import RenderCounter

T = TypeVar("T")

_SCALAR_TYPES = (type(None), bool, int, float, str, bytes, Enum)


def same_dependency(previous: Any, current: Any) -> bool:
    """Compare two dependency values the way the memo cell does."""
    if previous is current:
        return True
    if type(previous) is not type(current):
        return False
    if not isinstance(current, _SCALAR_TYPES):
        return False
    if isinstance(current, float) and math.isnan(previous) and math.isnan(current):
        return True
    return previous == current


def dependencies_changed(previous: Sequence[Any] | None, current: Sequence[Any]) -> bool:
    if previous is None or len(previous) != len(current):
        return True
    return not all(same_dependency(p, c) for p, c in zip(previous, current))


class MemoCell(Generic[T]):
    """Dependency-keyed cache for a single computed value."""

    def __init__(self, label: str, counter: RenderCounter | None = None) -> None:
        self.label = label
        self.counter = counter
        self.hits = 0
        self.misses = 0
        self.last_was_hit = False
        self._deps: tuple[Any, ...] | None = None
        self._value: T | None = None

    def get(self, compute: Callable[[], T], deps: Sequence[Any]) -> T:
        if not dependencies_changed(self._deps, deps):
            self.hits += 1
            self.last_was_hit = True
            return self._value  # type: ignore[return-value]

        value = compute()
        self._value = value
        self._deps = tuple(deps)
        self.misses += 1
        self.last_was_hit = False
        if self.counter is not None:
            self.counter.increment(f"{self.label}:compute")
        return value

    def reset(self) -> None:
        """Forget the cached value and the hit/miss tallies."""
        self.hits = 0
        self.misses = 0
        self.last_was_hit = False
        self._deps = None
        self._value = None

    def stats(self) -> dict:
        return {"hits": self.hits, "misses": self.misses}
