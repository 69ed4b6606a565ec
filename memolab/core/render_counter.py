"""Render Counter — label → invocation count, owned by whoever needs the counts.

Invariants:
    - Counts only grow via increment(); reset() sets one label to 0, reset_all() clears every label
    - Unknown labels read as 0
    - Not thread-safe — single event-loop access only

Design Decisions:
    - Explicit object per DemoState, not a module-level singleton (ADR: no cross-test leakage)
"""


class RenderCounter:
    """Per-owner invocation counter."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def increment(self, label: str) -> int:
        count = self._counts.get(label, 0) + 1
        self._counts[label] = count
        return count

    def get(self, label: str) -> int:
        return self._counts.get(label, 0)

    def reset(self, label: str) -> None:
        self._counts[label] = 0

    def reset_all(self) -> None:
        self._counts.clear()

    def snapshot(self) -> dict[str, int]:
        """Copy of the current counts, safe to serialize."""
        return dict(self._counts)
