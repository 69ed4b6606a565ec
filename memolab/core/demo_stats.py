"""Demo Stats — pure summary of a DemoState for the stats endpoint.

Invariants:
    - Never raises — an untouched session reports zeros
    - Returns plain dicts/ints (serializable as JSON)
"""

from memolab.core.demo_state import DemoState
from memolab.core.domain_types import DemoName


def compute_demo_stats(state: DemoState) -> dict:
    """Render counts per demo plus hit/miss tallies per memo cell. Pure, no IO."""
    counts = state.counter.snapshot()
    return {
        "renders": {demo.value: counts.get(demo.value, 0) for demo in DemoName},
        "recomputes": {
            label: count for label, count in counts.items() if label.endswith(":compute")
        },
        "cells": {
            cell.label: cell.stats() for cell in state.cells().values()
        },
        "child_renders": state.child_renders,
        "measurements": len(state.measurement_history),
        "catalog_size": len(state.catalog),
    }
