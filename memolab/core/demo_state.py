"""Demo State — per-session, in-memory bookkeeping for the memoization demos.

Invariants:
    - One RenderCounter per session; every memo cell reports recomputes into it
    - The catalog is generated once at construction and never mutated
    - reset() clears counts, cells and history but keeps the catalog and random source
    - Renders run in worker threads; lock serializes renders of one session

Design Decisions:
    - In-memory, not persisted (demo state is lost on restart)
    - Plain dataclass; demo renders in core/demos.py mutate it, routes only look it up
"""

import random
import threading
from dataclasses import dataclass, field

from memolab.core.catalog import CatalogItem, generate_catalog
from memolab.core.memo import MemoCell
from memolab.core.render_counter import RenderCounter


@dataclass
class DemoState:
    """Everything one demo session remembers between renders."""

    counter: RenderCounter = field(default_factory=RenderCounter)
    catalog: list[CatalogItem] = field(default_factory=list)
    noise_rng: random.Random = field(default_factory=random.Random)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    # === Expensive calculation ===
    fibonacci_cell: MemoCell = field(init=False)
    noise_cell: MemoCell = field(init=False)

    # === Reference equality ===
    user_cell: MemoCell = field(init=False)
    previous_child_user: dict | None = None
    child_renders: int = 0

    # === Performance comparison ===
    performance_cell: MemoCell = field(init=False)
    measurement_history: list[dict] = field(default_factory=list)

    # === Catalog ===
    catalog_cell: MemoCell = field(init=False)
    statistics_cell: MemoCell = field(init=False)
    categories_cell: MemoCell = field(init=False)

    # === Common mistakes ===
    missing_dependency_cell: MemoCell = field(init=False)
    complete_dependency_cell: MemoCell = field(init=False)
    object_dependency_cell: MemoCell = field(init=False)
    scalar_dependency_cell: MemoCell = field(init=False)

    def __post_init__(self) -> None:
        for name in self.cell_names():
            setattr(self, name, MemoCell(name.removesuffix("_cell"), self.counter))

    @staticmethod
    def cell_names() -> list[str]:
        return [
            "fibonacci_cell", "noise_cell", "user_cell", "performance_cell",
            "catalog_cell", "statistics_cell", "categories_cell",
            "missing_dependency_cell", "complete_dependency_cell",
            "object_dependency_cell", "scalar_dependency_cell",
        ]

    def cells(self) -> dict[str, MemoCell]:
        return {name: getattr(self, name) for name in self.cell_names()}

    def reset(self) -> None:
        """Back to a fresh session, keeping the generated catalog."""
        self.counter.reset_all()
        for cell in self.cells().values():
            cell.reset()
        self.previous_child_user = None
        self.child_renders = 0
        self.measurement_history.clear()


def new_demo_state(
    catalog_size: int,
    catalog_seed: int | None = None,
    noise_seed: int | None = None,
) -> DemoState:
    """Build a DemoState with a freshly generated catalog."""
    catalog = generate_catalog(catalog_size, random.Random(catalog_seed))  # nosec B311
    return DemoState(
        catalog=catalog,
        noise_rng=random.Random(noise_seed),  # nosec B311
    )
