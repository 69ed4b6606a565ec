"""Common Mistakes — catalogue of memoization pitfalls shown by the mistakes demo."""

from dataclasses import dataclass, asdict

from memolab.core.errors import ResourceNotFoundError


@dataclass(frozen=True)
class Mistake:
    id: str
    title: str
    wrong: str
    right: str
    explanation: str

    def to_dict(self) -> dict:
        return asdict(self)


MISTAKES: tuple[Mistake, ...] = (
    Mistake(
        id="unnecessary_memo",
        title="Memoizing simple calculations",
        wrong="simple_value = cell.get(lambda: count + 1, [count])",
        right="simple_value = count + 1",
        explanation=(
            "Comparing dependencies costs about as much as adding one. "
            "Cache only work that is measurably slow."
        ),
    ),
    Mistake(
        id="missing_dependency",
        title="Missing dependencies",
        wrong="cell.get(lambda: count * 2 + len(text), [count])",
        right="cell.get(lambda: count * 2 + len(text), [count, text])",
        explanation=(
            "Every value the computation reads must be in the dependency list. "
            "Otherwise the cached value goes stale when the missing one changes."
        ),
    ),
    Mistake(
        id="object_dependency",
        title="Fresh objects as dependencies",
        wrong='cell.get(lambda: f"Count is {count}", [{"value": count}])',
        right='cell.get(lambda: f"Count is {count}", [count])',
        explanation=(
            "Containers compare by identity. A dict built inline is new on every "
            "call, so the cell recomputes every time."
        ),
    ),
    Mistake(
        id="over_memoization",
        title="Memoizing constants and trivial comparisons",
        wrong='greeting = cell.get(lambda: "Hello", [])',
        right='greeting = "Hello"',
        explanation="Constants and single comparisons gain nothing from a cache.",
    ),
    Mistake(
        id="memoizing_callbacks",
        title="Caching callbacks as values",
        wrong='handler = cell.get(lambda: (lambda: log("clicked")), [])',
        right="define the handler once at module or object level",
        explanation=(
            "A cached callable still closes over the values it captured at "
            "creation. Build handlers where their inputs live."
        ),
    ),
    Mistake(
        id="recreated_cell",
        title="Creating the cell on every render",
        wrong="MemoCell('value').get(compute, [])",
        right="state.value_cell.get(compute, [])",
        explanation=(
            "A cell that is rebuilt on every render never has a stored value. "
            "It must outlive the renders it caches across."
        ),
    ),
)


def get_mistake(mistake_id: str) -> Mistake:
    for mistake in MISTAKES:
        if mistake.id == mistake_id:
            return mistake
    raise ResourceNotFoundError("Mistake", mistake_id)
