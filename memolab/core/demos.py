"""Demo Renders — one call = one render of a memoization demo against a DemoState.

Invariants:
    - Every render increments counter[DemoName.value] exactly once
    - Memoized paths go through the session's MemoCells; non-memoized paths recompute
    - Results are JSON-ready dicts (no dataclasses leak out)
    - No IO — timing goes through measure_execution_time, which only logs

Design Decisions:
    - Functions over DemoState rather than methods on it: state is bookkeeping,
      renders are the demo logic
    - with_memo_ms is 0.0 on a cache hit (the cached path did no work this render)
"""

import time

from memolab.core.catalog import filter_sort, list_categories, summary_statistics
from memolab.core.compute import busy_noise, fibonacci
from memolab.core.demo_state import DemoState
from memolab.core.domain_types import DemoName, NOISE_ITERATIONS_PER_UNIT
from memolab.core.mistakes import get_mistake
from memolab.core.timing import TimedResult, measure_execution_time


def _timed_entry(timed: TimedResult, cached: bool) -> dict:
    return {
        "value": timed.value,
        "elapsed_ms": 0.0 if cached else timed.elapsed_ms,
        "cached": cached,
    }


# ─── Expensive calculation ───────────────────────────────────────

def render_expensive_calculation(
    state: DemoState,
    fib_number: int,
    calc_number: int,
    use_memo: bool,
    iterations_per_unit: int = NOISE_ITERATIONS_PER_UNIT,
) -> dict:
    """Fibonacci and busy-noise, cached on their inputs or recomputed every render."""
    render_count = state.counter.increment(DemoName.EXPENSIVE.value)

    def run_fibonacci() -> TimedResult:
        return measure_execution_time(
            lambda: fibonacci(fib_number),
            f"Fibonacci({fib_number}) {'with' if use_memo else 'without'} memo",
        )

    def run_noise() -> TimedResult:
        return measure_execution_time(
            lambda: busy_noise(calc_number, state.noise_rng, iterations_per_unit),
            f"BusyNoise({calc_number}) {'with' if use_memo else 'without'} memo",
        )

    if use_memo:
        fib = state.fibonacci_cell.get(run_fibonacci, [fib_number])
        fib_cached = state.fibonacci_cell.last_was_hit
        noise = state.noise_cell.get(run_noise, [calc_number])
        noise_cached = state.noise_cell.last_was_hit
    else:
        fib, fib_cached = run_fibonacci(), False
        noise, noise_cached = run_noise(), False

    return {
        "demo": DemoName.EXPENSIVE.value,
        "render_count": render_count,
        "use_memo": use_memo,
        "fibonacci": {"n": fib_number, **_timed_entry(fib, fib_cached)},
        "busy_noise": {"n": calc_number, **_timed_entry(noise, noise_cached)},
    }


# ─── Reference equality ──────────────────────────────────────────

def _build_user(user_age: int) -> dict:
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "age": user_age,
        "preferences": {"theme": "dark", "language": "en"},
    }


def render_reference_equality(state: DemoState, user_age: int, use_memo: bool) -> dict:
    """Child re-renders whenever the user object it receives is a different object."""
    parent_renders = state.counter.increment(DemoName.REFERENCE.value)

    if use_memo:
        user = state.user_cell.get(lambda: _build_user(user_age), [user_age])
    else:
        user = _build_user(user_age)

    same_reference = state.previous_child_user is user
    if not same_reference:
        state.child_renders += 1
    state.previous_child_user = user

    return {
        "demo": DemoName.REFERENCE.value,
        "use_memo": use_memo,
        "parent_render_count": parent_renders,
        "child_render_count": state.child_renders,
        "same_reference_as_previous": same_reference,
        "user": user,
    }


# ─── Performance comparison ──────────────────────────────────────

def render_performance_comparison(state: DemoState, fib_number: int) -> dict:
    """Run Fibonacci uncached every render and cached once per distinct input."""
    render_count = state.counter.increment(DemoName.PERFORMANCE.value)

    without = measure_execution_time(
        lambda: fibonacci(fib_number), f"Fibonacci({fib_number}) without memo",
    )

    def run_cached() -> TimedResult:
        timed = measure_execution_time(
            lambda: fibonacci(fib_number), f"Fibonacci({fib_number}) with memo",
        )
        state.measurement_history.append({
            "fib_number": fib_number,
            "with_memo_ms": timed.elapsed_ms,
            "timestamp": time.time(),
        })
        return timed

    cached = state.performance_cell.get(run_cached, [fib_number])
    cache_hit = state.performance_cell.last_was_hit
    with_memo_ms = 0.0 if cache_hit else cached.elapsed_ms

    return {
        "demo": DemoName.PERFORMANCE.value,
        "render_count": render_count,
        "fib_number": fib_number,
        "result": without.value,
        "without_memo_ms": without.elapsed_ms,
        "with_memo_ms": with_memo_ms,
        "savings_ms": round(without.elapsed_ms - with_memo_ms, 3),
        "cached": cache_hit,
        "history": list(state.measurement_history),
    }


# ─── Real-world catalog ──────────────────────────────────────────

def render_catalog(
    state: DemoState,
    search_term: str,
    category: str,
    price_min: int,
    price_max: int,
    sort_key: str,
    use_memo: bool,
    limit: int = 50,
) -> dict:
    """Filter/sort the session catalog, then summarize the filtered slice."""
    render_count = state.counter.increment(DemoName.CATALOG.value)
    label = "Catalog filter " + ("with memo" if use_memo else "without memo")

    def run_filter() -> TimedResult:
        return measure_execution_time(
            lambda: filter_sort(
                state.catalog, search_term, category,
                (price_min, price_max), sort_key,
            ),
            label,
        )

    if use_memo:
        timed = state.catalog_cell.get(
            run_filter,
            [state.catalog, search_term, category, price_min, price_max, sort_key],
        )
        cached = state.catalog_cell.last_was_hit
    else:
        timed, cached = run_filter(), False

    products = timed.value
    statistics = None
    if products:
        # keyed on the list object, so a fresh filter result always recomputes
        statistics = state.statistics_cell.get(
            lambda: summary_statistics(products), [products],
        ).to_dict()
    categories = state.categories_cell.get(
        lambda: list_categories(state.catalog), [state.catalog],
    )

    return {
        "demo": DemoName.CATALOG.value,
        "render_count": render_count,
        "use_memo": use_memo,
        "filter": {"elapsed_ms": 0.0 if cached else timed.elapsed_ms, "cached": cached},
        "total_matches": len(products),
        "products": [item.to_dict() for item in products[:limit]],
        "statistics": statistics,
        "categories": categories,
    }


# ─── Common mistakes ─────────────────────────────────────────────

def render_common_mistakes(
    state: DemoState, count: int, text: str, mistake_id: str,
) -> dict:
    """Show the stale value from a missing dependency and the recompute from an object dependency."""
    mistake = get_mistake(mistake_id)
    render_count = state.counter.increment(DemoName.MISTAKES.value)

    broken = state.missing_dependency_cell.get(
        lambda: count * 2 + len(text), [count],
    )
    fixed = state.complete_dependency_cell.get(
        lambda: count * 2 + len(text), [count, text],
    )
    state.object_dependency_cell.get(
        lambda: f"Count is {count}", [{"value": count}],
    )
    state.scalar_dependency_cell.get(lambda: f"Count is {count}", [count])

    return {
        "demo": DemoName.MISTAKES.value,
        "render_count": render_count,
        "mistake": mistake.to_dict(),
        "missing_dependency": {
            "broken": broken,
            "fixed": fixed,
            "stale": broken != fixed,
        },
        "object_dependency": {
            "object_deps_recomputes": state.object_dependency_cell.misses,
            "scalar_deps_recomputes": state.scalar_dependency_cell.misses,
        },
        "simple_value": count + 1,
    }
