"""Memo Demos — one POST = one render of a memoization demo, plus session navigation.

Invariants:
    - Each demo endpoint delegates to exactly one core.demos render function
    - fib_number above settings.max_fibonacci_n is rejected before any work starts
    - navigate runs through the session's Navigator, so a newer navigation abandons an older one
    - Renders run in the threadpool under the session lock; the event loop stays free for
      health checks and in-flight loaders
"""

import logging
from collections.abc import Callable
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from memolab.api.routes.demo_sessions import get_navigator_or_404, get_state_or_404
from memolab.config import Settings, get_settings
from memolab.core.demos import (
    render_catalog,
    render_common_mistakes,
    render_expensive_calculation,
    render_performance_comparison,
    render_reference_equality,
)
from memolab.core.demo_state import DemoState
from memolab.core.domain_types import DemoName
from memolab.core.errors import ErrorContext, InvalidArgumentError
from memolab.infrastructure.github_client import GitHubClient, get_github_client
from memolab.schemas.demos import (
    CatalogRender,
    ExpensiveRender,
    MistakesRender,
    NavigateRequest,
    PerformanceRender,
    ReferenceRender,
)
from memolab.services.loaders import build_loaders

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/demos", tags=["demos"])


def _check_fibonacci_bound(
    session_id: UUID, demo: DemoName, fib_number: int, settings: Settings,
) -> None:
    if fib_number > settings.max_fibonacci_n:
        raise InvalidArgumentError(
            f"fib_number {fib_number} exceeds the configured maximum "
            f"({settings.max_fibonacci_n})",
            "fib_number",
            ErrorContext(session_id=str(session_id), demo=demo.value),
        )


async def _render(state: DemoState, render: Callable[..., dict], *args, **kwargs) -> dict:
    """Run a render in the threadpool, one render per session at a time."""

    def locked_render() -> dict:
        with state.lock:
            return render(state, *args, **kwargs)

    return await run_in_threadpool(locked_render)


@router.post("/{session_id}/expensive")
async def expensive_calculation(
    session_id: UUID,
    body: ExpensiveRender,
    settings: Settings = Depends(get_settings),
):
    state = get_state_or_404(session_id)
    _check_fibonacci_bound(session_id, DemoName.EXPENSIVE, body.fib_number, settings)
    return await _render(
        state, render_expensive_calculation,
        body.fib_number, body.calc_number, body.use_memo,
        settings.noise_iterations_per_unit,
    )


@router.post("/{session_id}/reference")
async def reference_equality(session_id: UUID, body: ReferenceRender):
    state = get_state_or_404(session_id)
    return await _render(state, render_reference_equality, body.user_age, body.use_memo)


@router.post("/{session_id}/performance")
async def performance_comparison(
    session_id: UUID,
    body: PerformanceRender,
    settings: Settings = Depends(get_settings),
):
    state = get_state_or_404(session_id)
    _check_fibonacci_bound(session_id, DemoName.PERFORMANCE, body.fib_number, settings)
    return await _render(state, render_performance_comparison, body.fib_number)


@router.post("/{session_id}/catalog")
async def real_world_catalog(session_id: UUID, body: CatalogRender):
    state = get_state_or_404(session_id)
    return await _render(
        state, render_catalog,
        search_term=body.search_term,
        category=body.category,
        price_min=body.price_min,
        price_max=body.price_max,
        sort_key=body.sort_key.value,
        use_memo=body.use_memo,
        limit=body.limit,
    )


@router.post("/{session_id}/mistakes")
async def common_mistakes(session_id: UUID, body: MistakesRender):
    state = get_state_or_404(session_id)
    return await _render(
        state, render_common_mistakes, body.count, body.text, body.mistake_id,
    )


@router.post("/{session_id}/navigate")
async def navigate(
    session_id: UUID,
    body: NavigateRequest,
    client: GitHubClient = Depends(get_github_client),
    settings: Settings = Depends(get_settings),
):
    """Resolve body.path against the route table, run its loader, build its view."""
    navigator = get_navigator_or_404(session_id)
    result = await navigator.navigate(
        body.path, build_loaders(client, settings.github_username),
    )
    return result.to_dict()
