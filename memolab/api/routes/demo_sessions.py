"""Demo Sessions — lifecycle of in-memory DemoState and its Navigator.

Invariants:
    - DemoState and Navigator are per-session, in-memory (module-level dicts)
    - _demo_states is the single source for demo state; _navigators shares its keys
    - Unknown session ids raise ResourceNotFoundError (404 via the global handler)

Design Decisions:
    - Module-level dicts: single-process uvicorn, state lost on restart
    - get_state_or_404 exported for reuse by memo_demos
"""

import logging
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, Response, status

from memolab.config import Settings, get_settings
from memolab.core.demo_state import DemoState, new_demo_state
from memolab.core.demo_stats import compute_demo_stats
from memolab.core.errors import ErrorContext, ResourceNotFoundError
from memolab.schemas.demos import DemoSessionResponse
from memolab.services.navigation import Navigator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/demos", tags=["demos"])

_demo_states: dict[UUID, DemoState] = {}
_navigators: dict[UUID, Navigator] = {}


def active_session_count() -> int:
    return len(_demo_states)


def get_state_or_404(session_id: UUID) -> DemoState:
    """Get demo state or raise 404. Exported for memo_demos."""
    state = _demo_states.get(session_id)
    if state is None:
        raise ResourceNotFoundError(
            "Demo session", str(session_id),
            ErrorContext(session_id=str(session_id)),
        )
    return state


def get_navigator_or_404(session_id: UUID) -> Navigator:
    get_state_or_404(session_id)
    return _navigators.setdefault(session_id, Navigator())


@router.post(
    "", response_model=DemoSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_demo_session(settings: Settings = Depends(get_settings)):
    """Create a demo session with a freshly generated catalog."""
    session_id = uuid4()
    state = new_demo_state(
        settings.catalog_size, settings.catalog_seed, settings.noise_seed,
    )
    _demo_states[session_id] = state
    _navigators[session_id] = Navigator()
    logger.info(
        f"Demo session created with {len(state.catalog)} catalog items",
        extra={"session_id": str(session_id)},
    )
    return DemoSessionResponse(id=session_id, catalog_size=len(state.catalog))


@router.get("/{session_id}")
async def get_demo_session(session_id: UUID):
    """Session details — render counts and navigation history."""
    state = get_state_or_404(session_id)
    navigator = get_navigator_or_404(session_id)
    return {
        "id": str(session_id),
        "catalog_size": len(state.catalog),
        "render_counts": state.counter.snapshot(),
        "navigation_history": list(navigator.history),
    }


@router.get("/{session_id}/stats")
async def get_demo_stats(session_id: UUID):
    state = get_state_or_404(session_id)
    return compute_demo_stats(state)


@router.post("/{session_id}/reset")
async def reset_demo_session(session_id: UUID):
    """Clear counters, memo cells and history. The catalog is kept."""
    state = get_state_or_404(session_id)
    state.reset()
    return compute_demo_stats(state)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_demo_session(session_id: UUID):
    """Drop the session. Any in-flight navigation is cancelled."""
    get_state_or_404(session_id)
    navigator = _navigators.pop(session_id, None)
    if navigator is not None:
        navigator.cancel_pending(superseded_by="session deletion")
    _demo_states.pop(session_id, None)
    logger.info("Demo session deleted", extra={"session_id": str(session_id)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
