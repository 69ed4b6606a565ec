"""Navigator — resolve a path, run its loader as a cancellable task, build the view.

Invariants:
    - At most one loader in flight per Navigator; starting a navigation cancels the previous one
    - A superseded navigate() raises NavigationAbandonedError and its data is discarded
    - superseded_by names the navigation that cancelled that task, not the latest one
    - If the caller of navigate() is cancelled, the loader task is cancelled with it and
      CancelledError propagates
    - Loader failures propagate unchanged; the view is not built and history is untouched
    - Routes without a loader still supersede an in-flight navigation

Design Decisions:
    - Loader registry passed per call: the navigator outlives any one HTTP client
"""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from memolab.core.errors import NavigationAbandonedError
from memolab.core.pages import PAGE_VIEWS
from memolab.core.route_table import ROUTE_TABLE, RouteBinding, match_route
from memolab.services.loaders import Loader

logger = logging.getLogger(__name__)


@dataclass
class NavigationResult:
    path: str
    pattern: str
    params: dict[str, str]
    data: Any
    view: dict

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "pattern": self.pattern,
            "params": self.params,
            "data": self.data,
            "view": self.view,
        }


@dataclass
class Navigator:
    """Sequences navigations over one route table."""

    table: tuple[RouteBinding, ...] = ROUTE_TABLE
    history: list[str] = field(default_factory=list)
    _in_flight: asyncio.Task | None = field(default=None, repr=False)
    _in_flight_path: str | None = field(default=None, repr=False)
    _superseded_by: dict[asyncio.Task, str] = field(default_factory=dict, repr=False)

    @property
    def loading(self) -> bool:
        return self._in_flight is not None and not self._in_flight.done()

    def cancel_pending(self, superseded_by: str) -> None:
        """Cancel the in-flight loader, if any."""
        if self.loading:
            logger.info(
                f"Abandoning navigation to {self._in_flight_path} for {superseded_by}",
                extra={"path": self._in_flight_path},
            )
            self._in_flight.cancel()
            self._superseded_by[self._in_flight] = superseded_by
        self._in_flight = None
        self._in_flight_path = None

    async def navigate(
        self, path: str, loaders: Mapping[str, Loader],
    ) -> NavigationResult:
        match = match_route(path, self.table)
        binding = match.binding
        self.cancel_pending(superseded_by=path)

        data = None
        if binding.loader is not None:
            loader = loaders[binding.loader]
            task = asyncio.ensure_future(loader(match.params))
            self._in_flight = task
            self._in_flight_path = path
            try:
                data = await task
            except asyncio.CancelledError:
                if task in self._superseded_by:
                    raise NavigationAbandonedError(path, self._superseded_by[task])
                raise
            finally:
                self._superseded_by.pop(task, None)
                if self._in_flight is task:
                    self._in_flight = None
                    self._in_flight_path = None

        view = PAGE_VIEWS[binding.view](match.params, data)
        self.history.append(path)
        return NavigationResult(
            path=path,
            pattern=binding.pattern,
            params=match.params,
            data=data,
            view=view,
        )
