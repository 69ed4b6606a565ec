"""Navigator — loader sequencing, abandonment, caller cancellation.

Tests cover:
    - Static and parameterized routes build their view without a loader
    - /github waits for its loader and hands the data to the view
    - A newer navigation abandons an in-flight one (NavigationAbandonedError)
    - Each abandoned navigation reports the navigation that replaced it
    - Cancelling the caller cancels the loader task
    - Loader failures propagate and leave history untouched
"""

import asyncio

import pytest

from memolab.core.errors import NavigationAbandonedError, NetworkError, ResourceNotFoundError
from memolab.core.route_table import RouteBinding
from memolab.services.loaders import build_loaders
from memolab.services.navigation import Navigator


def _blocking_loader(started: asyncio.Event, cancelled: asyncio.Event | None = None):
    async def loader(params):
        started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            if cancelled is not None:
                cancelled.set()
            raise
    return loader


async def test_static_route_needs_no_loader():
    navigator = Navigator()
    result = await navigator.navigate("/about", {})
    assert result.view["view"] == "about"
    assert result.data is None
    assert navigator.history == ["/about"]


async def test_user_route_passes_params_to_view():
    result = await Navigator().navigate("/user/42", {})
    assert result.pattern == "/user/:userid"
    assert result.params == {"userid": "42"}
    assert result.view["userid"] == "42"


async def test_github_route_renders_loaded_profile(github_client):
    navigator = Navigator()
    result = await navigator.navigate("/github", build_loaders(github_client, "octocat"))
    assert result.data["login"] == "octocat"
    assert result.view["display_name"] == "The Octocat"
    assert not navigator.loading


async def test_unknown_path_raises_not_found():
    navigator = Navigator()
    with pytest.raises(ResourceNotFoundError):
        await navigator.navigate("/missing", {})
    assert navigator.history == []


async def test_newer_static_navigation_abandons_loader():
    started, cancelled = asyncio.Event(), asyncio.Event()
    navigator = Navigator()
    loaders = {"github_info": _blocking_loader(started, cancelled)}

    first = asyncio.create_task(navigator.navigate("/github", loaders))
    await started.wait()
    assert navigator.loading

    result = await navigator.navigate("/about", loaders)
    with pytest.raises(NavigationAbandonedError) as exc_info:
        await first

    assert exc_info.value.superseded_by == "/about"
    assert cancelled.is_set()
    assert result.view["view"] == "about"
    assert navigator.history == ["/about"]


async def test_newer_loader_navigation_wins():
    started = asyncio.Event()
    navigator = Navigator()

    first = asyncio.create_task(
        navigator.navigate("/github", {"github_info": _blocking_loader(started)}),
    )
    await started.wait()

    async def fast(params):
        return {"login": "fresh"}

    result = await navigator.navigate("/github", {"github_info": fast})
    with pytest.raises(NavigationAbandonedError):
        await first

    assert result.data == {"login": "fresh"}
    assert navigator.history == ["/github"]


async def test_cancelling_caller_cancels_loader():
    started, cancelled = asyncio.Event(), asyncio.Event()
    navigator = Navigator()
    caller = asyncio.create_task(
        navigator.navigate("/github", {"github_info": _blocking_loader(started, cancelled)}),
    )
    await started.wait()

    caller.cancel()
    with pytest.raises(asyncio.CancelledError):
        await caller

    assert cancelled.is_set()
    assert not navigator.loading
    assert navigator.history == []


async def test_loader_failure_propagates():
    navigator = Navigator()

    async def failing(params):
        raise NetworkError("boom", "https://api.test/users/octocat", status_code=500)

    with pytest.raises(NetworkError):
        await navigator.navigate("/github", {"github_info": failing})
    assert navigator.history == []
    assert not navigator.loading


def test_cancel_pending_without_navigation_is_noop():
    navigator = Navigator()
    navigator.cancel_pending(superseded_by="/about")
    assert not navigator.loading


async def test_each_abandoned_navigation_names_its_own_successor():
    started = asyncio.Event()
    navigator = Navigator(table=(
        RouteBinding("/about", "about"),
        RouteBinding("/slow/:userid", "user", loader="slow"),
    ))
    loaders = {"slow": _blocking_loader(started)}

    first = asyncio.create_task(navigator.navigate("/slow/a", loaders))
    await started.wait()
    # second supersedes first, third supersedes second before first wakes up
    second = asyncio.create_task(navigator.navigate("/slow/b", loaders))
    third = asyncio.create_task(navigator.navigate("/about", loaders))
    result = await third

    with pytest.raises(NavigationAbandonedError) as first_exc:
        await first
    with pytest.raises(NavigationAbandonedError) as second_exc:
        await second

    assert first_exc.value.superseded_by == "/slow/b"
    assert second_exc.value.superseded_by == "/about"
    assert result.view["view"] == "about"
    assert navigator.history == ["/about"]
    assert not navigator.loading
