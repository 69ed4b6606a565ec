"""Service test fixtures — GitHub client over httpx.MockTransport.

Invariants:
    - No test reaches the network; every upstream response is scripted
    - The client is closed after each test
"""

import httpx
import pytest

from memolab.infrastructure.github_client import GitHubClient

PROFILE = {
    "login": "octocat",
    "name": "The Octocat",
    "avatar_url": "https://avatars.example/octocat.png",
    "html_url": "https://github.com/octocat",
    "public_repos": 8,
    "followers": 100,
    "following": 9,
    "public_gists": 8,
    "created_at": "2011-01-25T18:44:36Z",
    "bio": None,
}


@pytest.fixture
def upstream():
    """Scriptable upstream: upstream["respond"] maps a request to an httpx.Response."""
    state = {"respond": lambda request: httpx.Response(200, json=PROFILE), "calls": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        state["calls"] += 1
        return state["respond"](request)

    state["transport"] = httpx.MockTransport(handler)
    return state


@pytest.fixture
async def github_client(upstream):
    async with GitHubClient("https://api.test", transport=upstream["transport"]) as client:
        yield client


@pytest.fixture
def profile_payload():
    return dict(PROFILE)
