"""API test fixtures — FastAPI test client with the GitHub upstream scripted.

Invariants:
    - get_github_client overridden with a GitHubClient over httpx.MockTransport
    - In-memory demo sessions cleared after every test
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from memolab.api.routes import demo_sessions
from memolab.infrastructure.github_client import GitHubClient, get_github_client
from memolab.main import app

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
}


@pytest.fixture
def upstream():
    """Scriptable upstream: upstream["respond"] maps a request to an httpx.Response."""
    state = {"respond": lambda request: httpx.Response(200, json=PROFILE), "paths": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["paths"].append(request.url.path)
        return state["respond"](request)

    state["transport"] = httpx.MockTransport(handler)
    return state


@pytest.fixture
async def client(upstream):
    """FastAPI test client with the GitHub client dependency overridden."""
    async def override_get_github_client():
        async with GitHubClient(
            "https://api.test", transport=upstream["transport"],
        ) as github:
            yield github

    app.dependency_overrides[get_github_client] = override_get_github_client

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    demo_sessions._demo_states.clear()
    demo_sessions._navigators.clear()


@pytest.fixture
async def session_id(client):
    response = await client.post("/api/v1/demos")
    assert response.status_code == 201
    return response.json()["id"]
