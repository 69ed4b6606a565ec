"""Route Loaders — validated GitHub profile or NetworkError, never a partial payload."""

from datetime import datetime

import httpx
import pytest

from memolab.core.errors import NetworkError
from memolab.core.route_table import ROUTE_TABLE
from memolab.schemas.github import GitHubProfile
from memolab.services.loaders import build_loaders, github_info_loader


async def test_github_info_loader_validates_profile(github_client, upstream):
    profile = await github_info_loader(github_client, "octocat")
    assert isinstance(profile, GitHubProfile)
    assert profile.login == "octocat"
    assert isinstance(profile.created_at, datetime)
    assert upstream["calls"] == 1


async def test_unknown_upstream_fields_ignored(github_client, upstream, profile_payload):
    profile_payload["site_admin"] = False
    upstream["respond"] = lambda request: httpx.Response(200, json=profile_payload)
    profile = await github_info_loader(github_client, "octocat")
    assert not hasattr(profile, "site_admin")


async def test_malformed_payload_is_network_error(github_client, upstream, profile_payload):
    del profile_payload["followers"]
    upstream["respond"] = lambda request: httpx.Response(200, json=profile_payload)
    with pytest.raises(NetworkError) as exc_info:
        await github_info_loader(github_client, "octocat")
    assert exc_info.value.status_code == 200
    assert exc_info.value.url == "https://api.test/users/octocat"


async def test_upstream_failure_propagates(github_client, upstream):
    upstream["respond"] = lambda request: httpx.Response(404)
    with pytest.raises(NetworkError) as exc_info:
        await github_info_loader(github_client, "nobody")
    assert exc_info.value.status_code == 404


def test_registry_covers_every_route_loader(github_client):
    loaders = build_loaders(github_client, "octocat")
    assert {b.loader for b in ROUTE_TABLE if b.loader} == set(loaders)


async def test_registry_loader_returns_json_ready_dict(github_client):
    data = await build_loaders(github_client, "octocat")["github_info"]({})
    assert data["login"] == "octocat"
    assert data["created_at"].startswith("2011-01-25T18:44:36")
