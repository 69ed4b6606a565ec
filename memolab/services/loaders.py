"""Route Loaders — async data producers that must settle before their view is built.

Invariants:
    - github_info_loader returns a fully validated GitHubProfile or raises NetworkError
    - A body failing validation is never returned partially — it is a NetworkError
    - build_loaders keys match RouteBinding.loader names in ROUTE_TABLE
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from memolab.core.errors import ErrorContext, NetworkError
from memolab.infrastructure.github_client import GitHubClient
from memolab.schemas.github import GitHubProfile

logger = logging.getLogger(__name__)

Loader = Callable[[dict[str, str]], Awaitable[Any]]


async def github_info_loader(
    client: GitHubClient, username: str, context: ErrorContext | None = None,
) -> GitHubProfile:
    """Single GET of the fixed user's profile."""
    body = await client.fetch_user(username, context=context)
    try:
        return GitHubProfile.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Malformed GitHub profile for {username}: {e.error_count()} errors")
        raise NetworkError(
            f"GitHub profile payload is malformed ({e.error_count()} invalid fields)",
            f"{client.base_url}/users/{username}", status_code=200, context=context,
        )


def build_loaders(client: GitHubClient, username: str) -> dict[str, Loader]:
    """Loader registry bound to one client, keyed by RouteBinding.loader."""

    async def github_info(params: dict[str, str]) -> dict:
        profile = await github_info_loader(client, username)
        return profile.model_dump(mode="json")

    return {"github_info": github_info}
