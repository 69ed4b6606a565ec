"""GitHub Client — wraps httpx.AsyncClient with timeout and error mapping.

Invariants:
    - Exactly one GET per fetch_user call — no retries
    - Non-2xx status, transport failures, timeouts and non-JSON bodies all map to NetworkError
    - CancelledError (BaseException) passes through uncaught; the async context closes the client

Design Decisions:
    - transport parameter lets tests inject httpx.MockTransport without patching
"""

import logging
from collections.abc import AsyncIterator

import httpx

from memolab.config import get_settings
from memolab.core.errors import ErrorContext, NetworkError

logger = logging.getLogger(__name__)


class GitHubClient:
    """Minimal async client for the GitHub users endpoint."""

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"Accept": "application/vnd.github+json"},
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_user(
        self, username: str, context: ErrorContext | None = None,
    ) -> dict:
        """GET /users/{username} and return the decoded JSON body."""
        path = f"/users/{username}"
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.get(path)
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"Timed out fetching {url}: {e}", url, context=context,
            )
        except httpx.TransportError as e:
            raise NetworkError(
                f"Transport failure fetching {url}: {e}", url, context=context,
            )

        if not response.is_success:
            logger.warning(
                f"GitHub returned {response.status_code} for {url}",
                extra={"status_code": response.status_code, "path": path},
            )
            raise NetworkError(
                f"Failed to fetch GitHub profile ({response.status_code})",
                url, status_code=response.status_code, context=context,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise NetworkError(
                f"GitHub returned a non-JSON body: {e}",
                url, status_code=response.status_code, context=context,
            )
        logger.info(
            f"Fetched GitHub profile for {username}",
            extra={"status_code": response.status_code, "path": path},
        )
        return body


async def get_github_client() -> AsyncIterator[GitHubClient]:
    """FastAPI dependency — one client per request, closed when the request ends."""
    settings = get_settings()
    async with GitHubClient(
        settings.github_api_base_url, settings.github_timeout_seconds,
    ) as client:
        yield client
