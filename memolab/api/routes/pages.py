"""Pages — the routed views from ROUTE_TABLE, served at their own paths.

Invariants:
    - One handler per RouteBinding; the path shapes match ROUTE_TABLE patterns
    - /github's handler runs only after load_github_profile resolved (FastAPI Depends)
    - A loader failure surfaces as NetworkError (502) — the view is never built without data
"""

import logging

from fastapi import APIRouter, Depends

from memolab.config import Settings, get_settings
from memolab.core.pages import about_page, contact_page, github_page, home_page, user_page
from memolab.core.route_table import ROUTE_TABLE
from memolab.infrastructure.github_client import GitHubClient, get_github_client
from memolab.schemas.github import GitHubProfile
from memolab.services.loaders import github_info_loader

logger = logging.getLogger(__name__)
router = APIRouter(tags=["pages"])


async def load_github_profile(
    client: GitHubClient = Depends(get_github_client),
    settings: Settings = Depends(get_settings),
) -> GitHubProfile:
    """Loader dependency for /github."""
    return await github_info_loader(client, settings.github_username)


@router.get("/")
async def home():
    return home_page({})


@router.get("/about")
async def about():
    return about_page({})


@router.get("/contact")
async def contact():
    return contact_page({})


@router.get("/user/{userid}")
async def user(userid: str):
    return user_page({"userid": userid})


@router.get("/github")
async def github(profile: GitHubProfile = Depends(load_github_profile)):
    return github_page({}, profile.model_dump(mode="json"))


@router.get("/api/v1/routes")
async def list_routes():
    """The static route table."""
    return {"routes": [binding.to_dict() for binding in ROUTE_TABLE]}
