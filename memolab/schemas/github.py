"""GitHub Schemas — validated shape of the /github loader payload.

Invariants:
    - Counters, login and URLs are required; a body missing any of them is rejected whole
    - Free-text profile fields may be null upstream and stay Optional here
    - Unknown upstream fields are ignored
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GitHubProfile(BaseModel):
    """Public profile returned by GET /users/{username}."""
    model_config = ConfigDict(extra="ignore")

    login: str
    avatar_url: str
    html_url: str
    public_repos: int
    followers: int
    following: int
    public_gists: int
    created_at: datetime
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
