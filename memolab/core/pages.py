"""Page Views — pure builders for the routed pages.

Invariants:
    - Every view has the signature (params, data) -> dict
    - PAGE_VIEWS keys match RouteBinding.view names in ROUTE_TABLE
    - github_page is only called with a fully loaded profile (the loader settles first)
"""

from collections.abc import Callable

from memolab.core.route_table import ROUTE_TABLE

PageView = Callable[[dict[str, str], dict | None], dict]


def home_page(params: dict[str, str], data: dict | None = None) -> dict:
    return {
        "view": "home",
        "title": "Router & memoization playground",
        "navigation": [binding.pattern for binding in ROUTE_TABLE],
    }


def about_page(params: dict[str, str], data: dict | None = None) -> dict:
    return {
        "view": "about",
        "title": "About",
        "body": (
            "Static route with no parameters and no loader. "
            "The view is built as soon as the path matches."
        ),
    }


def contact_page(params: dict[str, str], data: dict | None = None) -> dict:
    return {
        "view": "contact",
        "title": "Contact",
        "body": "Static route. Nothing to load.",
    }


def user_page(params: dict[str, str], data: dict | None = None) -> dict:
    """Dynamic route: the userid segment is extracted from the path."""
    userid = params.get("userid", "")
    return {
        "view": "user",
        "title": "User Profile Page",
        "userid": userid,
        "initial": userid[:1].upper() or "U",
        "route": {
            "pattern": "/user/:userid",
            "current_url": f"/user/{userid}",
            "dynamic": True,
        },
    }


def github_page(params: dict[str, str], data: dict | None = None) -> dict:
    """Profile view over the loader payload."""
    profile = data or {}
    return {
        "view": "github",
        "title": "GitHub Profile Loader Demo",
        "display_name": profile.get("name") or profile.get("login"),
        "profile": profile,
        "stats": {
            "repositories": profile.get("public_repos"),
            "followers": profile.get("followers"),
            "following": profile.get("following"),
            "gists": profile.get("public_gists"),
        },
    }


PAGE_VIEWS: dict[str, PageView] = {
    "home": home_page,
    "about": about_page,
    "contact": contact_page,
    "user": user_page,
    "github": github_page,
}
