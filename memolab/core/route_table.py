"""Route Table — static path-pattern → view (+ optional loader) bindings.

Invariants:
    - Patterns use ":name" segments; names are unique per pattern (InvalidArgumentError otherwise)
    - A parameter segment matches exactly one non-empty path segment, URL-decoded
    - Trailing slashes are ignored except for the root "/"
    - First binding in table order wins; no match raises ResourceNotFoundError
"""

import re
from dataclasses import dataclass, field
from urllib.parse import unquote

from memolab.core.errors import InvalidArgumentError, ResourceNotFoundError

_PARAM_SEGMENT = re.compile(r"^:([A-Za-z_][A-Za-z0-9_]*)$")


@dataclass(frozen=True)
class RouteBinding:
    """One path pattern bound to a view and, optionally, a loader."""
    pattern: str
    view: str
    loader: str | None = None
    param_names: tuple[str, ...] = field(init=False)
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.pattern.startswith("/"):
            raise InvalidArgumentError(
                f"Route pattern must start with '/': {self.pattern!r}", "pattern",
            )
        names: list[str] = []
        parts: list[str] = []
        for segment in _segments(self.pattern):
            match = _PARAM_SEGMENT.match(segment)
            if match:
                name = match.group(1)
                if name in names:
                    raise InvalidArgumentError(
                        f"Duplicate route parameter '{name}' in {self.pattern!r}",
                        "pattern",
                    )
                names.append(name)
                parts.append(f"(?P<{name}>[^/]+)")
            else:
                parts.append(re.escape(segment))
        regex = re.compile("^/" + "/".join(parts) + "$")
        # frozen dataclass: assign derived fields through object.__setattr__
        object.__setattr__(self, "param_names", tuple(names))
        object.__setattr__(self, "_regex", regex)

    def match(self, path: str) -> dict[str, str] | None:
        found = self._regex.match(_normalize(path))
        if found is None:
            return None
        return {name: unquote(value) for name, value in found.groupdict().items()}

    def to_dict(self) -> dict:
        return {
            "pattern": self.pattern,
            "view": self.view,
            "loader": self.loader,
            "params": list(self.param_names),
        }


@dataclass(frozen=True)
class RouteMatch:
    binding: RouteBinding
    params: dict[str, str]


def _segments(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


def _normalize(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0]
    return "/" + "/".join(_segments(path))


ROUTE_TABLE: tuple[RouteBinding, ...] = (
    RouteBinding("/", "home"),
    RouteBinding("/about", "about"),
    RouteBinding("/contact", "contact"),
    RouteBinding("/user/:userid", "user"),
    RouteBinding("/github", "github", loader="github_info"),
)


def match_route(
    path: str, table: tuple[RouteBinding, ...] = ROUTE_TABLE,
) -> RouteMatch:
    """Resolve path against the table, first match wins."""
    for binding in table:
        params = binding.match(path)
        if params is not None:
            return RouteMatch(binding, params)
    raise ResourceNotFoundError("Route", path)
