"""
Route helpers for the site shell.

Active-route highlighting is a pure function of the current path and a
candidate route; nothing here reads ambient request state.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence

from folio.contexts.navigation.exceptions import NavigationConfigError
from folio.utils.text_processing import slugify

BLOG_ROUTE = "/blog"


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str
    active: bool


DEFAULT_NAV_ITEMS = (
    NavItem(label="Resume", href="/resume"),
    NavItem(label="Blog", href=BLOG_ROUTE),
)


def _normalize(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"


def is_active_route(current_path: str, candidate_route: str) -> bool:
    """
    Whether candidate_route should be highlighted for current_path.

    True when the path equals the route or lies under it on a '/' segment
    boundary. Query strings, fragments and trailing slashes are ignored.

    Examples:
        >>> is_active_route("/blog/part-1", "/blog")
        True
        >>> is_active_route("/blogroll", "/blog")
        False
        >>> is_active_route("/resume", "/")
        False
    """
    current = _normalize(current_path)
    candidate = _normalize(candidate_route)

    if candidate == "/":
        return current == "/"
    return current == candidate or current.startswith(candidate + "/")


def build_navigation(current_path: str, items: Sequence[NavItem] = DEFAULT_NAV_ITEMS) -> List[NavLink]:
    """Navigation links in order, each flagged active or not for current_path."""
    return [
        NavLink(label=item.label, href=item.href, active=is_active_route(current_path, item.href))
        for item in items
    ]


def nav_items_from_config(entries: Iterable[Dict[str, Any]]) -> List[NavItem]:
    """
    Build NavItems from site config 'nav' entries ({label, href} mappings).

    Raises:
        NavigationConfigError: If 'nav' is not a list, or an entry is not a
            mapping with both label and href
    """
    if not isinstance(entries, (list, tuple)):
        raise NavigationConfigError(entries, "'nav' must be a list")

    items = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise NavigationConfigError(entry, "expected a {label, href} mapping")
        if "label" not in entry or "href" not in entry:
            raise NavigationConfigError(entry, "'label' and 'href' are required")
        items.append(NavItem(label=str(entry["label"]), href=str(entry["href"])))
    return items


def post_route(post) -> str:
    """Detail route for a post."""
    return f"{BLOG_ROUTE}/{post.id}"


def category_route(name: str) -> str:
    return f"{BLOG_ROUTE}/category/{slugify(name)}"


def tag_route(name: str) -> str:
    return f"{BLOG_ROUTE}/tag/{slugify(name)}"
