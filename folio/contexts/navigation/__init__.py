"""
Navigation Context

Route helpers for the site shell: which top-level view a path belongs to and
where posts, categories and tags live.
"""

from folio.contexts.navigation.exceptions import NavigationConfigError
from folio.contexts.navigation.routes import (
    DEFAULT_NAV_ITEMS,
    NavItem,
    NavLink,
    build_navigation,
    category_route,
    is_active_route,
    nav_items_from_config,
    post_route,
    tag_route,
)

__all__ = [
    "NavItem",
    "NavLink",
    "DEFAULT_NAV_ITEMS",
    "is_active_route",
    "build_navigation",
    "nav_items_from_config",
    "post_route",
    "category_route",
    "tag_route",
    "NavigationConfigError",
]
