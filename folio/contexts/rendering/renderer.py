"""
Markdown previews of composed content.

Headings follow the document tree: the intro name is the page title, and each
tree level adds one '#'.
"""

from typing import Optional, Sequence

from folio.contexts.blog.post_data_structure import Post
from folio.contexts.navigation.routes import DEFAULT_NAV_ITEMS, NavItem, build_navigation, post_route
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.resume.composer import DocumentTree

_default_registry: Optional[TemplateRegistry] = None


def _registry(registry: Optional[TemplateRegistry]) -> TemplateRegistry:
    global _default_registry
    if registry is not None:
        return registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def render_resume(
    tree: DocumentTree,
    nav_items: Sequence[NavItem] = DEFAULT_NAV_ITEMS,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """Render a composed resume as markdown."""
    template = _registry(registry).get_template("resume")
    return template.render(
        intro=tree.intro,
        sections=tree.sections,
        nav=build_navigation("/resume", nav_items),
    )


def render_post_index(
    posts: Sequence[Post],
    heading: str = "Blog",
    nav_items: Sequence[NavItem] = DEFAULT_NAV_ITEMS,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render a post listing as markdown.

    Args:
        posts: Posts in display order (e.g. PostCollection.by_date_descending())
        heading: Listing title (e.g. "Blog", "Category: Web Development")
    """
    template = _registry(registry).get_template("post_index")
    entries = [
        {
            "title": post.title,
            "date": post.date.strftime("%Y-%m-%d"),
            "route": post_route(post),
            "categories": sorted(post.categories),
        }
        for post in posts
    ]
    return template.render(heading=heading, entries=entries, nav=build_navigation("/blog", nav_items))


def render_post(
    post: Post,
    nav_items: Sequence[NavItem] = DEFAULT_NAV_ITEMS,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """Render a single post (metadata summary plus body) as markdown."""
    template = _registry(registry).get_template("post")
    return template.render(
        title=post.title,
        date=post.date.strftime("%Y-%m-%d"),
        categories=sorted(post.categories),
        tags=sorted(post.tags),
        image=post.image,
        body=post.body.strip(),
        nav=build_navigation(post_route(post), nav_items),
    )
