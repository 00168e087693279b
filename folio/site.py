"""
Site build orchestration.

Loads both content sets (resume and posts) for a content directory and writes
the plain-data outputs consumed by the site shell, plus markdown previews.
A build with any content error produces no output.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from folio.contexts.blog import PostCollection, load_posts
from folio.contexts.navigation import NavItem, category_route, nav_items_from_config, post_route, tag_route
from folio.contexts.rendering import render_post, render_post_index, render_resume
from folio.contexts.resume import DocumentTree, build_resume
from folio.utils.config import load_site_config


@dataclass
class SiteContent:
    """
    Everything the site shell needs, built from one content directory.

    Attributes:
        config: Resolved site configuration
        resume: Composed resume document
        posts: Sealed post collection
        nav_items: Top-level navigation entries
    """

    config: Dict[str, Any]
    resume: DocumentTree
    posts: PostCollection
    nav_items: List[NavItem] = field(default_factory=list)


def load_site(content_path: Optional[Path] = None, strict: bool = True) -> SiteContent:
    """
    Load resume and posts for a content directory.

    Args:
        content_path: Content root (defaults to CONTENT_PATH)
        strict: Abort on the first faulty post (True) or skip faulty posts (False)

    Raises:
        FileNotFoundError: If the resume file or posts directory is missing
        InvalidContentStructureError, ComposeError: For resume content faults
        ContentBuildError: For post faults in strict mode
    """
    config = load_site_config(content_path)
    logger.info(f"Building site from {config['content_path']}")

    _, tree = build_resume(config["resume_path"])
    posts = load_posts(config["posts_path"], strict=strict)

    return SiteContent(
        config=config,
        resume=tree,
        posts=posts,
        nav_items=nav_items_from_config(config["nav"]),
    )


def site_index(site: SiteContent) -> Dict[str, Any]:
    """Plain-data listing for the blog views: posts newest first plus taxonomy counts."""
    return {
        "nav": [{"label": item.label, "href": item.href} for item in site.nav_items],
        "posts": [
            {**post.to_dict(include_body=False), "route": post_route(post)}
            for post in site.posts.by_date_descending()
        ],
        "categories": [
            {"name": name, "count": count, "route": category_route(name)}
            for name, count in site.posts.categories().items()
        ],
        "tags": [
            {"name": name, "count": count, "route": tag_route(name)}
            for name, count in site.posts.tags().items()
        ],
    }


def write_site(site: SiteContent, output_path: Path, previews: bool = True) -> List[Path]:
    """
    Write build outputs.

    Layout:
        resume.json            Composed resume tree
        posts.json             Listing data (no bodies)
        posts/<id>.json        One file per post, with body
        preview/*.md           Markdown previews (when previews=True)

    Returns:
        Paths written
    """
    output_path = Path(output_path)
    (output_path / "posts").mkdir(parents=True, exist_ok=True)
    written = []

    def _write(path: Path, text: str) -> None:
        path.write_text(text, encoding="utf-8")
        written.append(path)

    _write(output_path / "resume.json", json.dumps(site.resume.to_dict(), indent=2, ensure_ascii=False))
    _write(output_path / "posts.json", json.dumps(site_index(site), indent=2, ensure_ascii=False))

    for post in site.posts:
        _write(output_path / "posts" / f"{post.id}.json", json.dumps(post.to_dict(), indent=2, ensure_ascii=False))

    if previews:
        preview_path = output_path / "preview"
        (preview_path / "posts").mkdir(parents=True, exist_ok=True)
        _write(preview_path / "resume.md", render_resume(site.resume, site.nav_items))
        blog_index = render_post_index(site.posts.by_date_descending(), nav_items=site.nav_items)
        _write(preview_path / "blog.md", blog_index)
        for post in site.posts:
            _write(preview_path / "posts" / f"{post.id}.md", render_post(post, site.nav_items))

    logger.success(f"Wrote {len(written)} file(s) to {output_path}")
    return written
