"""
Command-line interface for building and checking site content.

Commands:
    build    - Load all content and write JSON outputs plus markdown previews
    check    - Validate content without writing anything
    posts    - List posts newest first (optionally by category or tag)
    preview  - Print the markdown preview of the resume or a single post
"""

import time
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from typing_extensions import Annotated

from folio.contexts.blog import CollectionError, ContentBuildError, ParseError
from folio.contexts.navigation import NavigationConfigError
from folio.contexts.rendering import render_post, render_resume
from folio.contexts.resume import ComposeError, InvalidContentStructureError
from folio.site import load_site, write_site
from folio.utils.config import CONTENT_PATH, LOGS_PATH, OUTPUT_PATH
from folio.utils.logger import session_log_dir, setup_logger

CONTENT_ERRORS = (
    ParseError,
    CollectionError,
    ContentBuildError,
    ComposeError,
    InvalidContentStructureError,
    NavigationConfigError,
    FileNotFoundError,
)

app = typer.Typer(
    add_completion=False,
    help="Build the resume site and blog from static content",
    invoke_without_command=True,
)

ContentOption = Annotated[
    Path, typer.Option("--content", "-c", help="Content directory (resume.yaml, posts/, site.yaml)")
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_or_exit(content: Path, strict: bool = True):
    try:
        return load_site(content, strict=strict)
    except CONTENT_ERRORS as e:
        logger.error(str(e))
        typer.secho(f"✗ Content error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("build")
def build(
    content: ContentOption = CONTENT_PATH,
    output: Annotated[Path, typer.Option("--output", "-o", help="Output directory")] = OUTPUT_PATH,
    lenient: Annotated[
        bool, typer.Option("--lenient", help="Skip faulty posts instead of failing the build")
    ] = False,
    no_previews: Annotated[bool, typer.Option("--no-previews", help="Skip markdown previews")] = False,
    log_dir: Annotated[Optional[Path], typer.Option("--log-dir", help="Directory for the build log")] = None,
):
    """Load all content and write the site outputs."""
    if log_dir is None:
        log_dir = session_log_dir(LOGS_PATH, "build")
    log_file = setup_logger("build", log_dir, header={"Content": content, "Output": output})

    start = time.time()
    site = _load_or_exit(content, strict=not lenient)
    written = write_site(site, output, previews=not no_previews)

    typer.echo(
        f"✓ Built {len(site.resume.sections)} resume section(s) and {len(site.posts)} post(s) "
        f"into {output} ({len(written)} files, {time.time() - start:.2f}s)"
    )
    typer.echo(f"  Log: {log_file}")


@app.command("check")
def check(content: ContentOption = CONTENT_PATH):
    """Validate resume and post content without writing outputs."""
    site = _load_or_exit(content)
    typer.echo(f"✓ Content OK: {len(site.resume.sections)} section(s), {len(site.posts)} post(s)")


@app.command("posts")
def posts(
    content: ContentOption = CONTENT_PATH,
    category: Annotated[Optional[str], typer.Option("--category", help="Only posts in this category")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only posts with this tag")] = None,
):
    """List posts newest first."""
    site = _load_or_exit(content)
    collection = site.posts

    if category and tag:
        selected = [post for post in collection.by_category(category) if tag in post.tags]
    elif category:
        selected = collection.by_category(category)
    elif tag:
        selected = collection.by_tag(tag)
    else:
        selected = collection.by_date_descending()

    if not selected:
        typer.echo("No posts found.")
        return

    for post in selected:
        typer.echo(f"{post.date.strftime('%Y-%m-%d')}  {post.id:40}  {post.title}")


@app.command("preview")
def preview(
    target: Annotated[str, typer.Argument(help="'resume' or a post id")],
    content: ContentOption = CONTENT_PATH,
):
    """Print the markdown preview of the resume or a post."""
    site = _load_or_exit(content)

    if target == "resume":
        typer.echo(render_resume(site.resume, site.nav_items))
        return

    post = site.posts.get(target)
    if post is None:
        typer.secho(f"Unknown post '{target}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(render_post(post, site.nav_items))


if __name__ == "__main__":
    app()
