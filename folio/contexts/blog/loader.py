"""
Blog content loading.

Walks a posts directory, parses every markdown document, and registers the
results in a sealed PostCollection. This is the collaborator that decides what
to do with parse errors: abort the build (strict) or skip the offending post.
"""

import time
from pathlib import Path
from typing import List, Tuple

from folio.contexts.blog.exceptions import CollectionError, ContentBuildError, ParseError
from folio.contexts.blog.logger import log_load_result, log_load_start, log_post_failed, log_post_loaded
from folio.contexts.blog.metadata_parser import parse_post
from folio.contexts.blog.post_collection import PostCollection

POST_GLOB = "*.md"


def find_post_files(posts_path: Path) -> List[Path]:
    """Markdown files under posts_path, sorted by path."""
    return sorted(path for path in Path(posts_path).rglob(POST_GLOB) if path.is_file())


def load_posts(posts_path: Path, strict: bool = True) -> PostCollection:
    """
    Load all posts under a directory into a sealed collection.

    Each file's stem is its post id. Files that cannot be read or decoded as
    UTF-8 count as failing posts.

    Args:
        posts_path: Directory containing markdown posts
        strict: If True, any failure aborts loading with ContentBuildError
            listing every failing file. If False, failing posts are skipped.

    Returns:
        Sealed PostCollection

    Raises:
        FileNotFoundError: If posts_path does not exist
        ContentBuildError: In strict mode, if any post fails to load
    """
    posts_path = Path(posts_path)
    if not posts_path.is_dir():
        raise FileNotFoundError(f"Posts directory not found: {posts_path}")

    start = time.time()
    files = find_post_files(posts_path)
    log_load_start(posts_path, len(files))

    collection = PostCollection()
    failures: List[Tuple[Path, Exception]] = []

    for path in files:
        try:
            post = parse_post(path.read_text(encoding="utf-8"), source_id=path.stem, source=str(path))
            collection.add(post)
        except (ParseError, CollectionError, UnicodeDecodeError, OSError) as e:
            log_post_failed(path, e, skipped=not strict)
            failures.append((path, e))
            continue
        log_post_loaded(post)

    collection.seal()
    log_load_result(collection, failures, time.time() - start)

    if strict and failures:
        raise ContentBuildError(failures)

    return collection
