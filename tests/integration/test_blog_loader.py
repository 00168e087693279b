"""Integration tests for loading a posts directory."""

import pytest

from folio.contexts.blog.exceptions import ContentBuildError, MissingRequiredFieldError
from folio.contexts.blog.loader import load_posts


@pytest.mark.integration
def test_load_posts_builds_sealed_collection(content_dir):
    collection = load_posts(content_dir / "posts")

    assert collection.sealed
    assert len(collection) == 3
    # Equal dates fall back to id order
    assert [post.id for post in collection.by_date_descending()] == [
        "couchdb-part-2",
        "reading-list",
        "couchdb-part-1",
    ]
    assert [post.id for post in collection.by_category("Reading")] == ["reading-list"]
    assert collection["couchdb-part-1"].source.endswith("couchdb-part-1.md")


@pytest.mark.integration
def test_strict_load_aborts_with_every_failure(tmp_path, write_content, sample_posts):
    posts = {
        **sample_posts,
        "no-date.md": "---\ntitle: Draft\n---\nBody\n",
        "no-header.md": "Just text\n",
    }
    root = write_content(tmp_path / "content", posts=posts)

    with pytest.raises(ContentBuildError) as exc_info:
        load_posts(root / "posts")

    failed = sorted(path.name for path, _ in exc_info.value.failures)
    assert failed == ["no-date.md", "no-header.md"]
    errors = {path.name: error for path, error in exc_info.value.failures}
    assert isinstance(errors["no-date.md"], MissingRequiredFieldError)


@pytest.mark.integration
def test_lenient_load_skips_faulty_posts(tmp_path, write_content, sample_posts):
    posts = {**sample_posts, "no-date.md": "---\ntitle: Draft\n---\nBody\n"}
    root = write_content(tmp_path / "content", posts=posts)

    collection = load_posts(root / "posts", strict=False)

    assert len(collection) == 3
    assert "no-date" not in collection


@pytest.mark.integration
def test_same_stem_in_subdirectories_is_duplicate(tmp_path, write_content, sample_posts):
    root = write_content(tmp_path / "content")
    (root / "posts" / "archive").mkdir()
    (root / "posts" / "archive" / "reading-list.md").write_text(sample_posts["reading-list.md"], encoding="utf-8")

    with pytest.raises(ContentBuildError, match="Duplicate post id"):
        load_posts(root / "posts")


@pytest.mark.integration
def test_missing_posts_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_posts(tmp_path / "nowhere")


@pytest.mark.integration
def test_undecodable_post_is_a_failure_not_a_crash(tmp_path, write_content, sample_posts):
    root = write_content(tmp_path / "content", posts={"couchdb-part-1.md": sample_posts["couchdb-part-1.md"]})
    (root / "posts" / "binary.md").write_bytes(b"\xff\xfe---\ntitle: x\n")

    collection = load_posts(root / "posts", strict=False)
    assert [post.id for post in collection] == ["couchdb-part-1"]

    with pytest.raises(ContentBuildError) as exc_info:
        load_posts(root / "posts")
    [(path, error)] = exc_info.value.failures
    assert path.name == "binary.md"
    assert isinstance(error, UnicodeDecodeError)
