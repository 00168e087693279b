"""Integration tests for the full site build and the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from folio.cli import app
from folio.contexts.blog import ContentBuildError
from folio.site import load_site, site_index, write_site

runner = CliRunner()


@pytest.mark.integration
def test_load_site(content_dir):
    site = load_site(content_dir)

    assert site.resume.intro.name == "Tomasz Kisiel"
    assert len(site.posts) == 3
    assert [item.label for item in site.nav_items] == ["Resume", "Blog"]
    assert site.config["posts_path"] == content_dir / "posts"


@pytest.mark.integration
def test_site_index_is_newest_first(content_dir):
    index = site_index(load_site(content_dir))

    assert [entry["id"] for entry in index["posts"]] == ["couchdb-part-2", "reading-list", "couchdb-part-1"]
    assert index["posts"][0]["route"] == "/blog/couchdb-part-2"
    assert "body" not in index["posts"][0]
    assert [(entry["name"], entry["count"]) for entry in index["categories"]] == [
        ("Reading", 1),
        ("Software Engineering", 1),
        ("Web Development", 2),
    ]
    assert index["categories"][2]["route"] == "/blog/category/web-development"


@pytest.mark.integration
def test_write_site_outputs(content_dir, tmp_path):
    output = tmp_path / "site"
    written = write_site(load_site(content_dir), output)

    assert (output / "resume.json") in written
    resume = json.loads((output / "resume.json").read_text(encoding="utf-8"))
    assert [section["heading"] for section in resume["sections"]] == ["Skills", "Languages", "Experience"]

    post = json.loads((output / "posts" / "couchdb-part-1.json").read_text(encoding="utf-8"))
    assert post["title"] == "Part 1"
    assert post["tags"] == ["CouchDB", "Keycloak"]
    assert post["body"] == "Setting up CouchDB with Keycloak.\n"

    assert (output / "preview" / "resume.md").read_text(encoding="utf-8").count("# Tomasz Kisiel") == 1
    assert (output / "preview" / "posts" / "reading-list.md").exists()


@pytest.mark.integration
def test_write_site_without_previews(content_dir, tmp_path):
    write_site(load_site(content_dir), tmp_path / "site", previews=False)
    assert not (tmp_path / "site" / "preview").exists()


@pytest.mark.integration
def test_faulty_post_fails_strict_site_load(tmp_path, write_content, sample_posts):
    root = write_content(tmp_path / "content", posts={**sample_posts, "bad.md": "---\ntitle: Bad\n---\n"})

    with pytest.raises(ContentBuildError):
        load_site(root)
    assert len(load_site(root, strict=False).posts) == 3


@pytest.mark.integration
def test_cli_check(content_dir):
    result = runner.invoke(app, ["check", "--content", str(content_dir)])

    assert result.exit_code == 0
    assert "Content OK: 3 section(s), 3 post(s)" in result.stdout


@pytest.mark.integration
def test_cli_posts_by_category(content_dir):
    result = runner.invoke(app, ["posts", "--content", str(content_dir), "--category", "Web Development"])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 2
    assert "couchdb-part-2" in lines[0]
    assert "couchdb-part-1" in lines[1]


@pytest.mark.integration
def test_cli_posts_no_match(content_dir):
    result = runner.invoke(app, ["posts", "--content", str(content_dir), "--tag", "Nothing"])
    assert "No posts found." in result.stdout


@pytest.mark.integration
def test_cli_preview(content_dir):
    result = runner.invoke(app, ["preview", "resume", "--content", str(content_dir)])
    assert result.exit_code == 0
    assert "# Tomasz Kisiel" in result.stdout

    result = runner.invoke(app, ["preview", "couchdb-part-1", "--content", str(content_dir)])
    assert result.exit_code == 0
    assert "# Part 1" in result.stdout

    result = runner.invoke(app, ["preview", "missing", "--content", str(content_dir)])
    assert result.exit_code == 1


@pytest.mark.integration
def test_cli_build(content_dir, tmp_path):
    output = tmp_path / "site"
    result = runner.invoke(
        app,
        ["build", "--content", str(content_dir), "--output", str(output), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 0
    assert "Built 3 resume section(s) and 3 post(s)" in result.stdout
    assert (output / "posts.json").exists()
    assert (tmp_path / "logs" / "build.log").exists()


@pytest.mark.integration
def test_cli_build_fails_on_bad_post(tmp_path, write_content, sample_posts):
    root = write_content(tmp_path / "content", posts={**sample_posts, "bad.md": "no metadata\n"})
    output = tmp_path / "site"

    result = runner.invoke(
        app,
        ["build", "--content", str(root), "--output", str(output), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 1
    assert not output.exists()


@pytest.mark.integration
def test_cli_reports_bad_navigation_config(content_dir):
    (content_dir / "site.yaml").write_text("nav:\n  - {label: Resume}\n", encoding="utf-8")

    result = runner.invoke(app, ["check", "--content", str(content_dir)])

    assert result.exit_code == 1
    assert "Invalid navigation entry" in result.output
