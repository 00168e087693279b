"""Shared fixtures for integration tests: a small content directory on disk."""

import sys
from pathlib import Path

import pytest
from loguru import logger

RESUME_YAML = """\
resume:
  intro:
    name: Tomasz Kisiel
    role: Software Engineer
  sections:
    - heading: Skills
      entries:
        - text: Problem-solving
        - Software Architecture
    - heading: Languages
      entries:
        - {text: Polish, detail: Native}
    - heading: Experience
      entries:
        - heading: Dev And Deliver, Cracow - Software Engineer
          time_range: June 2021 - December 2023
          body:
            - paragraph: Played a pivotal role as a software engineer.
            - list: [GraphQL API, Code reviews]
"""

POSTS = {
    "couchdb-part-1.md": """\
---
title: "Part 1"
date: 2024-05-25
categories: [Software Engineering, Web Development]
tags: [CouchDB, Keycloak]
---
Setting up CouchDB with Keycloak.
""",
    "couchdb-part-2.md": """\
---
title: "Part 2"
date: 2024-06-08
categories:
  - Web Development
tags:
  - CouchDB
---
Mapping roles.
""",
    "reading-list.md": """\
---
title: Reading list
date: 2024-06-08
categories: Reading
---
Books.
""",
}


def _write_content(root: Path, posts: dict = None, resume: str = RESUME_YAML) -> Path:
    (root / "posts").mkdir(parents=True, exist_ok=True)
    (root / "resume.yaml").write_text(resume, encoding="utf-8")
    for name, text in (POSTS if posts is None else posts).items():
        (root / "posts" / name).write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def content_dir(tmp_path):
    return _write_content(tmp_path / "content")


@pytest.fixture
def write_content():
    """Factory for content directories with custom posts or resume text."""
    return _write_content


@pytest.fixture
def sample_posts():
    return dict(POSTS)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by setup_logger so they do not outlive the test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
