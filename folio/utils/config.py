"""
Site configuration for content loading and output.

Paths come from the environment (.env supported via python-dotenv). An optional
site.yaml in the content directory is merged over the defaults with OmegaConf.

Example site.yaml:
    posts_dir: posts
    resume_file: resume.yaml
    nav:
      - {label: Resume, href: /resume}
      - {label: Blog, href: /blog}
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
CONTENT_PATH = Path(os.getenv("CONTENT_PATH", "content"))
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "outs/site"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

SITE_CONFIG_FILENAME = "site.yaml"

DEFAULT_SITE_CONFIG = {
    "posts_dir": "posts",
    "resume_file": "resume.yaml",
    "nav": [
        {"label": "Resume", "href": "/resume"},
        {"label": "Blog", "href": "/blog"},
    ],
}


def load_site_config(content_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load site configuration for a content directory.

    Args:
        content_path: Content root (defaults to CONTENT_PATH env variable)

    Returns:
        Plain dict with defaults overridden by site.yaml (if present), plus
        resolved "content_path", "posts_path" and "resume_path" entries
    """
    if content_path is None:
        content_path = CONTENT_PATH
    content_path = Path(content_path)

    config = OmegaConf.create(DEFAULT_SITE_CONFIG)
    site_file = content_path / SITE_CONFIG_FILENAME
    if site_file.exists():
        config = OmegaConf.merge(config, OmegaConf.load(site_file))

    resolved = OmegaConf.to_container(config, resolve=True)
    resolved["content_path"] = content_path
    resolved["posts_path"] = content_path / resolved["posts_dir"]
    resolved["resume_path"] = content_path / resolved["resume_file"]
    return resolved
