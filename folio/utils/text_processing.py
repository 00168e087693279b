"""
Text processing utilities for identifiers and routes.
"""

import re
import unicodedata


def slugify(text: str) -> str:
    """
    Convert text to a lowercase, hyphen-separated slug.

    Accented characters are folded to ASCII; runs of anything else that is not
    a letter or digit collapse into a single hyphen.

    Args:
        text: Arbitrary text (e.g., a post title or category name)

    Returns:
        Slug string (may be empty if text has no letters or digits)

    Example:
        >>> slugify("Part 1: CouchDB & Keycloak")
        'part-1-couchdb-keycloak'
        >>> slugify("Kościuszkon")
        'kosciuszkon'
    """
    # Polish "ł" has no decomposition, fold it explicitly
    text = text.replace("ł", "l").replace("Ł", "L")
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-zA-Z0-9]+", "-", ascii_text).strip("-")
    return slug.lower()
