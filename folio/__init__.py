"""
FOLIO - Portfolio and blog content pipeline

Builds a personal resume site and its blog from static content.

Architecture:
- Resume Context: Resume content schema and document composition
- Blog Context: Post metadata parsing and the queryable post collection
- Navigation Context: Route helpers for the site shell
- Rendering Context: Markdown previews of composed content
"""

__version__ = "0.1.0"
