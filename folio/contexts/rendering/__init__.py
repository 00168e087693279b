"""
Rendering Context

Responsibilities:
- Renders composed resume documents and post listings to markdown previews
- Manages the Jinja2 template set for those previews

Owns: Preview templates
Never: Parses content or changes document structure
"""

from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.renderer import render_post, render_post_index, render_resume

__all__ = ["TemplateRegistry", "render_resume", "render_post_index", "render_post"]
