"""
Rendering Registries

Registry for loading and caching the markdown preview templates.
"""

from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

TEMPLATES_PATH = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".md.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for markdown previews.

    Templates are stored in folio/contexts/rendering/templates/{name}.md.jinja.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to the
                            templates shipped with the package
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., 'resume')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}{TEMPLATE_SUFFIX}"
        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
