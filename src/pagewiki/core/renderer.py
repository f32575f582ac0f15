"""HTML rendering of pages.

Templates are compiled once when the renderer is created and are never
modified afterwards, so a single renderer is shared by all requests.
"""

import logging
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from pagewiki.core.page import Page
from pagewiki.errors import RenderError, TemplateLoadError

logger = logging.getLogger(__name__)

VIEW_NAMES = ("view", "edit")

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class TemplateRenderer:
    """Renders pages with the ``view`` and ``edit`` templates.

    Each template is loaded from ``<name>.html`` in the templates directory
    and receives ``title`` and ``body`` variables.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Initialize renderer and compile templates.

        Args:
            templates_dir: Directory containing view.html and edit.html.
                           Defaults to the templates bundled with the package.

        Raises:
            TemplateLoadError: If a template is missing or cannot be parsed
        """
        self._templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        env = Environment(
            loader=FileSystemLoader(self._templates_dir),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )
        self._templates: dict[str, Template] = {}
        for name in VIEW_NAMES:
            filename = f"{name}.html"
            try:
                self._templates[name] = env.get_template(filename)
            except (TemplateError, UnicodeDecodeError) as e:
                raise TemplateLoadError(
                    f"Cannot load template {filename} from {self._templates_dir}: {e}",
                ) from e
        logger.debug(f"Loaded templates from {self._templates_dir}")

    @property
    def templates_dir(self) -> Path:
        """Directory templates were loaded from."""
        return self._templates_dir

    def render(self, view_name: str, page: Page) -> str:
        """Render a page with the named template.

        Args:
            view_name: "view" or "edit"
            page: Page to render

        Returns:
            Rendered HTML

        Raises:
            RenderError: If the view is unknown or template execution fails
        """
        template = self._templates.get(view_name)
        if template is None:
            raise RenderError(f"Unknown template: {view_name}")

        try:
            return template.render(title=page.title, body=page.text)
        except TemplateError as e:
            raise RenderError(str(e)) from e
