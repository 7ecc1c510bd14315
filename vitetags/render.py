"""Render parsed manifest tags into HTML with Jinja2."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    TemplateError,
    select_autoescape,
)

from .config import Config
from .manifest import Tags

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "tags.html.j2"
SECTION_TEMPLATES: dict[str, str] = {
    "links": "links.html.j2",
    "preloads": "preloads.html.j2",
    "scripts": "scripts.html.j2",
}


class RenderError(RuntimeError):
    """Raised when tag templates cannot be loaded or rendered."""


def make_asset_href(path: str, *, base_url: str = "/") -> str:
    """Join an asset path onto ``base_url``; absolute URLs pass through unchanged."""
    if path.startswith(("http://", "https://", "//")):
        return path
    prefix = base_url if base_url.endswith("/") else f"{base_url}/"
    return f"{prefix}{path.lstrip('/')}"


class TagRenderer:
    """Render stylesheet, preload, and script tags for a ``Tags`` value."""

    def __init__(
        self,
        *,
        base_url: str = "/",
        template_dir: Path | None = None,
        crossorigin: str | None = None,
    ) -> None:
        self.base_url = base_url or "/"
        self.crossorigin = crossorigin
        self._environment = self._build_environment(template_dir)

    @classmethod
    def from_config(cls, config: Config) -> "TagRenderer":
        return cls(
            base_url=config.base_url,
            template_dir=config.template_dir,
            crossorigin=config.crossorigin,
        )

    @property
    def environment(self) -> Environment:
        return self._environment

    def render(self, tags: Tags) -> str:
        """Render all three sections in document order."""
        return self._render_template(PAGE_TEMPLATE, self._context(tags))

    def render_sections(self, tags: Tags) -> dict[str, str]:
        """Render links, preloads, and scripts as separate fragments."""
        context = self._context(tags)
        return {key: self._render_template(name, context) for key, name in SECTION_TEMPLATES.items()}

    def _context(self, tags: Tags) -> dict[str, Any]:
        return {
            "links": [make_asset_href(path, base_url=self.base_url) for path in tags.links],
            "preloads": [make_asset_href(path, base_url=self.base_url) for path in tags.preloads],
            "scripts": [make_asset_href(path, base_url=self.base_url) for path in tags.scripts],
            "crossorigin": self.crossorigin,
        }

    def _render_template(self, name: str, context: dict[str, Any]) -> str:
        try:
            template = self._environment.get_template(name)
            return template.render(**context)
        except TemplateError as exc:
            raise RenderError(f"Failed to render template '{name}': {exc}") from exc

    @staticmethod
    def _build_environment(template_dir: Path | None) -> Environment:
        loaders: list[Any] = []
        if template_dir is not None:
            if template_dir.is_dir():
                loaders.append(FileSystemLoader(str(template_dir)))
            else:
                logger.warning("Template directory %s not found; using bundled templates.", template_dir)
        loaders.append(PackageLoader("vitetags", "templates"))
        return Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
