"""Persistence helpers for rendered tag output."""

from __future__ import annotations

import json
from pathlib import Path

from .manifest import Tags

TAGS_JSON_FILENAME = "tags.json"
TAGS_HTML_FILENAME = "tags.html"


def write_tags(tags: Tags, destination: Path) -> Path:
    """Serialize tags to a JSON file, creating parent directories as needed."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8") as handle:
        json.dump(tags.model_dump(mode="json"), handle, ensure_ascii=False, indent=2)
    return destination


def write_markup(markup: str, destination: Path) -> Path:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(markup, encoding="utf-8")
    return destination
