import json
from pathlib import Path

from vitetags.manifest import Tags
from vitetags.writer import write_markup, write_tags


def test_write_tags_serializes_json(tmp_path: Path) -> None:
    tags = Tags(links=["a.css"], preloads=["b.js"], scripts=["a.js", "b.js"])

    path = write_tags(tags, tmp_path / "dist" / "tags.json")

    assert path.exists()
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"links": ["a.css"], "preloads": ["b.js"], "scripts": ["a.js", "b.js"]}
    assert Tags.model_validate(data) == tags


def test_write_markup_overwrites_existing_file(tmp_path: Path) -> None:
    destination = tmp_path / "head.html"
    destination.write_text("stale", encoding="utf-8")

    write_markup("<script></script>\n", destination)

    assert destination.read_text(encoding="utf-8") == "<script></script>\n"
