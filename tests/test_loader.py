from __future__ import annotations

import json
from pathlib import Path

import pytest

from vitetags.manifest import ManifestError, load_manifest, parse

FIXTURE = Path(__file__).resolve().parent / "fixtures" / "vite" / "manifest.json"


def test_load_manifest_reads_fixture_in_declaration_order() -> None:
    manifest = load_manifest(FIXTURE)

    assert list(manifest) == ["app/main.tsx", "_vendor-ghi789.js", "app/settings.tsx"]
    settings = manifest["app/settings.tsx"]
    assert settings.is_dynamic_entry is True
    assert settings.assets == ["assets/logo-pqr678.svg"]


def test_loaded_manifest_parses_into_tags() -> None:
    result = parse(load_manifest(FIXTURE))

    assert result.links == ["assets/main-def456.css", "assets/settings-mno345.css"]
    assert result.preloads == ["assets/vendor-ghi789.js", "assets/settings-jkl012.js"]
    assert result.scripts == [
        "assets/main-abc123.js",
        "assets/vendor-ghi789.js",
        "assets/settings-jkl012.js",
    ]


def test_load_manifest_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="not found"):
        load_manifest(tmp_path / "manifest.json")


def test_load_manifest_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError, match="Failed to load"):
        load_manifest(path)


def test_load_manifest_rejects_non_object_root(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(["assets/app.js"]), encoding="utf-8")

    with pytest.raises(ManifestError, match="object root"):
        load_manifest(path)


def test_load_manifest_rejects_chunk_without_file(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps({"app.ts": {"isEntry": True}}), encoding="utf-8")

    with pytest.raises(ManifestError, match="validation failed"):
        load_manifest(path)
