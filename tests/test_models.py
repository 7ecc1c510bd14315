from __future__ import annotations

import pytest
from pydantic import ValidationError

from vitetags.manifest import ManifestChunk, coerce_manifest


def test_chunk_defaults_absent_fields() -> None:
    chunk = ManifestChunk.model_validate({"file": "assets/app.js"})

    assert chunk.is_entry is False
    assert chunk.is_dynamic_entry is False
    assert chunk.css == []
    assert chunk.assets == []
    assert chunk.imports == []
    assert chunk.dynamic_imports == []
    assert chunk.name is None
    assert chunk.src is None


def test_chunk_reads_camel_case_and_normalizes_nulls() -> None:
    chunk = ManifestChunk.model_validate(
        {
            "file": "assets/app.js",
            "isEntry": None,
            "isDynamicEntry": True,
            "css": None,
            "dynamicImports": ["lazy.ts"],
            "integrity": "sha384-ignored",
        }
    )

    assert chunk.is_entry is False
    assert chunk.is_dynamic_entry is True
    assert chunk.is_any_entry is True
    assert chunk.css == []
    assert chunk.dynamic_imports == ["lazy.ts"]
    assert not hasattr(chunk, "integrity")


def test_chunk_requires_file() -> None:
    with pytest.raises(ValidationError):
        ManifestChunk.model_validate({"isEntry": True})


def test_coerce_manifest_preserves_order_and_input() -> None:
    existing = ManifestChunk(file="b.js")
    raw = {"z.ts": {"file": "z.js"}, "b.ts": existing, "a.ts": {"file": "a.js"}}

    coerced = coerce_manifest(raw)

    assert list(coerced) == ["z.ts", "b.ts", "a.ts"]
    assert coerced["b.ts"] is existing
    assert isinstance(raw["z.ts"], dict)
