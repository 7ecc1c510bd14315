"""Read bundler manifests from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .models import Manifest, coerce_manifest

logger = logging.getLogger(__name__)


class ManifestError(RuntimeError):
    """Raised when a manifest file cannot be read or validated."""


def load_manifest(path: str | Path) -> Manifest:
    """Load ``manifest.json`` and validate every chunk, keeping declaration order."""
    manifest_path = Path(path)
    if not manifest_path.is_file():
        raise ManifestError(f"Manifest not found at {manifest_path}")
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ManifestError(f"Failed to load manifest at {manifest_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {manifest_path} does not define an object root.")

    try:
        manifest = coerce_manifest(data)
    except ValidationError as exc:
        raise ManifestError(f"Manifest validation failed for {manifest_path}: {exc}") from exc

    logger.debug("Loaded %d chunk(s) from %s", len(manifest), manifest_path)
    return manifest
