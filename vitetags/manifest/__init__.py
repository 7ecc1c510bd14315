"""Manifest data structures and the tag parser."""

from .loader import ManifestError, load_manifest
from .models import Manifest, ManifestChunk, Tags, coerce_manifest
from .parser import parse

__all__ = [
    "Manifest",
    "ManifestChunk",
    "ManifestError",
    "Tags",
    "coerce_manifest",
    "load_manifest",
    "parse",
]
