"""Classify manifest chunks into stylesheet, preload, and script tags."""

from __future__ import annotations

from .models import Manifest, RawManifest, Tags, coerce_manifest


def parse(manifest: RawManifest) -> Tags:
    """Compute the links, preloads, and scripts required by ``manifest``.

    Every chunk is visited once in manifest order. A chunk's own file becomes a
    script when it is a static or dynamic entry; its stylesheets become links;
    each import or dynamic import that resolves to a manifest key contributes
    that chunk's file to both preloads and scripts. Keys that do not resolve are
    skipped. Multi-hop chains resolve because every chunk is itself visited at
    the top level, so cycles cannot cause repeated work.
    """
    chunks: Manifest = coerce_manifest(manifest)
    # dicts used as insertion-ordered sets
    links: dict[str, None] = {}
    preloads: dict[str, None] = {}
    scripts: dict[str, None] = {}

    for chunk in chunks.values():
        if chunk.is_any_entry:
            scripts.setdefault(chunk.file, None)

        for path in chunk.css:
            links.setdefault(path, None)

        for key in (*chunk.imports, *chunk.dynamic_imports):
            imported = chunks.get(key)
            if imported is None:
                continue
            preloads.setdefault(imported.file, None)
            scripts.setdefault(imported.file, None)

    return Tags(links=list(links), preloads=list(preloads), scripts=list(scripts))
