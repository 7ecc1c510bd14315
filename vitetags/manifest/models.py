"""Pydantic models describing bundler manifest structures."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ManifestChunk(BaseModel):
    """One build output: a compiled file plus its entry status, stylesheets, and import edges."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file: str = Field(description="Path to the compiled output asset.")
    is_entry: bool = Field(default=False, alias="isEntry")
    is_dynamic_entry: bool = Field(default=False, alias="isDynamicEntry")
    css: list[str] = Field(default_factory=list, description="Stylesheets belonging to the chunk.")
    assets: list[str] = Field(default_factory=list, description="Non-script, non-style static assets.")
    imports: list[str] = Field(default_factory=list, description="Manifest keys of static imports.")
    dynamic_imports: list[str] = Field(
        default_factory=list,
        alias="dynamicImports",
        description="Manifest keys of dynamic imports.",
    )
    name: Optional[str] = Field(default=None)
    src: Optional[str] = Field(default=None)

    @field_validator("css", "assets", "imports", "dynamic_imports", mode="before")
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("is_entry", "is_dynamic_entry", mode="before")
    def _null_to_false(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def is_any_entry(self) -> bool:
        return self.is_entry or self.is_dynamic_entry


Manifest = dict[str, ManifestChunk]
RawManifest = Mapping[str, Union[ManifestChunk, Mapping[str, Any]]]


class Tags(BaseModel):
    """Ordered, deduplicated asset references ready for HTML injection."""

    links: list[str] = Field(default_factory=list, description="Stylesheet paths.")
    preloads: list[str] = Field(default_factory=list, description="Files hinted for early fetch.")
    scripts: list[str] = Field(default_factory=list, description="Entry files plus every preload.")


def coerce_manifest(manifest: RawManifest) -> Manifest:
    """Return a new manifest with every value validated as a ``ManifestChunk``.

    Key order is preserved and the input mapping is left untouched.
    """
    coerced: Manifest = {}
    for key, chunk in manifest.items():
        if isinstance(chunk, ManifestChunk):
            coerced[key] = chunk
        else:
            coerced[key] = ManifestChunk.model_validate(chunk)
    return coerced
