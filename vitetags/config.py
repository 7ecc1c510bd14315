import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = "vitetags.yml"

logger = logging.getLogger(__name__)


class Config(BaseModel):
    manifest_path: Path = Field(default=Path("dist/.vite/manifest.json"))
    base_url: str = Field(
        default="/",
        description="Public prefix joined onto every asset path when rendering tags.",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Optional directory containing a tags.html.j2 override.",
    )
    crossorigin: str | None = Field(
        default=None,
        description="Optional crossorigin attribute for scripts and preloads (e.g. 'anonymous').",
    )
    output_dir: Path = Field(default=Path("dist"))

    @field_validator("manifest_path", "output_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("template_dir", mode="before")
    def _ensure_optional_path(cls, value: Any) -> Path | None:
        if value is None or value == "":
            return None
        return Path(value)

    @field_validator("base_url")
    def _normalize_base_url(cls, value: str) -> str:
        text = value.strip()
        if not text:
            return "/"
        if not text.endswith("/"):
            text = f"{text}/"
        return text


def load_config(path: str | Path) -> Config:
    """Load configuration and resolve relative paths based on the config location.

    The ``path`` argument may point to a file (e.g., ``/app/vitetags.yml``) or a
    directory containing that file. All relative paths inside the configuration
    are interpreted relative to the directory holding the config file.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    base_dir: Path
    if candidate.is_dir():
        # A directory without a config file falls back to defaults.
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            data = _read_yaml(config_file)
        else:
            logger.info("Configuration not found at %s; using defaults.", config_file)
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        data = _read_yaml(candidate)
        base_dir = candidate.parent.resolve()

    cfg = Config(**data)

    def _abs_required(value: Path) -> Path:
        return value if value.is_absolute() else (base_dir / value).resolve()

    cfg.manifest_path = _abs_required(cfg.manifest_path)
    cfg.output_dir = _abs_required(cfg.output_dir)
    if cfg.template_dir is not None:
        cfg.template_dir = _abs_required(cfg.template_dir)
    return cfg


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration {path} does not define a mapping.")
    return data
