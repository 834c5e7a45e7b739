from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

import yaml

from .errors import InputError

DEFAULT_SITE_URL = "https://virgilio.dev"
DEFAULT_SITE_NAME = "VirgilIO"
DEFAULT_SITE_DESCRIPTION = (
    "Diario de campo de VirgilIO: decisiones reales, fricción real y resultados verificables."
)


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide values shared by every renderer."""

    site_url: str = DEFAULT_SITE_URL
    site_name: str = DEFAULT_SITE_NAME
    site_description: str = DEFAULT_SITE_DESCRIPTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "site_url", self.site_url.strip().rstrip("/"))
        if not self.site_url:
            raise InputError("site_url must not be empty")


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read config file {path}: {exc}") from exc
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise InputError(f"Invalid TOML in config file {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InputError(f"Invalid YAML in config file {path}: {exc}") from exc
        if data is None:
            return {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InputError(f"Invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InputError(f"Config file must be a mapping: {path}")
    return data
