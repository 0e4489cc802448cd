"""Configuration management for envlex.

Reads and writes TOML config at ~/.config/envlex/config.toml.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

CONFIG_DIR = Path.home() / ".config" / "envlex"
CONFIG_PATH = CONFIG_DIR / "config.toml"


@dataclass
class SearchConfig:
    filename: str = ".env"
    match_suffix: bool = True


@dataclass
class ViewerConfig:
    mask_values: bool = True
    theme: str = "dark"


@dataclass
class EnvlexConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)


def load_config() -> EnvlexConfig:
    """Load config from TOML file, returning defaults if missing or corrupt."""
    if not CONFIG_PATH.exists():
        return EnvlexConfig()
    try:
        with open(CONFIG_PATH, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return EnvlexConfig()

    search_data = data.get("search", {})
    viewer_data = data.get("viewer", {})

    return EnvlexConfig(
        search=SearchConfig(
            filename=search_data.get("filename", ".env"),
            match_suffix=search_data.get("match_suffix", True),
        ),
        viewer=ViewerConfig(
            mask_values=viewer_data.get("mask_values", True),
            theme=viewer_data.get("theme", "dark"),
        ),
    )


def save_config(config: EnvlexConfig) -> None:
    """Write config to TOML file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)

    data = {
        "search": {
            "filename": config.search.filename,
            "match_suffix": config.search.match_suffix,
        },
        "viewer": {
            "mask_values": config.viewer.mask_values,
            "theme": config.viewer.theme,
        },
    }

    with open(CONFIG_PATH, "wb") as f:
        tomli_w.dump(data, f)
    os.chmod(CONFIG_PATH, 0o600)
