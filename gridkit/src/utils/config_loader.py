"""Loads YAML/JSON configuration files and global meta settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package meta configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "meta_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


META_CONFIG: Dict[str, Any] = load_meta_config()
LOG_LEVEL: str = str(META_CONFIG.get("log_level", "WARNING")).upper()
LOG_FILE: Optional[str] = META_CONFIG.get("log_file")
DEFAULT_CODEC_FORMAT: str = str(META_CONFIG.get("codec_format", "json"))
INCLUDE_DIAGONALS: bool = bool(META_CONFIG.get("include_diagonals", False))


def set_log_level(value: str) -> None:
    """Override the logging level used for loggers created afterwards."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    META_CONFIG["log_level"] = LOG_LEVEL


def set_include_diagonals(value: bool) -> None:
    """Override the default neighbourhood used by ``Grid.neighbors``."""
    global INCLUDE_DIAGONALS
    INCLUDE_DIAGONALS = value
    META_CONFIG["include_diagonals"] = value


def set_codec_format(value: str) -> None:
    """Override the document format used when a path carries no suffix."""
    global DEFAULT_CODEC_FORMAT
    if value not in {"json", "yaml"}:
        raise ValueError(f"Unsupported codec format: {value}")
    DEFAULT_CODEC_FORMAT = value
    META_CONFIG["codec_format"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE,
        "codec_format": DEFAULT_CODEC_FORMAT,
        "include_diagonals": INCLUDE_DIAGONALS,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
