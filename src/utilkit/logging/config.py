"""Persisted settings for utilkit logging.

Settings live in a small JSON document, ``~/.utilkit/logging.json`` unless
``UTILKIT_LOG_CONFIG`` or ``UTILKIT_CONFIG_DIR`` point elsewhere. Two keys
are understood: ``log_level`` and ``log_dir``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

PathLike = Optional[os.PathLike[str] | str]


def _env_path(var: str) -> Optional[Path]:
    raw = os.environ.get(var)
    if raw and raw.strip():
        return Path(raw).expanduser()
    return None


def config_path(config_file: PathLike = None) -> Path:
    """Return the settings file used when ``config_file`` is not given."""

    if config_file is not None:
        return Path(config_file)
    explicit = _env_path("UTILKIT_LOG_CONFIG")
    if explicit is not None:
        return explicit
    base = _env_path("UTILKIT_CONFIG_DIR") or Path.home() / ".utilkit"
    return base / "logging.json"


def load_config(config_file: PathLike = None) -> Dict[str, Any]:
    """Read the settings document.

    Missing, unreadable or malformed files yield an empty dict, as does a
    document whose top level is not an object.
    """

    path = config_path(config_file)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}

    return data if isinstance(data, dict) else {}


def save_config(config: Dict[str, Any], config_file: PathLike = None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(config, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return path


def normalize_level(level: str | int) -> tuple[str, int]:
    """Return ``(name, number)`` for a level given by name or number.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level name.
    """

    if isinstance(level, int):
        name = logging.getLevelName(level)
        if not isinstance(name, str) or name.startswith("Level "):
            name = str(level)
        return name, level

    name = str(level).strip().upper()
    number = logging.getLevelName(name)
    if isinstance(number, int):
        return name, number
    raise ValueError(f"Unknown logging level: {level!r}")


def load_log_level(config_file: PathLike = None) -> Optional[int]:
    """Return the persisted level as a number, or ``None`` if unset/invalid."""

    value = load_config(config_file).get("log_level")
    if value is None:
        return None
    try:
        return normalize_level(value)[1]
    except ValueError:
        return None


def save_log_level(level: str | int, config_file: PathLike = None) -> Path:
    name, _ = normalize_level(level)
    config = load_config(config_file)
    config["log_level"] = name
    return save_config(config, config_file)


def load_log_dir(config_file: PathLike = None) -> Optional[Path]:
    value = load_config(config_file).get("log_dir")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value).expanduser()


def save_log_dir(log_dir: os.PathLike[str] | str, config_file: PathLike = None) -> Path:
    config = load_config(config_file)
    config["log_dir"] = str(Path(log_dir).expanduser())
    return save_config(config, config_file)


__all__ = [
    "config_path",
    "load_config",
    "save_config",
    "normalize_level",
    "load_log_level",
    "save_log_level",
    "load_log_dir",
    "save_log_dir",
]
