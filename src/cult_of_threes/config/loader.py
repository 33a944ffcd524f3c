"""
Reading the optional ``config.toml``.

All bot settings live under the ``[cultofthrees]`` table. Environment
variables remain the primary source; the file only renames which variables
hold the secrets and overrides the non-secret defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict

ROOT_TABLE = "cultofthrees"


def config_path() -> Path:
    return Path(os.getenv("CULT_CONFIG_PATH", "config.toml"))


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Parse the config file, or return ``{}`` when it does not exist."""
    target = Path(path) if path is not None else config_path()
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


def section(raw: Dict[str, Any] | None, *names: str) -> Dict[str, Any]:
    """Return the nested table ``[cultofthrees.<names...>]`` or ``{}``."""
    table = (raw or {}).get(ROOT_TABLE, {})
    for name in names:
        table = table.get(name, {}) if isinstance(table, dict) else {}
    return table if isinstance(table, dict) else {}


__all__ = ["ROOT_TABLE", "config_path", "load_raw_config", "section"]
