"""Configuration loading utilities for ipmetaindex.toml."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# TOML table -> {key in table: IndexSettings field}
_SECTION_KEYS: dict[str, dict[str, str]] = {
    "maxmind": {
        "license_key": "maxmind_license_key",
        "language": "maxmind_language",
        "enable_city": "enable_city",
        "url_template": "maxmind_url_template",
    },
    "cloud": {
        "aws_url": "aws_url",
        "azure_url": "azure_url",
        "o365_url": "o365_url",
    },
    "build": {
        "scratch_dir": "scratch_dir",
        "request_timeout": "request_timeout",
        "task_timeout": "task_timeout",
        "retries": "retries",
    },
}


def _find_config_file() -> Path | None:
    # config/ directory first, then the current directory
    for candidate in (Path("config/ipmetaindex.toml"), Path("ipmetaindex.toml")):
        if candidate.exists():
            return candidate
    return None


def _resolve_secret(value: Any) -> Any:
    if isinstance(value, str) and value.startswith("env:"):
        return os.getenv(value[4:])
    return value


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load settings overrides from ipmetaindex.toml.

    Values written as ``env:NAME`` are read from the environment variable
    ``NAME`` so secrets can stay out of the file.

    Args:
        path: Explicit file to read; searched for when None

    Returns:
        Mapping of IndexSettings field names to values, empty when no file
        is found or it cannot be parsed

    Example:
        >>> # ipmetaindex.toml
        >>> # [maxmind]
        >>> # license_key = "env:MAXMIND_API"
        >>> load_config_file()["maxmind_license_key"]  # doctest: +SKIP
        'abc123'
    """
    config_file = path if path is not None else _find_config_file()
    if config_file is None:
        return {}

    try:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as e:
        logger.debug(f"Could not read {config_file}: {e}")
        return {}
    except tomllib.TOMLDecodeError as e:
        logger.warning(f"Failed to parse {config_file}: {e}. Using defaults.")
        return {}

    config: dict[str, Any] = {}
    for section, keys in _SECTION_KEYS.items():
        table = data.get(section, {})
        if not isinstance(table, dict):
            logger.warning(f"Ignoring [{section}] in {config_file}: not a table")
            continue
        for key, field_name in keys.items():
            if key in table:
                config[field_name] = _resolve_secret(table[key])
    return config


__all__ = ["load_config_file"]
