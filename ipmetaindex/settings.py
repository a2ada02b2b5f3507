"""Runtime configuration for index builds."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

MAXMIND_DOWNLOAD_URL = (
    "https://download.maxmind.com/app/geoip_download?edition_id={edition}&license_key={key}&suffix=zip"
)
AWS_IP_RANGES_URL = "https://ip-ranges.amazonaws.com/ip-ranges.json"
AZURE_SERVICE_TAGS_URL = (
    "https://download.microsoft.com/download/7/1/D/71D86715-5596-4529-9B13-DA13A5DE5B63/"
    "ServiceTags_Public_20230206.json"
)
O365_ENDPOINTS_URL = (
    "https://endpoints.office.com/endpoints/worldwide?clientrequestid=b10c5ed1-bad1-445f-b386-b919946339a7"
)


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _coerce_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


@dataclass(slots=True)
class IndexSettings:
    """Normalized configuration shared by the update tasks and the CLI."""

    maxmind_license_key: str | None = None
    maxmind_language: str = "en"
    enable_city: bool = True
    scratch_dir: Path = Path(tempfile.gettempdir())
    request_timeout: int = 300
    task_timeout: int = 600
    retries: int = 2
    maxmind_url_template: str = MAXMIND_DOWNLOAD_URL
    aws_url: str = AWS_IP_RANGES_URL
    azure_url: str = AZURE_SERVICE_TAGS_URL
    o365_url: str = O365_ENDPOINTS_URL

    def __post_init__(self) -> None:
        """Normalise types that may arrive as strings from TOML or the CLI."""
        self.scratch_dir = Path(self.scratch_dir)
        self.maxmind_language = self.maxmind_language.strip().lower() or "en"

    @classmethod
    def from_sources(
        cls,
        config: Mapping[str, Any] | None = None,
        env_prefix: str = "IPMETA_",
    ) -> "IndexSettings":
        """Build settings from defaults, optional config mapping, and environment variables.

        Precedence order (highest to lowest):
        1. Explicit config mapping values
        2. Environment variables
        3. Default values
        """
        known = {f.name for f in fields(cls)}
        cfg: dict[str, Any] = {}
        if config:
            cfg.update({k: v for k, v in config.items() if v is not None and k in known})

        env = os.environ
        prefix = env_prefix.upper()

        string_keys = {
            "maxmind_license_key": "MAXMIND_LICENSE_KEY",
            "maxmind_language": "MAXMIND_LANGUAGE",
            "scratch_dir": "SCRATCH_DIR",
            "maxmind_url_template": "MAXMIND_URL",
            "aws_url": "AWS_URL",
            "azure_url": "AZURE_URL",
            "o365_url": "O365_URL",
        }
        for key, env_name in string_keys.items():
            if key not in cfg:
                override = env.get(f"{prefix}{env_name}")
                if override:
                    cfg[key] = override

        if "enable_city" not in cfg:
            cfg["enable_city"] = _coerce_bool(env.get(f"{prefix}ENABLE_CITY"), True)

        int_keys = {
            "request_timeout": ("REQUEST_TIMEOUT", 300),
            "task_timeout": ("TASK_TIMEOUT", 600),
            "retries": ("RETRIES", 2),
        }
        for key, (env_name, default) in int_keys.items():
            if key not in cfg:
                cfg[key] = _coerce_int(env.get(f"{prefix}{env_name}"), default)

        return cls(**cfg)


def load_index_settings(
    config: Mapping[str, Any] | None = None,
    env_prefix: str = "IPMETA_",
) -> IndexSettings:
    """Convenience wrapper used by CLI entry points."""
    return IndexSettings.from_sources(config=config, env_prefix=env_prefix)


__all__ = ["IndexSettings", "load_index_settings"]
