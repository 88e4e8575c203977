"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from livehook.room_filter import RoomFilter, parse_room_filter
from livehook.utils.platform import get_config_dir

DEFAULT_PORT = 25550
DEFAULT_MAX_BODY_SIZE = 16 * 1024 * 1024


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LIVEHOOK_",
        case_sensitive=False,
    )

    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    bind: str = "0.0.0.0"
    roomid_filter: str | None = None
    notify_timeout: float = Field(default=10.0, gt=0)
    shutdown_timeout: float = Field(default=60.0, ge=0)
    max_body_size: int = Field(default=DEFAULT_MAX_BODY_SIZE, gt=0)
    dry_run: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    def room_filter(self) -> RoomFilter | None:
        return parse_room_filter(self.roomid_filter)


def load_settings(
    config_path: str | Path | None = None, **overrides: Any
) -> Settings:
    """Load settings from env vars, optionally overlaying a YAML config.

    Keyword overrides (typically CLI options) win over both; None values
    are ignored so unset options fall through to env/YAML/defaults.
    """
    yaml_data: dict[str, Any] = {}

    # Determine config file path
    if config_path is None:
        config_path = os.environ.get("LIVEHOOK_CONFIG")
    if config_path is None:
        default = get_config_dir() / "config.yaml"
        if default.exists():
            config_path = default

    # Load YAML if found
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                yaml_data = yaml.safe_load(f) or {}

    yaml_data.update({k: v for k, v in overrides.items() if v is not None})

    # Init kwargs take priority over env vars in pydantic-settings
    return Settings(**yaml_data)
