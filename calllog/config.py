# file: calllog/config.py
"""
Configuration loader.

Precedence (highest to lowest):
1. OS environment variables
2. `.env` values
3. YAML config file values
4. Code defaults
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field, field_validator
from pydantic import ConfigDict as PydanticConfigDict


class DisplayLabels(BaseModel):
    """User-visible labels for numbers that are not shown as digits."""

    model_config = PydanticConfigDict(extra="ignore", frozen=True)

    unknown: str = "Unknown"
    private: str = "Private number"
    payphone: str = "Payphone"
    voicemail: str = "Voicemail"


class CalllogSettings(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    voicemail_number: str | None = None
    locale: str = "en"
    default_country_iso: str | None = None
    log_level: str = "INFO"
    json_logging: bool = False

    labels: DisplayLabels = Field(default_factory=DisplayLabels)

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        # getLevelName maps registered names to their int level.
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @field_validator("voicemail_number", "default_country_iso", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


_ENV_MAP: dict[str, str] = {
    "CALLLOG_VOICEMAIL_NUMBER": "voicemail_number",
    "CALLLOG_LOCALE": "locale",
    "CALLLOG_DEFAULT_COUNTRY_ISO": "default_country_iso",
    "CALLLOG_LOG_LEVEL": "log_level",
    "CALLLOG_JSON_LOGGING": "json_logging",
    # JSON string: {"unknown": "Unbekannt", "voicemail": "Mailbox", ...}
    "CALLLOG_LABELS": "labels",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return raw if isinstance(raw, dict) else {}


def _read_dotenv(path: Path) -> dict[str, str]:
    # dotenv_values does not mutate os.environ; it just parses the file.
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if isinstance(k, str) and isinstance(v, str):
            out[k] = v
    return out


def _overlay_env(target: dict[str, Any], env: dict[str, str]) -> None:
    for env_key, field_name in _ENV_MAP.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        if field_name == "labels":
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if isinstance(parsed, dict):
                # Partial overrides keep the remaining labels from lower layers.
                merged = dict(target.get("labels") or {})
                merged.update(parsed)
                target[field_name] = merged
        else:
            target[field_name] = raw


def load_settings(
    *, yaml_path: Path | None = None, env_path: Path | None = None
) -> CalllogSettings:
    """
    Load settings from YAML and .env, with OS env overrides.

    Args:
        yaml_path: Optional YAML config path.
        env_path: Optional .env path (default: `.env` if present).
    """

    data: dict[str, Any] = {}

    if env_path is None:
        maybe = Path(".env")
        env_path = maybe if maybe.exists() else None

    dotenv = _read_dotenv(env_path) if env_path is not None and env_path.exists() else {}

    # YAML path resolution:
    # - explicit yaml_path wins
    # - else CALLLOG_CONFIG from OS env wins
    # - else CALLLOG_CONFIG from .env
    if yaml_path is None:
        cfg = os.environ.get("CALLLOG_CONFIG") or dotenv.get("CALLLOG_CONFIG")
        if cfg:
            yaml_path = Path(cfg)

    if yaml_path is not None and yaml_path.exists():
        data.update(_read_yaml(yaml_path))

    if dotenv:
        _overlay_env(data, dotenv)

    os_env: dict[str, str] = {k: v for k, v in os.environ.items() if k in _ENV_MAP}
    _overlay_env(data, os_env)

    return CalllogSettings.model_validate(data)
