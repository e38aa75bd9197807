"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from link_sentinel.core.errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
DEFAULT_STATE_PATH = "~/.link_sentinel/state.json"
ENV_PREFIX = "LINK_SENTINEL_"


class AppConfig(BaseModel):

    state_path: str = Field(default=DEFAULT_STATE_PATH)
    trusted_hostnames: list[str] = Field(default_factory=list)
    default_enabled: bool = Field(default=True)
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))

    def resolved_state_path(self) -> Path:
        return Path(self.state_path).expanduser()


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid yaml in {p}: {exc}") from exc
    return payload if isinstance(payload, dict) else {}


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(ENV_PREFIX + name)
    return value if value not in (None, "") else fallback


def _parse_hostnames(raw: Any) -> list[str]:
    if isinstance(raw, str):
        return list(dict.fromkeys(item.strip() for item in raw.split(",") if item.strip()))
    if isinstance(raw, list):
        return list(dict.fromkeys(str(item).strip() for item in raw if str(item).strip()))
    return []


def _parse_bool(raw: Any, fallback: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return fallback
    value = str(raw).strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _parse_choice(raw: Any, choices: set[str], fallback: str) -> str:
    value = _parse_str(raw, fallback).lower()
    return value if value in choices else fallback


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv(ENV_PREFIX + "CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> tuple[AppConfig, dict[str, Any]]:
    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    payload = {
        "state_path": _parse_str(
            _pick_env("STATE_PATH", merged.get("state_path")),
            DEFAULT_STATE_PATH,
        ),
        "trusted_hostnames": _parse_hostnames(
            _pick_env("TRUSTED_HOSTNAMES", merged.get("trusted_hostnames", [])),
        ),
        "default_enabled": _parse_bool(
            _pick_env("DEFAULT_ENABLED", merged.get("default_enabled", True)),
            True,
        ),
        "log_level": _parse_choice(
            _pick_env("LOG_LEVEL", merged.get("log_level", "WARNING")),
            {"debug", "info", "warning", "error", "critical"},
            "warning",
        ).upper(),
        "log_format": _parse_choice(
            _pick_env("LOG_FORMAT", merged.get("log_format", "console")),
            {"console", "json"},
            "console",
        ),
        "default_config_path": str(default_path),
    }

    try:
        cfg = AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    return cfg, merged
