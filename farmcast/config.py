"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``FARMCAST_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The CLI builds one ``AppConfig`` per invocation and passes sections down;
the advisory engine itself takes no configuration (its thresholds are fixed
rule constants).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from farmcast.models.weather import MAX_FORECAST_DAYS

# ── Sub-config models ─────────────────────────────────────────────────────────


class DataConfig(BaseModel):
    """Filesystem paths for snapshot input and report output."""

    model_config = ConfigDict(frozen=True)

    snapshot_path: Optional[str] = None
    reports_dir: str = "data/reports"


class DemoConfig(BaseModel):
    """Synthetic snapshot settings used when no snapshot file is given."""

    model_config = ConfigDict(frozen=True)

    seed: int = 42
    forecast_days: int = 7
    location: str = "Demo Farm"

    @field_validator("forecast_days")
    @classmethod
    def validate_forecast_days(cls, v: int) -> int:
        if not 1 <= v <= MAX_FORECAST_DAYS:
            raise ValueError(
                f"forecast_days must be in [1, {MAX_FORECAST_DAYS}], got {v}."
            )
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env + env vars.
    """

    model_config = ConfigDict(frozen=True)

    data: DataConfig = DataConfig()
    demo: DemoConfig = DemoConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file is
            absent the built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicitly given ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is None:
        config_path = root / "config" / "default.toml"
        explicit = False
    else:
        config_path = Path(config_path)
        explicit = True

    if config_path.exists():
        with open(config_path, "rb") as f:
            raw = tomllib.load(f)
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply FARMCAST_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply FARMCAST_* env vars to the raw config dict.

    Supported overrides:
      FARMCAST_SNAPSHOT_PATH  → raw["data"]["snapshot_path"]
      FARMCAST_LOG_LEVEL      → raw["logging"]["level"]
      FARMCAST_DEBUG          → raw["debug"]
    """
    if snapshot_path := os.environ.get("FARMCAST_SNAPSHOT_PATH"):
        raw.setdefault("data", {})["snapshot_path"] = snapshot_path

    if log_level := os.environ.get("FARMCAST_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("FARMCAST_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        data=DataConfig(**raw.get("data", {})),
        demo=DemoConfig(**raw.get("demo", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
