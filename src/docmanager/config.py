"""Application configuration: settings schema, config.yaml loader, and logging setup"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCMANAGER_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class Settings(BaseModel):
    log_level:    str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Root log level for the CLI")
    empty_filter: str = Field(default="match-none", pattern="^(match-none|ignore)$",
                              description="Empty search list: match-none (OR over nothing) or ignore (same as unset)")


def _read_config_file(path: Path, required: bool) -> dict[str, Any]:
    """Return the mapping stored in path; a missing optional file reads as empty."""
    if not path.exists():
        if required:
            raise ValueError(f"Config file not found: {path}")
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")
    return data


def load_config(overrides: dict[str, Any] = None, config_file: str | Path | None = None) -> Settings:
    """Build Settings from a config file, then DOCMANAGER_<FIELD> env vars, then non-None overrides.

    Without config_file, ./config.yaml is read when present. An explicit config_file must exist.
    """
    path = Path(config_file) if config_file else Path(CONFIG_FILE)
    data = _read_config_file(path, required=config_file is not None)

    env = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    data.update({k: v for k, v in env.items() if v})

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout is reserved for command output."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
