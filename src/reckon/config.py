"""
reckon configuration.

Parses the [reckon] section from reckon.toml and applies RECKON_*
environment overrides. Only the command-line layer reads configuration;
the core takes its options as arguments.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_FILE = "reckon.toml"

_ENV_OVERRIDES = {
    "RECKON_LOG_LEVEL": "log_level",
    "RECKON_PROMPT": "prompt",
}


class ReckonConfig(BaseModel):
    """Settings for the reckon command-line interface."""

    prompt: str = "calc> "
    precision: int | None = Field(
        default=None, ge=0, description="Fixed decimal places; None for shortest form"
    )
    allow_trailing: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level


def load_config(toml_path: Path | None = None) -> ReckonConfig:
    """
    Load configuration from reckon.toml.

    Args:
        toml_path: Path to the TOML file; defaults to ./reckon.toml

    Returns:
        ReckonConfig with parsed values or defaults
    """
    if toml_path is None:
        toml_path = Path.cwd() / DEFAULT_CONFIG_FILE

    data: dict[str, Any] = {}
    if toml_path.exists():
        with open(toml_path, "rb") as f:
            data = dict(tomllib.load(f).get("reckon", {}))

    for env_var, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data[key] = value

    return ReckonConfig(**data)
