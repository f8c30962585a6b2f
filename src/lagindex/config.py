from __future__ import annotations

"""Configuration utilities for lagindex.

The :class:`Settings` container groups the defaults used by the command
line tool: the interval flag for lag assignment, the timestamp column read
from CSV inputs and logging options.  Instances can be populated from
environment variables or from YAML/JSON files with matching nested keys.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

import yaml

from .types import IntervalMode


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class AssignSettings(SectionModel):
    """Defaults for lag index assignment."""

    interval: IntervalMode = IntervalMode.EXACT

    @field_validator("interval", mode="before")
    @classmethod
    def _coerce_interval(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class IngestSettings(SectionModel):
    """Options controlling how timestamp files are read."""

    column: str | None = None

    @field_validator("column", mode="before")
    @classmethod
    def _coerce_column(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class LoggingSettings(SectionModel):
    """Logger level and record format."""

    level: str = "WARNING"
    format: str = "%(levelname)s:%(name)s:%(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _check_level(cls, value: Any) -> Any:
        if isinstance(value, int):
            return logging.getLevelName(value)
        if isinstance(value, str):
            name = value.strip().upper()
            if not isinstance(logging.getLevelName(name), int):
                raise ValueError(f"unknown log level: {value}")
            return name
        return value


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    assign: AssignSettings = Field(default_factory=AssignSettings)
    ingest: IngestSettings = Field(default_factory=IngestSettings)
    log: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="LAGINDEX_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``LAGINDEX_*`` environment variables only."""

        return cls()


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
