"""Configuration for Speedo.

This module provides the Config class holding the values the optional log
persistence needs. The reporter never reads configuration or the process
environment itself.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from .exceptions import ConfigError, HomeDirectoryError


class Config(BaseModel):
    """Configuration for Speedo.

    Attributes:
        home: Home directory under which logs are stored.
        log_subdir: Log folder relative to ``home``.
    """

    home: str | None = None
    log_subdir: str = ".speedo/log"

    @field_validator("log_subdir")
    @classmethod
    def validate_log_subdir(cls, v: str) -> str:
        """Keep the log folder inside the home directory."""
        if not v or Path(v).is_absolute():
            raise ValueError(f"log_subdir must be a relative path, got '{v}'")
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from environment variables.

        Args:
            environ: Environment mapping (defaults to ``os.environ``).

        Returns:
            Config with ``home`` taken from ``HOME``.
        """
        if environ is None:
            environ = os.environ
        return cls(home=environ.get("HOME"))

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Config instance.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            ConfigError: If the YAML is not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"expected a mapping, got {type(data).__name__}", field=str(path))

        return cls(**data)

    def get_home(self) -> str:
        """Get the home directory, raising if not available."""
        if not self.home:
            raise HomeDirectoryError()
        return self.home

    @property
    def log_dir(self) -> Path:
        """Folder the profiling logs are written to."""
        return Path(self.get_home()) / self.log_subdir
