"""Application configuration loaded from YAML and the environment.

Example ``mcpchat.yaml``::

    log_level: INFO
    server:
      name: my-tools
      version: "1.2.0"
    chat:
      api_key: ${ABACUS_API_KEY}
      base_url: https://api.abacus.ai
      timeout: 45
    telemetry:
      enabled: true
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from mcpchat.chat.config import ClientConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ConfigError(Exception):
    """Raised when a config file cannot be read, parsed, or validated."""


class ServerSettings(BaseModel):
    """Identity reported by the MCP server in ``initialize``."""

    name: str = Field(default="mcpchat-server", min_length=1)
    version: str = Field(default="1.0.0", min_length=1)


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class AppConfig(BaseModel):
    """Top-level configuration."""

    log_level: LogLevel = "WARNING"
    server: ServerSettings = Field(default_factory=ServerSettings)
    chat: ClientConfig = Field(default_factory=ClientConfig)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)


class ConfigLoader:
    """Load and validate a YAML config file into an :class:`AppConfig`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> AppConfig:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.

        Raises:
            ConfigError: On read errors, YAML parse errors or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Config YAML must be a mapping")

        try:
            return AppConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load *path* (or defaults) and fill unset chat settings from ``ABACUS_*`` variables."""
    config = ConfigLoader(path).load() if path is not None else AppConfig()
    config.chat = config.chat.merged_with(ClientConfig.from_env(environ))
    return config
