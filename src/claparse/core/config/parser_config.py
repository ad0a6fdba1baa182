from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ConfigDict, ValidationError, field_validator

from claparse.constants import (
    DEFAULT_HELP_NAME,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    ENV_PREFIX,
)
from claparse.core.common.exceptions import ConfigurationError
from claparse.core.interfaces.model_bases import DomainModel
from claparse.marker_affix import validate_affix, validate_parameter_name

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class ParserConfig(DomainModel):
    """Settings shared by every parser built from this configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_prefix: str = DEFAULT_PREFIX
    default_suffix: str = DEFAULT_SUFFIX
    warn_on_marker_collision: bool = True
    validate_on_register: bool = True
    help_name: str = DEFAULT_HELP_NAME
    help_prefix: str = DEFAULT_PREFIX
    log_level: LogLevel = LogLevel.INFO

    @field_validator("default_prefix", "default_suffix", "help_prefix")
    @classmethod
    def _check_affix(cls, value: str) -> str:
        error = validate_affix(value)
        if error:
            raise ValueError(error)
        return value

    @field_validator("default_prefix", "help_prefix")
    @classmethod
    def _check_prefix_not_empty(cls, value: str) -> str:
        if value == "":
            raise ValueError("prefix cannot be empty")
        return value

    @field_validator("help_name")
    @classmethod
    def _check_help_name(cls, value: str) -> str:
        error = validate_parameter_name(value)
        if error:
            raise ValueError(error)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParserConfig:
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid parser configuration: {exc.error_count()} error(s)",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> ParserConfig:
        """Create a ParserConfig from ``CLAPARSE_*`` environment variables.

        Unset variables keep their defaults.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        defaults = cls()

        config: dict[str, Any] = {
            "default_prefix": env.get(
                f"{ENV_PREFIX}DEFAULT_PREFIX", defaults.default_prefix
            ),
            "default_suffix": env.get(
                f"{ENV_PREFIX}DEFAULT_SUFFIX", defaults.default_suffix
            ),
            "warn_on_marker_collision": _env_to_bool(
                f"{ENV_PREFIX}WARN_ON_MARKER_COLLISION",
                defaults.warn_on_marker_collision,
                env,
            ),
            "validate_on_register": _env_to_bool(
                f"{ENV_PREFIX}VALIDATE_ON_REGISTER",
                defaults.validate_on_register,
                env,
            ),
            "help_name": env.get(f"{ENV_PREFIX}HELP_NAME", defaults.help_name),
            "help_prefix": env.get(f"{ENV_PREFIX}HELP_PREFIX", defaults.help_prefix),
            "log_level": env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level),
        }
        return cls.from_dict(config)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ParserConfig:
        """Load a ParserConfig from a YAML mapping."""
        import yaml

        p = Path(path)
        if p.suffix.lower() not in {".yaml", ".yml"}:
            raise ConfigurationError(
                f"Unsupported configuration file format: {p.suffix}. "
                "Use YAML (.yaml/.yml)."
            )
        try:
            with p.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.error(f"Error loading configuration file {p}: {exc!s}")
            raise ConfigurationError(
                f"Cannot read configuration file: {p}", path=str(p)
            ) from exc

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping", path=str(p)
            )
        return cls.from_dict(data)

    def configure_logging(self, log_file: str | None = None) -> None:
        """Configure root logging at this configuration's level."""
        from claparse.core.common.logging_utils import configure_logging

        configure_logging(level=self.log_level.value, log_file=log_file)
