"""Application configuration helpers."""

from __future__ import annotations

from .cli import CliConfig, get_cli_config, parse_log_level, require_manifest_path
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging

__all__ = [
    "CliConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "configure_logging",
    "get_cli_config",
    "optional_env_var",
    "parse_log_level",
    "require_env_vars",
    "require_manifest_path",
]
