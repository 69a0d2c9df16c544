"""Command-line configuration resolved from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "PODWIRE_LOG_LEVEL"
MANIFEST_ENV: Final[str] = "PODWIRE_MANIFEST"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass(frozen=True, slots=True)
class CliConfig:
    log_level: int = logging.INFO


def parse_log_level(value: str) -> int:
    """Translate a level name such as ``debug`` into its ``logging`` constant."""

    level = _LEVELS.get(value.strip().upper())
    if level is None:
        choices = ", ".join(_LEVELS)
        raise ConfigurationError(f"Invalid log level {value!r} (expected one of: {choices})")
    return level


def get_cli_config(*, log_level: str | None = None) -> CliConfig:
    level_name = log_level or optional_env_var(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    return CliConfig(log_level=parse_log_level(level_name))


def require_manifest_path(explicit: Path | None = None) -> Path:
    """Return the manifest path given on the command line or via ``PODWIRE_MANIFEST``."""

    if explicit is not None:
        return explicit
    return Path(require_env_vars([MANIFEST_ENV])[MANIFEST_ENV].strip()).expanduser()
