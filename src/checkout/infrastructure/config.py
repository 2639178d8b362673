"""Runtime settings, read from the environment.

Only logging is configurable; everything else about a checkout is
decided by the caller.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMATS = ("console", "json")


class ConfigError(ValueError):
    """An environment variable held an unusable value."""


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = "console"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(
                f"Unknown log format: {self.log_format!r} "
                f"(expected one of {', '.join(LOG_FORMATS)})"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            log_level=env.get("CHECKOUT_LOG_LEVEL", "WARNING").upper(),
            log_format=env.get("CHECKOUT_LOG_FORMAT", "console").lower(),
        )
