"""Environment-driven settings for the command-line wrapper."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError, InvalidCasingError
from .keys import Casing


ENV_UNIXMODE = "ARGV2OBJECT_UNIXMODE"
ENV_CASING = "ARGV2OBJECT_CASING"
ENV_LOG_LEVEL = "ARGV2OBJECT_LOG_LEVEL"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(name: str, raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean (got {raw!r})")


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Settings read once at CLI start-up.

    Attributes:
        unixmode: Parse Unix-style flags instead of ``key=value`` pairs.
        casing: Key casing policy.
        log_level: Name of the ``logging`` level to configure.
    """

    unixmode: bool = False
    casing: Casing = Casing.SNAKE
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CliConfig:
        env = os.environ if environ is None else environ
        settings: dict[str, object] = {}

        if ENV_UNIXMODE in env:
            settings["unixmode"] = _parse_bool(ENV_UNIXMODE, env[ENV_UNIXMODE])

        if ENV_CASING in env:
            try:
                settings["casing"] = Casing.coerce(env[ENV_CASING])
            except InvalidCasingError as exc:
                raise ConfigError(f"{ENV_CASING}: {exc}") from exc

        if ENV_LOG_LEVEL in env:
            log_level = env[ENV_LOG_LEVEL].strip().upper()
            if log_level not in _LEVELS:
                raise ConfigError(
                    f"{ENV_LOG_LEVEL} must be one of {', '.join(_LEVELS)} "
                    f"(got {env[ENV_LOG_LEVEL]!r})"
                )
            settings["log_level"] = log_level

        return cls(**settings)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)
