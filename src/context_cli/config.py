"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    json_output: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def _log_level(value: str) -> str:
    level = value.strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown CONTEXT_LOG_LEVEL %r, using %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    json_output = os.environ.get("CONTEXT_JSON", "false").strip().lower() in _TRUTHY
    log_level = _log_level(os.environ.get("CONTEXT_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    return Settings(json_output=json_output, log_level=log_level)
