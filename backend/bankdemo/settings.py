from __future__ import annotations

import logging
import os
from dataclasses import dataclass


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    log_level: int


def _log_level() -> int:
    env = os.getenv("BANKDEMO_LOG_LEVEL")
    if not env or not env.strip():
        return logging.WARNING

    level = logging.getLevelName(env.strip().upper())
    # getLevelName renvoie "Level X" pour un nom inconnu
    if not isinstance(level, int):
        log.warning("BANKDEMO_LOG_LEVEL invalid (got '%s'), using WARNING", env)
        return logging.WARNING
    return level


def get_settings() -> Settings:
    return Settings(log_level=_log_level())
