from __future__ import annotations

from enum import Enum


class Level(Enum):
    DEBUG = "debug"
    SUCCESS = "success"
    INFO = "info"
    WARN = "warn"
    SEVERE = "severe"
    FATAL = "fatal"
