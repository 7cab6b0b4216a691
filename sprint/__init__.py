from __future__ import annotations

from .level import Level
from .log import Logger
from .output import OutputTarget, detect_output_target

__all__ = [
    "Level",
    "Logger",
    "OutputTarget",
    "detect_output_target",
]
