from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from datetime import datetime
from typing import Any, Optional

from .level import Level
from .output import Output, OutputTarget, output_for, resolve_output_target

# Set once in __init__; only quiet_mode may change afterwards.
_FIXED = ("owner", "include_timestamp", "production_mode", "output_target")


@dataclass
class Logger:
    """Prints messages tagged with ``<owner>`` to stdout.

    Terminal output is colored by level; anything else gets plain text.
    ``output_target`` may be given explicitly as an ``OutputTarget``,
    otherwise it is detected from stdout when the logger is created.
    """

    owner: str
    include_timestamp: bool = False
    production_mode: bool = False
    quiet_mode: bool = False
    output_target: Optional[OutputTarget] = None
    _out: Optional[Output] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        target = resolve_output_target(self.output_target)
        object.__setattr__(self, "output_target", target)
        object.__setattr__(self, "_out", output_for(target))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FIXED and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    @property
    def timestamp(self) -> str:
        if not self.include_timestamp:
            return ""
        return f"[{datetime.now().isoformat(sep=' ', timespec='microseconds')}] "

    def format(self, message: Any) -> str:
        content = str(message).replace("\n", "\n" + " " * (3 + len(self.owner)))
        return f"{self.timestamp}<{self.owner}> {content}"

    def log(self, message: Any, level: Level = Level.INFO) -> None:
        if self.quiet_mode:
            return
        if self.production_mode and level is Level.DEBUG:
            return
        self._out.write(self.format(message), level)

    def debug(self, message: Any) -> None:
        self.log(message, Level.DEBUG)

    def success(self, message: Any) -> None:
        self.log(message, Level.SUCCESS)

    def info(self, message: Any) -> None:
        self.log(message, Level.INFO)

    def warn(self, message: Any) -> None:
        self.log(message, Level.WARN)

    def severe(self, message: Any) -> None:
        self.log(message, Level.SEVERE)

    def fatal(self, message: Any) -> None:
        self.log(message, Level.FATAL)

    # short names
    d = debug
    s = success
    i = information = info
    w = warning = warn
    sv = severe
    f = fatal

    def __call__(self, message: Any) -> None:
        self.info(message)
