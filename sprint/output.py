from __future__ import annotations

import sys
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, TextIO, Union

from colorama import Back, Fore, Style, just_fix_windows_console

from .level import Level


class OutputTarget(Enum):
    TERMINAL = "terminal"
    CONSOLE = "console"


# Level -> escape prefix. Every styled line is closed with Style.RESET_ALL.
COLORS: Mapping[Level, str] = MappingProxyType({
    Level.DEBUG: Fore.LIGHTBLACK_EX,
    Level.SUCCESS: Fore.GREEN,
    Level.INFO: Fore.CYAN,
    Level.WARN: Fore.YELLOW,
    Level.SEVERE: Fore.RED,
    Level.FATAL: Fore.RED + Back.YELLOW,
})


def style(level: Level, text: str) -> str:
    return f"{COLORS[level]}{text}{Style.RESET_ALL}"


def detect_output_target(stream: Optional[TextIO] = None) -> OutputTarget:
    s = sys.stdout if stream is None else stream
    isatty = getattr(s, "isatty", None)
    if isatty is not None and isatty():
        return OutputTarget.TERMINAL
    return OutputTarget.CONSOLE


def resolve_output_target(value: Optional[OutputTarget] = None) -> OutputTarget:
    """Use an explicit target, or detect one from stdout when None."""
    return detect_output_target() if value is None else value


class ConsoleOutput:
    target = OutputTarget.CONSOLE

    def write(self, text: str, level: Level) -> None:
        print(text)


class TerminalOutput:
    target = OutputTarget.TERMINAL

    def __init__(self) -> None:
        # no-op outside Windows; safe to call repeatedly
        just_fix_windows_console()

    def write(self, text: str, level: Level) -> None:
        print(style(level, text))


Output = Union[ConsoleOutput, TerminalOutput]


def output_for(target: OutputTarget) -> Output:
    if target is OutputTarget.TERMINAL:
        return TerminalOutput()
    return ConsoleOutput()
