from __future__ import annotations

import io

import pytest

from sprint import Level, OutputTarget, detect_output_target
from sprint.output import COLORS, ConsoleOutput, TerminalOutput, output_for, resolve_output_target, style


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_detect_tty_stream():
    assert detect_output_target(_Tty()) is OutputTarget.TERMINAL


def test_detect_plain_stream():
    assert detect_output_target(io.StringIO()) is OutputTarget.CONSOLE


def test_detect_stream_without_isatty():
    assert detect_output_target(object()) is OutputTarget.CONSOLE


def test_color_table_covers_every_level_and_is_readonly():
    assert set(COLORS) == set(Level)
    with pytest.raises(TypeError):
        COLORS[Level.INFO] = ""


def test_style_wraps_and_resets():
    assert style(Level.SUCCESS, "ok") == "\x1b[32mok\x1b[0m"


def test_output_for_picks_strategy():
    assert isinstance(output_for(OutputTarget.CONSOLE), ConsoleOutput)
    assert isinstance(output_for(OutputTarget.TERMINAL), TerminalOutput)


def test_resolve_detects_only_when_unset(monkeypatch):
    monkeypatch.setattr("sys.stdout", _Tty())
    assert resolve_output_target(None) is OutputTarget.TERMINAL
    assert resolve_output_target(OutputTarget.CONSOLE) is OutputTarget.CONSOLE
