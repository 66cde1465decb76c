"""Unit tests for console command parsing."""

from __future__ import annotations

import io

import pytest

from tvremote.input.console import ConsoleInput
from tvremote.input.keys import InputEvent, parse_command


class TestParseCommand:
    @pytest.mark.parametrize(
        "text, kind",
        [
            ("power", "power"),
            ("MODE", "mode"),
            ("  up ", "channel_up"),
            ("+", "channel_up"),
            ("down", "channel_down"),
            ("-", "channel_down"),
            ("show", "display"),
            ("display", "display"),
            ("q", "quit"),
            ("exit", "quit"),
        ],
    )
    def test_simple_commands(self, text: str, kind: str) -> None:
        assert parse_command(text) == InputEvent(kind=kind)

    @pytest.mark.parametrize("text, value", [("ch 5", 5), ("channel 128", 128), ("42", 42), ("ch 300", 300)])
    def test_set_channel(self, text: str, value: int) -> None:
        assert parse_command(text) == InputEvent(kind="set_channel", value=value)

    def test_blank_line(self) -> None:
        assert parse_command("   \n") is None

    @pytest.mark.parametrize("text", ["ch", "ch x", "ch 1 2", "rewind", "power on"])
    def test_bad_commands_raise(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_command(text)


class TestConsoleInput:
    def test_poll_sequence_then_eof(self, capsys: pytest.CaptureFixture[str]) -> None:
        inp = ConsoleInput(stream=io.StringIO("up\nbogus\n\nch 9\n"))

        assert inp.poll() == InputEvent(kind="channel_up")
        assert inp.poll() is None
        assert "[input] unknown command: bogus" in capsys.readouterr().out
        assert inp.poll() is None
        assert inp.poll() == InputEvent(kind="set_channel", value=9)
        assert inp.poll() == InputEvent(kind="quit")
        assert inp.eof is True
        assert inp.poll() == InputEvent(kind="quit")
