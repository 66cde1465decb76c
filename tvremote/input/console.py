from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .keys import InputEvent, parse_command


@dataclass
class ConsoleInput:
    """Line-oriented remote: one command per line read from `stream`.

    - power / mode: toggles
    - up, +, down, -: channel step
    - ch N, channel N, N: direct tune
    - show: print settings
    - q, quit, exit (or EOF): quit
    """

    stream: TextIO = field(default_factory=lambda: sys.stdin)
    eof: bool = False

    def poll(self) -> InputEvent | None:
        if self.eof:
            return InputEvent(kind="quit")

        line = self.stream.readline()
        if line == "":
            self.eof = True
            return InputEvent(kind="quit")

        try:
            return parse_command(line)
        except ValueError as e:
            print(f"[input] {e}")
            return None
