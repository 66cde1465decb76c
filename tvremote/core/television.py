from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

MIN_CHANNEL = 1
MAX_CHANNEL = 128


class InputMode(str, Enum):
    """Signal source the set is tuned from."""

    CABLE = "cable"
    ANTENNA = "antenna"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def toggled(self) -> "InputMode":
        return InputMode.CABLE if self is InputMode.ANTENNA else InputMode.ANTENNA


def channel_in_range(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_CHANNEL <= value <= MAX_CHANNEL


@dataclass
class Television:
    """Power, input mode and channel of a single set.

    Invariant: `MIN_CHANNEL <= channel <= MAX_CHANNEL`. Construction rejects
    out-of-range channels; `set_channel` silently ignores them. Non-integer
    channels (floats, bools) count as out of range.
    """

    power: bool = True
    input_mode: InputMode = InputMode.ANTENNA
    channel: int = MIN_CHANNEL

    def __post_init__(self) -> None:
        self.power = bool(self.power)
        self.input_mode = InputMode(self.input_mode)
        if not channel_in_range(self.channel):
            raise ValueError(f"channel must be an integer in {MIN_CHANNEL}-{MAX_CHANNEL}, got {self.channel!r}")

    def toggle_power(self) -> None:
        self.power = not self.power

    def toggle_input_mode(self) -> None:
        self.input_mode = self.input_mode.toggled()

    def channel_up(self) -> None:
        if self.channel < MAX_CHANNEL:
            self.channel += 1
        else:
            self.channel = MIN_CHANNEL

    def channel_down(self) -> None:
        if self.channel > MIN_CHANNEL:
            self.channel -= 1
        else:
            self.channel = MAX_CHANNEL

    def set_channel(self, value: int) -> None:
        """Tune directly to `value`; out-of-range values are ignored."""

        if channel_in_range(value):
            self.channel = value

    def settings_lines(self) -> list[str]:
        if not self.power:
            return []
        return [f"Mode: {self.input_mode.label}", f"Channel: {self.channel}"]

    def display_settings(self, stream: TextIO | None = None) -> None:
        """Write the on-screen readout. Nothing is written while the set is off."""

        out = stream if stream is not None else sys.stdout
        for line in self.settings_lines():
            print(line, file=out, flush=True)
