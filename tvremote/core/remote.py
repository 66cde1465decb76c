"""Remote control buttons.

Stateless: each function forwards to the `Television` it is given.
"""

from __future__ import annotations

from typing import TextIO

from .television import Television


def toggle_power(tv: Television) -> None:
    tv.toggle_power()


def toggle_input_mode(tv: Television) -> None:
    tv.toggle_input_mode()


def channel_up(tv: Television) -> None:
    tv.channel_up()


def channel_down(tv: Television) -> None:
    tv.channel_down()


def set_channel(tv: Television, channel: int) -> None:
    tv.set_channel(channel)


def display_settings(tv: Television, stream: TextIO | None = None) -> None:
    tv.display_settings(stream)
