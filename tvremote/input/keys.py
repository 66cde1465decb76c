from __future__ import annotations

from dataclasses import dataclass

_ALIASES = {
    "power": "power",
    "mode": "mode",
    "up": "channel_up",
    "+": "channel_up",
    "down": "channel_down",
    "-": "channel_down",
    "show": "display",
    "display": "display",
    "q": "quit",
    "quit": "quit",
    "exit": "quit",
}


@dataclass(frozen=True)
class InputEvent:
    kind: str  # "power" | "mode" | "channel_up" | "channel_down" | "set_channel" | "display" | "quit"
    value: int | None = None


def parse_command(text: str) -> InputEvent | None:
    """Map one console line to an event.

    Returns None for blank lines. Raises ValueError for anything unrecognised,
    including `ch` without a number.
    """

    parts = text.strip().lower().split()
    if not parts:
        return None

    head, args = parts[0], parts[1:]
    if head in ("ch", "channel"):
        if len(args) != 1:
            raise ValueError(f"{head} expects one channel number")
        try:
            return InputEvent(kind="set_channel", value=int(args[0]))
        except ValueError:
            raise ValueError(f"not a channel number: {args[0]!r}") from None

    kind = _ALIASES.get(head)
    if kind is None and not args:
        try:
            return InputEvent(kind="set_channel", value=int(head))
        except ValueError:
            pass

    if kind is None or args:
        raise ValueError(f"unknown command: {text.strip()}")
    return InputEvent(kind=kind)
