from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence, TextIO

from tvremote.core import remote
from tvremote.core.config import load_settings_profile
from tvremote.core.television import MAX_CHANNEL, MIN_CHANNEL, Television
from tvremote.input.console import ConsoleInput
from tvremote.input.keys import InputEvent


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tvremote")
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Select config profile (config/settings.<profile>.json).",
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Override settings config path (takes precedence over profile).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every dispatched event and ignored channel requests.",
    )
    return parser.parse_args(argv)


def dispatch(tv: Television, evt: InputEvent, *, debug: bool = False) -> bool:
    """Press one remote button. Returns False when the event asks to quit."""

    if debug:
        suffix = f" value={evt.value}" if evt.value is not None else ""
        print(f"[debug] event kind={evt.kind}{suffix}")

    if evt.kind == "quit":
        return False
    if evt.kind == "power":
        remote.toggle_power(tv)
    elif evt.kind == "mode":
        remote.toggle_input_mode(tv)
    elif evt.kind == "channel_up":
        remote.channel_up(tv)
    elif evt.kind == "channel_down":
        remote.channel_down(tv)
    elif evt.kind == "set_channel":
        before = tv.channel
        remote.set_channel(tv, int(evt.value if evt.value is not None else before))
        if debug and tv.channel == before and evt.value != before:
            print(f"[debug] set_channel ignored value={evt.value} range={MIN_CHANNEL}-{MAX_CHANNEL}")
    elif evt.kind == "display":
        remote.display_settings(tv)
    else:
        raise ValueError(f"unhandled event kind: {evt.kind!r}")
    return True


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None) -> int:
    args = _parse_args(argv)

    repo_root = Path(__file__).resolve().parents[1]
    settings_path = Path(args.settings).expanduser() if args.settings else None

    try:
        settings = load_settings_profile(repo_root=repo_root, profile=args.profile, path_override=settings_path)
        tv = settings.build_television()
    except (OSError, ValueError) as e:
        print(f"[config] ERROR {e}")
        return 2

    debug = bool(args.debug or settings.debug)
    inp = ConsoleInput(stream=stdin) if stdin is not None else ConsoleInput()

    print("tvremote")
    print("Controls: power, mode, up/+, down/-, ch N, show, q=Quit")
    print()

    while True:
        evt = inp.poll()
        if evt is None:
            continue
        if not dispatch(tv, evt, debug=debug):
            print("Exiting.")
            return 0


if __name__ == "__main__":
    raise SystemExit(main())
