from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .television import MAX_CHANNEL, MIN_CHANNEL, InputMode, Television, channel_in_range


def resolve_profile_config_path(*, repo_root: Path, base_name: str, profile: str | None) -> tuple[Path, str]:
    """Return the config path to use for a given base file name and profile.

    Resolution order:
    1) config/{base_name}.{profile}.json if profile is provided and file exists
    2) config/{base_name}.json

    Returns (path, reason) where reason is "profile" or "fallback".
    """

    config_dir = repo_root / "config"
    if profile:
        prof = str(profile).strip().lower()
        prof_path = config_dir / f"{base_name}.{prof}.json"
        if prof_path.exists():
            return prof_path, "profile"
    return config_dir / f"{base_name}.json", "fallback"


def load_settings_profile(*, repo_root: Path, profile: str | None = None, path_override: Path | None = None) -> Settings:
    """Load settings honoring per-profile files and optional overrides."""

    if path_override is not None:
        print(f"[config] profile={profile or '-'} settings={path_override} (override)")
        return load_settings(path_override)
    path, reason = resolve_profile_config_path(repo_root=repo_root, base_name="settings", profile=profile)
    if not path.exists():
        print(f"[config] profile={profile or '-'} settings={path} (defaults)")
        return Settings()
    print(f"[config] profile={profile or '-'} settings={path} ({reason})")
    return load_settings(path)


@dataclass(frozen=True)
class Settings:
    power: bool = True
    input_mode: InputMode = InputMode.ANTENNA
    channel: int = MIN_CHANNEL
    debug: bool = False

    def build_television(self) -> Television:
        return Television(power=self.power, input_mode=self.input_mode, channel=self.channel)


def load_settings(path: Path) -> Settings:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: settings must be a JSON object")

    power = data.get("power", True)
    if not isinstance(power, bool):
        raise ValueError(f"{path}: power must be a boolean")

    mode_raw = str(data.get("input_mode", InputMode.ANTENNA.value)).strip().lower()
    try:
        input_mode = InputMode(mode_raw)
    except ValueError:
        raise ValueError(f"{path}: unknown input_mode {mode_raw!r}") from None

    channel_raw = data.get("channel", MIN_CHANNEL)
    if isinstance(channel_raw, bool) or not isinstance(channel_raw, int):
        raise ValueError(f"{path}: channel must be an integer, got {channel_raw!r}")
    channel = channel_raw
    if not channel_in_range(channel):
        raise ValueError(f"{path}: channel must be in {MIN_CHANNEL}-{MAX_CHANNEL}, got {channel}")

    debug = data.get("debug", False)
    if not isinstance(debug, bool):
        raise ValueError(f"{path}: debug must be a boolean")
    return Settings(power=power, input_mode=input_mode, channel=channel, debug=debug)
