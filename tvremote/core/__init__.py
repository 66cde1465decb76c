"""Device state and the controller that drives it."""

from .television import MAX_CHANNEL, MIN_CHANNEL, InputMode, Television

__all__ = ["InputMode", "MAX_CHANNEL", "MIN_CHANNEL", "Television"]
