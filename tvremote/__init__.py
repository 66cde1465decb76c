"""tvremote - television and remote control model.

Core concept: a television is a small mutable record (power, input mode,
channel). The remote holds no state; every button forwards to the set it is
pointed at.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
