"""Player-facing message text."""

from __future__ import annotations


def format_seconds(milliseconds: int) -> str:
    """Render an interval like ``7000`` as ``"7"`` and ``1500`` as ``"1.5"``."""

    return f"{milliseconds / 1000:.2f}".rstrip("0").rstrip(".")


TIME_STOPPED = "Time stopped."
TIME_RESUMED = "Time resumed."
TIME_STOPPED_AT_TIME = "Time stopped for the night."
TIME_STOPPED_GLOBALLY = "Time is stopped everywhere."
TIME_STOPPED_HERE = "Time is stopped here."
CONFIG_RELOADED = "Time settings reloaded."
TIME_RESET = "Time flow reset to defaults."


def speed_changed(milliseconds: int) -> str:
    return f"10 minutes now last {format_seconds(milliseconds)} seconds."


def speed_here(milliseconds: int) -> str:
    return f"10 minutes here last {format_seconds(milliseconds)} seconds."


def auto_cause_changed(old: object, new: object) -> str:
    return f"Automatic freeze changed from {old} to {new}."
