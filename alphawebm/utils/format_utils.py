"""
Helper functions for formatting data into human-readable strings.
"""

from datetime import timedelta


def format_elapsed(td_object: timedelta) -> str:
    """
    Formats a timedelta object into an "H:MM:SS" string.

    Hours are not zero-padded and are not wrapped at 24, so a timedelta of
    7261 seconds becomes "2:01:01" and one of 90000 seconds "25:00:00".
    Returns "0:00:00" if the input is not a timedelta.
    """
    if not isinstance(td_object, timedelta):
        return "0:00:00"

    total_seconds = max(0, int(td_object.total_seconds()))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02}:{seconds:02}"


def format_percent(percent: float | None) -> str:
    if percent is None:
        return ""
    return f"{min(100.0, max(0.0, percent)):.0f}%"
