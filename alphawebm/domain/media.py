"""
Duration probing for input media files.

The duration is only used to turn FFmpeg's ``time=`` progress into a
percentage. A file that cannot be probed is still converted; it just gets a
spinner without a percentage.
"""
import re
from pathlib import Path

import ffmpeg
from loguru import logger


def parse_duration(duration_str: str) -> float:
    """
    Parses a duration string into total seconds.

    Handles the two formats FFmpeg tools print:
    1. Plain seconds as a float (e.g., "3600.5"), as in ffprobe's format section.
    2. A timecode 'HH:MM:SS.sss' (e.g., "01:00:00.50"), as in FFmpeg's
       ``time=`` progress field. Hours are optional.

    Args:
        duration_str: The string containing the duration to parse.

    Returns:
        The total duration in seconds. Returns 0.0 if parsing fails.
    """
    try:
        return float(duration_str)
    except ValueError:
        pattern = r"(?:(\d{1,2}):)?(\d{1,2}):(\d{1,2}(?:\.\d+)?)"
        match = re.fullmatch(pattern, duration_str.strip())
        if match:
            hours_str, minutes_str, seconds_str = match.groups()
            hours = int(hours_str) if hours_str else 0
            return float(hours * 3600 + int(minutes_str) * 60 + float(seconds_str))
        logger.debug(f"Could not parse duration string: {duration_str}")
    return 0.0


def probe_duration(path: Path, ffprobe: str = "ffprobe") -> float:
    """
    Returns the duration of a media file in seconds, or 0.0 if unknown.

    Uses `ffmpeg.probe` (ffprobe) and reads the container duration first, then
    falls back to the first stream that reports one.
    """
    try:
        probe = ffmpeg.probe(str(path), cmd=ffprobe)
    except ffmpeg.Error as e:
        stderr = e.stderr.decode("utf-8", errors="replace") if isinstance(e.stderr, bytes) else e.stderr
        logger.debug(f"ffmpeg.probe failed for {path}: {stderr}")
        return 0.0
    except OSError as e:
        logger.debug(f"ffprobe could not be run ({e}), progress percentage disabled.")
        return 0.0

    duration_str = (probe.get("format") or {}).get("duration")
    if duration_str:
        return parse_duration(duration_str)

    for stream in probe.get("streams", []):
        if stream.get("duration"):
            return parse_duration(stream["duration"])

    logger.debug(f"No duration found for {path}")
    return 0.0
