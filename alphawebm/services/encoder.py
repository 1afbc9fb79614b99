"""
The two external steps of a conversion: encode with FFmpeg and clean with mkclean.

Both tools are treated as black boxes: an argument list goes in, an exit code
comes out. A non-zero exit (or a tool that cannot be started) raises the
step's `SubprocessFailureException` subclass.
"""
import re
from typing import Callable, Optional

from loguru import logger

from ..config.encoding import (
    ALPHA_METADATA,
    ALPHA_METADATA_STREAM,
    AUTO_ALT_REF,
    FFMPEG_BIN,
    MKCLEAN_BIN,
    MKCLEAN_FLAGS,
    PIXEL_FORMAT,
    VIDEO_BITRATE,
    VIDEO_CODEC,
)
from ..domain.exceptions import CleanFailedException, EncodeFailedException
from ..domain.job import ConversionJob
from ..domain.media import parse_duration
from ..utils.process_utils import CommandResult, run_cmd

PercentCallback = Callable[[Optional[float]], None]

FFMPEG_TIME_RE = re.compile(r"time=\s*(-?\d+:\d{2}:\d{2}(?:\.\d+)?)")


def build_encode_cmd(job: ConversionJob, ffmpeg: str = FFMPEG_BIN) -> list[str]:
    return [
        ffmpeg,
        "-i", str(job.source_path),
        "-c:v", VIDEO_CODEC,
        "-b:v", VIDEO_BITRATE,
        "-pix_fmt", PIXEL_FORMAT,
        f"-metadata:{ALPHA_METADATA_STREAM}", ALPHA_METADATA,
        "-auto-alt-ref", AUTO_ALT_REF,
        str(job.target_path),
    ]


def build_clean_cmd(job: ConversionJob, mkclean: str = MKCLEAN_BIN) -> list[str]:
    return [mkclean, *MKCLEAN_FLAGS, str(job.target_path)]


def progress_from_line(line: str, duration: float) -> Optional[float]:
    """
    Extracts the encode percentage from one line of FFmpeg's stderr.

    Args:
        line: A stderr line, typically ``frame=... time=00:00:01.20 ...``.
        duration: Input duration in seconds; 0 disables the percentage.

    Returns:
        A percentage capped at 100, or None if the line carries no usable time.
    """
    if duration <= 0:
        return None
    match = FFMPEG_TIME_RE.search(line)
    if not match or match.group(1).startswith("-"):
        return None
    return min(100.0, parse_duration(match.group(1)) / duration * 100)


def encode(
    job: ConversionJob,
    ffmpeg: str = FFMPEG_BIN,
    duration: float = 0.0,
    on_percent: Optional[PercentCallback] = None,
) -> CommandResult:
    """
    Encodes `job.source_path` into `job.target_path` as VP9 with alpha.

    Args:
        job: The job to encode.
        ffmpeg: The FFmpeg executable.
        duration: Input duration in seconds, used for the percentage.
        on_percent: Called whenever FFmpeg reports a new position.

    Raises:
        EncodeFailedException: If FFmpeg exits with a failure status.
    """
    cmd = build_encode_cmd(job, ffmpeg)

    def forward(line: str) -> None:
        percent = progress_from_line(line, duration)
        if percent is not None and on_percent:
            on_percent(percent)

    result = run_cmd(cmd, on_output=forward)
    if not result.ok:
        raise EncodeFailedException(cmd, result.return_code, result.stderr_tail)
    logger.info(f"Encoded {job.file_name} -> {job.target_path.name}")
    return result


def clean(job: ConversionJob, mkclean: str = MKCLEAN_BIN) -> CommandResult:
    """
    Runs mkclean on `job.target_path`; the optimized copy lands on `job.temp_path`.

    Raises:
        CleanFailedException: If mkclean exits with a failure status.
    """
    cmd = build_clean_cmd(job, mkclean)
    result = run_cmd(cmd)
    if not result.ok:
        raise CleanFailedException(cmd, result.return_code, result.stderr_tail)
    logger.info(f"Cleaned {job.target_path.name} -> {job.temp_path.name}")
    return result
