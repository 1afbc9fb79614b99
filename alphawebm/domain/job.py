"""
The unit of work of a conversion batch.

A `ConversionJob` is created from one command-line argument. All of its paths
are derived with plain path arithmetic; nothing here touches the filesystem.
"""
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..config.encoding import CLEAN_PREFIX, TARGET_SUFFIX


class JobState(Enum):
    """Lifecycle of a job: PENDING -> ENCODING -> CLEANING -> SWAPPING -> DONE, or FAILED."""

    PENDING = "pending"
    ENCODING = "encoding"
    CLEANING = "cleaning"
    SWAPPING = "swapping"
    DONE = "done"
    FAILED = "failed"


def target_path_for(source_path: Path) -> Path:
    return source_path.with_name(source_path.name + TARGET_SUFFIX)


def temp_path_for(source_path: Path) -> Path:
    """
    Returns the path mkclean writes its optimized copy to.

    mkclean names its output ``clean.<input name>`` in the input's directory, and
    its input is the target ``<source name>.webm``, which gives
    ``clean.<source name>.webm``. The prefix keeps it distinct from the target.
    """
    return source_path.parent / f"{CLEAN_PREFIX}{source_path.name}{TARGET_SUFFIX}"


@dataclass
class ConversionJob:
    """
    One input file and the paths derived from it.

    Attributes:
        source_path: Absolute path of the input file.
        target_path: Final output, ``<source_path>.webm``.
        temp_path: Output of the cleaning step, ``clean.<name>.webm`` next to the target.
        index: Zero-based position in the batch, for display only.
        total: Batch size, for display only.
        state: Current `JobState`.
        error: Reason of the failure once the job is FAILED.
    """

    source_path: Path
    target_path: Path
    temp_path: Path
    index: int = 0
    total: int = 1
    state: JobState = JobState.PENDING
    error: str | None = None

    @classmethod
    def from_argument(cls, raw_path: str, index: int = 0, total: int = 1) -> "ConversionJob":
        # abspath rather than Path.resolve(): no symlink lookups, no I/O.
        source_path = Path(os.path.abspath(raw_path))
        return cls(
            source_path=source_path,
            target_path=target_path_for(source_path),
            temp_path=temp_path_for(source_path),
            index=index,
            total=total,
        )

    @property
    def file_name(self) -> str:
        return self.source_path.name

    @property
    def target_dir(self) -> Path:
        return self.source_path.parent

    @property
    def position(self) -> str:
        """The ``i/N`` position shown in progress lines."""
        return f"{self.index + 1}/{self.total}"


def resolve_jobs(raw_paths: list[str]) -> list[ConversionJob]:
    """Builds one job per command-line argument, keeping the given order."""
    total = len(raw_paths)
    return [ConversionJob.from_argument(raw, i, total) for i, raw in enumerate(raw_paths)]
