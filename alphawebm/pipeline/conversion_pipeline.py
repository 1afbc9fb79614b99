"""
Sequential conversion of a batch of jobs.

Every job walks through an explicit state machine:

    PENDING -> ENCODING -> CLEANING -> SWAPPING -> DONE
                   |           |
                   +-----------+-----> FAILED

Failures of the encode or clean step are local: the job is marked FAILED and
the batch moves on to the next job. Failures of the swap step (deleting the
encoded file, renaming the cleaned one) are `OSError`s that are not caught and
end the whole run.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Optional

from loguru import logger

from ..config.encoding import (
    FFMPEG_BIN,
    MKCLEAN_BIN,
    PHASE_CLEANING,
    PHASE_ENCODING,
    PHASE_RENAMING,
)
from ..domain.exceptions import SubprocessFailureException
from ..domain.job import ConversionJob, JobState
from ..domain.media import probe_duration
from ..services.encoder import clean, encode
from ..services.progress import ProgressCallback, SilentReporter

DurationProbe = Callable[[ConversionJob], float]


@dataclass
class BatchResult:
    """
    Summary of a finished batch.

    Attributes:
        jobs: Every job that went through the pipeline, in processing order.
        elapsed: Wall-clock time spent on the batch.
    """

    jobs: list[ConversionJob] = field(default_factory=list)
    elapsed: timedelta = timedelta(0)

    @property
    def processed(self) -> int:
        return len(self.jobs)

    @property
    def succeeded(self) -> list[ConversionJob]:
        return [job for job in self.jobs if job.state is JobState.DONE]

    @property
    def failed(self) -> list[ConversionJob]:
        return [job for job in self.jobs if job.state is JobState.FAILED]


def swap(job: ConversionJob) -> None:
    """
    Installs the cleaned file under the target name.

    The cleaned copy already exists under `temp_path`, so the encoded file can
    be removed before the rename. Not atomic; errors propagate.
    """
    job.target_path.unlink()
    job.temp_path.rename(job.target_path)


class ConversionPipeline:
    def __init__(
        self,
        reporter: Optional[SilentReporter] = None,
        ffmpeg: str = FFMPEG_BIN,
        mkclean: str = MKCLEAN_BIN,
        ffprobe: str = "ffprobe",
        duration_probe: Optional[DurationProbe] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.reporter = reporter or SilentReporter()
        self.on_progress = on_progress or self.reporter.update
        self.ffmpeg = ffmpeg
        self.mkclean = mkclean
        self.duration_probe = duration_probe or (lambda job: probe_duration(job.source_path, ffprobe))

    def _transition(self, job: ConversionJob, state: JobState) -> None:
        logger.debug(f"[{job.position}] {job.file_name}: {job.state.value} -> {state.value}")
        job.state = state

    def process_job(self, job: ConversionJob) -> JobState:
        """
        Runs one job to DONE or FAILED.

        Returns:
            The final state of the job.

        Raises:
            OSError: If the swap step fails.
        """
        self.reporter.start(job)

        self._transition(job, JobState.ENCODING)
        self.on_progress(job, PHASE_ENCODING, None)
        try:
            duration = self.duration_probe(job)
            encode(
                job,
                self.ffmpeg,
                duration=duration,
                on_percent=lambda percent: self.on_progress(job, PHASE_ENCODING, percent),
            )

            self._transition(job, JobState.CLEANING)
            self.on_progress(job, PHASE_CLEANING, None)
            clean(job, self.mkclean)
        except SubprocessFailureException as e:
            self._transition(job, JobState.FAILED)
            job.error = str(e)
            # Stop the spinner before logging.
            self.reporter.fail(job, job.error)
            logger.error(f"{job.file_name} failed: {e}\n{e.stderr_tail}")
            return job.state

        self._transition(job, JobState.SWAPPING)
        self.on_progress(job, PHASE_RENAMING, None)
        swap(job)

        self._transition(job, JobState.DONE)
        self.reporter.succeed(job)
        logger.info(f"Finished {job.file_name} -> {job.target_path}")
        return job.state

    def run(self, jobs: list[ConversionJob]) -> BatchResult:
        """Processes every job in order and returns the batch summary."""
        result = BatchResult()
        started = datetime.now()
        try:
            for job in jobs:
                result.jobs.append(job)
                self.process_job(job)
        finally:
            self.reporter.close()
            result.elapsed = datetime.now() - started

        logger.info(
            f"Batch finished: {len(result.succeeded)} succeeded, {len(result.failed)} failed "
            f"in {result.elapsed}"
        )
        return result
