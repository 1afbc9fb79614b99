"""
Per-file progress display.

Each job gets one spinner line, ``<file> (<i>/<N>): <Phase> [<pct>%]``, that is
replaced by a persisted result line once the job finishes. Phase and percentage
changes reach the display through a `ProgressCallback`; `start`, `succeed`,
`fail` and `close` bracket each job. Tests swap in `SilentReporter`.
"""
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from ..config.encoding import FAILURE_SYMBOL, SUCCESS_SYMBOL
from ..domain.job import ConversionJob
from ..utils.format_utils import format_percent

ProgressCallback = Callable[[ConversionJob, str, Optional[float]], None]


def progress_text(job: ConversionJob, phase: str, percent: Optional[float] = None) -> str:
    suffix = f"({job.position}): {phase}"
    if percent is not None:
        suffix += f" {format_percent(percent)}"
    return f"{job.file_name} {suffix}"


class SilentReporter:
    """Reporter that shows nothing; also the interface every reporter implements."""

    def start(self, job: ConversionJob) -> None:
        pass

    def update(self, job: ConversionJob, phase: str, percent: Optional[float] = None) -> None:
        pass

    def succeed(self, job: ConversionJob) -> None:
        pass

    def fail(self, job: ConversionJob, reason: str) -> None:
        pass

    def close(self) -> None:
        pass


class ProgressReporter(SilentReporter):
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._status: Optional[Status] = None

    def start(self, job: ConversionJob) -> None:
        self._stop()
        self._status = self.console.status(escape(job.file_name), spinner="dots")
        self._status.start()

    def update(self, job: ConversionJob, phase: str, percent: Optional[float] = None) -> None:
        if self._status is None:
            self.start(job)
        self._status.update(escape(progress_text(job, phase, percent)))

    def succeed(self, job: ConversionJob) -> None:
        self._stop()
        self.console.print(f"{SUCCESS_SYMBOL} {escape(job.file_name)}", highlight=False)

    def fail(self, job: ConversionJob, reason: str) -> None:
        self._stop()
        self.console.print(
            f"{FAILURE_SYMBOL} {escape(job.file_name)} ({job.position}): [red]{escape(reason)}[/red]",
            highlight=False,
        )

    def close(self) -> None:
        self._stop()

    def _stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
