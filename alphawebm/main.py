"""
Entry point of the Alpha WebM converter.

The run has two phases:
1. The overwrite guard checks every output and asks before deleting existing
   ones. A refusal aborts everything with exit status 1.
2. The conversion pipeline encodes, cleans and swaps each file in turn. A file
   whose encode or clean fails is reported and skipped.
"""
import sys
from typing import Optional, Sequence

from loguru import logger
from rich.console import Console

from .cli import get_args
from .config.common import LOGGER_FORMAT, load_tool_dirs, tool_executable
from .config.encoding import FFMPEG_BIN, MKCLEAN_BIN
from .domain.exceptions import NoInputFilesException, UserDeclinedOverwriteException
from .domain.job import resolve_jobs
from .pipeline.conversion_pipeline import ConversionPipeline
from .services.overwrite_guard import OverwriteGuard, ask_operator
from .services.progress import ProgressReporter
from .utils.format_utils import format_elapsed


def stderr_sink(message: str) -> None:
    # Looked up per message: while a spinner is live, rich swaps sys.stderr for a
    # proxy that prints above the spinner.
    sys.stderr.write(message)


def configure_logger(level: str) -> None:
    logger.remove()
    logger.add(stderr_sink, level=level, format=LOGGER_FORMAT, colorize=sys.stderr.isatty())


def main(argv: Optional[Sequence[str]] = None, ask=ask_operator, console: Optional[Console] = None) -> int:
    """
    Runs the converter and returns the process exit status.

    Args:
        argv: Command-line arguments, defaults to `sys.argv[1:]`.
        ask: Callable used for the overwrite question.
        console: Console for progress and summary output.

    Returns:
        0 on success, 1 if no files were given or an overwrite was declined.
        With ``--strict-exit``, also 1 if any file failed.
    """
    args = get_args(argv)
    configure_logger(args.log_level)
    console = console or Console()

    try:
        if not args.files:
            raise NoInputFilesException("No input files given.")

        jobs = resolve_jobs(args.files)
        logger.debug(f"Resolved {len(jobs)} job(s): {[str(job.source_path) for job in jobs]}")
        OverwriteGuard(ask).run(jobs)
    except NoInputFilesException:
        console.print("Usage: alphawebm FILE [FILE ...]", markup=False, highlight=False)
        return 1
    except UserDeclinedOverwriteException as e:
        logger.info(str(e))
        console.print("Aborting", highlight=False)
        return 1

    tool_dirs = load_tool_dirs()
    ffmpeg_dir = tool_dirs["ffmpeg_dir"]
    pipeline = ConversionPipeline(
        reporter=ProgressReporter(console),
        ffmpeg=tool_executable(FFMPEG_BIN, ffmpeg_dir),
        mkclean=tool_executable(MKCLEAN_BIN, tool_dirs["mkclean_dir"]),
        ffprobe=tool_executable("ffprobe", ffmpeg_dir),
    )

    console.print()
    result = pipeline.run(jobs)
    console.print()
    console.print(f"Processed {result.processed} file(s) in {format_elapsed(result.elapsed)}", highlight=False)

    if result.failed:
        logger.warning(f"{len(result.failed)} file(s) failed: {', '.join(job.file_name for job in result.failed)}")
        if args.strict_exit:
            return 1
    logger.success("Alpha WebM conversion finished.")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
