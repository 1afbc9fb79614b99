"""
Pre-flight check of existing outputs.

Runs over every job, in input order, before any file is converted. An existing
output is only deleted after the operator confirms it; a single refusal aborts
the whole batch.
"""
from typing import Callable

from loguru import logger
from rich.prompt import Prompt
from rich.text import Text

from ..domain.exceptions import UserDeclinedOverwriteException
from ..domain.job import ConversionJob

AskCallback = Callable[[str], str]


def ask_operator(question: str) -> str:
    """
    Asks a free-form question on the terminal and returns the raw answer.

    A closed stdin gives the empty answer, which every caller reads as "no".
    """
    try:
        # Text keeps "[n]" from being parsed as console markup.
        return Prompt.ask(Text(question), default="", show_default=False)
    except EOFError:
        logger.debug("stdin closed while asking, using the default answer.")
        return ""


def check_target_not_existing(job: ConversionJob, ask: AskCallback = ask_operator) -> bool:
    """
    Makes sure `job.target_path` does not exist, asking before deleting it.

    Errors other than "does not exist" during the existence test are treated as
    if the file did not exist.

    Returns:
        True if the target is free (or was deleted after confirmation), False if
        the operator declined.
    """
    try:
        job.target_path.stat()
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.debug(f"Could not stat {job.target_path}, assuming it does not exist: {e}")
        return True

    answer = ask(f'File "{job.target_path.name}" exists. Overwrite? (y/n [n])')
    if answer.strip().lower() != "y":
        logger.info(f"Overwrite of {job.target_path} declined.")
        return False

    job.target_path.unlink()
    logger.info(f"Deleted existing output {job.target_path}")
    return True


class OverwriteGuard:
    def __init__(self, ask: AskCallback = ask_operator):
        self.ask = ask

    def run(self, jobs: list[ConversionJob]) -> list[ConversionJob]:
        """
        Checks every job and returns the list of authorized jobs.

        Raises:
            UserDeclinedOverwriteException: On the first declined overwrite.
                Jobs after it are not checked.
        """
        for job in jobs:
            if not check_target_not_existing(job, self.ask):
                raise UserDeclinedOverwriteException(job.target_path)
        return jobs
