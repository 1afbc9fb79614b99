"""
Defines custom exception types for the Alpha WebM converter.

The exceptions fall into two groups that are handled very differently:

- Batch-level exceptions (`NoInputFilesException`,
  `UserDeclinedOverwriteException`) stop the whole run before any file is
  converted.
- Per-file exceptions (`SubprocessFailureException` and its subclasses) mark a
  single job as failed and let the batch continue.

Filesystem errors raised while swapping the cleaned file into place are plain
`OSError`s and are not wrapped.

All custom exceptions inherit from the base `AlphaWebmException`.
"""
from pathlib import Path


class AlphaWebmException(Exception):
    """Base class for all custom exceptions in the Alpha WebM converter."""

    pass


# --- Batch-level Exceptions ---
class NoInputFilesException(AlphaWebmException):
    """Raised when the command line names no input files."""

    pass


class UserDeclinedOverwriteException(AlphaWebmException):
    """
    Raised when the operator refuses to overwrite an existing output file.

    A single refusal aborts the entire batch, including files that were not
    checked yet.
    """

    def __init__(self, target_path: Path):
        self.target_path = target_path
        super().__init__(f"Overwrite of '{target_path.name}' declined.")


# --- Pipeline Exceptions ---
class SubprocessFailureException(AlphaWebmException):
    """
    Raised when an external tool exits with a failure status.

    Attributes:
        step: Human-readable name of the failed step.
        cmd: The argument list that was executed.
        return_code: The exit status, or None if the tool could not be started.
        stderr_tail: The last lines the tool wrote to stderr.
    """

    step = "Command"

    def __init__(self, cmd: list[str], return_code: int | None, stderr_tail: str = ""):
        self.cmd = cmd
        self.return_code = return_code
        self.stderr_tail = stderr_tail
        if return_code is None:
            reason = f"'{cmd[0]}' could not be started"
        else:
            reason = f"exit code {return_code}"
        super().__init__(f"{self.step} failed ({reason})")


class EncodeFailedException(SubprocessFailureException):
    """Raised when the FFmpeg encode exits with a failure status."""

    step = "Encoding"


class CleanFailedException(SubprocessFailureException):
    """Raised when mkclean exits with a failure status."""

    step = "Cleaning"
