"""
Execution of external commands.

`run_cmd` blocks until the command exits; there is no timeout and no way to
cancel a running command. While the command runs, every stderr line can be
forwarded to a callback, which is how FFmpeg's progress output reaches the
spinner.
"""
import collections
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from ..config.common import STDERR_TAIL_LINES
from .path_utils import format_command

OutputCallback = Callable[[str], None]


@dataclass
class CommandResult:
    """
    Outcome of a finished command.

    Attributes:
        cmd: The executed argument list.
        return_code: Exit status, or None if the executable could not be started.
        stderr_tail: The last lines the command wrote to stderr.
    """

    cmd: list[str]
    return_code: int | None
    stderr_tail: str = ""

    @property
    def ok(self) -> bool:
        return self.return_code == 0


def run_cmd(cmd: list[str], on_output: Optional[OutputCallback] = None) -> CommandResult:
    """
    Executes an external command and waits for it to exit.

    The command runs without a shell. Its stdout is discarded and its stderr is
    read line by line: each line goes to `on_output` (if given) and the last
    `STDERR_TAIL_LINES` lines are kept for error reports.

    FFmpeg ends its progress updates with a carriage return rather than a
    newline, so both are treated as line ends.

    Args:
        cmd: The argument list to execute.
        on_output: Optional callback invoked with every stderr line.

    Returns:
        A `CommandResult`. Its return code is None when the executable was not
        found or could not be started.
    """
    display_cmd_str = format_command(cmd)
    logger.debug(f"Executing command: {display_cmd_str}")

    tail: collections.deque[str] = collections.deque(maxlen=STDERR_TAIL_LINES)
    try:
        process = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            shell=False,
        )
    except OSError as e:
        logger.error(
            f"Command could not be started ('{cmd[0]}'): {e}. Ensure it's in your system's PATH or configured correctly."
        )
        return CommandResult(cmd=cmd, return_code=None, stderr_tail=str(e))

    with process:
        buffer = ""
        while True:
            chunk = process.stderr.read(1)
            if not chunk:
                break
            if chunk in "\r\n":
                if buffer:
                    tail.append(buffer)
                    if on_output:
                        on_output(buffer)
                buffer = ""
            else:
                buffer += chunk
        if buffer:
            tail.append(buffer)
            if on_output:
                on_output(buffer)
        return_code = process.wait()

    stderr_tail = "\n".join(tail)
    if return_code != 0:
        logger.debug(f"Command stderr (error, rc={return_code}): {stderr_tail}")
    else:
        logger.trace(f"Command stderr (rc={return_code}): {stderr_tail}")
    return CommandResult(cmd=cmd, return_code=return_code, stderr_tail=stderr_tail)
