"""
Quoting of file arguments for display of command lines.

Commands are executed from argument lists, so quoting never reaches the
subprocess itself. The quoted form is what gets logged, so a logged command can
be pasted back into a shell on the same platform even when paths contain spaces.
"""
import sys


def is_windows(platform: str | None = None) -> bool:
    return (platform or sys.platform).startswith("win")


def escape_file_arg(arg: str, platform: str | None = None) -> str:
    """
    Escapes a single argument for the current (or given) platform.

    Windows-style platforms wrap the argument in double quotes. POSIX-style
    platforms backslash-escape spaces.

    Args:
        arg: The argument to escape.
        platform: A `sys.platform` style value. Defaults to the running platform.

    Returns:
        The escaped argument.
    """
    if is_windows(platform):
        return f'"{arg}"'
    return arg.replace(" ", "\\ ")


def format_command(cmd: list[str], platform: str | None = None) -> str:
    """Joins an argument list into a single display string, escaping arguments with spaces."""
    return " ".join(escape_file_arg(part, platform) if " " in part else part for part in cmd)
