"""
Common configuration settings used throughout the application.

This module holds the logging format and loads user-specific tool locations from
an optional `config.user.yaml` file at the project root, so the FFmpeg and
mkclean executables can be pointed at without touching the source code.
"""
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Path Configuration ---
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"


def load_tool_dirs(config_path: Path = USER_CONFIG_PATH) -> dict[str, Path | None]:
    """
    Reads the tool directories from the user config file.

    The file is optional. A missing file means the executables are looked up on
    the system PATH. A file that cannot be read or parsed is logged and ignored.

    Args:
        config_path: Location of the YAML config file.

    Returns:
        A dict with the keys ``ffmpeg_dir`` and ``mkclean_dir``. A value is None
        when the directory was not configured.
    """
    tool_dirs: dict[str, Path | None] = {"ffmpeg_dir": None, "mkclean_dir": None}

    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Relying on system PATH for executables.")
        return tool_dirs

    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return tool_dirs

    if not isinstance(user_config, dict) or "paths" not in user_config:
        return tool_dirs

    paths_config = user_config.get("paths") or {}
    if not isinstance(paths_config, dict):
        logger.warning(f"Ignoring 'paths' in '{config_path}': expected a mapping, got {type(paths_config).__name__}.")
        return tool_dirs

    for key in tool_dirs:
        dir_str = paths_config.get(key)
        if not dir_str:
            continue
        if not isinstance(dir_str, str):
            logger.warning(f"Ignoring 'paths.{key}' in '{config_path}': expected a directory path, got {dir_str!r}.")
            continue
        tool_dirs[key] = Path(dir_str)
    return tool_dirs


def tool_executable(name: str, tool_dir: Path | None) -> str:
    """Returns the executable to invoke, prefixed by its configured directory if any."""
    if tool_dir is None:
        return name
    return str(tool_dir / name)


# --- Logging Configuration ---
# The format string for the Loguru logger.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Kept above INFO by default so log lines do not tear through the spinner.
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Number of trailing stderr lines kept from a subprocess for error reports.
STDERR_TAIL_LINES = 20
