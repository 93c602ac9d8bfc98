import os
import sys
from typing import Optional

from loguru import logger


def get_splitter_format():
    return "\n" + "-" * 100


def resolve_stream_level(default: str) -> str:
    """Pick the console level from ``--stream_level`` or the environment."""
    stream_level = default
    if "--stream_level" in sys.argv:
        idx = sys.argv.index("--stream_level")
        if idx + 1 >= len(sys.argv):
            raise ValueError("--stream_level expects a level name")
        stream_level = sys.argv[idx + 1]
    if "stream_level" in os.environ:
        stream_level = os.environ["stream_level"]
    return stream_level.upper()


def loguru_logger(
    name,
    stream_level="DEBUG",
    file_level="DEBUG",
    filename: Optional[str] = None,
    enqueue: bool = True,
):
    # Remove default handlers to avoid duplicate logs
    logger.remove()

    stream_level = resolve_stream_level(stream_level)

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level}</level> | "
        "FILENAME: <cyan>{file}</cyan> - "
        "MODULE: <cyan>{module}</cyan> - "
        "FUNC: <cyan>{function}</cyan> - "
        "LINE: <cyan>{line}</cyan> :: "
        "<level>{message}</level>"
    )

    # stderr keeps rendered calendars on stdout clean
    logger.add(sys.stderr, level=stream_level, format=console_format, colorize=True)

    if filename is not None:
        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | "
            "{level} | "
            "FILENAME: {file} - "
            "MODULE: {module} - "
            "FUNC: {function} - "
            "LINE: {line} :: "
            "{message}" + get_splitter_format()
        )
        logger.add(filename, level=file_level, format=file_format, enqueue=enqueue)

    logger.debug(
        f"Logger '{name}' initialized with stream level '{stream_level}' and file level '{file_level}'"
    )

    return logger


__all__ = ("loguru_logger", "resolve_stream_level")
