"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

# Top-level modules whose records reach the console; dependencies log to file only
CONSOLE_MODULES = frozenset({"app", "content_client", "settings", "sync_content", "__main__"})


def from_project(record: dict) -> bool:
    return (record["name"] or "").split(".")[0] in CONSOLE_MODULES


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Console sink for this project's modules, plus a daily content log file.

    The file sink records everything at DEBUG, including tier misses and
    retries from the resolver and client.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | {message}",
        level=level.upper(),
        colorize=True,
        filter=from_project,
    )

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "content_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
        )
        logger.debug("Content log in {}", log_dir)

    return logger
