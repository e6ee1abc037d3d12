"""Logging configuration for the node: terminal output only."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

__all__ = [
    "is_only_terminal_output_logging",
    "is_file_output_supported",
    "init_logging",
    "LOG_LEVEL_ENV",
]

LOG_LEVEL_ENV = "CHAINKIT_LOG"
_DEFAULT_LEVEL = logging.ERROR


def is_only_terminal_output_logging() -> bool:
    """Logging goes to the terminal only."""
    return True


def is_file_output_supported() -> bool:
    """Writing logs to a file is not supported."""
    return False


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def init_logging(log_file_path: str | os.PathLike[str] | Path | None = None) -> None:
    """Configure the root logger to write to standard error.

    The level is taken from the ``CHAINKIT_LOG`` environment variable.
    ``log_file_path`` is accepted but ignored, as file output is unsupported.
    """
    del log_file_path
    logging.basicConfig(
        level=_level_from_env(),
        stream=sys.stderr,
        format="[%(asctime)s %(levelname)s %(name)s] %(message)s",
        force=True,
    )