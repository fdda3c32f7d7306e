"""Logging setup for the password command-line entrypoint."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: str, stream: TextIO | None = None) -> None:
    """Route log records to stderr so they never mix with passwords or records on stdout.

    Any handlers installed by an earlier call are replaced, so the latest
    `LOG_LEVEL` always wins within one process.
    """

    normalized_level = level.strip().upper() or "INFO"
    resolved_level = logging.getLevelName(normalized_level)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    logging.basicConfig(
        level=resolved_level,
        format=_LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )
