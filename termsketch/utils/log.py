"""Process-wide logging setup shared by the server and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured = False


def parse_level(name: str, default: int = logging.INFO) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names give ``default``."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Attach one console handler to the root logger.

    Later calls only adjust the level, so importing the app and running the
    CLI in one process does not duplicate output.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    root.addHandler(handler)
    _configured = True
