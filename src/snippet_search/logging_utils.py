from __future__ import annotations

import logging
import sys
from typing import Literal, Optional, TextIO

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: LogLevel = "WARNING", stream: Optional[TextIO] = None) -> None:
    """
    Route all snippet_search loggers to one console handler.

    Defaults to stdout, resolved at call time so test runners that swap
    sys.stdout still capture the output. Reconfigures on every call.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(stream if stream is not None else sys.stdout)],
        force=True,
    )
