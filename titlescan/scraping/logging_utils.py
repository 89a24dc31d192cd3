"""
Structured logging helpers for title scanning.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one structured log line as compact JSON.
    """

    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure root logging once for the CLI process.

    Log lines go to stderr so stdout only carries the report.
    """

    logging.basicConfig(
        level=getattr(logging, log_level.strip().upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
