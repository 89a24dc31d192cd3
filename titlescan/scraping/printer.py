"""
Rendering of drained title scan outcomes.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from titlescan.domain.title_scan import Outcome
from titlescan.scraping.sync import ResultBuffer

SUCCESS_LABEL = "Title"
FAILURE_LABEL = "Error"


def drain(buffer: ResultBuffer) -> Iterator[Outcome]:
    """
    Lazily consume a closed buffer in arrival order. Single-pass.
    """

    yield from buffer.drain()


def render_outcome(outcome: Outcome) -> str:
    if outcome.succeeded:
        return f"{SUCCESS_LABEL} of {outcome.target}: {outcome.value}"
    return f"{FAILURE_LABEL} of {outcome.target}: {outcome.reason}"


def print_outcomes(buffer: ResultBuffer, stream: TextIO | None = None) -> int:
    """
    Write one line per outcome and return the number of lines written.
    """

    out = sys.stdout if stream is None else stream
    written = 0
    for outcome in drain(buffer):
        print(render_outcome(outcome), file=out)
        written += 1
    return written
