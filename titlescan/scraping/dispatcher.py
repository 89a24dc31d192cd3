"""
Title scan dispatcher: fans targets out to worker threads and collects
their outcomes behind a completion barrier.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from titlescan.scraping.fetcher import TitleFetcher
from titlescan.scraping.logging_utils import log_event
from titlescan.scraping.sync import CompletionBarrier, ResultBuffer

logger = logging.getLogger(__name__)


class TitleScanDispatcher:
    """
    Runs one worker thread per target and returns the closed result buffer
    once every worker has produced its outcome.
    """

    def __init__(self, *, fetcher: TitleFetcher) -> None:
        self._fetcher = fetcher

    def run(self, targets: Sequence[str]) -> ResultBuffer:
        buffer = ResultBuffer(len(targets))
        barrier = CompletionBarrier(len(targets))

        log_event(logger, logging.INFO, "title_scan_dispatched", targets=len(targets))

        workers: list[threading.Thread] = []
        for index, target in enumerate(targets):
            worker = threading.Thread(
                target=self._fetcher.run_unit,
                args=(target, buffer, barrier),
                name=f"title-fetch-{index}",
                daemon=True,
            )
            worker.start()
            workers.append(worker)

        barrier.wait()
        for worker in workers:
            worker.join()
        buffer.close()

        log_event(
            logger,
            logging.INFO,
            "title_scan_completed",
            targets=len(targets),
            outcomes=len(buffer),
        )
        return buffer
