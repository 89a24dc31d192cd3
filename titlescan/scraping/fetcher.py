"""
Per-target unit of work: retrieve one document and extract its title.
"""

from __future__ import annotations

import logging

from titlescan.domain.title_scan import (
    NON_SUCCESS_STATUS,
    PARSE_ERROR,
    RETRIEVAL_ERROR,
    Outcome,
)
from titlescan.scraping.errors import DocumentParseError, TransportError
from titlescan.scraping.logging_utils import log_event
from titlescan.scraping.parsing.html_parsers import TITLE_SELECTOR, DocumentParser
from titlescan.scraping.retrieval import Retriever
from titlescan.scraping.sync import CompletionBarrier, ResultBuffer

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODE = 200


class TitleFetcher:
    """
    Converts one target into exactly one Outcome.

    Every failure on the way (transport, status, parse) becomes a failed
    Outcome instead of an exception.
    """

    def __init__(
        self,
        *,
        retriever: Retriever,
        parser: DocumentParser,
        selector: str = TITLE_SELECTOR,
    ) -> None:
        self._retriever = retriever
        self._parser = parser
        self._selector = selector

    def fetch(self, target: str) -> Outcome:
        try:
            response = self._retriever.get(target)
        except TransportError as exc:
            return self._failed(target, RETRIEVAL_ERROR, str(exc))
        except Exception as exc:
            return self._failed(target, RETRIEVAL_ERROR, f"{type(exc).__name__}: {exc}")

        with response:
            if response.status_code != SUCCESS_STATUS_CODE:
                detail = f"{response.status_code} {response.reason}".strip()
                return self._failed(target, NON_SUCCESS_STATUS, detail)

            try:
                document = self._parser.parse(response.body)
                value = self._parser.find_first(document, self._selector)
            except DocumentParseError as exc:
                return self._failed(target, PARSE_ERROR, str(exc))
            except Exception as exc:
                return self._failed(target, PARSE_ERROR, f"{type(exc).__name__}: {exc}")

        log_event(
            logger,
            logging.INFO,
            "title_fetch_succeeded",
            target=target,
            title=value,
        )
        return Outcome.success(target, value)

    def run_unit(
        self,
        target: str,
        buffer: ResultBuffer,
        barrier: CompletionBarrier,
    ) -> None:
        """
        Fetch `target`, publish the Outcome, and mark the unit finished.
        """

        try:
            buffer.put(self.fetch(target))
        finally:
            barrier.done()

    @staticmethod
    def _failed(target: str, kind: str, detail: str) -> Outcome:
        log_event(
            logger,
            logging.WARNING,
            "title_fetch_failed",
            target=target,
            failure_kind=kind,
            error=detail,
        )
        return Outcome.failure(target, kind, detail)
