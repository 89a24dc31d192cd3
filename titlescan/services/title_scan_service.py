"""
titlescan/services/title_scan_service.py

Service orchestration for concurrent title scans.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import TextIO

from titlescan.config import TitleScanSettings, get_title_scan_settings
from titlescan.scraping.dispatcher import TitleScanDispatcher
from titlescan.scraping.fetcher import TitleFetcher
from titlescan.scraping.parsing.html_parsers import DocumentParser, HTMLDocumentParser
from titlescan.scraping.printer import print_outcomes
from titlescan.scraping.retrieval import RequestsRetriever, Retriever


class TitleScanService:
    """
    Fetches titles for a target list and prints one line per target.

    Without an injected retriever, each scan opens its own requests session
    and closes it once the report is printed.
    """

    def __init__(
        self,
        *,
        settings: TitleScanSettings | None = None,
        retriever: Retriever | None = None,
        parser: DocumentParser | None = None,
    ) -> None:
        self._settings = settings or get_title_scan_settings()
        self._retriever = retriever
        self._parser = parser or HTMLDocumentParser()

    def scan(
        self,
        *,
        targets: Sequence[str] | None = None,
        stream: TextIO | None = None,
    ) -> int:
        selected = list(targets) if targets is not None else list(self._settings.targets)
        if self._retriever is not None:
            return self._scan_with(self._retriever, selected, stream)

        retriever = self._build_retriever()
        try:
            return self._scan_with(retriever, selected, stream)
        finally:
            retriever.close()

    def _build_retriever(self) -> RequestsRetriever:
        return RequestsRetriever(
            user_agent=self._settings.user_agent,
            timeout_seconds=self._settings.timeout_seconds,
        )

    def _scan_with(
        self,
        retriever: Retriever,
        targets: list[str],
        stream: TextIO | None,
    ) -> int:
        dispatcher = TitleScanDispatcher(
            fetcher=TitleFetcher(retriever=retriever, parser=self._parser),
        )
        buffer = dispatcher.run(targets)
        return print_outcomes(buffer, stream=stream)


@lru_cache(maxsize=1)
def get_title_scan_service() -> TitleScanService:
    """
    Build and cache the title scan service.
    """

    return TitleScanService()
