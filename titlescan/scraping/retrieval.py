"""
Document retrieval capability for title scanning.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import BinaryIO

import requests

from titlescan.config import DEFAULT_USER_AGENT
from titlescan.scraping.errors import TransportError


class RetrievalResponse:
    """
    Status and body stream of one retrieval.

    Use as a context manager; the underlying stream is released exactly once.
    """

    def __init__(
        self,
        *,
        status_code: int,
        reason: str,
        body: BinaryIO,
        close: Callable[[], None] | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self._close = close or body.close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._close()

    def __enter__(self) -> "RetrievalResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class Retriever(ABC):
    """
    Retrieval abstraction: `get(locator)` returns a response or raises
    TransportError.
    """

    @abstractmethod
    def get(self, locator: str) -> RetrievalResponse:
        """
        Issue one request to `locator`.
        """


class RequestsRetriever(Retriever):
    """
    requests-backed retriever. Redirects are not followed.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: float | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._headers = {"User-Agent": user_agent}
        self._timeout_seconds = timeout_seconds

    def get(self, locator: str) -> RetrievalResponse:
        try:
            response = self._session.get(
                locator,
                headers=self._headers,
                timeout=self._timeout_seconds,
                allow_redirects=False,
                stream=True,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc

        response.raw.decode_content = True
        return RetrievalResponse(
            status_code=response.status_code,
            reason=response.reason or "",
            body=response.raw,
            close=response.close,
        )

    def close(self) -> None:
        self._session.close()
