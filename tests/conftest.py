"""
Shared fakes for title scan tests.
"""

from __future__ import annotations

import io
import threading

import pytest

from titlescan.scraping.errors import TransportError
from titlescan.scraping.retrieval import RetrievalResponse, Retriever


class TrackingBody(io.BytesIO):
    """BytesIO that counts close calls."""

    def __init__(self, payload: bytes) -> None:
        super().__init__(payload)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class FailingBody(io.RawIOBase):
    """Body stream whose reads always fail."""

    def __init__(self) -> None:
        super().__init__()
        self.close_calls = 0

    def read(self, size: int = -1) -> bytes:
        raise OSError("connection reset while reading body")

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class FakeRetriever(Retriever):
    """
    In-process retriever keyed by locator.

    Values are either an Exception (raised as a transport failure) or a
    `(status_code, reason, body)` tuple where body is bytes or a stream.
    """

    def __init__(self, routes: dict[str, object]) -> None:
        self._routes = routes
        self._lock = threading.Lock()
        self.requested: list[str] = []
        self.responses: list[RetrievalResponse] = []

    def get(self, locator: str) -> RetrievalResponse:
        with self._lock:
            self.requested.append(locator)
        route = self._routes.get(locator)
        if route is None:
            raise TransportError(f"name resolution failed for {locator}")
        if isinstance(route, Exception):
            raise TransportError(str(route))

        status_code, reason, body = route
        stream = TrackingBody(body) if isinstance(body, bytes) else body
        response = RetrievalResponse(status_code=status_code, reason=reason, body=stream)
        with self._lock:
            self.responses.append(response)
        return response


@pytest.fixture()
def scenario_routes() -> dict[str, object]:
    return {
        "https://a.example/": (200, "OK", b"<html><head><title>X</title></head></html>"),
        "https://b.example/": ConnectionRefusedError("connection refused"),
        "https://c.example/": (404, "Not Found", b"<html><title>missing</title></html>"),
    }


@pytest.fixture()
def fake_retriever(scenario_routes: dict[str, object]) -> FakeRetriever:
    return FakeRetriever(scenario_routes)


@pytest.fixture()
def make_retriever():
    """Factory for FakeRetriever instances with custom routes."""
    return FakeRetriever


@pytest.fixture()
def failing_body() -> FailingBody:
    return FailingBody()


class UnexpectedErrorRetriever(Retriever):
    """
    Delegates to `inner` except for `broken` locators, which raise a plain
    ValueError the way an unwrapped library error would.
    """

    def __init__(self, inner: Retriever, broken: set[str]) -> None:
        self._inner = inner
        self._broken = broken

    def get(self, locator: str) -> RetrievalResponse:
        if locator in self._broken:
            raise ValueError(f"unsupported locator {locator}")
        return self._inner.get(locator)


@pytest.fixture()
def unexpected_error_retriever(fake_retriever: FakeRetriever) -> UnexpectedErrorRetriever:
    return UnexpectedErrorRetriever(fake_retriever, broken={"bad"})
