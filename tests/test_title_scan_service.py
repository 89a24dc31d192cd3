"""
tests/test_title_scan_service.py

End-to-end tests for TitleScanService and the CLI entry point with an
in-process retriever standing in for the network.
"""

from __future__ import annotations

import io
import logging
from unittest.mock import patch

import pytest

from scripts import run_title_scan
from titlescan.config import TitleScanSettings
from titlescan.services.title_scan_service import TitleScanService

A = "https://a.example/"
B = "https://b.example/"
C = "https://c.example/"


def test_scan_prints_one_line_per_target(fake_retriever) -> None:
    service = TitleScanService(settings=TitleScanSettings(), retriever=fake_retriever)
    out = io.StringIO()

    written = service.scan(targets=[A, B, C], stream=out)

    lines = out.getvalue().splitlines()
    assert written == 3
    assert sorted(lines) == sorted(
        [
            f"Title of {A}: X",
            f"Error of {B}: retrieval error: connection refused",
            f"Error of {C}: non-success status: 404 Not Found",
        ]
    )


def test_scan_uses_configured_targets_by_default(fake_retriever) -> None:
    settings = TitleScanSettings(targets=(A, C))
    service = TitleScanService(settings=settings, retriever=fake_retriever)

    written = service.scan(stream=io.StringIO())

    assert written == 2
    assert sorted(fake_retriever.requested) == [A, C]


def test_scan_logs_structured_events(fake_retriever, caplog) -> None:
    service = TitleScanService(settings=TitleScanSettings(), retriever=fake_retriever)

    with caplog.at_level(logging.INFO, logger="titlescan"):
        service.scan(targets=[A, B], stream=io.StringIO())

    messages = [record.getMessage() for record in caplog.records]
    assert any('"event": "title_scan_dispatched"' in message for message in messages)
    assert any('"event": "title_fetch_failed"' in message for message in messages)
    assert any('"event": "title_scan_completed"' in message for message in messages)


def test_cli_exits_zero_even_when_every_fetch_fails(make_retriever, capsys) -> None:
    service = TitleScanService(settings=TitleScanSettings(), retriever=make_retriever({}))

    with patch.object(run_title_scan, "get_title_scan_service", return_value=service):
        exit_code = run_title_scan.main([B, C])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all("retrieval error" in line for line in lines)


def test_explicit_empty_target_list_scans_nothing(fake_retriever) -> None:
    settings = TitleScanSettings(targets=(A, C))
    service = TitleScanService(settings=settings, retriever=fake_retriever)
    out = io.StringIO()

    written = service.scan(targets=[], stream=out)

    assert written == 0
    assert out.getvalue() == ""
    assert fake_retriever.requested == []


def test_scan_closes_the_session_it_opens(fake_retriever) -> None:
    service = TitleScanService(settings=TitleScanSettings(targets=(A,)))

    with patch.object(
        TitleScanService, "_build_retriever", return_value=fake_retriever
    ), patch.object(fake_retriever, "close", create=True) as close:
        service.scan(stream=io.StringIO())

    close.assert_called_once_with()


def test_scan_closes_session_when_printing_fails(fake_retriever) -> None:
    service = TitleScanService(settings=TitleScanSettings(targets=(A,)))

    with patch.object(
        TitleScanService, "_build_retriever", return_value=fake_retriever
    ), patch.object(fake_retriever, "close", create=True) as close, patch(
        "titlescan.services.title_scan_service.print_outcomes",
        side_effect=OSError("broken pipe"),
    ):
        with pytest.raises(OSError, match="broken pipe"):
            service.scan(stream=io.StringIO())

    close.assert_called_once_with()
