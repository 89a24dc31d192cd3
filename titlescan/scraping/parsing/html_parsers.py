"""
BeautifulSoup-based document parsing capability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, BinaryIO

import requests
import urllib3
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from titlescan.scraping.errors import DocumentParseError

TITLE_SELECTOR = "title"


class DocumentParser(ABC):
    """
    Parsing abstraction: `parse` turns a byte stream into a document and
    `find_first` queries it.
    """

    @abstractmethod
    def parse(self, stream: BinaryIO) -> Any:
        """
        Read and parse `stream`. Raises DocumentParseError.
        """

    @abstractmethod
    def find_first(self, document: Any, selector: str) -> str:
        """
        Return the text of the first match for `selector`, or "" when absent.
        """


class HTMLDocumentParser(DocumentParser):
    """
    HTML parser backed by BeautifulSoup's built-in html.parser.
    """

    def __init__(self, *, features: str = "html.parser") -> None:
        self._features = features

    def parse(self, stream: BinaryIO) -> BeautifulSoup:
        try:
            markup = stream.read()
        except (OSError, urllib3.exceptions.HTTPError, requests.RequestException) as exc:
            raise DocumentParseError(f"unable to read body: {exc}") from exc

        try:
            return BeautifulSoup(markup, self._features)
        except ParserRejectedMarkup as exc:
            raise DocumentParseError(str(exc)) from exc

    def find_first(self, document: BeautifulSoup, selector: str) -> str:
        node = document.select_one(selector)
        if node is None:
            return ""
        return node.get_text().strip()
