"""
Exceptions raised by the title scanning capabilities and primitives.
"""

from __future__ import annotations


class TitleScanError(Exception):
    """Base exception for title scan failures."""


class TransportError(TitleScanError):
    """Raised when a document cannot be retrieved at the transport level."""


class DocumentParseError(TitleScanError):
    """Raised when a response body cannot be read or parsed."""


class ResultBufferError(TitleScanError):
    """Base exception for result buffer misuse."""


class ResultBufferClosedError(ResultBufferError):
    """Raised when writing to or closing an already closed buffer."""


class ResultBufferFullError(ResultBufferError):
    """Raised when a write would exceed the buffer capacity."""


class ResultBufferOpenError(ResultBufferError):
    """Raised when draining a buffer that has not been closed."""


class BarrierError(TitleScanError):
    """Raised when a completion barrier is released more times than expected."""
