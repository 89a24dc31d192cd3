"""
titlescan/domain package marker.
"""

from titlescan.domain.title_scan import (
    FAILURE_KINDS,
    NON_SUCCESS_STATUS,
    PARSE_ERROR,
    RETRIEVAL_ERROR,
    Outcome,
)

__all__ = [
    "FAILURE_KINDS",
    "NON_SUCCESS_STATUS",
    "Outcome",
    "PARSE_ERROR",
    "RETRIEVAL_ERROR",
]
