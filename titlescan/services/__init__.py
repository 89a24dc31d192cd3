"""
titlescan/services package marker.
"""

from titlescan.services.title_scan_service import TitleScanService, get_title_scan_service

__all__ = [
    "TitleScanService",
    "get_title_scan_service",
]
