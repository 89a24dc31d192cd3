"""
Run a concurrent title scan from CLI.
"""

from __future__ import annotations

import argparse

from titlescan.config import get_title_scan_settings
from titlescan.scraping.logging_utils import configure_logging
from titlescan.services import get_title_scan_service


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch page titles concurrently.")
    parser.add_argument(
        "targets",
        nargs="*",
        help="URLs to scan. Defaults to TITLE_SCAN_TARGETS or the built-in list.",
    )
    args = parser.parse_args(argv)

    configure_logging(get_title_scan_settings().log_level)
    get_title_scan_service().scan(targets=args.targets or None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
