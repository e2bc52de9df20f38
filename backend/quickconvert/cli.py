"""Launcher entry point: ``quickconvert 42 km to miles`` prints a JSON result feed."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from quickconvert.config import ConfigurationError, get_settings
from quickconvert.core.format.formatter import MeasureFormatter
from quickconvert.core.service import run_query

EXIT_OK = 0
EXIT_INVALID_QUERY = 1
EXIT_CONFIG_ERROR = 2


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"quickconvert: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # stdout is reserved for the feed
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    outcome = run_query(" ".join(args), MeasureFormatter(settings.decimal_places))
    print(outcome.feed.to_json())
    return EXIT_OK if outcome.ok else EXIT_INVALID_QUERY


if __name__ == "__main__":
    sys.exit(main())
