"""
Command-line entry point printing example catalog query results.

Usage:
  python -m catalog_query
  catalog-query

The data file and load strictness come from AppSettings
(CATALOG_DATA_FILE, CATALOG_ENFORCE_UNIQUE_NUMBERS, LOG_LEVEL).
"""

from __future__ import annotations

import logging
from typing import List, Optional

from catalog_query.core.errors import LoadError
from catalog_query.core.logging import configure_logging
from catalog_query.core.settings import AppSettings, get_app_settings
from catalog_query.repositories.lego_sets import LegoSetRepository

logger = logging.getLogger(__name__)


def format_names(names: List[str]) -> str:
    """Render names as a bracketed, comma-separated list without quotes."""
    return "[" + ", ".join(names) + "]"


# PUBLIC_INTERFACE
def main(settings: Optional[AppSettings] = None) -> int:
    """
    Load the catalog once and print the results of the example queries.

    Returns the process exit code: 0 on success, 1 if the catalog cannot be loaded.
    """
    settings = settings or get_app_settings()
    configure_logging(settings.LOG_LEVEL)

    try:
        repository = LegoSetRepository(
            settings.CATALOG_DATA_FILE,
            enforce_unique=settings.CATALOG_ENFORCE_UNIQUE_NUMBERS,
        )
    except LoadError:
        logger.exception("Failed to load catalog for %s", settings.APP_NAME)
        return 1

    repository.count_by_tag("Car")
    list(repository.names_by_number("3836"))
    print(repository.max_pieces())
    print(format_names(repository.names_by_theme("Games")))
    print(format_names(repository.names_with_pieces_less_than(150)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
