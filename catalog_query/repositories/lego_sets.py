from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterator, List, Union

from catalog_query.core.errors import DuplicateRecordError, EmptyCollectionError, MissingFieldError
from catalog_query.schemas.lego_set import LegoSet
from .base import Repository

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "brickset.json"


class LegoSetRepository(Repository[LegoSet]):
    """Repository of LEGO sets with catalog-specific queries."""

    def __init__(
        self, source: Union[str, Path] = DEFAULT_SOURCE, *, enforce_unique: bool = False
    ) -> None:
        self._enforce_unique = enforce_unique
        super().__init__(LegoSet, source)

    def _check_records(self) -> None:
        counts = Counter(lego_set.number for lego_set in self.get_all())
        duplicates = sorted(number for number, n in counts.items() if n > 1)
        if not duplicates:
            return
        if self._enforce_unique:
            raise DuplicateRecordError(self.source, duplicates)
        logger.warning(
            "Duplicate set numbers in %s (first match wins): %s",
            self.source,
            ", ".join(duplicates),
        )

    # PUBLIC_INTERFACE
    def count_by_tag(self, tag: str) -> int:
        """
        Count the sets carrying tag and print the count.

        Sets without tags never match. Matching is exact and case-sensitive.
        """
        count = sum(
            1 for lego_set in self.get_all() if lego_set.tags is not None and tag in lego_set.tags
        )
        print(f'Number of Lego sets with tag "{tag}" : {count}')
        return count

    # PUBLIC_INTERFACE
    def names_by_number(self, number: str) -> Iterator[str]:
        """Yield, and print as they are produced, the names of the sets numbered number."""
        for lego_set in self.get_all():
            if lego_set.number == number:
                print(lego_set.name)
                yield lego_set.name

    # PUBLIC_INTERFACE
    def max_pieces(self) -> int:
        """
        Return the piece count of the largest set.

        Raises:
            EmptyCollectionError: if the catalog holds no sets
        """
        sets = self.get_all()
        if not sets:
            raise EmptyCollectionError(f"no Lego sets loaded from {self.source}")
        return max(lego_set.pieces for lego_set in sets)

    # PUBLIC_INTERFACE
    def names_by_theme(self, theme: str) -> List[str]:
        """
        Return the names of the sets in theme, in catalog order.

        Raises:
            MissingFieldError: if a scanned set has no theme
        """
        names: List[str] = []
        for lego_set in self.get_all():
            if lego_set.theme is None:
                raise MissingFieldError("theme", lego_set.number)
            if lego_set.theme == theme:
                names.append(lego_set.name)
        return names

    # PUBLIC_INTERFACE
    def names_with_pieces_less_than(self, pieces: int) -> List[str]:
        """Return the names of the sets with fewer than pieces pieces, in catalog order."""
        return [lego_set.name for lego_set in self.filter(lambda s: s.pieces < pieces)]
