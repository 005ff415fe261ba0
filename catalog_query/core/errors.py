"""Exceptions raised while loading and querying catalog records."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union


class CatalogError(Exception):
    """Base class for all catalog errors."""


class LoadError(CatalogError):
    """Raised when a record source is missing, unreadable, or malformed."""

    def __init__(self, source: Union[str, Path], message: str) -> None:
        self.source = str(source)
        super().__init__(f"{self.source}: {message}")


class DuplicateRecordError(LoadError):
    """Raised when strict loading finds the same identifier more than once."""

    def __init__(self, source: Union[str, Path], duplicates: Sequence[str]) -> None:
        self.duplicates = tuple(duplicates)
        super().__init__(source, f"duplicate identifiers: {', '.join(self.duplicates)}")


class EmptyCollectionError(CatalogError):
    """Raised when a query needs at least one record and there are none."""


class MissingFieldError(CatalogError):
    """Raised when a record lacks a field a query depends on."""

    def __init__(self, field: str, record: Optional[str] = None) -> None:
        self.field = field
        self.record = record
        where = f" on record {record!r}" if record is not None else ""
        super().__init__(f"missing mandatory field {field!r}{where}")


__all__ = [
    "CatalogError",
    "DuplicateRecordError",
    "EmptyCollectionError",
    "LoadError",
    "MissingFieldError",
]
