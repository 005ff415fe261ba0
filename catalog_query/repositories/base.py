from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generic, Iterator, List, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from catalog_query.core.errors import LoadError
from catalog_query.core.logging import source_var

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def resolve_source(source: Union[str, Path]) -> Path:
    """
    Resolve a record source location.

    Absolute paths and paths that exist relative to the working directory are
    used as given. Any other relative name is looked up in the bundled data
    directory; if it is not there either, the original path is returned so the
    load reports it as missing.
    """
    path = Path(source)
    if path.is_absolute() or path.exists():
        return path
    bundled = DATA_DIR / path
    if bundled.exists():
        return bundled
    return path


class Repository(Generic[T]):
    """
    Read-only repository over records of a single pydantic model type.

    The whole source is deserialized once at construction and kept in memory
    as an immutable tuple in source order. Subclasses add domain queries on
    top of get_all().
    """

    def __init__(self, record_type: Type[T], source: Union[str, Path]) -> None:
        self.record_type = record_type
        self._source = resolve_source(source)
        token = source_var.set(str(self._source))
        try:
            self._records: Tuple[T, ...] = self._load()
            self._check_records()
        finally:
            source_var.reset(token)

    @property
    def source(self) -> Path:
        """Resolved path of the record source."""
        return self._source

    def _load(self) -> Tuple[T, ...]:
        logger.debug("Loading %s records", self.record_type.__name__)
        try:
            raw = self._source.read_bytes()
        except FileNotFoundError as exc:
            raise LoadError(self._source, "record source not found") from exc
        except OSError as exc:
            raise LoadError(self._source, f"record source unreadable: {exc}") from exc

        adapter = TypeAdapter(List[self.record_type])  # type: ignore[name-defined]
        try:
            records = adapter.validate_json(raw)
        except ValidationError as exc:
            raise LoadError(
                self._source,
                f"not a list of {self.record_type.__name__} records: {exc}",
            ) from exc

        logger.info("Loaded %d %s records", len(records), self.record_type.__name__)
        return tuple(records)

    def _check_records(self) -> None:
        """Hook for subclasses to reject or report on the loaded records."""

    # PUBLIC_INTERFACE
    def get_all(self) -> Tuple[T, ...]:
        """Return every loaded record in source order."""
        return self._records

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return a new list of the records matching predicate, in source order."""
        return [record for record in self._records if predicate(record)]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)
