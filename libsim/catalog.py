import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Any, Dict, Iterator, List, Optional

from libsim import locator, storage
from libsim.config import Settings, settings as default_settings
from libsim.errors import BusinessRuleError, EmptyCatalogError
from libsim.loader import load_catalog_file
from libsim.record import Record
from libsim.sorter import sort_records
from libsim.utils.validators import TextValidator, YearValidator

logger = logging.getLogger(__name__)


class Facility:
    """Open/closed state of the library, owned by whoever drives the catalog."""

    def __init__(self, is_open: bool = False) -> None:
        self.is_open = is_open

    def open(self) -> None:
        if self.is_open:
            raise BusinessRuleError("The library is already open.")
        self.is_open = True
        logger.info("Library opened")

    def close(self) -> None:
        if not self.is_open:
            raise BusinessRuleError("The library is already closed.")
        self.is_open = False
        logger.info("Library closed")


class CatalogView(Sequence):
    """Read-only, restartable view over the records in current catalog order.

    Items are copies, so callers cannot change availability behind the
    catalog's back.
    """

    def __init__(self, records: List[Record]) -> None:
        self._records = records

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [replace(r) for r in self._records[index]]
        return replace(self._records[index])

    def __iter__(self) -> Iterator[Record]:
        for record in self._records:
            yield replace(record)


class Catalog:
    """Owns the sorted in-memory collection and its backing file."""

    def __init__(
        self,
        records: Optional[List[Record]] = None,
        data_file: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or default_settings
        self.data_file = data_file or self.settings.data_file
        self._records: List[Record] = list(records or [])
        sort_records(self._records)

    @classmethod
    def open(cls, data_file: Optional[str] = None, settings: Optional[Settings] = None) -> "Catalog":
        """Load the catalog from its file, applying the empty-catalog policy."""
        settings = settings or default_settings
        path = data_file or settings.data_file
        records, missing = load_catalog_file(path)
        if not records and not settings.allow_empty_catalog:
            logger.error(f"No records loaded from {path}")
            raise EmptyCatalogError(path, source_missing=missing)
        return cls(records, data_file=path, settings=settings)

    def reload(self) -> None:
        """Re-read the backing file, discarding in-memory availability changes.

        The current records are kept when the reload fails.
        """
        records, missing = load_catalog_file(self.data_file)
        if not records and not self.settings.allow_empty_catalog:
            logger.error(f"No records loaded from {self.data_file} on reload")
            raise EmptyCatalogError(self.data_file, source_missing=missing)
        self._records = records

    def __len__(self) -> int:
        return len(self._records)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, author: str, title: str, year: int, current_year: Optional[int] = None) -> Record:
        """Validate and persist a new available record.

        With ``insert_on_add`` disabled the record only reaches the file and
        shows up in this catalog after a reload.
        """
        max_length = self.settings.max_field_length
        try:
            author = TextValidator.validate_author(author, max_length)
            title = TextValidator.validate_title(title, max_length)
            year = YearValidator.validate_year(year, self.settings.min_year, current_year)
        except ValueError as e:
            logger.warning(f"Rejected new book: {e}")
            raise

        record = Record(author=author, title=title, year=year)
        storage.append_record(self.data_file, record)

        if self.settings.insert_on_add:
            self._records.insert(locator.insertion_point(self._records, record.author), record)
        logger.info(f"Added '{record.title}' by {record.author} ({record.year})")
        return replace(record)

    def locate(self, author: str, title: str) -> int:
        return locator.locate(self._records, author, title, self.settings.legacy_midpoint)

    def find_book(self, author: str, title: str) -> Record:
        return replace(self._records[self.locate(author, title)])

    def lend_book(self, author: str, title: str, is_open: bool) -> Record:
        return self._set_available(author, title, is_open, available=False)

    def return_book(self, author: str, title: str, is_open: bool) -> Record:
        return self._set_available(author, title, is_open, available=True)

    def list_books(self) -> CatalogView:
        return CatalogView(self._records)

    def get_statistics(self) -> Dict[str, Any]:
        available = sum(1 for r in self._records if r.available)
        return {
            "total_books": len(self._records),
            "unique_authors": len({r.author for r in self._records}),
            "available": available,
            "lent": len(self._records) - available,
        }

    # ------------------------- Helpers ------------------------- #
    def _set_available(self, author: str, title: str, is_open: bool, available: bool) -> Record:
        action = "return" if available else "lend"
        if not is_open:
            logger.warning(f"Refused to {action} '{title}': library is closed")
            raise BusinessRuleError("The library is closed.")

        record = self._records[self.locate(author, title)]
        if record.available == available:
            state = "already in the library" if available else "already lent out"
            logger.warning(f"Refused to {action} '{title}' by {author}: {state}")
            raise BusinessRuleError(f"'{record.title}' by {record.author} is {state}.")

        record.available = available
        logger.info(f"{action.capitalize()} '{record.title}' by {record.author}")
        return replace(record)
