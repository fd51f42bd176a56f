"""Flat-file persistence for the catalog.

One record per line, fields separated by ", " in the order
author, title, year. There is no escaping, so neither author nor title
may contain a comma.
"""
import logging
import os
from typing import List, Optional

from libsim.errors import MalformedRecordError, StorageError, ValidationError
from libsim.record import Record

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ", "
FIELD_COUNT = 3


def parse_line(line: str, line_number: Optional[int] = None) -> Record:
    """Turn one persisted line into an available Record."""
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        raise MalformedRecordError(
            f"expected {FIELD_COUNT} fields, found {len(fields)}", line_number, line
        )

    author, title, raw_year = fields
    if not author.strip() or not title.strip():
        raise MalformedRecordError("author and title must not be empty", line_number, line)
    try:
        year = int(raw_year.strip())
    except ValueError as e:
        raise MalformedRecordError(f"year '{raw_year.strip()}' is not an integer", line_number, line) from e

    return Record(author=author, title=title, year=year)


def format_line(record: Record) -> str:
    for name in ("author", "title"):
        value = getattr(record, name)
        if "," in value:
            raise ValidationError(f"{name.capitalize()} cannot contain a comma.")
        if "\n" in value or "\r" in value:
            raise ValidationError(f"{name.capitalize()} cannot contain a line break.")
    return FIELD_SEPARATOR.join((record.author, record.title, str(record.year))) + "\n"


def read_lines(path: str) -> Optional[List[str]]:
    """Read every line of the catalog file.

    Returns None when the file does not exist, which callers treat as a
    missing source rather than an empty one.
    """
    if not os.path.exists(path):
        return None
    try:
        # utf-8-sig drops a leading byte-order mark
        with open(path, "r", encoding="utf-8-sig") as f:
            return f.readlines()
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"catalog file {path} is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise StorageError(f"Could not read catalog file {path}: {e}") from e


def append_record(path: str, record: Record) -> None:
    line = format_line(record)
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        raise StorageError(f"Could not write to catalog file {path}: {e}") from e
    logger.debug(f"Appended record to {path}: {line.strip()}")
