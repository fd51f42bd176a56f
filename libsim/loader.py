import logging
from typing import Iterable, List, Optional, Tuple

from libsim.errors import MalformedRecordError
from libsim.record import Record
from libsim.sorter import sort_records
from libsim.storage import parse_line, read_lines

logger = logging.getLogger(__name__)


def load_catalog(lines: Iterable[str]) -> List[Record]:
    """Build a sorted list of records from persisted lines.

    Any malformed line aborts the whole load; no partial catalog is returned.
    """
    records: List[Record] = []
    for line_number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            records.append(parse_line(line, line_number))
        except MalformedRecordError:
            logger.error(f"Malformed catalog record on line {line_number}: {line.rstrip()!r}")
            records.clear()
            raise

    sort_records(records)
    logger.info(f"Loaded {len(records)} records")
    return records


def load_catalog_file(path: str) -> Tuple[List[Record], bool]:
    """Load the catalog stored at ``path``.

    Returns the sorted records and whether the file was missing.
    """
    lines: Optional[List[str]] = read_lines(path)
    if lines is None:
        logger.info(f"Catalog file {path} not found")
        return [], True
    return load_catalog(lines), False
