"""Point lookups over a catalog sorted by author.

Authors are not unique, so a binary search only lands somewhere inside the
run of records sharing the author. The run is then scanned in both
directions to find the exact (author, title) pair.
"""
from typing import List

from libsim.errors import AuthorNotFoundError, TitleNotFoundError
from libsim.record import Record

NOT_FOUND = -1


def _midpoint(low: int, high: int, legacy: bool) -> int:
    if legacy:
        # Historical variant without the base offset; only correct while low == 0
        return (high - low) // 2
    return low + (high - low) // 2


def search_author(records: List[Record], author: str, legacy_midpoint: bool = False) -> int:
    """Return the index of any record by ``author``, or NOT_FOUND."""
    low, high = 0, len(records) - 1
    probes = 0
    while low <= high:
        if legacy_midpoint and probes >= len(records):
            # The legacy midpoint can stall once low > 0
            break
        probes += 1
        mid = _midpoint(low, high, legacy_midpoint)
        probed = records[mid].author
        if probed == author:
            return mid
        if probed > author:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND


def scan_run(records: List[Record], index: int, author: str, title: str) -> int:
    """Look for ``title`` inside the run of ``author`` records containing ``index``."""
    i = index
    while i >= 0 and records[i].author == author:
        if records[i].title == title:
            return i
        i -= 1

    i = index + 1
    while i < len(records) and records[i].author == author:
        if records[i].title == title:
            return i
        i += 1
    return NOT_FOUND


def locate(records: List[Record], author: str, title: str, legacy_midpoint: bool = False) -> int:
    """Resolve an (author, title) pair to its index in ``records``.

    Raises AuthorNotFoundError when no record carries the author and
    TitleNotFoundError when the author's run has no matching title.
    """
    hit = search_author(records, author, legacy_midpoint)
    if hit == NOT_FOUND:
        raise AuthorNotFoundError(author, title)

    index = scan_run(records, hit, author, title)
    if index == NOT_FOUND:
        raise TitleNotFoundError(author, title)
    return index


def insertion_point(records: List[Record], author: str) -> int:
    """Index after the last record whose author sorts <= ``author``."""
    low, high = 0, len(records)
    while low < high:
        mid = low + (high - low) // 2
        if records[mid].author <= author:
            low = mid + 1
        else:
            high = mid
    return low
