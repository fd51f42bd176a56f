from typing import List

from libsim.record import Record


def _partition(records: List[Record], low: int, high: int) -> int:
    # Lomuto: last element of the range is the pivot
    pivot = records[high].author
    i = low
    for j in range(low, high):
        if records[j].author < pivot:
            records[i], records[j] = records[j], records[i]
            i += 1
    records[i], records[high] = records[high], records[i]
    return i


def sort_records(records: List[Record]) -> None:
    """Sort records in place by author. Order among equal authors is arbitrary."""
    _quicksort(records, 0, len(records) - 1)


def _quicksort(records: List[Record], low: int, high: int) -> None:
    # Recurse into the smaller side and loop on the larger one so the
    # stack depth stays logarithmic on already-sorted files.
    while low < high:
        p = _partition(records, low, high)
        if p - low < high - p:
            _quicksort(records, low, p - 1)
            low = p + 1
        else:
            _quicksort(records, p + 1, high)
            high = p - 1


def is_sorted(records: List[Record]) -> bool:
    return all(records[i].author <= records[i + 1].author for i in range(len(records) - 1))
