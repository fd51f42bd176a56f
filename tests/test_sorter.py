import random

from libsim.record import Record
from libsim.sorter import is_sorted, sort_records


def _records(authors):
    return [Record(a, f"Book {i}", 1900 + i) for i, a in enumerate(authors)]


def test_sort_orders_by_author():
    records = _records(["Tolkien", "Austen", "Orwell", "Borges"])
    sort_records(records)
    assert [r.author for r in records] == ["Austen", "Borges", "Orwell", "Tolkien"]


def test_sort_empty_and_single():
    empty = []
    sort_records(empty)
    assert empty == []

    single = _records(["Austen"])
    sort_records(single)
    assert single[0].author == "Austen"


def test_sort_keeps_duplicate_authors_contiguous():
    records = _records(["Austen", "Borges", "Austen", "Austen", "Adams", "Borges"])
    sort_records(records)
    assert is_sorted(records)
    assert [r.author for r in records] == ["Adams", "Austen", "Austen", "Austen", "Borges", "Borges"]


def test_sort_only_compares_authors():
    records = [Record("Austen", "Zzz", 2000), Record("Austen", "Aaa", 1800)]
    sort_records(records)
    assert sorted(r.title for r in records) == ["Aaa", "Zzz"]
    assert is_sorted(records)


def test_sort_is_case_sensitive_codepoint_order():
    records = _records(["austen", "Borges", "Austen"])
    sort_records(records)
    assert [r.author for r in records] == ["Austen", "Borges", "austen"]


def test_sort_large_already_sorted_input():
    # Would exceed the recursion limit if both sides were recursed into
    records = _records([f"Author {i:05d}" for i in range(2000)])
    sort_records(records)
    assert is_sorted(records)


def test_sort_random_input_matches_sorted():
    rng = random.Random(1440)
    authors = [rng.choice(["Austen", "Borges", "Calvino", "Dickens", "Eco"]) for _ in range(300)]
    records = _records(authors)
    sort_records(records)
    assert [r.author for r in records] == sorted(authors)
