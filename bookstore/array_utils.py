"""Standalone helpers over caller-supplied sequences of books.

Unlike the Catalog, these accept sequences that may contain ``None``
entries, and a ``None`` sequence is treated as empty. None of them share
state with a Catalog; pass ``catalog.get_all_books()`` or
``catalog.snapshot_array()`` to run them over a catalog's contents.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence

from bookstore.book import Book

BookSeq = Optional[Sequence[Optional[Book]]]


# ------------------------- Counting ------------------------- #
def count_before_year(books: BookSeq, year_cutoff: int) -> int:
    if books is None:
        return 0
    return sum(1 for b in books if b is not None and b.year < year_cutoff)


def count_by_author(books: BookSeq, author: Optional[str]) -> int:
    """Exact, case-sensitive author matches."""
    if books is None or author is None:
        return 0
    return sum(1 for b in books if b is not None and b.author == author)


# ------------------------- Filtering ------------------------- #
def filter_price_at_most(books: BookSeq, max_price: float) -> List[Book]:
    if max_price < 0:
        raise ValueError(f"Maximum price cannot be negative: {max_price}")
    if books is None:
        return []
    return [b for b in books if b is not None and b.price <= max_price]


def filter_by_decade(books: BookSeq, decade_start: int) -> List[Book]:
    if books is None:
        return []
    return [b for b in books if b is not None and decade_start <= b.year <= decade_start + 9]


# ------------------------- Sorting (in place) ------------------------- #
# list.sort is stable, and every None shares the same key, so None entries
# end up last in their original relative order.
def sort_by_price(books: Optional[MutableSequence[Optional[Book]]]) -> None:
    if books is None:
        return
    books[:] = sorted(books, key=lambda b: (b is None, b.price if b is not None else 0.0))


def sort_by_year(books: Optional[MutableSequence[Optional[Book]]]) -> None:
    if books is None:
        return
    books[:] = sorted(books, key=lambda b: (b is None, b.year if b is not None else 0))


# ------------------------- Statistics ------------------------- #
def average_price(books: BookSeq) -> float:
    if books is None:
        return 0.0
    prices = [b.price for b in books if b is not None]
    if not prices:
        return 0.0
    return sum(prices) / len(prices)


def find_oldest(books: BookSeq) -> Optional[Book]:
    """Earliest year; the first one encountered wins ties."""
    if books is None:
        return None
    oldest: Optional[Book] = None
    for book in books:
        if book is None:
            continue
        if oldest is None or book.year < oldest.year:
            oldest = book
    return oldest


# ------------------------- Manipulation ------------------------- #
def merge(first: BookSeq, second: BookSeq) -> List[Optional[Book]]:
    return list(first or []) + list(second or [])


def remove_duplicates(books: BookSeq) -> List[Book]:
    """First occurrence of each ISBN, in order. None entries are dropped."""
    if books is None:
        return []
    seen_isbns = set()
    unique_books = []

    for book in books:
        if book is None:
            continue
        if book.isbn not in seen_isbns:
            seen_isbns.add(book.isbn)
            unique_books.append(book)

    return unique_books
