from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from bookstore.book import Book
from bookstore.config import settings
from bookstore.validators import ISBNValidator, YearValidator

logger = logging.getLogger(__name__)


class SearchResult:
    """Outcome of a catalog lookup that can be "not applicable".

    ``find_by_title``, ``find_by_author`` and ``find_by_year`` return this
    instead of a plain list so that a blank query (or an unsupported year) is
    distinguishable from a query that simply matched nothing.
    """

    __slots__ = ("applicable", "_books")

    def __init__(self, books: Optional[List[Book]], applicable: bool) -> None:
        self.applicable = applicable
        self._books: List[Book] = list(books or [])

    @classmethod
    def found(cls, books: List[Book]) -> "SearchResult":
        return cls(books, applicable=True)

    @classmethod
    def not_applicable(cls) -> "SearchResult":
        return cls(None, applicable=False)

    @property
    def books(self) -> List[Book]:
        return list(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book: object) -> bool:
        return book in self._books

    def __repr__(self) -> str:
        if not self.applicable:
            return "SearchResult.not_applicable()"
        return f"SearchResult.found({self._books!r})"


class Catalog:
    """Insertion-ordered collection of books, unique by canonical ISBN.

    Every lookup is a linear scan. Collections handed back to callers are
    fresh copies; the Book objects inside them are shared, which is safe
    because books are immutable.

    Not thread-safe: callers that share a Catalog between threads must
    serialize access themselves.
    """

    def __init__(self, max_year: Optional[int] = None) -> None:
        self._books: List[Book] = []
        if max_year is None:
            max_year = settings.max_supported_year
        if max_year is None:
            max_year = YearValidator.max_publication_year()
        self.max_year = max_year

    # ------------------------- Mutation ------------------------- #
    def add(self, book: Optional[Book]) -> bool:
        """Append a book. Returns False for None or an ISBN already present."""
        if book is None:
            logger.info("Rejected add: book is None")
            return False
        for current in self._books:
            if current.isbn == book.isbn:
                logger.info(f"Rejected add: ISBN {book.isbn} already exists")
                return False
        self._books.append(book)
        logger.debug(f"Added {book.isbn} ({len(self._books)} books)")
        return True

    def remove_by_isbn(self, isbn: Optional[str]) -> bool:
        index = self._index_of(isbn)
        if index is None:
            return False
        removed = self._books.pop(index)
        logger.debug(f"Removed {removed.isbn} ({len(self._books)} books)")
        return True

    # ------------------------- Queries ------------------------- #
    def find_by_isbn(self, isbn: Optional[str]) -> Optional[Book]:
        index = self._index_of(isbn)
        return None if index is None else self._books[index]

    # NOTE: title/author/year lookups answer a blank query with
    # SearchResult.not_applicable(), while find_by_price_range raises and the
    # array_utils counters return 0. Kept as is; do not unify without checking
    # with the callers that rely on each behavior.
    def find_by_title(self, query: Optional[str]) -> SearchResult:
        needle = self._normalize_query(query)
        if not needle:
            return SearchResult.not_applicable()
        return SearchResult.found([b for b in self._books if needle in b.title.strip().lower()])

    def find_by_author(self, query: Optional[str]) -> SearchResult:
        needle = self._normalize_query(query)
        if not needle:
            return SearchResult.not_applicable()
        return SearchResult.found([b for b in self._books if needle in b.author.strip().lower()])

    def find_by_price_range(self, min_price: float, max_price: float) -> List[Book]:
        """Books priced within [min_price, max_price], both ends inclusive.

        Raises ValueError for an inverted range, a negative minimum or a
        maximum of zero or less. The last rule also rejects [0, 0], so free
        books cannot be listed with this query.
        """
        if min_price > max_price:
            raise ValueError(f"Minimum price {min_price} is greater than maximum price {max_price}.")
        if min_price < 0:
            raise ValueError(f"Minimum price cannot be negative: {min_price}")
        if max_price <= 0:
            raise ValueError(f"Maximum price must be greater than zero: {max_price}")
        return [b for b in self._books if min_price <= b.price <= max_price]

    def find_by_year(self, year: int) -> SearchResult:
        if not 1 <= year <= self.max_year:
            return SearchResult.not_applicable()
        return SearchResult.found([b for b in self._books if b.year == year])

    # ------------------------- Aggregates ------------------------- #
    def size(self) -> int:
        return len(self._books)

    def inventory_value(self) -> float:
        return sum((b.price for b in self._books), 0.0)

    def most_expensive(self) -> Optional[Book]:
        """Highest priced book; on ties the one added last wins."""
        best: Optional[Book] = None
        for book in self._books:
            if best is None or book.price >= best.price:
                best = book
        return best

    def most_recent(self) -> Optional[Book]:
        """Book with the latest year; on ties the one added first wins."""
        best: Optional[Book] = None
        for book in self._books:
            if best is None or book.year > best.year:
                best = book
        return best

    def get_statistics(self) -> Dict[str, Any]:
        """Summary numbers for the whole catalog."""
        total = self.size()
        value = self.inventory_value()
        priciest = self.most_expensive()
        newest = self.most_recent()
        return {
            "total_books": total,
            "unique_authors": len({b.author for b in self._books}),
            "inventory_value": value,
            "average_price": value / total if total else 0.0,
            "most_expensive": priciest.isbn if priciest else None,
            "most_recent": newest.isbn if newest else None,
        }

    # ------------------------- Export ------------------------- #
    def snapshot_array(self) -> Tuple[Book, ...]:
        return tuple(self._books)

    def get_all_books(self) -> List[Book]:
        return list(self._books)

    # ------------------------- Container protocol ------------------------- #
    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.snapshot_array())

    def __contains__(self, item: Union[Book, str, None]) -> bool:
        if isinstance(item, Book):
            item = item.isbn
        if not isinstance(item, str):
            return False
        return self._index_of(item) is not None

    def __repr__(self) -> str:
        return f"Catalog(size={len(self._books)}, max_year={self.max_year})"

    # ------------------------- Utilities ------------------------- #
    def _index_of(self, isbn: Optional[str]) -> Optional[int]:
        canonical = ISBNValidator.canonicalize(isbn)
        if not canonical:
            return None
        for i, book in enumerate(self._books):
            if book.isbn == canonical:
                return i
        return None

    @staticmethod
    def _normalize_query(query: Optional[str]) -> str:
        return (query or "").strip().lower()
