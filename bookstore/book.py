from __future__ import annotations

import math
from numbers import Real

from bookstore.validators import ISBNValidator, YearValidator, ISBN_MIN_LENGTH, ISBN_MAX_LENGTH


class Book:
    """A single, immutable catalog entry.

    Construction validates every field (isbn, title, author, price, year, in
    that order) and raises on the first failure. The ISBN is stored in its
    canonical form: hyphens removed, whitespace trimmed.

    Two books are equal when their ISBNs are equal, regardless of the other
    fields. Sorting orders books by title.
    """

    __slots__ = ("_isbn", "_title", "_author", "_price", "_year")

    def __init__(self, isbn: str, title: str, author: str, price: float, year: int,
                 *, current_year: int | None = None) -> None:
        set_field = object.__setattr__
        set_field(self, "_isbn", self._validate_isbn(isbn))
        set_field(self, "_title", self._require_text("title", title))
        set_field(self, "_author", self._require_text("author", author))
        set_field(self, "_price", self._validate_price(price))
        set_field(self, "_year", self._validate_year(year, current_year))

    # ------------------------- Validation ------------------------- #
    @staticmethod
    def _validate_isbn(isbn: str | None) -> str:
        if isbn is None:
            raise MissingFieldError("isbn", "ISBN is required.")
        if not isinstance(isbn, str):
            raise InvalidFieldError("isbn", f"ISBN must be a string, got {isbn!r}.")
        canonical = ISBNValidator.canonicalize(isbn)
        if not canonical:
            raise InvalidFieldError("isbn", "ISBN cannot be empty.")
        if not ISBN_MIN_LENGTH <= len(canonical) <= ISBN_MAX_LENGTH:
            raise InvalidFieldError(
                "isbn",
                f"ISBN must be {ISBN_MIN_LENGTH} to {ISBN_MAX_LENGTH} digits long, got {len(canonical)}.",
            )
        if not ISBNValidator.is_well_formed(canonical):
            raise InvalidFieldError("isbn", f"ISBN contains non-digit characters: {isbn!r}")
        return canonical

    @staticmethod
    def _require_text(name: str, value: str | None) -> str:
        if value is None:
            raise MissingFieldError(name, f"{name.capitalize()} is required.")
        if not isinstance(value, str):
            raise InvalidFieldError(name, f"{name.capitalize()} must be a string.")
        return value.strip()

    @staticmethod
    def _validate_price(price: float) -> float:
        if isinstance(price, bool) or not isinstance(price, Real):
            raise InvalidFieldError("price", f"Price must be a number, got {price!r}.")
        try:
            value = float(price)
        except OverflowError:
            raise InvalidFieldError("price", "Price is too large to represent.") from None
        if math.isnan(value):
            raise InvalidFieldError("price", f"Price must be a number, got {price!r}.")
        if value < 0:
            raise InvalidFieldError("price", f"Price cannot be negative: {price}")
        return value

    @staticmethod
    def _validate_year(year: int, current_year: int | None) -> int:
        if isinstance(year, bool) or not isinstance(year, int):
            raise InvalidFieldError("year", f"Year must be an integer, got {year!r}.")
        if not YearValidator.is_valid_publication_year(year, current_year):
            latest = YearValidator.max_publication_year(current_year)
            raise InvalidFieldError("year", f"Year {year} is outside the supported range (latest {latest}).")
        return year

    # ------------------------- Accessors ------------------------- #
    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def price(self) -> float:
        return self._price

    @property
    def year(self) -> int:
        return self._year

    def __setattr__(self, name, value):
        raise AttributeError(f"Book is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Book is immutable; cannot delete {name!r}")

    # Immutable, so copies can share the instance
    def __copy__(self) -> "Book":
        return self

    def __deepcopy__(self, memo: dict) -> "Book":
        return self

    def __reduce__(self):
        # Restore without re-validating: the year was valid when the book was built
        return _restore_book, (self._isbn, self._title, self._author, self._price, self._year)

    # ------------------------- Identity and ordering ------------------------- #
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self._isbn == other._isbn

    def __hash__(self) -> int:
        return hash(self._isbn)

    def __lt__(self, other: "Book") -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self._title < other._title

    def __gt__(self, other: "Book") -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self._title > other._title

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def __repr__(self) -> str:
        return (f"Book(isbn={self.isbn!r}, title={self.title!r}, author={self.author!r}, "
                f"price={self.price!r}, year={self.year!r})")

    def to_dict(self) -> dict:
        return {
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "price": self.price,
            "year": self.year,
        }

    @staticmethod
    def from_dict(data: dict, *, current_year: int | None = None) -> "Book":
        return Book(
            isbn=data.get("isbn"),
            title=data.get("title"),
            author=data.get("author"),
            price=data.get("price"),
            year=data.get("year"),
            current_year=current_year,
        )


def _restore_book(isbn: str, title: str, author: str, price: float, year: int) -> Book:
    book = object.__new__(Book)
    for name, value in zip(Book.__slots__, (isbn, title, author, price, year)):
        object.__setattr__(book, name, value)
    return book


class BookValidationError(ValueError):
    """Raised when a Book cannot be constructed from the given values."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(BookValidationError):
    """A required value (isbn, title or author) was None."""


class InvalidFieldError(BookValidationError):
    """A value was present but malformed or out of range."""
