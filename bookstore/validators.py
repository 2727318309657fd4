from typing import Optional

from bookstore.config import settings

ISBN_MIN_LENGTH = 10
ISBN_MAX_LENGTH = 13


class ISBNValidator:
    """ISBN canonicalization and shape checks used by Book and Catalog.

    Shape is what gates admission into the catalog: 10 to 13 decimal digits
    once hyphens and surrounding whitespace are removed. The checksum helpers
    are informational only.
    """

    @staticmethod
    def canonicalize(raw: Optional[str]) -> str:
        if not isinstance(raw, str):
            return ""
        return raw.replace("-", "").strip()

    @staticmethod
    def is_well_formed(isbn: Optional[str]) -> bool:
        s = ISBNValidator.canonicalize(isbn)
        if not ISBN_MIN_LENGTH <= len(s) <= ISBN_MAX_LENGTH:
            return False
        # str.isdigit() accepts superscripts and other unicode digits
        return all(ch in "0123456789" for ch in s)

    @staticmethod
    def has_valid_checksum(isbn: Optional[str]) -> bool:
        s = ISBNValidator.canonicalize(isbn)
        if not ISBNValidator.is_well_formed(s):
            return False
        if len(s) == 10:
            # Weighted 10..1 sum must be divisible by 11
            total = sum((10 - i) * int(ch) for i, ch in enumerate(s))
            return total % 11 == 0
        if len(s) == 13:
            total = 0
            for i, ch in enumerate(s[:-1]):
                factor = 1 if i % 2 == 0 else 3
                total += factor * int(ch)
            check_val = (10 - (total % 10)) % 10
            return check_val == int(s[-1])
        # 11 and 12 digit forms have no checksum scheme
        return False


class YearValidator:
    """Publication year bounds."""

    @staticmethod
    def max_publication_year(current_year: Optional[int] = None) -> int:
        if current_year is None:
            current_year = settings.current_year
        return current_year + 1

    @staticmethod
    def is_valid_publication_year(year: int, current_year: Optional[int] = None) -> bool:
        return settings.min_book_year <= year <= YearValidator.max_publication_year(current_year)
