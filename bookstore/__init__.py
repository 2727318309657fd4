"""Bookstore - in-memory book catalog

This package contains:
- Book records with validated construction (book.py)
- The ISBN-unique, insertion-ordered catalog (catalog.py)
- Standalone helpers over plain sequences of books (array_utils.py)
- Seed file loading and the command-line interface (loader.py, cli.py)
"""

from bookstore.book import Book, BookValidationError, InvalidFieldError, MissingFieldError
from bookstore.catalog import Catalog, SearchResult
from bookstore import array_utils

__all__ = [
    "Book",
    "BookValidationError",
    "InvalidFieldError",
    "MissingFieldError",
    "Catalog",
    "SearchResult",
    "array_utils",
]
