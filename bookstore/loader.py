"""Seed a Catalog from a JSON or CSV file.

JSON files hold a list of objects with ``isbn``, ``title``, ``author``,
``price`` and ``year`` keys. CSV files use the same names as header
columns. Files are only read; nothing is ever written back.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from bookstore.book import Book
from bookstore.catalog import Catalog

logger = logging.getLogger(__name__)

CSV_FIELDS = ["isbn", "title", "author", "price", "year"]


def read_records(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read raw rows from ``path`` without validating them."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in (".json", ".csv"):
        raise LoaderError(f"Unsupported file type: {path.suffix or path.name}")
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                reader = csv.DictReader(f)
                missing = [name for name in CSV_FIELDS if name not in (reader.fieldnames or [])]
                if missing:
                    raise LoaderError(f"{path} is missing CSV columns: {', '.join(missing)}")
                data = list(reader)
    except OSError as e:
        raise LoaderError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise LoaderError(f"Expected a list of books in {path}")
    return data


def _coerce_row(row: Dict[str, Any]) -> Dict[str, Any]:
    # CSV gives every value as a string
    item = dict(row)
    price = item.get("price")
    if isinstance(price, str):
        item["price"] = float(price) if price.strip() else None
    year = item.get("year")
    if isinstance(year, str):
        item["year"] = int(year) if year.strip() else None
    return item


def load_catalog(path: Union[str, Path], catalog: Optional[Catalog] = None,
                 *, current_year: Optional[int] = None) -> Tuple[Catalog, List[str]]:
    """Add every valid row of ``path`` to ``catalog`` (a new one by default).

    Returns the catalog and a list of human readable problems for rows that
    were skipped, either because they failed validation or because their
    ISBN was already present.
    """
    if catalog is None:
        catalog = Catalog()
    errors: List[str] = []

    for number, row in enumerate(read_records(path), 1):
        if not isinstance(row, dict):
            errors.append(f"Row {number}: expected an object")
            logger.warning(f"Skipping row {number} of {path}: not an object")
            continue
        try:
            book = Book.from_dict(_coerce_row(row), current_year=current_year)
        except ValueError as e:  # BookValidationError or a bad number in CSV
            errors.append(f"Row {number}: {e}")
            logger.warning(f"Skipping row {number} of {path}: {e}")
            continue
        if not catalog.add(book):
            errors.append(f"Row {number}: ISBN {book.isbn} already exists")
            logger.info(f"Skipping row {number} of {path}: duplicate ISBN {book.isbn}")

    logger.debug(f"Loaded {catalog.size()} books from {path}")
    return catalog, errors


class LoaderError(Exception):
    pass
