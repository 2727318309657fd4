import json

import pytest

from bookstore.book import Book
from bookstore.catalog import Catalog
from bookstore.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # The CLI stores --output in the environment; restore it after every test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def catalog():
    return Catalog(max_year=2025)


@pytest.fixture
def books():
    return {
        "my_book": Book("9374859192843", "My book", "John Doe", 29.99, 2012),
        "fahrenheit": Book("9375827462849", "Fahrenheit 451", "Ray Bradbury", 9.99, 2014),
        "hunger": Book("9576818375934", "Hunger Games", "Jane Smith", 10.99, 2015),
        "amulet": Book("9345834573845", "Amulet", "Samantha Smith", 12.99, 2005),
        "amulet_stone": Book("9365810375869", "Amulet Stone", "Jane Doe", 10.99, 2008),
        "sequel": Book("9384758393475", "Hunger Games Sequel", "Jane Doe", 45.99, 2015),
    }


@pytest.fixture
def seed_file(tmp_path, books):
    # Each test gets its own seed file
    path = tmp_path / "books.json"
    path.write_text(json.dumps([b.to_dict() for b in books.values()]), encoding="utf-8")
    return path
