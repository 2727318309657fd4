import pytest

from bookstore import array_utils
from bookstore.book import Book
from bookstore.catalog import Catalog


@pytest.fixture
def b1():
    return Book("1111111111111", "Alpha", "AuthorA", 20.0, 1999)


@pytest.fixture
def b2():
    return Book("2222222222222", "Beta", "AuthorB", 35.0, 2005)


@pytest.fixture
def b3():
    return Book("3333333333333", "Gamma", "AuthorA", 35.0, 2005)


@pytest.fixture
def b4():
    return Book("4444444444444", "Delta", "AuthorC", 50.0, 2010)


@pytest.fixture
def b5():
    return Book("5555555555555", "Epsilon", "AuthorC", 50.0, 2010)


# ======= Counting =======

def test_count_before_year(b1, b2, b3, b4):
    assert array_utils.count_before_year([b1, b2, b3], 2010) == 3
    assert array_utils.count_before_year([b1, b2, b3, b4], 2005) == 1
    assert array_utils.count_before_year([None, b1, None], 2000) == 1


def test_count_by_author_is_exact(b1, b2, b3):
    arr = [b1, None, b2, b3]
    assert array_utils.count_by_author(arr, "AuthorA") == 2
    assert array_utils.count_by_author(arr, "authora") == 0
    assert array_utils.count_by_author(arr, "Author") == 0
    assert array_utils.count_by_author(arr, "Unknown") == 0
    assert array_utils.count_by_author(arr, None) == 0


# ======= Filtering =======

def test_filter_price_at_most(b1, b2, b3, b4):
    assert array_utils.filter_price_at_most([b1, b2, b3], 40.0) == [b1, b2, b3]
    assert array_utils.filter_price_at_most([b4, None, b1, b2], 35.0) == [b1, b2]
    assert array_utils.filter_price_at_most([b4], 0) == []


def test_filter_price_at_most_negative_raises(b1):
    with pytest.raises(ValueError):
        array_utils.filter_price_at_most([b1], -0.01)
    with pytest.raises(ValueError):
        array_utils.filter_price_at_most(None, -1)


def test_filter_price_at_most_returns_new_list(b1):
    arr = [b1]
    filtered = array_utils.filter_price_at_most(arr, 100)
    assert filtered == arr
    assert filtered is not arr


def test_filter_by_decade(b1, b2, b3, b4, b5):
    arr = [b1, b2, None, b3, b4, b5]
    assert array_utils.filter_by_decade(arr, 2000) == [b2, b3]
    assert array_utils.filter_by_decade(arr, 2010) == [b4, b5]
    assert array_utils.filter_by_decade(arr, 1990) == [b1]
    assert array_utils.filter_by_decade(arr, 1980) == []


def test_filter_by_decade_bounds_inclusive():
    first = Book("1111111111", "First", "A", 1.0, 1990)
    last = Book("2222222222", "Last", "A", 1.0, 1999)
    after = Book("3333333333", "After", "A", 1.0, 2000)
    assert array_utils.filter_by_decade([first, last, after], 1990) == [first, last]


# ======= Sorting =======

def test_sort_by_price_is_stable(b1, b2, b3):
    arr = [b3, b2, b1]
    array_utils.sort_by_price(arr)
    assert arr == [b1, b3, b2]
    assert arr[1] is b3 and arr[2] is b2


def test_sort_by_year_is_stable(b1, b2, b3):
    arr = [b2, b3, b1]
    array_utils.sort_by_year(arr)
    assert arr[0] is b1
    assert arr[1] is b2
    assert arr[2] is b3


def test_sort_by_price_moves_none_to_end():
    a = Book("1111111111", "A", "X", 1.0, 2000)
    b = Book("2222222222", "B", "X", 5.0, 2000)
    arr = [b, None, a, None]
    array_utils.sort_by_price(arr)
    assert arr == [a, b, None, None]


def test_sort_with_null_elements(b1, b2, b3):
    arr = [b1, None, b2, None, b3]
    array_utils.sort_by_year(arr)
    assert arr[:3] == [b1, b2, b3]
    assert arr[3] is None and arr[4] is None
    assert len(array_utils.filter_price_at_most(arr, 50)) == 3


def test_sort_only_none_entries():
    arr = [None, None]
    array_utils.sort_by_price(arr)
    assert arr == [None, None]


# ======= Statistics =======

def test_average_price(b2, b3, b4, b5):
    assert array_utils.average_price([b2, b3, b4, b5]) == (35.0 + 35.0 + 50.0 + 50.0) / 4
    assert array_utils.average_price([None, b2, None, b4]) == pytest.approx(42.5)
    assert array_utils.average_price([]) == 0.0
    assert array_utils.average_price([None, None]) == 0.0


def test_find_oldest_first_on_ties(b1, b2, b3):
    assert array_utils.find_oldest([b1, b2, b3]) is b1
    assert array_utils.find_oldest([b2, b3]) is b2
    assert array_utils.find_oldest([b3, None, b2]) is b3
    assert array_utils.find_oldest([]) is None
    assert array_utils.find_oldest([None]) is None


# ======= Manipulation =======

def test_merge(b1, b2, b3):
    assert array_utils.merge([], [b1]) == [b1]
    assert array_utils.merge([b1, None], [b2, b3]) == [b1, None, b2, b3]
    assert array_utils.merge(None, [b2]) == [b2]
    assert array_utils.merge([b1], None) == [b1]


def test_merge_returns_new_list(b1):
    first = [b1]
    merged = array_utils.merge(first, [])
    merged.append(None)
    assert first == [b1]


def test_remove_duplicates(b1, b2, b3):
    assert array_utils.remove_duplicates([b1, b2, b3]) == [b1, b2, b3]


def test_remove_duplicates_keeps_first_and_drops_none():
    a = Book("1111111111", "A", "X", 1.0, 2000)
    b = Book("1111111111", "B", "Y", 2.0, 2001)
    c = Book("2222222222", "C", "Z", 3.0, 2002)
    unique = array_utils.remove_duplicates([a, None, b, c])
    assert len(unique) == 2
    assert unique[0] is a
    assert unique[1] is c


# ======= None handling =======

def test_none_sequence_handling():
    assert array_utils.count_before_year(None, 2000) == 0
    assert array_utils.count_by_author(None, "AuthorA") == 0
    assert array_utils.filter_price_at_most(None, 50) == []
    assert array_utils.filter_by_decade(None, 2000) == []
    assert array_utils.find_oldest(None) is None
    assert array_utils.average_price(None) == 0.0
    assert array_utils.remove_duplicates(None) == []
    array_utils.sort_by_price(None)
    array_utils.sort_by_year(None)
    assert array_utils.merge(None, None) == []


def test_works_on_catalog_exports(b1, b2, b4):
    catalog = Catalog()
    for book in (b4, b1, b2):
        catalog.add(book)
    snapshot = list(catalog.snapshot_array())
    array_utils.sort_by_price(snapshot)
    assert snapshot == [b1, b2, b4]
    assert catalog.get_all_books() == [b4, b1, b2]
    assert array_utils.count_before_year(catalog.snapshot_array(), 2006) == 2
