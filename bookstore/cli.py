import logging
from pathlib import Path
from typing import Optional

import typer

from bookstore.catalog import Catalog
from bookstore.config import settings
from bookstore.loader import LoaderError, load_catalog
from bookstore.validators import ISBNValidator
from bookstore.ui_helpers import (
    set_output_mode,
    print_book,
    print_list_result,
    print_not_applicable,
    print_stats_result,
)
from bookstore import array_utils

app = typer.Typer(help="Bookstore catalog CLI")


def _load(file_path: Path) -> Catalog:
    """Load the seed file into a fresh catalog or exit with code 1."""
    try:
        catalog, errors = load_catalog(file_path)
    except LoaderError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    if errors:
        typer.echo(f"Skipped {len(errors)} row(s) of {file_path}.", err=True)
    return catalog


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log catalog activity to stderr"),
):
    """Query a catalog seeded from a JSON or CSV file."""
    level = logging.DEBUG if verbose or settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if output:
        set_output_mode(output)


@app.command("list")
def cli_list(file_path: Path):
    """List all books in file order."""
    catalog = _load(file_path)
    print_list_result(catalog.get_all_books())


@app.command("find")
def cli_find(file_path: Path, isbn: str):
    """Find a book by ISBN (hyphens allowed)."""
    catalog = _load(file_path)
    print_book(catalog.find_by_isbn(isbn), isbn)


@app.command("search")
def cli_search(
    file_path: Path,
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Case-insensitive title substring"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Case-insensitive author substring"),
):
    """Search by title and/or author."""
    if title is None and author is None:
        print("Provide --title and/or --author.")
        raise typer.Exit(code=1)
    catalog = _load(file_path)
    for label, query, lookup in (("title", title, catalog.find_by_title),
                                 ("author", author, catalog.find_by_author)):
        if query is None:
            continue
        result = lookup(query)
        if not result.applicable:
            print_not_applicable(f"{label}={query!r}")
        else:
            print_list_result(result.books, empty_message=f"No books match {label} '{query.strip()}'.")


@app.command("year")
def cli_year(file_path: Path, year: int):
    """List books published in YEAR."""
    catalog = _load(file_path)
    result = catalog.find_by_year(year)
    if not result.applicable:
        print_not_applicable(f"year={year}")
        return
    print_list_result(result.books, empty_message=f"No books from {year}.")


@app.command("price")
def cli_price(file_path: Path, min_price: float, max_price: float):
    """List books priced between MIN_PRICE and MAX_PRICE (inclusive)."""
    catalog = _load(file_path)
    try:
        books = catalog.find_by_price_range(min_price, max_price)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    print_list_result(books, empty_message="No books in that price range.")


@app.command("decade")
def cli_decade(file_path: Path, decade_start: int):
    """List books from DECADE_START through DECADE_START + 9, oldest first."""
    catalog = _load(file_path)
    books = array_utils.filter_by_decade(catalog.get_all_books(), decade_start)
    array_utils.sort_by_year(books)
    print_list_result(books, empty_message=f"No books from the {decade_start}s.")


@app.command("stats")
def cli_stats(file_path: Path):
    """Show catalog statistics."""
    catalog = _load(file_path)
    print_stats_result(catalog.get_statistics())


@app.command("check-isbn")
def cli_check_isbn(isbn: str):
    """Show the canonical form of ISBN and whether a Book would accept it."""
    canonical = ISBNValidator.canonicalize(isbn)
    print(f"Canonical: {canonical}")
    if ISBNValidator.is_well_formed(canonical):
        print("Accepted: yes")
    else:
        print("Accepted: no")
    print(f"Checksum: {'valid' if ISBNValidator.has_valid_checksum(canonical) else 'invalid'}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
