import os
import json
from typing import List, Any, Dict, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from bookstore.config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "BOOKSTORE_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Unknown values are ignored; the current mode stays in effect


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"


def _format_price(price: float) -> str:
    return f"{price:.2f}"


def print_list_result(books: List[Any], empty_message: str = "No books in catalog.") -> None:
    """Print books according to the current output mode.
    - plain: 'ISBN - Title by Author (year) $price' lines, or the empty message
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        if mode == "json":
            print("[]")
        else:
            print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="Books", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Price", justify="right", style="green")
        for b in books:
            table.add_row(b.isbn, b.title, b.author, str(b.year), _format_price(b.price))
        _console.print(table)
    else:
        for b in books:
            print(f"{b.isbn} - {b.title} by {b.author} ({b.year}) ${_format_price(b.price)}")


def print_book(book: Optional[Any], query: str) -> None:
    mode = get_output_mode()

    if book is None:
        if mode == "json":
            print("null")
        else:
            print(f"Book with ISBN {query} not found.")
        return

    if mode == "json":
        print(json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        content = (f"[bold]Title:[/] {book.title}\n[bold]Author:[/] {book.author}\n"
                   f"[bold]ISBN:[/] {book.isbn}\n[bold]Year:[/] {book.year}\n"
                   f"[bold]Price:[/] {_format_price(book.price)}")
        _console.print(Panel.fit(content, title="Book Found", border_style="blue"))
    else:
        print("Book Found")
        print(f"Title: {book.title}")
        print(f"Author: {book.author}")
        print(f"ISBN: {book.isbn}")
        print(f"Year: {book.year}")
        print(f"Price: {_format_price(book.price)}")


def print_not_applicable(what: str) -> None:
    if get_output_mode() == "json":
        print(json.dumps({"applicable": False, "query": what}))
    else:
        print(f"Query not applicable: {what}")


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print catalog statistics according to the current output mode.
    - plain: one 'Label: value' line per metric
    - json: JSON object
    - rich: Panel with the main metrics
    """
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
        return

    lines = [
        ("Total Books", stats.get("total_books", 0)),
        ("Unique Authors", stats.get("unique_authors", 0)),
        ("Inventory Value", _format_price(stats.get("inventory_value", 0.0))),
        ("Average Price", _format_price(stats.get("average_price", 0.0))),
        ("Most Expensive", stats.get("most_expensive") or "-"),
        ("Most Recent", stats.get("most_recent") or "-"),
    ]
    if mode == "rich":
        content = "\n".join(f"[bold]{label}:[/] {value}" for label, value in lines)
        _console.print(Panel.fit(content, title="Stats", border_style="blue"))
    else:
        for label, value in lines:
            print(f"{label}: {value}")
