"""Command-line interface for booksearch.

Built with Typer for commands and Rich for output.
"""

import asyncio
import logging
from datetime import date
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import get_config
from .curated import CuratedBook, CuratedCatalog, seasonal_theme
from .schemas import BookCandidate
from .search.classifier import classify
from .service import BookSearchService

app = typer.Typer(
    name="booksearch",
    help="Look up book metadata and covers across online catalogs.",
    no_args_is_help=True,
)

console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through Rich."""
    level = "DEBUG" if verbose else get_config().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def format_candidate_table(books: list[BookCandidate], title: str = "Results") -> Table:
    """Create a rich table for search results."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", width=3)
    table.add_column("Title", style="cyan", no_wrap=False, max_width=40)
    table.add_column("Author", style="green", max_width=25)
    table.add_column("ISBN", width=14)
    table.add_column("Source", style="yellow")
    table.add_column("Cover", justify="center")

    for i, book in enumerate(books, 1):
        table.add_row(
            str(i),
            book.title,
            book.author or "-",
            book.isbn13 or book.isbn10 or "-",
            book.source.value if book.source else "-",
            "yes" if book.cover_url else "-",
        )

    return table


def format_shelf_table(books: tuple[CuratedBook, ...], title: str) -> Table:
    """Create a rich table for a curated shelf."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Title", style="cyan", max_width=45)
    table.add_column("Author", style="green", max_width=25)
    table.add_column("ISBN-13", width=14)

    for book in books:
        table.add_row(book.title, book.author, book.isbn13)

    return table


async def _search(query: str, limit: int, offline: bool) -> list[BookCandidate]:
    async with BookSearchService(offline=offline) as service:
        return await service.search(query, limit)


async def _cover(title: str) -> Optional[str]:
    async with BookSearchService() as service:
        return await service.resolve_cover(title)


# ============================================================================
# Commands
# ============================================================================


@app.command()
def search(
    query: str = typer.Argument(..., help="Title, author or ISBN"),
    limit: int = typer.Option(8, "--limit", "-l", min=1, max=12, help="Max results"),
    offline: bool = typer.Option(False, "--offline", help="Search curated shelves only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Search the catalogs for books."""
    setup_logging(verbose)

    print_info(f"Searching for: {query} ({classify(query).value})...")
    results = asyncio.run(_search(query, limit, offline))

    if not results:
        print_error(f"No books found matching: {query}")
        raise typer.Exit(1)

    console.print(format_candidate_table(results, title=f"Found {len(results)} results"))


@app.command()
def cover(
    title: str = typer.Argument(..., help="Book title, optionally 'Title by Author'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Find a cover image URL for a title."""
    setup_logging(verbose)

    url = asyncio.run(_cover(title))
    if not url:
        print_warning("No cover found")
        raise typer.Exit(1)

    console.print(url)


@app.command("classify")
def classify_cmd(
    query: str = typer.Argument(..., help="Query to classify"),
) -> None:
    """Show how a query would be classified."""
    console.print(classify(query).value)


@app.command()
def shelf(
    name: Optional[str] = typer.Argument(None, help="Shelf name, or 'seasonal'"),
    month: Optional[int] = typer.Option(None, "--month", "-m", min=1, max=12, help="Month for seasonal shelf"),
) -> None:
    """List curated shelves, or the books on one shelf."""
    catalog = CuratedCatalog()

    if name is None:
        for shelf_name in catalog.shelves():
            console.print(f"  {shelf_name} [dim]({len(catalog.shelf(shelf_name))} books)[/dim]")
        console.print("  seasonal [dim](changes by month)[/dim]")
        return

    if name == "seasonal":
        month = month or date.today().month
        theme = seasonal_theme(month)
        console.print(format_shelf_table(catalog.seasonal(month), title=theme.title))
        return

    try:
        books = catalog.shelf(name)
    except KeyError:
        print_error(f"Unknown shelf: {name}")
        raise typer.Exit(1)

    console.print(format_shelf_table(books, title=name))


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"booksearch version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
