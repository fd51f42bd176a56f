import logging
import sys
from dataclasses import replace
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from libsim.catalog import Catalog, Facility
from libsim.config import settings
from libsim.errors import BusinessRuleError, CatalogError, EmptyCatalogError, NotFoundError, ValidationError
from libsim.utils.ui_helpers import availability_label, print_list_result, print_stats_result, set_output_mode

console = Console()


def setup_logging() -> None:
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))


def _open_catalog(data_file: Optional[str] = None, allow_empty: bool = False) -> Optional[Catalog]:
    """Load the catalog, printing the reason when it cannot be used."""
    catalog_settings = replace(settings, allow_empty_catalog=True) if allow_empty else settings
    try:
        return Catalog.open(data_file, settings=catalog_settings)
    except EmptyCatalogError as e:
        print(f"Catalog unavailable: {e}")
        print("Set LIBSIM_ALLOW_EMPTY=true to start with an empty catalog.")
    except CatalogError as e:
        print(f"Could not load catalog: {e}")
    return None


# --- Typer CLI app ---
app = typer.Typer(help=f"{settings.app_name} - personal library catalog")


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    setup_logging()
    if output:
        set_output_mode(output)


@app.command("list")
def cli_list():
    """List every book in catalog order."""
    catalog = _open_catalog()
    if catalog is None:
        raise typer.Exit(code=1)
    print_list_result(catalog.list_books())


@app.command("find")
def cli_find(author: str, title: str):
    """Find a book by author and exact title."""
    catalog = _open_catalog()
    if catalog is None:
        raise typer.Exit(code=1)
    try:
        record = catalog.find_book(author, title)
    except NotFoundError as e:
        print(f"Not found: {e}")
        return
    print("Book Found")
    print(f"Author: {record.author}")
    print(f"Title: {record.title}")
    print(f"Year: {record.year}")
    print(f"Status: {availability_label(record.available)}")


@app.command("add")
def cli_add(author: str, title: str, year: int):
    """Add a book to the catalog file, creating it on first use."""
    catalog = _open_catalog(allow_empty=True)
    if catalog is None:
        raise typer.Exit(code=1)
    try:
        record = catalog.add_book(author, title, year)
    except ValidationError as e:
        print(f"Error: {e}")
        return
    except CatalogError as e:
        print(f"Unexpected error: {e}")
        raise typer.Exit(code=1)
    print(f"Successfully added: {record.title} by {record.author} ({record.year})")


@app.command("stats")
def cli_stats():
    """Show catalog statistics."""
    catalog = _open_catalog()
    if catalog is None:
        raise typer.Exit(code=1)
    print_stats_result(catalog.get_statistics())


@app.command("menu")
def cli_menu():
    """Start the interactive bookworm/librarian menu."""
    if not run_menu():
        raise typer.Exit(code=1)


# --- Interactive menu ---
class Session:
    """State of one interactive run: the catalog and the library's open flag."""

    def __init__(self, catalog: Catalog, facility: Optional[Facility] = None) -> None:
        self.catalog = catalog
        self.facility = facility or Facility()


def list_all_books(session: Session) -> None:
    records = list(session.catalog.list_books())
    if not records:
        console.print("[yellow]No books in library.[/]")
        return

    table = Table(title="📚 Catalog", show_lines=True, header_style="bold cyan")
    table.add_column("Author", style="magenta")
    table.add_column("Title", style="white")
    table.add_column("Year", style="white", justify="right")
    table.add_column("Status", style="white")
    for record in records:
        status = availability_label(record.available)
        table.add_row(escape(record.author), escape(record.title), str(record.year),
                      f"[green]{status}[/]" if record.available else f"[yellow]{status}[/]")

    console.print(table)
    console.print(f"[dim]📊 Showing {len(records)} books[/]")


def _ask_book() -> tuple:
    author = Prompt.ask("Author").strip()
    title = Prompt.ask("Title").strip()
    return author, title


def find(session: Session) -> None:
    author, title = _ask_book()
    try:
        record = session.catalog.find_book(author, title)
    except NotFoundError as e:
        console.print(f"[yellow]⚠️ {escape(str(e))}[/]")
        return
    console.print(Panel.fit(
        f"[bold]Author:[/] {escape(record.author)}\n"
        f"[bold]Title:[/] {escape(record.title)}\n"
        f"[bold]Year:[/] {record.year}\n"
        f"[bold]Status:[/] {availability_label(record.available)}",
        title="🔍 Book Found",
        border_style="green"
    ))


def add(session: Session) -> None:
    author, title = _ask_book()
    year = IntPrompt.ask("Year")
    try:
        record = session.catalog.add_book(author, title, year)
    except ValidationError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        return
    except CatalogError as e:
        console.print(f"[bold red]Could not save the book:[/] {escape(str(e))}")
        return
    console.print(Panel.fit(f"[green]Added:[/] [bold]{escape(record.title)}[/] - {escape(record.author)}",
                            title="✅ Success", border_style="green"))
    if not session.catalog.settings.insert_on_add:
        console.print("[dim]The new book will be listed after the catalog is reloaded.[/]")


def lend(session: Session) -> None:
    author, title = _ask_book()
    try:
        record = session.catalog.lend_book(author, title, session.facility.is_open)
    except (BusinessRuleError, NotFoundError) as e:
        console.print(f"[yellow]⚠️ {escape(str(e))}[/]")
        return
    console.print(f"[green]📖 Enjoy [bold]{escape(record.title)}[/]![/]")


def return_book(session: Session) -> None:
    author, title = _ask_book()
    try:
        record = session.catalog.return_book(author, title, session.facility.is_open)
    except (BusinessRuleError, NotFoundError) as e:
        console.print(f"[yellow]⚠️ {escape(str(e))}[/]")
        return
    console.print(f"[green]✅ [bold]{escape(record.title)}[/] is back on the shelf.[/]")


def open_library(session: Session) -> None:
    try:
        session.facility.open()
    except BusinessRuleError as e:
        console.print(f"[yellow]⚠️ {escape(str(e))}[/]")
        return
    console.print("[green]🔓 The library is now open.[/]")


def close_library(session: Session) -> None:
    try:
        session.facility.close()
    except BusinessRuleError as e:
        console.print(f"[yellow]⚠️ {escape(str(e))}[/]")
        return
    console.print("[blue]🔒 The library is now closed.[/]")


def stats(session: Session) -> None:
    statistics = session.catalog.get_statistics()
    console.print(Panel.fit(
        f"[bold]Total Books:[/] {statistics['total_books']}\n"
        f"[bold]Unique Authors:[/] {statistics['unique_authors']}\n"
        f"[bold]Available:[/] {statistics['available']}\n"
        f"[bold]Lent Out:[/] {statistics['lent']}",
        title="📊 Statistics",
        border_style="blue"
    ))


BOOKWORM_MENU = [
    ("1", "List all books", "📚", list_all_books),
    ("2", "Find a book", "🔎", find),
    ("3", "Borrow a book", "📖", lend),
    ("4", "Return a book", "↩️", return_book),
]

LIBRARIAN_MENU = [
    ("1", "List all books", "📚", list_all_books),
    ("2", "Add a book", "➕", add),
    ("3", "Open the library", "🔓", open_library),
    ("4", "Close the library", "🔒", close_library),
    ("5", "Show statistics", "📊", stats),
]


def _render_menu(title: str, items) -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon, _ in items:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")
    table.add_row("[reverse]0[/]", "🚪 Back")
    console.print(Panel(table, title=title, border_style="cyan", box=box.HEAVY, padding=(1, 2)))


def run_role_menu(session: Session, title: str, items) -> None:
    actions = {key: action for key, _, _, action in items}
    while True:
        _render_menu(title, items)
        choice = Prompt.ask("Choose an option", choices=list(actions) + ["0"], default="1").strip()
        if choice == "0":
            return
        actions[choice](session)
        print()


def run_menu(session: Optional[Session] = None) -> bool:
    """Role selection loop. Returns False when the catalog could not be loaded."""
    if session is None:
        catalog = _open_catalog()
        if catalog is None:
            return False
        session = Session(catalog)

    while True:
        status = "open" if session.facility.is_open else "closed"
        console.print(Panel(
            "1. Bookworm\n2. Librarian\n0. Quit",
            title=f"{settings.app_name} (library {status})",
            border_style="cyan",
        ))
        choice = Prompt.ask("Who are you?", choices=["1", "2", "0"])
        if choice == "1":
            console.print("[bold]Welcome, bookworm![/]")
            run_role_menu(session, "Bookworm", BOOKWORM_MENU)
        elif choice == "2":
            console.print("[bold]Welcome, librarian![/]")
            run_role_menu(session, "Librarian", LIBRARIAN_MENU)
        else:
            console.print("[green]Goodbye![/]")
            return True


def main() -> None:
    if len(sys.argv) > 1:
        app()
    else:
        setup_logging()
        if not run_menu():
            sys.exit(1)


if __name__ == "__main__":
    main()
