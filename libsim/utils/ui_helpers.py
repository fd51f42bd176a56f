import os
import json
from typing import Iterable, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIBSIM_OUTPUT"

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def availability_label(available: bool) -> str:
    return "available" if available else "lent out"


def print_list_result(records: Iterable[Any]) -> None:
    """Print the catalog according to the current output mode.
    - plain: 'Author - Title (Year) [status]' lines, or 'No books in library.'
    - json: JSON array of record dicts
    - rich: Rich table
    """
    records = list(records)
    mode = get_output_mode()

    if not records:
        print("No books in library.")
        return

    if mode == "json":
        print(json.dumps([r.to_dict() for r in records], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Catalog", show_lines=True, header_style="bold cyan")
        table.add_column("Author", style="magenta")
        table.add_column("Title", style="white")
        table.add_column("Year", style="white", justify="right")
        table.add_column("Status", style="white")
        for r in records:
            status = availability_label(r.available)
            colour = "green" if r.available else "yellow"
            table.add_row(escape(r.author), escape(r.title), str(r.year), f"[{colour}]{status}[/]")
        _console.print(table)
    else:
        for r in records:
            print(f"{r.author} - {r.title} ({r.year}) [{availability_label(r.available)}]")


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_books", 0)
    authors = stats.get("unique_authors", 0)
    available = stats.get("available", 0)
    lent = stats.get("lent", 0)

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {total}\n[bold]Unique Authors:[/] {authors}\n"
            f"[bold]Available:[/] {available}\n[bold]Lent Out:[/] {lent}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Unique Authors: {authors}")
        print(f"Available: {available}")
        print(f"Lent Out: {lent}")
