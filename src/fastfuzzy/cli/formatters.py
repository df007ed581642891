"""Rich console output formatting utilities."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fastfuzzy.cli.context import CLIContext

if TYPE_CHECKING:
    from fastfuzzy.infrastructure.config import GlobalConfig
    from fastfuzzy.modules.matching.search import (
        ResolvedSearchOptions,
        SearchResult,
    )

__all__ = [
    "console",
    "error_console",
    "format_score",
    "print_config",
    "print_error",
    "print_info",
    "print_results_json",
    "print_results_table",
    "print_success",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def format_score(score: float) -> str:
    """Format a similarity score with four decimals."""
    return f"{score:.4f}"


def _score_style(score: float) -> str:
    """Get color for a score band."""
    if score >= 0.8:
        return "green"
    if score >= 0.5:
        return "yellow"
    return "red"


def _truncate(text: str, max_length: int) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


def print_results_table(results: list[SearchResult], query: str) -> None:
    """Print ranked search results as a table.

    Args:
        results: Results in ranked order.
        query: The query, used in the table title.
    """
    if not results:
        print_info(f"No matches for: {query}")
        return

    table = Table(title=f"Matches for {query!r}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Item", style="cyan", max_width=60)
    table.add_column("Score", justify="right")
    table.add_column("Index", justify="right", style="dim")

    for rank, result in enumerate(results, start=1):
        style = _score_style(result.score)
        table.add_row(
            str(rank),
            _truncate(result.item, 60),
            f"[{style}]{format_score(result.score)}[/{style}]",
            str(result.index),
        )

    console.print(table)


def print_results_json(results: list[SearchResult]) -> None:
    """Print results as a JSON array of {item, score, index} objects."""
    payload = json.dumps([result.to_dict() for result in results], ensure_ascii=False)
    typer.echo(payload)


def print_config(config: GlobalConfig, effective: ResolvedSearchOptions) -> None:
    """Print stored and effective search defaults.

    Args:
        config: Stored configuration; unset fields are marked "(default)".
        effective: Options after built-in defaults are applied.
    """
    rows = [
        ("limit", config.limit, effective.limit),
        ("threshold", config.threshold, effective.threshold),
        ("normalize", config.normalize, effective.normalize),
        ("ignore_case", config.ignore_case, effective.ignore_case),
    ]

    lines = [
        f"[bold]{name + ':':<13}[/bold]{effective_value!s:<8}"
        f"[dim]{'(stored)' if stored is not None else '(default)'}[/dim]"
        for name, stored, effective_value in rows
    ]

    panel = Panel(
        "\n".join(lines),
        title="[cyan]Search Defaults[/cyan]",
        border_style="cyan",
    )
    console.print(panel)
