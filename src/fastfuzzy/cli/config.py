"""Search defaults configuration CLI commands."""

from __future__ import annotations

from dataclasses import replace
from typing import Annotated

import typer

from fastfuzzy.cli.context import CLIContext, switch_value
from fastfuzzy.cli.formatters import (
    print_config,
    print_error,
    print_info,
    print_success,
)
from fastfuzzy.infrastructure.config import (
    ConfigError,
    GlobalConfig,
    reset_global_config,
    save_global_config,
)
from fastfuzzy.modules.matching import InvalidOptionsError

app = typer.Typer(
    name="config",
    help="Manage stored search defaults.",
    no_args_is_help=True,
)


@app.command("show")
def show() -> None:
    """Show stored and effective search defaults."""
    config = CLIContext.get().get_config()
    print_config(config, config.to_search_options().resolve())


@app.command("set")
def set_defaults(
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Default maximum number of results"),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option("--threshold", "-t", help="Default minimum score"),
    ] = None,
    normalize: Annotated[
        bool,
        typer.Option("--normalize", help="Normalize diacritics and whitespace"),
    ] = False,
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Compare text as given"),
    ] = False,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", help="Compare case-insensitively"),
    ] = False,
    case_sensitive: Annotated[
        bool,
        typer.Option("--case-sensitive", help="Compare case-sensitively"),
    ] = False,
) -> None:
    """Store search defaults. Unspecified values are left unchanged.

    \b
    Examples:
        fastfuzzy config set --limit 5
        fastfuzzy config set --threshold 0.6 --case-sensitive
    """
    ctx = CLIContext.get()
    updates = {
        name: value
        for name, value in (
            ("limit", limit),
            ("threshold", threshold),
            ("normalize", switch_value(normalize, raw, "--normalize", "--raw")),
            (
                "ignore_case",
                switch_value(
                    ignore_case, case_sensitive, "--ignore-case", "--case-sensitive"
                ),
            ),
        )
        if value is not None
    }

    if not updates:
        print_info("Nothing to change. See 'fastfuzzy config set --help'.")
        return

    try:
        config = replace(ctx.get_config(), **updates)
        save_global_config(config)
    except (InvalidOptionsError, ConfigError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    ctx.config = config
    print_success(f"Updated {', '.join(sorted(updates))}")


@app.command("reset")
def reset() -> None:
    """Remove stored search defaults."""
    try:
        removed = reset_global_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    CLIContext.get().config = GlobalConfig()

    if removed:
        print_success("Search defaults reset")
    else:
        print_info("No stored defaults to reset")
