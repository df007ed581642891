"""Main CLI application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import structlog
import typer

from fastfuzzy import __version__
from fastfuzzy.cli import config
from fastfuzzy.cli.context import CLIContext, switch_value
from fastfuzzy.cli.formatters import (
    format_score,
    print_error,
    print_results_json,
    print_results_table,
)
from fastfuzzy.infrastructure.logging import configure_logging
from fastfuzzy.modules.matching import (
    MatchingError,
    SearchOptions,
    levenshtein_distance,
    normalize_string,
    search,
    similarity,
)

logger = structlog.get_logger()

# Main application
app = typer.Typer(
    name="fastfuzzy",
    help="Typo-tolerant string similarity and ranked search.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register subcommand groups
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fastfuzzy {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress informational output.",
    ),
) -> None:
    """fastfuzzy: fuzzy string matching from the command line.

    Score string pairs and rank candidate lists against a query.
    """
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    configure_logging(debug=verbose)


@app.command("score")
def score(
    first: Annotated[str, typer.Argument(help="First string")],
    second: Annotated[str, typer.Argument(help="Second string")],
    raw: Annotated[
        bool,
        typer.Option(
            "--raw",
            help="Compare as given instead of stripping diacritics and folding case",
        ),
    ] = False,
) -> None:
    """Print the similarity of two strings (0.0 to 1.0).

    \b
    Examples:
        fastfuzzy score café cafe          # 1.0000
        fastfuzzy score kitten sitting     # 0.5714
        fastfuzzy score Apple apple --raw  # 0.8000
    """
    typer.echo(format_score(similarity(first, second, normalize=not raw)))


@app.command("distance")
def distance(
    first: Annotated[str, typer.Argument(help="First string")],
    second: Annotated[str, typer.Argument(help="Second string")],
) -> None:
    """Print the Levenshtein edit distance between two strings.

    \b
    Examples:
        fastfuzzy distance kitten sitting  # 3
    """
    typer.echo(str(levenshtein_distance(first, second)))


@app.command("normalize")
def normalize(
    text: Annotated[str, typer.Argument(help="Text to normalize")],
    keep_case: Annotated[
        bool,
        typer.Option("--keep-case", help="Do not case fold"),
    ] = False,
) -> None:
    """Print text with diacritics stripped and whitespace collapsed.

    \b
    Examples:
        fastfuzzy normalize "  Crème   Brûlée "   # creme brulee
    """
    typer.echo(normalize_string(text, fold=not keep_case))


@app.command("search")
def search_command(
    query: Annotated[str, typer.Argument(help="Text to search for")],
    candidates: Annotated[
        list[str] | None,
        typer.Argument(help="Candidate strings"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read candidates from a file, one per line"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Maximum number of results"),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option("--threshold", "-t", help="Minimum score to keep a candidate"),
    ] = None,
    normalize: Annotated[
        bool,
        typer.Option("--normalize", help="Strip diacritics and collapse whitespace"),
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
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON"),
    ] = False,
) -> None:
    """Rank candidates by similarity to a query.

    Candidates come from arguments and/or --file. Flags override the
    defaults stored with 'fastfuzzy config set'.

    \b
    Examples:
        fastfuzzy search apple apple applle banana
        fastfuzzy search cafe -f menu.txt --limit 3
        fastfuzzy search APPLE apple Apple --case-sensitive --json
    """
    items = list(candidates or [])

    if file is not None:
        try:
            content = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print_error(f"Cannot read candidates from {file}: {e}")
            raise typer.Exit(1) from e
        items.extend(line for line in content.splitlines() if line.strip())

    if not items:
        print_error("No candidates given. Pass them as arguments or with --file.")
        raise typer.Exit(1)

    try:
        overrides = SearchOptions(
            limit=limit,
            threshold=threshold,
            normalize=switch_value(normalize, raw, "--normalize", "--raw"),
            ignore_case=switch_value(
                ignore_case, case_sensitive, "--ignore-case", "--case-sensitive"
            ),
        )
        stored = CLIContext.get().get_config().to_search_options()
        options = overrides.merged_over(stored)
        results = search(query, items, options)
    except MatchingError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    resolved = options.resolve()
    logger.debug(
        "search_completed",
        candidates=len(items),
        returned=len(results),
        limit=resolved.limit,
        threshold=resolved.threshold,
        normalize=resolved.normalize,
        ignore_case=resolved.ignore_case,
    )

    if as_json:
        print_results_json(results)
    else:
        print_results_table(results, query)
