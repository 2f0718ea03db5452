"""Typer-based CLI for exploring Angular constructs in documentation.json."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from . import __version__, config
from .formatter import Formatter
from .loader import DocumentationError, DocumentationLoader
from .searcher import VALID_TYPES, InvalidTypeError, Searcher, validate_type

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="🔎 ng-explorer: search and explore Angular components, services, directives, etc.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

TYPE_HELP = f"Filter by type ({', '.join(VALID_TYPES)})."


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"ng-explorer v{__version__}")
        raise typer.Exit()


def _type_callback(value: str) -> str:
    try:
        return validate_type(value)
    except InvalidTypeError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    ctx: typer.Context,
    doc_path: Optional[str] = typer.Option(
        None,
        "--doc-path",
        "-d",
        help="Path to the Compodoc documentation.json file (defaults to the configured path).",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """ng-explorer: query a Compodoc documentation.json from the terminal."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    ctx.obj = {"doc_path": doc_path or config.DOC_PATH}


def _open_searcher(ctx: typer.Context) -> Searcher:
    doc_path = (ctx.obj or {}).get("doc_path") or config.DOC_PATH
    loader = DocumentationLoader(doc_path)
    try:
        return Searcher(loader)
    except DocumentationError as exc:
        logger.debug("Loading %s failed", loader.doc_path, exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command("search")
def search(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Search query (omit to list all)."),
    construct_type: str = typer.Option("all", "--type", "-t", help=TYPE_HELP, callback=_type_callback),
    path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Filter by file path pattern (supports **, *, ? and {a,b}, e.g. apps/{web,admin}/**)."
    ),
    limit: int = typer.Option(config.DEFAULT_LIMIT, "--limit", "-l", min=0, help="Limit number of results."),
    exact: bool = typer.Option(False, "--exact", "-e", help="Use exact name matching instead of fuzzy search."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show full API details for each result."),
):
    """Search constructs by name or selector; omit the query to list them."""
    searcher = _open_searcher(ctx)
    formatter = Formatter()

    if query:
        if exact:
            results = searcher.search_exact(query, construct_type, path, limit)
        else:
            results = searcher.search(query, construct_type, path, limit)
    else:
        results = searcher.list_by_type(construct_type, path, limit)

    if verbose and results:
        for position, result in enumerate(results):
            if position > 0:
                console.rule()
            console.print(formatter.format_api_details(result))
    else:
        console.print(formatter.format_search_results(results))

    if not results:
        return
    if query:
        console.print(formatter.format_count(len(results)))
    else:
        total = searcher.count_by_type(construct_type, path)
        console.print(formatter.format_count(len(results), total))


@app.command("api")
def api(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the construct."),
    construct_type: str = typer.Option("all", "--type", "-t", help=TYPE_HELP, callback=_type_callback),
):
    """Display API details for a component, service, or other construct."""
    searcher = _open_searcher(ctx)
    formatter = Formatter()

    construct = searcher.find_by_name(name, construct_type)
    if construct is None:
        similar = searcher.suggest(name, construct_type)
        err_console.print(formatter.format_suggestions(name, similar))
        raise typer.Exit(code=1)

    console.print(formatter.format_api_details(construct))


@app.command("stats")
def stats(ctx: typer.Context):
    """Show statistics about the Angular codebase."""
    searcher = _open_searcher(ctx)
    console.print(Formatter().stats_table(searcher.stats()))


if __name__ == "__main__":
    app()
