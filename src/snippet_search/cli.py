from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from snippet_search.config import settings
from snippet_search.embedder import EMBEDDING_DIM
from snippet_search.errors import SnippetSearchError
from snippet_search.logging_utils import setup_logging
from snippet_search.search import semantic_search
from snippet_search.seed import seed_store
from snippet_search.store import DocumentStore

VERSION = "0.1.0"

# Exit status typer uses for unknown commands and missing or bad arguments
USAGE_ERROR_EXIT_CODE = 2

USAGE = (
    "Usage: snippet-search COMMAND [ARGS]\n"
    "\n"
    "Commands:\n"
    "  seed           Write the demonstration documents to the store\n"
    "  query TEXT     Show the documents most similar to TEXT\n"
    "  health         Check configuration and store\n"
    "  version        Print version\n"
    "\n"
    "Run 'snippet-search COMMAND --help' for options."
)

app = typer.Typer(add_completion=False, help="Semantic snippet search demo CLI")


def _fail(e: Exception) -> NoReturn:
    typer.secho(f"FAILED: {e}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    """
    Semantic snippet search demo CLI.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(USAGE)
        raise typer.Exit(code=0)


@app.command()
def seed(
    store: Path = typer.Option(settings.store_path, "--store", help="Path to the document store (JSON)"),
) -> None:
    """
    Overwrite the store with the demonstration documents.
    """
    setup_logging(settings.log_level)

    try:
        summary = seed_store(store)
    except SnippetSearchError as e:
        _fail(e)

    typer.echo(f"Seeded {summary['written']} documents into {summary['store']}")


@app.command()
def query(
    text: str = typer.Argument(..., help="Query text"),
    store: Path = typer.Option(settings.store_path, "--store", help="Path to the document store (JSON)"),
    top_k: int = typer.Option(settings.top_k, "--top-k", min=0, help="Number of results to return"),
) -> None:
    """
    Rank stored documents against the query text.
    """
    setup_logging(settings.log_level)

    try:
        results = semantic_search(text, store_path=store, top_k=top_k)
    except SnippetSearchError as e:
        _fail(e)

    if not results:
        typer.echo("No results found.")
        return

    for rank, r in enumerate(results, start=1):
        doc = r.document
        typer.echo(f"{rank}. {doc.id} | {doc.repo} | {doc.file} | score={r.score:.4f}")


@app.command()
def health(
    store: Path = typer.Option(settings.store_path, "--store", help="Path to the document store (JSON)"),
) -> None:
    """Health check to verify config, logging and store."""
    setup_logging(settings.log_level)
    log = logging.getLogger("snippet_search.health")

    log.info("Store: %s", store)
    log.info("Embedding dimension: %d", EMBEDDING_DIM)
    log.info("Default top-k: %d", settings.top_k)

    try:
        docs = DocumentStore(store).load()
    except SnippetSearchError as e:
        _fail(e)

    typer.echo(f"OK ({len(docs)} documents)")


@app.command()
def version() -> None:
    """Print version and exit."""
    typer.echo(f"snippet-search {VERSION}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Console entry point. Unknown commands and bad arguments print usage
    and exit 0; command failures exit 1.

    typer reports usage errors itself and exits with USAGE_ERROR_EXIT_CODE.
    """
    try:
        app(args=argv, prog_name="snippet-search")
    except SystemExit as e:
        code = e.code
    else:
        code = 0

    if code == USAGE_ERROR_EXIT_CODE:
        typer.echo(USAGE)
        return 0
    if code is None:
        return 0
    return code if isinstance(code, int) else 1
