"""WikiSearch CLI: search Wikipedia from the terminal.

Usage:
    python cli/main.py --help

Commands:
    search   → result cards for a query
    suggest  → type-ahead titles for a partial query
    popular  → cards for a random popular topic (the landing page)
    show     → full article view for one card of a search
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from wikisearch.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from contextlib import contextmanager
from typing import Iterator, Optional

import typer

from cli.rendering import render_article, render_cards
from wikisearch.client import WikipediaClient
from wikisearch.config import settings
from wikisearch.orchestrator import build_default_orchestrator
from wikisearch.session import EMPTY_HINT, SearchSession

app = typer.Typer(
    name="wikisearch",
    help="Search Wikipedia and read article summaries.",
    no_args_is_help=True,
)


@contextmanager
def _open_session() -> Iterator[SearchSession]:
    """Yield a session backed by a live Wikipedia client, closed on exit."""
    with WikipediaClient() as client:
        yield SearchSession(orchestrator=build_default_orchestrator(client))


def _echo_page(session: SearchSession) -> None:
    """Print the session's current page, exiting non-zero on the error state."""
    if session.status == "error":
        typer.echo(f"❌ {session.message}")
        raise typer.Exit(code=1)
    if session.status == "empty":
        typer.echo(f"🔍 {session.message}")
        typer.echo(EMPTY_HINT)
        return
    if session.status == "idle":
        return
    typer.echo(render_cards(session.results))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("search")
def search(
    query: str = typer.Argument(..., help="Search query."),
    limit: int = typer.Option(
        settings.default_limit, "--limit", "-n", min=1, help="Maximum number of results."
    ),
) -> None:
    """Search Wikipedia and print result cards."""
    if not query.strip():
        typer.echo("❌ Query must not be blank.")
        raise typer.Exit(code=1)

    with _open_session() as session:
        typer.echo(f"[search] Searching {query.strip()!r} …")
        session.perform_search(query, limit=limit)
    _echo_page(session)


@app.command("suggest")
def suggest(
    query: str = typer.Argument(..., help="Partial query."),
) -> None:
    """Print type-ahead suggestions, one title per line."""
    with _open_session() as session:
        session.show_suggestions(query)
    if not session.suggestions_visible:
        return
    for title in session.suggestions:
        typer.echo(title)


@app.command("popular")
def popular() -> None:
    """Print cards for a randomly chosen popular topic."""
    with _open_session() as session:
        session.load_popular()
    if session.status == "idle":
        typer.echo(f"⚠️  Could not load popular articles for {session.topic!r}.")
        return
    typer.echo(f"⭐ Topik populer: {session.topic}")
    _echo_page(session)


@app.command("show")
def show(
    query: str = typer.Argument(..., help="Search query."),
    index: int = typer.Option(1, "--index", "-i", min=1, help="1-based card number to open."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum number of results."),
) -> None:
    """Search, then print the full article for the chosen card."""
    if not query.strip():
        typer.echo("❌ Query must not be blank.")
        raise typer.Exit(code=1)

    with _open_session() as session:
        session.perform_search(query, limit=limit)

    if session.status != "results":
        _echo_page(session)
        raise typer.Exit(code=1)
    if index > len(session.results):
        typer.echo(f"❌ Only {len(session.results)} result(s); no card #{index}.")
        raise typer.Exit(code=1)

    session.open_article(session.results[index - 1])
    typer.echo(render_article(session.selected))
    session.close_article()


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
