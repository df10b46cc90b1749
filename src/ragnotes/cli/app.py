# src/ragnotes/cli/app.py
"""Command-line interface for ragnotes.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Opens a RagNotes instance from config files and environment
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import NoReturn, TypeVar

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ragnotes import __version__
from ragnotes.commands import flashcards, notes, open_ragnotes, query, status
from ragnotes.commands.base import SearchHit
from ragnotes.config import ConfigError, load_env_file
from ragnotes.log_utils import configure_logging
from ragnotes.ragnotes import RagNotes

T = TypeVar("T")

app = typer.Typer(
    name="ragnotes",
    help="ragnotes - ask questions about your notes and turn them into flashcards.",
    no_args_is_help=True,
)
console = Console()

DEFAULT_OWNER = "local"

OwnerOption = typer.Option(
    DEFAULT_OWNER,
    "--owner",
    "-o",
    envvar="RAGNOTES_OWNER",
    help="Owner whose notes are used",
)
DataDirOption = typer.Option(
    None,
    "--data-dir",
    "-d",
    help="Data directory (default: from config)",
)
ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to config file",
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"ragnotes {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
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
        help="Show debug logging.",
    ),
) -> None:
    """ragnotes - retrieval-augmented personal notes."""
    load_env_file()
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


def _open(data_dir: str | None, config_file: str | None) -> RagNotes:
    rn = open_ragnotes(data_dir, config_file)
    if isinstance(rn, ConfigError):
        console.print(f"[red]Error: {rn.message}[/red]")
        if rn.suggestion:
            console.print(f"[dim]{rn.suggestion}[/dim]")
        raise typer.Exit(1)
    return rn


def _run(
    data_dir: str | None,
    config_file: str | None,
    command: Callable[[RagNotes], Awaitable[T]],
) -> T:
    """Run an async command against a freshly opened instance, then close it."""
    rn = _open(data_dir, config_file)

    async def runner() -> T:
        try:
            return await command(rn)
        finally:
            await rn.wait_for_indexing()

    try:
        return asyncio.run(runner())
    finally:
        rn.close()


def _fail(error: str | None) -> NoReturn:
    console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)


def _read_text(text: str | None, file: Path | None) -> str | None:
    if text is not None and file is not None:
        _fail("Use either --text or --file, not both")
    if file is not None:
        return file.read_text(encoding="utf-8")
    return text


def _render_hits(hits: list[SearchHit], title: str = "Sources") -> None:
    console.print(f"[bold]{title}:[/bold]")
    for i, hit in enumerate(hits, 1):
        console.print(f"  [{i}] [cyan]{hit.title}[/cyan] [dim](score: {hit.score:.3f})[/dim]")
        preview = hit.text[:100].replace("\n", " ")
        if len(hit.text) > 100:
            preview += "..."
        console.print(f"      [dim]{preview}[/dim]")


@app.command(name="add")
def add_cmd(
    title: str = typer.Argument(..., help="Note title"),
    text: str = typer.Option(None, "--text", "-t", help="Note text"),
    file: Path = typer.Option(None, "--file", "-f", help="Read note text from a file"),
    parent: str = typer.Option(None, "--parent", help="Parent note ID"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Add a note and index it."""
    body = _read_text(text, file)
    result = _run(
        data_dir,
        config_file,
        lambda rn: notes.add_note(rn, owner, title, body, parent_document_id=parent),
    )
    if not result.success or result.note is None:
        _fail(result.error)

    console.print(f"[green]Added note[/green] [cyan]{result.note.title}[/cyan]")
    console.print(f"  ID: {result.note.document_id}")
    console.print(f"  Chunks indexed: {result.chunks_indexed}")


@app.command(name="update")
def update_cmd(
    document_id: str = typer.Argument(..., help="Note ID"),
    title: str = typer.Option(None, "--title", help="New title"),
    text: str = typer.Option(None, "--text", "-t", help="New note text"),
    file: Path = typer.Option(None, "--file", "-f", help="Read new note text from a file"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Update a note. Changing the text reindexes it."""
    body = _read_text(text, file)
    result = _run(
        data_dir,
        config_file,
        lambda rn: notes.update_note(rn, owner, document_id, title=title, text=body),
    )
    if not result.success or result.note is None:
        _fail(result.error)

    console.print(f"[green]Updated note[/green] [cyan]{result.note.title}[/cyan]")
    console.print(f"  Chunks indexed: {result.chunks_indexed}")


@app.command(name="reindex")
def reindex_cmd(
    document_id: str = typer.Argument(..., help="Note ID"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Rebuild the chunk index of a note."""
    result = _run(data_dir, config_file, lambda rn: notes.reindex_note(rn, owner, document_id))
    if not result.success or result.note is None:
        _fail(result.error)

    console.print(f"[green]Reindexed[/green] [cyan]{result.note.title}[/cyan]")
    console.print(f"  Chunks indexed: {result.chunks_indexed}")
    if result.chunks_skipped:
        console.print(f"  [yellow]Chunks skipped: {result.chunks_skipped}[/yellow]")
    if result.reason:
        console.print(f"  [dim]Nothing indexed: {result.reason}[/dim]")


@app.command(name="remove")
def remove_cmd(
    document_id: str = typer.Argument(..., help="Note ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Delete a note and its chunks."""
    if not force and not typer.confirm(f"Delete note {document_id}?"):
        console.print("[dim]Cancelled.[/dim]")
        raise typer.Exit(0)

    rn = _open(data_dir, config_file)
    try:
        result = notes.remove_note(rn, owner, document_id)
    finally:
        rn.close()

    if not result.success:
        _fail(result.error)
    console.print(
        f"[green]Removed note[/green] {result.document_id} "
        f"[dim]({result.chunks_deleted} chunks deleted)[/dim]"
    )


@app.command(name="list")
def list_cmd(
    archived: bool = typer.Option(False, "--archived", help="Include archived notes"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """List notes."""
    rn = _open(data_dir, config_file)
    try:
        result = notes.list_notes(rn, owner, include_archived=archived)
    finally:
        rn.close()

    if not result.notes:
        console.print("[dim]No notes yet. Add one with 'ragnotes add'.[/dim]")
        raise typer.Exit(0)

    table = Table(title=f"Notes ({len(result.notes)})")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Chunks", justify="right")
    for note in result.notes:
        table.add_row(note.document_id, note.title, str(note.chunk_count))
    console.print(table)


@app.command(name="search")
def search_cmd(
    text: str = typer.Argument(..., help="Search query"),
    k: int = typer.Option(None, "--k", "-k", help="Number of results to return"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Semantic search over your notes."""
    result = _run(data_dir, config_file, lambda rn: query.search(rn, owner, text, k=k))
    if not result.success:
        _fail(result.error)

    if not result.hits:
        console.print("[yellow]No results found.[/yellow]")
        raise typer.Exit(0)
    _render_hits(result.hits, title="Results")


@app.command(name="ask")
def ask_cmd(
    question: str = typer.Argument(..., help="Question to ask"),
    show_sources: bool = typer.Option(
        False, "--sources", "-s", help="Show the note excerpts used"
    ),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Ask a question about your notes."""
    result = _run(data_dir, config_file, lambda rn: query.ask(rn, owner, question))
    if not result.success:
        _fail(result.error)

    console.print(Panel(Markdown(result.answer), title="Answer", border_style="green"))
    if show_sources and result.sources:
        console.print()
        _render_hits(result.sources)


@app.command(name="flashcards")
def flashcards_cmd(
    document_id: str = typer.Argument(None, help="Note ID to generate from"),
    text: str = typer.Option(None, "--text", "-t", help="Generate from this text instead"),
    deck: str = typer.Option(None, "--deck", help="Title of the deck to create"),
    no_save: bool = typer.Option(False, "--no-save", help="Only show the cards"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Generate flashcards from a note or text."""
    result = _run(
        data_dir,
        config_file,
        lambda rn: flashcards.generate(
            rn,
            owner,
            document_id=document_id,
            text=text,
            deck_title=deck,
            save=not no_save,
        ),
    )
    if not result.success:
        _fail(result.error)

    if not result.cards:
        console.print("[yellow]No flashcards could be generated.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Flashcards ({len(result.cards)})", show_lines=True)
    table.add_column("Front", style="cyan")
    table.add_column("Back")
    for card in result.cards:
        table.add_row(card.front, card.back)
    console.print(table)

    if result.deck_id:
        console.print(f"Saved to deck [cyan]{result.deck_title}[/cyan] [dim]({result.deck_id})[/dim]")


@app.command(name="decks")
def decks_cmd(
    deck_id: str = typer.Argument(None, help="Deck ID to show cards of"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """List flashcard decks, or show the cards of one deck."""
    rn = _open(data_dir, config_file)
    try:
        result = flashcards.list_decks(rn, owner, deck_id=deck_id)
    finally:
        rn.close()

    if not result.success:
        _fail(result.error)

    if not result.decks:
        console.print("[dim]No decks yet. Create one with 'ragnotes flashcards'.[/dim]")
        raise typer.Exit(0)

    if deck_id is not None:
        shown = result.decks[0]
        table = Table(title=f"{shown.title} ({shown.card_count} cards)", show_lines=True)
        table.add_column("Front", style="cyan")
        table.add_column("Back")
        for card in shown.cards:
            table.add_row(card.front, card.back)
        console.print(table)
        return

    table = Table(title=f"Decks ({len(result.decks)})")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Cards", justify="right")
    for info in result.decks:
        table.add_row(info.deck_id, info.title, str(info.card_count))
    console.print(table)


@app.command(name="status")
def status_cmd(
    detailed: bool = typer.Option(False, "--detailed", help="Show chunk counts per note"),
    owner: str = OwnerOption,
    data_dir: str = DataDirOption,
    config_file: str = ConfigOption,
) -> None:
    """Show index statistics."""
    rn = _open(data_dir, config_file)
    try:
        result = status.status(rn, owner, detailed=detailed)
    finally:
        rn.close()

    table = Table(title="Index Status")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Owner", result.owner_id)
    table.add_row("Notes", str(result.total_notes))
    table.add_row("Chunks", str(result.total_chunks))
    table.add_row("Decks", str(result.total_decks))
    console.print(table)

    if detailed and result.notes:
        console.print()
        detail_table = Table(title="Chunks by Note")
        detail_table.add_column("Note", style="cyan")
        detail_table.add_column("Chunks", justify="right", style="green")
        for note in result.notes:
            detail_table.add_row(note.title, str(note.chunk_count))
        console.print(detail_table)
