# src/ragnotes/commands/base.py
"""Base types for the commands layer.

Commands return these dataclasses instead of printing, so any UI can
render them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ragnotes.config import ConfigError, create_ragnotes, get_ragnotes_config

if TYPE_CHECKING:
    from ragnotes.ragnotes import RagNotes


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class NoteInfo:
    """Summary of one note."""

    document_id: str
    title: str
    chunk_count: int = 0
    is_archived: bool = False
    parent_document_id: str | None = None


@dataclass
class NoteResult(CommandResult):
    """Result of the add, update and reindex commands.

    Attributes:
        note: The note after the operation
        chunks_indexed: Chunks in the index for this note (after indexing)
        chunks_skipped: Chunks whose embedding failed (reindex only)
        reason: Why nothing was indexed, if applicable (reindex only)
    """

    note: NoteInfo | None = None
    chunks_indexed: int = 0
    chunks_skipped: int = 0
    reason: str | None = None


@dataclass
class RemoveResult(CommandResult):
    """Result of the remove command."""

    document_id: str = ""
    chunks_deleted: int = 0


@dataclass
class ListResult(CommandResult):
    """Result of the list command."""

    notes: list[NoteInfo] = field(default_factory=list)


@dataclass
class SearchHit:
    """A single search result."""

    chunk_id: str
    document_id: str
    title: str
    text: str
    score: float


@dataclass
class SearchResult(CommandResult):
    """Result of the search command."""

    query: str = ""
    hits: list[SearchHit] = field(default_factory=list)


@dataclass
class AskResult(CommandResult):
    """Result of the ask command.

    Attributes:
        query: The original question
        answer: Answer text (always set on success, possibly an apology)
        sources: Chunks used as context, most relevant first
    """

    query: str = ""
    answer: str = ""
    sources: list[SearchHit] = field(default_factory=list)


@dataclass
class CardInfo:
    """A flashcard as shown to the user."""

    front: str
    back: str


@dataclass
class FlashcardsResult(CommandResult):
    """Result of the flashcards command.

    Attributes:
        cards: Generated cards (empty if the model produced nothing usable)
        deck_id: Deck the cards were saved to, if saved
        deck_title: Title of that deck
    """

    cards: list[CardInfo] = field(default_factory=list)
    deck_id: str | None = None
    deck_title: str | None = None


@dataclass
class DeckInfo:
    """Summary of one flashcard deck."""

    deck_id: str
    title: str
    description: str | None = None
    card_count: int = 0
    cards: list[CardInfo] = field(default_factory=list)


@dataclass
class DecksResult(CommandResult):
    """Result of the decks command."""

    decks: list[DeckInfo] = field(default_factory=list)


@dataclass
class StatusResult(CommandResult):
    """Result of the status command."""

    owner_id: str = ""
    total_notes: int = 0
    total_chunks: int = 0
    total_decks: int = 0
    notes: list[NoteInfo] = field(default_factory=list)


def open_ragnotes(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> RagNotes | ConfigError:
    """Create a RagNotes instance from config files and environment.

    Returns:
        RagNotes instance, or ConfigError if configuration is invalid
    """
    config = get_ragnotes_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    try:
        return create_ragnotes(config)
    except Exception as e:
        return ConfigError(message=f"Failed to create ragnotes: {e}")
