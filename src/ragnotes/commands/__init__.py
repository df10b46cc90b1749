"""UI-agnostic command layer for ragnotes.

Command functions take a RagNotes instance and return data structures,
allowing UIs to render results appropriately.

Usage:
    from ragnotes.commands import notes, open_ragnotes, query

    rn = open_ragnotes("./ragnotes_data")
    result = await notes.add_note(rn, "alice", "Trip", "Paris is the capital of France.")
    answer = await query.ask(rn, "alice", "What is the capital of France?")
"""

from ragnotes.commands import flashcards, notes, query, status
from ragnotes.commands.base import (
    AskResult,
    CardInfo,
    CommandResult,
    DeckInfo,
    DecksResult,
    FlashcardsResult,
    ListResult,
    NoteInfo,
    NoteResult,
    RemoveResult,
    SearchHit,
    SearchResult,
    StatusResult,
    open_ragnotes,
)

__all__ = [
    # Base types
    "CommandResult",
    "NoteInfo",
    "NoteResult",
    "RemoveResult",
    "ListResult",
    "SearchHit",
    "SearchResult",
    "AskResult",
    "CardInfo",
    "FlashcardsResult",
    "DeckInfo",
    "DecksResult",
    "StatusResult",
    "open_ragnotes",
    # Command modules
    "notes",
    "query",
    "flashcards",
    "status",
]
