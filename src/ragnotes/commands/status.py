# src/ragnotes/commands/status.py
"""Status command - show index statistics for one owner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ragnotes.commands.base import StatusResult
from ragnotes.commands.notes import list_notes

if TYPE_CHECKING:
    from ragnotes.ragnotes import RagNotes


def status(notes: RagNotes, owner_id: str, detailed: bool = False) -> StatusResult:
    """Get note, chunk and deck counts for an owner.

    Args:
        notes: RagNotes instance
        owner_id: Owner to report on
        detailed: If True, include the per-note breakdown
    """
    listing = list_notes(notes, owner_id, include_archived=True)

    result = StatusResult(
        success=True,
        owner_id=owner_id,
        total_notes=len(listing.notes),
        total_chunks=notes.chunk_store.count_chunks(owner_id),
        total_decks=len(notes.list_decks(owner_id)),
    )
    if detailed:
        result.notes = listing.notes
    return result
