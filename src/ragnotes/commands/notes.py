# src/ragnotes/commands/notes.py
"""Note commands - add, update, reindex, remove and list notes.

Notes are entered as plain text and stored as block JSON, the same shape
the editor produces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ragnotes.commands.base import ListResult, NoteInfo, NoteResult, RemoveResult
from ragnotes.exceptions import RagNotesError
from ragnotes.extractor import blocks_from_text

if TYPE_CHECKING:
    from ragnotes.models import Document
    from ragnotes.ragnotes import RagNotes


def _note_info(notes: RagNotes, document: Document) -> NoteInfo:
    return NoteInfo(
        document_id=document.id,
        title=document.title,
        chunk_count=len(notes.chunk_store.get_by_document(document.id)),
        is_archived=document.is_archived,
        parent_document_id=document.parent_document_id,
    )


async def add_note(
    notes: RagNotes,
    owner_id: str,
    title: str,
    text: str | None = None,
    parent_document_id: str | None = None,
    wait: bool = True,
) -> NoteResult:
    """Create a note from plain text.

    Args:
        notes: RagNotes instance
        owner_id: Owner of the new note
        title: Note title
        text: Plain text body; paragraphs are separated by blank lines
        parent_document_id: Optional parent note
        wait: Wait for background indexing before returning
    """
    content = blocks_from_text(text) if text is not None else None
    try:
        document = await notes.documents.create(
            owner_id,
            title=title,
            content=content,
            parent_document_id=parent_document_id,
        )
    except RagNotesError as e:
        return NoteResult(success=False, error=str(e))

    if wait:
        await notes.wait_for_indexing()

    info = _note_info(notes, document)
    return NoteResult(success=True, note=info, chunks_indexed=info.chunk_count)


async def update_note(
    notes: RagNotes,
    owner_id: str,
    document_id: str,
    title: str | None = None,
    text: str | None = None,
    wait: bool = True,
) -> NoteResult:
    """Update a note's title and/or text. Only a text change reindexes."""
    content = blocks_from_text(text) if text is not None else None
    try:
        document = await notes.documents.update(
            document_id,
            owner_id,
            title=title,
            content=content,
        )
    except RagNotesError as e:
        return NoteResult(success=False, error=str(e))

    if wait:
        await notes.wait_for_indexing()

    info = _note_info(notes, document)
    return NoteResult(success=True, note=info, chunks_indexed=info.chunk_count)


async def reindex_note(notes: RagNotes, owner_id: str, document_id: str) -> NoteResult:
    """Rebuild a note's chunk index immediately."""
    try:
        document = notes.documents.get(document_id, owner_id)
        result = await notes.reindex(document_id, owner_id)
    except RagNotesError as e:
        return NoteResult(success=False, error=str(e))

    return NoteResult(
        success=True,
        note=_note_info(notes, document),
        chunks_indexed=result.chunks_indexed,
        chunks_skipped=result.chunks_skipped,
        reason=result.reason,
    )


def remove_note(notes: RagNotes, owner_id: str, document_id: str) -> RemoveResult:
    """Delete a note and its chunks."""
    try:
        removed = notes.documents.remove(document_id, owner_id)
    except RagNotesError as e:
        return RemoveResult(success=False, document_id=document_id, error=str(e))
    return RemoveResult(success=True, document_id=document_id, chunks_deleted=removed)


def list_notes(notes: RagNotes, owner_id: str, include_archived: bool = False) -> ListResult:
    """List the owner's notes with their chunk counts."""
    documents = notes.documents.list_documents(owner_id, include_archived=include_archived)
    return ListResult(success=True, notes=[_note_info(notes, d) for d in documents])
