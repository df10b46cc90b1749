# src/ragnotes/commands/query.py
"""Query commands - semantic search and question answering over notes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ragnotes.commands.base import AskResult, SearchHit, SearchResult
from ragnotes.exceptions import EmbeddingError

if TYPE_CHECKING:
    from ragnotes.ragnotes import RagNotes


def _title(notes: RagNotes, document_id: str, cache: dict[str, str]) -> str:
    if document_id not in cache:
        document = notes.document_store.get(document_id)
        cache[document_id] = document.title if document else "(deleted)"
    return cache[document_id]


async def search(
    notes: RagNotes,
    owner_id: str,
    query: str,
    k: int | None = None,
) -> SearchResult:
    """Find the owner's chunks most similar to a query."""
    try:
        scored = await notes.retrieve(query, owner_id, k=k)
    except EmbeddingError as e:
        return SearchResult(success=False, query=query, error=f"Search failed: {e}")

    titles: dict[str, str] = {}
    hits = []
    for hit in scored:
        chunk = notes.chunk_store.get(hit.chunk_id)
        if chunk is None:
            continue
        hits.append(
            SearchHit(
                chunk_id=chunk.id,
                document_id=chunk.document_id,
                title=_title(notes, chunk.document_id, titles),
                text=chunk.text,
                score=hit.score,
            )
        )
    return SearchResult(success=True, query=query, hits=hits)


async def ask(notes: RagNotes, owner_id: str, question: str) -> AskResult:
    """Answer a question from the owner's notes."""
    response = await notes.ask(question, owner_id)

    titles: dict[str, str] = {}
    sources = [
        SearchHit(
            chunk_id=source.chunk_id,
            document_id=source.document_id,
            title=_title(notes, source.document_id, titles),
            text=source.text,
            score=source.score,
        )
        for source in response.sources
    ]
    return AskResult(success=True, query=question, answer=response.answer, sources=sources)
