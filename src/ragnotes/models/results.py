# src/ragnotes/models/results.py
"""Result data models for ragnotes operations."""

from pydantic import BaseModel, Field

from ragnotes.models.flashcard import FlashcardPair


class IndexResult(BaseModel):
    """Outcome of a single reindex run.

    Per-chunk embedding failures are counted in chunks_skipped instead of
    failing the whole run, so callers can tell partial from total failure.
    """

    document_id: str
    chunks_deleted: int = 0
    chunks_total: int = 0
    chunks_indexed: int = 0
    chunks_skipped: int = 0
    reason: str | None = None  # Why nothing was indexed, if applicable

    @property
    def is_complete(self) -> bool:
        """True if every produced chunk was indexed."""
        return self.chunks_skipped == 0

    @property
    def is_partial(self) -> bool:
        """True if some, but not all, chunks were skipped."""
        return 0 < self.chunks_skipped < self.chunks_total


class ContextChunk(BaseModel):
    """A chunk used as grounding context for an answer."""

    chunk_id: str
    document_id: str
    text: str
    score: float


class AnswerResponse(BaseModel):
    """Full response to a question about the user's notes."""

    query: str
    answer: str
    sources: list[ContextChunk] = Field(default_factory=list)


class FlashcardParseResult(BaseModel):
    """Parsed flashcards, or the reason parsing failed."""

    pairs: list[FlashcardPair] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
