# src/ragnotes/models/chunk.py
"""Chunk data models."""

from uuid import uuid4

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """A slice of a document's extracted text with its embedding.

    Chunks are derived records: created by the index manager, never mutated,
    and deleted together whenever their document is reindexed or removed.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    document_id: str
    owner_id: str  # Copy of the document owner, used for owner-scoped search
    text: str
    embedding: list[float]
    index: int = 0


class ScoredChunk(BaseModel):
    """A vector search hit. Higher score means more relevant."""

    chunk_id: str
    score: float
