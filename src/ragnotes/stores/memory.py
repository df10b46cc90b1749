# src/ragnotes/stores/memory.py
"""In-memory chunk store implementation."""

import numpy as np

from ragnotes.models import Chunk, ScoredChunk
from ragnotes.stores.base import ChunkStore


class InMemoryChunkStore(ChunkStore):
    """Dict-backed chunk index with exact cosine similarity search.

    Useful for tests and small, short-lived workloads. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._chunks: dict[str, Chunk] = {}

    def insert(self, chunk: Chunk) -> str:
        self._chunks[chunk.id] = chunk
        return chunk.id

    def delete_by_document(self, document_id: str) -> int:
        ids = [cid for cid, c in self._chunks.items() if c.document_id == document_id]
        for chunk_id in ids:
            del self._chunks[chunk_id]
        return len(ids)

    def vector_search(self, embedding: list[float], limit: int, owner_id: str) -> list[ScoredChunk]:
        if limit <= 0:
            return []
        candidates = [c for c in self._chunks.values() if c.owner_id == owner_id]
        if not candidates:
            return []

        query = np.asarray(embedding, dtype=float)
        hits = [
            ScoredChunk(chunk_id=c.id, score=self._cosine_similarity(query, c.embedding))
            for c in candidates
        ]
        # sorted() is stable, so equal scores keep insertion order
        hits = sorted(hits, key=lambda hit: hit.score, reverse=True)
        return hits[:limit]

    def get(self, chunk_id: str) -> Chunk | None:
        return self._chunks.get(chunk_id)

    def get_by_document(self, document_id: str) -> list[Chunk]:
        chunks = [c for c in self._chunks.values() if c.document_id == document_id]
        return sorted(chunks, key=lambda c: c.index)

    def count_chunks(self, owner_id: str | None = None) -> int:
        if owner_id is None:
            return len(self._chunks)
        return sum(1 for c in self._chunks.values() if c.owner_id == owner_id)

    @staticmethod
    def _cosine_similarity(query: np.ndarray, embedding: list[float]) -> float:
        """Cosine similarity; vectors of different length or zero norm score 0."""
        vector = np.asarray(embedding, dtype=float)
        if vector.shape != query.shape:
            return 0.0
        norm_q, norm_v = np.linalg.norm(query), np.linalg.norm(vector)
        if norm_q == 0 or norm_v == 0:
            return 0.0
        return float(np.dot(query, vector) / (norm_q * norm_v))
