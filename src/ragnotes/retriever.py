# src/ragnotes/retriever.py
"""Owner-scoped semantic retrieval over the chunk index."""

import logging

from ragnotes.embedder import Embedder
from ragnotes.models import Chunk, ScoredChunk
from ragnotes.stores import ChunkStore

logger = logging.getLogger(__name__)


class Retriever:
    """Finds the chunks most similar to a query among one owner's notes."""

    def __init__(
        self,
        chunk_store: ChunkStore,
        embedder: Embedder,
        default_k: int = 5,
    ) -> None:
        """Initialize the retriever.

        Args:
            chunk_store: Chunk index to search
            embedder: Embedder for query embedding
            default_k: Default number of results to return
        """
        self.chunk_store = chunk_store
        self.embedder = embedder
        self.default_k = default_k

    async def retrieve(self, query: str, owner_id: str, k: int | None = None) -> list[ScoredChunk]:
        """Get the top-k chunks of owner_id for a query.

        Args:
            query: User's search query
            owner_id: Only this owner's chunks are searched
            k: Number of results to return (default: self.default_k)

        Returns:
            Hits ordered by descending score. May be empty.

        Raises:
            EmbeddingError: If the query cannot be embedded
        """
        return [hit for hit, _ in await self.retrieve_chunks(query, owner_id, k=k)]

    async def retrieve_chunks(
        self, query: str, owner_id: str, k: int | None = None
    ) -> list[tuple[ScoredChunk, Chunk]]:
        """Like retrieve(), but pair each hit with its stored chunk.

        Hits whose chunk is gone from the store (a reindex ran between search
        and fetch) or belongs to another owner are dropped.
        """
        k = self.default_k if k is None else k
        if k <= 0 or not query.strip():
            return []

        query_embedding = await self.embedder.aembed_text(query)
        hits = self.chunk_store.vector_search(query_embedding, limit=k, owner_id=owner_id)

        results = []
        for hit in hits:
            chunk = self.chunk_store.get(hit.chunk_id)
            if chunk is None:
                continue
            if chunk.owner_id != owner_id:
                logger.warning(
                    "Dropping chunk %s from results: owned by another user", hit.chunk_id
                )
                continue
            results.append((hit, chunk))

        results.sort(key=lambda pair: pair[0].score, reverse=True)
        return results[:k]
