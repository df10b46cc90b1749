# src/ragnotes/stores/chroma.py
"""ChromaDB chunk store implementation."""

from pathlib import Path
from typing import Any, cast

import chromadb

from ragnotes.models import Chunk, ScoredChunk
from ragnotes.stores.base import ChunkStore


class ChromaChunkStore(ChunkStore):
    """ChromaDB-based chunk index.

    Each record holds the chunk text as the Chroma document, its embedding,
    and document_id / owner_id / index metadata. Owner-scoped search uses a
    metadata filter on owner_id.
    """

    def __init__(self, persist_dir: str, collection_name: str = "ragnotes_chunks") -> None:
        """Initialize the ChromaDB store."""
        Path(persist_dir).mkdir(parents=True, exist_ok=True)
        self._client = chromadb.PersistentClient(path=persist_dir)
        self._collection = self._client.get_or_create_collection(
            name=collection_name,
            metadata={"hnsw:space": "cosine"},
        )

    def close(self) -> None:
        """Close the store and release resources.

        ChromaDB doesn't have an official close method, so we call the internal
        _system.stop() to release file handles. This is necessary to avoid
        'too many open files' errors in test suites.

        See: https://github.com/chroma-core/chroma/issues/5868
        """
        self._collection = None  # type: ignore[assignment]

        # ChromaDB lacks official close() - use internal _system.stop() workaround
        try:
            if self._client is not None and hasattr(self._client, "_system"):
                self._client._system.stop()
        except Exception:
            pass  # Best effort cleanup

        self._client = None  # type: ignore[assignment]

    def insert(self, chunk: Chunk) -> str:
        """Store a chunk with its embedding."""
        self._collection.add(
            ids=[chunk.id],
            embeddings=[chunk.embedding],  # type: ignore[arg-type]
            documents=[chunk.text],
            metadatas=[
                {
                    "document_id": chunk.document_id,
                    "owner_id": chunk.owner_id,
                    "index": chunk.index,
                }
            ],
        )
        return chunk.id

    def delete_by_document(self, document_id: str) -> int:
        """Delete all chunks of a document."""
        ids = self._collection.get(where={"document_id": document_id}, include=[])["ids"]
        if ids:
            self._collection.delete(ids=ids)
        return len(ids)

    def vector_search(self, embedding: list[float], limit: int, owner_id: str) -> list[ScoredChunk]:
        """Search the owner's chunks for the nearest neighbors of an embedding."""
        total = self._collection.count()
        if limit <= 0 or total == 0:
            return []

        results = self._collection.query(
            query_embeddings=[embedding],  # type: ignore[arg-type]
            n_results=min(limit, total),
            where={"owner_id": owner_id},
            include=["distances"],
        )

        ids = results["ids"][0] if results["ids"] else []
        distances = results["distances"][0] if results["distances"] else []

        # ChromaDB returns cosine distance; similarity = 1 - distance
        hits = [
            ScoredChunk(chunk_id=chunk_id, score=1.0 - float(distance))
            for chunk_id, distance in zip(ids, distances, strict=True)
        ]
        hits.sort(key=lambda hit: hit.score, reverse=True)
        return hits[:limit]

    def get(self, chunk_id: str) -> Chunk | None:
        """Retrieve a chunk by ID."""
        results = self._collection.get(
            ids=[chunk_id],
            include=["documents", "metadatas", "embeddings"],
        )
        chunks = self._to_chunks(results)
        return chunks[0] if chunks else None

    def get_by_document(self, document_id: str) -> list[Chunk]:
        """Get all chunks of a document, ordered by index."""
        results = self._collection.get(
            where={"document_id": document_id},
            include=["documents", "metadatas", "embeddings"],
        )
        return sorted(self._to_chunks(results), key=lambda c: c.index)

    def count_chunks(self, owner_id: str | None = None) -> int:
        """Count chunks, optionally only those of one owner."""
        if owner_id is None:
            return self._collection.count()
        results = self._collection.get(
            where={"owner_id": owner_id},
            include=[],  # Only need count, no data
        )
        return len(results["ids"])

    def _to_chunks(self, results: Any) -> list[Chunk]:
        ids = results["ids"]
        if not ids:
            return []
        documents = results["documents"] or []
        metadatas = results["metadatas"] or []
        # Embeddings may come back as a numpy array, so avoid truthiness checks
        embeddings = results["embeddings"]
        if embeddings is None:
            embeddings = [[] for _ in ids]

        chunks = []
        for chunk_id, text, meta, embedding in zip(
            ids, documents, metadatas, embeddings, strict=True
        ):
            chunks.append(
                Chunk(
                    id=chunk_id,
                    document_id=cast(str, meta["document_id"]),
                    owner_id=cast(str, meta["owner_id"]),
                    text=text or "",
                    embedding=[float(x) for x in embedding],
                    index=int(cast(int, meta.get("index", 0))),
                )
            )
        return chunks
