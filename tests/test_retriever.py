# tests/test_retriever.py
"""Tests for owner-scoped retrieval."""

import logging

import pytest

from ragnotes.exceptions import EmbeddingError
from ragnotes.models import Chunk, ScoredChunk
from ragnotes.retriever import Retriever
from ragnotes.stores import InMemoryChunkStore


def add_chunk(store, embedder, owner_id, text, document_id="d1"):
    chunk = Chunk(
        document_id=document_id,
        owner_id=owner_id,
        text=text,
        embedding=embedder.embed_text(text),
    )
    store.insert(chunk)
    return chunk


@pytest.fixture
def retriever(chunk_store, embedder):
    return Retriever(chunk_store, embedder, default_k=5)


class TestRetriever:
    @pytest.mark.asyncio
    async def test_most_similar_first(self, retriever, chunk_store, embedder):
        paris = add_chunk(chunk_store, embedder, "alice", "Paris is the capital of France.")
        add_chunk(chunk_store, embedder, "alice", "Bananas are a yellow fruit.", "d2")

        hits = await retriever.retrieve("What is the capital of France?", "alice")

        assert hits[0].chunk_id == paris.id
        assert all(a.score >= b.score for a, b in zip(hits, hits[1:]))

    @pytest.mark.asyncio
    async def test_only_owners_chunks(self, retriever, chunk_store, embedder):
        mine = add_chunk(chunk_store, embedder, "alice", "Paris is the capital of France.")
        add_chunk(chunk_store, embedder, "bob", "Paris is the capital of France.", "d2")

        hits = await retriever.retrieve("capital of France", "alice", k=10)

        assert [h.chunk_id for h in hits] == [mine.id]

    @pytest.mark.asyncio
    async def test_other_owner_gets_nothing(self, retriever, chunk_store, embedder):
        add_chunk(chunk_store, embedder, "alice", "Paris is the capital of France.")
        assert await retriever.retrieve("capital of France", "bob") == []

    @pytest.mark.asyncio
    async def test_k_limits_results(self, retriever, chunk_store, embedder):
        for i in range(8):
            add_chunk(chunk_store, embedder, "alice", f"note {i} about france", f"d{i}")

        assert len(await retriever.retrieve("france", "alice")) == 5
        assert len(await retriever.retrieve("france", "alice", k=2)) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("k", [0, -1])
    async def test_non_positive_k(self, retriever, chunk_store, embedder, k):
        add_chunk(chunk_store, embedder, "alice", "france")
        calls_before = len(embedder.calls)

        assert await retriever.retrieve("france", "alice", k=k) == []
        assert len(embedder.calls) == calls_before

    @pytest.mark.asyncio
    async def test_blank_query(self, retriever, embedder):
        assert await retriever.retrieve("   ", "alice") == []
        assert embedder.calls == []

    @pytest.mark.asyncio
    async def test_embedding_failure_propagates(self, retriever, embedder):
        embedder.fail_on = {"boom"}
        with pytest.raises(EmbeddingError):
            await retriever.retrieve("boom", "alice")

    @pytest.mark.asyncio
    async def test_drops_hits_owned_by_someone_else(self, embedder, caplog):
        """A store that ignores the owner filter still never leaks chunks."""

        class LeakyChunkStore(InMemoryChunkStore):
            def vector_search(self, embedding, limit, owner_id):
                return [ScoredChunk(chunk_id=c, score=1.0) for c in self._chunks][:limit]

        store = LeakyChunkStore()
        mine = add_chunk(store, embedder, "alice", "mine")
        add_chunk(store, embedder, "bob", "theirs", "d2")

        with caplog.at_level(logging.WARNING, logger="ragnotes.retriever"):
            hits = await Retriever(store, embedder).retrieve("anything", "alice")

        assert [h.chunk_id for h in hits] == [mine.id]
        assert "owned by another user" in caplog.text

    @pytest.mark.asyncio
    async def test_retrieve_chunks_pairs_hits_with_stored_chunks(self, embedder):
        class StaleChunkStore(InMemoryChunkStore):
            def vector_search(self, embedding, limit, owner_id):
                hits = super().vector_search(embedding, limit, owner_id)
                return [ScoredChunk(chunk_id="vanished", score=0.99), *hits]

        store = StaleChunkStore()
        paris = add_chunk(store, embedder, "alice", "Paris is the capital of France.")
        retriever = Retriever(store, embedder)

        pairs = await retriever.retrieve_chunks("capital of France", "alice")

        assert [(hit.chunk_id, chunk) for hit, chunk in pairs] == [(paris.id, paris)]
        assert [h.chunk_id for h in await retriever.retrieve("capital of France", "alice")] == [
            paris.id
        ]
