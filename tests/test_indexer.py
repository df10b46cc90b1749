# tests/test_indexer.py
"""Tests for the index manager."""

import asyncio
import json
import logging

import pytest

from ragnotes.chunker import chunk_text
from ragnotes.embedder import Embedder
from ragnotes.exceptions import OwnershipError
from ragnotes.indexer import IndexManager
from ragnotes.scheduler import AsyncioTaskQueue

LONG_TEXT = " ".join(f"sentence number {i} about the french capital." for i in range(12))


class SlowEmbedder(Embedder):
    """Async embedder that records how many calls overlap."""

    def __init__(self):
        self.active = 0
        self.peak = 0

    def embed_text(self, text):
        return [1.0, float(len(text))]

    async def aembed_text(self, text):
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0.01)
        self.active -= 1
        return self.embed_text(text)


@pytest.fixture
def manager(document_store, chunk_store, embedder):
    return IndexManager(document_store, chunk_store, embedder, chunk_size=50, chunk_overlap=5)


class TestReindex:
    @pytest.mark.asyncio
    async def test_indexes_all_windows(self, manager, chunk_store, add_document):
        document = add_document("alice", LONG_TEXT)

        result = await manager.reindex(document.id, "alice")

        expected = chunk_text(LONG_TEXT, 50, 5)
        assert result.chunks_total == len(expected)
        assert result.chunks_indexed == len(expected)
        assert result.chunks_skipped == 0
        assert result.is_complete
        assert result.reason is None

        chunks = chunk_store.get_by_document(document.id)
        assert [c.text for c in chunks] == expected
        assert [c.index for c in chunks] == list(range(len(expected)))
        assert all(c.owner_id == "alice" for c in chunks)

    @pytest.mark.asyncio
    async def test_reindex_is_idempotent(self, manager, chunk_store, add_document):
        document = add_document("alice", LONG_TEXT)

        await manager.reindex(document.id, "alice")
        first = chunk_store.get_by_document(document.id)
        first_ids = {c.id for c in first}
        result = await manager.reindex(document.id, "alice")

        chunks = chunk_store.get_by_document(document.id)
        assert result.chunks_deleted == len(first_ids)
        assert len(chunks) == len(first_ids)
        assert first_ids.isdisjoint(c.id for c in chunks)
        assert [c.text for c in chunks] == [c.text for c in first]
        assert [c.index for c in chunks] == [c.index for c in first]

    @pytest.mark.asyncio
    async def test_changed_content_replaces_chunks(
        self, manager, chunk_store, document_store, add_document
    ):
        document = add_document("alice", LONG_TEXT)
        await manager.reindex(document.id, "alice")

        document_store.patch(document.id, content=json.dumps("Short now."))
        await manager.reindex(document.id, "alice")

        assert [c.text for c in chunk_store.get_by_document(document.id)] == ["Short now."]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        ["1" * 5000, "[" * 100000 + "]" * 100000],
        ids=["oversized-integer", "deeply-nested"],
    )
    async def test_undecodable_content_clears_old_chunks(
        self, manager, chunk_store, document_store, add_document, content
    ):
        document = add_document("alice", "Paris is the capital of France.")
        await manager.reindex(document.id, "alice")

        document_store.patch(document.id, content=content)
        result = await manager.reindex(document.id, "alice")

        assert result.reason == "no extractable text"
        assert result.chunks_deleted == 1
        assert chunk_store.get_by_document(document.id) == []

    @pytest.mark.asyncio
    async def test_cleared_content_removes_chunks(
        self, manager, chunk_store, document_store, add_document
    ):
        document = add_document("alice", LONG_TEXT)
        await manager.reindex(document.id, "alice")

        document_store.patch(document.id, content="")
        result = await manager.reindex(document.id, "alice")

        assert result.reason == "no content"
        assert result.chunks_deleted > 0
        assert result.chunks_indexed == 0
        assert chunk_store.get_by_document(document.id) == []

    @pytest.mark.asyncio
    async def test_missing_document_removes_chunks(
        self, manager, chunk_store, document_store, add_document
    ):
        document = add_document("alice", LONG_TEXT)
        await manager.reindex(document.id, "alice")
        document_store.delete(document.id)

        result = await manager.reindex(document.id, "alice")

        assert result.reason == "document not found"
        assert chunk_store.get_by_document(document.id) == []

    @pytest.mark.asyncio
    async def test_blocks_without_text(self, manager, chunk_store, add_document, embedder):
        document = add_document("alice", "   ")

        result = await manager.reindex(document.id, "alice")

        assert result.reason == "no extractable text"
        assert chunk_store.count_chunks() == 0
        assert embedder.calls == []

    @pytest.mark.asyncio
    async def test_failed_embeddings_are_skipped(
        self, manager, chunk_store, add_document, embedder, caplog
    ):
        document = add_document("alice", LONG_TEXT)
        windows = chunk_text(LONG_TEXT, 50, 5)
        embedder.fail_on = {windows[1][10:30]}

        with caplog.at_level(logging.WARNING, logger="ragnotes.indexer"):
            result = await manager.reindex(document.id, "alice")

        assert result.chunks_skipped >= 1
        assert result.chunks_indexed == len(windows) - result.chunks_skipped
        assert result.is_partial
        assert "Skipping chunk 1" in caplog.text

        stored = chunk_store.get_by_document(document.id)
        assert 1 not in [c.index for c in stored]
        assert all(c.text == windows[c.index] for c in stored)

    @pytest.mark.asyncio
    async def test_all_embeddings_failing(self, manager, chunk_store, add_document, embedder):
        document = add_document("alice", "Paris is the capital of France.")
        embedder.fail_on = {"Paris"}

        result = await manager.reindex(document.id, "alice")

        assert result.chunks_indexed == 0
        assert result.chunks_skipped == 1
        assert not result.is_partial
        assert chunk_store.count_chunks() == 0

    @pytest.mark.asyncio
    async def test_other_owner_rejected(self, manager, chunk_store, add_document):
        document = add_document("alice", LONG_TEXT)
        await manager.reindex(document.id, "alice")
        before = chunk_store.count_chunks()

        with pytest.raises(OwnershipError):
            await manager.reindex(document.id, "mallory")

        assert chunk_store.count_chunks() == before
        assert chunk_store.count_chunks("mallory") == 0


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_embedding_concurrency_is_bounded(self, document_store, chunk_store, add_document):
        slow = SlowEmbedder()
        manager = IndexManager(
            document_store,
            chunk_store,
            slow,
            chunk_size=20,
            chunk_overlap=0,
            max_concurrent_embeddings=3,
        )
        document = add_document("alice", LONG_TEXT)

        await manager.reindex(document.id, "alice")

        assert 1 < slow.peak <= 3

    @pytest.mark.asyncio
    async def test_concurrent_reindexes_do_not_duplicate(
        self, document_store, chunk_store, add_document
    ):
        manager = IndexManager(
            document_store, chunk_store, SlowEmbedder(), chunk_size=50, chunk_overlap=5
        )
        document = add_document("alice", LONG_TEXT)

        await asyncio.gather(*[manager.reindex(document.id, "alice") for _ in range(4)])

        assert len(chunk_store.get_by_document(document.id)) == len(chunk_text(LONG_TEXT, 50, 5))
        assert manager._locks == {}


class TestSchedule:
    @pytest.mark.asyncio
    async def test_schedule_runs_in_background(self, manager, chunk_store, add_document):
        document = add_document("alice", "Paris is the capital of France.")
        queue = AsyncioTaskQueue()

        manager.schedule(queue, document.id, "alice")
        assert chunk_store.count_chunks() == 0

        await queue.join()
        assert chunk_store.count_chunks("alice") == 1
