# src/ragnotes/indexer.py
"""Index manager: keeps each document's chunk index in sync with its content."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from ragnotes.chunker import chunk_text
from ragnotes.embedder import Embedder
from ragnotes.exceptions import OwnershipError
from ragnotes.extractor import extract_text
from ragnotes.models import Chunk, IndexResult
from ragnotes.scheduler import TaskQueue
from ragnotes.stores import ChunkStore, DocumentStore

logger = logging.getLogger(__name__)


class IndexManager:
    """Rebuilds a document's chunks from its current content.

    Pipeline:
    1. Load the document (missing or empty content clears its chunks)
    2. Extract plain text from the block JSON
    3. Split the text into overlapping character windows
    4. Delete every existing chunk of the document
    5. Embed the windows concurrently; failed windows are skipped
    6. Insert the embedded windows in text order

    Reindexing is a full replacement, so running it twice on unchanged
    content leaves an equivalent index.
    """

    def __init__(
        self,
        document_store: DocumentStore,
        chunk_store: ChunkStore,
        embedder: Embedder,
        chunk_size: int = 500,
        chunk_overlap: int = 50,
        max_concurrent_embeddings: int = 5,
        serialize: bool = True,
    ) -> None:
        """Initialize the index manager.

        Args:
            document_store: Source of document content
            chunk_store: Chunk index to rebuild
            embedder: Embedder for chunk texts
            chunk_size: Maximum characters per chunk
            chunk_overlap: Characters shared by consecutive chunks
            max_concurrent_embeddings: Upper bound on in-flight embedding calls
            serialize: Run reindexes of the same document one at a time
        """
        self.document_store = document_store
        self.chunk_store = chunk_store
        self.embedder = embedder
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.max_concurrent_embeddings = max_concurrent_embeddings
        self.serialize = serialize
        # document_id -> (lock, number of holders and waiters)
        self._locks: dict[str, tuple[asyncio.Lock, int]] = {}

    @asynccontextmanager
    async def _document_lock(self, document_id: str) -> AsyncIterator[None]:
        if not self.serialize:
            yield
            return

        if document_id in self._locks:
            lock, users = self._locks[document_id]
        else:
            lock, users = asyncio.Lock(), 0
        self._locks[document_id] = (lock, users + 1)
        try:
            async with lock:
                yield
        finally:
            lock, users = self._locks[document_id]
            if users <= 1:
                del self._locks[document_id]
            else:
                self._locks[document_id] = (lock, users - 1)

    async def reindex(self, document_id: str, owner_id: str) -> IndexResult:
        """Rebuild the chunk index of one document.

        Args:
            document_id: Document to reindex
            owner_id: Owner recorded on the new chunks

        Returns:
            IndexResult with deleted/indexed/skipped counts

        Raises:
            OwnershipError: If the document belongs to another owner
        """
        async with self._document_lock(document_id):
            return await self._reindex(document_id, owner_id)

    async def _reindex(self, document_id: str, owner_id: str) -> IndexResult:
        result = IndexResult(document_id=document_id)

        document = self.document_store.get(document_id)
        if document is not None and document.owner_id != owner_id:
            raise OwnershipError("Document", document_id, owner_id)

        if document is None or not document.content:
            result.chunks_deleted = self.chunk_store.delete_by_document(document_id)
            result.reason = "document not found" if document is None else "no content"
            logger.info(
                "Cleared index of document %s (%s, %d chunks deleted)",
                document_id,
                result.reason,
                result.chunks_deleted,
            )
            return result

        text = extract_text(document.content)
        if not text.strip():
            result.chunks_deleted = self.chunk_store.delete_by_document(document_id)
            result.reason = "no extractable text"
            logger.info(
                "Cleared index of document %s (%s, %d chunks deleted)",
                document_id,
                result.reason,
                result.chunks_deleted,
            )
            return result

        windows = chunk_text(text, self.chunk_size, self.chunk_overlap)
        result.chunks_total = len(windows)

        # Old chunks go before any new chunk is written
        result.chunks_deleted = self.chunk_store.delete_by_document(document_id)

        embeddings = await self._embed_windows(windows)

        for index, (window, embedding) in enumerate(zip(windows, embeddings, strict=True)):
            if isinstance(embedding, BaseException):
                logger.warning(
                    "Skipping chunk %d of document %s: embedding failed: %s",
                    index,
                    document_id,
                    embedding,
                )
                result.chunks_skipped += 1
                continue
            self.chunk_store.insert(
                Chunk(
                    document_id=document_id,
                    owner_id=owner_id,
                    text=window,
                    embedding=embedding,
                    index=index,
                )
            )
            result.chunks_indexed += 1

        logger.info(
            "Reindexed document %s: %d/%d chunks indexed, %d skipped, %d replaced",
            document_id,
            result.chunks_indexed,
            result.chunks_total,
            result.chunks_skipped,
            result.chunks_deleted,
        )
        return result

    async def _embed_windows(self, windows: list[str]) -> list[list[float] | BaseException]:
        """Embed windows concurrently, returning the exception for failed ones."""
        semaphore = asyncio.Semaphore(max(1, self.max_concurrent_embeddings))

        async def embed_one(window: str) -> list[float]:
            async with semaphore:
                return await self.embedder.aembed_text(window)

        return await asyncio.gather(
            *[embed_one(window) for window in windows],
            return_exceptions=True,
        )

    def schedule(self, task_queue: TaskQueue, document_id: str, owner_id: str) -> None:
        """Enqueue a background reindex of a document."""
        task_queue.enqueue(
            self.reindex,
            {"document_id": document_id, "owner_id": owner_id},
        )
