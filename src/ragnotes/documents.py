# src/ragnotes/documents.py
"""Document operations that keep the chunk index up to date."""

import logging
from typing import Any

from ragnotes.exceptions import DocumentNotFoundError, OwnershipError
from ragnotes.indexer import IndexManager
from ragnotes.models import Document
from ragnotes.scheduler import TaskQueue
from ragnotes.stores import ChunkStore, DocumentStore

logger = logging.getLogger(__name__)


class DocumentService:
    """Owner-checked document writes with background reindexing.

    A reindex is enqueued exactly when a write carries content. Metadata-only
    updates (title, icon, cover image, publish flag) leave the index alone.
    Writes return without waiting for the reindex.
    """

    def __init__(
        self,
        document_store: DocumentStore,
        chunk_store: ChunkStore,
        index_manager: IndexManager,
        task_queue: TaskQueue,
    ) -> None:
        self.document_store = document_store
        self.chunk_store = chunk_store
        self.index_manager = index_manager
        self.task_queue = task_queue

    def get(self, document_id: str, owner_id: str) -> Document:
        """Get a document the caller owns.

        Raises:
            DocumentNotFoundError: If the document does not exist
            OwnershipError: If the document belongs to someone else
        """
        document = self.document_store.get(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        if document.owner_id != owner_id:
            raise OwnershipError("Document", document_id, owner_id)
        return document

    async def create(
        self,
        owner_id: str,
        title: str = "Untitled",
        content: str | None = None,
        parent_document_id: str | None = None,
    ) -> Document:
        """Create a document, indexing it in the background if it has content."""
        if parent_document_id is not None:
            self.get(parent_document_id, owner_id)

        document = Document(
            owner_id=owner_id,
            title=title,
            content=content,
            parent_document_id=parent_document_id,
        )
        self.document_store.put(document)
        logger.debug("Created document %s for owner %s", document.id, owner_id)

        if content is not None:
            self.index_manager.schedule(self.task_queue, document.id, owner_id)
        return document

    async def update(
        self,
        document_id: str,
        owner_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        icon: str | None = None,
        cover_image: str | None = None,
        is_published: bool | None = None,
    ) -> Document:
        """Patch the provided fields of a document the caller owns.

        Passing content (even an empty string) schedules a reindex.
        """
        existing = self.get(document_id, owner_id)

        fields: dict[str, Any] = {
            name: value
            for name, value in {
                "title": title,
                "content": content,
                "icon": icon,
                "cover_image": cover_image,
                "is_published": is_published,
            }.items()
            if value is not None
        }
        if not fields:
            return existing

        document = self.document_store.patch(document_id, **fields)

        if content is not None:
            self.index_manager.schedule(self.task_queue, document_id, owner_id)
        return document

    def remove(self, document_id: str, owner_id: str) -> int:
        """Delete a document and its chunks. Returns the number of chunks removed."""
        self.get(document_id, owner_id)
        self.document_store.delete(document_id)
        removed = self.chunk_store.delete_by_document(document_id)
        logger.info("Removed document %s and %d chunks", document_id, removed)
        return removed

    def list_documents(self, owner_id: str, include_archived: bool = False) -> list[Document]:
        """List the caller's documents."""
        return self.document_store.list_by_owner(owner_id, include_archived=include_archived)
