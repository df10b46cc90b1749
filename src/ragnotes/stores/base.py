# src/ragnotes/stores/base.py
"""Abstract base classes for storage."""

from abc import ABC, abstractmethod
from typing import Any

from ragnotes.models import (
    Chunk,
    Document,
    Flashcard,
    FlashcardDeck,
    FlashcardPair,
    ScoredChunk,
)


class ChunkStore(ABC):
    """Abstract base class for the chunk index (text + embedding per chunk)."""

    @abstractmethod
    def insert(self, chunk: Chunk) -> str:
        """Store a chunk. Returns its ID."""
        ...

    @abstractmethod
    def delete_by_document(self, document_id: str) -> int:
        """Delete all chunks of a document. Returns the number deleted."""
        ...

    @abstractmethod
    def vector_search(self, embedding: list[float], limit: int, owner_id: str) -> list[ScoredChunk]:
        """Nearest-neighbor search restricted to one owner's chunks.

        Returns at most `limit` hits ordered by descending score.
        """
        ...

    @abstractmethod
    def get(self, chunk_id: str) -> Chunk | None:
        """Retrieve a chunk by ID. Returns None if not found."""
        ...

    @abstractmethod
    def get_by_document(self, document_id: str) -> list[Chunk]:
        """Get all chunks of a document, ordered by index."""
        ...

    @abstractmethod
    def count_chunks(self, owner_id: str | None = None) -> int:
        """Count chunks, optionally only those of one owner."""
        ...


class DocumentStore(ABC):
    """Abstract base class for document storage."""

    @abstractmethod
    def put(self, document: Document) -> None:
        """Store a document, overwriting if it exists."""
        ...

    @abstractmethod
    def get(self, document_id: str) -> Document | None:
        """Retrieve a document by ID. Returns None if not found."""
        ...

    @abstractmethod
    def patch(self, document_id: str, **fields: Any) -> Document:
        """Update the given fields of a document and return the new version.

        Raises:
            DocumentNotFoundError: If the document does not exist.
            ValueError: If a field name is not a document field.
        """
        ...

    @abstractmethod
    def delete(self, document_id: str) -> bool:
        """Delete a document. Returns False if it did not exist."""
        ...

    @abstractmethod
    def list_by_owner(self, owner_id: str, include_archived: bool = False) -> list[Document]:
        """List one owner's documents."""
        ...


class DeckStore(ABC):
    """Abstract base class for flashcard deck storage."""

    @abstractmethod
    def create_deck(self, deck: FlashcardDeck) -> FlashcardDeck:
        """Store a new deck."""
        ...

    @abstractmethod
    def get_deck(self, deck_id: str) -> FlashcardDeck | None:
        """Retrieve a deck by ID."""
        ...

    @abstractmethod
    def list_decks(self, owner_id: str) -> list[FlashcardDeck]:
        """List one owner's decks."""
        ...

    @abstractmethod
    def add_flashcards(
        self,
        deck_id: str,
        owner_id: str,
        pairs: list[FlashcardPair],
        source_document_id: str | None = None,
    ) -> int:
        """Add cards to a deck the caller owns. Returns the number added.

        Raises:
            DeckNotFoundError: If the deck does not exist.
            OwnershipError: If the deck belongs to someone else.
        """
        ...

    @abstractmethod
    def get_flashcards(self, deck_id: str, owner_id: str) -> list[Flashcard]:
        """Get the cards of a deck the caller owns, in insertion order."""
        ...
