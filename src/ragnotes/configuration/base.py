# src/ragnotes/configuration/base.py
"""Protocol definitions for configuration objects.

Implementations can use @dataclass(frozen=True) for immutability. Any object
with the right methods satisfies these interfaces without inheritance, unlike
the store ABCs in ragnotes.stores.base.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ragnotes.embedder import Embedder
    from ragnotes.generator import TextGenerator
    from ragnotes.settings import Settings
    from ragnotes.stores import ChunkStore, DeckStore, DocumentStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the model-backed components:
    - Embedder: Creates vector embeddings for chunks and queries
    - TextGenerator: Produces answers and flashcards
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder.

        Args:
            settings: Settings containing num_retries and embedding_dimensions.
        """
        ...

    def build_generator(self, settings: Settings) -> TextGenerator:
        """Build a text generator.

        Args:
            settings: Settings containing num_retries.
        """
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Storage configurations build the data stores:
    - ChunkStore: Per-chunk text and embeddings, searchable by owner
    - DocumentStore: The notes themselves
    - DeckStore: Flashcard decks and cards
    """

    def build_stores(self) -> tuple[ChunkStore, DocumentStore, DeckStore]:
        """Build all three storage components.

        Returns:
            Tuple of (chunk_store, document_store, deck_store)
        """
        ...
