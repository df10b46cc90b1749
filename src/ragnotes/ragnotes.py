# src/ragnotes/ragnotes.py
"""Central configuration class for ragnotes."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from ragnotes.configuration import ProviderConfig, StorageConfig
    from ragnotes.models import (
        AnswerResponse,
        Flashcard,
        FlashcardDeck,
        FlashcardPair,
        IndexResult,
        ScoredChunk,
    )
    from ragnotes.scheduler import TaskQueue
    from ragnotes.stores import ChunkStore, DeckStore, DocumentStore

from ragnotes.answerer import AnswerSynthesizer
from ragnotes.documents import DocumentService
from ragnotes.extractor import extract_text
from ragnotes.flashcards import FlashcardSynthesizer
from ragnotes.indexer import IndexManager
from ragnotes.retriever import Retriever
from ragnotes.scheduler import AsyncioTaskQueue
from ragnotes.settings import Settings


class RagNotes:
    """Central configuration for ragnotes stores and components.

    RagNotes bundles the stores, the model-backed components and the
    background task queue, and exposes the pipeline operations: reindex,
    retrieve, answer and generate_flashcards.

    There are two ways to create a RagNotes instance:

    1. With a storage bundle:

        from ragnotes import RagNotes, LiteLLMProvider, LocalStorage

        notes = RagNotes(
            provider=LiteLLMProvider(
                llm="gemini/gemini-1.5-flash-latest",
                embedding="gemini/text-embedding-004",
            ),
            storage=LocalStorage("./data"),
        )

    2. With explicit stores:

        from ragnotes.stores import InMemoryChunkStore, SQLiteDeckStore, SQLiteDocumentStore

        notes = RagNotes.from_stores(
            provider=LiteLLMProvider(...),
            chunk_store=InMemoryChunkStore(),
            document_store=SQLiteDocumentStore("./data/documents.db"),
            deck_store=SQLiteDeckStore("./data/decks.db"),
        )
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        # EITHER storage bundle...
        storage: StorageConfig | None = None,
        # ...OR explicit stores
        chunk_store: ChunkStore | None = None,
        document_store: DocumentStore | None = None,
        deck_store: DeckStore | None = None,
        # Common
        settings: Settings | None = None,
        task_queue: TaskQueue | None = None,
    ) -> None:
        """Create a RagNotes instance.

        Args:
            provider: Provider configuration (builds embedder and generator).
            storage: Storage bundle. Mutually exclusive with explicit stores.
            chunk_store: Explicit chunk index.
            document_store: Explicit document store.
            deck_store: Explicit flashcard deck store.
            settings: Behavioral settings (chunking, k, prompts, retries, etc.)
            task_queue: Queue for background reindexing. Defaults to an
                        AsyncioTaskQueue retrying settings.task_max_attempts times.

        Raises:
            ValueError: If neither storage bundle nor all explicit stores are provided,
                       or if both are provided.
        """
        self._settings = settings if settings is not None else Settings()

        # Path 1: Storage bundle
        if storage is not None:
            if any(s is not None for s in (chunk_store, document_store, deck_store)):
                raise ValueError("Cannot mix 'storage' bundle with explicit stores")
            self.chunk_store, self.document_store, self.deck_store = storage.build_stores()

        # Path 2: Explicit stores
        elif all(s is not None for s in (chunk_store, document_store, deck_store)):
            self.chunk_store = cast("ChunkStore", chunk_store)
            self.document_store = cast("DocumentStore", document_store)
            self.deck_store = cast("DeckStore", deck_store)

        else:
            raise ValueError(
                "Must provide either 'storage' bundle or all explicit stores "
                "(chunk_store, document_store, deck_store)"
            )

        # Build provider components
        self.embedder = provider.build_embedder(self._settings)
        self.generator = provider.build_generator(self._settings)

        self.task_queue: TaskQueue = (
            task_queue
            if task_queue is not None
            else AsyncioTaskQueue(max_attempts=self._settings.task_max_attempts)
        )

        self.index_manager = IndexManager(
            document_store=self.document_store,
            chunk_store=self.chunk_store,
            embedder=self.embedder,
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
            max_concurrent_embeddings=self._settings.max_concurrent_embeddings,
            serialize=self._settings.serialize_reindex,
        )
        self.retriever = Retriever(
            chunk_store=self.chunk_store,
            embedder=self.embedder,
            default_k=self._settings.default_k,
        )
        self.answer_synthesizer = AnswerSynthesizer(
            retriever=self.retriever,
            generator=self.generator,
            prompt_template=self._settings.synthesis_prompt,
            temperature=self._settings.synthesis_temperature,
            k=self._settings.default_k,
        )
        self.flashcard_synthesizer = FlashcardSynthesizer(
            generator=self.generator,
            prompt_template=self._settings.flashcard_prompt,
            temperature=self._settings.flashcard_temperature,
        )
        self.documents = DocumentService(
            document_store=self.document_store,
            chunk_store=self.chunk_store,
            index_manager=self.index_manager,
            task_queue=self.task_queue,
        )

    @classmethod
    def from_stores(
        cls,
        *,
        provider: ProviderConfig,
        chunk_store: ChunkStore,
        document_store: DocumentStore,
        deck_store: DeckStore,
        settings: Settings | None = None,
        task_queue: TaskQueue | None = None,
    ) -> RagNotes:
        """Create RagNotes with explicit stores.

        This is the explicit alternative to using a StorageConfig bundle.
        """
        return cls(
            provider=provider,
            chunk_store=chunk_store,
            document_store=document_store,
            deck_store=deck_store,
            settings=settings,
            task_queue=task_queue,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    # Pipeline operations

    async def reindex(self, document_id: str, owner_id: str) -> IndexResult:
        """Rebuild the chunk index of one document now."""
        return await self.index_manager.reindex(document_id, owner_id)

    async def retrieve(
        self, query: str, owner_id: str, k: int | None = None
    ) -> list[ScoredChunk]:
        """Top-k chunks of owner_id most similar to the query."""
        return await self.retriever.retrieve(query, owner_id, k=k)

    async def answer(self, query: str, owner_id: str) -> str:
        """Answer a question from the owner's notes. Always returns text."""
        return await self.answer_synthesizer.answer(query, owner_id)

    async def ask(self, query: str, owner_id: str) -> AnswerResponse:
        """Answer a question and include the chunks used as sources."""
        return await self.answer_synthesizer.ask(query, owner_id)

    async def generate_flashcards(self, text: str) -> list[FlashcardPair]:
        """Generate flashcard pairs from a text. Returns [] on any failure."""
        return await self.flashcard_synthesizer.generate_flashcards(text)

    async def generate_flashcards_for_document(
        self, document_id: str, owner_id: str
    ) -> list[FlashcardPair]:
        """Generate flashcard pairs from a document the caller owns."""
        document = self.documents.get(document_id, owner_id)
        return await self.generate_flashcards(extract_text(document.content))

    # Decks

    def create_deck(
        self,
        owner_id: str,
        title: str,
        description: str | None = None,
        source_document_id: str | None = None,
    ) -> FlashcardDeck:
        """Create an empty flashcard deck."""
        from ragnotes.models import FlashcardDeck

        if source_document_id is not None:
            self.documents.get(source_document_id, owner_id)
        return self.deck_store.create_deck(
            FlashcardDeck(
                owner_id=owner_id,
                title=title,
                description=description,
                source_document_id=source_document_id,
            )
        )

    def save_flashcards(
        self,
        deck_id: str,
        owner_id: str,
        pairs: list[FlashcardPair],
        source_document_id: str | None = None,
    ) -> int:
        """Add generated pairs to a deck the caller owns. Returns the number saved."""
        return self.deck_store.add_flashcards(
            deck_id, owner_id, pairs, source_document_id=source_document_id
        )

    def list_decks(self, owner_id: str) -> list[FlashcardDeck]:
        return self.deck_store.list_decks(owner_id)

    def get_flashcards(self, deck_id: str, owner_id: str) -> list[Flashcard]:
        return self.deck_store.get_flashcards(deck_id, owner_id)

    # Lifecycle

    async def wait_for_indexing(self) -> None:
        """Wait until all background reindex jobs have finished."""
        join = getattr(self.task_queue, "join", None)
        if join is not None:
            await join()

    def close(self) -> None:
        """Close the chunk store and release resources.

        Call this when you're done with the instance to release ChromaDB file
        handles. SQLite stores use per-operation connections and don't require
        explicit closing.
        """
        if hasattr(self.chunk_store, "close"):
            self.chunk_store.close()
