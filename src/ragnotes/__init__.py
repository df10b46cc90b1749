"""ragnotes - retrieval-augmented personal notes.

Keeps a per-document chunk index of block-structured notes, answers
questions grounded on the caller's own notes, and turns text into
flashcards.

Quick Start (LiteLLM + Local Storage):
    from ragnotes import RagNotes, LiteLLMProvider, LocalStorage

    notes = RagNotes(
        provider=LiteLLMProvider(
            llm="gemini/gemini-1.5-flash-latest",
            embedding="gemini/text-embedding-004",
        ),
        storage=LocalStorage("./data"),
    )

    doc = await notes.documents.create("alice", "Trip", content=blocks_from_text("..."))
    await notes.wait_for_indexing()
    answer = await notes.answer("What is the capital of France?", "alice")
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("ragnotes")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except Exception:
        __version__ = "unknown"

# Pipeline components
from ragnotes.answerer import ANSWER_ERROR_MESSAGE, NO_RELEVANT_INFORMATION, AnswerSynthesizer
from ragnotes.chunker import chunk_text

# Configuration objects
from ragnotes.configuration import (
    LiteLLMProvider,
    LocalStorage,
    ProviderConfig,
    StorageConfig,
)
from ragnotes.documents import DocumentService
from ragnotes.embedder import ClientEmbedder, Embedder
from ragnotes.exceptions import (
    DeckNotFoundError,
    DocumentNotFoundError,
    EmbeddingError,
    ExtractionError,
    FlashcardParseError,
    GenerationError,
    OwnershipError,
    ParseError,
    RagNotesError,
)
from ragnotes.extractor import blocks_from_text, extract_text
from ragnotes.flashcards import FlashcardSynthesizer, parse_flashcard_response
from ragnotes.generator import ClientGenerator, TextGenerator
from ragnotes.indexer import IndexManager
from ragnotes.models import (
    AnswerResponse,
    Chunk,
    ContextChunk,
    Document,
    Flashcard,
    FlashcardDeck,
    FlashcardPair,
    FlashcardParseResult,
    IndexResult,
    ScoredChunk,
)

# Provider ABCs
from ragnotes.providers import EmbeddingClient, LLMClient

# Central configuration
from ragnotes.ragnotes import RagNotes
from ragnotes.retriever import Retriever
from ragnotes.scheduler import AsyncioTaskQueue, TaskQueue
from ragnotes.settings import Settings

# Storage ABCs
from ragnotes.stores import (
    ChromaChunkStore,
    ChunkStore,
    DeckStore,
    DocumentStore,
    InMemoryChunkStore,
    SQLiteDeckStore,
    SQLiteDocumentStore,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Document",
    "Chunk",
    "ScoredChunk",
    "FlashcardPair",
    "FlashcardDeck",
    "Flashcard",
    "IndexResult",
    "ContextChunk",
    "AnswerResponse",
    "FlashcardParseResult",
    # Errors
    "RagNotesError",
    "ExtractionError",
    "EmbeddingError",
    "GenerationError",
    "FlashcardParseError",
    "ParseError",
    "DocumentNotFoundError",
    "DeckNotFoundError",
    "OwnershipError",
    # Config
    "Settings",
    # Configuration objects
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    # Storage
    "ChunkStore",
    "DocumentStore",
    "DeckStore",
    "ChromaChunkStore",
    "InMemoryChunkStore",
    "SQLiteDocumentStore",
    "SQLiteDeckStore",
    # Text processing
    "chunk_text",
    "extract_text",
    "blocks_from_text",
    # Model-backed components
    "Embedder",
    "ClientEmbedder",
    "TextGenerator",
    "ClientGenerator",
    "LLMClient",
    "EmbeddingClient",
    # Pipelines
    "IndexManager",
    "Retriever",
    "AnswerSynthesizer",
    "FlashcardSynthesizer",
    "parse_flashcard_response",
    "NO_RELEVANT_INFORMATION",
    "ANSWER_ERROR_MESSAGE",
    "DocumentService",
    "TaskQueue",
    "AsyncioTaskQueue",
    # Central configuration
    "RagNotes",
]
