"""Shared pytest fixtures."""

import contextlib
import hashlib
import os
import re
import tempfile
from dataclasses import dataclass
from typing import Any

import pytest

from ragnotes.embedder import Embedder
from ragnotes.exceptions import EmbeddingError
from ragnotes.extractor import blocks_from_text
from ragnotes.generator import TextGenerator
from ragnotes.models import Document
from ragnotes.ragnotes import RagNotes
from ragnotes.settings import Settings
from ragnotes.stores import InMemoryChunkStore, SQLiteDeckStore, SQLiteDocumentStore


class HashEmbedder(Embedder):
    """Deterministic bag-of-words embedder.

    Each lowercase token is hashed into one of `dimensions` buckets, so texts
    sharing words get a high cosine similarity. Texts containing any marker in
    `fail_on` raise EmbeddingError.
    """

    def __init__(self, dimensions: int = 256) -> None:
        self.dimensions = dimensions
        self.fail_on: set[str] = set()
        self.calls: list[str] = []

    def embed_text(self, text: str) -> list[float]:
        self.calls.append(text)
        if any(marker in text for marker in self.fail_on):
            raise EmbeddingError(f"refusing to embed: {text[:20]!r}")
        vector = [0.0] * self.dimensions
        for token in re.findall(r"[a-z0-9]+", text.lower()):
            digest = hashlib.md5(token.encode("utf-8")).digest()
            vector[int.from_bytes(digest[:4], "big") % self.dimensions] += 1.0
        return vector


class FakeGenerator(TextGenerator):
    """Generator returning queued responses and recording every prompt."""

    def __init__(self) -> None:
        self.responses: list[str] = []
        self.prompts: list[str] = []
        self.temperatures: list[float | None] = []
        self.error: Exception | None = None

    async def generate(self, prompt: str, temperature: float | None = None) -> str:
        self.prompts.append(prompt)
        self.temperatures.append(temperature)
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return "ok"


@dataclass(frozen=True)
class FakeProvider:
    """Provider that hands out prebuilt components."""

    _embedder: Any
    _generator: Any

    def build_embedder(self, settings: Any) -> Any:
        return self._embedder

    def build_generator(self, settings: Any) -> Any:
        return self._generator


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir

        # Cleanup ChromaDB's shared system cache to release file handles
        # See: https://github.com/chroma-core/chroma/issues/5868
        try:
            from chromadb.api.shared_system_client import SharedSystemClient

            if hasattr(SharedSystemClient, "_identifier_to_system"):
                identifiers_to_remove = [
                    identifier
                    for identifier in list(SharedSystemClient._identifier_to_system.keys())
                    if tmpdir in str(identifier)
                ]
                for identifier in identifiers_to_remove:
                    if identifier in SharedSystemClient._identifier_to_system:
                        system = SharedSystemClient._identifier_to_system.pop(identifier)
                        with contextlib.suppress(Exception):
                            system.stop()
        except Exception:
            pass  # Best effort cleanup - ChromaDB internals may change


@pytest.fixture
def embedder():
    return HashEmbedder()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def provider(embedder, generator):
    """Provider satisfying the ProviderConfig protocol with fake components."""
    return FakeProvider(_embedder=embedder, _generator=generator)


@pytest.fixture
def chunk_store():
    return InMemoryChunkStore()


@pytest.fixture
def document_store(temp_dir):
    return SQLiteDocumentStore(os.path.join(temp_dir, "documents.db"))


@pytest.fixture
def deck_store(temp_dir):
    return SQLiteDeckStore(os.path.join(temp_dir, "decks.db"))


@pytest.fixture
def settings():
    """Small chunks and a single attempt per background job."""
    return Settings(
        chunk_size=100,
        chunk_overlap=10,
        embedding_dimensions=None,
        task_max_attempts=1,
    )


@pytest.fixture
def notes(provider, chunk_store, document_store, deck_store, settings):
    """RagNotes wired to fake models, an in-memory index and SQLite stores."""
    return RagNotes.from_stores(
        provider=provider,
        chunk_store=chunk_store,
        document_store=document_store,
        deck_store=deck_store,
        settings=settings,
    )


@pytest.fixture
def add_document(document_store):
    """Store a document directly, bypassing background indexing."""

    def _add(owner_id: str, text: str | None, title: str = "Untitled") -> Document:
        content = blocks_from_text(text) if text is not None else None
        document = Document(owner_id=owner_id, title=title, content=content)
        document_store.put(document)
        return document

    return _add
