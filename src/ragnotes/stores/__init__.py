"""Storage abstractions for ragnotes."""

from ragnotes.stores.base import ChunkStore, DeckStore, DocumentStore
from ragnotes.stores.chroma import ChromaChunkStore
from ragnotes.stores.memory import InMemoryChunkStore
from ragnotes.stores.sqlite_deck import SQLiteDeckStore
from ragnotes.stores.sqlite_document import SQLiteDocumentStore

__all__ = [
    "ChunkStore",
    "DocumentStore",
    "DeckStore",
    "ChromaChunkStore",
    "InMemoryChunkStore",
    "SQLiteDocumentStore",
    "SQLiteDeckStore",
]
