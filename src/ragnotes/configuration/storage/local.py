# src/ragnotes/configuration/storage/local.py
"""Local filesystem storage configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragnotes.stores import ChunkStore, DeckStore, DocumentStore


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using Chroma and SQLite.

    All data is persisted to the specified directory:
    - chroma/: Chunk index (ChromaDB)
    - documents.db: Notes (SQLite)
    - decks.db: Flashcard decks and cards (SQLite)

    Args:
        data_dir: Base directory for all storage files.
                  Created if it doesn't exist.
    """

    data_dir: str

    def build_stores(self) -> tuple[ChunkStore, DocumentStore, DeckStore]:
        """Build all three storage components.

        Returns:
            Tuple of (chunk_store, document_store, deck_store)
        """
        from ragnotes.stores import ChromaChunkStore, SQLiteDeckStore, SQLiteDocumentStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)

        chunk_store = ChromaChunkStore(os.path.join(self.data_dir, "chroma"))
        document_store = SQLiteDocumentStore(os.path.join(self.data_dir, "documents.db"))
        deck_store = SQLiteDeckStore(os.path.join(self.data_dir, "decks.db"))

        return chunk_store, document_store, deck_store
