# src/ragnotes/stores/sqlite_document.py
"""SQLite document store implementation."""

import sqlite3
from pathlib import Path
from typing import Any

from ragnotes.exceptions import DocumentNotFoundError
from ragnotes.models import Document
from ragnotes.stores.base import DocumentStore

_COLUMNS = (
    "id, owner_id, title, content, is_archived, parent_document_id, "
    "icon, cover_image, is_published"
)


class SQLiteDocumentStore(DocumentStore):
    """SQLite-based document store."""

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    id TEXT PRIMARY KEY,
                    owner_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    content TEXT,
                    is_archived INTEGER NOT NULL DEFAULT 0,
                    parent_document_id TEXT,
                    icon TEXT,
                    cover_image TEXT,
                    is_published INTEGER NOT NULL DEFAULT 0
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_owner ON documents(owner_id)")
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_owner_parent "
                "ON documents(owner_id, parent_document_id)"
            )
            conn.commit()

    @staticmethod
    def _row_to_document(row: tuple) -> Document:
        return Document(
            id=row[0],
            owner_id=row[1],
            title=row[2],
            content=row[3],
            is_archived=bool(row[4]),
            parent_document_id=row[5],
            icon=row[6],
            cover_image=row[7],
            is_published=bool(row[8]),
        )

    def put(self, document: Document) -> None:
        """Store a document, overwriting if exists."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                f"INSERT OR REPLACE INTO documents ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    document.id,
                    document.owner_id,
                    document.title,
                    document.content,
                    int(document.is_archived),
                    document.parent_document_id,
                    document.icon,
                    document.cover_image,
                    int(document.is_published),
                ),
            )
            conn.commit()

    def get(self, document_id: str) -> Document | None:
        """Retrieve a document by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                f"SELECT {_COLUMNS} FROM documents WHERE id = ?",
                (document_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return self._row_to_document(row)

    def patch(self, document_id: str, **fields: Any) -> Document:
        """Update the given fields of a document."""
        unknown = set(fields) - (set(Document.model_fields) - {"id"})
        if unknown:
            raise ValueError(f"Unknown document fields: {', '.join(sorted(unknown))}")

        existing = self.get(document_id)
        if existing is None:
            raise DocumentNotFoundError(document_id)

        updated = Document.model_validate({**existing.model_dump(), **fields})
        self.put(updated)
        return updated

    def delete(self, document_id: str) -> bool:
        """Delete a document by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM documents WHERE id = ?", (document_id,))
            conn.commit()
            return cursor.rowcount > 0

    def list_by_owner(self, owner_id: str, include_archived: bool = False) -> list[Document]:
        """List one owner's documents ordered by title."""
        query = f"SELECT {_COLUMNS} FROM documents WHERE owner_id = ?"
        if not include_archived:
            query += " AND is_archived = 0"
        query += " ORDER BY title, id"
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(query, (owner_id,))
            return [self._row_to_document(row) for row in cursor.fetchall()]
