# src/ragnotes/stores/sqlite_deck.py
"""SQLite flashcard deck store implementation."""

import sqlite3
from pathlib import Path

from ragnotes.exceptions import DeckNotFoundError, OwnershipError
from ragnotes.models import Flashcard, FlashcardDeck, FlashcardPair
from ragnotes.stores.base import DeckStore


class SQLiteDeckStore(DeckStore):
    """SQLite-based store for flashcard decks and their cards."""

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS decks (
                    id TEXT PRIMARY KEY,
                    owner_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    description TEXT,
                    source_document_id TEXT
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS flashcards (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT UNIQUE NOT NULL,
                    deck_id TEXT NOT NULL REFERENCES decks(id) ON DELETE CASCADE,
                    owner_id TEXT NOT NULL,
                    front TEXT NOT NULL,
                    back TEXT NOT NULL,
                    source_document_id TEXT
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_deck_owner ON decks(owner_id)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_card_deck ON flashcards(deck_id)")
            conn.commit()

    def create_deck(self, deck: FlashcardDeck) -> FlashcardDeck:
        """Store a new deck."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO decks (id, owner_id, title, description, source_document_id)
                VALUES (?, ?, ?, ?, ?)
                """,
                (deck.id, deck.owner_id, deck.title, deck.description, deck.source_document_id),
            )
            conn.commit()
        return deck

    def get_deck(self, deck_id: str) -> FlashcardDeck | None:
        """Retrieve a deck by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, owner_id, title, description, source_document_id "
                "FROM decks WHERE id = ?",
                (deck_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return FlashcardDeck(
                id=row[0],
                owner_id=row[1],
                title=row[2],
                description=row[3],
                source_document_id=row[4],
            )

    def list_decks(self, owner_id: str) -> list[FlashcardDeck]:
        """List one owner's decks, most recently created first."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, owner_id, title, description, source_document_id "
                "FROM decks WHERE owner_id = ? ORDER BY rowid DESC",
                (owner_id,),
            )
            return [
                FlashcardDeck(
                    id=row[0],
                    owner_id=row[1],
                    title=row[2],
                    description=row[3],
                    source_document_id=row[4],
                )
                for row in cursor.fetchall()
            ]

    def _require_owned_deck(self, deck_id: str, owner_id: str) -> FlashcardDeck:
        deck = self.get_deck(deck_id)
        if deck is None:
            raise DeckNotFoundError(deck_id)
        if deck.owner_id != owner_id:
            raise OwnershipError("Deck", deck_id, owner_id)
        return deck

    def add_flashcards(
        self,
        deck_id: str,
        owner_id: str,
        pairs: list[FlashcardPair],
        source_document_id: str | None = None,
    ) -> int:
        """Add cards to a deck the caller owns."""
        self._require_owned_deck(deck_id, owner_id)
        if not pairs:
            return 0

        cards = [
            Flashcard(
                deck_id=deck_id,
                owner_id=owner_id,
                front=pair.front,
                back=pair.back,
                source_document_id=source_document_id,
            )
            for pair in pairs
        ]
        with sqlite3.connect(self.db_path) as conn:
            conn.executemany(
                """
                INSERT INTO flashcards (id, deck_id, owner_id, front, back, source_document_id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    (c.id, c.deck_id, c.owner_id, c.front, c.back, c.source_document_id)
                    for c in cards
                ],
            )
            conn.commit()
        return len(cards)

    def get_flashcards(self, deck_id: str, owner_id: str) -> list[Flashcard]:
        """Get the cards of a deck the caller owns."""
        self._require_owned_deck(deck_id, owner_id)
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, deck_id, owner_id, front, back, source_document_id "
                "FROM flashcards WHERE deck_id = ? ORDER BY seq",
                (deck_id,),
            )
            return [
                Flashcard(
                    id=row[0],
                    deck_id=row[1],
                    owner_id=row[2],
                    front=row[3],
                    back=row[4],
                    source_document_id=row[5],
                )
                for row in cursor.fetchall()
            ]
