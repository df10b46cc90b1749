"""Flashcard data models."""

from uuid import uuid4

from pydantic import BaseModel, Field


class FlashcardPair(BaseModel):
    """A generated question/answer pair. Not persisted until saved to a deck."""

    front: str
    back: str


class FlashcardDeck(BaseModel):
    """A named collection of flashcards owned by one user."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    owner_id: str
    title: str
    description: str | None = None
    source_document_id: str | None = None


class Flashcard(BaseModel):
    """A flashcard stored in a deck."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    deck_id: str
    owner_id: str
    front: str
    back: str
    source_document_id: str | None = None
