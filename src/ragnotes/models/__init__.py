"""Data models for ragnotes."""

from ragnotes.models.chunk import Chunk, ScoredChunk
from ragnotes.models.document import Document
from ragnotes.models.flashcard import Flashcard, FlashcardDeck, FlashcardPair
from ragnotes.models.results import (
    AnswerResponse,
    ContextChunk,
    FlashcardParseResult,
    IndexResult,
)

__all__ = [
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
]
