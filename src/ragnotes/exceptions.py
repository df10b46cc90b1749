# src/ragnotes/exceptions.py
"""Exceptions raised by the ragnotes pipeline.

Upstream model failures (EmbeddingError, GenerationError) are contained by the
component that made the call. Store failures (DocumentNotFoundError,
OwnershipError, database errors) propagate to the caller.
"""


class RagNotesError(Exception):
    """Base class for all ragnotes errors."""


class ExtractionError(RagNotesError):
    """Raised when stored document content cannot be turned into text."""


class EmbeddingError(RagNotesError):
    """Raised when the embedding model fails or returns no usable vector."""


class GenerationError(RagNotesError):
    """Raised when the text generation model fails or returns no text."""


class FlashcardParseError(RagNotesError):
    """Raised when a model response does not hold a valid flashcard array."""


ParseError = FlashcardParseError


class DocumentNotFoundError(RagNotesError, LookupError):
    """Raised when a document does not exist."""

    def __init__(self, document_id: str) -> None:
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id


class DeckNotFoundError(RagNotesError, LookupError):
    """Raised when a flashcard deck does not exist."""

    def __init__(self, deck_id: str) -> None:
        super().__init__(f"Deck not found: {deck_id}")
        self.deck_id = deck_id


class OwnershipError(RagNotesError, PermissionError):
    """Raised when the caller does not own the requested record."""

    def __init__(self, kind: str, record_id: str, owner_id: str) -> None:
        super().__init__(f"{kind} {record_id} is not owned by {owner_id}")
        self.kind = kind
        self.record_id = record_id
        self.owner_id = owner_id
