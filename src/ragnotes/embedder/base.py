# src/ragnotes/embedder/base.py
"""Embedder abstract base class."""

from abc import ABC, abstractmethod


class Embedder(ABC):
    """Abstract base class for embedding generation.

    Implementations raise EmbeddingError when no usable vector can be
    produced. Callers decide whether that is skippable (indexing) or fatal
    (query-time retrieval).
    """

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        ...

    async def aembed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text (async).

        Default implementation calls sync embed_text().
        """
        return self.embed_text(text)
