# src/ragnotes/embedder/client.py
"""Client-based embedder implementation."""

from ragnotes.embedder.base import Embedder
from ragnotes.exceptions import EmbeddingError
from ragnotes.providers.base import EmbeddingClient


class ClientEmbedder(Embedder):
    """Embedder that uses an EmbeddingClient for generating embeddings.

    Example:
        from ragnotes.providers.litellm import LiteLLMEmbeddingClient
        from ragnotes.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="gemini/text-embedding-004")
        embedder = ClientEmbedder(embedding_client=client, dimensions=768)
    """

    def __init__(self, embedding_client: EmbeddingClient, dimensions: int | None = None) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
            dimensions: Expected vector length. Vectors of any other length
                        are rejected with EmbeddingError. None skips the check.
        """
        self._client = embedding_client
        self.dimensions = dimensions

    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        try:
            result = self._client.embed([text])
        except Exception as e:
            raise EmbeddingError(f"Embedding request failed: {e}") from e
        return self._validate(result)

    async def aembed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text (async)."""
        try:
            result = await self._client.aembed([text])
        except Exception as e:
            raise EmbeddingError(f"Embedding request failed: {e}") from e
        return self._validate(result)

    def _validate(self, result: list[list[float]]) -> list[float]:
        if not result or result[0] is None or len(result[0]) == 0:
            raise EmbeddingError("Embedding model returned no vector")
        vector = [float(x) for x in result[0]]
        if self.dimensions is not None and len(vector) != self.dimensions:
            raise EmbeddingError(
                f"Embedding has {len(vector)} dimensions, expected {self.dimensions}"
            )
        return vector
