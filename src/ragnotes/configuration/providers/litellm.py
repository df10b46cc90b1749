# src/ragnotes/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragnotes.embedder import Embedder
    from ragnotes.generator import TextGenerator
    from ragnotes.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for completion and embedding calls.

    Args:
        llm: LiteLLM model identifier for answers and flashcards.
             Examples: "gemini/gemini-1.5-flash-latest", "openai/gpt-5-mini"
        embedding: LiteLLM model identifier for embeddings. Its vectors must
                   match Settings.embedding_dimensions.
                   Examples: "gemini/text-embedding-004", "ollama/nomic-embed-text"
        llm_api_key: Optional API key for the LLM. None lets LiteLLM read the
                     provider's usual environment variable.
        embedding_api_key: Optional API key for the embedding model.

    Example:
        provider = LiteLLMProvider(
            llm="gemini/gemini-1.5-flash-latest",
            embedding="gemini/text-embedding-004",
        )
    """

    llm: str
    embedding: str
    llm_api_key: str | None = field(default=None, repr=False)
    embedding_api_key: str | None = field(default=None, repr=False)

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder using the LiteLLM embedding client."""
        from ragnotes.embedder import ClientEmbedder
        from ragnotes.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            api_key=self.embedding_api_key,
        )
        return ClientEmbedder(
            embedding_client=embedding_client,
            dimensions=settings.embedding_dimensions,
        )

    def build_generator(self, settings: Settings) -> TextGenerator:
        """Build a ClientGenerator using the LiteLLM client."""
        from ragnotes.generator import ClientGenerator
        from ragnotes.providers.litellm import LiteLLMClient

        llm_client = LiteLLMClient(
            model=self.llm,
            num_retries=settings.num_retries,
            api_key=self.llm_api_key,
        )
        return ClientGenerator(llm_client=llm_client)
