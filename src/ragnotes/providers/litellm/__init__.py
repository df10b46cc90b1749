"""LiteLLM provider clients for ragnotes.

This module contains LiteLLM-based client implementations:
- LiteLLMClient: LLM completion using LiteLLM
- LiteLLMEmbeddingClient: Embeddings using LiteLLM
- ChatModels: Curated chat model constants
- EmbeddingModels: Curated embedding model constants

Usage:
    from ragnotes.providers.litellm import LiteLLMClient, ChatModels
    from ragnotes.generator import ClientGenerator

    client = LiteLLMClient(model=ChatModels.GEMINI_FLASH)
    generator = ClientGenerator(llm_client=client)
"""

from ragnotes.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from ragnotes.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # Clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
