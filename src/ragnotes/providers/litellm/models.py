# src/ragnotes/providers/litellm/models.py
"""Curated model constants for the LiteLLM provider.

These are convenience constants for IDE autocomplete. Any valid LiteLLM model
string can be passed directly.

Note: the chunk index is created with a fixed vector dimension (768 by
default, see Settings.embedding_dimensions). Switching to an embedding model
with a different dimension requires reindexing every document.
"""


class ChatModels:
    """Chat/completion models for answer and flashcard generation."""

    # Google Gemini
    GEMINI_FLASH = "gemini/gemini-1.5-flash-latest"
    GEMINI_PRO = "gemini/gemini-1.5-pro-latest"
    GEMINI_3_FLASH = "gemini/gemini-3-flash-preview"

    # OpenAI
    GPT_5_MINI = "openai/gpt-5-mini"
    GPT_5_NANO = "openai/gpt-5-nano"

    # Anthropic
    CLAUDE_SONNET_45 = "anthropic/claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"

    # Local
    OLLAMA_LLAMA32 = "ollama/llama3.2"


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient / ClientEmbedder."""

    # Google Gemini (768 dimensions)
    GEMINI_004 = "gemini/text-embedding-004"

    # OpenAI (1536 / 3072 dimensions)
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"

    # Local (768 dimensions)
    OLLAMA_NOMIC = "ollama/nomic-embed-text"
