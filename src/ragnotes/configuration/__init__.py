# src/ragnotes/configuration/__init__.py
"""Configuration objects for ragnotes.

Instead of factory methods, you pass configuration objects that know how to
build their components.

Provider configurations (build model-backed components):
- LiteLLMProvider: Uses LiteLLM for completion and embedding calls

Storage configurations (build data stores):
- LocalStorage: Chroma + SQLite under one data directory

Example:
    from ragnotes import RagNotes, LiteLLMProvider, LocalStorage

    notes = RagNotes(
        provider=LiteLLMProvider(
            llm="gemini/gemini-1.5-flash-latest",
            embedding="gemini/text-embedding-004",
        ),
        storage=LocalStorage("./data"),
    )
"""

from ragnotes.configuration.base import ProviderConfig, StorageConfig
from ragnotes.configuration.providers import LiteLLMProvider
from ragnotes.configuration.storage import LocalStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
]
