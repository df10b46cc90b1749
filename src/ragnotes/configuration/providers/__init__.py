# src/ragnotes/configuration/providers/__init__.py
"""Provider configurations for ragnotes."""

from ragnotes.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
