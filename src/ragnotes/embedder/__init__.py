# src/ragnotes/embedder/__init__.py
"""Embedding functionality for ragnotes."""

from ragnotes.embedder.base import Embedder
from ragnotes.embedder.client import ClientEmbedder

__all__ = ["Embedder", "ClientEmbedder"]
