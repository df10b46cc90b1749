# src/ragnotes/configuration/storage/__init__.py
"""Storage configurations for ragnotes."""

from ragnotes.configuration.storage.local import LocalStorage

__all__ = ["LocalStorage"]
