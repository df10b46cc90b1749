"""Text generation functionality for ragnotes."""

from ragnotes.generator.base import TextGenerator
from ragnotes.generator.client import ClientGenerator

__all__ = ["TextGenerator", "ClientGenerator"]
