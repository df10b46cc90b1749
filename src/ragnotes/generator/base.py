"""TextGenerator abstract base class."""

from abc import ABC, abstractmethod


class TextGenerator(ABC):
    """Turns a prompt into a text completion.

    Implementations raise GenerationError on upstream failure. No retry is
    performed at this level.
    """

    @abstractmethod
    async def generate(self, prompt: str, temperature: float | None = None) -> str:
        """Generate a completion for a single prompt."""
        ...
