# src/ragnotes/flashcards/synthesizer.py
"""Flashcard generation from note text."""

import logging

from ragnotes.exceptions import GenerationError
from ragnotes.flashcards.parser import parse_flashcard_response
from ragnotes.generator import TextGenerator
from ragnotes.models import FlashcardPair

logger = logging.getLogger(__name__)

FLASHCARD_PROMPT = """Analyze the following text content from a user's notes.
Identify key concepts, terms, definitions, or question/answer pairs suitable for creating flashcards.
Each flashcard should have a "front" (question or term) and a "back" (answer or definition).

Return the result ONLY as a JSON array of objects with "front" and "back" keys,
inside a single ```json code block. Do not add any text outside the code block.

Example output:
```json
[{{"front": "Example question?", "back": "Example answer."}}]
```

Text content:
---
{text}
---"""


class FlashcardSynthesizer:
    """Turns a text into question/answer flashcard pairs with a language model."""

    def __init__(
        self,
        generator: TextGenerator,
        prompt_template: str | None = None,
        temperature: float | None = 0.2,
    ) -> None:
        """Initialize the flashcard synthesizer.

        Args:
            generator: Text generator
            prompt_template: Custom prompt with {text}
            temperature: Generation temperature. None to use model default.
        """
        self.generator = generator
        self.prompt_template = prompt_template or FLASHCARD_PROMPT
        self.temperature = temperature

    async def generate_flashcards(self, text: str) -> list[FlashcardPair]:
        """Generate flashcards from a text.

        Returns an empty list for blank text (without calling the model) and
        whenever generation or parsing fails.
        """
        if not text.strip():
            return []

        prompt = self.prompt_template.format(text=text)
        try:
            raw = await self.generator.generate(prompt, temperature=self.temperature)
        except GenerationError:
            logger.error("Flashcard generation failed", exc_info=True)
            return []

        result = parse_flashcard_response(raw)
        if not result.ok:
            logger.warning("Could not parse flashcards from model response: %s", result.error)
            return []
        return result.pairs
