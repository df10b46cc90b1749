# src/ragnotes/generator/client.py
"""Client-based text generator implementation."""

from ragnotes.exceptions import GenerationError
from ragnotes.generator.base import TextGenerator
from ragnotes.providers.base import LLMClient


class ClientGenerator(TextGenerator):
    """Text generator that sends the prompt as a single user message.

    Example:
        from ragnotes.providers.litellm import LiteLLMClient
        from ragnotes.generator import ClientGenerator

        generator = ClientGenerator(llm_client=LiteLLMClient(model="gemini/gemini-1.5-flash-latest"))
        text = await generator.generate("Summarize: ...")
    """

    def __init__(self, llm_client: LLMClient) -> None:
        """Initialize the generator.

        Args:
            llm_client: Any LLMClient implementation
        """
        self._client = llm_client

    async def generate(self, prompt: str, temperature: float | None = None) -> str:
        try:
            text = await self._client.acomplete(
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
            )
        except Exception as e:
            raise GenerationError(f"Text generation failed: {e}") from e
        if not text or not text.strip():
            raise GenerationError("Text generation returned an empty completion")
        return text
