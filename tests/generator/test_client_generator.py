# tests/generator/test_client_generator.py
"""Tests for the client-backed text generator."""

import pytest

from ragnotes.exceptions import GenerationError
from ragnotes.generator import ClientGenerator, TextGenerator
from ragnotes.providers import LLMClient


class ScriptedLLMClient(LLMClient):
    """Returns a fixed completion, or raises the configured error."""

    def __init__(self, reply="answer", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, messages, temperature=None):
        self.calls.append((messages, temperature))
        if self.error is not None:
            raise self.error
        return self.reply


class TestClientGenerator:
    def test_is_text_generator(self):
        assert isinstance(ClientGenerator(ScriptedLLMClient()), TextGenerator)

    @pytest.mark.asyncio
    async def test_sends_single_user_message(self):
        client = ScriptedLLMClient(reply="Paris")
        generator = ClientGenerator(client)

        result = await generator.generate("What is the capital?", temperature=0.3)

        assert result == "Paris"
        assert client.calls == [([{"role": "user", "content": "What is the capital?"}], 0.3)]

    @pytest.mark.asyncio
    async def test_default_temperature_is_none(self):
        client = ScriptedLLMClient()
        await ClientGenerator(client).generate("prompt")
        assert client.calls[0][1] is None

    @pytest.mark.asyncio
    async def test_client_error_wrapped(self):
        generator = ClientGenerator(ScriptedLLMClient(error=RuntimeError("rate limited")))
        with pytest.raises(GenerationError, match="rate limited"):
            await generator.generate("prompt")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", ["", "   \n"])
    async def test_empty_completion_raises(self, reply):
        generator = ClientGenerator(ScriptedLLMClient(reply=reply))
        with pytest.raises(GenerationError, match="empty"):
            await generator.generate("prompt")
