# tests/commands/test_query_commands.py
"""Tests for the search and ask commands."""

import pytest

from ragnotes.answerer import ANSWER_ERROR_MESSAGE, NO_RELEVANT_INFORMATION
from ragnotes.commands import notes as note_commands
from ragnotes.commands import query
from ragnotes.exceptions import GenerationError


class TestSearch:
    @pytest.mark.asyncio
    async def test_search_returns_titled_hits(self, notes):
        await note_commands.add_note(notes, "alice", "Trip", "Paris is the capital of France.")
        await note_commands.add_note(notes, "alice", "Food", "Bananas are a yellow fruit.")

        result = await query.search(notes, "alice", "capital of France")

        assert result.success is True
        assert result.query == "capital of France"
        assert result.hits[0].title == "Trip"
        assert result.hits[0].text == "Paris is the capital of France."

    @pytest.mark.asyncio
    async def test_search_respects_k(self, notes):
        for i in range(4):
            await note_commands.add_note(notes, "alice", f"N{i}", f"france fact {i}")

        result = await query.search(notes, "alice", "france", k=2)

        assert len(result.hits) == 2

    @pytest.mark.asyncio
    async def test_search_embedding_failure(self, notes, embedder):
        embedder.fail_on = {"boom"}

        result = await query.search(notes, "alice", "boom")

        assert result.success is False
        assert "Search failed" in result.error

    @pytest.mark.asyncio
    async def test_search_other_owner(self, notes):
        await note_commands.add_note(notes, "bob", "Trip", "Paris is the capital of France.")
        result = await query.search(notes, "alice", "capital of France")
        assert result.hits == []


class TestAsk:
    @pytest.mark.asyncio
    async def test_ask(self, notes, generator):
        await note_commands.add_note(notes, "alice", "Trip", "Paris is the capital of France.")
        generator.responses = ["Paris."]

        result = await query.ask(notes, "alice", "What is the capital of France?")

        assert result.success is True
        assert result.answer == "Paris."
        assert result.sources[0].title == "Trip"

    @pytest.mark.asyncio
    async def test_ask_without_notes(self, notes):
        result = await query.ask(notes, "alice", "What is the capital of France?")
        assert result.answer == NO_RELEVANT_INFORMATION
        assert result.sources == []

    @pytest.mark.asyncio
    async def test_ask_generation_failure_is_still_an_answer(self, notes, generator):
        await note_commands.add_note(notes, "alice", "Trip", "Paris is the capital of France.")
        generator.error = GenerationError("down")

        result = await query.ask(notes, "alice", "What is the capital of France?")

        assert result.success is True
        assert result.answer == ANSWER_ERROR_MESSAGE
