# tests/commands/test_status_command.py
"""Tests for the status command and opening an instance from config."""

import pytest

from ragnotes.commands import notes as note_commands
from ragnotes.commands import open_ragnotes, status
from ragnotes.config import ConfigError


class TestStatusCommand:
    def test_empty(self, notes):
        result = status.status(notes, "alice")

        assert result.success is True
        assert result.owner_id == "alice"
        assert result.total_notes == 0
        assert result.total_chunks == 0
        assert result.total_decks == 0
        assert result.notes == []

    @pytest.mark.asyncio
    async def test_counts_only_owner(self, notes):
        await note_commands.add_note(notes, "alice", "Trip", "x" * 150)
        await note_commands.add_note(notes, "bob", "Other", "y")
        notes.create_deck("alice", "Deck")

        result = status.status(notes, "alice")

        assert result.total_notes == 1
        assert result.total_chunks == 2
        assert result.total_decks == 1
        assert result.notes == []

    @pytest.mark.asyncio
    async def test_detailed_includes_archived(self, notes):
        added = await note_commands.add_note(notes, "alice", "Old", "text")
        notes.document_store.patch(added.note.document_id, is_archived=True)

        result = status.status(notes, "alice", detailed=True)

        assert [n.title for n in result.notes] == ["Old"]
        assert result.notes[0].is_archived is True


class TestOpenRagNotes:
    def test_config_error(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("provider: magic\n")

        result = open_ragnotes(str(tmp_path / "data"), path)

        assert isinstance(result, ConfigError)

    def test_custom_provider_import_failure(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("provider: custom\nembedder: nope_xyz.E\ngenerator: nope_xyz.G\n")

        result = open_ragnotes(str(tmp_path / "data"), path)

        assert isinstance(result, ConfigError)
        assert "Failed to create ragnotes" in result.message
