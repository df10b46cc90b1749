# src/ragnotes/commands/flashcards.py
"""Flashcard commands - generate cards and browse decks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ragnotes.commands.base import CardInfo, DeckInfo, DecksResult, FlashcardsResult
from ragnotes.exceptions import RagNotesError

if TYPE_CHECKING:
    from ragnotes.ragnotes import RagNotes


async def generate(
    notes: RagNotes,
    owner_id: str,
    document_id: str | None = None,
    text: str | None = None,
    deck_title: str | None = None,
    save: bool = True,
) -> FlashcardsResult:
    """Generate flashcards from a note or from free text.

    Args:
        notes: RagNotes instance
        owner_id: Caller
        document_id: Note to generate from (mutually exclusive with text)
        text: Free text to generate from
        deck_title: Title of the deck to save into (default: note title)
        save: Save the generated cards into a new deck
    """
    if (document_id is None) == (text is None):
        return FlashcardsResult(success=False, error="Provide exactly one of a note or text")

    try:
        if document_id is not None:
            document = notes.documents.get(document_id, owner_id)
            pairs = await notes.generate_flashcards_for_document(document_id, owner_id)
            default_title = f"Flashcards: {document.title}"
        else:
            pairs = await notes.generate_flashcards(text or "")
            default_title = "Flashcards"

        cards = [CardInfo(front=p.front, back=p.back) for p in pairs]
        if not save or not pairs:
            return FlashcardsResult(success=True, cards=cards)

        deck = notes.create_deck(
            owner_id,
            deck_title or default_title,
            source_document_id=document_id,
        )
        notes.save_flashcards(deck.id, owner_id, pairs, source_document_id=document_id)
    except RagNotesError as e:
        return FlashcardsResult(success=False, error=str(e))

    return FlashcardsResult(success=True, cards=cards, deck_id=deck.id, deck_title=deck.title)


def list_decks(notes: RagNotes, owner_id: str, deck_id: str | None = None) -> DecksResult:
    """List the owner's decks, or show the cards of one deck."""
    try:
        if deck_id is not None:
            deck = notes.deck_store.get_deck(deck_id)
            cards = notes.get_flashcards(deck_id, owner_id)
            assert deck is not None  # get_flashcards raised otherwise
            return DecksResult(
                success=True,
                decks=[
                    DeckInfo(
                        deck_id=deck.id,
                        title=deck.title,
                        description=deck.description,
                        card_count=len(cards),
                        cards=[CardInfo(front=c.front, back=c.back) for c in cards],
                    )
                ],
            )

        decks = [
            DeckInfo(
                deck_id=deck.id,
                title=deck.title,
                description=deck.description,
                card_count=len(notes.get_flashcards(deck.id, owner_id)),
            )
            for deck in notes.list_decks(owner_id)
        ]
    except RagNotesError as e:
        return DecksResult(success=False, error=str(e))

    return DecksResult(success=True, decks=decks)
