"""Flashcard generation for ragnotes."""

from ragnotes.flashcards.parser import parse_flashcard_response
from ragnotes.flashcards.synthesizer import FLASHCARD_PROMPT, FlashcardSynthesizer

__all__ = ["FlashcardSynthesizer", "FLASHCARD_PROMPT", "parse_flashcard_response"]
