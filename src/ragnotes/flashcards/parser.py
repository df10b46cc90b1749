# src/ragnotes/flashcards/parser.py
"""Parsing of model responses into flashcard pairs."""

import json
import re

from ragnotes.exceptions import FlashcardParseError
from ragnotes.models import FlashcardPair, FlashcardParseResult

_JSON_FENCE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def _parse_pairs(raw: str) -> list[FlashcardPair]:
    match = _JSON_FENCE.search(raw or "")
    if not match:
        raise FlashcardParseError("no ```json code block found in response")

    try:
        data = json.loads(match.group(1).strip())
    except (ValueError, RecursionError) as e:
        raise FlashcardParseError(f"invalid JSON in code block: {e}") from e

    if not isinstance(data, list):
        raise FlashcardParseError(f"expected a JSON array, got {type(data).__name__}")

    pairs = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise FlashcardParseError(f"item {i} is not an object")
        front, back = item.get("front"), item.get("back")
        if not isinstance(front, str) or not isinstance(back, str):
            raise FlashcardParseError(f"item {i} lacks string 'front' and 'back' fields")
        pairs.append(FlashcardPair(front=front, back=back))
    return pairs


def parse_flashcard_response(raw: str) -> FlashcardParseResult:
    """Parse a model response holding a ```json fenced array of {front, back} objects.

    Any deviation (no fence, invalid JSON, not an array, an element without
    string front/back) yields a failed result with an empty pair list. Extra
    keys on elements are ignored. Never raises.
    """
    try:
        return FlashcardParseResult(pairs=_parse_pairs(raw))
    except FlashcardParseError as e:
        return FlashcardParseResult(pairs=[], error=str(e))
