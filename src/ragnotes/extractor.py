# src/ragnotes/extractor.py
"""Plain-text extraction from block-structured note content.

Note content is stored as a serialized list of editor blocks (BlockNote
shape). A paragraph block looks like:

    {
        "id": "...",
        "type": "paragraph",
        "props": {},
        "content": [{"type": "text", "text": "Hello", "styles": {}}],
        "children": [],
    }
"""

import json
import logging
from typing import Any
from uuid import uuid4

from ragnotes.exceptions import ExtractionError

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


def extract_text(content: str | None) -> str:
    """Convert stored document content into a flat text string.

    - A JSON string value is returned unchanged.
    - A list of blocks yields each block's text joined by blank lines; nested
      child blocks follow their parent and blocks without text are skipped.
    - Any other JSON value is stringified.

    Never raises: malformed content is logged and yields an empty string.
    """
    if not content:
        return ""
    try:
        return _extract(content)
    except ExtractionError as e:
        logger.warning("Could not extract text from document content: %s", e)
        return ""


def _extract(content: str) -> str:
    try:
        parsed = json.loads(content)
    except (ValueError, TypeError, RecursionError) as e:
        # Oversized integers and deep nesting fail outside JSONDecodeError
        raise ExtractionError(f"content is not valid JSON: {e}") from e

    if parsed is None:
        return ""
    if isinstance(parsed, str):
        return parsed
    if isinstance(parsed, list):
        texts: list[str] = []
        try:
            _collect_block_texts(parsed, texts)
        except (TypeError, AttributeError, RecursionError) as e:
            raise ExtractionError(f"unrecognized block structure: {e}") from e
        return BLOCK_SEPARATOR.join(texts)

    try:
        return json.dumps(parsed, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ExtractionError(f"content cannot be stringified: {e}") from e


def _collect_block_texts(blocks: list[Any], texts: list[str]) -> None:
    for block in blocks:
        if not isinstance(block, dict):
            continue
        text = _inline_text(block.get("content"))
        if text.strip():
            texts.append(text)
        children = block.get("children")
        if isinstance(children, list):
            _collect_block_texts(children, texts)


def _inline_text(content: Any) -> str:
    """Concatenate the text of a block's inline content."""
    if isinstance(content, str):
        return content
    if not isinstance(content, list):
        # Tables and custom blocks carry no inline text
        return ""
    parts: list[str] = []
    for item in content:
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, dict):
            text = item.get("text")
            if isinstance(text, str):
                parts.append(text)
            else:
                # Links wrap their styled text in a nested content list
                parts.append(_inline_text(item.get("content")))
    return "".join(parts)


def blocks_from_text(text: str) -> str:
    """Serialize plain text as a list of paragraph blocks.

    Paragraphs are separated by blank lines. extract_text() on the result
    returns the paragraphs joined by blank lines.
    """
    paragraphs = [p.strip() for p in text.replace("\r\n", "\n").split("\n\n")]
    blocks = [
        {
            "id": str(uuid4()),
            "type": "paragraph",
            "props": {},
            "content": [{"type": "text", "text": paragraph, "styles": {}}],
            "children": [],
        }
        for paragraph in paragraphs
        if paragraph
    ]
    return json.dumps(blocks, ensure_ascii=False)
