# src/ragnotes/chunker.py
"""Fixed-size overlapping text chunking."""

DEFAULT_CHUNK_SIZE = 500
DEFAULT_CHUNK_OVERLAP = 50


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[str]:
    """Split text into overlapping character windows.

    The first window starts at offset 0 and every following window starts
    chunk_size - overlap characters after the previous one. The last window
    ends exactly at the end of the text. Windows are raw character slices, so
    a boundary may fall inside a word.

    Args:
        text: Text to split.
        chunk_size: Maximum window length in characters.
        overlap: Characters shared by consecutive windows. If overlap is not
            smaller than chunk_size, each window starts where the previous
            one ended.

    Returns:
        Ordered list of windows (empty for empty text).
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0:
        raise ValueError(f"overlap must not be negative, got {overlap}")
    if not text:
        return []

    step = chunk_size - overlap
    length = len(text)
    chunks: list[str] = []
    start = 0
    while start < length:
        end = min(start + chunk_size, length)
        chunks.append(text[start:end])
        if end == length:
            break
        # Forward progress even when overlap >= chunk_size
        start = start + step if step > 0 else end
    return chunks
