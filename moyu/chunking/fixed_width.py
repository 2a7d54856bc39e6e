# moyu/chunking/fixed_width.py
"""Fixed-width text wrapper used for generated comment lines."""

from __future__ import annotations

from typing import List


def wrap_text(text: str, max_width: int) -> List[str]:
    """
    Split text into consecutive chunks of `max_width` characters.

    Width is counted in characters, so an ideograph counts as one unit just
    like an ASCII letter. Only the last chunk may be shorter.

    Args:
        text: Text to split.
        max_width: Chunk size in characters.

    Returns:
        List of chunks (empty for empty text).

    Raises:
        ValueError: If max_width is not positive.
    """
    if max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width}")
    return [text[start:start + max_width] for start in range(0, len(text), max_width)]
