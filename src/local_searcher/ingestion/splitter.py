"""Fixed-width fallback splitting for over-length sentences."""

from __future__ import annotations


def hard_split(text: str, max_chars: int) -> list[str]:
    """Cut *text* into consecutive pieces of at most *max_chars* characters.

    Lengths count code points, so a multi-byte character is never divided.
    ``"".join(hard_split(text, n)) == text`` for every ``n >= 1``; an empty
    *text* yields an empty list.
    """
    if max_chars < 1:
        raise ValueError(f"max_chars must be >= 1, got {max_chars}")
    return [text[i : i + max_chars] for i in range(0, len(text), max_chars)]
