"""Sentence-aware text chunking."""

from __future__ import annotations

import logging
from pathlib import Path

from local_searcher.config import RemainderPolicy, settings
from local_searcher.ingestion.loader import extract_text
from local_searcher.ingestion.models import Chunk
from local_searcher.ingestion.segmenter import segment
from local_searcher.ingestion.splitter import hard_split
from local_searcher.whitespace import normalize_whitespace

logger = logging.getLogger(__name__)


def chunk_text(
    text: str,
    max_chars: int = settings.chunk_max_chars,
    *,
    remainder_policy: RemainderPolicy = settings.remainder_policy,
    source: str | None = None,
) -> list[Chunk]:
    """Split *text* into chunks of at most *max_chars* characters.

    Parameters
    ----------
    text:
        Extracted document text.
    max_chars:
        Maximum character length of each chunk.
    remainder_policy:
        Whether trailing text without terminal punctuation becomes the
        final chunk (``EMIT``) or is discarded (``DROP``).
    source:
        Optional source locator copied onto every chunk.

    Returns
    -------
    list[Chunk]
        Chunks in document order, numbered from 0.  A sentence that fits
        becomes one chunk; a longer one is hard-split into several.
    """
    if max_chars < 1:
        raise ValueError(f"max_chars must be >= 1, got {max_chars}")

    sentences, remainder = segment(text)
    remainder = normalize_whitespace(remainder)
    if remainder and RemainderPolicy(remainder_policy) is RemainderPolicy.EMIT:
        sentences.append(remainder)
    elif remainder:
        logger.debug("Dropping %d-char unterminated remainder", len(remainder))

    chunks: list[Chunk] = []
    split_count = 0
    for sentence in sentences:
        if len(sentence) <= max_chars:
            pieces = [sentence]
        else:
            pieces = hard_split(sentence, max_chars)
            split_count += 1
        for piece in pieces:
            chunks.append(Chunk(index=len(chunks), text=piece, source=source))

    logger.info(
        "Produced %d chunks from %d sentences (%d hard-split, max_chars=%d)",
        len(chunks), len(sentences), split_count, max_chars,
    )
    return chunks


def chunk_document(
    path: str | Path,
    max_chars: int = settings.chunk_max_chars,
    *,
    remainder_policy: RemainderPolicy = settings.remainder_policy,
) -> list[Chunk]:
    """Extract the text of the document at *path* and chunk it.

    :class:`~local_searcher.exceptions.ExtractionError` from the loader
    propagates unchanged; nothing is chunked in that case.
    """
    text = extract_text(path)
    return chunk_text(text, max_chars, remainder_policy=remainder_policy, source=str(path))
