"""End-to-end ingestion: extract → chunk → embed → sink."""

from __future__ import annotations

import logging
from pathlib import Path

from local_searcher.config import RemainderPolicy, settings
from local_searcher.embeddings.embedder import embed_query
from local_searcher.embeddings.store import EmbeddingStore
from local_searcher.ingestion.chunker import chunk_document
from local_searcher.storage.base import ChunkSink

logger = logging.getLogger(__name__)


def ingest_document(
    path: str | Path,
    sink: ChunkSink,
    *,
    store: EmbeddingStore | None = None,
    max_chars: int = settings.chunk_max_chars,
    remainder_policy: RemainderPolicy = settings.remainder_policy,
) -> int:
    """Chunk the document at *path* and hand every chunk to *sink*.

    When *store* is given each chunk is pooled with
    :func:`~local_searcher.embeddings.embedder.embed_query`; chunks with no
    in-vocabulary tokens are delivered with a ``None`` vector.

    Returns the number of chunks delivered.  Extraction failures propagate
    before anything reaches the sink.
    """
    chunks = chunk_document(path, max_chars, remainder_policy=remainder_policy)

    embeddings = None
    if store is not None:
        embeddings = [embed_query(store, chunk.text) for chunk in chunks]
        missing = sum(1 for e in embeddings if e is None)
        if missing:
            logger.warning("%d of %d chunks from %s had no embeddable tokens", missing, len(chunks), path)

    sink.save_chunks(chunks, embeddings)
    logger.info("Ingested %s: %d chunks", path, len(chunks))
    return len(chunks)
