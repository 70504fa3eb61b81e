"""Abstract base class for chunk persistence backends.

The ingestion pipeline hands every finished chunk to a :class:`ChunkSink`
in document order; durable storage is entirely the sink's concern.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np

from local_searcher.ingestion.models import Chunk

logger = logging.getLogger(__name__)


class ChunkSink(ABC):
    """Backend-agnostic chunk sink."""

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def save_chunk(self, chunk: Chunk, embedding: np.ndarray | None = None) -> None:
        """Persist a single *chunk* together with its pooled vector, if any."""
        ...

    # -- optional overrides ---------------------------------------------------

    def save_chunks(
        self,
        chunks: Sequence[Chunk],
        embeddings: Sequence[np.ndarray | None] | None = None,
    ) -> None:
        """Persist *chunks* in order.  Backends may override to batch writes."""
        if embeddings is not None and len(embeddings) != len(chunks):
            raise ValueError(
                f"got {len(embeddings)} embeddings for {len(chunks)} chunks"
            )
        for i, chunk in enumerate(chunks):
            self.save_chunk(chunk, embeddings[i] if embeddings is not None else None)


class InMemoryChunkSink(ChunkSink):
    """Keeps saved chunks in arrival order, for tests and dry runs."""

    def __init__(self) -> None:
        self.chunks: list[Chunk] = []
        self.embeddings: list[np.ndarray | None] = []

    @property
    def saved(self) -> int:
        return len(self.chunks)

    def save_chunk(self, chunk: Chunk, embedding: np.ndarray | None = None) -> None:
        self.chunks.append(chunk)
        self.embeddings.append(embedding)
        logger.debug("Saved chunk #%d: %d chars", self.saved, chunk.char_count)
