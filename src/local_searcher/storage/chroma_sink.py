"""Chroma implementation of the chunk-sink abstraction."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence
from typing import Any

import chromadb
import numpy as np

from local_searcher.config import settings
from local_searcher.ingestion.models import Chunk
from local_searcher.storage.base import ChunkSink

logger = logging.getLogger(__name__)


def _doc_id(source: str | None) -> str:
    return hashlib.sha256((source or "").encode()).hexdigest()[:16]


def chunk_id(chunk: Chunk) -> str:
    """Deterministic ``<doc_id>_<chunk_index>`` id, so re-ingestion overwrites."""
    return f"{_doc_id(chunk.source)}_{chunk.index}"


class ChromaChunkSink(ChunkSink):
    """Chroma-backed chunk sink.

    Chroma needs a vector for every record, so chunks whose pooled vector
    is absent are stored with a zero vector and ``has_embedding=False``.

    Parameters
    ----------
    dim:
        Dimension of the vectors being stored.
    collection_name:
        Name of the Chroma collection.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    client:
        Pre-built Chroma client; *host* and *port* are ignored when given.
    """

    def __init__(
        self,
        dim: int,
        collection_name: str = settings.chroma_collection,
        *,
        host: str = settings.chroma_host,
        port: int = settings.chroma_port,
        client: Any = None,
    ) -> None:
        self.dim = dim
        self.collection_name = collection_name
        self._client = client if client is not None else chromadb.HttpClient(host=host, port=port)
        self._collection = self._client.get_or_create_collection(collection_name)

    # -- ChunkSink overrides --------------------------------------------------

    def save_chunk(self, chunk: Chunk, embedding: np.ndarray | None = None) -> None:
        self.save_chunks([chunk], [embedding])

    def save_chunks(
        self,
        chunks: Sequence[Chunk],
        embeddings: Sequence[np.ndarray | None] | None = None,
    ) -> None:
        if embeddings is None:
            raise ValueError("ChromaChunkSink requires an embedding (or None) per chunk")
        if len(embeddings) != len(chunks):
            raise ValueError(f"got {len(embeddings)} embeddings for {len(chunks)} chunks")
        if not chunks:
            return

        vectors: list[list[float]] = []
        metadatas: list[dict[str, Any]] = []
        for chunk, embedding in zip(chunks, embeddings):
            has_embedding = embedding is not None
            if has_embedding and len(embedding) != self.dim:
                raise ValueError(
                    f"chunk {chunk.index}: embedding has dim {len(embedding)}, expected {self.dim}"
                )
            vector = embedding if has_embedding else np.zeros(self.dim, dtype=np.float32)
            vectors.append([float(x) for x in vector])
            metadatas.append(
                {
                    "source": chunk.source or "",
                    "chunk_index": chunk.index,
                    "char_count": chunk.char_count,
                    "has_embedding": has_embedding,
                }
            )

        self._collection.upsert(
            ids=[chunk_id(c) for c in chunks],
            documents=[c.text for c in chunks],
            embeddings=vectors,
            metadatas=metadatas,
        )
        logger.info("Upserted %d chunks into %r", len(chunks), self.collection_name)

    def health_check(self) -> bool:
        """Return ``True`` when the Chroma server answers a heartbeat."""
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False
