"""
Ingestion: document extraction and sentence-aware chunking.

This module turns a raw document (PDF or plain text) into an ordered list
of bounded-length chunks that a :class:`~local_searcher.storage.ChunkSink`
can persist.
"""

from local_searcher.ingestion.chunker import chunk_document, chunk_text
from local_searcher.ingestion.models import Chunk
from local_searcher.ingestion.segmenter import Segmentation, segment
from local_searcher.ingestion.splitter import hard_split

__all__ = [
    "Chunk",
    "Segmentation",
    "chunk_document",
    "chunk_text",
    "hard_split",
    "segment",
]
