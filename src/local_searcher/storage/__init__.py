"""
Storage: persistence of finished chunks and their pooled vectors.

Public surface
--------------
- :class:`ChunkSink`: abstract sink (subclass for other backends).
- :class:`InMemoryChunkSink`: in-process sink for tests and dry runs.
- :class:`ChromaChunkSink`: Chroma-backed sink.
"""

from local_searcher.storage.base import ChunkSink, InMemoryChunkSink

__all__ = ["ChromaChunkSink", "ChunkSink", "InMemoryChunkSink"]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import ChromaChunkSink to avoid pulling in chromadb at import time."""
    if name == "ChromaChunkSink":
        from local_searcher.storage.chroma_sink import ChromaChunkSink

        return ChromaChunkSink
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
