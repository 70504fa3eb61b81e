"""Unit tests for chunk sinks."""

from __future__ import annotations

from unittest.mock import MagicMock

import numpy as np
import pytest

from local_searcher.ingestion.models import Chunk
from local_searcher.storage import ChunkSink, InMemoryChunkSink
from local_searcher.storage.chroma_sink import ChromaChunkSink, chunk_id


def _chunks(*texts: str, source: str = "doc.txt") -> list[Chunk]:
    return [Chunk(index=i, text=t, source=source) for i, t in enumerate(texts)]


class TestInMemoryChunkSink:
    def test_keeps_arrival_order(self) -> None:
        sink = InMemoryChunkSink()
        sink.save_chunks(_chunks("a", "b", "c"))
        assert [c.text for c in sink.chunks] == ["a", "b", "c"]
        assert sink.embeddings == [None, None, None]
        assert sink.saved == 3

    def test_embeddings_travel_with_chunks(self) -> None:
        sink = InMemoryChunkSink()
        vec = np.ones(2, dtype=np.float32)
        sink.save_chunks(_chunks("a", "b"), [vec, None])
        assert sink.embeddings[0] is vec
        assert sink.embeddings[1] is None

    def test_embedding_count_must_match(self) -> None:
        with pytest.raises(ValueError):
            InMemoryChunkSink().save_chunks(_chunks("a", "b"), [None])

    def test_is_a_chunk_sink(self) -> None:
        assert isinstance(InMemoryChunkSink(), ChunkSink)


class TestChromaChunkSink:
    @pytest.fixture()
    def client(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture()
    def sink(self, client: MagicMock) -> ChromaChunkSink:
        return ChromaChunkSink(dim=2, collection_name="test", client=client)

    def test_uses_named_collection(self, sink: ChromaChunkSink, client: MagicMock) -> None:
        client.get_or_create_collection.assert_called_once_with("test")

    def test_upsert_payload(self, sink: ChromaChunkSink, client: MagicMock) -> None:
        chunks = _chunks("Hello.", "World!")
        sink.save_chunks(chunks, [np.array([0.5, 1.5], dtype=np.float32), None])

        collection = client.get_or_create_collection.return_value
        kwargs = collection.upsert.call_args.kwargs
        assert kwargs["ids"] == [chunk_id(chunks[0]), chunk_id(chunks[1])]
        assert kwargs["documents"] == ["Hello.", "World!"]
        assert kwargs["embeddings"] == [[0.5, 1.5], [0.0, 0.0]]
        assert kwargs["metadatas"][0] == {
            "source": "doc.txt",
            "chunk_index": 0,
            "char_count": 6,
            "has_embedding": True,
        }
        assert kwargs["metadatas"][1]["has_embedding"] is False

    def test_ids_are_deterministic_per_source(self) -> None:
        a = Chunk(index=3, text="x", source="a.pdf")
        assert chunk_id(a) == chunk_id(Chunk(index=3, text="y", source="a.pdf"))
        assert chunk_id(a) != chunk_id(Chunk(index=3, text="x", source="b.pdf"))
        assert chunk_id(a).endswith("_3")

    def test_requires_embeddings(self, sink: ChromaChunkSink) -> None:
        with pytest.raises(ValueError):
            sink.save_chunks(_chunks("a"))

    def test_rejects_wrong_dimension(self, sink: ChromaChunkSink) -> None:
        with pytest.raises(ValueError):
            sink.save_chunk(Chunk(index=0, text="a"), np.zeros(3, dtype=np.float32))

    def test_empty_batch_is_a_no_op(self, sink: ChromaChunkSink, client: MagicMock) -> None:
        sink.save_chunks([], [])
        client.get_or_create_collection.return_value.upsert.assert_not_called()

    def test_health_check(self, sink: ChromaChunkSink, client: MagicMock) -> None:
        assert sink.health_check() is True
        client.heartbeat.side_effect = ConnectionError("down")
        assert sink.health_check() is False
