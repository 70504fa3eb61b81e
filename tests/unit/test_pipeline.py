"""Unit tests for end-to-end document ingestion."""

from __future__ import annotations

from pathlib import Path

import pytest

from local_searcher.exceptions import ExtractionError
from local_searcher.ingestion.pipeline import ingest_document
from local_searcher.storage import InMemoryChunkSink


@pytest.fixture()
def document(tmp_path: Path) -> Path:
    path = tmp_path / "chess.txt"
    path.write_text("The king moved. A queen appeared! Nothing else", encoding="utf-8")
    return path


def test_chunks_reach_sink_in_order(document: Path) -> None:
    sink = InMemoryChunkSink()
    count = ingest_document(document, sink, max_chars=900)
    assert count == 3
    assert [c.text for c in sink.chunks] == ["The king moved.", "A queen appeared!", "Nothing else"]
    assert [c.index for c in sink.chunks] == [0, 1, 2]
    assert sink.embeddings == [None, None, None]


def test_chunks_are_embedded_with_store(document: Path, toy_store) -> None:
    sink = InMemoryChunkSink()
    ingest_document(document, sink, store=toy_store, max_chars=900)
    # "moved." and "appeared!" keep their punctuation, so only king / queen match.
    assert sink.embeddings[0].tolist() == pytest.approx([0.1, 0.2, 0.3, 0.4], abs=1e-6)
    assert sink.embeddings[1].tolist() == pytest.approx([1.0, 2.0, 3.0, 4.0], abs=1e-6)
    assert sink.embeddings[2] is None


def test_remainder_policy_is_forwarded(document: Path) -> None:
    sink = InMemoryChunkSink()
    assert ingest_document(document, sink, max_chars=900, remainder_policy="drop") == 2


def test_extraction_failure_reaches_nothing(tmp_path: Path) -> None:
    sink = InMemoryChunkSink()
    with pytest.raises(ExtractionError):
        ingest_document(tmp_path / "absent.txt", sink)
    assert sink.saved == 0
