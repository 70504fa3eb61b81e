"""Shared pytest configuration and fixtures."""

from pathlib import Path

import pytest

from local_searcher.embeddings.store import EmbeddingStore

TOY_TABLE = (
    "3 4\n"
    "king 0.1 0.2 0.3 0.4\n"
    "queen 1.0 2.0 3.0 4.0\n"
    "man -0.5 0.0 0.5 1.5\n"
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


@pytest.fixture()
def write_table(tmp_path: Path):
    """Write *content* to a word-vector file and return its path."""

    def _write(content: str, name: str = "vectors.vec") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def toy_store(write_table) -> EmbeddingStore:
    return EmbeddingStore.load(write_table(TOY_TABLE))
