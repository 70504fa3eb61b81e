"""FastAPI application exposing query embedding and chunking as a REST API."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from local_searcher import __version__
from local_searcher.config import settings
from local_searcher.embeddings.embedder import embed_tokens
from local_searcher.embeddings.store import EmbeddingStore
from local_searcher.embeddings.tokenizer import tokenize
from local_searcher.exceptions import LoadError
from local_searcher.ingestion.chunker import chunk_text

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Local Searcher API",
    version=__version__,
    description="Sentence-aware chunking and pooled word-vector query embeddings.",
)


@lru_cache(maxsize=1)
def _load_store() -> EmbeddingStore:
    return EmbeddingStore.load(settings.embeddings_path)


def get_store() -> EmbeddingStore:
    """Return the process-wide store, loading it on first use."""
    try:
        return _load_store()
    except LoadError as exc:
        logger.error("Embedding store unavailable: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc


# ── Request / Response schemas ────────────────────────────────────────
class EmbedRequest(BaseModel):
    """Free-text query to embed."""

    query: str


class EmbedResponse(BaseModel):
    """Pooled query vector; ``vector`` is null when no token was found."""

    tokens: list[str]
    vector: list[float] | None
    dim: int


class ChunkRequest(BaseModel):
    """Text to chunk."""

    text: str
    max_chars: int = Field(default=settings.chunk_max_chars, ge=1)


class ChunkItem(BaseModel):
    index: int
    text: str
    char_count: int


class ChunkResponse(BaseModel):
    chunks: list[ChunkItem] = []


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/embed", response_model=EmbedResponse)
def embed(request: EmbedRequest, store: EmbeddingStore = Depends(get_store)) -> EmbedResponse:
    """Tokenise the query and mean-pool its word vectors."""
    tokens = tokenize(request.query)
    vector = embed_tokens(store, tokens)
    return EmbedResponse(
        tokens=tokens,
        vector=vector.tolist() if vector is not None else None,
        dim=store.dim,
    )


@app.post("/chunk", response_model=ChunkResponse)
def chunk(request: ChunkRequest) -> ChunkResponse:
    """Split the text into sentence-aligned chunks."""
    chunks = chunk_text(request.text, request.max_chars)
    return ChunkResponse(
        chunks=[ChunkItem(index=c.index, text=c.text, char_count=c.char_count) for c in chunks]
    )
