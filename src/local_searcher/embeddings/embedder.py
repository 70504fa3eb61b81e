"""Mean pooling of token vectors into a single query vector."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from local_searcher.embeddings.store import EmbeddingStore
from local_searcher.embeddings.tokenizer import tokenize


def embed_tokens(store: EmbeddingStore, tokens: Iterable[str]) -> np.ndarray | None:
    """Average the vectors of every in-vocabulary token.

    Out-of-vocabulary tokens are skipped.  Returns ``None`` when none of
    *tokens* is in the store.  The result is a plain ``float32`` mean;
    no normalisation is applied.
    """
    total = np.zeros(store.dim, dtype=np.float32)
    found = 0
    for token in tokens:
        vector = store.vector(token)
        if vector is None:
            continue
        total += vector
        found += 1

    if found == 0:
        return None
    return total / np.float32(found)


def embed_query(store: EmbeddingStore, text: str) -> np.ndarray | None:
    """Tokenise *text* and pool it against *store*."""
    return embed_tokens(store, tokenize(text))
