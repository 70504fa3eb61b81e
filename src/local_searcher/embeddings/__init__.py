"""
Embeddings: word-vector table loading and query pooling.

Public surface
--------------
- :class:`EmbeddingStore` / :func:`load_embeddings`: indexed word-vector table.
- :func:`tokenize`: lowercase, stop-word-filtered query tokens.
- :func:`embed_tokens` / :func:`embed_query`: mean-pooled query vectors.
"""

from local_searcher.embeddings.embedder import embed_query, embed_tokens
from local_searcher.embeddings.store import EmbeddingStore, load_embeddings
from local_searcher.embeddings.tokenizer import STOP_WORDS, tokenize

__all__ = [
    "STOP_WORDS",
    "EmbeddingStore",
    "embed_query",
    "embed_tokens",
    "load_embeddings",
    "tokenize",
]
