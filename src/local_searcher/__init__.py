"""Chunk documents along sentence boundaries and pool word vectors for queries."""

__version__ = "0.1.0"
