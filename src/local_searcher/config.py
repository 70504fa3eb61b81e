"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class RemainderPolicy(str, Enum):
    """What to do with trailing text that never reaches terminal punctuation."""

    EMIT = "emit"
    DROP = "drop"


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Embeddings
    embeddings_path: str = Field(
        default="data/cc.en.300.vec",
        description="Word-vector table in fastText / GloVe text format",
    )

    # Chunking
    chunk_max_chars: int = Field(default=900, ge=1, description="Maximum characters per chunk")
    remainder_policy: RemainderPolicy = RemainderPolicy.EMIT

    # Vector store
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "local_searcher"

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import `settings` wherever needed.
settings = Settings()
