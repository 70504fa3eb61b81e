"""Exceptions raised while loading embeddings and extracting documents."""

from __future__ import annotations

from pathlib import Path


class LoadError(Exception):
    """Base class for every failure while loading a word-vector table.

    A load either returns a complete store or raises one of these; no
    partially-populated store ever escapes.
    """


class EmbeddingFileError(LoadError):
    """The table could not be read (missing file, permissions, bad UTF-8)."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Failed to read embeddings file {path}: {reason}")
        self.path = str(path)


class InvalidDimensionError(LoadError):
    """The header declared a non-positive vector dimension."""

    def __init__(self, dim: int) -> None:
        super().__init__(f"Invalid embedding dimension in header: {dim}")
        self.dim = dim


class MalformedFloatError(LoadError):
    """A vector component could not be parsed as a float."""

    def __init__(self, line: int, word: str, value: str) -> None:
        super().__init__(f"Failed to parse float {value!r} for word {word!r} at line {line}")
        self.line = line
        self.word = word
        self.value = value


class DimensionMismatchError(LoadError):
    """A row carried a different number of components than the table's dimension."""

    def __init__(self, line: int, word: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Embedding dimension mismatch at line {line} for word {word!r}: "
            f"expected {expected}, got {actual}"
        )
        self.line = line
        self.word = word
        self.expected = expected
        self.actual = actual


class ExtractionError(Exception):
    """Text could not be extracted from a source document."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        message = f"Failed to extract text from {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = str(path)
