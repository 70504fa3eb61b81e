"""In-memory word-vector table loaded from the fastText / GloVe text format.

File format::

    [N D]                 optional header: word count and dimension
    word1 v1 v2 ... vD
    word2 v1 v2 ... vD
    ...

Rows are appended to a flat ``float32`` buffer in arrival order while the
vocabulary maps each token to its row.  A token that appears twice keeps
the index of its *last* row; the earlier row stays in the buffer.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

import numpy as np

from local_searcher.exceptions import (
    DimensionMismatchError,
    EmbeddingFileError,
    InvalidDimensionError,
    MalformedFloatError,
)
from local_searcher.whitespace import split_whitespace

logger = logging.getLogger(__name__)

_HEADER_FIELD = re.compile(r"[0-9]+")
_INITIAL_ROWS = 1024


def _parse_header(fields: list[str]) -> tuple[int, int] | None:
    """Return ``(word_count, dim)`` when *fields* look like a header line."""
    if len(fields) != 2 or not all(_HEADER_FIELD.fullmatch(f) for f in fields):
        return None
    return int(fields[0]), int(fields[1])


def _read_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield ``(lineno, line)`` pairs, splitting on ``\\n`` only."""
    try:
        with open(path, encoding="utf-8", newline="\n") as fh:
            yield from enumerate(fh, 1)
    except (OSError, UnicodeDecodeError) as exc:
        raise EmbeddingFileError(path, str(exc)) from exc


def _parse_row(lineno: int, word: str, raw: list[str]) -> np.ndarray:
    # float() accepts "1_0"; digit grouping is not a valid component.
    for item in raw:
        if "_" in item:
            raise MalformedFloatError(lineno, word, item)
    try:
        return np.array(raw, dtype=np.float32)
    except ValueError as exc:
        raise MalformedFloatError(lineno, word, _first_malformed(raw)) from exc


def _first_malformed(raw: list[str]) -> str:
    for item in raw:
        try:
            float(item)
        except ValueError:
            return item
    return raw[0]


class EmbeddingStore:
    """Read-only token → vector table.

    Parameters
    ----------
    vocab:
        Token → row index, case as stored in the source file.
    data:
        Flat row-major ``float32`` buffer of ``num_rows * dim`` components.
    dim:
        Number of components per row.
    """

    def __init__(self, vocab: dict[str, int], data: np.ndarray, dim: int) -> None:
        if dim and data.size % dim:
            raise ValueError(f"buffer of {data.size} floats is not a multiple of dim={dim}")
        self._vocab = vocab
        self._data = np.ascontiguousarray(data, dtype=np.float32)
        self._data.setflags(write=False)
        self._dim = dim

    # -- construction ---------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> EmbeddingStore:
        """Parse the word-vector table at *path*.

        The file is streamed line by line and each row is converted straight
        into a preallocated ``float32`` buffer, sized from the header when
        there is one and grown geometrically otherwise.

        Raises
        ------
        EmbeddingFileError
            The file cannot be read as UTF-8 text.
        InvalidDimensionError
            The header declares a zero dimension.
        MalformedFloatError
            A vector component is not a float.
        DimensionMismatchError
            A row's component count differs from the table dimension.
        """
        path = Path(path)
        vocab: dict[str, int] = {}
        buffer: np.ndarray | None = None
        dim: int | None = None
        declared_words: int | None = None
        num_rows = 0
        first_line = True

        for lineno, line in _read_lines(path):
            fields = split_whitespace(line)
            if not fields:
                continue

            if first_line:
                first_line = False
                header = _parse_header(fields)
                if header is not None:
                    declared_words, dim = header
                    if dim <= 0:
                        raise InvalidDimensionError(dim)
                    continue

            word, raw = fields[0], fields[1:]
            if not raw:
                logger.debug("Skipping line %d: word %r has no vector", lineno, word)
                continue

            row = _parse_row(lineno, word, raw)
            if dim is None:
                dim = len(raw)
                logger.info("Embedding dimension: %d (from %r at line %d)", dim, word, lineno)
            elif len(raw) != dim:
                raise DimensionMismatchError(lineno, word, dim, len(raw))

            if buffer is None:
                buffer = np.empty((declared_words or _INITIAL_ROWS, dim), dtype=np.float32)
            elif num_rows == len(buffer):
                grown = np.empty((2 * len(buffer), dim), dtype=np.float32)
                grown[:num_rows] = buffer
                buffer = grown
            buffer[num_rows] = row

            vocab[word] = num_rows
            num_rows += 1

        if declared_words is not None and declared_words != num_rows:
            logger.warning(
                "Header of %s declares %d words but %d rows were loaded",
                path, declared_words, num_rows,
            )

        if buffer is None:
            data = np.empty(0, dtype=np.float32)
        elif num_rows < len(buffer):
            data = buffer[:num_rows].copy().reshape(-1)
        else:
            data = buffer.reshape(-1)

        logger.info(
            "Loaded %d vectors (%d unique tokens, dim=%d) from %s",
            num_rows, len(vocab), dim or 0, path,
        )
        return cls(vocab, data, dim or 0)

    # -- accessors ------------------------------------------------------------

    @property
    def vocab(self) -> Mapping[str, int]:
        return MappingProxyType(self._vocab)

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def num_rows(self) -> int:
        """Number of rows in the buffer, duplicates included."""
        return self._data.size // self._dim if self._dim else 0

    @property
    def matrix(self) -> np.ndarray:
        """Read-only ``(num_rows, dim)`` view of :attr:`data`."""
        return self._data.reshape(self.num_rows, self._dim)

    def row(self, index: int) -> np.ndarray:
        """Return the read-only vector stored at row *index*."""
        start = index * self._dim
        return self._data[start : start + self._dim]

    def vector(self, token: str) -> np.ndarray | None:
        """Return the vector for *token*, or ``None`` when it is out of vocabulary."""
        index = self._vocab.get(token)
        if index is None:
            return None
        return self.row(index)

    def __len__(self) -> int:
        return len(self._vocab)

    def __contains__(self, token: object) -> bool:
        return token in self._vocab

    def __repr__(self) -> str:
        return f"EmbeddingStore(tokens={len(self)}, rows={self.num_rows}, dim={self._dim})"


def load_embeddings(path: str | Path) -> EmbeddingStore:
    """Load a word-vector table; see :meth:`EmbeddingStore.load`."""
    return EmbeddingStore.load(path)
