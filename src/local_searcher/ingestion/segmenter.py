"""Punctuation-driven sentence segmentation.

A sentence is the shortest body followed by a run of terminal punctuation
(``.``, ``!``, ``?``) that ends at whitespace or at the end of the text.
This is the leftmost-first match of ``(.+?)([.!?]+)(\\s+|$)``, found with
a single left-to-right scan instead of a backtracking regex.
"""

from __future__ import annotations

from typing import NamedTuple

from local_searcher.whitespace import is_whitespace, normalize_whitespace, strip_whitespace

TERMINALS = frozenset(".!?")


class Segmentation(NamedTuple):
    """Sentences in document order plus any unterminated tail."""

    sentences: list[str]
    remainder: str


def _find_terminal_run(text: str, start: int) -> tuple[int, int] | None:
    """Locate the first punctuation run closing a sentence body begun at *start*.

    Returns ``(run_start, run_end)`` or ``None``.  The body is at least one
    character long, so the run may begin no earlier than ``start + 1``.
    """
    n = len(text)
    i = start + 1
    while i < n:
        if text[i] not in TERMINALS:
            i += 1
            continue
        j = i
        while j < n and text[j] in TERMINALS:
            j += 1
        if j == n or is_whitespace(text[j]):
            return i, j
        # Every suffix of this run is followed by the same non-space char.
        i = j
    return None


def segment(text: str) -> Segmentation:
    """Split *text* into sentences.

    Sentence bodies are whitespace-normalised and keep their terminal
    punctuation; spans whose body is blank are discarded.  Text after the
    last sentence is returned trimmed as the remainder.

    >>> segment("Hello world. This is a test! Remainder with no period")
    Segmentation(sentences=['Hello world.', 'This is a test!'], remainder='Remainder with no period')
    """
    sentences: list[str] = []
    n = len(text)
    pos = 0

    while pos < n:
        run = _find_terminal_run(text, pos)
        if run is None:
            break
        run_start, run_end = run

        body = normalize_whitespace(text[pos:run_start])
        if body:
            sentences.append(body + text[run_start:run_end])

        pos = run_end
        while pos < n and is_whitespace(text[pos]):
            pos += 1

    return Segmentation(sentences, strip_whitespace(text[pos:]))
