"""Query tokenisation."""

from __future__ import annotations

from local_searcher.whitespace import split_whitespace

# Articles, prepositions, conjunctions and copulas dropped before lookup.
STOP_WORDS: frozenset[str] = frozenset(
    {
        # articles / determiners
        "a", "an", "the", "this", "that", "these", "those",
        # prepositions
        "about", "above", "after", "against", "at", "before", "below", "between",
        "by", "during", "for", "from", "in", "into", "of", "off", "on", "onto",
        "out", "over", "through", "to", "under", "until", "up", "upon", "with",
        "within", "without",
        # conjunctions
        "and", "as", "because", "but", "if", "nor", "or", "so", "than", "then",
        "though", "while", "yet",
        # copulas / auxiliaries
        "am", "are", "be", "been", "being", "is", "was", "were",
    }
)


def tokenize(text: str) -> list[str]:
    """Lowercase *text*, split on whitespace and drop stop words.

    >>> tokenize("  the   best   chess  openning    ")
    ['best', 'chess', 'openning']
    """
    return [token for token in split_whitespace(text.lower()) if token not in STOP_WORDS]
