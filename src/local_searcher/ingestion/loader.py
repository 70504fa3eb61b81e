"""Document text extraction via thin wrappers around LangChain document loaders."""

from __future__ import annotations

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader, TextLoader

from local_searcher.exceptions import ExtractionError

logger = logging.getLogger(__name__)


def load_pdf(path: str | Path) -> str:
    """Return the text of every page of a PDF, joined with newlines."""
    pages = PyPDFLoader(str(path)).load()
    return "\n".join(page.page_content for page in pages)


def load_text(path: str | Path) -> str:
    """Return the contents of a UTF-8 text file."""
    docs = TextLoader(str(path), encoding="utf-8").load()
    return "".join(doc.page_content for doc in docs)


def extract_text(path: str | Path) -> str:
    """Extract plain text from the document at *path*.

    PDFs go through ``PyPDFLoader``; every other file is read as UTF-8
    text.

    Raises
    ------
    ExtractionError
        The file is missing or the loader failed; the loader's exception
        is chained as ``__cause__``.
    """
    path = Path(path)
    if not path.is_file():
        raise ExtractionError(path, "no such file")

    try:
        if path.suffix.lower() == ".pdf":
            text = load_pdf(path)
        else:
            text = load_text(path)
    except Exception as exc:
        raise ExtractionError(path, str(exc)) from exc

    logger.info("Extracted %d chars from %s", len(text), path)
    return text
