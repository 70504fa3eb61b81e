"""Domain models for chunked documents."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class Chunk(BaseModel):
    """A bounded-length text segment of a source document.

    Attributes
    ----------
    index:
        0-based position of the chunk within its document.  Numbering runs
        across sentence boundaries.
    text:
        The chunk payload.
    source:
        Path or locator of the originating document, when known.
    """

    index: int = Field(ge=0)
    text: str
    source: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def char_count(self) -> int:
        return len(self.text)

    def __str__(self) -> str:  # noqa: D105
        return f"#{self.index} ({self.char_count} chars) {self.text[:80]}"
