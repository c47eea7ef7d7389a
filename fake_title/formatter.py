"""Display formatting for title records."""

from __future__ import annotations

from fake_title.models.schemas import TitleRecord


def capitalize_first(word: str) -> str:
    """Uppercase the first character and keep the rest verbatim.

    Unlike ``str.capitalize`` this never lowercases the tail, so ``"devOps"``
    becomes ``"DevOps"``. An empty string is returned unchanged.
    """

    if not word:
        return word
    return word[0].upper() + word[1:]


def format_title(record: TitleRecord) -> str:
    """Render a record as ``"Seniority Field Role"``.

    Empty fields still take their slot in the join, so they show up as
    consecutive spaces rather than being dropped.
    """

    return " ".join(
        capitalize_first(word) for word in (record.seniority, record.field, record.role)
    )
