"""Recommendation model returned by the regional advice service."""

from __future__ import annotations

from pydantic import BaseModel

_TITLE_SEPARATOR = " - "


class Recommendation(BaseModel):
    """One line of model advice split into a headline and its explanation."""

    title: str
    body: str = ""

    @classmethod
    def from_line(cls, line: str) -> Recommendation:
        """Split on the first ``" - "``; a line without one is all title."""
        title, _, body = line.partition(_TITLE_SEPARATOR)
        return cls(title=title.strip().strip('"'), body=body.strip().strip('"'))
