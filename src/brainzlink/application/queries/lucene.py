"""Lucene search expression builder.

Hey future me - MusicBrainz search takes a Lucene query in the "query"
parameter, e.g. artist:"Miles Davis" AND country:US. This builder produces the
whole "query=..." fragment, already URL-encoded, which SearchQuery appends
as-is. Plain strings passed to Entity.search() bypass all of this and must be
encoded by the caller.

Values containing whitespace become phrases (double quoted); Lucene special
characters inside values are backslash escaped so "AC/DC" stays a term.
"""

import re
from typing import Self

import httpx

_SPECIAL = re.compile(r'([+\-!(){}\[\]^"~*?:\\/]|&&|\|\|)')


def escape_term(value: str) -> str:
    """Escape Lucene special characters in a term or phrase."""
    return _SPECIAL.sub(r"\\\1", value)


def format_value(value: str | int) -> str:
    """Render a field value: escaped, and quoted when it is a phrase."""
    text = escape_term(str(value))
    if any(char.isspace() for char in text):
        return f'"{text}"'
    return text


class LuceneQuery:
    """Fluent builder for Lucene search expressions.

    Usage:
        query = LuceneQuery().field("artist", "Miles Davis").and_().field("country", "US")
        Artist.search(query).execute()
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def field(self, name: str, value: str | int) -> Self:
        """Match value in one indexed field."""
        self._parts.append(f"{name}:{format_value(value)}")
        return self

    def term(self, value: str | int) -> Self:
        """Match value in the entity's default fields."""
        self._parts.append(format_value(value))
        return self

    def raw(self, fragment: str) -> Self:
        """Append a fragment verbatim (no escaping)."""
        self._parts.append(fragment)
        return self

    def and_(self) -> Self:
        """Both sides must match."""
        self._parts.append("AND")
        return self

    def or_(self) -> Self:
        """Either side may match."""
        self._parts.append("OR")
        return self

    def not_(self) -> Self:
        """Exclude the following clause."""
        self._parts.append("NOT")
        return self

    def copy(self) -> Self:
        """Independent copy: clauses added to one don't show up in the other."""
        clone = type(self)()
        clone._parts = list(self._parts)
        return clone

    @property
    def expression(self) -> str:
        """The unencoded Lucene expression."""
        return " ".join(self._parts)

    def build(self) -> str:
        """The encoded "query=..." fragment for the request URL."""
        return str(httpx.QueryParams({"query": self.expression}))

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"LuceneQuery({self.expression!r})"


__all__ = ["LuceneQuery", "escape_term", "format_value"]
