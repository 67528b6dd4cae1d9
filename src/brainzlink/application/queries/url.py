"""URL assembly for MusicBrainz requests.

Hey future me - the wire format is fixed and order matters:

    {base}/{path}?fmt=json[&inc=a+b+c][&{browse-key}={id} | &{search-expr}][&limit=N][&offset=N]

Include tokens and numbers come from our own tables, so nothing is encoded
here. The search expression is caller supplied and appended VERBATIM -
LuceneQuery.build() is the place that encodes.
"""

from collections.abc import Iterable

from brainzlink.domain.value_objects.includes import Include


def include_param(includes: Iterable[Include]) -> str:
    """Render the "&inc=" segment ("" when there is nothing to include)."""
    tokens = [include.as_str() for include in includes]
    if not tokens:
        return ""
    return "&inc=" + "+".join(tokens)


def assemble_url(
    base: str,
    path: str,
    includes: Iterable[Include] = (),
    *,
    extra: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> str:
    """Build a complete request URL.

    Args:
        base: Service root without trailing slash
        path: Entity path, optionally followed by "/{id}"
        includes: Include tokens, emitted in the given order
        extra: Browse linking pair ("artist=<mbid>") or search expression
        limit: Page size, emitted before offset when set
        offset: Page start

    Returns:
        The request URL
    """
    url = f"{base}/{path}?fmt=json{include_param(includes)}"
    if extra:
        url += f"&{extra}"
    if limit is not None:
        url += f"&limit={limit}"
    if offset is not None:
        url += f"&offset={offset}"
    return url


__all__ = ["assemble_url", "include_param"]
