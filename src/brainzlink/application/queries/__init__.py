"""Query builders: fetch, browse, search and cover art lookups."""

from brainzlink.application.queries.base import MAX_PAGE_SIZE, PaginatedQuery, Query
from brainzlink.application.queries.browse import BrowseQuery
from brainzlink.application.queries.coverart import FetchCoverartQuery
from brainzlink.application.queries.fetch import FetchQuery
from brainzlink.application.queries.lucene import LuceneQuery
from brainzlink.application.queries.search import SearchQuery
from brainzlink.application.queries.url import assemble_url, include_param

__all__ = [
    "MAX_PAGE_SIZE",
    "BrowseQuery",
    "FetchCoverartQuery",
    "FetchQuery",
    "LuceneQuery",
    "PaginatedQuery",
    "Query",
    "SearchQuery",
    "assemble_url",
    "include_param",
]
