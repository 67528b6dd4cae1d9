"""brainzlink - typed client for the MusicBrainz web service and Cover Art Archive.

Usage:
    from brainzlink import Artist, MusicBrainzClient, MusicBrainzSettings, Subquery

    settings = MusicBrainzSettings(app_name="MyTagger", app_version="1.0", contact="me@example.org")
    with MusicBrainzClient(settings) as client:
        nirvana = (
            Artist.fetch()
            .id("5b11f4ce-a62d-471e-81fc-a69a8278c7da")
            .include(Subquery.ALIASES)
            .execute(client)
        )
"""

__version__ = "0.1.0"

from brainzlink.application.queries import (  # noqa: E402
    BrowseQuery,
    FetchCoverartQuery,
    FetchQuery,
    LuceneQuery,
    SearchQuery,
)
from brainzlink.config import (  # noqa: E402
    LoggingSettings,
    MusicBrainzSettings,
    Settings,
    get_settings,
)
from brainzlink.domain.dtos import BrowseResult, CoverartResponse, SearchResult  # noqa: E402
from brainzlink.domain.entities import (  # noqa: E402
    Annotation,
    Area,
    Artist,
    CDStub,
    Coverart,
    CoverartImage,
    Discid,
    Entity,
    Event,
    Genre,
    Instrument,
    Label,
    Place,
    Recording,
    Release,
    ReleaseGroup,
    Series,
    Tag,
    Url,
    Work,
)
from brainzlink.domain.exceptions import (  # noqa: E402
    BrainzLinkError,
    DecodingError,
    MaxRetriesExceededError,
    NotFoundError,
    QueryConfigurationError,
    RateLimitProtocolError,
    ServiceError,
    TransportError,
)
from brainzlink.domain.value_objects import (  # noqa: E402
    BrowseBy,
    CoverartResolution,
    CoverartSide,
    Relationship,
    Subquery,
    is_mbid,
    mbid_from_url,
    parse_mbid,
)
from brainzlink.infrastructure.integrations import (  # noqa: E402
    MusicBrainzClient,
    get_default_client,
    set_default_client,
)
from brainzlink.infrastructure.observability import configure_logging  # noqa: E402
from brainzlink.infrastructure.rate_limiter import RateLimiter, RateLimiterConfig  # noqa: E402

__all__ = [
    "Annotation",
    "Area",
    "Artist",
    "BrainzLinkError",
    "BrowseBy",
    "BrowseQuery",
    "BrowseResult",
    "CDStub",
    "Coverart",
    "CoverartImage",
    "CoverartResolution",
    "CoverartResponse",
    "CoverartSide",
    "DecodingError",
    "Discid",
    "Entity",
    "Event",
    "FetchCoverartQuery",
    "FetchQuery",
    "Genre",
    "Instrument",
    "Label",
    "LoggingSettings",
    "LuceneQuery",
    "MaxRetriesExceededError",
    "MusicBrainzClient",
    "MusicBrainzSettings",
    "NotFoundError",
    "Place",
    "QueryConfigurationError",
    "RateLimitProtocolError",
    "RateLimiter",
    "RateLimiterConfig",
    "Recording",
    "Relationship",
    "Release",
    "ReleaseGroup",
    "SearchQuery",
    "SearchResult",
    "Series",
    "ServiceError",
    "Settings",
    "Subquery",
    "Tag",
    "TransportError",
    "Url",
    "Work",
    "__version__",
    "configure_logging",
    "get_default_client",
    "get_settings",
    "is_mbid",
    "mbid_from_url",
    "parse_mbid",
    "set_default_client",
]
