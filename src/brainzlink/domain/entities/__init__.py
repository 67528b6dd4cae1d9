"""Domain entities: the typed records the service returns."""

from brainzlink.domain.entities.base import (
    Alias,
    Entity,
    GenreCount,
    LifeSpan,
    Rating,
    Record,
    TagCount,
)
from brainzlink.domain.entities.coverart import Coverart, CoverartImage, CoverartThumbnails
from brainzlink.domain.entities.music import (
    Annotation,
    Area,
    Artist,
    ArtistCredit,
    CDStub,
    Coordinates,
    Disc,
    Discid,
    Event,
    Genre,
    Instrument,
    Label,
    LabelInfo,
    Media,
    Place,
    Recording,
    Release,
    ReleaseGroup,
    Series,
    Tag,
    Track,
    Url,
    Work,
)

__all__ = [
    "Alias",
    "Annotation",
    "Area",
    "Artist",
    "ArtistCredit",
    "CDStub",
    "Coordinates",
    "Coverart",
    "CoverartImage",
    "CoverartThumbnails",
    "Disc",
    "Discid",
    "Entity",
    "Event",
    "Genre",
    "GenreCount",
    "Instrument",
    "Label",
    "LabelInfo",
    "LifeSpan",
    "Media",
    "Place",
    "Rating",
    "Record",
    "Recording",
    "Release",
    "ReleaseGroup",
    "Series",
    "Tag",
    "TagCount",
    "Track",
    "Url",
    "Work",
]
