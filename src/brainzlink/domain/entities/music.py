"""MusicBrainz entity records.

Only the commonly used fields are modelled; everything else the service sends
stays available through pydantic extras (``record.model_extra``). Enumerations
like release status or language are plain strings on purpose - the service adds
new values without notice.
"""

from typing import Any

from pydantic import Field

from .base import Alias, Entity, GenreCount, LifeSpan, Rating, Record, TagCount


class ArtistCredit(Record):
    """One credited artist in an artist credit list."""

    name: str
    joinphrase: str = ""
    artist: "Artist | None" = None


class Annotation(Entity):
    """Wiki-like text attached to an entity (search only)."""

    id: str = Field(alias="entity")
    entity_type: str | None = Field(default=None, alias="type")
    name: str | None = None
    text: str | None = None
    score: int | None = None


class Area(Entity):
    """Geographic region or settlement."""

    name: str
    sort_name: str | None = None
    area_type: str | None = Field(default=None, alias="type")
    disambiguation: str | None = None
    iso_3166_1_codes: list[str] | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None


class Artist(Entity):
    """Musician, group, orchestra, character, ..."""

    name: str
    sort_name: str | None = None
    disambiguation: str | None = None
    artist_type: str | None = Field(default=None, alias="type")
    gender: str | None = None
    country: str | None = None
    area: Area | None = None
    begin_area: Area | None = None
    end_area: Area | None = None
    life_span: LifeSpan | None = None
    ipis: list[str] | None = None
    isnis: list[str] | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    rating: Rating | None = None
    annotation: str | None = None
    recordings: list["Recording"] | None = None
    releases: list["Release"] | None = None
    release_groups: list["ReleaseGroup"] | None = None
    works: list["Work"] | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class CDStub(Entity):
    """Anonymously submitted disc listing (search only)."""

    title: str
    artist: str | None = None
    barcode: str | None = None
    comment: str | None = None
    count: int | None = None
    score: int | None = None


class Event(Entity):
    """Organised event: concert, festival, launch party, ..."""

    name: str
    event_type: str | None = Field(default=None, alias="type")
    disambiguation: str | None = None
    cancelled: bool | None = None
    time: str | None = None
    setlist: str | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    rating: Rating | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class Genre(Entity):
    """Genre as curated by MusicBrainz."""

    name: str
    disambiguation: str | None = None


class Instrument(Entity):
    """Musical instrument."""

    name: str
    instrument_type: str | None = Field(default=None, alias="type")
    disambiguation: str | None = None
    description: str | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class Label(Entity):
    """Imprint or the company controlling it."""

    name: str
    sort_name: str | None = None
    label_type: str | None = Field(default=None, alias="type")
    disambiguation: str | None = None
    country: str | None = None
    area: Area | None = None
    label_code: int | None = None
    life_span: LifeSpan | None = None
    releases: list["Release"] | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    rating: Rating | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class Coordinates(Record):
    """Latitude/longitude of a place.

    The service sends these either as numbers or as numeric strings.
    """

    latitude: float
    longitude: float


class Place(Entity):
    """Building or outdoor area used for performing or producing music."""

    name: str
    place_type: str | None = Field(default=None, alias="type")
    disambiguation: str | None = None
    address: str | None = None
    area: Area | None = None
    coordinates: Coordinates | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class Recording(Entity):
    """Unique mix or edit of audio."""

    title: str
    length: int | None = None
    disambiguation: str | None = None
    video: bool | None = None
    first_release_date: str | None = None
    artist_credit: list[ArtistCredit] | None = None
    isrcs: list[str] | None = None
    releases: list["Release"] | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    rating: Rating | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class LabelInfo(Record):
    """Label and catalogue number of a release."""

    catalog_number: str | None = None
    label: Label | None = None


class Track(Record):
    """Track on a medium."""

    id: str
    title: str
    number: str | None = None
    position: int | None = None
    length: int | None = None
    recording: Recording | None = None
    artist_credit: list[ArtistCredit] | None = None


class Media(Record):
    """Medium of a release (CD, vinyl side pair, digital media, ...)."""

    title: str | None = None
    position: int | None = None
    track_count: int = 0
    format: str | None = None
    track_offset: int | None = None
    tracks: list[Track] | None = None
    discs: list["Disc"] | None = None


class Release(Entity):
    """Unique release (issuing) of a product."""

    title: str
    status: str | None = None
    quality: str | None = None
    date: str | None = None
    country: str | None = None
    barcode: str | None = None
    packaging: str | None = None
    disambiguation: str | None = None
    artist_credit: list[ArtistCredit] | None = None
    release_group: "ReleaseGroup | None" = None
    label_info: list[LabelInfo] | None = None
    media: list[Media] | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    rating: Rating | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class ReleaseGroup(Entity):
    """Abstract album grouping every release of the same work."""

    title: str
    primary_type: str | None = None
    secondary_types: list[str] | None = None
    first_release_date: str | None = None
    disambiguation: str | None = None
    artist_credit: list[ArtistCredit] | None = None
    releases: list[Release] | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    rating: Rating | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class Series(Entity):
    """Sequence of related entities."""

    name: str
    series_type: str | None = Field(default=None, alias="type")
    disambiguation: str | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class Tag(Entity):
    """Folksonomy tag (search only)."""

    id: str = Field(alias="name")
    score: int | None = None


class Url(Entity):
    """External link attached to entities through relationships."""

    resource: str
    relations: list[dict[str, Any]] | None = None


class Work(Entity):
    """Distinct intellectual or artistic creation."""

    title: str
    work_type: str | None = Field(default=None, alias="type")
    disambiguation: str | None = None
    language: str | None = None
    languages: list[str] | None = None
    iswcs: list[str] | None = None
    aliases: list[Alias] | None = None
    tags: list[TagCount] | None = None
    genres: list[GenreCount] | None = None
    rating: Rating | None = None
    annotation: str | None = None
    relations: list[dict[str, Any]] | None = None
    score: int | None = None


class Disc(Record):
    """Disc id attached to a medium."""

    id: str
    offset_count: int
    sectors: int
    offsets: list[int]


class Discid(Entity):
    """Disc id lookup result: the TOC plus the releases it belongs to."""

    offset_count: int
    sectors: int
    offsets: list[int]
    releases: list[Release] | None = None


for _model in (
    ArtistCredit,
    Artist,
    Label,
    Recording,
    LabelInfo,
    Track,
    Media,
    Release,
    ReleaseGroup,
    Discid,
):
    _model.model_rebuild()


__all__ = [
    "Annotation",
    "Area",
    "Artist",
    "ArtistCredit",
    "CDStub",
    "Coordinates",
    "Disc",
    "Discid",
    "Event",
    "Genre",
    "Instrument",
    "Label",
    "LabelInfo",
    "Media",
    "Place",
    "Recording",
    "Release",
    "ReleaseGroup",
    "Series",
    "Tag",
    "Track",
    "Url",
    "Work",
]
