"""Cover Art Archive records.

Hey future me - the JSON listing from GET /release/{mbid} looks like:

    {"release": "https://musicbrainz.org/release/<mbid>",
     "images": [{"id": 1234, "image": "http://.../1234.jpg", "front": true,
                 "back": false, "types": ["Front"], "approved": true,
                 "edit": 5678, "comment": "",
                 "thumbnails": {"250": "...", "500": "...", "1200": "...",
                                "small": "...", "large": "..."}}]}

`images` is required, so an arbitrary JSON blob can't pass as cover art.
"""

from pydantic import Field

from .base import Record


class CoverartThumbnails(Record):
    """Pre-sized thumbnail URLs. "small"/"large" are legacy aliases of 250/500."""

    res_250: str | None = Field(default=None, alias="250")
    res_500: str | None = Field(default=None, alias="500")
    res_1200: str | None = Field(default=None, alias="1200")
    small: str | None = None
    large: str | None = None


class CoverartImage(Record):
    """One image of a release."""

    id: int | str
    image: str
    front: bool = False
    back: bool = False
    types: list[str] = Field(default_factory=list)
    approved: bool | None = None
    edit: int | None = None
    comment: str | None = None
    thumbnails: CoverartThumbnails = Field(default_factory=CoverartThumbnails)


class Coverart(Record):
    """Every image the archive holds for one release."""

    images: list[CoverartImage]
    release: str | None = None

    @property
    def front_image(self) -> CoverartImage | None:
        """The image flagged as the main front cover, if any."""
        return next((image for image in self.images if image.front), None)


__all__ = ["Coverart", "CoverartImage", "CoverartThumbnails"]
