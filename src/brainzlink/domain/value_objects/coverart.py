"""Cover art target selection.

Hey future me - the Cover Art Archive serves three things for one release:
- GET /release/{mbid}            -> JSON listing every image
- GET /release/{mbid}/front      -> redirect to the front image
- GET /release/{mbid}/front-500  -> redirect to the 500px front thumbnail

CoverartTarget captures which of those we want. Resolution without a side
means "front" - that default is applied in path_suffix(), i.e. right before
the URL is finalised, never when the builder is configured.
"""

from dataclasses import dataclass
from enum import Enum


class CoverartSide(str, Enum):
    """Which side of the release artwork."""

    FRONT = "front"
    BACK = "back"

    def __str__(self) -> str:
        return self.value


class CoverartResolution(str, Enum):
    """Pre-generated thumbnail sizes (pixels)."""

    RES_250 = "250"
    RES_500 = "500"
    RES_1200 = "1200"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CoverartTarget:
    """Side and resolution requested from the Cover Art Archive."""

    side: CoverartSide | None = None
    resolution: CoverartResolution | None = None

    @property
    def wants_image(self) -> bool:
        """True when the service will answer with a redirect to an image."""
        return self.side is not None or self.resolution is not None

    def resolved(self) -> "CoverartTarget":
        """Return the target with the implicit front side applied."""
        if self.side is None and self.resolution is not None:
            return CoverartTarget(CoverartSide.FRONT, self.resolution)
        return self

    def path_suffix(self) -> str:
        """Path segment appended after the mbid ("" for the JSON listing)."""
        target = self.resolved()
        if target.side is None:
            return ""
        if target.resolution is None:
            return f"/{target.side.value}"
        return f"/{target.side.value}-{target.resolution.value}"


__all__ = ["CoverartResolution", "CoverartSide", "CoverartTarget"]
