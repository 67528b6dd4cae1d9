"""Cover Art Archive lookups."""

import logging
from typing import Self

from brainzlink.application.queries.base import resolve_client
from brainzlink.domain.catalogue import QueryKind, get_spec
from brainzlink.domain.dtos import CoverartResponse
from brainzlink.domain.entities import Entity
from brainzlink.domain.exceptions import QueryConfigurationError
from brainzlink.domain.ports import IMusicBrainzClient
from brainzlink.domain.value_objects.coverart import (
    CoverartResolution,
    CoverartSide,
    CoverartTarget,
)

logger = logging.getLogger(__name__)


# Hey future me, this is NOT a Query subclass on purpose: it talks to a different
# service (coverart_archive_url), takes no include tokens and has two possible
# response shapes. Side set -> the archive redirects and we return the final image
# URL. Nothing set -> JSON listing. Resolution alone means the FRONT image, but that
# default is only applied in path(), never stored, so the builder state stays
# exactly what the caller configured.
class FetchCoverartQuery:
    """Cover art lookup: GET {coverart_url}/{path}/{id}[/{side}[-{res}]].

    Usage:
        listing = Release.fetch_coverart().id(mbid).execute()
        thumb = Release.fetch_coverart().id(mbid).res_500().execute()  # front, 500px
        thumb.url
    """

    def __init__(self, entity_type: type[Entity]) -> None:
        self.entity_type = entity_type
        self.spec = get_spec(entity_type, QueryKind.COVERART)
        self._id: str | None = None
        self._side: CoverartSide | None = None
        self._resolution: CoverartResolution | None = None

    @property
    def target(self) -> CoverartTarget:
        """Side and resolution as configured (front default not applied)."""
        return CoverartTarget(self._side, self._resolution)

    def id(self, mbid: str) -> Self:
        """Identifier of the release or release group."""
        self._id = mbid
        return self

    def side(self, side: CoverartSide | str) -> Self:
        """Request one side of the artwork. Only the first call counts."""
        if self._side is not None:
            logger.warning(
                "Ignoring cover art side %r, side is already set to %r",
                str(side),
                self._side.value,
            )
            return self
        self._side = CoverartSide(side)
        return self

    def front(self) -> Self:
        """Request the front image."""
        return self.side(CoverartSide.FRONT)

    def back(self) -> Self:
        """Request the back image."""
        return self.side(CoverartSide.BACK)

    def resolution(self, resolution: CoverartResolution | str) -> Self:
        """Request a pre-generated thumbnail (last call wins)."""
        self._resolution = CoverartResolution(resolution)
        return self

    def res_250(self) -> Self:
        """250px thumbnail."""
        return self.resolution(CoverartResolution.RES_250)

    def res_500(self) -> Self:
        """500px thumbnail."""
        return self.resolution(CoverartResolution.RES_500)

    def res_1200(self) -> Self:
        """1200px thumbnail."""
        return self.resolution(CoverartResolution.RES_1200)

    def path(self) -> str:
        """Path below the archive root, with the implicit front side applied.

        Raises:
            QueryConfigurationError: If no id was configured
        """
        if not self._id:
            raise QueryConfigurationError(
                f"Cover art lookup for {self.spec.path!r} requires an id"
            )
        return f"{self.spec.path}/{self._id}{self.target.path_suffix()}"

    def url(self, client: IMusicBrainzClient | None = None) -> str:
        """Final request URL as it would be sent through client."""
        return f"{resolve_client(client).coverart_archive_url}/{self.path()}"

    def execute(self, client: IMusicBrainzClient | None = None) -> CoverartResponse:
        """Send the lookup and block until the result is available.

        Returns:
            CoverartResponse.url when a side or resolution was set, else
            CoverartResponse.json with the full listing
        """
        client = resolve_client(client)
        url = f"{client.coverart_archive_url}/{self.path()}"
        return client.get_coverart(url, self.target.wants_image)

    async def execute_async(self, client: IMusicBrainzClient | None = None) -> CoverartResponse:
        """Async variant of execute()."""
        client = resolve_client(client)
        url = f"{client.coverart_archive_url}/{self.path()}"
        return await client.get_coverart_async(url, self.target.wants_image)

    def copy(self) -> Self:
        """Independent copy of the builder."""
        clone = type(self)(self.entity_type)
        clone._id = self._id
        clone._side = self._side
        clone._resolution = self._resolution
        return clone

    def __repr__(self) -> str:
        return f"FetchCoverartQuery({self.entity_type.__name__}, id={self._id!r}, {self.target})"


__all__ = ["FetchCoverartQuery"]
