"""Domain ports (interfaces) for the query layer."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from brainzlink.domain.dtos import CoverartResponse

T = TypeVar("T")


# Hey future me, IMusicBrainzClient is a PORT. Query builders only talk to this
# interface: they build the URL and the payload parser, the client owns sending,
# waiting and retrying. Blocking and async flavours share the exact same builder
# logic, only these four methods differ. Tests can plug a fake in here without
# touching httpx at all.
class IMusicBrainzClient(ABC):
    """Port for executing MusicBrainz and Cover Art Archive requests."""

    musicbrainz_url: str
    coverart_archive_url: str

    @abstractmethod
    def get(self, url: str, parse: Callable[[Any], T]) -> T:
        """
        Send a GET request and decode the response envelope.

        Args:
            url: Complete request URL
            parse: Parser for the success payload

        Returns:
            The parsed success value
        """
        pass

    @abstractmethod
    async def get_async(self, url: str, parse: Callable[[Any], T]) -> T:
        """Async variant of get()."""
        pass

    @abstractmethod
    def get_coverart(self, url: str, wants_image: bool) -> CoverartResponse:
        """
        Send a Cover Art Archive request.

        Args:
            url: Complete request URL
            wants_image: True when the URL targets an image (the archive
                redirects), False for the JSON listing

        Returns:
            Resolved image URL or the decoded listing
        """
        pass

    @abstractmethod
    async def get_coverart_async(self, url: str, wants_image: bool) -> CoverartResponse:
        """Async variant of get_coverart()."""
        pass


__all__ = ["IMusicBrainzClient"]
