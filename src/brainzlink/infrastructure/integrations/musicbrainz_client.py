"""MusicBrainz HTTP client with rate limiting and 503 retries."""

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from brainzlink.config.settings import MusicBrainzSettings
from brainzlink.domain.dtos import CoverartResponse
from brainzlink.domain.entities import Coverart
from brainzlink.domain.exceptions import (
    MaxRetriesExceededError,
    NotFoundError,
    QueryConfigurationError,
    RateLimitProtocolError,
    ServiceError,
    TransportError,
)
from brainzlink.domain.ports import IMusicBrainzClient
from brainzlink.infrastructure.integrations.envelope import decode_envelope
from brainzlink.infrastructure.rate_limiter import RateLimiter, get_musicbrainz_limiter

logger = logging.getLogger(__name__)

T = TypeVar("T")

# MusicBrainz signals "slow down" with 503 (not 429!) plus a retry-after header.
HTTP_RATELIMIT_CODE = 503
RETRY_AFTER_HEADER = "retry-after"


class _UseSharedLimiter:
    """Sentinel: use the process-wide limiter for the configured budget."""


_SHARED_LIMITER = _UseSharedLimiter()


def retry_delay(response: httpx.Response, url: str) -> int:
    """Seconds to sleep after a 503: the advertised delay plus one.

    Raises:
        RateLimitProtocolError: If the header is missing or not a whole number
    """
    raw = response.headers.get(RETRY_AFTER_HEADER)
    if raw is None:
        raise RateLimitProtocolError(
            f"MusicBrainz answered {HTTP_RATELIMIT_CODE} without a retry-after header", url
        )
    try:
        seconds = int(raw.strip())
    except ValueError:
        raise RateLimitProtocolError(
            f"MusicBrainz sent an unusable retry-after header: {raw!r}", url
        ) from None
    if seconds < 0:
        raise RateLimitProtocolError(f"MusicBrainz sent a negative retry-after: {raw!r}", url)
    return seconds + 1


def _check_user_agent(user_agent: str) -> str:
    value = user_agent.strip()
    if not value:
        raise QueryConfigurationError("User-Agent must not be empty")
    if not value.isascii() or "\r" in value or "\n" in value:
        raise QueryConfigurationError(f"Invalid User-Agent header value: {user_agent!r}")
    return value


class MusicBrainzClient(IMusicBrainzClient):
    """HTTP client for the MusicBrainz web service and the Cover Art Archive.

    One instance owns a blocking httpx.Client and an httpx.AsyncClient (both
    created lazily), the identifying User-Agent, the retry cap and the rate
    limiter. Query builders only ask it for base URLs and hand it finished URLs.

    Usage:
        settings = MusicBrainzSettings(app_name="MyTagger", contact="me@example.org")
        with MusicBrainzClient(settings) as client:
            nirvana = Artist.fetch().id(mbid).execute(client)

        async with MusicBrainzClient() as client:
            nirvana = await Artist.fetch().id(mbid).execute_async(client)
    """

    # Hey future me, the User-Agent is baked into the httpx clients' default headers at
    # construction time. That's why set_user_agent() REBUILDS the transports instead of
    # poking a field. Don't call it while requests are in flight on this instance.
    def __init__(
        self,
        settings: MusicBrainzSettings | None = None,
        *,
        rate_limiter: RateLimiter | None | _UseSharedLimiter = _SHARED_LIMITER,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize MusicBrainz client.

        Args:
            settings: MusicBrainz configuration settings (env/defaults when omitted)
            rate_limiter: Limiter to use; None disables limiting, omitted means the
                process-wide limiter for the configured budget
            transport: httpx transport for the blocking client (tests use MockTransport)
            async_transport: httpx transport for the async client
        """
        self.settings = settings or MusicBrainzSettings()
        self.musicbrainz_url = self.settings.base_url
        self.coverart_archive_url = self.settings.coverart_url
        self.max_retries = self.settings.max_retries
        self._user_agent = _check_user_agent(self.settings.effective_user_agent)

        if isinstance(rate_limiter, _UseSharedLimiter):
            rate_limiter = (
                get_musicbrainz_limiter(
                    self.settings.rate_limit_burst, self.settings.rate_limit_per_second
                )
                if self.settings.rate_limit_enabled
                else None
            )
        self.rate_limit: RateLimiter | None = rate_limiter

        self._transport = transport
        self._async_transport = async_transport
        self._client: httpx.Client | None = None
        self._async_client: httpx.AsyncClient | None = None
        self._retired_async_clients: list[httpx.AsyncClient] = []

    @property
    def user_agent(self) -> str:
        """User-Agent sent with every request."""
        return self._user_agent

    def _default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
        }

    def _get_client(self) -> httpx.Client:
        """Get or create the blocking HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                headers=self._default_headers(),
                timeout=self.settings.timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    def _get_async_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                headers=self._default_headers(),
                timeout=self.settings.timeout,
                follow_redirects=True,
                transport=self._async_transport,
            )
        return self._async_client

    def set_user_agent(self, user_agent: str) -> None:
        """Change the User-Agent and rebuild the transports.

        MusicBrainz wants enough information to contact the maintainers, e.g.
        "MyAwesomeTagger/1.2.0 ( http://myawesometagger.example.com )".

        Raises:
            QueryConfigurationError: If the value is empty or not a valid header value
        """
        self._user_agent = _check_user_agent(user_agent)

        if self._client is not None:
            self._client.close()
            self._client = None
        # Can't await here - the old async client is closed by aclose()
        if self._async_client is not None:
            self._retired_async_clients.append(self._async_client)
            self._async_client = None

        logger.debug("MusicBrainz User-Agent set to %r", self._user_agent)

    def drop_ratelimit(self) -> None:
        """Stop rate limiting requests sent through this client."""
        self.rate_limit = None

    # -------------------------------------------------------------------------
    # Blocking path
    # -------------------------------------------------------------------------

    def wait_for_ratelimit(self) -> None:
        """Block until the rate limiter hands out a token (no-op when disabled)."""
        if self.rate_limit is not None:
            self.rate_limit.acquire()

    def send_with_retries(self, url: str) -> httpx.Response:
        """GET a URL, sleeping and retrying while the service answers 503.

        The rate limiter is consulted once, before the first attempt. After that
        the server-advertised delay is what paces the retries.

        Raises:
            TransportError: Connection failure, timeout, malformed request or response
            RateLimitProtocolError: 503 without a usable retry-after header
            MaxRetriesExceededError: Still 503 after max_retries attempts
        """
        self.wait_for_ratelimit()
        client = self._get_client()

        retries = 0
        while retries < self.max_retries:
            logger.debug("GET %s", url)
            # InvalidURL (control characters in an id or search string) is not an HTTPError
            try:
                response = client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise TransportError(f"Request to MusicBrainz failed: {e}", url) from e

            if response.status_code != HTTP_RATELIMIT_CODE:
                return response

            delay = retry_delay(response, url)
            logger.warning(
                "MusicBrainz rate limited (status=%s), retrying in %ss (%d/%d)",
                response.status_code,
                delay,
                retries + 1,
                self.max_retries,
            )
            time.sleep(delay)
            retries += 1

        logger.error("MusicBrainz still rate limited after %d attempts: %s", retries, url)
        raise MaxRetriesExceededError(url, self.max_retries)

    def get(self, url: str, parse: Callable[[Any], T]) -> T:
        """Send a GET and decode the JSON envelope.

        Args:
            url: Complete request URL
            parse: Success parser for the expected payload

        Returns:
            The parsed success value

        Raises:
            TransportError, MaxRetriesExceededError: see send_with_retries()
            NotFoundError, ServiceError, DecodingError: see envelope decoding
        """
        response = self.send_with_retries(url)
        return decode_envelope(response.content, parse, url)

    # -------------------------------------------------------------------------
    # Async path - same flow, suspending instead of blocking
    # -------------------------------------------------------------------------

    async def wait_for_ratelimit_async(self) -> None:
        """Suspend until the rate limiter hands out a token (no-op when disabled)."""
        if self.rate_limit is not None:
            await self.rate_limit.acquire_async()

    async def send_with_retries_async(self, url: str) -> httpx.Response:
        """Async variant of send_with_retries()."""
        await self.wait_for_ratelimit_async()
        client = self._get_async_client()

        retries = 0
        while retries < self.max_retries:
            logger.debug("GET %s", url)
            # InvalidURL (control characters in an id or search string) is not an HTTPError
            try:
                response = await client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise TransportError(f"Request to MusicBrainz failed: {e}", url) from e

            if response.status_code != HTTP_RATELIMIT_CODE:
                return response

            delay = retry_delay(response, url)
            logger.warning(
                "MusicBrainz rate limited (status=%s), retrying in %ss (%d/%d)",
                response.status_code,
                delay,
                retries + 1,
                self.max_retries,
            )
            await asyncio.sleep(delay)
            retries += 1

        logger.error("MusicBrainz still rate limited after %d attempts: %s", retries, url)
        raise MaxRetriesExceededError(url, self.max_retries)

    async def get_async(self, url: str, parse: Callable[[Any], T]) -> T:
        """Async variant of get()."""
        response = await self.send_with_retries_async(url)
        return decode_envelope(response.content, parse, url)

    # -------------------------------------------------------------------------
    # Cover Art Archive responses
    # -------------------------------------------------------------------------

    @staticmethod
    def check_coverart_response(response: httpx.Response, url: str) -> httpx.Response:
        """Map Cover Art Archive failures onto the error taxonomy.

        The archive doesn't use the {error, help} envelope: a missing release or
        image is a plain 404 and other failures are bare HTTP statuses.

        Raises:
            NotFoundError: 404
            ServiceError: Any other non-2xx status
        """
        if response.status_code == 404:
            raise NotFoundError(url)
        if response.is_error:
            raise ServiceError(
                response.reason_phrase or str(response.status_code),
                response.text[:500],
                request=url,
            )
        return response

    @staticmethod
    def _coverart_result(
        response: httpx.Response, url: str, wants_image: bool
    ) -> CoverartResponse:
        MusicBrainzClient.check_coverart_response(response, url)
        if wants_image:
            # Redirects are followed, so the final request URL is the image itself
            return CoverartResponse(url=str(response.url))
        listing = decode_envelope(response.content, Coverart.model_validate, url)
        return CoverartResponse(json=listing)

    def get_coverart(self, url: str, wants_image: bool) -> CoverartResponse:
        """Fetch a Cover Art Archive listing or resolve an image redirect.

        Args:
            url: Complete Cover Art Archive URL
            wants_image: True when the URL targets a side/thumbnail

        Returns:
            CoverartResponse with either url (image) or json (listing) set

        Raises:
            NotFoundError: The archive has no artwork for the entity
            ServiceError: Any other non-2xx status
            TransportError, MaxRetriesExceededError: see send_with_retries()
        """
        response = self.send_with_retries(url)
        return self._coverart_result(response, url, wants_image)

    async def get_coverart_async(self, url: str, wants_image: bool) -> CoverartResponse:
        """Async variant of get_coverart()."""
        response = await self.send_with_retries_async(url)
        return self._coverart_result(response, url, wants_image)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the blocking HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        """Close every HTTP client this instance opened."""
        self.close()
        for retired in self._retired_async_clients:
            await retired.aclose()
        self._retired_async_clients.clear()
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None

    def __enter__(self) -> "MusicBrainzClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        self.close()

    # Hey, use "async with MusicBrainzClient(...) as client:" for proper cleanup!
    async def __aenter__(self) -> "MusicBrainzClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.aclose()


# Composition-root default. Builders fall back to it only when no client is passed;
# tests and applications can swap it with set_default_client().
_default_client: MusicBrainzClient | None = None


def get_default_client() -> MusicBrainzClient:
    """Get the default client (created from settings on first use)."""
    global _default_client
    if _default_client is None:
        from brainzlink.config.settings import get_settings

        _default_client = MusicBrainzClient(get_settings().musicbrainz)
    return _default_client


def set_default_client(client: MusicBrainzClient | None) -> None:
    """Replace the default client (None resets to lazy creation)."""
    global _default_client
    _default_client = client


__all__ = [
    "HTTP_RATELIMIT_CODE",
    "MusicBrainzClient",
    "get_default_client",
    "retry_delay",
    "set_default_client",
]
