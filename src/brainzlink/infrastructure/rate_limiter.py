"""
Token bucket rate limiter for the MusicBrainz web service.

Hey future me - MusicBrainz allows roughly 1 request per second per client and
bans clients that hammer it. We keep a small burst allowance so a handful of
lookups at startup don't crawl, then settle to the steady rate.

ALGORITHM: Token Bucket
- Bucket holds max_tokens (default 5)
- Tokens refill continuously at refill_rate/sec (default 1.0)
- Every request consumes 1 token
- Empty bucket: the caller sleeps until its token is due

RESERVATION, NOT POLLING:
The token is taken immediately, even if that pushes the bucket below zero. The
negative balance is the queue of waiting callers: each one learns exactly how
long to sleep and nobody busy-waits. The lock is only held for the arithmetic,
never across a sleep, so the same limiter serves threads (acquire) and
coroutines (acquire_async) at once.

No fairness promise: concurrent callers may be served in any order, only the
aggregate rate is bounded.

USAGE:
    limiter = RateLimiter.for_musicbrainz()

    limiter.acquire()              # blocking code
    await limiter.acquire_async()  # asyncio code
"""

import asyncio
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class RateLimiterConfig:
    """Configuration for rate limiter.

    The defaults follow the MusicBrainz policy: 1 request per second with a
    burst of 5.
    """

    max_tokens: int = 5  # Bucket size
    refill_rate: float = 1.0  # Tokens per second


@dataclass
class RateLimiter:
    """Token bucket rate limiter.

    Attributes:
        config: Rate limiter configuration
        clock: Monotonic clock, injectable for tests
        _tokens: Current balance (negative while callers are queued)
        _last_refill: Last time tokens were refilled
        _lock: Guards the bucket arithmetic
    """

    config: RateLimiterConfig = field(default_factory=RateLimiterConfig)
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    # Internal state (not in __init__ signature)
    _tokens: float = field(default=0.0, init=False)
    _last_refill: float = field(default=0.0, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _name: str = field(default="default", init=False)

    def __post_init__(self) -> None:
        """Start with a full bucket."""
        if self.config.max_tokens < 1:
            raise ValueError("max_tokens must be at least 1")
        if self.config.refill_rate <= 0:
            raise ValueError("refill_rate must be positive")
        self._tokens = float(self.config.max_tokens)
        self._last_refill = self.clock()

    @classmethod
    def for_musicbrainz(
        cls, max_tokens: int = 5, refill_rate: float = 1.0
    ) -> "RateLimiter":
        """Create rate limiter for the MusicBrainz API.

        Hey future me - 1 req/sec sustained with 5 "free" requests up front. Don't
        raise the rate above what the service documents, they WILL block you.
        """
        limiter = cls(config=RateLimiterConfig(max_tokens=max_tokens, refill_rate=refill_rate))
        limiter._name = "musicbrainz"
        return limiter

    def _refill_tokens(self) -> None:
        """Add the tokens earned since the last refill, capped at max_tokens."""
        now = self.clock()
        elapsed = now - self._last_refill

        new_tokens = elapsed * self.config.refill_rate
        self._tokens = min(float(self.config.max_tokens), self._tokens + new_tokens)
        self._last_refill = now

    def _reserve(self) -> float:
        """Take one token and return how long the caller must wait for it."""
        with self._lock:
            self._refill_tokens()
            self._tokens -= 1.0
            if self._tokens >= 0.0:
                return 0.0
            return -self._tokens / self.config.refill_rate

    def acquire(self) -> float:
        """Acquire one token, blocking the thread if necessary.

        Returns:
            Seconds spent waiting
        """
        wait_time = self._reserve()
        if wait_time > 0:
            logger.debug(
                "RateLimiter[%s]: No tokens available, waiting %.2fs", self._name, wait_time
            )
            time.sleep(wait_time)
        return wait_time

    async def acquire_async(self) -> float:
        """Acquire one token, suspending the coroutine if necessary.

        Returns:
            Seconds spent waiting
        """
        wait_time = self._reserve()
        if wait_time > 0:
            logger.debug(
                "RateLimiter[%s]: No tokens available, waiting %.2fs", self._name, wait_time
            )
            await asyncio.sleep(wait_time)
        return wait_time

    @property
    def available_tokens(self) -> float:
        """Current balance (for debugging). Negative means callers are queued."""
        with self._lock:
            self._refill_tokens()
            return self._tokens

    @property
    def name(self) -> str:
        """Get limiter name for logging."""
        return self._name


# Process-wide limiters shared by every client that doesn't bring its own, one per
# budget. MusicBrainz counts requests per IP, so two clients in one process share one bucket.
_musicbrainz_limiters: dict[tuple[int, float], RateLimiter] = {}
_musicbrainz_limiters_lock = threading.Lock()


def get_musicbrainz_limiter(max_tokens: int = 5, refill_rate: float = 1.0) -> RateLimiter:
    """Get the shared MusicBrainz rate limiter for a budget (created on first use)."""
    key = (max_tokens, float(refill_rate))
    with _musicbrainz_limiters_lock:
        limiter = _musicbrainz_limiters.get(key)
        if limiter is None:
            limiter = RateLimiter.for_musicbrainz(max_tokens, refill_rate)
            _musicbrainz_limiters[key] = limiter
        return limiter


__all__ = [
    "RateLimiter",
    "RateLimiterConfig",
    "get_musicbrainz_limiter",
]
