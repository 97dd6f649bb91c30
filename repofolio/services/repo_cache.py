"""Read-through cache for the repository list with a static fallback."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from repofolio.exceptions import UpstreamFetchError

T = TypeVar("T")
logger = logging.getLogger(__name__)

CacheSource = Literal["live", "fallback"]


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """The cached dataset and when it was last (re)stamped."""

    items: tuple[T, ...]
    fetched_at_ms: int
    source: CacheSource = "live"


class ReadThroughCache(Generic[T]):
    """
    Single-entry cache that fetches on a miss and never raises on upstream failure.

    On an expired or empty entry it calls ``fetch``. A failed fetch keeps the
    previous entry (re-stamped with the current time so the TTL window re-arms),
    or installs ``fallback`` when nothing was ever cached.

    Without ``single_flight`` there is no coordination between callers: when
    the TTL lapses, every overlapping ``get()`` issues its own fetch and the
    last one to complete wins. With ``single_flight`` they share one refresh.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[Sequence[T]]],
        ttl_ms: int = 300_000,
        fallback: Sequence[T] = (),
        clock: Callable[[], int] = now_ms,
        single_flight: bool = False,
    ):
        self._fetch = fetch
        self._ttl_ms = ttl_ms
        self._fallback = tuple(fallback)
        self._clock = clock
        self._single_flight = single_flight
        self._entry: CacheEntry[T] | None = None
        self._inflight: asyncio.Future | None = None

    @property
    def entry(self) -> CacheEntry[T] | None:
        return self._entry

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    async def get(self) -> tuple[T, ...]:
        """Return the freshest available items."""
        now = self._clock()
        entry = self._entry
        if entry is not None and now - entry.fetched_at_ms < self._ttl_ms:
            logger.debug(f"Cache hit ({entry.source}, {len(entry.items)} items)")
            return entry.items

        if not self._single_flight:
            return await self._refresh(now)

        if self._inflight is None:
            task = asyncio.ensure_future(self._refresh(now))
            self._inflight = task
            task.add_done_callback(self._clear_inflight)
        return await asyncio.shield(self._inflight)

    def _clear_inflight(self, task: asyncio.Future) -> None:
        if self._inflight is task:
            self._inflight = None

    async def _refresh(self, now: int) -> tuple[T, ...]:
        try:
            items = tuple(await self._fetch())
        except UpstreamFetchError as e:
            logger.error(f"Failed to refresh repositories: {e}")
            previous = self._entry
            if previous is not None:
                self._entry = CacheEntry(
                    items=previous.items,
                    fetched_at_ms=now,
                    source=previous.source,
                )
            else:
                logger.warning(
                    f"No cached repositories, serving {len(self._fallback)} fallback items"
                )
                self._entry = CacheEntry(
                    items=self._fallback,
                    fetched_at_ms=now,
                    source="fallback",
                )
            return self._entry.items

        self._entry = CacheEntry(items=items, fetched_at_ms=now, source="live")
        logger.info(f"Refreshed repository cache with {len(items)} items")
        return items

    def stats(self) -> dict:
        """Return cache statistics."""
        entry = self._entry
        return {
            "populated": entry is not None,
            "source": entry.source if entry else None,
            "size": len(entry.items) if entry else 0,
            "fetched_at_ms": entry.fetched_at_ms if entry else None,
            "ttl_ms": self._ttl_ms,
        }
