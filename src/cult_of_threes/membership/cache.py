"""
Single-entry, TTL-bound cache for the managed channel's member set.

The entry is replaced wholesale on every refresh and never patched. An absent
entry means "unknown", not "empty": callers must not read ``None`` as "the user
is not a member".

Expiry is detected lazily on :meth:`MembershipCache.get` and eagerly by
:meth:`MembershipCache.sweep`. Either path evicts the entry and calls the
``on_expired`` callback once for that entry. The callback runs inline, so it
must only schedule work (for example ``asyncio.create_task``) and never fetch.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

MEMBERS_KEY = "members"
DEFAULT_TTL = 3600.0


class MembershipCache:
    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        on_expired: Callable[[str], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self.on_expired = on_expired
        self._clock = clock
        self._members: frozenset[str] | None = None
        self._expires_at: float | None = None

    @property
    def expires_at(self) -> float | None:
        return self._expires_at

    def set(self, members: Iterable[str]) -> None:
        """Replace the member set and restart its TTL."""
        self._members = frozenset(members)
        self._expires_at = self._clock() + self.ttl
        logger.debug("Cached %d member(s) for %ss", len(self._members), self.ttl)

    def get(self) -> frozenset[str] | None:
        """Return the cached member set, or ``None`` when unknown."""
        self.sweep()
        return self._members

    def sweep(self) -> bool:
        """Evict the entry if its TTL has passed. Returns ``True`` on eviction."""
        if self._expires_at is None or self._clock() < self._expires_at:
            return False

        self._members = None
        self._expires_at = None
        logger.info("Membership cache entry '%s' expired", MEMBERS_KEY)
        if self.on_expired is not None:
            self.on_expired(MEMBERS_KEY)
        return True

    def __contains__(self, user_id: object) -> bool:
        members = self.get()
        return members is not None and user_id in members


__all__ = ["MembershipCache", "MEMBERS_KEY", "DEFAULT_TTL"]
