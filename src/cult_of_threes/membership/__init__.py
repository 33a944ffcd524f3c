"""In-memory view of who currently sits in the managed channel."""

from .cache import DEFAULT_TTL, MEMBERS_KEY, MembershipCache
from .refresher import refresh_members

__all__ = ["MembershipCache", "MEMBERS_KEY", "DEFAULT_TTL", "refresh_members"]
