"""Exception taxonomy for the moderation bot."""

from __future__ import annotations


class CultError(RuntimeError):
    """Base class for failures raised by the bot itself."""


class ConfigurationError(CultError):
    """A required setting is missing; the process cannot start."""


class MembershipFetchError(CultError):
    """Listing the managed channel's members failed."""


class MembershipUnavailableError(CultError):
    """A handler needed the member set but the cache holds nothing."""


class InviteError(CultError):
    """Slack rejected the channel invite."""


class KickError(CultError):
    """Slack rejected the channel kick."""


class DmCleanupError(CultError):
    """Cleaning up earlier bot DMs failed. Never propagated past the helper."""


__all__ = [
    "CultError",
    "ConfigurationError",
    "MembershipFetchError",
    "MembershipUnavailableError",
    "InviteError",
    "KickError",
    "DmCleanupError",
]
