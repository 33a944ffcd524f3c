"""
The moderation service: one explicitly constructed object holding the Slack
client, the settings and the membership cache. Hooks receive it as their first
argument instead of reaching for module-level state.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Set

from slack_sdk.errors import SlackApiError

from cult_of_threes import maintenance
from cult_of_threes.clients import paging
from cult_of_threes.errors import MembershipFetchError
from cult_of_threes.membership import DEFAULT_TTL, MEMBERS_KEY, MembershipCache, refresh_members
from cult_of_threes.messaging import cleanup_bot_messages

logger = logging.getLogger(__name__)

DEFAULT_CHECK_PERIOD = 60.0


class ModerationService:
    def __init__(
        self,
        client: Any,
        settings: Any,
        *,
        ttl: float = DEFAULT_TTL,
        check_period: float = DEFAULT_CHECK_PERIOD,
        cache: MembershipCache | None = None,
    ) -> None:
        self.client = client
        self.settings = settings
        self.check_period = check_period
        self.members = cache or MembershipCache(ttl=ttl)
        self.members.on_expired = self._on_members_expired
        self._sweeper: asyncio.Task | None = None
        self._pending: Set[asyncio.Task] = set()

    @property
    def channel_id(self) -> str:
        return self.settings.SLACK_SECRET_CHANNEL

    @property
    def bot_user_id(self) -> str:
        return self.settings.SLACK_BOT_USER_ID

    # ------------------------------------------------------------------ #
    # Membership
    # ------------------------------------------------------------------ #
    async def refresh_members(self) -> frozenset[str]:
        return await refresh_members(self.client, self.channel_id, self.members)

    def schedule_refresh(self) -> asyncio.Task:
        """Start a refresh in the background and return its task."""
        task = asyncio.get_running_loop().create_task(self._refresh_logged())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _refresh_logged(self) -> None:
        try:
            await self.refresh_members()
        except MembershipFetchError as exc:
            logger.error("Membership refresh failed: %s", exc)
        except Exception:
            logger.exception("Unexpected error during membership refresh")

    def _on_members_expired(self, key: str) -> None:
        if key == MEMBERS_KEY:
            self.schedule_refresh()

    # ------------------------------------------------------------------ #
    # Shared follow-up after an invite or kick
    # ------------------------------------------------------------------ #
    async def cleanup_dms(self, user_id: str) -> int:
        return await cleanup_bot_messages(self.client, user_id, self.bot_user_id)

    async def announce(self, text: str) -> None:
        paging.ensure_ok(
            await self.client.chat_postMessage(channel=self.channel_id, text=text),
            "chat.postMessage",
        )

    async def after_membership_change(self, user_id: str, announcement: str) -> None:
        """
        Announce in the channel, clean up DMs, then refresh membership.

        Each step is attempted even if an earlier one failed; failures are
        logged and nothing is rolled back.
        """
        try:
            await self.announce(announcement)
        except SlackApiError as exc:
            logger.error("Failed to post announcement about %s: %s", user_id, exc)
        except Exception:
            logger.exception("Unexpected error posting announcement about %s", user_id)

        try:
            await self.cleanup_dms(user_id)
        except Exception:
            logger.exception("Unexpected error cleaning up DMs with %s", user_id)

        try:
            await self.refresh_members()
        except MembershipFetchError as exc:
            logger.error("Membership refresh after change for %s failed: %s", user_id, exc)
        except Exception:
            logger.exception("Unexpected error refreshing membership after change for %s", user_id)

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    async def start(self) -> None:
        """Populate the cache and start the expiry sweeper."""
        try:
            await self.refresh_members()
        except MembershipFetchError as exc:
            logger.error("Initial membership refresh failed: %s", exc)

        if not self._sweeper or self._sweeper.done():
            self._sweeper = await maintenance.startup(
                self.members.sweep, self.check_period, name="members-sweeper"
            )

    async def stop(self) -> None:
        await maintenance.shutdown(self._sweeper, *self._pending)
        self._sweeper = None
        self._pending.clear()


__all__ = ["ModerationService", "DEFAULT_CHECK_PERIOD"]
