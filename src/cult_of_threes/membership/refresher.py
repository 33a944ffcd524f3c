from __future__ import annotations

import asyncio
import logging

import aiohttp
from slack_sdk.errors import SlackApiError

from cult_of_threes.clients import paging
from cult_of_threes.errors import MembershipFetchError

from .cache import MembershipCache

logger = logging.getLogger(__name__)


async def refresh_members(client, channel_id: str, cache: MembershipCache) -> frozenset[str]:
    """
    Fetch the managed channel's members and replace the cached set.

    The cache is written only after every page has been fetched, so a failure
    part-way through leaves the previous snapshot in place.
    """
    logger.info("Refreshing members cache.")

    try:
        members = await paging.collect(client.conversations_members, "members", channel=channel_id)
    except (SlackApiError, aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise MembershipFetchError(f"Failed to fetch members from channel {channel_id}.") from exc

    cache.set(members)
    snapshot = frozenset(members)
    logger.info("Members cache holds %d member(s)", len(snapshot))
    return snapshot
