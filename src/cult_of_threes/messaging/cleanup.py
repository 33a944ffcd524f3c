"""
Delete the bot's earlier direct messages to a user.

Cleanup is best-effort. Lookup and history failures, Slack API errors and
transport errors alike, are logged as :class:`DmCleanupError` and swallowed,
so the invite/kick flow that calls this never fails because of it. Deletions
are independent: one failed ``chat.delete`` is logged and the remaining
messages are still deleted.
"""

from __future__ import annotations

import logging

from cult_of_threes.clients import paging
from cult_of_threes.errors import DmCleanupError

logger = logging.getLogger(__name__)


async def find_dm_channel(client, user_id: str) -> str | None:
    """Return the IM channel id shared with ``user_id``, or ``None``."""
    try:
        async for channel in paging.iterate(client.conversations_list, "channels", types="im"):
            if channel.get("user") == user_id:
                return channel.get("id")
    except Exception as exc:
        raise DmCleanupError(f"Could not list DM channels while looking for {user_id}") from exc
    return None


async def list_bot_messages(client, channel_id: str, bot_user_id: str) -> list[str]:
    """Return timestamps of messages in ``channel_id`` authored by the bot."""
    try:
        return [
            message["ts"]
            async for message in paging.iterate(client.conversations_history, "messages", channel=channel_id)
            if message.get("user") == bot_user_id and message.get("ts")
        ]
    except Exception as exc:
        raise DmCleanupError(f"Could not read history of DM channel {channel_id}") from exc


async def cleanup_bot_messages(client, user_id: str, bot_user_id: str) -> int:
    """Delete every bot-authored message in the DM with ``user_id``.

    Returns the number of messages deleted.
    """
    try:
        channel_id = await find_dm_channel(client, user_id)
        if channel_id is None:
            logger.info("No DM channel with %s; nothing to clean up", user_id)
            return 0
        timestamps = await list_bot_messages(client, channel_id, bot_user_id)
    except DmCleanupError as exc:
        logger.error("DM cleanup for %s aborted: %s", user_id, exc)
        return 0

    deleted = 0
    for ts in timestamps:
        try:
            paging.ensure_ok(await client.chat_delete(channel=channel_id, ts=ts), "chat.delete")
        except Exception as exc:
            logger.error("Failed to delete message %s in %s: %s", ts, channel_id, exc)
            continue
        deleted += 1

    if deleted < len(timestamps):
        logger.warning(
            "DM cleanup for %s deleted %d of %d message(s)", user_id, deleted, len(timestamps)
        )
    else:
        logger.info("Deleted %d bot message(s) from DM with %s", deleted, user_id)
    return deleted


__all__ = ["find_dm_channel", "list_bot_messages", "cleanup_bot_messages"]
