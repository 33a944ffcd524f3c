"""
Apply the three-letter rule whenever a user's profile changes.

Short display names get an invitation DM every time; there is no record of
who was already invited, so repeated edits produce repeated DMs. Long display
names cost current members their seat in the channel.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from slack_sdk.errors import SlackApiError

from cult_of_threes.clients import paging
from cult_of_threes.errors import KickError, MembershipUnavailableError
from cult_of_threes.messaging import blocks
from cult_of_threes.rules import is_short_name

from . import register_event

logger = logging.getLogger(__name__)

EVENT_TYPE = "user_profile_changed"


async def send_invitation(service: Any, user_id: str) -> None:
    """DM ``user_id`` the invitation with the Accept Invitation button."""
    try:
        paging.ensure_ok(
            await service.client.chat_postMessage(
                channel=user_id,
                text=blocks.INVITE_FALLBACK_TEXT,
                blocks=blocks.invitation_blocks(user_id),
            ),
            "chat.postMessage",
        )
    except SlackApiError as exc:
        logger.error("Failed to send invitation to %s: %s", user_id, exc)
        return
    logger.info("Sent invitation to %s", user_id)


async def kick_member(service: Any, user_id: str) -> None:
    try:
        paging.ensure_ok(
            await service.client.conversations_kick(channel=service.channel_id, user=user_id),
            "conversations.kick",
        )
    except SlackApiError as exc:
        raise KickError(f"Failed to kick {user_id} from the channel.") from exc

    logger.info("Kicked %s from %s", user_id, service.channel_id)
    await service.after_membership_change(user_id, blocks.kick_notice_text(user_id))


@register_event(EVENT_TYPE)
async def handle(service: Any, event: Dict[str, Any]) -> None:
    user = event.get("user") or {}
    user_id = user.get("id")
    if not user_id:
        logger.warning("Ignoring %s event without a user id", event.get("type"))
        return

    display_name = (user.get("profile") or {}).get("display_name") or ""

    if is_short_name(display_name):
        await send_invitation(service, user_id)
        return

    members = service.members.get()
    if members is None:
        raise MembershipUnavailableError("Members cache is empty.")

    if user_id not in members:
        logger.debug("%s is not a member; nothing to do", user_id)
        return

    await kick_member(service, user_id)
