"""
Handle clicks on the Accept Invitation button.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from slack_sdk.errors import SlackApiError

from cult_of_threes.clients import paging
from cult_of_threes.errors import InviteError
from cult_of_threes.messaging import blocks

from . import register_action

logger = logging.getLogger(__name__)


@register_action(blocks.JOIN_ACTION_ID)
async def handle(service: Any, body: Dict[str, Any]) -> None:
    """Invite the clicking user, then announce, clean up and refresh."""

    user_id = body["user"]["id"]

    try:
        paging.ensure_ok(
            await service.client.conversations_invite(channel=service.channel_id, users=user_id),
            "conversations.invite",
        )
    except SlackApiError as exc:
        raise InviteError(f"Failed to invite {user_id} to the channel.") from exc

    logger.info("Invited %s to %s", user_id, service.channel_id)
    await service.after_membership_change(user_id, blocks.welcome_text(user_id))
