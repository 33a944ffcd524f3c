"""Message texts and Block Kit payloads posted by the bot."""

from __future__ import annotations

from typing import Any, Dict, List

JOIN_ACTION_ID = "join-cult-of-threes"

INVITE_FALLBACK_TEXT = "Would you like to join the cult?"


def mention(user_id: str) -> str:
    return f"<@{user_id}>"


def invitation_blocks(user_id: str) -> List[Dict[str, Any]]:
    """Section greeting the user plus the Accept Invitation button."""
    return [
        {
            "type": "section",
            "text": {
                "type": "mrkdwn",
                "text": f"Hey {mention(user_id)}, nice username... would you like to join us?",
            },
        },
        {
            "type": "actions",
            "elements": [
                {
                    "type": "button",
                    "text": {"type": "plain_text", "text": "Accept Invitation", "emoji": True},
                    "action_id": JOIN_ACTION_ID,
                }
            ],
        },
    ]


def welcome_text(user_id: str) -> str:
    return f"{mention(user_id)} has accepted our invitation and joined the Cult of 3 Letters. 🙇"


def kick_notice_text(user_id: str) -> str:
    return (
        f"{mention(user_id)} had a username longer than three letters. "
        "In violation of our sacred rules, they have been kicked."
    )


__all__ = [
    "JOIN_ACTION_ID",
    "INVITE_FALLBACK_TEXT",
    "mention",
    "invitation_blocks",
    "welcome_text",
    "kick_notice_text",
]
