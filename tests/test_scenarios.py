"""End-to-end flows through the router with an in-memory Slack workspace."""

import asyncio

from cult_of_threes import event_hooks
from cult_of_threes.messaging import blocks


def _profile_event(user_id, display_name):
    return {
        "type": "user_profile_changed",
        "user": {"id": user_id, "profile": {"display_name": display_name}},
    }


def test_bo_accepts_the_invitation(make_client, make_service):
    client = make_client(members=["UBOT", "UOLD"])
    service = make_service(client, members=["UBOT", "UOLD"])

    async def scenario():
        await event_hooks.dispatch_event(service, _profile_event("UBO", "Bo"))

        dm = client.calls_to("chat_postMessage")[0]
        assert dm["channel"] == "UBO"
        assert dm["blocks"][1]["elements"][0]["action_id"] == blocks.JOIN_ACTION_ID
        assert len(client.history["DUBO"]) == 1

        body = {"user": {"id": "UBO"}, "actions": [{"action_id": blocks.JOIN_ACTION_ID}]}
        await event_hooks.dispatch_action(service, blocks.JOIN_ACTION_ID, body)

    asyncio.run(scenario())

    assert client.calls_to("conversations_invite") == [{"channel": "CSECRET", "users": "UBO"}]
    welcome = client.calls_to("chat_postMessage")[1]
    assert welcome["channel"] == "CSECRET"
    assert welcome["text"] == "<@UBO> has accepted our invitation and joined the Cult of 3 Letters. 🙇"
    assert client.history["DUBO"] == []
    assert "UBO" in service.members.get()


def test_alexandra_is_kicked(make_client, make_service):
    client = make_client(
        members=["UBOT", "UALEX"],
        dm_channels={"UALEX": "DUALEX"},
        history={
            "DUALEX": [
                {"user": "UBOT", "ts": "1.1", "text": blocks.INVITE_FALLBACK_TEXT},
                {"user": "UALEX", "ts": "1.2", "text": "hi"},
            ]
        },
    )
    service = make_service(client, members=["UBOT", "UALEX"])

    asyncio.run(event_hooks.dispatch_event(service, _profile_event("UALEX", "Alexandra")))

    assert client.calls_to("conversations_kick") == [{"channel": "CSECRET", "user": "UALEX"}]
    notice = client.calls_to("chat_postMessage")[0]
    assert notice["text"] == blocks.kick_notice_text("UALEX")
    assert client.history["DUALEX"] == [{"user": "UALEX", "ts": "1.2", "text": "hi"}]
    assert "UALEX" not in service.members.get()
