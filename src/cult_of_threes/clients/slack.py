"""Slack bot bootstrap utilities."""

from __future__ import annotations

import logging
from typing import Any, Tuple

from aiohttp import web
from slack_bolt.async_app import AsyncApp

from cult_of_threes import event_hooks
from cult_of_threes.config import cache as cache_cfg, core
from cult_of_threes.service import ModerationService

logger = logging.getLogger(__name__)


def _action_listener(service: ModerationService, action_id: str):
    async def _listener(ack, body) -> None:
        # Slack treats the click as failed unless it is acknowledged quickly.
        await ack()
        await event_hooks.dispatch_action(service, action_id, body)

    return _listener


def _event_listener(service: ModerationService):
    async def _listener(event) -> None:
        await event_hooks.dispatch_event(service, event)

    return _listener


def register_listeners(app: AsyncApp, service: ModerationService) -> None:
    """Attach a Bolt listener for every registered hook."""

    for kind, key in event_hooks.all_hooks():
        if kind == event_hooks.ACTION:
            app.action(key)(_action_listener(service, key))
        else:
            app.event(key)(_event_listener(service))
        logger.debug("Listening for %s '%s'", kind, key)


def build_app(settings: Any = None, cache_settings: Any = None) -> Tuple[AsyncApp, ModerationService]:
    """Create the Bolt app and the service bound to its Web API client."""

    settings = settings or core
    cache_settings = cache_settings or cache_cfg

    app = AsyncApp(token=settings.SLACK_BOT_TOKEN, signing_secret=settings.SLACK_SIGNING_SECRET)
    service = ModerationService(
        app.client,
        settings,
        ttl=cache_settings.MEMBERS_TTL,
        check_period=cache_settings.CHECK_PERIOD,
    )
    register_listeners(app, service)
    return app, service


def build_web_app(settings: Any = None, cache_settings: Any = None) -> web.Application:
    """Return the aiohttp application serving Slack callbacks."""

    settings = settings or core
    app, service = build_app(settings, cache_settings)
    web_app = app.web_app(path=settings.EVENTS_PATH, port=settings.PORT)

    async def _on_startup(_: web.Application) -> None:
        await service.start()

    async def _on_cleanup(_: web.Application) -> None:
        await service.stop()

    web_app.on_startup.append(_on_startup)
    web_app.on_cleanup.append(_on_cleanup)
    return web_app


def run() -> None:
    """Start the HTTP listener using configuration from the environment."""

    web_app = build_web_app()
    logger.info("⚡️ Bolt app is running on port %d", core.PORT)
    web.run_app(web_app, port=core.PORT, print=None)
