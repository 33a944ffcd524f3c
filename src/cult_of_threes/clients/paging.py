"""
Cursor pagination over Slack Web API list methods.

Works with ``AsyncWebClient`` methods as well as any coroutine returning a
mapping with ``ok``, the item list under ``key`` and an optional
``response_metadata.next_cursor``.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable, List

from slack_sdk.errors import SlackApiError

PAGE_LIMIT = 200


def ensure_ok(response: Any, method_name: str) -> Any:
    """Raise :class:`SlackApiError` when ``response`` reports ``ok: false``."""
    if not response.get("ok", False):
        raise SlackApiError(f"{method_name} failed: {response.get('error', 'unknown_error')}", response)
    return response


async def iterate(
    method: Callable[..., Awaitable[Any]], key: str, **kwargs: Any
) -> AsyncIterator[Any]:
    """Yield every item under ``key`` across all pages of ``method``."""
    cursor: str | None = None
    kwargs.setdefault("limit", PAGE_LIMIT)
    while True:
        params = dict(kwargs)
        if cursor:
            params["cursor"] = cursor
        response = ensure_ok(await method(**params), getattr(method, "__name__", key))
        for item in response.get(key) or []:
            yield item
        cursor = (response.get("response_metadata") or {}).get("next_cursor")
        if not cursor:
            return


async def collect(method: Callable[..., Awaitable[Any]], key: str, **kwargs: Any) -> List[Any]:
    """Return all items under ``key`` from every page of ``method``."""
    return [item async for item in iterate(method, key, **kwargs)]


__all__ = ["PAGE_LIMIT", "ensure_ok", "iterate", "collect"]
