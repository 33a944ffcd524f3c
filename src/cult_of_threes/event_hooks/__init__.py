"""
Registry & router for Slack event and action hooks.

Any module inside ``event_hooks/`` that defines::

    from . import register_event

    @register_event("some_event_type")
    async def handle(service, event): ...

is picked up automatically at import-time. ``register_action`` does the same
for interactive ``action_id`` values.

The dispatch functions are the error boundary for every hook: failures are
logged and never surfaced back to Slack.

NOTE: Each ``(kind, key)`` pair may only be registered once.
"""

from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from pkgutil import iter_modules
from typing import Any, Awaitable, Callable, Dict, Tuple

from cult_of_threes.errors import CultError

logger = logging.getLogger(__name__)

EVENT = "event"
ACTION = "action"

Hook = Callable[[Any, Dict[str, Any]], Awaitable[None]]

_REGISTRY: Dict[Tuple[str, str], Hook] = {}


def _register(kind: str, key: str):
    def decorator(fn: Hook) -> Hook:
        if (kind, key) in _REGISTRY:
            raise ValueError(f"A hook for {kind} '{key}' is already registered")
        _REGISTRY[(kind, key)] = fn
        return fn

    return decorator


def register_event(event_type: str):
    """Decorator registering ``fn`` for the Events API ``event_type``."""
    return _register(EVENT, event_type)


def register_action(action_id: str):
    """Decorator registering ``fn`` for the interactive ``action_id``."""
    return _register(ACTION, action_id)


def get(kind: str, key: str) -> Hook | None:
    return _REGISTRY.get((kind, key))


def all_hooks() -> Dict[Tuple[str, str], Hook]:
    """Return copy of the hook registry."""
    return dict(_REGISTRY)


async def dispatch(service: Any, kind: str, key: str | None, payload: Dict[str, Any]) -> bool:
    """
    Run the hook registered for ``(kind, key)``.

    Returns ``False`` when no hook matches. Hook failures are logged here and
    not re-raised.
    """
    hook = _REGISTRY.get((kind, key or ""))
    if hook is None:
        logger.debug("No hook for %s '%s'", kind, key)
        return False

    try:
        await hook(service, payload)
    except CultError as exc:
        logger.error("%s hook '%s' failed: %s", kind, key, exc)
    except Exception:
        logger.exception("Unexpected error in %s hook '%s'", kind, key)
    return True


async def dispatch_event(service: Any, event: Dict[str, Any]) -> bool:
    return await dispatch(service, EVENT, event.get("type"), event)


async def dispatch_action(service: Any, action_id: str, body: Dict[str, Any]) -> bool:
    return await dispatch(service, ACTION, action_id, body)


# ------------------------------------------------------------------ #
# Auto-import sibling modules to populate registry
# ------------------------------------------------------------------ #
_pkg_path = Path(__file__).resolve().parent
for _, modname, _ in iter_modules([str(_pkg_path)]):
    if not modname.startswith("_"):
        import_module(f"{__name__}.{modname}")


__all__ = [
    "EVENT",
    "ACTION",
    "register_event",
    "register_action",
    "get",
    "all_hooks",
    "dispatch",
    "dispatch_event",
    "dispatch_action",
]
