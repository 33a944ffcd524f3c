"""
Periodic background jobs.

The membership cache only notices expiry when something looks at it, so the
service runs a small sweeper through :func:`startup` to make expiry happen on
time even when no events arrive.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)


async def startup(
    task_fn: Callable[[], Awaitable[None]] | Callable[[], None],
    interval: float,
    *,
    name: str = "background",
) -> asyncio.Task:
    """
    Run ``task_fn`` every ``interval`` seconds until cancelled.

    ``task_fn`` may be a plain function or a coroutine function. Failures are
    logged and the loop carries on with the next cycle.
    """

    async def _periodic() -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                result = task_fn()
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                logger.exception("%s cycle failed", name)

    logger.debug("Scheduling %s every %ss", name, interval)
    return asyncio.create_task(_periodic(), name=name)


async def shutdown(*tasks: asyncio.Task | None) -> None:
    """Cancel the given tasks and wait for them to finish. ``None`` is skipped."""

    pending = [task for task in tasks if task is not None and not task.done()]
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
