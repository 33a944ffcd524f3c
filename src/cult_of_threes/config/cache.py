import os

from .loader import section


class Cache:
    """Membership cache lifetime and expiry check interval, in seconds."""

    def __init__(self, config: dict | None = None) -> None:
        cache_cfg = section(config, "cache")
        self.MEMBERS_TTL: float = float(cache_cfg.get("members_ttl", os.getenv("MEMBERS_TTL", "3600")))
        self.CHECK_PERIOD: float = float(
            cache_cfg.get("check_period", os.getenv("MEMBERS_CHECK_PERIOD", "60"))
        )
