from . import blocks
from .cleanup import cleanup_bot_messages

__all__ = ["blocks", "cleanup_bot_messages"]
