import logging
import os

from cult_of_threes.errors import ConfigurationError

from .loader import section

logger = logging.getLogger(__name__)


class Core:
    """Slack credentials and listener settings."""

    def __init__(self, config: dict | None = None) -> None:
        cfg = section(config)
        slack_cfg = section(config, "slack")

        channel_env = str(slack_cfg.get("channel_env", "SLACK_SECRET_CHANNEL"))
        token_env = str(slack_cfg.get("token_env", "SLACK_BOT_TOKEN"))
        signing_env = str(slack_cfg.get("signing_secret_env", "SLACK_SIGNING_SECRET"))
        bot_user_env = str(slack_cfg.get("bot_user_id_env", "SLACK_BOT_USER_ID"))

        self.SLACK_SECRET_CHANNEL: str | None = os.getenv(channel_env)
        self.SLACK_BOT_TOKEN: str | None = os.getenv(token_env)
        self.SLACK_SIGNING_SECRET: str | None = os.getenv(signing_env)
        self.SLACK_BOT_USER_ID: str | None = os.getenv(bot_user_env)

        self.PORT: int = int(slack_cfg.get("port", os.getenv("PORT", "3000")))
        self.EVENTS_PATH: str = str(slack_cfg.get("events_path", os.getenv("EVENTS_PATH", "/slack/events")))
        self.LOG_LEVEL: str = str(cfg.get("log_level", os.getenv("LOG_LEVEL", "INFO"))).upper()

        required = [
            (channel_env, self.SLACK_SECRET_CHANNEL),
            (token_env, self.SLACK_BOT_TOKEN),
            (signing_env, self.SLACK_SIGNING_SECRET),
            (bot_user_env, self.SLACK_BOT_USER_ID),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")

        logger.debug("Managing channel %s on port %d", self.SLACK_SECRET_CHANNEL, self.PORT)
