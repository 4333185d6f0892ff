"""Process-wide logging configuration."""

import logging

from signalbot.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str | None = None):
    """Configure the root logger once from settings.log_level."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    # Every interval run logs at INFO otherwise
    logging.getLogger("apscheduler").setLevel(logging.WARNING)
