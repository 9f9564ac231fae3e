"""Process-wide log levels, driven by Settings.

The root level comes from ``LOG_LEVEL``; the MongoDB driver, HTTP client and
uvicorn loggers each get their own knob so driver chatter can be turned down
without hiding request logs.
"""

import logging
import sys

from crudhub.config import get_settings

# Settings field -> logger names it controls.
LOGGER_GROUPS: dict[str, tuple[str, ...]] = {
    "log_level_store": ("pymongo", "motor"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging() -> None:
    """Apply configured levels. Called once from the application lifespan."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(level_for(settings.log_level))
    if not root.handlers:
        # no server-installed handler (tests, scripts)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for field_name, names in LOGGER_GROUPS.items():
        level = level_for(getattr(settings, field_name))
        for name in names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s store=%s http=%s uvicorn=%s",
        settings.log_level,
        settings.log_level_store,
        settings.log_level_http,
        settings.log_level_uvicorn,
    )


def level_for(name: str) -> int:
    """Numeric level for a name such as "debug"; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
