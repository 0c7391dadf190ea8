from mentormatch.common.environment_constants import LOG_LEVEL
import logging
import os

APP_LOGGER_NAME = "mentormatch"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_configured = False


def _configure_logging():
    """
    Configure the root handler once per process.

    The level comes from LOG_LEVEL (case-insensitive). Unknown values fall
    back to INFO. SQLAlchemy's engine logger stays at WARNING unless DEBUG is
    requested, so statement echo does not flood request logs.
    """
    global _configured
    if _configured:
        return

    level_name = os.environ.get(LOG_LEVEL, "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    )
    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the application logger, or one of its children.

    Args:
        name (str | None): Child name, e.g. "connection" gives
            "mentormatch.connection". Omit for the application logger.
    """
    _configure_logging()
    if name:
        return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
    return logging.getLogger(APP_LOGGER_NAME)
