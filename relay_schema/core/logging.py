import logging

from relay_schema.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings = None) -> None:
    """
    Configure root logging from settings.

    The handler is only installed when the root logger has none yet, but the
    level is always applied.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid LOG_LEVEL: {settings.LOG_LEVEL}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
