import logging
from typing import Optional

from movie_store.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(settings: Optional[Settings] = None) -> int:
    """
    Configure root logging once from settings.log_level (APP_LOG_LEVEL).

    Returns:
        The numeric level in effect
    """
    cfg = settings or get_settings()
    level = logging.getLevelName(cfg.log_level)

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return level
