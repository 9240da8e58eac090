import logging
from typing import Optional

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid LOG_LEVEL {level!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # Пул соединений слишком болтлив на уровне INFO
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
