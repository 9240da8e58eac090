import logging
from collections.abc import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

from core.config import settings

logger = logging.getLogger(__name__)


def build_engine() -> Engine:
    """Создает движок SQLAlchemy с пулом соединений к PostgreSQL."""
    return create_engine(
        settings.database_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args={"application_name": "diwan_api"},
    )


engine: Engine = build_engine()


def get_engine() -> Engine:
    return engine


def get_db() -> Iterator[Connection]:
    """Выдает соединение из пула на время одного запроса."""
    with engine.connect() as connection:
        yield connection


def check_connection() -> bool:
    """Проверяет соединение с базой при старте. Ошибка только логируется."""
    try:
        with engine.connect() as connection:
            now = connection.execute(text("SELECT NOW()")).scalar_one()
        logger.info("Connected to PostgreSQL at %s", now)
        return True
    except Exception:
        logger.exception("Error connecting to PostgreSQL")
        return False


def dispose_engine() -> None:
    engine.dispose()
    logger.info("Database pool closed")
