import os
from dotenv import load_dotenv
from typing import List

from sqlalchemy.engine import URL, make_url

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}") from None


class Settings:
    # Сервер
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _env_int("PORT", 3001)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # PostgreSQL: DATABASE_URL (Supabase/Render) или отдельные PG* переменные
    DATABASE_URL = os.getenv("DATABASE_URL")
    DATABASE_SSLMODE = os.getenv("DATABASE_SSLMODE", "require")
    PGUSER = os.getenv("PGUSER") or os.getenv("USER")
    PGHOST = os.getenv("PGHOST", "localhost")
    PGDATABASE = os.getenv("PGDATABASE", "qafiyah")
    PGPASSWORD = os.getenv("PGPASSWORD", "")
    PGPORT = _env_int("PGPORT", 5432)

    # Пул соединений
    DB_POOL_SIZE = _env_int("DB_POOL_SIZE", 5)
    DB_MAX_OVERFLOW = _env_int("DB_MAX_OVERFLOW", 10)
    DB_POOL_TIMEOUT = _env_int("DB_POOL_TIMEOUT", 30)
    DB_POOL_RECYCLE = _env_int("DB_POOL_RECYCLE", 1800)

    # CORS
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Отдавать клиенту текст исключений (только для отладки)
    EXPOSE_ERROR_DETAILS = _env_bool("EXPOSE_ERROR_DETAILS")

    @property
    def database_url(self) -> URL:
        if self.DATABASE_URL:
            url = make_url(normalize_database_url(self.DATABASE_URL))
            if "sslmode" not in url.query and self.DATABASE_SSLMODE:
                url = url.update_query_dict({"sslmode": self.DATABASE_SSLMODE})
            return url

        return URL.create(
            "postgresql+psycopg2",
            username=self.PGUSER,
            password=self.PGPASSWORD or None,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
        )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS if origin.strip()] or ["*"]


def normalize_database_url(raw_url: str) -> str:
    """Приводит postgres:// и postgresql:// к драйверу psycopg2."""
    scheme, sep, rest = raw_url.partition("://")
    if not sep:
        return raw_url
    if scheme in ("postgres", "postgresql"):
        return f"postgresql+psycopg2://{rest}"
    return raw_url


settings = Settings()
