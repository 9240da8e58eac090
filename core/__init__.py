from .config import settings
from .database import get_db, engine

__all__ = ["settings", "get_db", "engine"]
