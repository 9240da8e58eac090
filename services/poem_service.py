import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Connection

logger = logging.getLogger(__name__)

ALL_POETS = "All"
POETS_LIMIT = 50

POEM_COLUMNS = """
    SELECT
        p.id,
        p.title,
        p.content AS arabic,
        po.name AS poet,
        t.name AS theme
    FROM poems p
    JOIN poets po ON p.poet_id = po.id
    JOIN themes t ON p.theme_id = t.id
"""

COUNT_POEMS_SQL = "SELECT COUNT(*) FROM poems"

POETS_SQL = f"""
    SELECT DISTINCT po.name, COUNT(p.id) AS poem_count
    FROM poets po
    JOIN poems p ON po.id = p.poet_id
    GROUP BY po.name
    HAVING COUNT(p.id) > 0
    ORDER BY poem_count DESC
    LIMIT {POETS_LIMIT}
"""

BY_POET_SQL = POEM_COLUMNS + """
    WHERE po.name = :poet
    ORDER BY RANDOM()
    LIMIT :limit OFFSET :offset
"""

SEARCH_SQL = POEM_COLUMNS + """
    WHERE p.title ILIKE :pattern OR p.content ILIKE :pattern OR po.name ILIKE :pattern
    LIMIT :limit
"""


class PoemService:
    @staticmethod
    def format_poem(row: Mapping[str, Any]) -> Dict[str, Any]:
        """Приводит строку из БД к формату, который ждет фронтенд.

        В базе есть только арабские названия и имена, поэтому арабские поля
        дублируют основные, а перевод всегда пустой.
        """
        return {
            "id": row["id"],
            "poet": row["poet"],
            "poetArabic": row["poet"],
            "title": row["title"],
            "titleArabic": row["title"],
            "arabic": row["arabic"],
            "english": "",
            "tags": [row["theme"]],
        }

    @staticmethod
    def format_poems(rows) -> List[Dict[str, Any]]:
        return [PoemService.format_poem(row) for row in rows]

    @staticmethod
    def random_poem_query(poet: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
        """Собирает запрос случайного стиха. poet=All равносилен отсутствию фильтра."""
        query = POEM_COLUMNS
        params: Dict[str, Any] = {}
        if poet and poet != ALL_POETS:
            query += " WHERE po.name = :poet"
            params["poet"] = poet
        query += " ORDER BY RANDOM() LIMIT 1"
        return query, params

    @staticmethod
    def count_poems(db: Connection) -> int:
        return int(db.execute(text(COUNT_POEMS_SQL)).scalar_one())

    @staticmethod
    def get_random_poem(db: Connection, poet: Optional[str] = None) -> Optional[Dict[str, Any]]:
        query, params = PoemService.random_poem_query(poet)
        row = db.execute(text(query), params).mappings().first()
        if row is None:
            logger.debug("No random poem found (poet=%r)", poet)
            return None
        return PoemService.format_poem(row)

    @staticmethod
    def get_poems_by_poet(db: Connection, poet: str, limit: int = 10, offset: int = 0) -> List[Dict[str, Any]]:
        rows = db.execute(
            text(BY_POET_SQL), {"poet": poet, "limit": limit, "offset": offset}
        ).mappings().all()
        logger.debug("Fetched %d poems for poet %r", len(rows), poet)
        return PoemService.format_poems(rows)

    @staticmethod
    def get_poets(db: Connection) -> List[Dict[str, Any]]:
        rows = db.execute(text(POETS_SQL)).mappings().all()
        return [{"name": row["name"], "poem_count": int(row["poem_count"])} for row in rows]

    @staticmethod
    def search_poems(db: Connection, query: str, limit: int = 10) -> List[Dict[str, Any]]:
        """Поиск подстроки без учета регистра по названию, тексту и имени поэта."""
        rows = db.execute(
            text(SEARCH_SQL), {"pattern": f"%{query}%", "limit": limit}
        ).mappings().all()
        logger.debug("Search %r returned %d poems", query, len(rows))
        return PoemService.format_poems(rows)
