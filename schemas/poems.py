from pydantic import BaseModel
from typing import List, Optional

# Колонки poems.title/content и имена не объявлены NOT NULL: NULL отдаем как null
class Poem(BaseModel):
    id: int
    poet: Optional[str] = None
    poetArabic: Optional[str] = None
    title: Optional[str] = None
    titleArabic: Optional[str] = None
    arabic: Optional[str] = None
    english: str = ""
    tags: List[Optional[str]] = []

class PoetSummary(BaseModel):
    name: Optional[str] = None
    poem_count: int

class HealthStatus(BaseModel):
    status: str
    database: str
    totalPoems: int
