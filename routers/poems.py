import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from core.database import get_db
from core.errors import public_error_message
from schemas import Poem, PoetSummary
from services.poem_service import PoemService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["poems"])

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _db_error(action: str, e: SQLAlchemyError) -> HTTPException:
    logger.exception("Error %s", action)
    return HTTPException(status_code=500, detail=public_error_message(e))


@router.get("/poems/random", response_model=Poem)
def get_random_poem(
    poet: Optional[str] = None,
    db: Connection = Depends(get_db),
):
    try:
        poem = PoemService.get_random_poem(db, poet)
    except SQLAlchemyError as e:
        raise _db_error("fetching random poem", e)

    if poem is None:
        raise HTTPException(status_code=404, detail="No poems found")
    return poem


@router.get("/poems/by-poet/{poet}", response_model=List[Poem])
def get_poems_by_poet(
    poet: str,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: Connection = Depends(get_db),
):
    try:
        return PoemService.get_poems_by_poet(db, poet, limit=limit, offset=offset)
    except SQLAlchemyError as e:
        raise _db_error("fetching poems by poet", e)


@router.get("/poets", response_model=List[PoetSummary])
@router.get("/poems/poets", response_model=List[PoetSummary], include_in_schema=False)
def get_poets(db: Connection = Depends(get_db)):
    try:
        return PoemService.get_poets(db)
    except SQLAlchemyError as e:
        raise _db_error("fetching poets", e)


@router.get("/poems/search", response_model=List[Poem])
def search_poems(
    q: Optional[str] = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    db: Connection = Depends(get_db),
):
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query required")

    try:
        return PoemService.search_poems(db, q, limit=limit)
    except SQLAlchemyError as e:
        raise _db_error("searching poems", e)
