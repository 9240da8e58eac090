import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.database import get_engine
from core.errors import public_error_message
from schemas import HealthStatus
from services.poem_service import PoemService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthStatus)
def health(engine: Engine = Depends(get_engine)):
    """Проверка доступности базы и общее число стихов.

    Соединение берется внутри try, чтобы недоступная база тоже давала
    ответ в формате health, а не общую ошибку.
    """
    try:
        with engine.connect() as db:
            total = PoemService.count_poems(db)
    except SQLAlchemyError as e:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": public_error_message(e)},
        )
    return {"status": "ok", "database": "connected", "totalPoems": total}
