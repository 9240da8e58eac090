import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from core.config import settings
from core.database import check_connection, dispose_engine
from core.errors import register_exception_handlers
from core.log_config import setup_logging
from routers import health_router, poems_router

setup_logging()
logger = logging.getLogger("diwan")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # База может быть недоступна при старте: только логируем, не падаем
    await run_in_threadpool(check_connection)
    yield
    logger.info("Shutting down: closing database pool")
    dispose_engine()


# --- КОНФИГУРАЦИЯ ПРИЛОЖЕНИЯ ---
def create_app() -> FastAPI:
    app = FastAPI(title="Diwan Poetry API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(poems_router)
    return app


app = create_app()


def run():
    import uvicorn

    base = f"http://localhost:{settings.PORT}"
    logger.info("Poetry API server running on %s", base)
    logger.info("   Health check: %s/api/health", base)
    logger.info("   Random poem: %s/api/poems/random", base)
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
