from .health import router as health_router
from .poems import router as poems_router

__all__ = ["health_router", "poems_router"]
