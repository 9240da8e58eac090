from .poem_service import PoemService

__all__ = ["PoemService"]
