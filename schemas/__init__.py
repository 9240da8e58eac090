from .poems import Poem, PoetSummary, HealthStatus

__all__ = ["Poem", "PoetSummary", "HealthStatus"]
