from .metrics import CacheMetrics, Counter

__all__ = ["CacheMetrics", "Counter"]
