from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CacheConfig:
    default_namespace: str = "default"
    single_flight: bool = False  # coalesce concurrent misses for the same key
    metrics_enabled: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CacheConfig":
        return cls(**data)
