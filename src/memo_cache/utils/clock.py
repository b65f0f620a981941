from __future__ import annotations

import time
import typing as t

Clock = t.Callable[[], int]


def now_ms() -> int:
    """Wall-clock time in whole milliseconds since the Unix epoch."""
    return int(time.time() * 1000)
