"""Wall-clock time in milliseconds."""

from __future__ import annotations

import time


def time_ms() -> int:
    """Milliseconds since the epoch, truncated."""
    return time.time_ns() // 1_000_000