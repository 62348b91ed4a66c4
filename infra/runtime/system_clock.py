from __future__ import annotations

import time
from datetime import datetime, timezone

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def now_micros(self) -> int:
        return time.time_ns() // 1_000


def format_time(timestamp_millis: int) -> str:
    """Format a Unix timestamp in milliseconds as local ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.fromtimestamp(timestamp_millis / 1000).strftime(_TIME_FORMAT)


def sleep_millis(millis: int) -> None:
    if millis > 0:
        time.sleep(millis / 1000)
