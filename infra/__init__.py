"""Infrastructure adapters – concrete implementations of domain ports."""

from .fs import LocalFileStore
from .runtime import StructuredLogger, SystemClock, format_time, sleep_millis

__all__ = [
    "LocalFileStore",
    "SystemClock",
    "StructuredLogger",
    "format_time",
    "sleep_millis",
]
