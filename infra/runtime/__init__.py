from .system_clock import SystemClock, format_time, sleep_millis
from .structured_logger import StructuredLogger

__all__ = ["SystemClock", "StructuredLogger", "format_time", "sleep_millis"]
