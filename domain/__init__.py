"""
Domain layer package.

This package contains the configuration and state stores plus the pure
helpers they build on. Nothing here touches the filesystem or the clock
directly; those are reached through the ports.
"""

from .models import (  # noqa: F401
    ConfigValueKind,
    DemoReport,
    Resolution,
)
from .ports import (  # noqa: F401
    ClockPort,
    FileStorePort,
    LoggerPort,
)

__all__ = [
    # Models
    "ConfigValueKind",
    "Resolution",
    "DemoReport",
    # Ports
    "FileStorePort",
    "ClockPort",
    "LoggerPort",
]
