"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_file_store import InMemoryFileStore
from .fake_runtime import FixedClock, InMemoryLogger

__all__ = [
    "InMemoryFileStore",
    "FixedClock",
    "InMemoryLogger",
]
