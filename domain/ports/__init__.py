from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class FileStorePort(Protocol):
    """
    Plain-text file access.

    Failures are reported through return values, never raised, so that
    callers can fall back locally.
    """

    @abstractmethod
    def read_file(self, path: str) -> tuple[str, bool]:
        ...

    @abstractmethod
    def write_file(self, path: str, content: str) -> bool:
        ...

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        ...

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        ...

    @abstractmethod
    def list_directory(self, path: str) -> Sequence[str]:
        ...


@runtime_checkable
class ClockPort(Protocol):
    """Time source for deterministic and easily testable code."""

    def now(self) -> datetime:
        ...

    def now_millis(self) -> int:
        ...

    def now_micros(self) -> int:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "FileStorePort",
    "ClockPort",
    "LoggerPort",
]
