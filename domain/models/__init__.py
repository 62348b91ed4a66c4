from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class ConfigValueKind(str, Enum):
    """Value kinds accepted when a config document is decoded."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Resolution:
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class DemoReport:
    """
    Everything a single demonstration run produced.

    ``resolution`` is ``None`` when the display config could not be loaded.
    """

    uppercase: str
    current_time: str
    state_version: str
    features: Sequence[str] = field(default_factory=tuple)
    features_line: str = "[]"
    config_json: str = "{}"
    resolution: Resolution | None = None
    state_saved: bool | None = None
