from __future__ import annotations

import json
import re
from typing import Any

from domain.models import ConfigValueKind
from domain.ports import LoggerPort

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str) -> int | None:
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit.
        return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported JSON constant: {name}")


class _OversizedInt:
    """Stands in for an integer literal too long to convert; skipped on load."""


def _decode_int(literal: str) -> int | _OversizedInt:
    try:
        return int(literal)
    except ValueError:
        return _OversizedInt()


class ConfigStore:
    """
    Flat key/value configuration held entirely as text.

    Values are always stored as strings. The JSON type of a value is
    re-derived on every export: strings that are a whole base-10 integer
    are written as numbers, everything else as strings. As a consequence
    ``set_value("port", "8080")`` and ``set_int("port", 8080)`` export
    identically, and non-canonical spellings such as ``"+5"``, ``"007"``
    or ``"-0"`` come back from a round trip as ``"5"``, ``"7"`` and ``"0"``.

    Instances are not thread-safe; callers must serialize access.
    """

    def __init__(self, logger: LoggerPort | None = None) -> None:
        self._entries: dict[str, str] = {}
        self._logger = logger

    def set_value(self, key: str, value: str) -> None:
        self._entries[key] = value

    def get_value(self, key: str, default: str = "") -> str:
        return self._entries.get(key, default)

    def set_int(self, key: str, value: int) -> None:
        self._entries[key] = str(int(value))

    def get_int(self, key: str, default: int = 0) -> int:
        raw = self._entries.get(key)
        if raw is None:
            return default
        parsed = _parse_int(raw)
        return default if parsed is None else parsed

    def load_from_json(self, blob: str) -> bool:
        """Replace all entries with the ones decoded from ``blob``.

        Strings, integers and booleans are kept; floats, nulls, arrays and
        nested objects are skipped, as are integer literals too long for
        the interpreter to convert. A malformed document, one nested too
        deeply to decode, or one whose top level is not an object leaves
        the current entries untouched and returns ``False``.
        """
        try:
            document = json.loads(
                blob,
                parse_constant=_reject_constant,
                parse_int=_decode_int,
            )
        except (ValueError, RecursionError) as exc:
            self._warn("config document rejected", reason=str(exc))
            return False
        if not isinstance(document, dict):
            self._warn("config document rejected", reason="top level is not an object")
            return False

        decoded: dict[str, str] = {}
        skipped: list[str] = []
        for key, value in document.items():
            kind = self._classify(value)
            if kind is ConfigValueKind.STRING:
                decoded[key] = value
            elif kind is ConfigValueKind.BOOLEAN:
                decoded[key] = "true" if value else "false"
            elif kind is ConfigValueKind.INTEGER:
                decoded[key] = str(value)
            else:
                skipped.append(key)

        self._entries = decoded
        if self._logger is not None:
            self._logger.info("config loaded", entries=len(decoded), skipped=skipped)
        return True

    def to_json(self) -> str:
        document: dict[str, Any] = {}
        for key, value in self._entries.items():
            parsed = _parse_int(value)
            document[key] = value if parsed is None else parsed
        return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)

    # -- read helpers -------------------------------------------------------

    def keys(self) -> list[str]:
        return sorted(self._entries)

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    # -- internal helpers ---------------------------------------------------

    @staticmethod
    def _classify(value: object) -> ConfigValueKind | None:
        # bool is a subclass of int, so it has to be checked first.
        if isinstance(value, bool):
            return ConfigValueKind.BOOLEAN
        if isinstance(value, int):
            return ConfigValueKind.INTEGER
        if isinstance(value, str):
            return ConfigValueKind.STRING
        return None

    def _warn(self, message: str, **fields: Any) -> None:
        if self._logger is not None:
            self._logger.warning(message, **fields)
