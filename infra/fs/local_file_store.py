from __future__ import annotations

from pathlib import Path


class LocalFileStore:
    """``FileStorePort`` over the local filesystem (UTF-8 text)."""

    def read_file(self, path: str) -> tuple[str, bool]:
        try:
            return Path(path).read_text(encoding="utf-8"), True
        except (OSError, UnicodeDecodeError):
            return "", False

    def write_file(self, path: str, content: str) -> bool:
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError:
            return False
        return True

    def file_exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        return Path(path).is_dir()

    def list_directory(self, path: str) -> list[str]:
        """Entry names in ``path``; a missing or unreadable directory yields ``[]``."""
        try:
            return sorted(entry.name for entry in Path(path).iterdir())
        except OSError:
            return []
