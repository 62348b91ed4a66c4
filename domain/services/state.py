from __future__ import annotations

from domain.ports import FileStorePort, LoggerPort


class StateManager:
    """Application state persisted as ``key=value`` lines."""

    def __init__(self, file_store: FileStorePort, logger: LoggerPort | None = None) -> None:
        self._file_store = file_store
        self._logger = logger
        self._state: dict[str, str] = {}

    def set_value(self, key: str, value: str) -> None:
        self._state[key] = value

    def get_value(self, key: str) -> str:
        return self._state.get(key, "")

    def has_key(self, key: str) -> bool:
        return key in self._state

    def save_to_file(self, path: str) -> bool:
        content = "".join(f"{key}={self._state[key]}\n" for key in sorted(self._state))
        ok = self._file_store.write_file(path, content)
        if self._logger is not None:
            if ok:
                self._logger.info("state saved", path=path, entries=len(self._state))
            else:
                self._logger.warning("state save failed", path=path)
        return ok

    def load_from_file(self, path: str) -> bool:
        """Replace the state with the file contents.

        Lines without ``=`` are ignored. When the file cannot be read the
        current state is kept.
        """
        content, ok = self._file_store.read_file(path)
        if not ok:
            if self._logger is not None:
                self._logger.warning("state load failed", path=path)
            return False

        self._state.clear()
        for line in content.split("\n"):
            key, sep, value = line.partition("=")
            if sep:
                self._state[key] = value
        if self._logger is not None:
            self._logger.info("state loaded", path=path, entries=len(self._state))
        return True
