from .local_file_store import LocalFileStore

__all__ = ["LocalFileStore"]
