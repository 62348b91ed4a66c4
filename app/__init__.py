"""Application layer package."""

from .facade import DEFAULT_FEATURES, DemoApplication

__all__ = ["DemoApplication", "DEFAULT_FEATURES"]
