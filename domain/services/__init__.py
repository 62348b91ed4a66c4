"""
Domain services.

The stores depend only on domain models and ports so that infrastructure
and entry points can remain thin.
"""

from .config_store import ConfigStore
from .state import StateManager

__all__ = [
    "ConfigStore",
    "StateManager",
]
