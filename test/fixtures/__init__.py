"""Test fixtures for integration and unit tests."""

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent


def fixture_path(*parts: str) -> Path:
    """Resolve a path relative to the test/fixtures/ directory."""
    return _FIXTURES_DIR.joinpath(*parts)


def display_config_path() -> str:
    return str(fixture_path("configs", "display.json"))


def mixed_config_path() -> str:
    return str(fixture_path("configs", "mixed.json"))


def app_state_path() -> str:
    return str(fixture_path("state", "app_state.txt"))
