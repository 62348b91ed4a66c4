"""Step definitions for config store BDD scenarios."""
from __future__ import annotations

from pytest_bdd import given, when, then, scenarios, parsers

from domain.services import ConfigStore

scenarios("../features/config_store.feature")


@given("an empty config store", target_fixture="config_ctx")
def given_empty_store() -> dict:
    return {"store": ConfigStore(), "loaded": None}


@given(
    parsers.parse('a config store holding "{key}" = "{value}"'),
    target_fixture="config_ctx",
)
def given_populated_store(key: str, value: str) -> dict:
    store = ConfigStore()
    store.set_value(key, value)
    return {"store": store, "loaded": None}


@when(parsers.parse('the value "{key}" is set to "{value}"'))
def when_set_value(config_ctx: dict, key: str, value: str) -> None:
    config_ctx["store"].set_value(key, value)


@when(parsers.parse('the integer "{key}" is set to {value:d}'))
def when_set_int(config_ctx: dict, key: str, value: int) -> None:
    config_ctx["store"].set_int(key, value)


@when(parsers.parse("the document '{blob}' is loaded"))
def when_load(config_ctx: dict, blob: str) -> None:
    config_ctx["loaded"] = config_ctx["store"].load_from_json(blob)


@then(parsers.parse("the exported JSON contains '{text}'"))
def then_export_contains(config_ctx: dict, text: str) -> None:
    exported = config_ctx["store"].to_json()
    assert text in exported, f"Expected {text!r} in:\n{exported}"


@then("the load succeeds")
def then_load_ok(config_ctx: dict) -> None:
    assert config_ctx["loaded"] is True


@then("the load fails")
def then_load_failed(config_ctx: dict) -> None:
    assert config_ctx["loaded"] is False


@then(parsers.parse('the integer "{key}" reads back as {expected:d}'))
def then_int_reads_back(config_ctx: dict, key: str, expected: int) -> None:
    assert config_ctx["store"].get_int(key, 0) == expected


@then(parsers.parse('reading the integer "{key}" with default {default:d} gives {expected:d}'))
def then_int_default(config_ctx: dict, key: str, default: int, expected: int) -> None:
    assert config_ctx["store"].get_int(key, default) == expected


@then(parsers.parse('the value "{key}" reads back as "{expected}"'))
def then_value_reads_back(config_ctx: dict, key: str, expected: str) -> None:
    assert config_ctx["store"].get_value(key) == expected


@then(parsers.parse('reading the value "{key}" with default "{default}" gives "{expected}"'))
def then_value_default(config_ctx: dict, key: str, default: str, expected: str) -> None:
    assert config_ctx["store"].get_value(key, default) == expected


@then(parsers.parse("the store holds {count:d} entry"))
def then_entry_count(config_ctx: dict, count: int) -> None:
    assert len(config_ctx["store"]) == count
