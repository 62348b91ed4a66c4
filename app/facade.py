from __future__ import annotations

from typing import Callable, Sequence

from domain.formatting import format_colored, format_list
from domain.models import DemoReport, Resolution
from domain.ports import ClockPort, FileStorePort, LoggerPort
from domain.services import ConfigStore, StateManager
from domain.utils import to_upper

DEFAULT_FEATURES: tuple[str, ...] = ("engine", "graphics", "plugins", "formatting")
DISPLAY_CONFIG_JSON = '{"width": 1920, "height": 1080, "fullscreen": false}'


class DemoApplication:
    """
    Runs the demonstration sequence that exercises every module once.

    Output lines are handed to ``output`` rather than printed, so the
    sequence can be observed from tests.
    """

    def __init__(
        self,
        *,
        clock: ClockPort,
        file_store: FileStorePort,
        logger: LoggerPort,
        format_time: Callable[[int], str],
        output: Callable[[str], None] = print,
    ) -> None:
        self._clock = clock
        self._file_store = file_store
        self._logger = logger
        self._format_time = format_time
        self._output = output

    def run(
        self,
        *,
        state_file: str | None = None,
        features: Sequence[str] = DEFAULT_FEATURES,
    ) -> DemoReport:
        self._output("=== Test Application ===")

        uppercase = to_upper("hello world")
        self._output(f"Uppercase: {uppercase}")

        current_time = self._format_time(self._clock.now_millis())
        self._output(f"Current time: {current_time}")

        state = StateManager(self._file_store, logger=self._logger)
        state.set_value("version", "1.0")
        state.set_value("name", "test_app")
        self._output(f"State version: {state.get_value('version')}")
        state_saved: bool | None = None
        if state_file is not None:
            state_saved = state.save_to_file(state_file)
            self._output(f"State saved to {state_file}: {'yes' if state_saved else 'no'}")

        features_line = format_list(features)
        self._output("")
        self._output(f"Features: {features_line}")
        self._output(format_colored("Status: OK", "green"))

        cfg = ConfigStore(logger=self._logger)
        cfg.set_value("app_name", "TestApp")
        cfg.set_int("max_connections", 100)
        cfg.set_value("debug_mode", "true")
        config_json = cfg.to_json()
        self._output("")
        self._output("Configuration (JSON):")
        self._output(config_json)

        resolution: Resolution | None = None
        if cfg.load_from_json(DISPLAY_CONFIG_JSON):
            resolution = Resolution(width=cfg.get_int("width"), height=cfg.get_int("height"))
            self._output(f"Loaded display config: {resolution}")

        self._logger.info("demo finished", features=len(features), state_saved=state_saved)
        return DemoReport(
            uppercase=uppercase,
            current_time=current_time,
            state_version=state.get_value("version"),
            features=tuple(features),
            features_line=features_line,
            config_json=config_json,
            resolution=resolution,
            state_saved=state_saved,
        )
