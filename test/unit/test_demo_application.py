from __future__ import annotations

from datetime import datetime, timezone

from app import DemoApplication
from domain.models import Resolution
from test.mocks import FixedClock, InMemoryFileStore, InMemoryLogger


def _build(files: InMemoryFileStore | None = None) -> tuple[DemoApplication, list[str], InMemoryLogger, InMemoryFileStore]:
    lines: list[str] = []
    logger = InMemoryLogger()
    files = files or InMemoryFileStore()
    app = DemoApplication(
        clock=FixedClock(datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)),
        file_store=files,
        logger=logger,
        format_time=lambda millis: f"t={millis}",
        output=lines.append,
    )
    return app, lines, logger, files


def test_demo_report_contents() -> None:
    app, _, _, _ = _build()

    report = app.run()

    assert report.uppercase == "HELLO WORLD"
    assert report.current_time == "t=1735732800000"
    assert report.state_version == "1.0"
    assert report.features_line == "['engine', 'graphics', 'plugins', 'formatting']"
    assert '"max_connections": 100' in report.config_json
    assert '"debug_mode": "true"' in report.config_json
    assert report.resolution == Resolution(1920, 1080)
    assert report.state_saved is None


def test_demo_output_lines() -> None:
    app, lines, _, _ = _build()

    app.run(features=["engine"])

    assert lines[0] == "=== Test Application ==="
    assert "Uppercase: HELLO WORLD" in lines
    assert "Features: ['engine']" in lines
    assert "Loaded display config: 1920x1080" in lines
    assert lines[-1] == "Loaded display config: 1920x1080"


def test_demo_saves_state_file_when_requested() -> None:
    app, lines, _, files = _build()

    report = app.run(state_file="state.txt")

    assert report.state_saved is True
    assert files.files["state.txt"] == "name=test_app\nversion=1.0\n"
    assert "State saved to state.txt: yes" in lines


def test_demo_reports_failed_state_save() -> None:
    files = InMemoryFileStore()
    files.fail_writes = True
    app, lines, logger, _ = _build(files)

    report = app.run(state_file="state.txt")

    assert report.state_saved is False
    assert "State saved to state.txt: no" in lines
    assert "state save failed" in logger.messages("warning")


def test_demo_logs_completion() -> None:
    app, _, logger, _ = _build()
    app.run()
    assert logger.messages("info")[-1] == "demo finished"
