"""Tests for the shared logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from crud_demo_api.app.core.config import settings
from crud_demo_api.app.core.logging_config import HANDLER_PREFIX, setup_logging, teardown_logging
from crud_demo_client import main


def _own_handler_names() -> list:
    return [
        h.get_name() for h in logging.getLogger().handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)
    ]


@pytest.fixture
def fresh_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    teardown_logging()
    yield
    teardown_logging()
    root.setLevel(level)


def test_setup_logging_configures_once(fresh_logging: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "log_file", "")

    setup_logging()
    setup_logging()

    assert _own_handler_names() == [f"{HANDLER_PREFIX}.console"]


def test_setup_logging_reads_level_and_file_from_settings(
    fresh_logging: None, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "server.log"
    monkeypatch.setattr(settings, "log_level", "debug")
    monkeypatch.setattr(settings, "log_file", str(log_file))

    setup_logging()
    logging.getLogger("crud_demo_api.test").debug("written to file")
    teardown_logging()

    assert logging.getLogger().level == logging.DEBUG
    assert "[DEBUG] crud_demo_api.test: written to file" in log_file.read_text(encoding="utf-8")


def test_client_cli_honours_log_file(
    fresh_logging: None, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "client.log"
    monkeypatch.setattr(settings, "log_level", "INFO")
    monkeypatch.setattr(settings, "log_file", str(log_file))
    monkeypatch.setattr(
        "crud_demo_client.call_all_sequential",
        lambda client, *args: logging.getLogger("crud_demo_client").info("finish all CRUD"),
    )

    main(["--mode", "sequential"])

    assert "crud_demo_client: finish all CRUD" in log_file.read_text(encoding="utf-8")
    assert _own_handler_names() == []
