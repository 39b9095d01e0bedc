"""Tests for logging setup and structlog helpers."""

import json
import logging

import pytest

from assetpush.core.logging import setup_logging
from assetpush.core.structlog_logger import StructlogMixin, get_struct_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


class ExampleService(StructlogMixin):
    def run(self) -> None:
        self.log_operation("run", integration="json").info("service_ran")


def test_setup_logging_accepts_level_names():
    setup_logging(level="info")

    assert logging.getLogger().level == logging.INFO


def test_unknown_level_name_falls_back_to_warning():
    setup_logging(level="chatty")

    assert logging.getLogger().level == logging.WARNING


def test_log_file_receives_json_lines(tmp_path):
    log_file = tmp_path / "logs" / "assetpush.log"
    setup_logging(level=logging.INFO, log_file=log_file)

    logging.getLogger("assetpush.test").info("Copied %d files", 3)
    get_struct_logger("assetpush.test").info("manifest_written", added=2)
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert lines[0]["event"] == "Copied 3 files"
    assert lines[0]["level"] == "info"
    assert lines[1]["event"] == "manifest_written"
    assert lines[1]["added"] == 2


def test_mixin_binds_service_and_operation(tmp_path):
    log_file = tmp_path / "service.log"
    setup_logging(level=logging.INFO, log_file=log_file)

    ExampleService().run()
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["event"] == "service_ran"
    assert record["service"] == "ExampleService"
    assert record["operation"] == "run"
    assert record["integration"] == "json"


def test_records_below_level_are_dropped(tmp_path):
    log_file = tmp_path / "quiet.log"
    setup_logging(level=logging.WARNING, log_file=log_file)

    logging.getLogger("assetpush.test").info("hidden")
    logging.getLogger("assetpush.test").warning("shown")
    for handler in logging.getLogger().handlers:
        handler.flush()

    events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
    assert events == ["shown"]
