"""Unit tests for the managed local logger backend."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from vpe_logging.kernel.severity import Severity
from vpe_logging.observability.logging import ManagedLoggingFactory, get_managed_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def _lines(buf: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in buf.getvalue().splitlines()]


class TestManagedLoggingFactory:
    def test_json_output_carries_identity_and_host(self) -> None:
        buf = io.StringIO()
        ManagedLoggingFactory.configure(logging.DEBUG, stream=buf)
        get_managed_logger("alice", "node7", Severity.INFO).log(logging.INFO, "[INFO]\tnode7\talice:\thi")
        (entry,) = _lines(buf)
        assert entry["event"] == "[INFO]\tnode7\talice:\thi"
        assert entry["identity"] == "alice"
        assert entry["host"] == "node7"
        assert entry["level"] == "info"

    def test_own_threshold_filters(self) -> None:
        buf = io.StringIO()
        ManagedLoggingFactory.configure(logging.DEBUG, stream=buf)
        managed = get_managed_logger("dave", "node7", Severity.WARN)
        managed.log(logging.INFO, "dropped")
        managed.log(logging.ERROR, "kept")
        assert [entry["event"] for entry in _lines(buf)] == ["kept"]

    def test_exception_rendered(self) -> None:
        buf = io.StringIO()
        ManagedLoggingFactory.configure(logging.DEBUG, stream=buf)
        try:
            raise ValueError("bad frame")
        except ValueError as exc:
            get_managed_logger("erin", "node7", Severity.INFO).log(logging.ERROR, "failed", exc_info=exc)
        (entry,) = _lines(buf)
        assert "ValueError: bad frame" in str(entry["exception"])

    def test_console_renderer(self) -> None:
        buf = io.StringIO()
        ManagedLoggingFactory.configure(logging.DEBUG, json=False, stream=buf)
        get_managed_logger("frank", "node7", Severity.INFO).log(logging.WARNING, "slow")
        assert "slow" in buf.getvalue()

    def test_stdlib_logger_named_after_identity(self) -> None:
        get_managed_logger("grace", "node7", Severity.DEBUG)
        assert logging.getLogger("vpe_logging.report.grace").level == logging.DEBUG
