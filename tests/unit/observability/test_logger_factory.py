"""Unit tests for create_logger."""

from __future__ import annotations

import io
import logging
import socket
from collections.abc import Sequence
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from vpe_logging.adapters.kafka import KafkaReportProducer
from vpe_logging.config.settings import ReportSettings
from vpe_logging.kernel.errors import BusConnectionError
from vpe_logging.kernel.messaging import ReportPublisher
from vpe_logging.kernel.severity import Severity
from vpe_logging.observability.logging import UNKNOWN_HOST, SynthesizedLogger, create_logger
from vpe_logging.observability.logging.managed import REPORT_NAMESPACE


class RecordingPublisher(ReportPublisher):
    def __init__(self) -> None:
        self.records: list[tuple[str, str, object]] = []
        self.closed = False

    def publish(self, topic: str, key: str, value: object, headers: Sequence[tuple[str, bytes]] | None = None) -> None:
        self.records.append((topic, key, value))

    def close(self, timeout: float | None = None) -> None:
        self.closed = True


def _mock_aiokafka():
    mock_prod = MagicMock()
    mock_prod.start = AsyncMock()
    mock_prod.stop = AsyncMock()
    mock_prod.send_and_wait = AsyncMock(return_value="metadata")
    mock_ak = MagicMock()
    mock_ak.AIOKafkaProducer.return_value = mock_prod
    return mock_ak, mock_prod


def _unresolvable() -> str:
    raise socket.gaierror("unknown")


class TestCreateLoggerWithPublisher:
    def test_builds_synthesized_logger(self) -> None:
        publisher = RecordingPublisher()
        logger = create_logger("alice", ReportSettings(), publisher=publisher, host_resolver=lambda: "node7",
                               stdout=io.StringIO())
        assert isinstance(logger, SynthesizedLogger)
        assert logger.identity == "alice"
        assert logger.host == "node7"
        assert logger.threshold is Severity.INFO

    def test_verbose_selects_debug(self) -> None:
        logger = create_logger("alice", ReportSettings(verbose=True), publisher=RecordingPublisher(),
                               host_resolver=lambda: "node7")
        assert logger.threshold is Severity.DEBUG

    def test_host_fallback(self) -> None:
        publisher = RecordingPublisher()
        out = io.StringIO()
        logger = create_logger("alice", ReportSettings(), publisher=publisher, host_resolver=_unresolvable,
                               stdout=out)
        logger.info("starting")
        assert logger.host == UNKNOWN_HOST
        assert out.getvalue() == "[INFO]\tUnknown Host\talice:\tstarting\n"
        assert publisher.records == [("alice_report", "alice", "[INFO]\tUnknown Host\talice:\tstarting")]

    def test_shared_publisher_not_closed(self) -> None:
        publisher = RecordingPublisher()
        logger = create_logger("alice", ReportSettings(), publisher=publisher, host_resolver=lambda: "h")
        logger.close()
        assert publisher.closed is False

    def test_managed_logger_filters_at_threshold(self) -> None:
        create_logger("carol", ReportSettings(), publisher=RecordingPublisher(), host_resolver=lambda: "h")
        assert logging.getLogger(f"{REPORT_NAMESPACE}.carol").level == logging.INFO

    def test_unconfigured_logging_prints_each_line_once(self, capsys: pytest.CaptureFixture[str]) -> None:
        root = logging.getLogger()
        saved = root.handlers[:]
        root.handlers.clear()
        try:
            err = io.StringIO()
            logger = create_logger("dave", ReportSettings(), publisher=RecordingPublisher(),
                                   host_resolver=lambda: "node7", stderr=err)
            logger.warn("slow")
        finally:
            root.handlers[:] = saved
        assert err.getvalue() == "[WARN]\tnode7\tdave:\tslow\n"
        assert capsys.readouterr().err == ""

    def test_report_namespace_has_null_handler(self) -> None:
        handlers = logging.getLogger(REPORT_NAMESPACE).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_empty_identity_rejected(self) -> None:
        with pytest.raises(ValueError):
            create_logger("", ReportSettings(), publisher=RecordingPublisher())


class TestCreateLoggerWithKafka:
    def test_owns_and_closes_kafka_producer(self) -> None:
        mock_ak, mock_prod = _mock_aiokafka()
        settings = ReportSettings(bootstrap_servers=["k1:9092"], client_id="vpe", acks="all", linger_ms=2)
        with patch("vpe_logging.adapters.kafka.producer._require_aiokafka", return_value=mock_ak):
            logger = create_logger("bob", settings, host_resolver=lambda: "node7", stdout=io.StringIO())
        try:
            assert isinstance(logger.reporter.publisher, KafkaReportProducer)
            mock_ak.AIOKafkaProducer.assert_called_once_with(
                bootstrap_servers=["k1:9092"], client_id="vpe", acks="all", linger_ms=2
            )
            logger.info("starting")
            assert logger.reporter.publisher.flush(timeout=2.0)  # type: ignore[attr-defined]
            mock_prod.send_and_wait.assert_awaited_once()
            args, kwargs = mock_prod.send_and_wait.call_args
            assert args == ("bob_report",)
            assert kwargs["key"] == b"bob"
            assert kwargs["value"] == b"[INFO]\tnode7\tbob:\tstarting"
        finally:
            logger.close()
        mock_prod.stop.assert_awaited_once()

    def test_producer_start_failure_is_fatal(self) -> None:
        mock_ak, mock_prod = _mock_aiokafka()
        mock_prod.start = AsyncMock(side_effect=ConnectionRefusedError("k1:9092"))
        with patch("vpe_logging.adapters.kafka.producer._require_aiokafka", return_value=mock_ak):
            with pytest.raises(BusConnectionError):
                create_logger("bob", ReportSettings(), host_resolver=lambda: "node7")
