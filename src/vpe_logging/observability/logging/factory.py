"""Observability – logger factories.

Callers depend on the :class:`~vpe_logging.observability.logging.protocol.Logger`
protocol; which implementation they get is decided here, at construction.
"""
from __future__ import annotations

import socket
from collections.abc import Callable
from typing import IO

from vpe_logging.adapters.kafka import KafkaReportProducer, ReportRecordCodec
from vpe_logging.config.settings import ReportSettings
from vpe_logging.kernel.messaging import ReportPublisher
from vpe_logging.kernel.severity import threshold_for
from vpe_logging.observability.logging.console import ConsoleLogger
from vpe_logging.observability.logging.host import resolve_host_name
from vpe_logging.observability.logging.managed import get_managed_logger
from vpe_logging.observability.logging.reporting import BusReporter
from vpe_logging.observability.logging.synthesized import SynthesizedLogger


def create_logger(
    identity: str,
    settings: ReportSettings,
    *,
    publisher: ReportPublisher | None = None,
    host_resolver: Callable[[], str] = socket.gethostname,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> SynthesizedLogger:
    """Build the reporting logger of one pipeline client.

    The host name is resolved and the report producer started right away.
    Pass *publisher* to share an existing producer; the logger then leaves it
    open on :meth:`~SynthesizedLogger.close`.

    Raises
    ------
    ValueError
        When *identity* is empty.
    BusConnectionError
        When the report producer cannot be started.
    """
    if not identity:
        raise ValueError("A reporting logger needs a non-empty identity")

    host = resolve_host_name(host_resolver)
    threshold = settings.threshold
    managed = get_managed_logger(identity, host, threshold)

    owns_publisher = publisher is None
    if publisher is None:
        publisher = KafkaReportProducer(
            serializer=ReportRecordCodec(settings.encoding),
            max_pending=settings.max_pending,
            **settings.producer_options(),
        )
    reporter = BusReporter(identity, publisher, owns_publisher=owns_publisher)
    return SynthesizedLogger(
        identity,
        threshold,
        reporter,
        host=host,
        managed_logger=managed,
        stdout=stdout,
        stderr=stderr,
    )


def create_console_logger(
    verbose: bool = False,
    *,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> ConsoleLogger:
    """Console-only logger at DEBUG (verbose) or INFO."""
    return ConsoleLogger(threshold_for(verbose), stdout=stdout, stderr=stderr)


__all__ = ["create_console_logger", "create_logger"]
