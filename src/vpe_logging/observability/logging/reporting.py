"""Observability – BusReporter, the identity-aware face of the report producer."""
from __future__ import annotations

from collections.abc import Sequence

from vpe_logging.kernel.messaging import RecordKind, ReportPublisher, record_headers, report_topic
from vpe_logging.kernel.messaging.message import Header

_EVENT_HEADERS = record_headers(RecordKind.EVENT)
_STACK_TRACE_HEADERS = record_headers(RecordKind.STACK_TRACE)


class BusReporter:
    """Publishes the records of one identity to ``<identity>_report``.

    Every record is keyed by the identity.  When *owns_publisher* is true the
    reporter releases the publisher on :meth:`close`.
    """

    def __init__(self, identity: str, publisher: ReportPublisher, *, owns_publisher: bool = True) -> None:
        self._identity = identity
        self._topic = report_topic(identity)
        self._publisher = publisher
        self._owns_publisher = owns_publisher

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def key(self) -> str:
        return self._identity

    @property
    def publisher(self) -> ReportPublisher:
        return self._publisher

    def publish(self, topic: str, key: str, value: object, headers: Sequence[Header] | None = None) -> None:
        self._publisher.publish(topic, key, value, headers)

    def report(self, value: object) -> None:
        self.publish(self._topic, self._identity, value, _EVENT_HEADERS)

    def report_stack_trace(self, value: str) -> None:
        self.publish(self._topic, self._identity, value, _STACK_TRACE_HEADERS)

    def close(self, timeout: float | None = None) -> None:
        if self._owns_publisher:
            self._publisher.close(timeout)


__all__ = ["BusReporter"]
