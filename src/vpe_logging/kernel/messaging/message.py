"""Kernel messaging – report record primitives and bus ports."""
from __future__ import annotations

import abc
import dataclasses
import enum
from collections.abc import Sequence

Header = tuple[str, bytes]

RECORD_KIND_HEADER = "vpe-record-kind"
REPORT_TOPIC_SUFFIX = "_report"


def report_topic(identity: str) -> str:
    """Topic on which every record of *identity* is published."""
    return f"{identity}{REPORT_TOPIC_SUFFIX}"


class RecordKind(enum.StrEnum):
    """Shape of a record on a ``<identity>_report`` topic."""

    EVENT = "event"
    STACK_TRACE = "stack-trace"


def record_headers(kind: RecordKind) -> list[Header]:
    """Kafka headers tagging a record with its *kind*."""
    return [(RECORD_KIND_HEADER, kind.value.encode("ascii"))]


@dataclasses.dataclass(frozen=True)
class ReportRecord:
    """One record as seen on a report topic."""

    identity: str
    text: str
    kind: RecordKind = RecordKind.EVENT
    topic: str = ""


class ReportSerializer(abc.ABC):
    """Port: turn report records into transport bytes and back."""

    @abc.abstractmethod
    def encode_key(self, key: str) -> bytes: ...

    @abc.abstractmethod
    def encode_value(self, value: object) -> bytes: ...

    @abc.abstractmethod
    def decode(
        self,
        topic: str,
        key: bytes | None,
        value: bytes | None,
        headers: Sequence[Header] | None = None,
    ) -> ReportRecord: ...


class ReportPublisher(abc.ABC):
    """Port: fire-and-forget publishing of keyed text records."""

    @abc.abstractmethod
    def publish(
        self,
        topic: str,
        key: str,
        value: object,
        headers: Sequence[Header] | None = None,
    ) -> None: ...

    @abc.abstractmethod
    def close(self, timeout: float | None = None) -> None: ...


__all__ = [
    "RECORD_KIND_HEADER",
    "REPORT_TOPIC_SUFFIX",
    "Header",
    "RecordKind",
    "ReportPublisher",
    "ReportRecord",
    "ReportSerializer",
    "record_headers",
    "report_topic",
]
