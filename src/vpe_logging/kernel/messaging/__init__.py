"""Kernel messaging – report record primitives and bus ports."""
from vpe_logging.kernel.messaging.message import (
    RECORD_KIND_HEADER,
    REPORT_TOPIC_SUFFIX,
    RecordKind,
    ReportPublisher,
    ReportRecord,
    ReportSerializer,
    record_headers,
    report_topic,
)

__all__ = [
    "RECORD_KIND_HEADER",
    "REPORT_TOPIC_SUFFIX",
    "RecordKind",
    "ReportPublisher",
    "ReportRecord",
    "ReportSerializer",
    "record_headers",
    "report_topic",
]
