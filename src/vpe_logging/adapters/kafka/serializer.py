"""Kafka adapter – ReportRecordCodec."""
from __future__ import annotations

import json
from collections.abc import Sequence

from vpe_logging.kernel.errors import SerializationError
from vpe_logging.kernel.messaging import RECORD_KIND_HEADER, RecordKind, ReportRecord, ReportSerializer
from vpe_logging.kernel.messaging.message import Header


class ReportRecordCodec(ReportSerializer):
    """Text codec for report records.

    Keys and values travel as plain encoded text, so a consumer that knows
    nothing about this library still reads exactly the formatted line.
    Structured values that are not text are rendered as JSON.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def encode_key(self, key: str) -> bytes:
        return self._encode(key)

    def encode_value(self, value: object) -> bytes:
        if isinstance(value, bytes):
            return value
        if isinstance(value, str):
            return self._encode(value)
        try:
            text = json.dumps(value, default=str)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot render report value: {exc}", payload_type=type(value).__name__, cause=exc
            ) from exc
        return self._encode(text)

    def decode(
        self,
        topic: str,
        key: bytes | None,
        value: bytes | None,
        headers: Sequence[Header] | None = None,
    ) -> ReportRecord:
        identity = key.decode(self._encoding, errors="replace") if key is not None else ""
        text = value.decode(self._encoding, errors="replace") if value is not None else ""
        return ReportRecord(identity=identity, text=text, kind=self._kind(headers), topic=topic)

    def _encode(self, text: str) -> bytes:
        try:
            return text.encode(self._encoding)
        except UnicodeEncodeError as exc:
            raise SerializationError(
                f"Cannot encode report text as {self._encoding}", payload_type="str", cause=exc
            ) from exc

    @staticmethod
    def _kind(headers: Sequence[Header] | None) -> RecordKind:
        # records from producers that predate the kind header are plain events
        for name, raw in headers or ():
            if name == RECORD_KIND_HEADER:
                try:
                    return RecordKind(raw.decode("ascii"))
                except (UnicodeDecodeError, ValueError):
                    return RecordKind.EVENT
        return RecordKind.EVENT


__all__ = ["ReportRecordCodec"]
