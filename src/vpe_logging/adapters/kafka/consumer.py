"""Kafka adapter – ReportConsumer, the monitor side of the report topics."""
from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from typing import Any

from vpe_logging.adapters.kafka.serializer import ReportRecordCodec
from vpe_logging.kernel.messaging import ReportRecord, ReportSerializer, report_topic


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'aiokafka' to consume report topics") from exc


class ReportConsumer:
    """aiokafka-backed consumer aggregating the reports of many identities.

    Usage::

        async with ReportConsumer("kafka:9092", "monitor", ["alice", "bob"]) as reports:
            async for record in reports:
                print(record.identity, record.kind, record.text)
    """

    def __init__(
        self,
        bootstrap_servers: str | list[str],
        group_id: str,
        identities: Iterable[str],
        serializer: ReportSerializer | None = None,
        **kwargs: Any,
    ) -> None:
        aiokafka = _require_aiokafka()
        self._topics = [report_topic(identity) for identity in identities]
        if not self._topics:
            raise ValueError("ReportConsumer needs at least one identity")
        self._consumer = aiokafka.AIOKafkaConsumer(
            *self._topics,
            bootstrap_servers=bootstrap_servers,
            group_id=group_id,
            **kwargs,
        )
        self._serializer = serializer or ReportRecordCodec()

    @property
    def topics(self) -> list[str]:
        return list(self._topics)

    async def start(self) -> None:
        await self._consumer.start()

    async def stop(self) -> None:
        await self._consumer.stop()

    async def __aiter__(self) -> AsyncIterator[ReportRecord]:
        async for msg in self._consumer:
            yield self._serializer.decode(msg.topic, msg.key, msg.value, msg.headers)

    async def __aenter__(self) -> "ReportConsumer":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()


__all__ = ["ReportConsumer"]
