"""Kafka adapter – KafkaReportProducer.

A synchronous, fire-and-forget front end over ``aiokafka.AIOKafkaProducer``.
The aiokafka client runs on an event loop owned by a dedicated I/O thread,
the same role the network thread plays inside any Kafka client: callers only
schedule records and return immediately, acknowledgements are consumed on the
I/O thread and surface through counters and the ``on_delivery`` callback.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
from collections.abc import Callable, Sequence
from typing import Any

from vpe_logging.adapters.kafka.serializer import ReportRecordCodec
from vpe_logging.kernel.errors import BusConnectionError, SerializationError
from vpe_logging.kernel.messaging import ReportPublisher, ReportSerializer
from vpe_logging.kernel.messaging.message import Header

logger = logging.getLogger(__name__)

DeliveryCallback = Callable[[Any, BaseException | None], None]


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'aiokafka' to publish reports to Kafka") from exc


class KafkaReportProducer(ReportPublisher):
    """aiokafka-backed report publisher.

    Parameters
    ----------
    bootstrap_servers:
        Broker address or list of addresses.
    serializer:
        Codec for keys and values (default: UTF-8 :class:`ReportRecordCodec`).
    max_pending:
        Records in flight beyond which new records are dropped instead of
        queued.
    on_delivery:
        Called on the I/O thread with ``(metadata, None)`` on acknowledgement
        or ``(None, exc)`` on failure.
    start_timeout:
        Seconds to wait for the initial broker connection.
    **producer_kwargs:
        Forwarded to ``AIOKafkaProducer``.

    Raises
    ------
    BusConnectionError
        When the producer cannot be started.
    """

    def __init__(
        self,
        bootstrap_servers: str | list[str],
        *,
        serializer: ReportSerializer | None = None,
        max_pending: int = 10_000,
        on_delivery: DeliveryCallback | None = None,
        start_timeout: float = 30.0,
        **producer_kwargs: Any,
    ) -> None:
        aiokafka = _require_aiokafka()
        self._serializer = serializer or ReportRecordCodec()
        self._max_pending = max_pending
        self._on_delivery = on_delivery
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._pending: set[concurrent.futures.Future[Any]] = set()
        self._closed = False
        self.delivered = 0
        self.failed = 0
        self.dropped = 0

        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name="vpe-report-producer", daemon=True)
        self._thread.start()

        future = asyncio.run_coroutine_threadsafe(
            self._start(aiokafka, bootstrap_servers, producer_kwargs), self._loop
        )
        try:
            self._producer = future.result(start_timeout)
        except Exception as exc:
            future.cancel()
            self._stop_loop(start_timeout)
            raise BusConnectionError(
                str(bootstrap_servers),
                f"Could not start report producer for {bootstrap_servers!r}",
                cause=exc,
            ) from exc
        logger.debug("kafka.report_producer_started servers=%s", bootstrap_servers)

    # ------------------------------------------------------------------
    # ReportPublisher interface
    # ------------------------------------------------------------------

    def publish(
        self,
        topic: str,
        key: str,
        value: object,
        headers: Sequence[Header] | None = None,
    ) -> None:
        """Schedule one record and return without waiting for the broker."""
        try:
            key_bytes = self._serializer.encode_key(key)
            value_bytes = self._serializer.encode_value(value)
        except SerializationError as exc:
            with self._lock:
                self.failed += 1
            logger.warning("kafka.report_unencodable topic=%s exc=%r", topic, exc)
            return

        with self._lock:
            if self._closed or len(self._pending) >= self._max_pending:
                self.dropped += 1
                logger.debug("kafka.report_dropped topic=%s closed=%s", topic, self._closed)
                return
            future = asyncio.run_coroutine_threadsafe(
                self._send(topic, key_bytes, value_bytes, list(headers or ())), self._loop
            )
            self._pending.add(future)
        future.add_done_callback(self._on_done)

    def flush(self, timeout: float | None = None) -> bool:
        """Block until every scheduled record is settled; ``False`` on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: not self._pending, timeout)

    def close(self, timeout: float | None = 10.0) -> None:
        """Drain in-flight records, stop the client and the I/O thread.

        Idempotent.  Records published after ``close`` are dropped.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
        if not self.flush(timeout):
            logger.warning("kafka.report_flush_timeout pending=%d", self.pending)
        try:
            asyncio.run_coroutine_threadsafe(self._producer.stop(), self._loop).result(timeout)
        except Exception as exc:  # noqa: BLE001
            logger.warning("kafka.report_producer_stop_failed exc=%r", exc)
        finally:
            self._stop_loop(timeout)
        logger.debug("kafka.report_producer_closed delivered=%d failed=%d dropped=%d",
                     self.delivered, self.failed, self.dropped)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def __enter__(self) -> "KafkaReportProducer":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # I/O thread
    # ------------------------------------------------------------------

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    @staticmethod
    async def _start(aiokafka: Any, bootstrap_servers: str | list[str], kwargs: dict[str, Any]) -> Any:
        producer = aiokafka.AIOKafkaProducer(bootstrap_servers=bootstrap_servers, **kwargs)
        try:
            await producer.start()
        except BaseException:
            await producer.stop()
            raise
        return producer

    async def _send(self, topic: str, key: bytes, value: bytes, headers: list[Header]) -> Any:
        return await self._producer.send_and_wait(topic, value=value, key=key, headers=headers)

    def _on_done(self, future: concurrent.futures.Future[Any]) -> None:
        if future.cancelled():
            result, exc = None, concurrent.futures.CancelledError()
        else:
            exc = future.exception()
            result = None if exc is not None else future.result()
        if exc is not None:
            logger.debug("kafka.report_failed exc=%r", exc)
        if self._on_delivery is not None:
            try:
                self._on_delivery(result, exc)
            except Exception:  # noqa: BLE001
                logger.exception("kafka.report_delivery_callback_failed")
        with self._idle:
            self._pending.discard(future)
            if exc is None:
                self.delivered += 1
            else:
                self.failed += 1
            self._idle.notify_all()

    def _stop_loop(self, timeout: float | None) -> None:
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        if not self._thread.is_alive():
            self._loop.close()


__all__ = ["KafkaReportProducer"]
