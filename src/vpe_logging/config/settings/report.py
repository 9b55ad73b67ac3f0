"""Config settings – ReportSettings, the process-wide reporting configuration."""
from __future__ import annotations

import codecs
import dataclasses
from typing import Any, ClassVar

from vpe_logging.config.settings.base import Settings
from vpe_logging.config.validation import InvalidSettingValueError
from vpe_logging.kernel.severity import Severity, threshold_for

_VALID_ACKS = ("0", "1", "all")


@dataclasses.dataclass(frozen=True)
class ReportSettings(Settings):
    """Options recognised by :func:`~vpe_logging.observability.logging.create_logger`.

    ``verbose`` selects the severity threshold; every other field describes
    the report producer.  Environment variables use the ``VPE_REPORT_`` prefix,
    e.g. ``VPE_REPORT_BOOTSTRAP_SERVERS=kafka-1:9092,kafka-2:9092``.
    """

    _prefix: ClassVar[str] = "VPE_REPORT"

    verbose: bool = False
    bootstrap_servers: list[str] = dataclasses.field(default_factory=lambda: ["localhost:9092"])
    client_id: str = "vpe-report"
    encoding: str = "utf-8"
    acks: str = "1"
    linger_ms: int = 0
    max_pending: int = 10_000

    def _validate(self) -> None:
        if not self.bootstrap_servers:
            raise InvalidSettingValueError("bootstrap_servers", self.bootstrap_servers, "at least one broker is required")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise InvalidSettingValueError("encoding", self.encoding, "unknown text encoding") from None
        if str(self.acks) not in _VALID_ACKS:
            raise InvalidSettingValueError("acks", self.acks, f"expected one of {_VALID_ACKS}")
        if self.linger_ms < 0:
            raise InvalidSettingValueError("linger_ms", self.linger_ms, "must not be negative")
        if self.max_pending < 1:
            raise InvalidSettingValueError("max_pending", self.max_pending, "must be positive")

    @property
    def threshold(self) -> Severity:
        return threshold_for(self.verbose)

    def producer_options(self) -> dict[str, Any]:
        """Keyword arguments for ``aiokafka.AIOKafkaProducer``."""
        acks = str(self.acks)
        return {
            "bootstrap_servers": list(self.bootstrap_servers),
            "client_id": self.client_id,
            "acks": acks if acks == "all" else int(acks),
            "linger_ms": self.linger_ms,
        }


__all__ = ["ReportSettings"]
