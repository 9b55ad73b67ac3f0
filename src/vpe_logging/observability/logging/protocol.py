"""Observability – Logger protocol and LogEvent."""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol, Self

from vpe_logging.kernel.severity import Severity


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One accepted logging call; built per call and never stored."""
    severity: Severity
    host: str
    identity: str
    message: Any
    cause: BaseException | None = None


class Logger(Protocol):
    """Leveled logging contract shared by the console and synthesized loggers.

    Every leveled method takes an optional causal exception.  An event is
    delivered iff its severity is at least :attr:`threshold`; calls never raise
    because a sink failed.
    """

    @property
    def threshold(self) -> Severity: ...

    def is_enabled_for(self, severity: Severity) -> bool: ...
    def log(self, severity: Severity | str, message: Any, cause: BaseException | None = None) -> None: ...
    def debug(self, message: Any, cause: BaseException | None = None) -> None: ...
    def info(self, message: Any, cause: BaseException | None = None) -> None: ...
    def warn(self, message: Any, cause: BaseException | None = None) -> None: ...
    def warning(self, message: Any, cause: BaseException | None = None) -> None: ...
    def error(self, message: Any, cause: BaseException | None = None) -> None: ...
    def fatal(self, message: Any, cause: BaseException | None = None) -> None: ...
    def close(self) -> None: ...
    def __enter__(self) -> Self: ...
    def __exit__(self, *exc: object) -> None: ...


__all__ = ["LogEvent", "Logger"]
