"""Observability – the managed local logger backend (structlog over stdlib)."""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from vpe_logging.kernel.severity import Severity

REPORT_NAMESPACE = "vpe_logging.report"

# Keeps stdlib from falling back to lastResort when the process configured no
# handlers; the console sink already prints every accepted line.
logging.getLogger(REPORT_NAMESPACE).addHandler(logging.NullHandler())


class ManagedLoggingFactory:
    """Configure structlog + stdlib logging for the managed sink.

    Pipeline clients call :meth:`configure` once at start-up; rotation and
    file handlers are added by the process on top of (or instead of) the
    stream handler installed here.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        *,
        json: bool = True,
        stream: IO[str] | None = None,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        if json:
            renderers: list[Any] = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        else:
            renderers = [structlog.dev.ConsoleRenderer(colors=False)]
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def get_managed_logger(identity: str, host: str, threshold: Severity) -> Any:
    """Return a structlog logger bound to *identity* and *host*.

    The underlying stdlib logger ``vpe_logging.report.<identity>`` filters at
    *threshold* on its own, independently of the other sinks.
    """
    std_logger = logging.getLogger(f"{REPORT_NAMESPACE}.{identity}")
    std_logger.setLevel(threshold.stdlib_level)
    return structlog.wrap_logger(std_logger, wrapper_class=structlog.stdlib.BoundLogger).bind(
        identity=identity, host=host
    )


__all__ = ["REPORT_NAMESPACE", "ManagedLoggingFactory", "get_managed_logger"]
