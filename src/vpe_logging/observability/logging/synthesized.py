"""Observability – SynthesizedLogger, fan-out to managed logger, console and bus.

For every accepted event the same formatted line goes, in this order, to:

1. the managed local logger at the matching stdlib level (with the cause as
   ``exc_info`` so the backend renders the traceback itself);
2. the console, stdout for DEBUG/INFO and stderr for WARN and above, with
   the traceback of a cause printed to stderr;
3. the ``<identity>_report`` topic, keyed by the identity.

A call with a cause then publishes the flattened stack trace as one more
record on the same topic, tagged with the ``stack-trace`` record kind.

Each sink is attempted independently: an exception raised by one of them is
reported through this module's logger and the remaining sinks still run.
"""
from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Callable
from typing import IO, Any

from vpe_logging.kernel.severity import Severity
from vpe_logging.observability.logging.formatting import format_event, render_stack
from vpe_logging.observability.logging.protocol import LogEvent
from vpe_logging.observability.logging.reporting import BusReporter

logger = logging.getLogger(__name__)


class SynthesizedLogger:
    """Leveled logger for one identity, fanning out to three sinks.

    Identity, host and threshold are fixed at construction.  The logger holds
    no locks: thread safety comes from the stdlib logger, the console streams
    and the report producer it delegates to.
    """

    def __init__(
        self,
        identity: str,
        threshold: Severity,
        reporter: BusReporter,
        *,
        host: str,
        managed_logger: Any,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ) -> None:
        self._identity = identity
        self._threshold = Severity.parse(threshold)
        self._reporter = reporter
        self._host = host
        self._managed = managed_logger
        self._stdout = stdout
        self._stderr = stderr
        self._closed = False

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def host(self) -> str:
        return self._host

    @property
    def threshold(self) -> Severity:
        return self._threshold

    @property
    def reporter(self) -> BusReporter:
        return self._reporter

    def is_enabled_for(self, severity: Severity) -> bool:
        return severity >= self._threshold

    def log(self, severity: Severity | str, message: Any, cause: BaseException | None = None) -> None:
        try:
            severity = Severity.parse(severity)
        except ValueError as exc:
            logger.warning("report.bad_severity identity=%s exc=%r", self._identity, exc)
            return
        if severity < self._threshold:
            return
        try:
            event = LogEvent(severity, self._host, self._identity, message, cause)
            line = format_event(event)
        except Exception as exc:  # noqa: BLE001
            logger.warning("report.format_failed identity=%s exc=%r", self._identity, exc)
            return

        self._deliver("managed", self._to_managed, event, line)
        self._deliver("console", self._to_console, event, line)
        self._deliver("bus", self._reporter.report, line)
        if cause is not None:
            self._deliver("bus", self._reporter.report_stack_trace, render_stack(cause))

    def debug(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Severity.DEBUG, message, cause)

    def info(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Severity.INFO, message, cause)

    def warn(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Severity.WARN, message, cause)

    warning = warn

    def error(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Severity.ERROR, message, cause)

    def fatal(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Severity.FATAL, message, cause)

    def close(self, timeout: float | None = 10.0) -> None:
        """Release the report producer if this logger owns it.  Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._reporter.close(timeout)

    def __enter__(self) -> "SynthesizedLogger":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SynthesizedLogger(identity={self._identity!r}, host={self._host!r}, threshold={self._threshold.name})"

    # ------------------------------------------------------------------
    # Sinks
    # ------------------------------------------------------------------

    def _to_managed(self, event: LogEvent, line: str) -> None:
        if event.cause is not None:
            self._managed.log(event.severity.stdlib_level, line, exc_info=event.cause)
        else:
            self._managed.log(event.severity.stdlib_level, line)

    def _to_console(self, event: LogEvent, line: str) -> None:
        if event.severity.is_error_stream:
            stream = self._stderr or sys.stderr
        else:
            stream = self._stdout or sys.stdout
        print(line, file=stream, flush=True)
        if event.cause is not None:
            traceback.print_exception(event.cause, file=self._stderr or sys.stderr)

    def _deliver(self, sink: str, send: Callable[..., None], *args: Any) -> None:
        try:
            send(*args)
        except Exception as exc:  # noqa: BLE001
            logger.warning("report.sink_failed sink=%s identity=%s exc=%r", sink, self._identity, exc)


__all__ = ["SynthesizedLogger"]
