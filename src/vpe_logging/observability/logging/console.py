"""Observability – ConsoleLogger, the console-only leveled logger."""
from __future__ import annotations

import logging
import sys
import traceback
from typing import IO, Any

from vpe_logging.kernel.severity import Severity
from vpe_logging.observability.logging.formatting import describe_cause

logger = logging.getLogger(__name__)


class ConsoleLogger:
    """Writes ``[L]\\t<message>`` lines to stdout (DEBUG, INFO) or stderr.

    Meant for local diagnostics such as test harnesses.  When a cause is
    given its full traceback is also printed to stderr.  Streams default to
    whatever ``sys.stdout`` / ``sys.stderr`` are at call time.
    """

    def __init__(
        self,
        threshold: Severity = Severity.INFO,
        *,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ) -> None:
        self._threshold = Severity.parse(threshold)
        self._stdout = stdout
        self._stderr = stderr

    @property
    def threshold(self) -> Severity:
        return self._threshold

    def is_enabled_for(self, severity: Severity) -> bool:
        return severity >= self._threshold

    def log(self, severity: Severity | str, message: Any, cause: BaseException | None = None) -> None:
        try:
            severity = Severity.parse(severity)
        except ValueError as exc:
            logger.warning("console.bad_severity exc=%r", exc)
            return
        if severity < self._threshold:
            return
        try:
            line = f"[{severity.label}]\t{message}"
            if cause is not None:
                line = f"{line}: {describe_cause(cause)}"
            print(line, file=self._stream(severity), flush=True)
            if cause is not None:
                traceback.print_exception(cause, file=self._err())
        except Exception as exc:  # noqa: BLE001
            logger.warning("console.write_failed exc=%r", exc)

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

    def close(self) -> None:
        for stream in (self._out(), self._err()):
            stream.flush()

    def __enter__(self) -> "ConsoleLogger":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def _out(self) -> IO[str]:
        return self._stdout or sys.stdout

    def _err(self) -> IO[str]:
        return self._stderr or sys.stderr

    def _stream(self, severity: Severity) -> IO[str]:
        return self._err() if severity.is_error_stream else self._out()


__all__ = ["ConsoleLogger"]
