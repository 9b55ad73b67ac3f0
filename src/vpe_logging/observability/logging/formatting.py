"""Observability – report line and stack trace rendering."""
from __future__ import annotations

import traceback
from typing import Any

from vpe_logging.kernel.severity import Severity
from vpe_logging.observability.logging.protocol import LogEvent


def describe_cause(cause: BaseException) -> str:
    """``"<ExceptionType>: <text>"``, or the bare type name when there is no text."""
    name = type(cause).__name__
    try:
        text = str(cause)
    except Exception:  # noqa: BLE001
        text = "<unprintable>"
    return f"{name}: {text}" if text else name


def format_line(
    severity: Severity,
    host: str,
    identity: str,
    message: Any,
    cause: BaseException | None = None,
) -> str:
    """Render ``[L]\\t<host>\\t<identity>:\\t<message>`` plus ``": <cause>"``."""
    line = f"[{severity.label}]\t{host}\t{identity}:\t{message}"
    if cause is not None:
        line = f"{line}: {describe_cause(cause)}"
    return line


def format_event(event: LogEvent) -> str:
    return format_line(event.severity, event.host, event.identity, event.message, event.cause)


def render_stack(cause: BaseException) -> str:
    """Newline-joined frame descriptions of *cause*'s traceback.

    Frames follow Python's order, most recent call last.  An exception that
    was never raised has no traceback and renders as ``""``.
    """
    try:
        frames = traceback.extract_tb(cause.__traceback__)
        return "\n".join(f'File "{f.filename}", line {f.lineno}, in {f.name}' for f in frames)
    except Exception:  # noqa: BLE001
        return ""


__all__ = ["describe_cause", "format_event", "format_line", "render_stack"]
