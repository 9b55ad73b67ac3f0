"""Observability – leveled logging with console, managed and bus sinks."""
from vpe_logging.kernel.severity import Severity, threshold_for
from vpe_logging.observability.logging.protocol import LogEvent, Logger
from vpe_logging.observability.logging.formatting import describe_cause, format_line, render_stack
from vpe_logging.observability.logging.host import UNKNOWN_HOST, resolve_host_name
from vpe_logging.observability.logging.managed import ManagedLoggingFactory, get_managed_logger
from vpe_logging.observability.logging.reporting import BusReporter
from vpe_logging.observability.logging.console import ConsoleLogger
from vpe_logging.observability.logging.synthesized import SynthesizedLogger
from vpe_logging.observability.logging.factory import create_console_logger, create_logger

__all__ = [
    "UNKNOWN_HOST",
    "BusReporter",
    "ConsoleLogger",
    "LogEvent",
    "Logger",
    "ManagedLoggingFactory",
    "Severity",
    "SynthesizedLogger",
    "create_console_logger",
    "create_logger",
    "describe_cause",
    "format_line",
    "get_managed_logger",
    "render_stack",
    "resolve_host_name",
    "threshold_for",
]
