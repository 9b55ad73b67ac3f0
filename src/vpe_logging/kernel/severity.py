"""Kernel – the strictly ordered severity scale shared by every logger."""
from __future__ import annotations

import enum
import logging

_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}


class Severity(enum.IntEnum):
    """DEBUG < INFO < WARN < ERROR < FATAL.

    An event is accepted by a logger iff ``event_severity >= threshold``;
    comparison is by rank, never by equality.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    @property
    def label(self) -> str:
        """Tag rendered between brackets at the start of a report line."""
        return self.name

    @property
    def stdlib_level(self) -> int:
        return _STDLIB_LEVELS[self]

    @property
    def is_error_stream(self) -> bool:
        """True when console output for this severity goes to stderr."""
        return self >= Severity.WARN

    @classmethod
    def parse(cls, value: Severity | int | str) -> Severity:
        """Coerce a severity, its numeric rank or a (case-insensitive) name.

        ``"warning"`` and ``"critical"`` are accepted as aliases of WARN and
        FATAL so that stdlib level names can be used in configuration.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a severity: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown severity name: {value!r}") from None
        raise ValueError(f"Not a severity: {value!r}")


_STDLIB_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}


def threshold_for(verbose: bool) -> Severity:
    """DEBUG for verbose clients, INFO otherwise."""
    return Severity.DEBUG if verbose else Severity.INFO


__all__ = ["Severity", "threshold_for"]
