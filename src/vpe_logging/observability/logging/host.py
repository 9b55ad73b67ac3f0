"""Observability – one-shot resolution of the local host name."""
from __future__ import annotations

import logging
import socket
from collections.abc import Callable

logger = logging.getLogger(__name__)

UNKNOWN_HOST = "Unknown Host"


def resolve_host_name(resolver: Callable[[], str] = socket.gethostname) -> str:
    """Return the machine's network name, or :data:`UNKNOWN_HOST` on failure.

    Called once per logger; there is no retry and no refresh.
    """
    try:
        name = resolver()
    except Exception as exc:  # noqa: BLE001
        logger.warning("host.resolution_failed exc=%r", exc)
        return UNKNOWN_HOST
    return name or UNKNOWN_HOST


__all__ = ["UNKNOWN_HOST", "resolve_host_name"]
