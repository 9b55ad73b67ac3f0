"""Infrastructure errors — broker and transport failures."""

from __future__ import annotations

from typing import Any

from vpe_logging.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to connect to an external resource."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class BusConnectionError(ConnectionError):
    """The report producer could not be started against the configured brokers.

    This is the only error a reporting logger surfaces, and only while it is
    being built: once a logger exists, its calls never raise.
    """

    default_code = "bus_connection_error"


class SerializationError(InfrastructureError):
    """Failed to encode or decode a report record."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "BusConnectionError",
    "ConnectionError",
    "InfrastructureError",
    "SerializationError",
]
