"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        │   └── BusConnectionError
        └── SerializationError
"""

from vpe_logging.kernel.errors.application import ApplicationError
from vpe_logging.kernel.errors.base import BaseError
from vpe_logging.kernel.errors.infrastructure import (
    BusConnectionError,
    ConnectionError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BusConnectionError",
    "ConnectionError",
    "InfrastructureError",
    "SerializationError",
]
