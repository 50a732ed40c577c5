"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    │   └── UnauthorizedError
    ├── InfrastructureError  (infrastructure.py)
    │   ├── ConnectionError
    │   ├── TimeoutError
    │   ├── SerializationError
    │   └── ExternalServiceError
    └── ActionBusError       (bus.py)
        ├── InvalidActionCategoryError
        └── UnsupportedActionError
"""

from wooflux.kernel.errors.application import (
    ApplicationError,
    UnauthorizedError,
)
from wooflux.kernel.errors.base import BaseError, describe_error
from wooflux.kernel.errors.bus import (
    ActionBusError,
    InvalidActionCategoryError,
    UnsupportedActionError,
)
from wooflux.kernel.errors.domain import DomainError, NotFoundError
from wooflux.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
)
from wooflux.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ActionBusError",
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "InvalidActionCategoryError",
    "NotFoundError",
    "SerializationError",
    "UnauthorizedError",
    "UnsupportedActionError",
    "describe_error",
]
