"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   └── ValidationError              client-facing, 400
    ├── ApplicationError             (application.py)
    │   ├── InternalError                500
    │   │   └── BusinessFilterEvaluationError
    │   ├── DuplicateResolverError       startup-time programming errors
    │   ├── RegistryFrozenError
    │   └── RegistryMismatchError
    └── InfrastructureError          (infrastructure.py)
        └── StorageError                 503
"""

from fleetlist.kernel.errors.application import (
    ApplicationError,
    BusinessFilterEvaluationError,
    DuplicateResolverError,
    InternalError,
    RegistryFrozenError,
    RegistryMismatchError,
)
from fleetlist.kernel.errors.base import BaseError
from fleetlist.kernel.errors.domain import DomainError, ValidationError
from fleetlist.kernel.errors.infrastructure import InfrastructureError, StorageError

__all__ = [
    "ApplicationError",
    "BaseError",
    "BusinessFilterEvaluationError",
    "DomainError",
    "DuplicateResolverError",
    "InfrastructureError",
    "InternalError",
    "RegistryFrozenError",
    "RegistryMismatchError",
    "StorageError",
    "ValidationError",
]
