"""Kernel – framework-agnostic building blocks."""

from fleetlist.kernel.errors import (
    ApplicationError,
    BaseError,
    BusinessFilterEvaluationError,
    DomainError,
    InfrastructureError,
    InternalError,
    StorageError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BusinessFilterEvaluationError",
    "DomainError",
    "InfrastructureError",
    "InternalError",
    "StorageError",
    "ValidationError",
]
