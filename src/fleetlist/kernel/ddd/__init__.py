"""Domain building blocks – public re-export surface."""

from fleetlist.kernel.ddd.specification import (
    AlwaysSatisfied,
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
    NotSpecification,
    OrSpecification,
)

__all__ = [
    "AlwaysSatisfied",
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
]
