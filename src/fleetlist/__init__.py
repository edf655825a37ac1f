"""
fleetlist – two-stage listing pipeline for dashboard collections.

Import path convention::

    from fleetlist.kernel.errors import ValidationError
    from fleetlist.application.query import QuerySpec, StorageQueryBuilder
    from fleetlist.application.business_filters import BusinessFilterEngine
    from fleetlist.application.listing import ListingPipeline
    from fleetlist.domain.vehicles import build_vehicle_registry
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
