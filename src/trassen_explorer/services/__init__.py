"""Services package for Trassen Explorer."""

from .error_mapper import ErrorMapping, map_exception
from .infrastructure_client import (
    ApiClientError,
    ApiFormatError,
    ApiTransportError,
    InfrastructureClient,
)
from .schemas import (
    FrameworkRecord,
    InfrastructureDocument,
    InfrastructureSummary,
    SegmentRecord,
    StationRecord,
)

__all__ = [
    "ErrorMapping",
    "map_exception",
    "ApiClientError",
    "ApiFormatError",
    "ApiTransportError",
    "InfrastructureClient",
    "FrameworkRecord",
    "InfrastructureDocument",
    "InfrastructureSummary",
    "SegmentRecord",
    "StationRecord",
]
