"""Shared cross-layer types and exceptions."""

from space_trips.shared.exceptions import (
    CatalogUnavailableError,
    ExternalServiceError,
    StoreUnavailableError,
    UnknownOperationError,
)

__all__ = [
    "CatalogUnavailableError",
    "ExternalServiceError",
    "StoreUnavailableError",
    "UnknownOperationError",
]
