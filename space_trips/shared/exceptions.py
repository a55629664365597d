"""Shared (non-domain) exceptions."""


class ExternalServiceError(Exception):
    """External service call failed."""


class CatalogUnavailableError(ExternalServiceError):
    """Launch catalog could not be reached or returned an unusable answer."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"[{source}] {message}")


class StoreUnavailableError(ExternalServiceError):
    """Booking store read or write failed."""


class UnknownOperationError(LookupError):
    """No resolver is registered under the requested operation name."""

    def __init__(self, name: str):
        self.operation = name
        super().__init__(f"Unknown operation: {name}")
