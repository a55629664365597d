"""space-trips: launch catalog browsing and trip booking."""

__version__ = "1.0.0"
