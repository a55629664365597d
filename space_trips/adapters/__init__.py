"""Data-source adapters."""
