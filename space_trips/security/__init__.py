"""Identity, validation and outbound HTTP helpers."""
