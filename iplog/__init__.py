"""Per-address hit counts from plaintext access logs."""

__version__ = "0.1.0"
