"""Record, field, string and byte-order helpers for ENVISAT product data, and the swpeo command."""

__version__ = "0.1.0"

__all__ = ["record", "strings", "swap", "elements", "copying", "swpeo"]