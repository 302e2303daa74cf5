"""Helpers shared across the adapter."""

from .sql import as_qualified_name, qualified_table, quote_ident, validate_identifier

__all__ = [
    "as_qualified_name",
    "qualified_table",
    "quote_ident",
    "validate_identifier",
]
