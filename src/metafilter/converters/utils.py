"""Converter utility functions.

Provides helpers for quoting identifiers, escaping string literals and
rendering scalar values shared by the dialects.
"""

from typing import List

from metafilter.types import Scalar


def format_scalar(value: Scalar) -> str:
    """Canonical textual form of a non-string scalar: ``true``/``false`` for booleans, ``str()`` for numbers."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def quote_identifier(name: str, quote: str = '"') -> str:
    """Quote SQL identifier with `quote` characters, doubling embedded quotes.

    Handles dotted names by quoting each segment separately.
    """
    return ".".join(f"{quote}{p.replace(quote, quote * 2)}{quote}" for p in name.split("."))


def escape_sql_string(value: str, escape_backslash: bool = False) -> str:
    """Wrap `value` in single quotes for SQL literal embedding.

    MariaDB treats backslash as an escape character in string literals, so it
    must be doubled there as well.
    """
    if escape_backslash:
        value = value.replace("\\", "\\\\")
    return "'" + value.replace("'", "''") + "'"


def split_path(key: str) -> List[str]:
    """Split a dotted metadata key (``info.lang``) into its path segments."""
    return key.split(".")
