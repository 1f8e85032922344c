"""Dialect registry.

Maps dialect names to ready-to-use converters so callers can ask for a store
syntax by name (``get_converter("pgvector")``) instead of wiring dialects and
converters themselves.
"""

from typing import Dict, List, Optional

from metafilter.constants import Dialect
from metafilter.exceptions import InvalidConfigError
from metafilter.logger import get_logger
from metafilter.settings import settings

from .base import FilterDialect, FilterExpressionConverter
from .generic import generic_dialect
from .mariadb import mariadb_dialect
from .milvus import milvus_dialect
from .pgvector import pgvector_dialect

__all__ = (
    "available_dialects",
    "get_converter",
    "register_dialect",
)

logger = get_logger(__name__)

_CONVERTERS: Dict[str, FilterExpressionConverter] = {
    Dialect.GENERIC: FilterExpressionConverter(generic_dialect),
    Dialect.PGVECTOR: FilterExpressionConverter(pgvector_dialect),
    Dialect.MILVUS: FilterExpressionConverter(milvus_dialect),
    Dialect.MARIADB: FilterExpressionConverter(mariadb_dialect),
}


def register_dialect(name: str, dialect: FilterDialect) -> FilterExpressionConverter:
    """Register `dialect` under `name`, replacing any dialect registered before.

    Returns:
        The converter now served for `name`.
    """
    converter = FilterExpressionConverter(dialect)
    _CONVERTERS[name.lower()] = converter
    logger.message("Registered filter dialect %s (%s)", name, type(dialect).__name__)
    return converter


def available_dialects() -> List[str]:
    return sorted(_CONVERTERS)


def get_converter(dialect: Optional[str] = None) -> FilterExpressionConverter:
    """Return the converter of a dialect.

    Args:
        dialect: Dialect name; `DEFAULT_DIALECT` from settings when omitted.

    Raises:
        InvalidConfigError: If no dialect is registered under the name.
    """
    name = (dialect or settings.DEFAULT_DIALECT).lower()
    converter = _CONVERTERS.get(name)
    if converter is None:
        raise InvalidConfigError(
            f"Unknown filter dialect. Supported: {', '.join(available_dialects())}",
            config_key="DEFAULT_DIALECT" if dialect is None else "dialect",
            value=name,
        )
    return converter
