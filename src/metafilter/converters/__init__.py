from .base import FilterDialect, FilterExpressionConverter, StringBuilder
from .generic import GenericDialect, generic_dialect
from .mariadb import MariaDBDialect, mariadb_dialect
from .milvus import MilvusDialect, milvus_dialect
from .pgvector import PgVectorDialect, pgvector_dialect
from .registry import available_dialects, get_converter, register_dialect

__all__ = (
    "FilterDialect",
    "FilterExpressionConverter",
    "StringBuilder",
    "GenericDialect",
    "generic_dialect",
    "MariaDBDialect",
    "mariadb_dialect",
    "MilvusDialect",
    "milvus_dialect",
    "PgVectorDialect",
    "pgvector_dialect",
    "available_dialects",
    "get_converter",
    "register_dialect",
)
