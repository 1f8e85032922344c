"""
Common dialect name constants for all filter converters.
"""


class Dialect:
    GENERIC = "generic"
    PGVECTOR = "pgvector"
    MILVUS = "milvus"
    MARIADB = "mariadb"


# Columns stored next to the metadata document, referenced without a JSON path
BASE_COLUMNS = frozenset({"id", "text"})
