"""MariaDB dialect.

Renders filters as MariaDB WHERE clauses over a JSON metadata column, reading
fields with ``JSON_VALUE``.
"""

from typing import Optional

from metafilter.constants import BASE_COLUMNS
from metafilter.expression.operands import Key, Value
from metafilter.settings import settings
from metafilter.types import Scalar

from .base import FilterDialect, StringBuilder
from .utils import escape_sql_string, quote_identifier

__all__ = (
    "MariaDBDialect",
    "mariadb_dialect",
)


class MariaDBDialect(FilterDialect):
    """Render filter expressions as MariaDB boolean conditions.

    ``JSON_VALUE`` returns text, so booleans are compared with their JSON
    spelling (``'true'`` / ``'false'``).

    Example output::

        JSON_VALUE(`metadata`, '$.year') >= 2020 AND JSON_VALUE(`metadata`, '$.tag') IN ('a', 'b')
    """

    name = "mariadb"

    def __init__(self, metadata_column: Optional[str] = None) -> None:
        self._metadata_column = metadata_column

    @property
    def metadata_column(self) -> str:
        return self._metadata_column or settings.METADATA_COLUMN

    def convert_key_to_context(self, filter_key: Key, context: StringBuilder) -> None:
        field = filter_key.key
        if field in BASE_COLUMNS:
            context.append(quote_identifier(field, quote="`"))
            return

        column = quote_identifier(self.metadata_column, quote="`")
        json_path = escape_sql_string(f"$.{field}", escape_backslash=True)
        context.append(f"JSON_VALUE({column}, {json_path})")

    def convert_single_value_to_context(self, value: Scalar, context: StringBuilder) -> None:
        if isinstance(value, bool):
            context.append("'true'" if value else "'false'")
        elif isinstance(value, str):
            context.append(escape_sql_string(value, escape_backslash=True))
        else:
            context.append(str(value))

    def write_value_range_start(self, list_value: Value, context: StringBuilder) -> None:
        context.append("(")

    def write_value_range_end(self, list_value: Value, context: StringBuilder) -> None:
        context.append(")")

    def write_value_range_separator(self, list_value: Value, context: StringBuilder) -> None:
        context.append(", ")


mariadb_dialect = MariaDBDialect()
