"""PostgreSQL / pgvector dialect.

Renders filters as SQL WHERE clauses over a JSONB metadata column.

PgVector (PostgreSQL with JSONB) supports:
- Comparison: =, !=, >, <, >=, <= (with type casting for JSONB text)
- Range: IN, NOT IN with parenthesised lists
- Logical: AND, OR

Limitations:
- ``->>`` extracts text, so numeric and boolean comparisons cast the left side
- Nested fields use the ``#>>`` path operator
"""

from typing import Optional

from metafilter.constants import BASE_COLUMNS
from metafilter.expression.operands import LOGICAL_OPERATORS, Expression, Key, Value
from metafilter.settings import settings
from metafilter.types import Scalar

from .base import FilterDialect, OperandWriter, StringBuilder
from .utils import escape_sql_string, format_scalar, quote_identifier, split_path

__all__ = (
    "PgVectorDialect",
    "pgvector_dialect",
)


def _array_element(segment: str) -> str:
    """Double-quote one element of a text[] literal so commas and braces stay inside it."""
    return '"' + segment.replace("\\", "\\\\").replace('"', '\\"') + '"'


class PgVectorDialect(FilterDialect):
    """Render filter expressions as PostgreSQL boolean conditions.

    Example output::

        ("metadata"->>'year')::numeric >= 2020 AND "metadata"->>'genre' IN ('drama', 'comedy')

    Args:
        metadata_column: JSONB column holding metadata, `METADATA_COLUMN` from settings by default.
    """

    name = "pgvector"

    def __init__(self, metadata_column: Optional[str] = None) -> None:
        self._metadata_column = metadata_column

    @property
    def metadata_column(self) -> str:
        return self._metadata_column or settings.METADATA_COLUMN

    def convert_expression_to_context(
        self, expression: Expression, context: StringBuilder, convert_operand: OperandWriter
    ) -> None:
        cast = self._left_cast(expression)
        if cast:
            context.append("(")
            convert_operand(expression.left, context)
            context.append(f")::{cast}")
        else:
            convert_operand(expression.left, context)
        self.convert_symbol_to_context(expression, context)
        convert_operand(expression.right, context)

    def convert_key_to_context(self, filter_key: Key, context: StringBuilder) -> None:
        field = filter_key.key
        column = quote_identifier(self.metadata_column)
        if field in BASE_COLUMNS:
            context.append(quote_identifier(field))
        elif "." in field:
            path_elems = ",".join(_array_element(p) for p in split_path(field))
            context.append(f"{column} #>> {escape_sql_string('{' + path_elems + '}')}")
        else:
            context.append(f"{column}->>{escape_sql_string(field)}")

    def convert_single_value_to_context(self, value: Scalar, context: StringBuilder) -> None:
        if isinstance(value, str):
            context.append(escape_sql_string(value))
        else:
            context.append(format_scalar(value))

    def write_value_range_start(self, list_value: Value, context: StringBuilder) -> None:
        context.append("(")

    def write_value_range_end(self, list_value: Value, context: StringBuilder) -> None:
        context.append(")")

    def write_value_range_separator(self, list_value: Value, context: StringBuilder) -> None:
        context.append(", ")

    def _left_cast(self, expression: Expression) -> Optional[str]:
        """Pick the cast of the extracted JSON text from the kind of the compared value."""
        if expression.operator in LOGICAL_OPERATORS or not isinstance(expression.left, Key):
            return None
        if expression.left.key in BASE_COLUMNS:
            return None

        value = expression.right.value
        items = value if isinstance(value, tuple) else (value,)
        if all(isinstance(item, bool) for item in items):
            return "boolean"
        if all(isinstance(item, (int, float)) and not isinstance(item, bool) for item in items):
            return "numeric"
        return None


pgvector_dialect = PgVectorDialect()
