"""Milvus-specific dialect.

Renders filters as Milvus boolean expressions over a JSON metadata field.

Milvus supports:
- Comparison: ==, !=, >, <, >=, <=
- Range: in, not in with bracketed lists
- Logical: && (and), || (or)

Limitations:
- String literals are double quoted with JSON escaping
- Boolean literals are lowercase ``true`` / ``false``
"""

import json
from typing import ClassVar, Dict, Optional

from metafilter.constants import BASE_COLUMNS
from metafilter.expression.operands import Key, Operator, Value
from metafilter.settings import settings
from metafilter.types import Scalar

from .base import FilterDialect, StringBuilder
from .utils import format_scalar, split_path

__all__ = (
    "MilvusDialect",
    "milvus_dialect",
)


class MilvusDialect(FilterDialect):
    """Render filter expressions as Milvus filter strings.

    Example output::

        metadata["year"] >= 2020 && metadata["info"]["lang"] in ["en", "de"]

    Args:
        metadata_column: JSON field holding metadata, `METADATA_COLUMN` from settings by default.
    """

    name = "milvus"

    _SYMBOL_MAP: ClassVar[Dict[Operator, str]] = {
        Operator.AND: " && ",
        Operator.OR: " || ",
        Operator.EQ: " == ",
        Operator.NE: " != ",
        Operator.LT: " < ",
        Operator.LTE: " <= ",
        Operator.GT: " > ",
        Operator.GTE: " >= ",
        Operator.IN: " in ",
        Operator.NIN: " not in ",
    }

    TRUE_LITERAL = "true"
    FALSE_LITERAL = "false"

    def __init__(self, metadata_column: Optional[str] = None) -> None:
        self._metadata_column = metadata_column

    @property
    def metadata_column(self) -> str:
        return self._metadata_column or settings.METADATA_COLUMN

    def convert_key_to_context(self, filter_key: Key, context: StringBuilder) -> None:
        field = filter_key.key
        if field in BASE_COLUMNS:
            context.append(field)
            return

        path = "".join(f"[{json.dumps(part)}]" for part in split_path(field))
        context.append(f"{self.metadata_column}{path}")

    def convert_single_value_to_context(self, value: Scalar, context: StringBuilder) -> None:
        if isinstance(value, str):
            context.append(json.dumps(value))
        else:
            context.append(format_scalar(value))

    def write_value_range_separator(self, list_value: Value, context: StringBuilder) -> None:
        context.append(", ")


milvus_dialect = MilvusDialect()
