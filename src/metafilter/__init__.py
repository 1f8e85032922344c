"""
metafilter: platform independent metadata filter expressions.

Build filters once with `FilterExpressionBuilder` (or the `&`, `|`, `~`
operators on expressions) and convert them into the filter syntax of a
specific store with a dialect converter.
"""

from .converters import FilterDialect, FilterExpressionConverter, get_converter, register_dialect
from .expression import (
    Expression,
    FilterExpressionBuilder,
    Group,
    Key,
    Operator,
    Value,
    negate_operand,
)

__version__ = "0.1.0"

__all__ = [
    "Expression",
    "FilterDialect",
    "FilterExpressionBuilder",
    "FilterExpressionConverter",
    "Group",
    "Key",
    "Operator",
    "Value",
    "get_converter",
    "negate_operand",
    "register_dialect",
]
