"""Filter expression module.

Exports the operand model, the `FilterExpressionBuilder` for composing filter
trees and `negate_operand` for NOT push-down. Rendering into store specific
syntax is handled by the `metafilter.converters` subpackage.
"""

from .builder import FilterExpressionBuilder
from .negation import TYPE_NEGATION_MAP, negate_operand
from .operands import Expression, Group, Key, Operand, Operator, Value

__all__ = (
    "Expression",
    "FilterExpressionBuilder",
    "Group",
    "Key",
    "Operand",
    "Operator",
    "TYPE_NEGATION_MAP",
    "Value",
    "negate_operand",
)
