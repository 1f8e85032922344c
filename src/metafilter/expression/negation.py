"""Negation push-down for filter expressions.

Stores rarely support a generic NOT around arbitrary sub-expressions, so a
negated tree is rewritten into an equivalent tree without NOT nodes:

- ``NOT (a AND b)`` becomes ``NOT a OR NOT b`` (De Morgan)
- ``NOT (a OR b)`` becomes ``NOT a AND NOT b`` (De Morgan)
- ``NOT (k = v)`` becomes ``k != v`` and likewise for every comparison
- ``NOT (NOT a)`` becomes ``a``
"""

from typing import Dict

from metafilter.exceptions import UnexpectedOperandTypeError, UnsupportedOperatorError

from .operands import Expression, Group, Operand, Operator

__all__ = (
    "TYPE_NEGATION_MAP",
    "negate_operand",
)

# Operator negation mapping
TYPE_NEGATION_MAP: Dict[Operator, Operator] = {
    Operator.AND: Operator.OR,
    Operator.OR: Operator.AND,
    Operator.EQ: Operator.NE,
    Operator.NE: Operator.EQ,
    Operator.GT: Operator.LTE,
    Operator.GTE: Operator.LT,
    Operator.LT: Operator.GTE,
    Operator.LTE: Operator.GT,
    Operator.IN: Operator.NIN,
    Operator.NIN: Operator.IN,
}


def negate_operand(operand: Operand) -> Operand:
    """Return the logical negation of `operand` as a tree free of NOT nodes.

    Args:
        operand: Expression or group to negate.

    Raises:
        UnexpectedOperandTypeError: If `operand` is a bare key, value or not an operand at all.
        UnsupportedOperatorError: If the expression operator has no negation.

    Returns:
        An equivalent negated operand. Negating a group yields a group; the input is never mutated.
    """
    if isinstance(operand, Group):
        negated = negate_operand(operand.content)
        if isinstance(negated, Group):
            negated = negated.content
        return Group(negated)

    if not isinstance(operand, Expression):
        raise UnexpectedOperandTypeError("Cannot negate operand", operand_type=type(operand).__name__)

    if operand.operator == Operator.NOT:
        # double negation cancels, inner NOT nodes still have to be resolved
        return negate_operand(negate_operand(operand.left))

    if operand.operator not in TYPE_NEGATION_MAP:
        raise UnsupportedOperatorError("Unknown expression operator", operator=operand.operator)

    if operand.operator in (Operator.AND, Operator.OR):
        return Expression(
            TYPE_NEGATION_MAP[operand.operator],
            negate_operand(operand.left),
            negate_operand(operand.right),
        )

    return Expression(TYPE_NEGATION_MAP[operand.operator], operand.left, operand.right)
