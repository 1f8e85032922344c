"""Fluent builder for filter expressions."""

from typing import Optional, Sequence, Union

from metafilter.types import Scalar, ValueType

from .operands import Expression, Group, Key, Operand, Operator, Value

__all__ = ("FilterExpressionBuilder",)


def _value(value: Optional[ValueType]) -> Optional[Value]:
    # presence decides, not truthiness: 0, "" and False are real filter values
    return Value(value) if value is not None else None


class FilterExpressionBuilder:
    """
    Fluent builder for creating composable filter expressions

    Features:
    - Equality and inequality checks
    - Ordering comparisons (greater than, less than, etc.)
    - Logical combinations (AND, OR, NOT)
    - Collection membership tests (IN, NOT IN)
    - Expression grouping for nested conditions

    Examples:
        >>> b = FilterExpressionBuilder()
        >>> b.and_(b.eq("genre", "drama"), b.gte("year", 2020)).to_expr()
        "'$.genre' = 'drama' AND '$.year' >= 2020"

    Trees keep exactly the shape they were built with: combinators are neither
    flattened nor re-associated.
    """

    def eq(self, key: str, value: ValueType) -> Expression:
        return Expression(Operator.EQ, Key(key), _value(value))

    def ne(self, key: str, value: ValueType) -> Expression:
        return Expression(Operator.NE, Key(key), _value(value))

    def gt(self, key: str, value: Scalar) -> Expression:
        return Expression(Operator.GT, Key(key), _value(value))

    def gte(self, key: str, value: Scalar) -> Expression:
        return Expression(Operator.GTE, Key(key), _value(value))

    def lt(self, key: str, value: Scalar) -> Expression:
        return Expression(Operator.LT, Key(key), _value(value))

    def lte(self, key: str, value: Scalar) -> Expression:
        return Expression(Operator.LTE, Key(key), _value(value))

    def in_(self, key: str, values: Sequence[Scalar]) -> Expression:
        """Check if a key's value is one of `values`"""
        return Expression(Operator.IN, Key(key), _value(values))

    def nin(self, key: str, values: Sequence[Scalar]) -> Expression:
        """Check if a key's value is none of `values`"""
        return Expression(Operator.NIN, Key(key), _value(values))

    def and_(self, left: Operand, right: Operand) -> Expression:
        return Expression(Operator.AND, left, right)

    def or_(self, left: Operand, right: Operand) -> Expression:
        return Expression(Operator.OR, left, right)

    def group(self, content: Expression) -> Group:
        return Group(content)

    def not_(self, content: Union[Expression, Group]) -> Expression:
        return Expression(Operator.NOT, content)

    # Readable aliases for the keyword-clashing names
    includes = in_
    excludes = nin
    both = and_
    either = or_
    negate = not_
