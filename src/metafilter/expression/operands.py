"""Filter expression operands.

This module defines the abstract syntax tree of a metadata filter. A tree is
built from four operand kinds:

- `Key`: a metadata field name, e.g. ``"year"`` or ``"info.lang"``
- `Value`: a scalar or a homogeneous sequence of scalars
- `Expression`: an operator applied to a left and an optional right operand
- `Group`: an expression which must be rendered in parentheses

Nodes are frozen pydantic models: they never change after construction and
compare structurally, so a rewritten tree can be checked against an expected one
with ``==``.

Typical usage:

- Build filters: `Expression(Operator.GTE, Key("age"), Value(18))`
- Combine: `expr1 & Group(expr2 | expr3)`
- Negate: `~expr`
- Convert: `expr.to_expr("pgvector")`
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from metafilter.constants import Dialect
from metafilter.types import ValueType

Operand = Union["Key", "Value", "Expression", "Group"]


class Operator(str, Enum):
    """Enumeration of supported filter operations"""

    AND = "AND"
    OR = "OR"
    EQ = "EQ"
    NE = "NE"
    GT = "GT"
    GTE = "GTE"
    LT = "LT"
    LTE = "LTE"
    IN = "IN"
    NIN = "NIN"
    NOT = "NOT"


LOGICAL_OPERATORS = frozenset({Operator.AND, Operator.OR, Operator.NOT})
MEMBERSHIP_OPERATORS = frozenset({Operator.IN, Operator.NIN})


def _scalar_kind(item: Any) -> Optional[str]:
    # bool is a subclass of int, check it first
    if isinstance(item, bool):
        return "boolean"
    if isinstance(item, (int, float)):
        return "number"
    if isinstance(item, str):
        return "string"
    return None


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class _BooleanNode(_Node):
    """Shared operator shortcuts of nodes which evaluate to a boolean.

    - Use `&` to combine with logical AND.
    - Use `|` to combine with logical OR.
    - Use `~` to negate a node.
    """

    def __and__(self, other: Operand) -> "Expression":
        return Expression(Operator.AND, self, other)

    def __or__(self, other: Operand) -> "Expression":
        return Expression(Operator.OR, self, other)

    def __invert__(self) -> "Expression":
        return Expression(Operator.NOT, self)

    def to_expr(self, dialect: Optional[str] = None) -> str:
        """Convert this node into the filter syntax of `dialect`.

        If `dialect` is not given, `DEFAULT_DIALECT` from settings is used.
        """
        from metafilter.converters import get_converter

        return get_converter(dialect).convert_expression(self)

    def __str__(self) -> str:
        return self.to_expr(Dialect.GENERIC)


class Key(_Node):
    """Represents a metadata field name in a filter expression"""

    key: str

    def __init__(self, key: str) -> None:
        super().__init__(key=key)

    @field_validator("key")
    @classmethod
    def _check_key(cls, key: str) -> str:
        if not key.strip():
            raise ValueError("Key cannot be empty")
        return key


class Value(_Node):
    """Represents a scalar value or a list of values in a filter expression.

    Sequences (and sets, which are sorted) are stored as tuples and must hold
    items of a single kind: numbers, strings or booleans.
    """

    value: Any

    def __init__(self, value: ValueType) -> None:
        super().__init__(value=value)

    @field_validator("value", mode="before")
    @classmethod
    def _normalize_value(cls, value: Any) -> Any:
        if _scalar_kind(value) is not None:
            return value

        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError(f"Unsupported value type: {type(value).__name__}")

        kinds = {_scalar_kind(item) for item in value}
        if None in kinds:
            raise ValueError("Value sequence items must be numbers, strings or booleans")
        if len(kinds) > 1:
            raise ValueError(f"Value sequence must be homogeneous, got {', '.join(sorted(kinds))}")

        return tuple(sorted(value)) if isinstance(value, (set, frozenset)) else tuple(value)

    @property
    def is_range(self) -> bool:
        """`True` when the value is a list of values rather than a scalar."""
        return isinstance(self.value, tuple)

    def _typed_value(self) -> tuple:
        # 1, 1.0 and True compare equal in Python but render differently
        if self.is_range:
            return (tuple, tuple((type(item), item) for item in self.value))
        return (type(self.value), self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._typed_value() == other._typed_value()

    def __hash__(self) -> int:
        return hash(self._typed_value())


class Expression(_BooleanNode):
    """
    Represents a boolean filter expression with a specific structure:
    - Consists of an operator, a left operand and an optional right operand
    - Comparisons hold a `Key` on the left and a `Value` on the right
    - AND/OR hold expressions or groups on both sides, NOT only on the left
    """

    operator: Operator
    left: Operand
    right: Optional[Operand] = None

    def __init__(self, operator: Operator, left: Operand, right: Optional[Operand] = None) -> None:
        super().__init__(operator=operator, left=left, right=right)


class Group(_BooleanNode):
    """
    Represents an expression that should be evaluated as a single unit
    - Analogous to parentheses in mathematical or logical expressions
    - Controls rendered precedence of nested AND/OR combinations
    """

    content: Expression

    def __init__(self, content: Expression) -> None:
        super().__init__(content=content)


Expression.model_rebuild()
Group.model_rebuild()
