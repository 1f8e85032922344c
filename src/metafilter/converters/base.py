"""Base conversion framework.

Defines the hook contract every dialect implements (`FilterDialect`) and the
fixed tree walk (`FilterExpressionConverter`) which drives those hooks. The walk
owns dispatch order, structural validation and NOT push-down; a dialect only
decides how keys, values, symbols and delimiters are spelled.
"""

from typing import Callable, ClassVar, Dict, List, Union

from metafilter.exceptions import (
    MalformedExpressionError,
    UnexpectedOperandTypeError,
    UnimplementedHookError,
    UnsupportedOperatorError,
)
from metafilter.expression.negation import negate_operand
from metafilter.expression.operands import (
    LOGICAL_OPERATORS,
    MEMBERSHIP_OPERATORS,
    Expression,
    Group,
    Key,
    Operand,
    Operator,
    Value,
)
from metafilter.logger import get_logger
from metafilter.types import Scalar

from .utils import format_scalar

__all__ = (
    "FilterDialect",
    "FilterExpressionConverter",
    "StringBuilder",
)

logger = get_logger(__name__)


class StringBuilder:
    """Simple StringBuilder implementation for efficient string concatenation"""

    def __init__(self) -> None:
        self.buffer: List[str] = []
        self._length: int = 0

    def append(self, string: str) -> None:
        if not isinstance(string, str):
            raise TypeError(f"Can only append strings, got {type(string)}")
        self.buffer.append(string)
        self._length += len(string)

    def __str__(self) -> str:
        return "".join(self.buffer)

    def __len__(self) -> int:
        return self._length


OperandWriter = Callable[[Operand, StringBuilder], None]


class FilterDialect:
    """Rendering hooks of a filter query syntax.

    Subclasses must implement `convert_key_to_context`; every other hook has a
    default which produces SQL-like output:

    - comparisons: ``key = 'value'``, ``key >= 10``, ``key IN ['a','b']``
    - logical: ``a AND b``, ``a OR b``; NOT never reaches a dialect
    - groups: ``(...)``
    - empty membership lists: ``FALSE`` for IN, ``TRUE`` for NOT IN
    """

    name: ClassVar[str] = "base"

    # Operator mapping from filter operators to the dialect syntax
    _SYMBOL_MAP: ClassVar[Dict[Operator, str]] = {
        Operator.AND: " AND ",
        Operator.OR: " OR ",
        Operator.EQ: " = ",
        Operator.NE: " != ",
        Operator.LT: " < ",
        Operator.LTE: " <= ",
        Operator.GT: " > ",
        Operator.GTE: " >= ",
        Operator.IN: " IN ",
        Operator.NIN: " NOT IN ",
    }

    TRUE_LITERAL: ClassVar[str] = "TRUE"
    FALSE_LITERAL: ClassVar[str] = "FALSE"

    def convert_expression_to_context(
        self, expression: Expression, context: StringBuilder, convert_operand: OperandWriter
    ) -> None:
        """Render a validated, NOT-free expression as ``left <symbol> right``.

        `convert_operand` renders sub-operands through the converter walk, so nested
        groups, negations and lists are handled before control returns here.
        """
        convert_operand(expression.left, context)
        self.convert_symbol_to_context(expression, context)
        convert_operand(expression.right, context)

    def convert_symbol_to_context(self, expression: Expression, context: StringBuilder) -> None:
        symbol = self._SYMBOL_MAP.get(expression.operator)
        if symbol is None:
            raise UnsupportedOperatorError(
                f"Operator is not supported. Supported: {', '.join(sorted(op.value for op in self._SYMBOL_MAP))}",
                operator=expression.operator,
                dialect=self.name,
            )
        context.append(symbol)

    def convert_key_to_context(self, filter_key: Key, context: StringBuilder) -> None:
        raise UnimplementedHookError(
            "Dialect must render field references",
            hook="convert_key_to_context",
            dialect=type(self).__name__,
        )

    def convert_single_value_to_context(self, value: Scalar, context: StringBuilder) -> None:
        if isinstance(value, str):
            context.append(f"'{value}'")
        else:
            context.append(format_scalar(value))

    def convert_empty_range_to_context(self, expression: Expression, context: StringBuilder) -> None:
        """Render membership in an empty list: IN matches nothing, NOT IN matches everything."""
        context.append(self.TRUE_LITERAL if expression.operator == Operator.NIN else self.FALSE_LITERAL)

    def write_group_start(self, group: Group, context: StringBuilder) -> None:
        context.append("(")

    def write_group_end(self, group: Group, context: StringBuilder) -> None:
        context.append(")")

    def write_value_range_start(self, list_value: Value, context: StringBuilder) -> None:
        context.append("[")

    def write_value_range_end(self, list_value: Value, context: StringBuilder) -> None:
        context.append("]")

    def write_value_range_separator(self, list_value: Value, context: StringBuilder) -> None:
        context.append(",")


class FilterExpressionConverter:
    """Convert filter expression trees into strings using a `FilterDialect`.

    Examples:
        >>> converter = FilterExpressionConverter(GenericDialect())
        >>> converter.convert_expression(b.not_(b.in_("year", [2015, 2018])))
        "'$.year' NOT IN [2015,2018]"

    A converter holds no per-call state; one instance can serve any number of
    conversions, including concurrent ones.
    """

    def __init__(self, dialect: FilterDialect) -> None:
        self.dialect = dialect

    def convert_expression(self, expression: Union[Expression, Group]) -> str:
        """Transform a filter expression into a string in the dialect syntax.

        Args:
            expression: Root of the filter tree.

        Raises:
            MalformedExpressionError: If a comparison has no `Value` on its right.
            UnsupportedOperatorError: If an operator is unknown to the dialect or negation.
            UnexpectedOperandTypeError: If the tree holds something other than operands.
            UnimplementedHookError: If the dialect lacks a mandatory hook.

        Returns:
            The rendered filter.
        """
        context = StringBuilder()
        self.convert_operand_to_context(expression, context)
        result = str(context)
        logger.debug("Converted filter for %s dialect: %s", self.dialect.name, result)
        return result

    def convert_operand_to_context(self, operand: Operand, context: StringBuilder) -> None:
        if isinstance(operand, Group):
            self._convert_group_to_context(operand, context)
        elif isinstance(operand, Key):
            self.dialect.convert_key_to_context(operand, context)
        elif isinstance(operand, Value):
            self._convert_value_to_context(operand, context)
        elif isinstance(operand, Expression):
            self._convert_expression_node_to_context(operand, context)
        else:
            raise UnexpectedOperandTypeError("Unexpected operand type", operand_type=type(operand).__name__)

    def _convert_expression_node_to_context(self, expression: Expression, context: StringBuilder) -> None:
        if expression.operator not in LOGICAL_OPERATORS and not isinstance(expression.right, Value):
            raise MalformedExpressionError(
                "Non AND/OR expression must have Value right argument",
                operator=expression.operator,
                right_type=type(expression.right).__name__,
            )

        if expression.operator == Operator.NOT:
            self.convert_operand_to_context(negate_operand(expression.left), context)
        elif expression.operator in MEMBERSHIP_OPERATORS and expression.right.is_range and not expression.right.value:
            self.dialect.convert_empty_range_to_context(expression, context)
        else:
            self.dialect.convert_expression_to_context(expression, context, self.convert_operand_to_context)

    def _convert_group_to_context(self, group: Group, context: StringBuilder) -> None:
        self.dialect.write_group_start(group, context)
        self.convert_operand_to_context(group.content, context)
        self.dialect.write_group_end(group, context)

    def _convert_value_to_context(self, filter_value: Value, context: StringBuilder) -> None:
        if not filter_value.is_range:
            self.dialect.convert_single_value_to_context(filter_value.value, context)
            return

        self.dialect.write_value_range_start(filter_value, context)
        for i, value in enumerate(filter_value.value):
            if i > 0:
                self.dialect.write_value_range_separator(filter_value, context)
            self.dialect.convert_single_value_to_context(value, context)
        self.dialect.write_value_range_end(filter_value, context)
