"""Custom exceptions for the metafilter library.

This module defines all custom exceptions raised while building and converting
filter expressions, so callers get consistent error handling and clear messages.
"""

from typing import Any, Dict


# Base exception
class MetaFilterError(Exception):
    """Base exception for all metafilter errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., operator, operand_type, dialect)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Expression conversion exceptions
class FilterExpressionError(MetaFilterError):
    """Base exception for errors raised while walking a filter expression tree.

    Example:
        >>> raise FilterExpressionError("Conversion failed", dialect="generic")
    """


class MalformedExpressionError(FilterExpressionError):
    """Raised when a comparison expression does not carry a `Value` on its right.

    Example:
        >>> raise MalformedExpressionError("Non AND/OR expression must have Value right argument", operator="EQ")
    """


class UnsupportedOperatorError(FilterExpressionError):
    """Raised when an operator is missing from a symbol or negation table.

    Example:
        >>> raise UnsupportedOperatorError("Operator has no symbol", operator="NOT")
    """


class UnexpectedOperandTypeError(FilterExpressionError):
    """Raised when an operand is not a Key, Value, Expression or Group.

    Example:
        >>> raise UnexpectedOperandTypeError("Unexpected operand type", operand_type="dict")
    """


class UnimplementedHookError(FilterExpressionError, NotImplementedError):
    """Raised when a dialect does not provide a mandatory rendering hook.

    Example:
        >>> raise UnimplementedHookError("Hook must be implemented by the dialect", hook="convert_key_to_context")
    """


# Configuration exceptions
class ConfigurationError(MetaFilterError):
    """Raised when configuration is invalid or missing.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="DEFAULT_DIALECT", value="oracle")
    """


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid.

    Example:
        >>> raise InvalidConfigError("Unknown dialect", config_key="DEFAULT_DIALECT", value="oracle")
    """
