"""Type aliases for metafilter package.

This module provides reusable type definitions shared by the operand model,
the builder and the converters.
"""

from typing import Sequence, Union

# Scalar metadata values a filter can compare against
Scalar = Union[int, float, str, bool]

# Scalar or homogeneous sequence of scalars (membership operators)
ValueType = Union[Scalar, Sequence[int], Sequence[float], Sequence[str], Sequence[bool]]
