"""Generic (reference) dialect.

Renders filters with JSON-path style field references and SQL-like operators:

    '$.name' = 'martin' AND ('$.year' >= 2020 OR '$.tags' IN ['a','b'])

This is the dialect used when no store specific syntax is requested.
"""

from typing import Optional

from metafilter.expression.operands import Key
from metafilter.settings import settings

from .base import FilterDialect, StringBuilder

__all__ = (
    "GenericDialect",
    "generic_dialect",
)


class GenericDialect(FilterDialect):
    """Reference dialect: ``'$.<key>' <symbol> <value>``.

    Args:
        path_prefix: Prefix of field references, `JSON_PATH_PREFIX` from settings by default.
    """

    name = "generic"

    def __init__(self, path_prefix: Optional[str] = None) -> None:
        self._path_prefix = path_prefix

    @property
    def path_prefix(self) -> str:
        return self._path_prefix if self._path_prefix is not None else settings.JSON_PATH_PREFIX

    def convert_key_to_context(self, filter_key: Key, context: StringBuilder) -> None:
        context.append(f"'{self.path_prefix}{filter_key.key}'")


generic_dialect = GenericDialect()
