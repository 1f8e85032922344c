"""Pytest configuration and fixtures for filter expression tests."""

import pytest

from metafilter.converters import FilterExpressionConverter, GenericDialect, StringBuilder
from metafilter.expression import FilterExpressionBuilder


@pytest.fixture(scope="session")
def b() -> FilterExpressionBuilder:
    """Shared expression builder (stateless)."""
    return FilterExpressionBuilder()


@pytest.fixture(scope="session")
def generic() -> FilterExpressionConverter:
    """Converter of the reference dialect with its default ``'$.<key>'`` field references."""
    return FilterExpressionConverter(GenericDialect(path_prefix="$."))


@pytest.fixture
def context() -> StringBuilder:
    return StringBuilder()
