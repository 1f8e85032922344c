"""
Conformance tests for the reference (generic) dialect and the conversion walk.
"""

import pytest

from metafilter.converters import FilterExpressionConverter, GenericDialect
from metafilter.exceptions import MalformedExpressionError, UnexpectedOperandTypeError
from metafilter.expression import Expression, Key, Operator, Value


class TestComparisons:
    @pytest.mark.parametrize(
        "method,expected",
        [
            ("eq", "'$.a' = 2015"),
            ("ne", "'$.a' != 2015"),
            ("gt", "'$.a' > 2015"),
            ("gte", "'$.a' >= 2015"),
            ("lt", "'$.a' < 2015"),
            ("lte", "'$.a' <= 2015"),
        ],
    )
    def test_scalar_comparisons(self, b, generic, method, expected):
        assert generic.convert_expression(getattr(b, method)("a", 2015)) == expected

    def test_membership(self, b, generic):
        assert generic.convert_expression(b.in_("a", [2015, 2018])) == "'$.a' IN [2015,2018]"
        assert generic.convert_expression(b.nin("a", [2015, 2018])) == "'$.a' NOT IN [2015,2018]"

    def test_value_rendering(self, b, generic):
        assert generic.convert_expression(b.eq("name", "martin")) == "'$.name' = 'martin'"
        assert generic.convert_expression(b.gt("score", 0.5)) == "'$.score' > 0.5"
        assert generic.convert_expression(b.eq("active", True)) == "'$.active' = true"
        assert generic.convert_expression(b.in_("tag", ["a", "b"])) == "'$.tag' IN ['a','b']"
        assert generic.convert_expression(b.in_("flag", [True, False])) == "'$.flag' IN [true,false]"
        assert generic.convert_expression(b.in_("a", [7])) == "'$.a' IN [7]"

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "'$.f' = 0"), ("", "'$.f' = ''"), (False, "'$.f' = false")],
    )
    def test_falsy_values_are_rendered(self, b, generic, value, expected):
        assert generic.convert_expression(b.eq("f", value)) == expected

    def test_custom_path_prefix(self, b):
        converter = FilterExpressionConverter(GenericDialect(path_prefix="meta."))
        assert converter.convert_expression(b.eq("a", 1)) == "'meta.a' = 1"


class TestNegation:
    @pytest.mark.parametrize(
        "method,values,expected",
        [
            ("eq", 2015, "'$.a' != 2015"),
            ("ne", 2015, "'$.a' = 2015"),
            ("gte", 2015, "'$.a' < 2015"),
            ("lte", 2015, "'$.a' > 2015"),
            ("gt", 2015, "'$.a' <= 2015"),
            ("lt", 2015, "'$.a' >= 2015"),
            ("in_", [2015, 2018], "'$.a' NOT IN [2015,2018]"),
            ("nin", [2015, 2018], "'$.a' IN [2015,2018]"),
        ],
    )
    def test_negated_comparisons(self, b, generic, method, values, expected):
        assert generic.convert_expression(b.not_(getattr(b, method)("a", values))) == expected

    def test_double_not_cancels(self, b, generic):
        assert generic.convert_expression(b.not_(b.not_(b.eq("a", 2015)))) == "'$.a' = 2015"

    def test_not_nested_inside_combinators(self, b, generic):
        expr = b.and_(b.eq("a", 1), b.group(b.or_(b.not_(b.eq("c", 2)), b.eq("d", 3))))
        assert generic.convert_expression(expr) == "'$.a' = 1 AND ('$.c' != 2 OR '$.d' = 3)"

    def test_not_of_group(self, b, generic):
        expr = b.not_(b.group(b.and_(b.eq("a", 1), b.eq("c", 2))))
        assert generic.convert_expression(expr) == "('$.a' != 1 OR '$.c' != 2)"

    @pytest.mark.parametrize("combinator", ["and_", "or_"])
    def test_de_morgan_matches_direct_rendering(self, b, generic, combinator):
        left, right = b.eq("name", "martin"), b.in_("year", [2015, 2018])
        negated = generic.convert_expression(b.not_(getattr(b, combinator)(left, right)))
        other = "or_" if combinator == "and_" else "and_"
        direct = generic.convert_expression(getattr(b, other)(b.not_(left), b.not_(right)))
        assert negated == direct


class TestGroups:
    def test_and_or(self, b, generic):
        assert (
            generic.convert_expression(b.and_(b.eq("name", "martin"), b.eq("firstname", "john")))
            == "'$.name' = 'martin' AND '$.firstname' = 'john'"
        )
        assert (
            generic.convert_expression(b.or_(b.eq("name", "martin"), b.eq("firstname", "john")))
            == "'$.name' = 'martin' OR '$.firstname' = 'john'"
        )

    def test_negated_and_or(self, b, generic):
        assert (
            generic.convert_expression(b.not_(b.and_(b.eq("name", "martin"), b.eq("firstname", "john"))))
            == "'$.name' != 'martin' OR '$.firstname' != 'john'"
        )
        assert (
            generic.convert_expression(b.not_(b.or_(b.eq("name", "martin"), b.eq("firstname", "john"))))
            == "'$.name' != 'martin' AND '$.firstname' != 'john'"
        )

    def test_grouping_precedence(self, b, generic):
        expr = b.and_(
            b.eq("name", "martin"),
            b.group(b.or_(b.eq("firstname", "john"), b.eq("firstname", "jack"))),
        )
        assert (
            generic.convert_expression(expr)
            == "'$.name' = 'martin' AND ('$.firstname' = 'john' OR '$.firstname' = 'jack')"
        )

    def test_negated_grouping(self, b, generic):
        expr = b.not_(
            b.and_(
                b.eq("name", "martin"),
                b.group(b.or_(b.eq("firstname", "john"), b.eq("firstname", "jack"))),
            )
        )
        assert (
            generic.convert_expression(expr)
            == "'$.name' != 'martin' OR ('$.firstname' != 'john' AND '$.firstname' != 'jack')"
        )

    def test_group_as_root(self, b, generic):
        assert generic.convert_expression(b.group(b.eq("a", 1))) == "('$.a' = 1)"

    def test_tree_shape_is_preserved(self, b, generic):
        expr = b.or_(b.and_(b.eq("a", 1), b.eq("c", 2)), b.eq("d", 3))
        assert generic.convert_expression(expr) == "'$.a' = 1 AND '$.c' = 2 OR '$.d' = 3"


class TestEmptyMembership:
    def test_empty_in_is_false(self, b, generic):
        assert generic.convert_expression(b.in_("a", [])) == "FALSE"

    def test_empty_nin_is_true(self, b, generic):
        assert generic.convert_expression(b.nin("a", [])) == "TRUE"

    def test_negation_swaps_empty_membership(self, b, generic):
        assert generic.convert_expression(b.not_(b.in_("a", []))) == "TRUE"
        assert generic.convert_expression(b.not_(b.nin("a", []))) == "FALSE"

    def test_empty_membership_inside_combinator(self, b, generic):
        assert generic.convert_expression(b.and_(b.eq("a", 1), b.in_("c", []))) == "'$.a' = 1 AND FALSE"


class TestStructuralValidation:
    def test_key_on_the_right_is_malformed(self, generic):
        expr = Expression(Operator.EQ, Key("a"), Key("b"))
        with pytest.raises(MalformedExpressionError):
            generic.convert_expression(expr)

    def test_missing_value_is_malformed(self, b, generic):
        with pytest.raises(MalformedExpressionError):
            generic.convert_expression(b.eq("a", None))

    def test_malformed_leaf_deep_in_tree(self, b, generic):
        expr = b.or_(b.eq("a", 1), b.group(b.not_(b.and_(b.eq("c", 2), b.gt("d", None)))))
        with pytest.raises(MalformedExpressionError):
            generic.convert_expression(expr)

    def test_unexpected_operand_type(self, generic, context):
        with pytest.raises(UnexpectedOperandTypeError):
            generic.convert_operand_to_context({"a": 1}, context)

    def test_unexpected_operand_inside_tree(self, generic):
        expr = Expression.model_construct(operator=Operator.AND, left="'$.a' = 1", right=Value(1))
        with pytest.raises(UnexpectedOperandTypeError):
            generic.convert_expression(expr)
