"""
Tests for the low-level node constructors.
"""

import pytest

from csscalc import EmptyInputError, MissingArgumentError, create, serialize
from csscalc.ast import (
    DimensionNode,
    DimensionNumberNode,
    DimensionUnitNode,
    KeywordNode,
    NumberNode,
    PercentageNode,
    PercentageNumberNode,
    TokenNode,
)


class TestFormatNumber:
    """Tests for number formatting."""

    def test_formats_integers(self):
        assert create.format_number(42) == "42"
        assert create.format_number(-3) == "-3"

    def test_drops_trailing_zero_of_integral_floats(self):
        assert create.format_number(2.0) == "2"

    def test_formats_fractional_floats(self):
        assert create.format_number(1.5) == "1.5"
        assert create.format_number(0.1) == "0.1"

    def test_keeps_strings_verbatim(self):
        assert create.format_number("3.140") == "3.140"


class TestValues:
    """Tests for value constructors."""

    def test_number_from_numeric_value(self):
        result = create.number(42)
        assert result == NumberNode("42")
        assert result.kind == "number"
        assert serialize(result) == "42"

    def test_number_from_string_value(self):
        result = create.number("3.14")
        assert result == NumberNode("3.14")
        assert serialize(result) == "3.14"

    def test_dimension_with_px_unit(self):
        result = create.dimension(100, "px")
        assert result == DimensionNode(
            (DimensionNumberNode("100"), DimensionUnitNode("px"))
        )
        assert serialize(result) == "100px"

    def test_dimension_with_float_and_string_values(self):
        assert serialize(create.dimension(1.5, "rem")) == "1.5rem"
        assert serialize(create.dimension("2.5", "em")) == "2.5em"

    def test_percentage(self):
        result = create.percentage(50)
        assert result == PercentageNode((PercentageNumberNode("50"), TokenNode("%")))
        assert serialize(result) == "50%"
        assert serialize(create.percentage("75.5")) == "75.5%"

    @pytest.mark.parametrize("keyword", ["e", "pi", "infinity", "-infinity", "NaN"])
    def test_keywords(self, keyword):
        result = create.keyword(keyword)
        assert result == KeywordNode(keyword)
        assert serialize(result) == keyword

    def test_raw(self):
        result = create.raw("env(safe-area-inset-top)")
        assert result.kind == "raw"
        assert serialize(result) == "env(safe-area-inset-top)"

    def test_group_of_value(self):
        result = create.group(create.number(42))
        assert result.kind == "group"
        assert serialize(result) == "(42)"

    def test_group_of_sum(self):
        inner = create.calc_sum(
            create.dimension(10, "px"), ("+", create.dimension(5, "px"))
        )
        assert serialize(create.group(inner)) == "(10px + 5px)"

    def test_var_without_fallback(self):
        result = create.var("--size")
        assert result.kind == "var"
        assert result.name == "--size"
        assert result.fallback is None
        assert result.value[3] is None
        assert serialize(result) == "var(--size)"

    def test_var_with_fallback(self):
        fallback = create.calc_sum(create.dimension(10, "px"), ("+", create.number(2)))
        result = create.var("--gutter", fallback)
        assert result.fallback == fallback
        assert serialize(result) == "var(--gutter,10px + 2)"


class TestCalcProduct:
    """Tests for calc_product()."""

    def test_returns_single_value_when_no_operations(self):
        value = create.number(10)
        result = create.calc_product(value)
        assert result is value
        assert serialize(result) == "10"

    def test_multiplication(self):
        result = create.calc_product(create.number(10), ("*", create.number(2)))
        assert result.kind == "calc-product"
        assert serialize(result) == "10*2"

    def test_division(self):
        result = create.calc_product(create.number(100), ("/", create.number(4)))
        assert serialize(result) == "100/4"

    def test_multiple_operations(self):
        result = create.calc_product(
            create.number(10), ("*", create.number(2)), ("/", create.number(5))
        )
        assert serialize(result) == "10*2/5"
        assert result.operations == (("*", create.number(2)), ("/", create.number(5)))


class TestCalcSum:
    """Tests for calc_sum()."""

    def test_returns_single_product_when_no_operations(self):
        value = create.number(10)
        result = create.calc_sum(value)
        assert result is value
        assert serialize(result) == "10"

    def test_addition(self):
        result = create.calc_sum(create.number(10), ("+", create.number(5)))
        assert result.kind == "calc-sum"
        assert serialize(result) == "10 + 5"

    def test_subtraction(self):
        result = create.calc_sum(create.number(100), ("-", create.number(25)))
        assert serialize(result) == "100 - 25"

    def test_multiple_operations(self):
        result = create.calc_sum(
            create.dimension(100, "px"),
            ("+", create.dimension(50, "px")),
            ("-", create.dimension(20, "px")),
        )
        assert serialize(result) == "100px + 50px - 20px"
        assert [operator for operator, _ in result.operations] == ["+", "-"]

    def test_with_calc_products(self):
        product = create.calc_product(create.number(10), ("*", create.number(2)))
        result = create.calc_sum(product, ("+", create.number(5)))
        assert serialize(result) == "10*2 + 5"


class TestMathFunctions:
    """Tests for function constructors."""

    def test_calc(self):
        assert serialize(create.calc(create.number(42))) == "calc(42)"

    def test_calc_with_complex_expression(self):
        product = create.calc_product(
            create.dimension(100, "vw"), ("/", create.number(2))
        )
        sum_node = create.calc_sum(product, ("-", create.dimension(20, "px")))
        assert serialize(create.calc(sum_node)) == "calc(100vw/2 - 20px)"

    def test_exp(self):
        assert serialize(create.exp(create.number(2))) == "exp(2)"

    def test_exp_raises_for_missing_value(self):
        with pytest.raises(MissingArgumentError):
            create.exp(None)

    def test_pow(self):
        result = create.pow(create.dimension(2, "px"), create.number(3))
        assert result.base == create.dimension(2, "px")
        assert serialize(result) == "pow(2px,3)"

    def test_pow_raises_for_missing_base(self):
        with pytest.raises(MissingArgumentError) as exc_info:
            create.pow(None, create.number(3))
        assert exc_info.value.argument == "base"

    def test_round_with_all_parts(self):
        result = create.round("up", create.number(7), create.number(2))
        assert result.strategy == "up"
        assert result.interval == create.number(2)
        assert serialize(result) == "round(up,7,2)"

    def test_round_without_optional_parts(self):
        result = create.round(None, create.number(7))
        assert result.value[2] is None
        assert result.value[4] is None
        assert serialize(result) == "round(7)"

    def test_round_raises_for_missing_value(self):
        with pytest.raises(MissingArgumentError):
            create.round("down", None)

    def test_min_with_values(self):
        result = create.min(create.dimension(100, "px"), create.percentage(50))
        assert result.kind == "min"
        assert serialize(result) == "min(100px,50%)"

    def test_min_with_single_value(self):
        assert serialize(create.min(create.number(1))) == "min(1)"

    def test_max_with_three_values(self):
        result = create.max(
            create.dimension(100, "px"), create.percentage(50), create.dimension(200, "px")
        )
        assert serialize(result) == "max(100px,50%,200px)"
        assert len(result.items) == 3

    def test_min_and_max_raise_without_items(self):
        with pytest.raises(EmptyInputError):
            create.min()
        with pytest.raises(EmptyInputError):
            create.max()

    def test_clamp(self):
        result = create.clamp(
            create.dimension(300, "px"), create.percentage(50), create.dimension(800, "px")
        )
        assert result.preferred == create.percentage(50)
        assert serialize(result) == "clamp(300px,50%,800px)"

    def test_clamp_with_open_bounds(self):
        result = create.clamp(create.NONE_KEYWORD, create.percentage(50), create.NONE_KEYWORD)
        assert serialize(result) == "clamp(none,50%,none)"


class TestNesting:
    """Tests for nested constructions."""

    def test_grouped_sum_in_product(self):
        sum_node = create.calc_sum(create.percentage(100), ("-", create.dimension(20, "px")))
        product = create.calc_product(create.group(sum_node), ("/", create.number(2)))
        assert serialize(create.calc(product)) == "calc((100% - 20px)/2)"

    def test_clamp_with_nested_calculations(self):
        result = create.clamp(
            create.calc_product(create.dimension(16, "px"), ("*", create.number(1.5))),
            create.calc_sum(create.dimension(1, "rem"), ("+", create.percentage(2))),
            create.dimension(32, "px"),
        )
        assert serialize(result) == "clamp(16px*1.5,1rem + 2%,32px)"

    def test_var_inside_calc_sum(self):
        fallback = create.calc_sum(create.dimension(8, "px"), ("+", create.number(2)))
        result = create.calc(
            create.calc_sum(create.var("--padding", fallback), ("-", create.dimension(1, "px")))
        )
        assert serialize(result) == "calc(var(--padding,8px + 2) - 1px)"

    def test_exp_inside_calc_product(self):
        exp_node = create.exp(create.calc_sum(create.number(2), ("+", create.number(1))))
        result = create.calc(create.calc_product(exp_node, ("*", create.number(3))))
        assert serialize(result) == "calc(exp(2 + 1)*3)"

    def test_clamp_with_min_and_max_inside(self):
        result = create.clamp(
            create.min(create.dimension(100, "px"), create.percentage(20)),
            create.percentage(50),
            create.max(create.dimension(500, "px"), create.percentage(80)),
        )
        assert serialize(result) == "clamp(min(100px,20%),50%,max(500px,80%))"
