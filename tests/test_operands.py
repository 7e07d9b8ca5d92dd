import pytest

from four_fours.operands import build_operand_pool, concatenation_literals, digit_compositions


def test_default_pool_is_the_bare_digit():
    pool = build_operand_pool(4, 4)
    assert pool.descriptions() == ["4"]
    assert pool.costs() == (1,)


def test_concatenation_and_decimals():
    pool = build_operand_pool(4, 2, concatenate=True, decimals=True)
    assert [o.description for o in pool.by_cost(1)] == ["4", ".4"]
    assert [o.description for o in pool.by_cost(2)] == ["44", "4.4", ".44"]
    assert pool.by_cost(2)[1].value == pytest.approx(4.4)


def test_decimal_literal_texts():
    texts = [literal.text for literal in concatenation_literals(4, 3, decimals=True)]
    assert texts == ["444", "44.4", "4.44", ".444"]


def test_unary_operators_wrap_operands():
    pool = build_operand_pool(4, 2, unary_operators=("negate", "bar", "factorial"))
    assert pool.descriptions() == ["4", "negate(4)", "bar(4)", "factorial(4)"]
    assert pool.by_cost(1)[3].value == 24.0


def test_unary_depth_layers_and_skips_undefined():
    pool = build_operand_pool(3, 1, unary_operators=("factorial",), unary_depth=2)
    # 3! = 6, 6! = 720
    assert pool.descriptions() == ["3", "factorial(3)", "factorial(factorial(3))"]
    pool = build_operand_pool(4, 2, concatenate=True, unary_operators=("bar",))
    # bar only applies to a single digit
    assert "bar(44)" not in pool
    assert "bar(4)" in pool


def test_unknown_unary_operator():
    with pytest.raises(KeyError):
        build_operand_pool(4, 4, unary_operators=("sqrt",))


def test_digit_compositions():
    assert list(digit_compositions(4, 4)) == [(1, 1, 1, 1)]
    assert list(digit_compositions(4, 2)) == [(1, 3), (2, 2), (3, 1)]
    assert list(digit_compositions(3, 1)) == [(3,)]
    assert list(digit_compositions(2, 3)) == []
