import pytest

from four_fours.expression_tree import (
    BINARY_CATALOG, UNARY_CATALOG, UNDEFINED, BinaryOpNode, Expression, ExpressionParseError,
    ExpressionValidator, LiteralNode, UnaryOpNode, describe, evaluate, whole_number
)
from four_fours.expression_tree.utils import (
    calculate_tree_depth, count_literals, get_all_nodes, literal_sequence, operator_sequence,
    shape_bits
)

ADD = BINARY_CATALOG.by_name('add')
DIVIDE = BINARY_CATALOG.by_name('divide')
SUBTRACT = BINARY_CATALOG.by_name('subtract')
LOG = BINARY_CATALOG.by_name('log')
FACTORIAL = UNARY_CATALOG.by_name('factorial')


def four():
    return LiteralNode.for_digit(4)


def eight_over_eight():
    return BinaryOpNode(DIVIDE, BinaryOpNode(ADD, four(), four()), BinaryOpNode(ADD, four(), four()))


def test_evaluate_and_describe():
    tree = eight_over_eight()
    assert evaluate(tree) == 1.0
    assert describe(tree) == "divide(add(4,4),add(4,4))"


def test_evaluate_is_idempotent():
    tree = eight_over_eight()
    assert evaluate(tree) == evaluate(tree)


def test_undefined_short_circuits():
    zero = BinaryOpNode(SUBTRACT, four(), four())
    tree = BinaryOpNode(ADD, BinaryOpNode(DIVIDE, four(), zero), four())
    assert evaluate(tree) is UNDEFINED
    # log(undefined, 4) must not reach the log rule
    assert evaluate(BinaryOpNode(LOG, BinaryOpNode(DIVIDE, four(), zero), four())) is UNDEFINED


def test_unary_node():
    tree = UnaryOpNode(FACTORIAL, four())
    assert tree.evaluate() == 24.0
    assert tree.describe() == "factorial(4)"


def test_arity_is_checked_at_construction():
    with pytest.raises(ValueError):
        BinaryOpNode(FACTORIAL, four(), four())
    with pytest.raises(ValueError):
        UnaryOpNode(ADD, four())


def test_whole_number():
    assert whole_number(3.0) == 3
    assert whole_number(-0.0) == 0
    assert whole_number(0.5) is None
    assert whole_number(UNDEFINED) is None


def test_literal_text_and_cost():
    literal = LiteralNode(4.4, "4.4", 2)
    assert literal.describe() == "4.4"
    assert literal.cost() == 2
    assert eight_over_eight().cost() == 4


def test_round_trip_preserves_structure():
    tree = eight_over_eight()
    parsed = Expression.from_string(tree.describe()).root
    assert parsed.describe() == tree.describe()
    assert operator_sequence(parsed) == ('divide', 'add', 'add')
    assert count_literals(parsed) == 4
    assert shape_bits(parsed) == "1100100"


def test_parse_unary_and_decimal_literals():
    expression = Expression.from_string("add(factorial(4),.44)", digit=4)
    assert expression.evaluate() == pytest.approx(24.44)
    assert expression.cost() == 3
    assert literal_sequence(expression.root) == ('4', '.44')


@pytest.mark.parametrize("text", [
    "",
    "add(4,4",
    "add(4)",
    "add(4,4,4)",
    "concat(4,4)",
    "add(4,4))",
    "add(4;4)",
])
def test_parse_errors(text):
    with pytest.raises(ExpressionParseError):
        Expression.from_string(text)


def test_parse_rejects_foreign_digits():
    with pytest.raises(ExpressionParseError):
        Expression.from_string("add(4,5)", digit=4)


def test_to_sympy_matches_value():
    tree = eight_over_eight()
    assert float(tree.to_sympy()) == pytest.approx(1.0)
    assert Expression(tree).to_infix()


def test_tree_utils():
    tree = eight_over_eight()
    assert calculate_tree_depth(tree) == 3
    assert len(get_all_nodes(tree)) == 7
    assert len(get_all_nodes(tree, 'breadth_first')) == 7
    with pytest.raises(ValueError):
        get_all_nodes(tree, 'sideways')


def test_validator():
    tree = eight_over_eight()
    assert ExpressionValidator.is_valid_expression(tree)
    assert ExpressionValidator.is_valid_expression(tree, n_digits=4)
    assert not ExpressionValidator.is_valid_expression(tree, n_digits=3)
