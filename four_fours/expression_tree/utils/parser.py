"""
Description Parser

Rebuilds an expression tree from the text produced by ``Node.describe``,
e.g. ``divide(add(4,4),add(4,4))``. Used to check that a recorded solution
still evaluates to the number it was filed under.
"""

import re
from typing import List, Optional, Tuple

from ..core.node import Node, LiteralNode, UnaryOpNode, BinaryOpNode
from ..core.operators import OPERATORS_BY_NAME

_TOKEN_PATTERN = re.compile(r"\s*(?:(?P<name>[A-Za-z_][A-Za-z_0-9]*)|(?P<number>\d+(?:\.\d*)?|\.\d+)|(?P<punct>[(),]))")


class ExpressionParseError(ValueError):
    """Raised when a description is not a well-formed expression"""


def tokenize(text: str) -> List[Tuple[str, str]]:
    tokens = []
    position = 0
    text = text.rstrip()
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if match is None or match.end() == position:
            raise ExpressionParseError(f"Unexpected character at {position} in {text!r}")
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        position = match.end()
    return tokens


def literal_digits(text: str, digit: Optional[int] = None) -> int:
    """
    Number of digit repetitions a literal spends.

    Without a digit every character other than the decimal point counts as one.
    With a digit, the literal must be that digit repeated (with an optional
    decimal point).
    """
    stripped = text.replace('.', '')
    if digit is None:
        return len(stripped)
    unit = str(digit)
    repetitions, remainder = divmod(len(stripped), len(unit))
    if remainder or repetitions == 0 or stripped != unit * repetitions:
        raise ExpressionParseError(f"Literal {text!r} is not built from the digit {digit}")
    return repetitions


def parse_description(text: str, digit: Optional[int] = None) -> Node:
    tokens = tokenize(text)
    if not tokens:
        raise ExpressionParseError("Empty description")
    pos = 0

    def peek() -> Optional[Tuple[str, str]]:
        return tokens[pos] if pos < len(tokens) else None

    def expect(value: str):
        nonlocal pos
        token = peek()
        if token is None or token != ('punct', value):
            raise ExpressionParseError(f"Expected {value!r} in {text!r}")
        pos += 1

    def parse_node() -> Node:
        nonlocal pos
        token = peek()
        if token is None:
            raise ExpressionParseError(f"Unexpected end of {text!r}")
        kind, value = token
        pos += 1

        if kind == 'number':
            return LiteralNode(float(value), value, literal_digits(value, digit))

        if kind != 'name':
            raise ExpressionParseError(f"Unexpected {value!r} in {text!r}")

        operator = OPERATORS_BY_NAME.get(value)
        if operator is None:
            raise ExpressionParseError(f"Unknown operator: {value}")

        expect('(')
        operands = [parse_node()]
        while peek() == ('punct', ','):
            pos += 1
            operands.append(parse_node())
        expect(')')

        if len(operands) != operator.arity:
            raise ExpressionParseError(
                f"{operator.name} takes {operator.arity} operand(s), got {len(operands)}")
        if operator.arity == 1:
            return UnaryOpNode(operator, operands[0])
        return BinaryOpNode(operator, operands[0], operands[1])

    node = parse_node()
    if pos != len(tokens):
        raise ExpressionParseError(f"Trailing text after expression in {text!r}")
    return node
