import pytest

from four_fours.expression_tree import (
    BINARY_CATALOG, UNARY_CATALOG, UNDEFINED, Operator, OperatorCatalog, OpType
)


def op(name):
    if name in BINARY_CATALOG:
        return BINARY_CATALOG.by_name(name)
    return UNARY_CATALOG.by_name(name)


def test_binary_catalog_order():
    assert BINARY_CATALOG.names == (
        'add', 'subtract', 'multiply', 'exponent', 'divide', 'modulus', 'log', 'root')
    assert len(BINARY_CATALOG) == 8
    assert all(operator.arity == 2 for operator in BINARY_CATALOG)


def test_unary_catalog():
    assert UNARY_CATALOG.names == ('negate', 'bar', 'factorial')
    assert all(operator.arity == 1 for operator in UNARY_CATALOG)


def test_catalog_index_is_bounds_checked():
    assert BINARY_CATALOG[0].name == 'add'
    assert BINARY_CATALOG[7].name == 'root'
    with pytest.raises(IndexError):
        BINARY_CATALOG[8]
    with pytest.raises(IndexError):
        BINARY_CATALOG[-1]


def test_catalog_rejects_duplicate_names():
    with pytest.raises(ValueError):
        OperatorCatalog([Operator('add', 2, OpType.ADD), Operator('add', 2, OpType.ADD)])


def test_unknown_operator_name():
    with pytest.raises(KeyError):
        BINARY_CATALOG.by_name('concat')


def test_basic_arithmetic():
    assert op('add').apply(4, 4) == 8.0
    assert op('subtract').apply(4, 8) == -4.0
    assert op('multiply').apply(4, 4) == 16.0
    assert op('exponent').apply(4, 4) == 256.0
    assert op('divide').apply(4, 8) == 0.5
    assert op('root').apply(16, 2) == 4.0
    assert op('log').apply(16, 4) == pytest.approx(2.0)


def test_modulus_truncates_and_follows_divisor_sign():
    assert op('modulus').apply(7, 3) == 1.0
    assert op('modulus').apply(7.5, 2) == 1.0
    assert op('modulus').apply(-7, 3) == 2.0


@pytest.mark.parametrize("name, a, b", [
    ('divide', 4, 0),
    ('modulus', 4, 0),
    ('modulus', 4, 1.5),
    ('log', 0, 4),
    ('log', -4, 4),
    ('log', 4, 0),
    ('log', 4, -2),
    ('log', 4, 1),
    ('root', 4, 0),
    ('root', -8, 3),
    ('exponent', 0, -1),
    ('exponent', -4, 0.5),
    ('exponent', 4, 4444),
])
def test_domain_violations_are_undefined(name, a, b):
    assert op(name).apply(a, b) is UNDEFINED


def test_negative_base_with_integer_power():
    assert op('exponent').apply(-2, 3) == -8.0


def test_unary_operators():
    assert op('negate').apply(4) == -4.0
    assert op('factorial').apply(4) == 24.0
    assert op('bar').apply(4) == pytest.approx(4 / 9)


@pytest.mark.parametrize("name, a", [
    ('factorial', 0),
    ('factorial', -3),
    ('factorial', 4.5),
    ('factorial', 50),
    ('bar', 44),
    ('bar', 0.4),
    ('bar', -4),
])
def test_unary_domain_violations(name, a):
    assert op(name).apply(a) is UNDEFINED


def test_arity_mismatch_is_an_error():
    with pytest.raises(TypeError):
        op('add').apply(4)
    with pytest.raises(TypeError):
        op('negate').apply(4, 4)


def test_undefined_sentinel():
    assert not UNDEFINED
    assert repr(UNDEFINED) == 'Undefined'
    assert type(UNDEFINED)() is UNDEFINED
