import numpy as np
import pytest

import taylor_ad as ta
from taylor_ad import OrderNotComputed, TSeries
from taylor_ad.core.node import OpKind
from taylor_ad.taylor import variable


def _graph(x):
    return ta.sin(x) * ta.exp(x) / (1.0 + x * x)


def test_scalar_constructor_makes_a_seeded_variable():
    x = TSeries(3.0)
    assert x.kind is OpKind.VAR
    assert x.highest_valid_order == 0
    assert x[0] == 3.0
    x[1] = 1.0
    assert x.valid_orders == 2


def test_identity_wrap_shares_the_operand():
    x = variable(0.5)
    w = TSeries(x)
    assert w.kind is OpKind.POS
    assert w.node.operands[0] is x.node
    np.testing.assert_array_equal(w.coefficients(3), x.coefficients(3))
    assert (+x).kind is OpKind.POS


def test_only_variables_can_be_seeded():
    x = variable(0.5)
    with pytest.raises(TypeError):
        (x * 2.0)[1] = 1.0
    with pytest.raises(TypeError):
        TSeries.constant(1.0)[0] = 2.0


def test_negative_subscript_is_an_index_error():
    x = variable(0.5)
    with pytest.raises(IndexError):
        x[-1]
    with pytest.raises(IndexError):
        x[-1] = 0.0


def test_rejects_non_numeric_values():
    with pytest.raises(TypeError):
        TSeries("1.0")
    with pytest.raises(TypeError):
        variable(1.0) + "a"


def test_mixed_scalar_operations_in_either_position():
    x = variable(2.0)
    np.testing.assert_allclose((3.0 - x).coefficients(2), [1.0, -1.0, 0.0])
    np.testing.assert_allclose((x - 3).coefficients(2), [-1.0, 1.0, 0.0])
    np.testing.assert_allclose((2.0 / x).derivatives(2), [1.0, -0.5, 0.5])
    np.testing.assert_allclose((x * 3).coefficients(1), [6.0, 3.0])


def test_numpy_scalars_defer_to_series_operators():
    x = variable(2.0)
    y = np.float64(3.0) * x
    assert isinstance(y, TSeries)
    assert y.derivative(1) == 3.0
    z = np.float64(1.0) - x
    assert isinstance(z, TSeries)
    assert z.value == -1.0


def test_scalar_operands_are_constant_leaves():
    y = variable(2.0) + 1.5
    rhs = y.node.operands[1]
    assert rhs.kind is OpKind.CONST
    assert rhs.value == 1.5


def test_value_and_float():
    y = ta.exp(variable(0.0)) + 1.0
    assert y.value == 2.0
    assert float(y) == 2.0


def test_reset_then_reseed_matches_fresh_graph():
    x = variable(0.3)
    y = _graph(x)
    first = y.derivatives(6)

    y.reset()
    assert y.highest_valid_order == -1
    # the input keeps its seed; only the operations above it are forgotten
    assert x[0] == 0.3
    np.testing.assert_array_equal(y.derivatives(6), first)

    y.reset()
    x.reset()
    with pytest.raises(OrderNotComputed):
        x[0]
    x[0] = 1.1
    x[1] = 1.0
    np.testing.assert_array_equal(y.derivatives(6), _graph(variable(1.1)).derivatives(6))


def test_reset_keeps_a_second_input_seeded():
    k = TSeries(2.0)
    x = variable(0.5)
    y = k * x + ta.sin(x) * k
    y.evaluate(4)

    y.reset()
    x.reset()
    x[0] = 1.5
    x[1] = 1.0
    assert k[0] == 2.0
    fresh_x = variable(1.5)
    fresh = TSeries(2.0) * fresh_x + ta.sin(fresh_x) * TSeries(2.0)
    np.testing.assert_allclose(y.derivatives(4), fresh.derivatives(4), rtol=1e-15)
    assert y.derivative(0) == pytest.approx(2.0 * 1.5 + 2.0 * np.sin(1.5))


def test_bool_is_not_a_series_value():
    with pytest.raises(TypeError):
        TSeries(True)
    with pytest.raises(TypeError):
        variable(1.0) + True
    with pytest.raises(TypeError):
        ta.nth_derivative(False, 0)


def test_reset_of_a_leaf_only_touches_the_leaf():
    x = variable(0.3)
    y = ta.exp(x)
    y.evaluate(3)
    x.reset()
    assert x.highest_valid_order == -1
    assert y.highest_valid_order == 3


def test_reset_keeps_constants_valid():
    c = TSeries.constant(2.0)
    x = variable(1.0)
    y = c * x
    y.evaluate(2)
    y.reset()
    assert c.highest_valid_order >= 0
    assert c[0] == 2.0


def test_reset_clears_composite_inner_graph():
    x = variable(1.0)
    y = x ** 2.5
    y.evaluate(3)
    y.reset()
    x[0] = 4.0
    x[1] = 1.0
    assert y.derivative(1) == pytest.approx(2.5 * 4.0 ** 1.5)


def test_repr():
    x = variable(1.0, name="x")
    assert "var" in repr(x)
    assert "'x'" in repr(x)
    assert "const" in repr(TSeries.constant(2.0))
