import math

import numpy as np
import pytest

import taylor_ad as ta
from taylor_ad import TaylorExpander, TSeries
from taylor_ad.taylor import taylor_coefficients, taylor_derivatives, value, variable


def test_taylor_coefficients_of_polynomial():
    def p(x): return 5 * x ** 6 + 9 * x ** 3 + 2.5 * x ** 2 + 1.5 * x + 8
    np.testing.assert_allclose(taylor_coefficients(p, 0.0, 8), [8.0, 1.5, 2.5, 9.0, 0, 0, 5.0, 0, 0])


def test_taylor_derivatives_of_composite():
    # f = exp(sin x): f' = cos x f, f'' = (cos^2 x - sin x) f
    x0 = 0.4
    d = taylor_derivatives(lambda x: ta.exp(ta.sin(x)), x0, 2)
    f = math.exp(math.sin(x0))
    np.testing.assert_allclose(d, [f, math.cos(x0) * f, (math.cos(x0) ** 2 - math.sin(x0)) * f], rtol=1e-12)


def test_function_returning_a_number():
    np.testing.assert_array_equal(taylor_coefficients(lambda x: 3.0, 1.0, 2), [3.0, 0.0, 0.0])


def test_direction_scales_coefficients():
    x = variable(0.0, direction=2.0)
    np.testing.assert_allclose(ta.exp(x).coefficients(4), [2.0 ** n / math.factorial(n) for n in range(5)])


def test_value_helper():
    assert value(2.5) == 2.5
    assert value(ta.cos(variable(0.0))) == 1.0


def test_module_level_handles():
    x = variable(1.0)
    y = ta.log(x)
    assert ta.valid_orders(y) == 0
    ta.evaluate(y, 3)
    assert ta.highest_valid_order(y) == 3
    assert ta.nth_derivative(y, 3) == pytest.approx(2.0)
    assert ta.nth_derivative(4.0, 0) == 4.0
    ta.reset(y)
    assert ta.valid_orders(y) == 0


def test_expander_reuses_graph_across_points():
    ex = TaylorExpander(lambda x: ta.sqrt(1.0 + x * x) * ta.atan(x))
    graph_node = ex.y.node
    for x0 in (0.0, 0.5, -2.0):
        fresh = taylor_derivatives(lambda x: ta.sqrt(1.0 + x * x) * ta.atan(x), x0, 5)
        np.testing.assert_allclose(ex.derivatives(x0, 5), fresh, rtol=1e-13, atol=1e-15)
        assert ex.y.node is graph_node
    np.testing.assert_allclose(ex.coefficients(0.0, 1), [0.0, 1.0], atol=1e-15)


def test_expander_with_constant_function():
    ex = TaylorExpander(lambda x: 7.0)
    assert isinstance(ex.y, TSeries)
    np.testing.assert_array_equal(ex.derivatives(1.0, 2), [7.0, 0.0, 0.0])


def test_expander_keeps_captured_inputs():
    k = TSeries(2.0)
    ex = TaylorExpander(lambda x: k * x)
    np.testing.assert_array_equal(ex.derivatives(3.0, 1), [6.0, 2.0])
    np.testing.assert_array_equal(ex.derivatives(3.0, 1), taylor_derivatives(lambda x: k * x, 3.0, 1))
    np.testing.assert_array_equal(ex.derivatives(-1.0, 2), [-2.0, 2.0, 0.0])
