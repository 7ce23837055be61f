import math

import pytest

from backpropnet.core import activations
from backpropnet.core.activations import IDENTITY, RELU, SIGMOID, TANH, Activation


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 0.7, 2.5])
@pytest.mark.parametrize("act", [SIGMOID, TANH, IDENTITY])
def test_derivative_matches_numeric_slope(act, x):
    h = 1e-6
    numeric = (act.function(x + h) - act.function(x - h)) / (2 * h)
    assert act.derivative(act.function(x)) == pytest.approx(numeric, rel=1e-5, abs=1e-8)


def test_sigmoid_values_and_stability():
    assert SIGMOID.function(0.0) == 0.5
    assert SIGMOID.function(800.0) == pytest.approx(1.0)
    assert SIGMOID.function(-800.0) == pytest.approx(0.0)
    assert SIGMOID.derivative(0.5) == 0.25


def test_relu_pair():
    assert RELU.function(-2.0) == 0.0
    assert RELU.function(3.0) == 3.0
    assert RELU.derivative(RELU.function(3.0)) == 1.0
    assert RELU.derivative(RELU.function(-3.0)) == 0.0


def test_tanh_matches_math():
    assert TANH.function(0.3) == math.tanh(0.3)


def test_activation_is_immutable():
    with pytest.raises(Exception):
        SIGMOID.name = "other"  # type: ignore[misc]


def test_registry_lookup():
    assert activations.get("sigmoid") is SIGMOID
    assert activations.get("TANH") is TANH
    custom = Activation("square", lambda x: x * x, lambda y: 2 * math.sqrt(y))
    assert activations.get(custom) is custom
    assert list(activations.names()) == ["identity", "relu", "sigmoid", "tanh"]
    with pytest.raises(KeyError):
        activations.get("softsign")
