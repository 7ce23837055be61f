"""Activation functions paired with their derivatives.

Derivatives are written in terms of the activation's *output*: the network
evaluates them on cached activated values, e.g. ``sigmoid'(x)`` is computed
as ``y * (1 - y)`` with ``y = sigmoid(x)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable

ScalarFn = Callable[[float], float]


@dataclass(frozen=True)
class Activation:
    """An immutable (function, derivative) pair."""

    name: str
    function: ScalarFn
    derivative: ScalarFn


def sigmoid(x: float) -> float:
    # Split on sign so ``math.exp`` never overflows.
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def sigmoid_deriv(y: float) -> float:
    return y * (1.0 - y)


def tanh(x: float) -> float:
    return math.tanh(x)


def tanh_deriv(y: float) -> float:
    return 1.0 - y * y


def relu(x: float) -> float:
    return x if x > 0.0 else 0.0


def relu_deriv(y: float) -> float:
    return 1.0 if y > 0.0 else 0.0


def identity(x: float) -> float:
    return x


def identity_deriv(y: float) -> float:
    return 1.0


SIGMOID = Activation("sigmoid", sigmoid, sigmoid_deriv)
TANH = Activation("tanh", tanh, tanh_deriv)
RELU = Activation("relu", relu, relu_deriv)
IDENTITY = Activation("identity", identity, identity_deriv)

_REGISTRY: Dict[str, Activation] = {
    act.name: act for act in (SIGMOID, TANH, RELU, IDENTITY)
}


def names() -> Iterable[str]:
    return sorted(_REGISTRY)


def get(name: str | Activation) -> Activation:
    """Resolve an activation by name; :class:`Activation` values pass through."""

    if isinstance(name, Activation):
        return name
    key = str(name).lower()
    if key not in _REGISTRY:
        available = ", ".join(names())
        raise KeyError(f"Unknown activation {name!r}. Available activations: {available}")
    return _REGISTRY[key]


__all__ = [
    "Activation",
    "SIGMOID",
    "TANH",
    "RELU",
    "IDENTITY",
    "sigmoid",
    "sigmoid_deriv",
    "tanh",
    "tanh_deriv",
    "relu",
    "relu_deriv",
    "identity",
    "identity_deriv",
    "get",
    "names",
]
