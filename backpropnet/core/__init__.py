"""Core numerical primitives for backpropnet."""

from . import activations, errors, matrix, types

__all__ = ["activations", "errors", "matrix", "types"]
