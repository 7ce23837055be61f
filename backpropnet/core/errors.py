"""Error conditions raised by the matrix algebra and the network."""

from __future__ import annotations


class ShapeMismatch(ValueError):
    """Matrix operands (or a layer layout) violate an operation's shape precondition."""


class InputSizeMismatch(ValueError):
    """An input vector does not match the size of the first layer."""


class TargetSizeMismatch(ValueError):
    """A target vector does not match the size of the output layer."""


class DatasetSizeMismatch(ValueError):
    """Inputs and targets of a dataset have different lengths."""


__all__ = [
    "ShapeMismatch",
    "InputSizeMismatch",
    "TargetSizeMismatch",
    "DatasetSizeMismatch",
]
