"""backpropnet public API."""

from .core import activations, matrix, types  # noqa: F401
from .core.activations import IDENTITY, RELU, SIGMOID, TANH, Activation
from .core.errors import (
    DatasetSizeMismatch,
    InputSizeMismatch,
    ShapeMismatch,
    TargetSizeMismatch,
)
from .core.matrix import Matrix
from .training.network import Network
from .training.pipelines import load_preset, presets, run_pipeline

__all__ = [
    "Activation",
    "DatasetSizeMismatch",
    "IDENTITY",
    "InputSizeMismatch",
    "Matrix",
    "Network",
    "RELU",
    "SIGMOID",
    "ShapeMismatch",
    "TANH",
    "TargetSizeMismatch",
    "activations",
    "load_preset",
    "matrix",
    "presets",
    "run_pipeline",
    "types",
]
