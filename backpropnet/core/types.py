"""Core typing contracts for backpropnet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .matrix import Matrix

Vector = Sequence[float]


@dataclass(frozen=True)
class ActivationCache:
    """Per-layer activations captured during a single forward pass.

    ``layers[0]`` is the input column and ``layers[i]`` the activated output
    of layer ``i``.
    """

    layers: Tuple[Matrix, ...]

    def __len__(self) -> int:
        return len(self.layers)

    def __getitem__(self, index: int) -> Matrix:
        return self.layers[index]

    @property
    def output(self) -> Matrix:
        return self.layers[-1]


@dataclass(frozen=True)
class ModelDescription:
    """Description of the feed-forward network architecture."""

    layers: List[int]
    activation: str
    learning_rate: float
    parameter_count: int


@dataclass(frozen=True)
class RunResult:
    """Summary returned by :func:`backpropnet.training.pipelines.run_pipeline`."""

    epochs: int
    final_loss: float
    predictions: List[List[float]] = field(default_factory=list)
    metrics_path: str = ""
    manifest_path: str = ""
    plot_path: str = ""
