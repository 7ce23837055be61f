"""Layered feed-forward network trained one example at a time."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..core.activations import Activation
from ..core.errors import (
    DatasetSizeMismatch,
    InputSizeMismatch,
    ShapeMismatch,
    TargetSizeMismatch,
)
from ..core.matrix import Matrix
from ..core.types import ActivationCache, ModelDescription, Vector
from .metrics import mean_squared_error


class Network:
    """Fully connected network with one weight and bias matrix per layer pair.

    ``weights[i]`` has shape ``layers[i + 1] x layers[i]`` and ``biases[i]``
    shape ``layers[i + 1] x 1``. Both are initialised uniformly in
    ``[-1, 1)``; pass ``seed`` (or an explicit ``rng``) for reproducible runs.
    """

    def __init__(
        self,
        layers: Sequence[int],
        learning_rate: float,
        activation: Activation,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        layers = [int(size) for size in layers]
        if len(layers) < 2:
            raise ShapeMismatch(
                f"A network needs at least an input and an output layer, got {layers}"
            )
        self.layers: List[int] = layers
        self.learning_rate = float(learning_rate)
        self.activation = activation
        self.seed = seed
        rng = rng if rng is not None else np.random.default_rng(seed)
        self.weights: List[Matrix] = []
        self.biases: List[Matrix] = []
        for in_dim, out_dim in zip(layers[:-1], layers[1:]):
            self.weights.append(Matrix.random(out_dim, in_dim, rng=rng))
            self.biases.append(Matrix.random(out_dim, 1, rng=rng))
        self._cache: ActivationCache | None = None

    @property
    def data(self) -> List[Matrix]:
        """Activation cache left behind by the latest :meth:`feed_forward`."""

        return list(self._cache.layers) if self._cache is not None else []

    def describe(self) -> ModelDescription:
        params = sum(w.rows * w.cols + b.rows for w, b in zip(self.weights, self.biases))
        return ModelDescription(
            layers=list(self.layers),
            activation=self.activation.name,
            learning_rate=self.learning_rate,
            parameter_count=params,
        )

    # ------------------------------------------------------------------
    # Inference

    def forward(self, inputs: Vector) -> tuple[List[float], ActivationCache]:
        """Run a forward pass and return the outputs with the activation cache."""

        values = list(inputs)
        if len(values) != self.layers[0]:
            raise InputSizeMismatch(
                f"Network expects {self.layers[0]} inputs but got {len(values)}"
            )
        current = Matrix.column(values)
        cached = [current]
        for weights, bias in zip(self.weights, self.biases):
            current = weights.multiply(current).add(bias).map(self.activation.function)
            cached.append(current)
        return current.column_values(), ActivationCache(layers=tuple(cached))

    def feed_forward(self, inputs: Vector) -> List[float]:
        """Forward pass that also replaces the stored activation cache."""

        outputs, cache = self.forward(inputs)
        self._cache = cache
        return outputs

    def predict(self, inputs: Vector) -> List[float]:
        """Forward pass that leaves the stored activation cache untouched."""

        outputs, _ = self.forward(inputs)
        return outputs

    # ------------------------------------------------------------------
    # Training

    def back_propagate(
        self,
        outputs: Vector,
        targets: Vector,
        cache: ActivationCache | None = None,
    ) -> None:
        """Update weights and biases from one example, output layer first.

        ``cache`` defaults to the one stored by the latest :meth:`feed_forward`.
        """

        targets = list(targets)
        if len(targets) != self.layers[-1]:
            raise TargetSizeMismatch(
                f"Network produces {self.layers[-1]} outputs but got {len(targets)} targets"
            )
        cache = cache if cache is not None else self._cache
        if cache is None:
            raise RuntimeError("back_propagate requires a preceding forward pass")
        if len(cache) != len(self.layers):
            raise ShapeMismatch(
                f"Activation cache has {len(cache)} layers, network has {len(self.layers)}"
            )

        derivative = self.activation.derivative
        produced = Matrix.column(outputs)
        errors = Matrix.column(targets).subtract(produced)
        gradients = produced.map(derivative)

        for idx in reversed(range(len(self.weights))):
            gradients = gradients.elementwise_multiply(errors).scale(self.learning_rate)
            # Error for the previous layer uses the weights before this update.
            propagated = self.weights[idx].transpose().multiply(errors)
            self.weights[idx] = self.weights[idx].add(
                gradients.multiply(cache[idx].transpose())
            )
            self.biases[idx] = self.biases[idx].add(gradients)
            errors = propagated
            gradients = cache[idx].map(derivative)

    def train(
        self,
        inputs: Sequence[Vector],
        targets: Sequence[Vector],
        epochs: int,
        callbacks: Sequence[object] | None = None,
    ) -> List[float]:
        """Train for ``epochs + 1`` sequential passes over the dataset.

        Returns the mean squared error observed during each pass. Callbacks
        receive ``on_epoch(epoch, {"loss": ..., "progress": ...})`` at every
        whole percent of progress.
        """

        if len(inputs) != len(targets):
            raise DatasetSizeMismatch(
                f"Got {len(inputs)} input rows but {len(targets)} target rows"
            )
        callbacks = list(callbacks or [])
        stride = max(1, epochs // 100)
        history: List[float] = []
        for epoch in range(epochs + 1):
            observed: List[List[float]] = []
            for sample, target in zip(inputs, targets):
                outputs = self.feed_forward(sample)
                self.back_propagate(outputs, target)
                observed.append(outputs)
            loss = mean_squared_error(observed, targets) if observed else 0.0
            history.append(loss)
            if callbacks and (epoch % stride == 0 or epoch == epochs):
                progress = epoch * 100 // epochs if epochs else 100
                self._emit_epoch(epoch, {"loss": loss, "progress": progress}, callbacks)
        return history

    def evaluate(self, inputs: Sequence[Vector], targets: Sequence[Vector]) -> float:
        """Mean squared error of the current network over a dataset."""

        if len(inputs) != len(targets):
            raise DatasetSizeMismatch(
                f"Got {len(inputs)} input rows but {len(targets)} target rows"
            )
        return mean_squared_error([self.predict(x) for x in inputs], targets)

    @staticmethod
    def _emit_epoch(epoch: int, metrics: dict, callbacks: Sequence[object]) -> None:
        for callback in callbacks:
            if hasattr(callback, "on_epoch"):
                callback.on_epoch(epoch, metrics)  # type: ignore[attr-defined]
            elif callable(callback):
                callback(epoch, metrics)


__all__ = ["Network"]
