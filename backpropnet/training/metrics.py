"""Error metrics reported during training."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..core.errors import DatasetSizeMismatch, TargetSizeMismatch


def squared_errors(outputs: Sequence[float], targets: Sequence[float]) -> List[float]:
    """Per-unit squared error ``(target - output) ** 2``."""

    if len(outputs) != len(targets):
        raise TargetSizeMismatch(
            f"Expected {len(outputs)} target values but got {len(targets)}"
        )
    diff = np.asarray(targets, dtype=np.float64) - np.asarray(outputs, dtype=np.float64)
    return np.square(diff).tolist()


def mean_squared_error(
    outputs: Sequence[Sequence[float]], targets: Sequence[Sequence[float]]
) -> float:
    """Mean squared error over every unit of every example."""

    if len(outputs) != len(targets):
        raise DatasetSizeMismatch(
            f"Got {len(outputs)} outputs for {len(targets)} targets"
        )
    errors: List[float] = []
    for out, target in zip(outputs, targets):
        errors.extend(squared_errors(out, target))
    return float(np.mean(errors)) if errors else 0.0


def row_errors(
    outputs: Sequence[Sequence[float]], targets: Sequence[Sequence[float]]
) -> List[float]:
    """Mean squared error of each example separately."""

    if len(outputs) != len(targets):
        raise DatasetSizeMismatch(
            f"Got {len(outputs)} outputs for {len(targets)} targets"
        )
    return [float(np.mean(squared_errors(out, target))) for out, target in zip(outputs, targets)]


__all__ = ["squared_errors", "mean_squared_error", "row_errors"]
