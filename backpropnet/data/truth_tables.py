"""Boolean truth-table datasets used by the demo presets."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

Dataset = Tuple[List[List[float]], List[List[float]]]

_INPUTS: List[List[float]] = [
    [0.0, 0.0],
    [0.0, 1.0],
    [1.0, 0.0],
    [1.0, 1.0],
]

_GATES: Dict[str, Callable[[bool, bool], bool]] = {
    "xor": lambda a, b: a != b,
    "and": lambda a, b: a and b,
    "or": lambda a, b: a or b,
    "nand": lambda a, b: not (a and b),
}


def names() -> List[str]:
    return sorted(_GATES)


def get(name: str) -> Dataset:
    """Return fresh ``(inputs, targets)`` lists for the gate ``name``."""

    try:
        gate = _GATES[name.lower()]
    except KeyError as exc:
        available = ", ".join(names())
        raise KeyError(f"Unknown dataset {name!r}. Available datasets: {available}") from exc
    inputs = [list(row) for row in _INPUTS]
    targets = [[1.0 if gate(bool(a), bool(b)) else 0.0] for a, b in inputs]
    return inputs, targets


def xor() -> Dataset:
    return get("xor")


__all__ = ["Dataset", "get", "names", "xor"]
