"""Preset configurations and end-to-end training runs."""

from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Dict, List, Mapping, Sequence

from ..core import activations
from ..core.types import RunResult
from ..data import truth_tables
from ..reporting.artifacts import write_manifest
from ..reporting.metrics import CsvSink, JsonlSink
from ..reporting.plots import plot_history
from .network import Network


def _gate_preset(name: str, epochs: int = 10000, lr: float = 0.5) -> Mapping[str, object]:
    return {
        "data": {"name": name},
        "model": {"layers": [2, 3, 1], "activation": "sigmoid"},
        "train": {
            "epochs": epochs,
            "lr": lr,
            "seed": None,
            "run_dir": None,
            "enable_plots": False,
        },
    }


_PRESETS: Dict[str, Mapping[str, object]] = {
    "xor": _gate_preset("xor"),
    "and": _gate_preset("and", epochs=2000),
    "or": _gate_preset("or", epochs=2000),
    "nand": _gate_preset("nand", epochs=2000),
}

_REQUIRED_SECTIONS = {"data", "model", "train"}


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Dict[str, object]:
    try:
        return deepcopy(dict(_PRESETS[name]))
    except KeyError as exc:
        raise KeyError(f"Unknown preset: {name}") from exc


def load_config(path: str | Path) -> Mapping[str, object]:
    """Read a JSON or YAML config file into a mapping."""

    path = Path(path)
    text = path.read_text()
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to load YAML configs") from exc
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text or "{}")
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix}")

    if not isinstance(data, Mapping):
        raise TypeError(f"Config {path.name} must decode to a mapping")
    return data


def merge_config(base: Mapping[str, object], override: Mapping[str, object]) -> Dict[str, object]:
    """Deep-merge ``override`` into a copy of ``base``.

    An override carrying every section replaces ``base`` outright.
    """

    if _REQUIRED_SECTIONS <= set(override):
        return json.loads(json.dumps(override))
    merged = deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)  # type: ignore[arg-type]
        else:
            merged[key] = deepcopy(value)
    return merged


def build_network(config: Mapping[str, object]) -> Network:
    model_cfg = dict(config["model"])  # type: ignore[arg-type]
    train_cfg = dict(config.get("train", {}))  # type: ignore[arg-type]
    seed = train_cfg.get("seed")
    return Network(
        [int(size) for size in model_cfg["layers"]],
        float(train_cfg.get("lr", 0.5)),
        activations.get(str(model_cfg.get("activation", "sigmoid"))),
        seed=int(seed) if seed is not None else None,
    )


def run_pipeline(
    config: Mapping[str, object], callbacks: Sequence[object] | None = None
) -> RunResult:
    """Train a network described by ``config`` and infer every dataset row.

    When ``train.run_dir`` is set the run writes ``metrics.jsonl``,
    ``metrics.csv``, ``manifest.json`` and, with ``enable_plots``, ``loss.png``.
    ``enable_plots`` without a ``run_dir`` is rejected.
    """

    missing = _REQUIRED_SECTIONS - set(config)
    if missing:
        raise KeyError(f"Config is missing required sections: {', '.join(sorted(missing))}")
    data_cfg = dict(config["data"])  # type: ignore[arg-type]
    train_cfg = dict(config["train"])  # type: ignore[arg-type]

    inputs, targets = truth_tables.get(str(data_cfg["name"]))
    network = build_network(config)
    epochs = int(train_cfg.get("epochs", 10000))
    seed = train_cfg.get("seed")
    run_dir = train_cfg.get("run_dir")
    enable_plots = bool(train_cfg.get("enable_plots", False))
    if enable_plots and not run_dir:
        raise ValueError("train.enable_plots requires train.run_dir")

    run_callbacks: List[object] = list(callbacks or [])
    metrics_path = ""
    if run_dir:
        run_dir = Path(str(run_dir))
        run_dir.mkdir(parents=True, exist_ok=True)
        metrics_path = str(run_dir / "metrics.jsonl")
        run_callbacks.extend([JsonlSink(metrics_path, seed=seed), CsvSink(run_dir / "metrics.csv")])

    history = network.train(inputs, targets, epochs, callbacks=run_callbacks)

    predictions = [network.predict(row) for row in inputs]
    final_loss = network.evaluate(inputs, targets)

    manifest_path = ""
    plot_path = ""
    if run_dir:
        description = network.describe()
        manifest_path = write_manifest(
            Path(run_dir) / "manifest.json",
            config=json.loads(json.dumps(config)),
            model={
                "layers": description.layers,
                "activation": description.activation,
                "learning_rate": description.learning_rate,
                "parameter_count": description.parameter_count,
            },
            final_loss=final_loss,
        )
        if enable_plots:
            plot_path = plot_history(history, run_dir)

    return RunResult(
        epochs=epochs,
        final_loss=final_loss,
        predictions=predictions,
        metrics_path=metrics_path,
        manifest_path=manifest_path,
        plot_path=plot_path,
    )


__all__ = [
    "build_network",
    "load_config",
    "load_preset",
    "merge_config",
    "presets",
    "run_pipeline",
]
