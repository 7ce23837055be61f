"""Train a small network on a truth table and print what it learned."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

from backpropnet.data import truth_tables
from backpropnet.reporting.metrics import ProgressPrinter
from backpropnet.training import pipelines


def _format_row(inputs: Iterable[float], outputs: Iterable[float]) -> str:
    lhs = ", ".join(f"{value:g}" for value in inputs)
    return f"{lhs} -> {list(outputs)!r}"


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--preset",
        choices=sorted(pipelines.presets().keys()),
        default="xor",
        help="Preset configuration to execute",
    )
    parser.add_argument("--config", type=Path, help="Optional JSON/YAML config override")
    parser.add_argument("--epochs", type=int, help="Override the number of epochs")
    parser.add_argument("--lr", type=float, help="Override the learning rate")
    parser.add_argument("--seed", type=int, help="Seed for weight initialisation")
    parser.add_argument("--run-dir", type=Path, help="Directory for metrics and manifest")
    parser.add_argument(
        "--enable-plots", action="store_true", help="Write a loss curve to the run directory"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Print training progress percentages"
    )
    parser.add_argument(
        "--list-presets", action="store_true", help="List available presets and exit"
    )
    parser.add_argument(
        "--dump-config", type=Path, help="Dump the resolved config to a JSON file"
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> dict:
    config = pipelines.load_preset(args.preset)
    if args.config:
        config = pipelines.merge_config(config, pipelines.load_config(args.config))
    train_cfg = config.setdefault("train", {})
    if args.epochs is not None:
        train_cfg["epochs"] = int(args.epochs)
    if args.lr is not None:
        train_cfg["lr"] = float(args.lr)
    if args.seed is not None:
        train_cfg["seed"] = int(args.seed)
    if args.run_dir is not None:
        train_cfg["run_dir"] = str(args.run_dir)
    if args.enable_plots:
        train_cfg["enable_plots"] = True
    return config


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)

    if args.list_presets:
        for name in sorted(pipelines.presets().keys()):
            print(name)
        raise SystemExit(0)

    config = resolve_config(args)
    if config["train"].get("enable_plots") and not config["train"].get("run_dir"):
        raise SystemExit("--enable-plots requires --run-dir (or train.run_dir in the config)")

    if args.dump_config:
        args.dump_config.parent.mkdir(parents=True, exist_ok=True)
        args.dump_config.write_text(json.dumps(config, indent=2))

    callbacks = [ProgressPrinter()] if args.progress else []
    result = pipelines.run_pipeline(config, callbacks=callbacks)

    inputs, _ = truth_tables.get(str(config["data"]["name"]))
    for row, outputs in zip(inputs, result.predictions):
        print(_format_row(row, outputs))


if __name__ == "__main__":
    main()
