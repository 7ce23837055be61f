"""Epoch callbacks that record training progress."""

from __future__ import annotations

import csv
import json
import sys
from pathlib import Path
from typing import Mapping, TextIO

from .artifacts import git_sha


def _numeric(metrics: Mapping[str, float]) -> dict:
    return {k: float(v) for k, v in metrics.items() if isinstance(v, (int, float))}


class JsonlSink:
    """Append-only JSONL writer, one record per reported epoch."""

    def __init__(
        self,
        path: str | Path,
        *,
        seed: int | None = None,
        sha: str | None = None,
    ) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("")
        self.seed = seed
        self.sha = sha or git_sha()

    def on_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        record = {"epoch": int(epoch), "seed": self.seed, "sha": self.sha}
        record.update(_numeric(metrics))
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record) + "\n")

    __call__ = on_epoch


class CsvSink:
    """Write epoch metrics to CSV with a stable, sorted header."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("")

    def on_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        row = {"epoch": int(epoch)}
        row.update(_numeric(metrics))
        with self.path.open("a", encoding="utf-8", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=sorted(row.keys()))
            if handle.tell() == 0:
                writer.writeheader()
            writer.writerow(row)


class ProgressPrinter:
    """Print ``Epoch: N%`` lines as training advances."""

    def __init__(self, stream: TextIO | None = None, *, show_loss: bool = False) -> None:
        self.stream = stream
        self.show_loss = show_loss

    def on_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        line = f"Epoch: {int(metrics.get('progress', 0))}%"
        if self.show_loss and "loss" in metrics:
            line += f" loss={float(metrics['loss']):.6f}"
        print(line, file=self.stream or sys.stdout)


__all__ = ["JsonlSink", "CsvSink", "ProgressPrinter"]
