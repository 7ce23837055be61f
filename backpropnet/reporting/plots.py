"""Loss curve rendering for finished training runs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


def plot_history(
    history: Sequence[float],
    run_dir: str | Path,
    *,
    filename: str = "loss.png",
    title: str = "Training Curve",
) -> str:
    """Save the per-epoch mean squared error returned by ``Network.train``.

    The y axis is logarithmic once every loss is positive. Returns the written
    path, or ``""`` when ``history`` is empty.
    """

    if not history:
        return ""
    import matplotlib

    matplotlib.use("Agg", force=True)
    import matplotlib.pyplot as plt

    run_dir = Path(run_dir)
    run_dir.mkdir(parents=True, exist_ok=True)
    losses = [float(value) for value in history]
    fig, ax = plt.subplots()
    ax.plot(range(len(losses)), losses, linewidth=1.0)
    ax.axhline(losses[-1], linestyle="--", linewidth=0.8, color="grey")
    if min(losses) > 0.0:
        ax.set_yscale("log")
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Mean squared error")
    ax.set_title(f"{title} (final {losses[-1]:.4g})")
    plot_path = run_dir / filename
    fig.savefig(plot_path)
    plt.close(fig)
    return str(plot_path)


__all__ = ["plot_history"]
