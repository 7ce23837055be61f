"""Network training for backpropnet."""

from .network import Network
from .pipelines import load_preset, presets, run_pipeline

__all__ = ["Network", "load_preset", "presets", "run_pipeline"]
