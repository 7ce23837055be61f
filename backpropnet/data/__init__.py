"""Dataset helpers for backpropnet."""

from . import truth_tables

__all__ = ["truth_tables"]
