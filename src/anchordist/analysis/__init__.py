"""
Bootstrap resampling and result objects.
"""

from .bootstrap import RandomSource, bootstrap, bootstrap_distances, spawn_generators
from .results import BootstrapSummary, DistanceResult

__all__ = [
    "RandomSource",
    "bootstrap",
    "bootstrap_distances",
    "spawn_generators",
    "BootstrapSummary",
    "DistanceResult",
]
