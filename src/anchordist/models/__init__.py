"""
Distance models.

- :class:`Model` selects the estimator and the anchor counting policy
- ``estimate_*`` turn a mutation matrix into a scalar distance
"""

from .selector import Model
from .distance import (
    UNDEFINED,
    estimate,
    estimate_jc,
    estimate_kimura,
    estimate_logdet,
    estimate_raw,
    is_undefined,
)

__all__ = [
    "Model",
    "UNDEFINED",
    "estimate",
    "estimate_jc",
    "estimate_kimura",
    "estimate_logdet",
    "estimate_raw",
    "is_undefined",
]
