"""
Result objects for distance estimation.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import json
import math
import warnings

import numpy as np
from scipy.stats import norm

from ..core.mutation_matrix import MutationMatrix
from ..models.distance import is_undefined
from ..models.selector import Model

try:
    import pandas as pd
    PANDAS_AVAILABLE = True
except ImportError:
    PANDAS_AVAILABLE = False


def _json_float(value: float) -> Optional[float]:
    """NaN is not valid JSON; export undefined values as null."""
    return None if is_undefined(value) else float(value)


@dataclass
class BootstrapSummary:
    """
    Summary of a series of bootstrap replicate distances.

    Attributes
    ----------
    point_estimate : float
        Distance of the observed (unresampled) matrix
    distances : ndarray
        Replicate distances, NaN where undefined
    level : float
        Confidence level of the intervals, e.g. 0.95
    """

    point_estimate: float
    distances: np.ndarray
    level: float = 0.95

    @classmethod
    def from_distances(
        cls, point_estimate: float, distances, level: float = 0.95
    ) -> "BootstrapSummary":
        """
        Build a summary, warning if some replicates are undefined.

        Parameters
        ----------
        point_estimate : float
            Distance of the observed matrix
        distances : array-like
            Replicate distances
        level : float, default=0.95
            Confidence level in (0, 1)
        """
        if not 0.0 < level < 1.0:
            raise ValueError(f"level must be in (0, 1), got {level}")

        summary = cls(point_estimate, np.asarray(distances, dtype=float), level)
        if summary.n_undefined:
            warnings.warn(
                f"{summary.n_undefined} of {summary.n_replicates} bootstrap "
                "replicates gave an undefined distance and were ignored. "
                "The sequences may be too short or too divergent for this model.",
                UserWarning
            )
        return summary

    @property
    def n_replicates(self) -> int:
        return len(self.distances)

    @property
    def n_undefined(self) -> int:
        return int(np.isnan(self.distances).sum())

    @property
    def defined(self) -> np.ndarray:
        """Replicate distances that are not undefined."""
        return self.distances[~np.isnan(self.distances)]

    @property
    def mean(self) -> float:
        defined = self.defined
        return float(defined.mean()) if len(defined) else math.nan

    @property
    def std_error(self) -> float:
        """Standard deviation of the defined replicate distances."""
        defined = self.defined
        return float(defined.std(ddof=1)) if len(defined) > 1 else math.nan

    @property
    def percentile_interval(self) -> tuple[float, float]:
        """Percentile bootstrap confidence interval."""
        defined = self.defined
        if not len(defined):
            return math.nan, math.nan
        alpha = 1.0 - self.level
        lower, upper = np.quantile(defined, [alpha / 2, 1.0 - alpha / 2])
        return float(lower), float(upper)

    @property
    def normal_interval(self) -> tuple[float, float]:
        """Normal-approximation interval around the point estimate."""
        z = norm.ppf(0.5 + self.level / 2)
        half_width = z * self.std_error
        return self.point_estimate - half_width, self.point_estimate + half_width

    def to_dict(self) -> Dict[str, Any]:
        return {
            'n_replicates': self.n_replicates,
            'n_undefined': self.n_undefined,
            'level': self.level,
            'mean': _json_float(self.mean),
            'std_error': _json_float(self.std_error),
            'percentile_interval': [_json_float(x) for x in self.percentile_interval],
            'normal_interval': [_json_float(x) for x in self.normal_interval],
        }

    def to_dataframe(self):
        """
        Replicate distances as a pandas DataFrame.

        Raises
        ------
        ImportError
            If pandas is not installed
        """
        if not PANDAS_AVAILABLE:
            raise ImportError(
                "pandas is required for to_dataframe(). "
                "Install it with: pip install pandas"
            )
        return pd.DataFrame({
            'replicate': np.arange(self.n_replicates),
            'distance': self.distances,
        })


@dataclass
class DistanceResult:
    """
    Distance estimate for one pair of sequences.

    Attributes
    ----------
    model : Model
        Distance model
    distance : float
        Estimated distance (NaN if undefined)
    matrix : MutationMatrix
        Pooled substitution counts
    bootstrap : BootstrapSummary, optional
        Bootstrap summary, if replicates were requested
    subject_name, query_name : str
        Sequence labels
    """

    model: Model
    distance: float
    matrix: MutationMatrix
    bootstrap: Optional[BootstrapSummary] = None
    subject_name: str = "subject"
    query_name: str = "query"

    @property
    def undefined(self) -> bool:
        return is_undefined(self.distance)

    @property
    def coverage(self) -> float:
        return self.matrix.coverage()

    def summary(self) -> str:
        """Human-readable report."""
        lines = []
        lines.append("=" * 80)
        lines.append(f"DISTANCE: {self.subject_name} vs {self.query_name}")
        lines.append("=" * 80)
        lines.append("")
        lines.append(f"Model: {self.model.value} ({self.model.description})")
        if self.undefined:
            lines.append("Distance: undefined")
        else:
            lines.append(f"Distance: {self.distance:.6f}")
        lines.append(f"Classified sites: {self.matrix.total()}")
        lines.append(f"Coverage: {self.coverage:.4f}")
        lines.append(f"  Transitions:   {self.matrix.transitions}")
        lines.append(f"  Transversions: {self.matrix.transversions}")
        lines.append("")

        if self.bootstrap is not None:
            bs = self.bootstrap
            pct = int(round(bs.level * 100))
            lines.append(f"BOOTSTRAP ({bs.n_replicates} replicates):")
            if bs.n_undefined:
                lines.append(f"  Undefined replicates: {bs.n_undefined}")
            lines.append(f"  Mean:           {bs.mean:.6f}")
            lines.append(f"  Standard error: {bs.std_error:.6f}")
            lo, hi = bs.percentile_interval
            lines.append(f"  {pct}% CI (percentile): [{lo:.6f}, {hi:.6f}]")
            lo, hi = bs.normal_interval
            lines.append(f"  {pct}% CI (normal):     [{lo:.6f}, {hi:.6f}]")
            lines.append("")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'subject': self.subject_name,
            'query': self.query_name,
            'model': self.model.value,
            'distance': _json_float(self.distance),
            'coverage': self.coverage,
            'matrix': self.matrix.to_dict(),
            'bootstrap': self.bootstrap.to_dict() if self.bootstrap is not None else None,
        }

    def to_json(self, filepath: Optional[str] = None, indent: int = 2) -> str:
        """
        Export the result as JSON.

        Parameters
        ----------
        filepath : str, optional
            If given, also write the JSON to this file
        indent : int, default=2
            JSON indentation

        Returns
        -------
        str
            JSON text
        """
        json_str = json.dumps(self.to_dict(), indent=indent)
        if filepath:
            with open(filepath, 'w') as f:
                f.write(json_str)
        return json_str
