"""
Tests for result objects.
"""

import json
import math
import warnings

import numpy as np
import pytest

from anchordist.analysis.results import BootstrapSummary, DistanceResult
from anchordist.core.mutation_matrix import MutationMatrix
from anchordist.models import UNDEFINED, Model


class TestBootstrapSummary:
    """Tests for the BootstrapSummary dataclass."""

    def test_statistics(self):
        distances = np.linspace(0.1, 0.2, 101)
        summary = BootstrapSummary.from_distances(0.15, distances, level=0.9)

        assert summary.n_replicates == 101
        assert summary.n_undefined == 0
        assert summary.mean == pytest.approx(0.15)
        assert summary.std_error == pytest.approx(np.std(distances, ddof=1))

        lo, hi = summary.percentile_interval
        assert lo == pytest.approx(0.105)
        assert hi == pytest.approx(0.195)

        lo, hi = summary.normal_interval
        assert lo < 0.15 < hi
        assert hi - 0.15 == pytest.approx(0.15 - lo)

    def test_no_warning_when_all_defined(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            BootstrapSummary.from_distances(0.1, [0.1, 0.2, 0.3])

    def test_undefined_replicates_warn(self):
        with pytest.warns(UserWarning, match="2 of 5 bootstrap replicates"):
            summary = BootstrapSummary.from_distances(
                0.2, [0.1, np.nan, 0.2, np.nan, 0.3]
            )

        assert summary.n_undefined == 2
        assert summary.mean == pytest.approx(0.2)
        assert len(summary.defined) == 3

    def test_all_undefined(self):
        with pytest.warns(UserWarning):
            summary = BootstrapSummary.from_distances(UNDEFINED, [np.nan, np.nan])

        assert math.isnan(summary.mean)
        assert all(math.isnan(x) for x in summary.percentile_interval)

        d = summary.to_dict()
        assert d['mean'] is None
        assert d['percentile_interval'] == [None, None]

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="level"):
            BootstrapSummary.from_distances(0.1, [0.1, 0.2], level=1.5)

    def test_to_dataframe(self):
        pytest.importorskip("pandas")
        summary = BootstrapSummary.from_distances(0.1, [0.1, 0.2, 0.3])
        df = summary.to_dataframe()
        assert list(df.columns) == ['replicate', 'distance']
        assert len(df) == 3


class TestDistanceResult:
    """Tests for the DistanceResult dataclass."""

    @pytest.fixture
    def matrix(self):
        return MutationMatrix.from_counts([5, 1, 5, 1, 0, 5, 0, 0, 0, 3], reference_length=25)

    def test_summary(self, matrix):
        result = DistanceResult(model=Model.JC, distance=0.10732, matrix=matrix)
        text = result.summary()
        assert "Model: jc" in text
        assert "Distance: 0.107320" in text
        assert "Classified sites: 20" in text
        assert "Coverage: 0.8000" in text
        assert "BOOTSTRAP" not in text

    def test_summary_undefined(self, matrix):
        result = DistanceResult(model=Model.KIMURA, distance=UNDEFINED, matrix=matrix)
        assert result.undefined
        assert "Distance: undefined" in result.summary()

    def test_summary_with_bootstrap(self, matrix):
        bs = BootstrapSummary.from_distances(0.1, [0.09, 0.1, 0.11])
        result = DistanceResult(model=Model.RAW, distance=0.1, matrix=matrix, bootstrap=bs)
        text = result.summary()
        assert "BOOTSTRAP (3 replicates)" in text
        assert "95% CI (percentile)" in text

    def test_to_json(self, matrix, tmp_path):
        result = DistanceResult(model=Model.JC, distance=UNDEFINED, matrix=matrix)
        path = tmp_path / "result.json"

        json_str = result.to_json(str(path))
        data = json.loads(json_str)

        assert data['model'] == 'jc'
        assert data['distance'] is None
        assert data['matrix']['total'] == 20
        assert data['bootstrap'] is None
        assert json.loads(path.read_text()) == data
