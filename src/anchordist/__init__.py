"""
anchordist: pairwise evolutionary distances from substitution counts.

Counts the substitutions of a pairwise DNA alignment into ten
categories, estimates distances under the raw, Jukes-Cantor, Kimura
two-parameter and LogDet models, and bootstraps them by multinomial
resampling of the counts.

Quick Start
-----------
>>> from anchordist import pairwise_distance
>>> result = pairwise_distance("pair.fasta", model="jc")
>>> print(f"d = {result.distance:.4f}")

Working with the counts directly:

>>> from anchordist import MutationMatrix, Model, estimate_kimura
>>> mm = MutationMatrix.empty(reference_length=1000)
>>> mm.count_equal("ACGTACGT", Model.KIMURA)
>>> mm.count("ACGTA", "ACGTG")
>>> d = estimate_kimura(mm)

Bootstrap:

>>> import numpy as np
>>> from anchordist import bootstrap
>>> rng = np.random.default_rng(42)
>>> replicate = bootstrap(mm, rng)
"""

__version__ = "0.1.0"

# High-level API
from .api import compare_fragments, pairwise_distance

# Core data types
from .core.mutation_matrix import MutationMatrix, Substitution, average
from .core.nucleotides import NON_INFORMATIVE, classify

# Models and estimators
from .models.selector import Model
from .models.distance import (
    UNDEFINED,
    estimate,
    estimate_jc,
    estimate_kimura,
    estimate_logdet,
    estimate_raw,
    is_undefined,
)

# Bootstrap and results
from .analysis.bootstrap import RandomSource, bootstrap, bootstrap_distances, spawn_generators
from .analysis.results import BootstrapSummary, DistanceResult

# I/O
from .io.sequences import Fragment, PairwiseAlignment

__all__ = [
    # Simple API
    "pairwise_distance",
    "compare_fragments",

    # Counting
    "MutationMatrix",
    "Substitution",
    "average",
    "classify",
    "NON_INFORMATIVE",

    # Models
    "Model",
    "UNDEFINED",
    "estimate",
    "estimate_raw",
    "estimate_jc",
    "estimate_kimura",
    "estimate_logdet",
    "is_undefined",

    # Bootstrap
    "RandomSource",
    "bootstrap",
    "bootstrap_distances",
    "spawn_generators",

    # Results
    "BootstrapSummary",
    "DistanceResult",

    # I/O
    "Fragment",
    "PairwiseAlignment",

    # Version
    "__version__",
]
