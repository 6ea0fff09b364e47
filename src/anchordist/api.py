"""
High-level API for pairwise distance estimation.

Pools the substitution counts of a pairwise alignment, estimates a
distance and optionally bootstraps it.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from .analysis.bootstrap import RandomSource, bootstrap_distances
from .analysis.results import BootstrapSummary, DistanceResult
from .core.mutation_matrix import MutationMatrix
from .io.sequences import Fragment, PairwiseAlignment
from .models.distance import estimate
from .models.selector import Model


def compare_fragments(
    fragments: Iterable,
    reference_length: int,
    model="jc",
) -> MutationMatrix:
    """
    Count the substitutions of a series of alignment fragments.

    Parameters
    ----------
    fragments : iterable of Fragment or (subject, query) tuples
        Aligned fragments. Fragments flagged as anchors are counted with
        :meth:`MutationMatrix.count_equal`; plain tuples are compared
        position by position.
    reference_length : int
        Length of the sequence region the fragments belong to
    model : Model or str, default="jc"
        Active model; decides how anchors are counted

    Returns
    -------
    MutationMatrix
        Pooled counts

    Examples
    --------
    >>> mm = compare_fragments([Fragment("ACGT", "ACGT", anchor=True),
    ...                         ("AC", "AT")], reference_length=6)
    >>> mm.total()
    6
    """
    model = Model.parse(model)
    matrix = MutationMatrix.empty(reference_length)

    for fragment in fragments:
        fragment = Fragment(*fragment)
        if fragment.anchor:
            matrix.count_equal(fragment.subject, model)
        else:
            matrix.count(fragment.subject, fragment.query)

    return matrix


def pairwise_distance(
    alignment: Union[PairwiseAlignment, str, Path],
    model="jc",
    n_bootstrap: int = 0,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    level: float = 0.95,
    min_anchor: int = 1,
) -> DistanceResult:
    """
    Estimate the evolutionary distance between two aligned sequences.

    Parameters
    ----------
    alignment : PairwiseAlignment or path
        Alignment object or path to a FASTA file with two aligned records
    model : Model or str, default="jc"
        Distance model: 'raw', 'jc', 'kimura' or 'logdet'
    n_bootstrap : int, default=0
        Number of bootstrap replicates (0 disables bootstrapping)
    seed : int, optional
        Seed for the bootstrap generator
    rng : RandomSource, optional
        Random source; overrides ``seed``
    level : float, default=0.95
        Confidence level of the bootstrap intervals
    min_anchor : int, default=1
        Minimum length of exact runs treated as anchors

    Returns
    -------
    DistanceResult
        Distance, pooled counts and optional bootstrap summary

    Raises
    ------
    ValueError
        If the subject is empty or consists of gaps only

    Examples
    --------
    >>> result = pairwise_distance("pair.fasta", model="kimura", n_bootstrap=100, seed=1)
    >>> print(result.summary())
    """
    if not isinstance(alignment, PairwiseAlignment):
        path = Path(alignment)
        if not path.exists():
            raise FileNotFoundError(f"Alignment file not found: {path}")
        alignment = PairwiseAlignment.from_fasta(path)

    if alignment.reference_length == 0:
        raise ValueError(
            f"Subject sequence '{alignment.subject_name}' has no nucleotides"
        )

    model = Model.parse(model)
    matrix = compare_fragments(
        alignment.fragments(min_anchor=min_anchor),
        alignment.reference_length,
        model,
    )
    distance = estimate(matrix, model)

    summary = None
    if n_bootstrap > 0 and matrix.total() > 0:
        if rng is None:
            rng = np.random.default_rng(seed)
        distances = bootstrap_distances(matrix, model, n_bootstrap, rng=rng)
        summary = BootstrapSummary.from_distances(distance, distances, level=level)

    return DistanceResult(
        model=model,
        distance=distance,
        matrix=matrix,
        bootstrap=summary,
        subject_name=alignment.subject_name,
        query_name=alignment.query_name,
    )
