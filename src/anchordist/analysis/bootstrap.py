"""
Bootstrap resampling of mutation matrices.

The classical bootstrap (Felsenstein 1985) resamples the columns of an
alignment. For a pairwise alignment every estimator depends on the
columns only through the ten substitution counts, so resampling reduces
to one multinomial draw over those counts (Kloetzl & Haubold 2016).
"""

from typing import List, Optional, Protocol, Sequence

import numpy as np

from ..core.mutation_matrix import MutationMatrix
from ..models.distance import estimate
from ..models.selector import Model


class RandomSource(Protocol):
    """
    Anything that can draw a multinomial sample.

    ``numpy.random.Generator`` satisfies this protocol. A random source
    is not safe to share between threads; give each worker its own (see
    :func:`spawn_generators`) or serialise access.
    """

    def multinomial(self, n: int, pvals: Sequence[float]) -> np.ndarray:
        ...


def bootstrap(matrix: MutationMatrix, rng: RandomSource) -> MutationMatrix:
    """
    Draw one bootstrap replicate of a mutation matrix.

    Parameters
    ----------
    matrix : MutationMatrix
        Observed counts; must contain at least one classified position
    rng : RandomSource
        Source of the multinomial draw

    Returns
    -------
    MutationMatrix
        New matrix with the same total and reference length. The input is
        not modified.

    Raises
    ------
    ValueError
        If the matrix is empty
    """
    nucl = matrix.total()
    if nucl == 0:
        raise ValueError("Cannot bootstrap an empty mutation matrix")

    p = matrix.counts / float(nucl)
    drawn = rng.multinomial(nucl, p)

    return MutationMatrix(
        counts=np.asarray(drawn, dtype=np.int64),
        reference_length=matrix.reference_length,
    )


def bootstrap_distances(
    matrix: MutationMatrix,
    model,
    n_replicates: int,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Distances of a series of bootstrap replicates.

    Parameters
    ----------
    matrix : MutationMatrix
        Observed counts
    model : Model or str
        Distance model applied to every replicate
    n_replicates : int
        Number of replicates (>= 1)
    rng : RandomSource, optional
        Random source; a generator seeded with ``seed`` is created if
        omitted
    seed : int, optional
        Seed for the default generator

    Returns
    -------
    ndarray, shape (n_replicates,)
        Replicate distances; undefined replicates are NaN
    """
    if n_replicates < 1:
        raise ValueError(f"n_replicates must be >= 1, got {n_replicates}")

    model = Model.parse(model)
    if rng is None:
        rng = np.random.default_rng(seed)

    distances = np.empty(n_replicates)
    for i in range(n_replicates):
        distances[i] = estimate(bootstrap(matrix, rng), model)

    return distances


def spawn_generators(seed: Optional[int], n: int) -> List[np.random.Generator]:
    """
    Create independent generators for concurrent workers.

    Parameters
    ----------
    seed : int or None
        Root seed; None draws fresh entropy
    n : int
        Number of generators

    Returns
    -------
    list of numpy.random.Generator
        Statistically independent streams, one per worker
    """
    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(child) for child in children]
