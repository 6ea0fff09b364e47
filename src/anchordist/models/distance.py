"""
Evolutionary distance estimators.

Every estimator is a pure function of a :class:`MutationMatrix`. When the
data cannot support an estimate (too few classified positions, or
divergence beyond the range of the model's correction) the result is
``UNDEFINED``, a NaN, and never an exception, zero or infinity.
"""

import math

import numpy as np

from ..core.mutation_matrix import MutationMatrix, Substitution
from .selector import Model


UNDEFINED = math.nan

# Alignments with this many classified positions or fewer give no estimate
MIN_INFORMATIVE_SITES = 3


def is_undefined(distance: float) -> bool:
    """Check whether an estimate is the undefined sentinel."""
    return math.isnan(distance)


def estimate_raw(matrix: MutationMatrix) -> float:
    """
    Uncorrected substitution rate (p-distance).

    Parameters
    ----------
    matrix : MutationMatrix
        Substitution counts

    Returns
    -------
    float
        Fraction of classified positions that differ, in [0, 1), or
        UNDEFINED if at most three positions were classified
    """
    nucl = matrix.total()
    if nucl <= MIN_INFORMATIVE_SITES:
        return UNDEFINED

    return matrix.substitutions / nucl


def estimate_jc(matrix: MutationMatrix) -> float:
    """
    Jukes-Cantor corrected distance.

    d = -3/4 * ln(1 - 4p/3), where p is the raw distance. Undefined if p
    is undefined or p >= 0.75 (saturation).

    Parameters
    ----------
    matrix : MutationMatrix
        Substitution counts

    Returns
    -------
    float
        JC distance (>= 0) or UNDEFINED
    """
    raw = estimate_raw(matrix)
    if is_undefined(raw):
        return UNDEFINED

    arg = 1.0 - (4.0 / 3.0) * raw
    if arg <= 0.0:
        return UNDEFINED

    dist = -0.75 * math.log(arg)

    # fix negative zero
    return dist if dist > 0.0 else 0.0


def estimate_kimura(matrix: MutationMatrix) -> float:
    """
    Kimura two-parameter (K80) distance.

    With P the transition and Q the transversion proportion,
    d = -1/4 * ln[(1 - 2Q) * (1 - 2P - Q)^2]. Undefined if at most three
    positions were classified or either factor is non-positive.

    Parameters
    ----------
    matrix : MutationMatrix
        Substitution counts

    Returns
    -------
    float
        K80 distance (>= 0) or UNDEFINED
    """
    nucl = matrix.total()
    if nucl <= MIN_INFORMATIVE_SITES:
        return UNDEFINED

    P = matrix.transitions / nucl
    Q = matrix.transversions / nucl

    transversion_term = 1.0 - 2.0 * Q
    tmp = 1.0 - 2.0 * P - Q
    if transversion_term <= 0.0 or tmp <= 0.0:
        return UNDEFINED

    dist = -0.25 * math.log(transversion_term * tmp * tmp)

    # fix negative zero
    return dist if dist > 0.0 else 0.0


def divergence_matrix(matrix: MutationMatrix) -> np.ndarray:
    """
    Symmetric 4x4 joint nucleotide frequency matrix F.

    Each change count is split evenly between F[x, y] and F[y, x]; rows
    and columns follow the nucleotide order A, C, G, T. The matrix is
    normalised to sum to one.
    """
    F = np.zeros((4, 4))
    for category in Substitution:
        x, y = ('ACGT'.index(n) for n in category.pair)
        count = float(matrix.counts[category])
        if x == y:
            F[x, x] = count
        else:
            F[x, y] = F[y, x] = count / 2.0
    return F / matrix.total()


def estimate_logdet(matrix: MutationMatrix) -> float:
    """
    LogDet (paralinear) distance.

    d = -1/4 * [ln det F - ln prod(pi)], where F is the joint frequency
    matrix and pi its marginal nucleotide frequencies. This estimator
    depends on the individual no-change counts, so anchors must be
    counted exactly (``Model.LOGDET.aggregate_identity`` is False).

    Returns
    -------
    float
        LogDet distance (>= 0) or UNDEFINED if at most three positions
        were classified, det F <= 0, or a nucleotide is absent
    """
    nucl = matrix.total()
    if nucl <= MIN_INFORMATIVE_SITES:
        return UNDEFINED

    F = divergence_matrix(matrix)
    pi = F.sum(axis=1)
    det = np.linalg.det(F)
    if det <= 0.0 or np.any(pi <= 0.0):
        return UNDEFINED

    dist = -0.25 * (math.log(det) - float(np.sum(np.log(pi))))

    # fix negative zero
    return dist if dist > 0.0 else 0.0


_ESTIMATORS = {
    Model.RAW: estimate_raw,
    Model.JC: estimate_jc,
    Model.KIMURA: estimate_kimura,
    Model.LOGDET: estimate_logdet,
}


def estimate(matrix: MutationMatrix, model) -> float:
    """
    Estimate the distance under the given model.

    Parameters
    ----------
    matrix : MutationMatrix
        Substitution counts
    model : Model or str
        Distance model

    Returns
    -------
    float
        Distance or UNDEFINED
    """
    return _ESTIMATORS[Model.parse(model)](matrix)
