"""
Mutation matrix: substitution-category counts of a pairwise alignment.

The matrix is symmetric in the direction of substitution, so only the ten
unordered nucleotide pairs are stored. Pairs are numbered triangularly:
with nucleotide codes A=0, C=1, G=2, T=3 and hi >= lo, the pair (hi, lo)
has category ``hi * (hi + 1) // 2 + lo``::

         A  C  G  T
      A  0
      C  1  2
      G  3  4  5
      T  6  7  8  9
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional

import numpy as np

from .nucleotides import encode


N_CATEGORIES = 10


def category_index(a: int, b: int) -> int:
    """
    Substitution category of an unordered pair of nucleotide codes.

    Parameters
    ----------
    a, b : int
        Nucleotide codes in 0-3 (order does not matter)

    Returns
    -------
    int
        Category index in 0-9
    """
    hi, lo = (a, b) if a >= b else (b, a)
    return hi * (hi + 1) // 2 + lo


class Substitution(IntEnum):
    """The ten substitution categories, named by their nucleotide pair."""

    AA = 0
    AC = 1
    CC = 2
    AG = 3
    CG = 4
    GG = 5
    AT = 6
    CT = 7
    GT = 8
    TT = 9

    @property
    def pair(self) -> tuple[str, str]:
        """The two nucleotides of this category, e.g. ('A', 'G')."""
        return self.name[0], self.name[1]

    @property
    def is_change(self) -> bool:
        return self.name[0] != self.name[1]


# No-change categories in nucleotide code order (A, C, G, T)
IDENTITIES = tuple(Substitution(category_index(i, i)) for i in range(4))

# Purine-purine and pyrimidine-pyrimidine changes
TRANSITIONS = (Substitution.AG, Substitution.CT)
TRANSVERSIONS = (Substitution.AC, Substitution.AT, Substitution.CG, Substitution.GT)
SUBSTITUTIONS = TRANSITIONS + TRANSVERSIONS

# Anchors counted without inspecting characters put the remainder here
REMAINDER_CATEGORY = Substitution.TT


@dataclass(eq=False)
class MutationMatrix:
    """
    Substitution counts of a pairwise alignment.

    Attributes
    ----------
    counts : ndarray of int64, shape (10,)
        One counter per substitution category (see :class:`Substitution`)
    reference_length : int
        Length of the sequence region the matrix summarises. Only used for
        :meth:`coverage`.

    Examples
    --------
    >>> mm = MutationMatrix.empty(reference_length=5)
    >>> mm.count("AACGT", "AACGA")
    >>> mm.total()
    5
    >>> int(mm.counts[Substitution.AT])
    1
    """

    counts: np.ndarray = field(
        default_factory=lambda: np.zeros(N_CATEGORIES, dtype=np.int64)
    )
    reference_length: int = 0

    def __post_init__(self):
        self.counts = np.asarray(self.counts, dtype=np.int64)
        if self.counts.shape != (N_CATEGORIES,):
            raise ValueError(
                f"counts must have length {N_CATEGORIES}, got shape {self.counts.shape}"
            )

    @classmethod
    def empty(cls, reference_length: int = 0) -> "MutationMatrix":
        """Create a matrix with all counts zero."""
        return cls(reference_length=reference_length)

    @classmethod
    def from_counts(cls, counts: Iterable[int], reference_length: int) -> "MutationMatrix":
        return cls(counts=np.array(list(counts), dtype=np.int64), reference_length=reference_length)

    def copy(self) -> "MutationMatrix":
        return MutationMatrix(counts=self.counts.copy(), reference_length=self.reference_length)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MutationMatrix):
            return NotImplemented
        return (
            self.reference_length == other.reference_length
            and np.array_equal(self.counts, other.counts)
        )

    def __getitem__(self, category) -> int:
        return int(self.counts[category])

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------

    def count_equal(self, fragment, model) -> None:
        """
        Count an anchor, a region where subject and query are identical.

        Only the no-change categories are incremented. If the model uses
        no-change counts only in aggregate (``model.aggregate_identity``)
        the anchor length is split evenly over the four categories, with
        the remainder going to T-T, and no character is inspected.
        Otherwise every character is classified and non-informative ones
        are skipped.

        Parameters
        ----------
        fragment : str or bytes
            The anchor sequence (taken from either subject or query)
        model : Model
            Active distance model
        """
        if model.aggregate_identity:
            length = len(fragment)
            fourth = length // 4
            for category in IDENTITIES:
                self.counts[category] += fourth
            self.counts[REMAINDER_CATEGORY] += length % 4
            return

        codes = encode(fragment)
        local_counts = np.bincount(codes[codes >= 0], minlength=4)
        self.counts[list(IDENTITIES)] += local_counts

    def count(self, subject, query, length: Optional[int] = None) -> None:
        """
        Count the substitutions of an aligned fragment.

        Positions where either character is non-informative are skipped.
        Counts are accumulated in a local buffer and added to the matrix
        once.

        Parameters
        ----------
        subject, query : str or bytes
            Aligned fragments of equal length
        length : int, optional
            Number of positions to count (default: whole fragment)
        """
        if length is not None:
            subject = subject[:length]
            query = query[:length]

        s = encode(subject)
        q = encode(query)
        informative = (s >= 0) & (q >= 0)
        s = s[informative].astype(np.intp)
        q = q[informative].astype(np.intp)

        hi = np.maximum(s, q)
        lo = np.minimum(s, q)
        local_counts = np.bincount(hi * (hi + 1) // 2 + lo, minlength=N_CATEGORIES)
        self.counts += local_counts

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------

    def sum_of(self, categories: Iterable[int]) -> int:
        """Sum the counts of the given categories."""
        return int(sum(self.counts[c] for c in categories))

    def total(self) -> int:
        """Number of classified alignment positions."""
        return int(self.counts.sum())

    def coverage(self) -> float:
        """Classified positions relative to the reference length."""
        return self.total() / self.reference_length

    @property
    def identities(self) -> int:
        return self.sum_of(IDENTITIES)

    @property
    def substitutions(self) -> int:
        return self.sum_of(SUBSTITUTIONS)

    @property
    def transitions(self) -> int:
        return self.sum_of(TRANSITIONS)

    @property
    def transversions(self) -> int:
        return self.sum_of(TRANSVERSIONS)

    def average(self, other: "MutationMatrix") -> "MutationMatrix":
        """
        Pool the statistics of two matrices.

        Despite the name this is a sum: counts and reference lengths are
        added component-wise. Neither input is modified.
        """
        return MutationMatrix(
            counts=self.counts + other.counts,
            reference_length=self.reference_length + other.reference_length,
        )

    def to_dict(self) -> dict:
        """
        Export counts keyed by category name (e.g. 'A-G').
        """
        counts = {f"{cat.name[0]}-{cat.name[1]}": int(self.counts[cat]) for cat in Substitution}
        return {
            'counts': counts,
            'total': self.total(),
            'reference_length': self.reference_length,
        }


def average(a: MutationMatrix, b: MutationMatrix) -> MutationMatrix:
    """Pool two mutation matrices (see :meth:`MutationMatrix.average`)."""
    return a.average(b)
