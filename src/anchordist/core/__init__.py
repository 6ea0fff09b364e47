"""
Core counting routines for pairwise substitution statistics.

- **Nucleotide classification**: canonical ACGT codes vs. non-informative
  characters
- **Mutation matrix**: the ten substitution-category counts summarising an
  alignment, which are sufficient for every distance estimator
"""

from anchordist.core.nucleotides import NON_INFORMATIVE, NUCLEOTIDES, classify, encode
from anchordist.core.mutation_matrix import (
    MutationMatrix,
    Substitution,
    average,
    category_index,
)

__all__ = [
    "MutationMatrix",
    "Substitution",
    "average",
    "category_index",
    "classify",
    "encode",
    "NON_INFORMATIVE",
    "NUCLEOTIDES",
]
