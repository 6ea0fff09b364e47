"""
Nucleotide classification for pairwise alignments.

Maps alignment characters to one of the four canonical nucleotide codes
or flags them as non-informative (gaps, ambiguity codes, padding).
"""

import numpy as np


# Canonical nucleotide encoding. The order fixes the substitution
# categories in :mod:`anchordist.core.mutation_matrix`.
NUCLEOTIDES = 'ACGT'
NUCLEOTIDE_TO_INDEX = {'A': 0, 'C': 1, 'G': 2, 'T': 3}
INDEX_TO_NUCLEOTIDE = {0: 'A', 1: 'C', 2: 'G', 3: 'T'}

# Code for gaps, ambiguity symbols and anything else outside ACGT
NON_INFORMATIVE = -1

# Byte -> code lookup table used by the vectorised encoder
_LOOKUP = np.full(256, NON_INFORMATIVE, dtype=np.int8)
for _nuc, _idx in NUCLEOTIDE_TO_INDEX.items():
    _LOOKUP[ord(_nuc)] = _idx


def classify(char: str) -> int:
    """
    Classify a single alignment character.

    Parameters
    ----------
    char : str
        One alignment character. Only the upper-case letters A, C, G and T
        are informative; case folding is left to the sequence reader.

    Returns
    -------
    int
        Nucleotide code 0-3, or NON_INFORMATIVE (-1)

    Examples
    --------
    >>> classify('G')
    2
    >>> classify('-')
    -1
    """
    return NUCLEOTIDE_TO_INDEX.get(char, NON_INFORMATIVE)


def encode(fragment) -> np.ndarray:
    """
    Encode an alignment fragment as an array of nucleotide codes.

    Parameters
    ----------
    fragment : str or bytes
        Alignment characters. Non-ASCII characters in strings are
        non-informative.

    Returns
    -------
    ndarray of int8
        One code per character, NON_INFORMATIVE where the character is
        not a canonical nucleotide
    """
    if isinstance(fragment, str):
        fragment = fragment.encode('ascii', errors='replace')
    raw = np.frombuffer(fragment, dtype=np.uint8)
    return _LOOKUP[raw]
