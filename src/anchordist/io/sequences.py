"""
Pairwise alignment input.

Reads two aligned sequences and splits them into anchors (exact,
fully informative matches) and the fragments in between.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, NamedTuple

import numpy as np

from ..core.nucleotides import encode


GAP_CHAR = '-'


class Fragment(NamedTuple):
    """
    A stretch of a pairwise alignment.

    Attributes
    ----------
    subject, query : str
        Aligned characters of equal length
    anchor : bool
        True if subject and query are known to be identical and
        consist of canonical nucleotides only
    """

    subject: str
    query: str
    anchor: bool = False


@dataclass
class PairwiseAlignment:
    """
    Two aligned nucleotide sequences.

    Attributes
    ----------
    subject : str
        Aligned subject sequence (upper case, gaps as '-')
    query : str
        Aligned query sequence, same length as subject
    subject_name : str
        Subject label
    query_name : str
        Query label
    """

    subject: str
    query: str
    subject_name: str = "subject"
    query_name: str = "query"

    def __post_init__(self):
        if len(self.subject) != len(self.query):
            raise ValueError(
                f"Aligned sequences have different lengths: "
                f"{len(self.subject)} vs {len(self.query)}"
            )

    @property
    def length(self) -> int:
        """Number of alignment columns."""
        return len(self.subject)

    @property
    def reference_length(self) -> int:
        """Number of subject nucleotides (alignment columns without a subject gap)."""
        return len(self.subject) - self.subject.count(GAP_CHAR)

    @classmethod
    def from_fasta(cls, filepath: Path | str) -> "PairwiseAlignment":
        """
        Parse the first two records of a FASTA alignment.

        Parameters
        ----------
        filepath : Path or str
            Path to FASTA file with at least two aligned records

        Returns
        -------
        PairwiseAlignment
            The first record is the subject, the second the query

        Examples
        --------
        >>> aln = PairwiseAlignment.from_fasta("pair.fasta")
        >>> aln.subject_name
        'seq1'
        """
        filepath = Path(filepath)

        names = []
        sequences_raw = []

        with open(filepath, 'r') as f:
            current_name = None
            current_seq = []

            for line in f:
                line = line.strip()

                if not line:
                    continue

                if line.startswith('>'):
                    if current_name is not None:
                        names.append(current_name)
                        sequences_raw.append(''.join(current_seq))

                    current_name = line[1:].strip()
                    current_seq = []
                else:
                    current_seq.append(line.upper())

            if current_name is not None:
                names.append(current_name)
                sequences_raw.append(''.join(current_seq))

        if len(names) < 2:
            raise ValueError(
                f"Expected at least 2 sequences in FASTA file, found {len(names)}"
            )

        subject, query = (re.sub(r'\s', '', seq) for seq in sequences_raw[:2])

        return cls(
            subject=subject,
            query=query,
            subject_name=names[0],
            query_name=names[1],
        )

    def fragments(self, min_anchor: int = 1) -> List[Fragment]:
        """
        Split the alignment into anchors and mismatch fragments.

        An anchor is a maximal run of columns where subject and query carry
        the same canonical nucleotide. Runs shorter than ``min_anchor`` are
        folded into the surrounding mismatch fragments.

        Parameters
        ----------
        min_anchor : int, default=1
            Minimum anchor length

        Returns
        -------
        list of Fragment
            Consecutive fragments covering the whole alignment
        """
        if not self.length:
            return []

        s = encode(self.subject)
        q = encode(self.query)
        exact = (s == q) & (s >= 0)

        if min_anchor > 1:
            for start, end in _runs(exact):
                if exact[start] and end - start < min_anchor:
                    exact[start:end] = False

        return [
            Fragment(self.subject[start:end], self.query[start:end], bool(exact[start]))
            for start, end in _runs(exact)
        ]


def _runs(mask: np.ndarray) -> List[tuple[int, int]]:
    """Half-open (start, end) ranges of constant value in a boolean mask."""
    boundaries = np.flatnonzero(np.diff(mask.astype(np.int8))) + 1
    starts = np.concatenate(([0], boundaries))
    ends = np.concatenate((boundaries, [len(mask)]))
    return [(int(a), int(b)) for a, b in zip(starts, ends)]
