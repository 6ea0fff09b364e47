"""
Input modules for pairwise alignments.

The distance core does not read files; this module provides a thin FASTA
reader and the anchor/fragment split used by the high-level API and CLI.
"""

from anchordist.io.sequences import Fragment, PairwiseAlignment

__all__ = ["Fragment", "PairwiseAlignment"]
