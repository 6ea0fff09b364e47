"""
Pytest configuration and shared fixtures.
"""

import pytest
from typer.testing import CliRunner

from anchordist.io.sequences import PairwiseAlignment


# Subject is ACGT x 5; the query carries an A->G transition at column 4
# and a C->A transversion at column 13.
PAIR_SUBJECT = "ACGT" * 5
PAIR_QUERY = "ACGTGCGTACGTAAGTACGT"


@pytest.fixture
def pair_alignment():
    """Two aligned sequences with one transition and one transversion."""
    return PairwiseAlignment(
        subject=PAIR_SUBJECT,
        query=PAIR_QUERY,
        subject_name="seq1",
        query_name="seq2",
    )


@pytest.fixture
def pair_fasta(tmp_path):
    """FASTA file holding the pair alignment, wrapped over several lines."""
    fasta = tmp_path / "pair.fasta"
    fasta.write_text(
        ">seq1 first sequence\n"
        f"{PAIR_SUBJECT[:10]}\n{PAIR_SUBJECT[10:]}\n"
        ">seq2\n"
        f"{PAIR_QUERY.lower()}\n"
    )
    return fasta


@pytest.fixture
def cli_runner():
    """CLI test runner for Typer apps."""
    return CliRunner()
