"""
Unit tests for pairwise alignment input.
"""

import pytest

from anchordist.io.sequences import Fragment, PairwiseAlignment


class TestFastaParsing:
    """Test FASTA parsing."""

    def test_parse_pair(self, pair_fasta):
        aln = PairwiseAlignment.from_fasta(pair_fasta)

        assert aln.subject_name == "seq1 first sequence"
        assert aln.query_name == "seq2"
        assert aln.subject == "ACGT" * 5
        assert aln.query == "ACGTGCGTACGTAAGTACGT"
        assert aln.length == 20

    def test_extra_records_ignored(self, tmp_path):
        fasta = tmp_path / "three.fasta"
        fasta.write_text(">a\nACGT\n>b\nACGA\n>c\nTTTT\n")
        aln = PairwiseAlignment.from_fasta(str(fasta))
        assert (aln.subject, aln.query) == ("ACGT", "ACGA")

    def test_single_record(self, tmp_path):
        fasta = tmp_path / "one.fasta"
        fasta.write_text(">a\nACGT\n")
        with pytest.raises(ValueError, match="at least 2 sequences"):
            PairwiseAlignment.from_fasta(fasta)

    def test_unequal_lengths(self, tmp_path):
        fasta = tmp_path / "bad.fasta"
        fasta.write_text(">a\nACGT\n>b\nACG\n")
        with pytest.raises(ValueError, match="different lengths"):
            PairwiseAlignment.from_fasta(fasta)


class TestPairwiseAlignment:
    """Test alignment properties and fragment splitting."""

    def test_reference_length_excludes_gaps(self):
        aln = PairwiseAlignment("ACG-T", "ACGAT")
        assert aln.length == 5
        assert aln.reference_length == 4

    def test_fragments(self, pair_alignment):
        fragments = pair_alignment.fragments()

        assert [f.anchor for f in fragments] == [True, False, True, False, True]
        assert [len(f.subject) for f in fragments] == [4, 1, 8, 1, 6]
        assert fragments[1] == Fragment("A", "G", False)
        assert fragments[3] == Fragment("C", "A", False)
        assert "".join(f.subject for f in fragments) == pair_alignment.subject
        assert "".join(f.query for f in fragments) == pair_alignment.query

    def test_min_anchor_folds_short_runs(self):
        aln = PairwiseAlignment("ACGTTACGTA", "ACCTTACGTT")
        fragments = aln.fragments(min_anchor=3)

        assert fragments == [
            Fragment("ACG", "ACC", False),
            Fragment("TTACGT", "TTACGT", True),
            Fragment("A", "T", False),
        ]

    def test_non_informative_never_anchor(self):
        """Matching gaps or ambiguity codes do not form anchors."""
        aln = PairwiseAlignment("ACNN-GT", "ACNN-GT")
        fragments = aln.fragments()

        assert fragments == [
            Fragment("AC", "AC", True),
            Fragment("NN-", "NN-", False),
            Fragment("GT", "GT", True),
        ]

    def test_empty(self):
        assert PairwiseAlignment("", "").fragments() == []

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError, match="different lengths"):
            PairwiseAlignment("ACGT", "AC")
