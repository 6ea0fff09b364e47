"""
Unit tests for nucleotide classification.
"""

import numpy as np
import pytest

from anchordist.core.nucleotides import NON_INFORMATIVE, NUCLEOTIDES, classify, encode


class TestClassify:
    """Test single-character classification."""

    def test_canonical_codes(self):
        """A, C, G, T map to distinct codes 0-3."""
        codes = [classify(n) for n in NUCLEOTIDES]
        assert codes == [0, 1, 2, 3]

    @pytest.mark.parametrize("char", ["-", "N", "R", "Y", "!", ";", "#", "a", " "])
    def test_non_informative(self, char):
        """Gaps, ambiguity codes, padding and lower case are non-informative."""
        assert classify(char) == NON_INFORMATIVE


class TestEncode:
    """Test vectorised fragment encoding."""

    def test_encode_string(self):
        codes = encode("ACGT-N")
        assert codes.dtype == np.int8
        assert codes.tolist() == [0, 1, 2, 3, NON_INFORMATIVE, NON_INFORMATIVE]

    def test_encode_bytes(self):
        assert encode(b"TTGA").tolist() == [3, 3, 2, 0]

    def test_encode_matches_classify(self):
        """Vectorised and scalar classification agree on every ASCII character."""
        chars = "".join(chr(i) for i in range(128))
        assert encode(chars).tolist() == [classify(c) for c in chars]

    def test_encode_non_ascii(self):
        """Each non-ASCII character becomes one non-informative code."""
        codes = encode("AéCÅαT")
        assert codes.tolist() == [0, -1, 1, -1, -1, 3]

    def test_encode_empty(self):
        assert len(encode("")) == 0
