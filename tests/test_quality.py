"""Tests for quality score decoding."""

import math

import numpy as np
import pytest

from seqformats import DecodeError, UnknownEncodingError
from seqformats.io import QualityEncoding, QualityScore, decode_quality, encode_quality


class TestDecodeQuality:
    """Test the three quality encodings."""

    def test_phred_33(self):
        assert decode_quality("I", "phred_33").tolist() == [40]
        assert decode_quality("!", "phred_33").tolist() == [0]

    def test_phred_33_is_default(self):
        assert decode_quality("I#").tolist() == [40, 2]

    def test_phred_64(self):
        assert decode_quality("I", "phred_64").tolist() == [9]
        assert decode_quality("h", QualityEncoding.PHRED_64).tolist() == [40]

    def test_decimal(self):
        assert decode_quality("10 20 30", "decimal").tolist() == [10, 20, 30]

    def test_decimal_negative(self):
        assert decode_quality("-5 +3", "decimal").tolist() == [-5, 3]

    def test_decimal_empty(self):
        assert decode_quality("", "decimal").tolist() == []

    @pytest.mark.parametrize("raw", ["10 abc", "10  20", "1.5", "10 20 "])
    def test_decimal_invalid(self, raw):
        with pytest.raises(DecodeError):
            decode_quality(raw, "decimal")

    def test_decode_error_names_token(self):
        with pytest.raises(DecodeError) as excinfo:
            decode_quality("10 x 30", "decimal")
        assert excinfo.value.token == "x"
        assert excinfo.value.position == 1

    def test_out_of_range_scores_pass_through(self):
        # Below the Phred+64 baseline
        assert decode_quality("!", "phred_64").tolist() == [-31]
        assert decode_quality("999", "decimal").tolist() == [999]

    def test_decimal_beyond_int32_passes_through(self):
        scores = decode_quality("5000000000 -5000000000", "decimal")
        assert scores.tolist() == [5000000000, -5000000000]

    def test_decimal_beyond_int64(self):
        with pytest.raises(DecodeError) as excinfo:
            decode_quality("10 99999999999999999999", "decimal")
        assert excinfo.value.position == 1

    def test_one_score_per_character(self):
        raw = "IIIIIIIIIIIIIIIIIIIIIIIIIIIIII9IG9IC"
        assert len(decode_quality(raw)) == len(raw)

    def test_unknown_encoding(self):
        with pytest.raises(UnknownEncodingError):
            decode_quality("I", "phred_99")

    def test_encode_inverts_decode(self):
        assert encode_quality([40, 2], "phred_33") == "I#"
        assert encode_quality([9], "phred_64") == "I"
        assert encode_quality(np.array([10, 20]), "decimal") == "10 20"

    def test_encode_score_below_offset(self):
        with pytest.raises(ValueError, match="position 1"):
            encode_quality([40, -34], "phred_33")
        with pytest.raises(ValueError, match="at least -64"):
            encode_quality([-65], "phred_64")


class TestQualityScore:
    """Test the QualityScore container."""

    def test_from_string(self):
        quality = QualityScore.from_string("II#", label="read1")
        assert quality.scoring_characters == "II#"
        assert quality.scores.tolist() == [40, 40, 2]
        assert quality.label == "read1"
        assert quality.encoding is QualityEncoding.PHRED_33
        assert len(quality) == 3

    def test_scores_are_read_only(self):
        quality = QualityScore.from_string("II")
        with pytest.raises(ValueError):
            quality.scores[0] = 0

    def test_mean(self):
        assert QualityScore.from_string("I+").mean() == pytest.approx(25.0)
        assert math.isnan(QualityScore.from_string("").mean())

    def test_error_probabilities(self):
        probs = QualityScore.from_string("5+!").error_probabilities()
        np.testing.assert_allclose(probs, [1e-2, 1e-1, 1.0])

    def test_equality_ignores_array_identity(self):
        assert QualityScore.from_string("II") == QualityScore.from_string("II")
        assert QualityScore.from_string("II") != QualityScore.from_string("I#")
