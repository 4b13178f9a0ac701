"""Tests for FASTQ reading and writing."""

import gzip

import numpy as np
import pytest

from seqformats import DecodeError, ParseError
from seqformats.io import (
    FastqEntry,
    QualityEncoding,
    SequenceRecord,
    format_fastq,
    parse_fastq_string,
    read_fastq,
    write_fastq,
)


class TestParseFastq:
    """Test the FASTQ scanner."""

    def test_two_records(self, fastq_text):
        entries = parse_fastq_string(fastq_text)
        assert len(entries) == 2

        (label, sequence), quality = entries[0]
        assert label == "SRR001666.1 071112_SLXA-EAS1_s_7:5:1:817:345 length=36"
        assert sequence == "GGGTGATGGCCGCTGCCGATGGCGTCAAATCCCACC"
        assert quality.scoring_characters == "IIIIIIIIIIIIIIIIIIIIIIIIIIIIII9IG9IC"
        assert quality.label == label
        assert quality.encoding is QualityEncoding.PHRED_33

        assert entries[1].record[0].startswith("SRR001666.2")

    def test_scores_match_sequence_length(self, fastq_text):
        for (_, sequence), quality in parse_fastq_string(fastq_text):
            assert len(quality.scores) == len(sequence)

    def test_entry_is_named_pair(self, fastq_text):
        entry = parse_fastq_string(fastq_text)[0]
        assert isinstance(entry, FastqEntry)
        assert entry.quality is entry[1]

    def test_empty_input(self):
        assert parse_fastq_string("") == []
        assert parse_fastq_string("\n  \n") == []

    def test_multi_line_sequence(self):
        [((label, sequence), quality)] = parse_fastq_string(
            "@r1\nACGT\nAC\n+\nIIIIII\n"
        )
        assert label == "r1"
        assert sequence == "ACGTAC"
        assert quality.scores.tolist() == [40] * 6

    def test_separator_description_is_ignored(self):
        [((_, sequence), quality)] = parse_fastq_string(
            "@r1\nACGT\n+r1 some description\nII#I\n"
        )
        assert sequence == "ACGT"
        assert quality.scoring_characters == "II#I"

    def test_quality_starting_with_at_sign(self):
        text = "@r1\nAC\n+\n@I\n@r2\nGT\n+\nI@\n"
        entries = parse_fastq_string(text)
        assert [e.record for e in entries] == [("r1", "AC"), ("r2", "GT")]
        assert [e.quality.scoring_characters for e in entries] == ["@I", "I@"]

    def test_carriage_return_kept_in_quality(self):
        text = "@r1\r\nAC\r\n+\r\nII\r\n@r2\r\nGT\r\n+\r\nII\r\n"
        entries = parse_fastq_string(text)
        assert entries[0].record == ("r1", "AC")
        assert entries[0].quality.scoring_characters == "II\r"
        assert entries[1].quality.scoring_characters == "II"

    def test_lengths_are_not_cross_checked(self):
        [((_, sequence), quality)] = parse_fastq_string("@r\nACGT\n+\nII\n")
        assert len(sequence) == 4
        assert len(quality) == 2

    def test_phred_64(self):
        [(_, quality)] = parse_fastq_string(
            "@r\nAC\n+\nhI\n", quality_encoding="phred_64"
        )
        assert quality.scores.tolist() == [40, 9]
        assert quality.encoding is QualityEncoding.PHRED_64

    def test_decimal(self):
        [((_, sequence), quality)] = parse_fastq_string(
            "@r\nACG\n+\n10 20 30\n", quality_encoding=QualityEncoding.DECIMAL
        )
        assert sequence == "ACG"
        assert quality.scores.tolist() == [10, 20, 30]

    def test_decimal_invalid_token(self):
        with pytest.raises(DecodeError):
            parse_fastq_string("@r\nAC\n+\n10 x\n", quality_encoding="decimal")

    def test_truncated_record(self):
        with pytest.raises(ParseError):
            parse_fastq_string("@r1\nACGT\n")

    def test_record_factory(self):
        [(record, _)] = parse_fastq_string(
            "@r1\nACGT\n+\nIIII\n", record_factory=SequenceRecord.new
        )
        assert record == SequenceRecord(label="r1", sequence="ACGT")


class TestReadWriteFastq:
    """Test FASTQ files on disk."""

    def test_read_file(self, tmp_path, fastq_text):
        path = tmp_path / "reads.fastq"
        path.write_text(fastq_text)
        entries = read_fastq(path)
        assert len(entries) == 2
        assert entries[1].quality.scores[-1] == ord("I") - 33

    def test_read_gzip(self, tmp_path, fastq_text):
        path = tmp_path / "reads.fastq.gz"
        with gzip.open(path, "wt") as f:
            f.write(fastq_text)
        assert read_fastq(path) == parse_fastq_string(fastq_text)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_fastq(tmp_path / "missing.fastq")

    def test_file_and_bytes_agree(self, tmp_path):
        path = tmp_path / "latin1.fastq"
        path.write_bytes(b"@r\xe9\nAC\n+\nII\n")
        entries = read_fastq(path)
        assert entries[0].record == ("r\xe9", "AC")
        assert parse_fastq_string(path.read_bytes()) == entries

    def test_format(self):
        entries = parse_fastq_string("@r1 desc\nACGT\n+whatever\nII#I\n")
        assert format_fastq(entries) == "@r1 desc\nACGT\n+\nII#I\n"

    def test_format_with_plain_quality_string(self):
        assert format_fastq([(("r", "AC"), "II")]) == "@r\nAC\n+\nII\n"

    def test_round_trip(self, tmp_path, fastq_text):
        entries = parse_fastq_string(fastq_text)
        path = write_fastq(entries, tmp_path / "out.fastq")
        reread = read_fastq(path)
        assert reread == entries
        np.testing.assert_array_equal(
            reread[0].quality.scores, entries[0].quality.scores
        )
