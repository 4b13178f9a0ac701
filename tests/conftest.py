"""Shared test fixtures for seqformats tests."""

import pytest


@pytest.fixture
def five_records():
    """Five single-line records as (header, sequence) tuples."""
    return [
        ("header1", "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"),
        ("header2", "ttttttttttttttttttttttttttttttt"),
        ("header3", "ggggggggggggggggggggggggggggggg"),
        ("header4", "ccccccccccccccccccccccccccccccc"),
        ("header5", "atgcatgcatgcatgcatgcatgcatgcatg"),
    ]


@pytest.fixture
def fastq_text():
    """Two well-formed FASTQ records."""
    return (
        "@SRR001666.1 071112_SLXA-EAS1_s_7:5:1:817:345 length=36\n"
        "GGGTGATGGCCGCTGCCGATGGCGTCAAATCCCACC\n"
        "+SRR001666.1 071112_SLXA-EAS1_s_7:5:1:817:345 length=36\n"
        "IIIIIIIIIIIIIIIIIIIIIIIIIIIIII9IG9IC\n"
        "@SRR001666.2 071112_SLXA-EAS1_s_7:5:1:801:338 length=36\n"
        "GTTCAGGGATACGACGTTTGTATTTTAAGAATCTGA\n"
        "+SRR001666.2 071112_SLXA-EAS1_s_7:5:1:801:338 length=36\n"
        "IIIIIIIIIIIIIIIIIIIIIIIIIIIIIIII6IBI\n"
    )
