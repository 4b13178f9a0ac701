"""Builders for test input."""

import struct


def packet(packet_type, payload):
    """Encode one SnapGene type-length-value packet."""
    return struct.pack(">BI", packet_type, len(payload)) + payload
