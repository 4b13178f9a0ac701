"""
SnapGene (.dna) file reader.

A SnapGene file is a stream of type-length-value packets:
- 1 byte packet type
- 4 byte big-endian unsigned payload length
- the payload itself

Packets are consumed until the data is exhausted. The reader understands
the sequence, primers, notes, cookie and features packets; any other
packet type is skipped.

Features, notes and primers are stored as XML. They are returned as
parsed ``xml.etree.ElementTree`` elements and left uninterpreted, so the
whole document stays available to ElementPath queries::

    >>> doc = read_snapgene("sample-e.dna")
    >>> doc.features.find("Feature/Segment").get("range")
    '400-750'
    >>> len(doc.features.findall("Feature/Segment"))
    2

The ``valid`` flag only says that the cookie packet carries the
"SnapGene" signature; it says nothing about the sequence or features.
"""

import logging
import re
import struct
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from seqformats.exceptions import MalformedPacketError
from seqformats.io.records import RecordFactory, sequence_tuple

_LOGGER = logging.getLogger(__name__)

SEQUENCE_PACKET = 0x00
PRIMERS_PACKET = 0x05
NOTES_PACKET = 0x06
COOKIE_PACKET = 0x09
FEATURES_PACKET = 0x0A

COOKIE_SIGNATURE = b"SnapGene"

_PACKET_HEADER = struct.Struct(">BI")

_XML_DECLARATION = re.compile(
    r"""<\?xml\s+version=(["'])1\.0\1(\s+encoding=(["'])[^"']*\3)?"""
)
_LATIN1_DECLARATION = '<?xml version="1.0" encoding="latin1"'
_UTF8_BOM = b"\xef\xbb\xbf"


@dataclass(frozen=True)
class SnapGeneDocument:
    """
    Contents of a SnapGene file.

    Attributes:
        sequence: Record built by the record factory from the DNA packet
        circular: True when bit 0 of the DNA packet's flag byte is set
        valid: True when the cookie packet starts with b"SnapGene"
        features: Root element of the features XML, if present
        notes: Root element of the notes XML, if present
        primers: Root element of the primers XML, if present
        length: Number of bases in the DNA packet
    """
    sequence: Any = None
    circular: bool = False
    valid: bool = False
    features: Optional[ET.Element] = None
    notes: Optional[ET.Element] = None
    primers: Optional[ET.Element] = None
    length: int = 0


def iter_packets(data: bytes) -> Iterator[Tuple[int, int, bytes]]:
    """
    Walk the packets of a SnapGene byte stream.

    Yields:
        ``(offset, packet_type, payload)`` for every packet, in order

    Raises:
        MalformedPacketError: If a packet header or payload is truncated
    """
    view = memoryview(data)
    offset = 0
    total = len(view)
    while offset < total:
        if total - offset < _PACKET_HEADER.size:
            raise MalformedPacketError(
                f"Truncated packet header: {total - offset} bytes left", offset
            )
        packet_type, length = _PACKET_HEADER.unpack_from(view, offset)
        start = offset + _PACKET_HEADER.size
        end = start + length
        if end > total:
            raise MalformedPacketError(
                f"Packet type 0x{packet_type:02X} declares {length} bytes "
                f"but only {total - start} remain",
                offset,
            )
        yield offset, packet_type, bytes(view[start:end])
        offset = end


def _enforce_latin1(payload: bytes) -> str:
    """
    Decode an XML payload as latin-1 and declare it as such.

    Some files carry multi-byte characters; reading every byte as one
    code point keeps the XML parser from choking on them.
    """
    if payload.startswith(_UTF8_BOM):
        payload = payload[len(_UTF8_BOM):]
    text = payload.decode("latin-1").lstrip()
    match = _XML_DECLARATION.match(text)
    if match:
        return _LATIN1_DECLARATION + text[match.end():]
    return _LATIN1_DECLARATION + "?>" + text


def _parse_xml(payload: bytes, offset: int) -> ET.Element:
    try:
        return ET.fromstring(_enforce_latin1(payload))
    except ET.ParseError as e:
        raise MalformedPacketError(f"Invalid XML payload: {e}", offset) from e


def _parse_sequence(
    payload: bytes, offset: int, record_factory: RecordFactory
) -> Dict[str, Any]:
    if not payload:
        raise MalformedPacketError("Empty DNA packet", offset)
    flags = payload[0]
    bases = payload[1:].lower().decode("latin-1")
    return {
        "sequence": record_factory(bases, label=""),
        "circular": bool(flags & 0x01),
        "length": len(bases),
    }


def _parse_cookie(payload: bytes, offset: int) -> Dict[str, Any]:
    if len(payload) < len(COOKIE_SIGNATURE):
        raise MalformedPacketError(
            f"Cookie packet is {len(payload)} bytes, expected at least "
            f"{len(COOKIE_SIGNATURE)}",
            offset,
        )
    return {"valid": payload[:len(COOKIE_SIGNATURE)] == COOKIE_SIGNATURE}


_XML_PACKETS = {
    PRIMERS_PACKET: "primers",
    NOTES_PACKET: "notes",
    FEATURES_PACKET: "features",
}


def parse_snapgene_bytes(
    data: bytes,
    record_factory: RecordFactory = sequence_tuple
) -> SnapGeneDocument:
    """
    Parse the contents of a SnapGene file already loaded into memory.

    When a packet type occurs more than once the last one wins.

    Args:
        data: Raw file contents
        record_factory: Callable ``(sequence, label)`` building the
            sequence record; the sequence is lowercased and the label is
            empty

    Returns:
        SnapGeneDocument

    Raises:
        MalformedPacketError: On truncated packets, a short cookie or an
            unparseable XML payload
    """
    fields: Dict[str, Any] = {}
    for offset, packet_type, payload in iter_packets(data):
        if packet_type == SEQUENCE_PACKET:
            fields.update(_parse_sequence(payload, offset, record_factory))
        elif packet_type == COOKIE_PACKET:
            fields.update(_parse_cookie(payload, offset))
        elif packet_type in _XML_PACKETS:
            fields[_XML_PACKETS[packet_type]] = _parse_xml(payload, offset)
        else:
            _LOGGER.debug(
                "Skipping packet type 0x%02X (%d bytes) at offset %d",
                packet_type, len(payload), offset,
            )
    return SnapGeneDocument(**fields)


def read_snapgene(
    filepath: Union[str, Path],
    record_factory: RecordFactory = sequence_tuple
) -> SnapGeneDocument:
    """
    Read a SnapGene file.

    Args:
        filepath: Path to a .dna file
        record_factory: Callable ``(sequence, label)`` building the
            sequence record

    Raises:
        OSError: If the file cannot be read
        MalformedPacketError: If the packet stream is malformed
    """
    data = Path(filepath).read_bytes()
    document = parse_snapgene_bytes(data, record_factory)
    _LOGGER.debug(
        "Read SnapGene file %s (%d bp, valid=%s)",
        filepath, document.length, document.valid,
    )
    return document
