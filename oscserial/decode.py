"""Decoding OSC packets (messages and bundles) from bytes or streams."""

import io

from oscserial.errors import BadCastError, TruncatedError
from oscserial.packet import Bundle, Message
from oscserial.reader import OscReader, strip_leading_comma

_BUNDLE_ADDRESS = "#bundle"


def _read_body(reader):
    """Read a length-prefixed packet through ``reader`` and return a bounded reader over it."""
    length = reader.parse_i32()
    if length < 0:
        raise BadCastError(f"negative packet length {length}")
    body = reader.read_exact(length)
    return OscReader(io.BytesIO(body), length)


def _decode_message(body, address):
    tags = strip_leading_comma(body.read_0term_bytes())
    args = tuple(body.parse_arg(tag) for tag in tags)
    # Bytes after the last argument belong to this packet and are dropped.
    body.skip_rest()
    return Message(address, args)


def _decode_bundle(body):
    timetag = body.parse_timetag()
    elements = []
    while body.limit > 0:
        elements.append(_decode_packet(body))
    return Bundle(timetag, tuple(elements))


def _decode_packet(reader):
    body = _read_body(reader)
    address = body.parse_str()
    if address == _BUNDLE_ADDRESS:
        return _decode_bundle(body)
    return _decode_message(body, address)


def read_packet(stream):
    """Read the next packet from a binary stream.

    Returns ``None`` when the stream is already at its end; a packet that
    is cut short raises TruncatedError. The stream is left positioned just
    after the packet, so consecutive packets can be read in turn.
    """
    head = stream.read(4)
    if not head:
        return None
    if len(head) < 4:
        head += OscReader(stream).read_exact(4 - len(head))
    length = OscReader(io.BytesIO(head)).parse_i32()
    if length < 0:
        raise BadCastError(f"negative packet length {length}")
    body_bytes = OscReader(stream).read_exact(length)
    source = OscReader(io.BytesIO(head + body_bytes), 4 + length)
    return _decode_packet(source)


def from_read(stream):
    """Decode one packet from a binary stream; an empty stream is an error."""
    packet = read_packet(stream)
    if packet is None:
        raise TruncatedError("no OSC packet in the input")
    return packet


def from_bytes(data):
    """Decode one packet from a bytes-like object; trailing bytes are ignored."""
    return from_read(io.BytesIO(bytes(data)))