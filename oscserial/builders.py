"""Incremental builders that encode OSC messages and bundles to wire bytes."""

from oscserial.errors import BadFormatError, UnsupportedTypeError
from oscserial.packet import Bundle, Message, TimeTag
from oscserial.writer import (
    encode_blob,
    encode_f32,
    encode_i32,
    encode_str,
    encode_timetag,
)

_BUNDLE_ADDRESS = "#bundle"


def _frame(payload):
    """Prefix a packet payload with its 32-bit length."""
    if len(payload) % 4 != 0:
        raise BadFormatError(
            f"OSC packets must be a multiple of 4 bytes, got {len(payload)}"
        )
    return encode_i32(len(payload)) + payload


def _encode_arg(value):
    """Return the type tag and the encoded bytes of one message argument."""
    if isinstance(value, bool):
        raise UnsupportedTypeError("bool has no OSC 1.0 argument type")
    if isinstance(value, int):
        return "i", encode_i32(value)
    if isinstance(value, float):
        return "f", encode_f32(value)
    if isinstance(value, str):
        return "s", encode_str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "b", encode_blob(value)
    raise UnsupportedTypeError(
        f"{type(value).__name__} has no OSC 1.0 argument type"
    )


def _encode_element(packet):
    """Encode a bundle element: a builder, a packet value or encoded packet bytes."""
    if isinstance(packet, (MessageBuilder, BundleBuilder)):
        return packet.to_bytes()
    if isinstance(packet, Message):
        return MessageBuilder(packet.address).add_args(packet.args).to_bytes()
    if isinstance(packet, Bundle):
        builder = BundleBuilder(packet.timetag)
        for element in packet.elements:
            builder.add_element(element)
        return builder.to_bytes()
    if isinstance(packet, (bytes, bytearray, memoryview)):
        return bytes(packet)
    raise UnsupportedTypeError(
        f"a bundle element must be a message or a bundle, not {type(packet).__name__}"
    )


class MessageBuilder:
    """Collects the arguments of one OSC message and encodes it.

    ``int`` becomes an 'i' argument, ``float`` an 'f', ``str`` an 's'
    and any bytes-like object a 'b' blob.
    """

    def __init__(self, address):
        if not isinstance(address, str):
            raise UnsupportedTypeError(
                f"message address must be a string, not {type(address).__name__}"
            )
        self.address = address
        self._tags = []
        self._args = bytearray()

    @property
    def typetag(self):
        """The type-tag string written so far, starting with a comma."""
        return "," + "".join(self._tags)

    def add_arg(self, value):
        """Append one argument; return the builder."""
        tag, encoded = _encode_arg(value)
        self._tags.append(tag)
        self._args += encoded
        return self

    def add_args(self, values):
        """Append every argument from an iterable; return the builder."""
        for value in values:
            self.add_arg(value)
        return self

    def to_bytes(self):
        """Encode the message as a length-prefixed OSC packet."""
        head = encode_str(self.address) + self.typetag.encode("ascii")
        # The type tag always gets at least one terminating zero.
        head += b"\0" * (4 - len(head) % 4)
        return _frame(head + bytes(self._args))


class BundleBuilder:
    """Collects the elements of one OSC bundle and encodes it."""

    def __init__(self, timetag):
        if not isinstance(timetag, TimeTag):
            try:
                seconds, fraction = timetag
            except (TypeError, ValueError) as exc:
                raise BadFormatError(
                    "a time-tag is exactly two 32-bit unsigned integers"
                ) from exc
            timetag = TimeTag(seconds, fraction)
        self.timetag = timetag
        self._contents = bytearray()

    def add_element(self, packet):
        """Append a message or nested bundle; return the builder.

        ``packet`` may be a builder, a Message or Bundle, or the bytes of
        an already encoded, length-prefixed packet.
        """
        self._contents += _encode_element(packet)
        return self

    def to_bytes(self):
        """Encode the bundle as a length-prefixed OSC packet."""
        payload = (
            encode_str(_BUNDLE_ADDRESS)
            + encode_timetag(self.timetag.seconds, self.timetag.fraction)
            + bytes(self._contents)
        )
        return _frame(payload)