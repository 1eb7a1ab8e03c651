"""Encoding Python values as OSC packets.

A packet is given either as a Message, Bundle or builder, or as a
sequence (tuple, list or dataclass instance, read in field order):

* ``(address, args, ...)`` is a message. ``address`` is a ``str``, and
  every later item is a sequence of arguments or ``None`` / ``()`` for
  none at all.
* ``(timetag, elements, ...)`` is a bundle. ``timetag`` is a TimeTag or
  any sequence of exactly two 32-bit unsigned integers, and every later
  item is a sequence of packets, each encoded by these same rules.
"""

import dataclasses

from oscserial.builders import BundleBuilder, MessageBuilder
from oscserial.errors import BadFormatError, UnsupportedTypeError
from oscserial.packet import Bundle, Message, TimeTag


def _fields(value):
    """Return the items of a sequence-like value, or None if it is not one."""
    if isinstance(value, (tuple, list)):
        return tuple(value)
    if (
        dataclasses.is_dataclass(value)
        and not isinstance(value, type)
        and not isinstance(value, (Message, Bundle))
    ):
        return tuple(getattr(value, field.name) for field in dataclasses.fields(value))
    return None


def _timetag(value):
    if isinstance(value, TimeTag):
        return value
    parts = _fields(value)
    if parts is None:
        raise UnsupportedTypeError(
            f"a packet must start with an address or a time-tag, "
            f"not {type(value).__name__}"
        )
    if len(parts) != 2:
        raise BadFormatError(
            f"a time-tag is exactly two 32-bit unsigned integers, got {len(parts)} values"
        )
    return TimeTag(*parts)


def _encode_message(address, rest):
    builder = MessageBuilder(address)
    for part in rest:
        if part is None:
            continue
        args = _fields(part)
        if args is None:
            raise UnsupportedTypeError(
                f"message arguments must be a sequence, not {type(part).__name__}"
            )
        builder.add_args(args)
    return builder.to_bytes()


def _encode_bundle(head, rest):
    builder = BundleBuilder(_timetag(head))
    for part in rest:
        elements = _fields(part)
        if elements is None:
            raise UnsupportedTypeError(
                f"bundle elements must be a sequence of packets, "
                f"not {type(part).__name__}"
            )
        for element in elements:
            builder.add_element(encode_packet(element))
    return builder.to_bytes()


def encode_packet(value):
    """Encode one packet (message or bundle) as length-prefixed OSC bytes."""
    if isinstance(value, (MessageBuilder, BundleBuilder)):
        return value.to_bytes()
    if isinstance(value, Message):
        return MessageBuilder(value.address).add_args(value.args).to_bytes()
    if isinstance(value, Bundle):
        builder = BundleBuilder(value.timetag)
        for element in value.elements:
            builder.add_element(element)
        return builder.to_bytes()

    items = _fields(value)
    if items is None:
        raise UnsupportedTypeError(
            f"cannot encode {type(value).__name__} as an OSC packet"
        )
    if not items:
        raise BadFormatError("an OSC packet cannot be empty")
    head, *rest = items
    if isinstance(head, str):
        return _encode_message(head, rest)
    return _encode_bundle(head, rest)


def to_write(stream, value):
    """Encode ``value`` as an OSC packet and write it to a binary stream.

    Returns the number of bytes written.
    """
    data = encode_packet(value)
    stream.write(data)
    return len(data)


def to_bytes(value):
    """Encode ``value`` as an OSC packet and return its bytes."""
    return encode_packet(value)