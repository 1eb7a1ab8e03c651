# oscserial

Encode and decode Open Sound Control (OSC) 1.0 packets in plain Python.

OSC packets are either **messages** (an address such as `/audio/play` and a
list of typed arguments) or **bundles** (a 64-bit NTP-style time tag and a
list of nested packets). Every packet this package writes or reads begins
with a big-endian `i32` length. The supported argument types are those of
OSC 1.0:

| Python value                          | OSC tag |
|---------------------------------------|---------|
| `int` (32-bit signed)                 | `i`     |
| `float` (stored as 32-bit)            | `f`     |
| `str` (UTF-8)                         | `s`     |
| `bytes` / `bytearray` / `memoryview`  | `b`     |

`bool` and any other type are refused. The package has no dependencies
outside the standard library.

## Installation

```
pip install oscserial
```

## Packet values

`oscserial.packet` holds three frozen dataclasses:

- `Message(address, args=())`: `address` is a `str`, `args` is turned into
  a tuple.
- `Bundle(timetag, elements=())`: `timetag` is a `TimeTag` or any pair of
  integers; every element must be a `Message` or a `Bundle`.
- `TimeTag(seconds, fraction=0)`: two unsigned 32-bit integers. It can be
  unpacked: `seconds, fraction = tag`.

## Encoding

`oscserial.encode.to_bytes` takes a `Message`, a `Bundle`, a builder, or a
plain tuple, list or dataclass instance laid out the same way (fields are
read in order, names are ignored):

- `(address, args, ...)` is a message: a `str` first, then one or more
  sequences of arguments (`None` or `()` for none).
- `(timetag, elements, ...)` is a bundle: a pair of 32-bit unsigned integers
  first, then sequences of packets, each encoded by these same rules.

```python
from oscserial.encode import to_bytes
from oscserial.packet import Message

packet = to_bytes(Message("/audio/play", (1, 44100.0, b"\xde\xad\xbe\xef")))

# The same packet, written as a tuple:
packet = to_bytes(("/audio/play", (1, 44100.0, b"\xde\xad\xbe\xef")))

# A bundle holding two messages:
bundle = to_bytes(((0x01020304, 0x05060708), (("/m1", (42,)), ("/m2", (440.0,)))))
```

`to_write(stream, value)` writes the encoded packet to a binary stream and
returns the number of bytes written. `encode_packet(value)` is the same as
`to_bytes`.

To build packets one piece at a time, use `oscserial.builders`:

```python
from oscserial.builders import BundleBuilder, MessageBuilder
from oscserial.packet import TimeTag

message = MessageBuilder("/m1").add_arg(42).add_args(["text", b"\x01"])
print(message.typetag)  # ,isb

bundle = BundleBuilder(TimeTag(0x01020304, 0x05060708))
bundle.add_element(message)
data = bundle.to_bytes()
```

`BundleBuilder.add_element` accepts a builder, a `Message`, a `Bundle`, or
the bytes of an already encoded packet. Both builders' methods return the
builder, so calls can be chained.

The lower-level helpers in `oscserial.writer` (`encode_i32`, `encode_f32`,
`encode_str`, `encode_blob`, `encode_timetag`) encode single values.

## Decoding

```python
from oscserial.decode import from_bytes

packet = from_bytes(data)
```

`from_bytes` returns a `Message` (with `address` and `args`) or a `Bundle`
(with `timetag` and `elements`); bytes after the first packet are ignored.
A leading comma in the type-tag string is optional. Bytes left inside a
message after its last argument are skipped.

To read from a binary stream:

- `from_read(stream)` decodes one packet and raises `TruncatedError` if the
  stream is empty.
- `read_packet(stream)` returns `None` at the end of the stream, so it can
  be called in a loop.

Both leave the stream positioned just after the packet they read.

`oscserial.reader.OscReader` reads single OSC values (`parse_i32`,
`parse_f32`, `parse_str`, `parse_blob`, `parse_timetag`, `parse_arg`) from
a stream, optionally bounded by a byte limit.

## Errors

Every failure raises a subclass of `oscserial.errors.OscError`:

- `UnsupportedTypeError` (also a `TypeError`): a value or type tag that
  OSC 1.0 cannot carry.
- `BadFormatError`: the packet's structure is wrong, e.g. an empty packet
  or a time tag that is not two integers.
- `BadPaddingError`: data that is not padded with zeros to a 4-byte
  boundary.
- `TruncatedError` (also an `EOFError`): the input ended before the packet
  was complete.
- `BadCastError` (also a `ValueError`): a length or number out of range.
- `StrParseError` (also a `ValueError`): a string that is not valid UTF-8.

## What it does not do

The package only turns values into bytes and back. It does not send or
receive packets over a network, match address patterns, or dispatch
messages to handlers.