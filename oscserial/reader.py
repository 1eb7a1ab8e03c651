"""Reading OSC primitives from a binary stream."""

import struct

from oscserial.errors import (
    BadCastError,
    BadPaddingError,
    StrParseError,
    TruncatedError,
    UnsupportedTypeError,
)
from oscserial.packet import TimeTag

_INT32 = struct.Struct(">i")
_FLOAT32 = struct.Struct(">f")
_TIMETAG = struct.Struct(">II")


def strip_leading_comma(tags):
    """Drop the comma that usually, but not always, starts an OSC type-tag string."""
    return tags[1:] if tags[:1] == b"," else tags


class OscReader:
    """Reads OSC values from a binary stream.

    When ``limit`` is given, no more than that many bytes are read, and
    ``limit`` counts down as bytes are consumed.
    """

    def __init__(self, stream, limit=None):
        self.stream = stream
        self.limit = limit

    def read_exact(self, size):
        """Read exactly ``size`` bytes or raise TruncatedError."""
        if size < 0:
            raise BadCastError(f"cannot read a negative number of bytes ({size})")
        wanted = size if self.limit is None else min(size, self.limit)
        chunks = []
        received = 0
        while received < wanted:
            chunk = self.stream.read(wanted - received)
            if not chunk:
                break
            chunks.append(chunk)
            received += len(chunk)
        data = b"".join(chunks)
        if self.limit is not None:
            self.limit -= len(data)
        if len(data) < size:
            raise TruncatedError(f"expected {size} bytes, found {len(data)}")
        return data

    def read_0term_bytes(self):
        """Read a zero-terminated byte string padded to a 4-byte boundary."""
        data = bytearray()
        while True:
            word = self.read_exact(4)
            zeros = word.count(0)
            if zeros == 0:
                data += word
                continue
            if any(word[4 - zeros:]):
                raise BadPaddingError()
            data += word[: 4 - zeros]
            return bytes(data)

    def parse_str(self):
        """Read an OSC string."""
        raw = self.read_0term_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StrParseError() from exc

    def parse_i32(self):
        """Read a big-endian 32-bit signed integer."""
        return _INT32.unpack(self.read_exact(4))[0]

    def parse_f32(self):
        """Read a big-endian 32-bit float."""
        return _FLOAT32.unpack(self.read_exact(4))[0]

    def parse_timetag(self):
        """Read a 64-bit time-tag."""
        seconds, fraction = _TIMETAG.unpack(self.read_exact(8))
        return TimeTag(seconds, fraction)

    def parse_blob(self):
        """Read an OSC blob: a 32-bit length, the data, then zero padding."""
        size = self.parse_i32()
        if size < 0:
            raise BadCastError(f"negative blob length {size}")
        padded = (size + 3) & ~3
        data = self.read_exact(padded)
        if any(data[size:]):
            raise BadPaddingError()
        return data[:size]

    def parse_arg(self, typecode):
        """Read one argument of the given type tag ('i', 'f', 's' or 'b')."""
        code = chr(typecode) if isinstance(typecode, int) else typecode
        parsers = {
            "i": self.parse_i32,
            "f": self.parse_f32,
            "s": self.parse_str,
            "b": self.parse_blob,
        }
        parser = parsers.get(code)
        if parser is None:
            raise UnsupportedTypeError(f"unsupported OSC type tag {code!r}")
        return parser()

    def skip_rest(self):
        """Consume whatever is left within the limit; return the number of bytes skipped."""
        if self.limit is None:
            rest = self.stream.read()
            return len(rest or b"")
        return len(self.read_exact(self.limit))