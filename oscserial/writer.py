"""Encoding OSC primitives to bytes."""

import struct

from oscserial.errors import BadCastError, UnsupportedTypeError

_INT32 = struct.Struct(">i")
_FLOAT32 = struct.Struct(">f")
_TIMETAG = struct.Struct(">II")


def _require_int(value, what):
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnsupportedTypeError(
            f"{what} must be an integer, not {type(value).__name__}"
        )


def encode_i32(value):
    """Encode a big-endian 32-bit signed integer."""
    _require_int(value, "an i32 argument")
    try:
        return _INT32.pack(value)
    except struct.error as exc:
        raise BadCastError(f"{value} does not fit in a 32-bit integer") from exc


def encode_f32(value):
    """Encode a big-endian 32-bit float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UnsupportedTypeError(
            f"an f32 argument must be a number, not {type(value).__name__}"
        )
    try:
        return _FLOAT32.pack(value)
    except (struct.error, OverflowError) as exc:
        raise BadCastError(f"{value} does not fit in a 32-bit float") from exc


def encode_str(value):
    """Encode an OSC string: UTF-8, zero-terminated, padded to 4 bytes."""
    if not isinstance(value, str):
        raise UnsupportedTypeError(
            f"an OSC string must be str, not {type(value).__name__}"
        )
    raw = value.encode("utf-8")
    return raw + b"\0" * (4 - len(raw) % 4)


def encode_blob(value):
    """Encode an OSC blob: 32-bit length, the bytes, zero padding to 4 bytes."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise UnsupportedTypeError(
            f"an OSC blob must be bytes-like, not {type(value).__name__}"
        )
    raw = bytes(value)
    return encode_i32(len(raw)) + raw + b"\0" * ((4 - len(raw) % 4) % 4)


def encode_timetag(seconds, fraction):
    """Encode a time-tag as two big-endian 32-bit unsigned integers."""
    _require_int(seconds, "time-tag seconds")
    _require_int(fraction, "time-tag fraction")
    try:
        return _TIMETAG.pack(seconds, fraction)
    except struct.error as exc:
        raise BadCastError("time-tag parts must fit in 32 bits") from exc