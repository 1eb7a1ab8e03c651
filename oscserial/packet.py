"""Value types for OSC messages, bundles and time-tags."""

from dataclasses import dataclass
from typing import Iterator, Union

from oscserial.errors import BadCastError, BadFormatError, UnsupportedTypeError

_U32_MAX = 0xFFFFFFFF

Argument = Union[int, float, str, bytes]


def _check_u32(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnsupportedTypeError(
            f"time-tag {name} must be an integer, not {type(value).__name__}"
        )
    if not 0 <= value <= _U32_MAX:
        raise BadCastError(f"time-tag {name} {value} does not fit in 32 bits")


@dataclass(frozen=True)
class TimeTag:
    """A 64-bit NTP-style time-tag: seconds since 1900 and a 32-bit fraction."""

    seconds: int
    fraction: int = 0

    def __post_init__(self):
        _check_u32("seconds", self.seconds)
        _check_u32("fraction", self.fraction)

    def __iter__(self) -> Iterator[int]:
        yield self.seconds
        yield self.fraction


@dataclass(frozen=True)
class Message:
    """An OSC message: an address pattern and its typed arguments.

    Arguments are ``int`` (type 'i'), ``float`` ('f'), ``str`` ('s')
    and ``bytes`` ('b', a blob).
    """

    address: str
    args: tuple = ()

    def __post_init__(self):
        if not isinstance(self.address, str):
            raise UnsupportedTypeError(
                f"message address must be a string, not {type(self.address).__name__}"
            )
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class Bundle:
    """An OSC bundle: a time-tag followed by messages or nested bundles."""

    timetag: TimeTag
    elements: tuple = ()

    def __post_init__(self):
        if not isinstance(self.timetag, TimeTag):
            try:
                seconds, fraction = self.timetag
            except (TypeError, ValueError) as exc:
                raise BadFormatError(
                    "a time-tag is exactly two 32-bit unsigned integers"
                ) from exc
            object.__setattr__(self, "timetag", TimeTag(seconds, fraction))
        elements = tuple(self.elements)
        for element in elements:
            if not isinstance(element, (Message, Bundle)):
                raise UnsupportedTypeError(
                    f"bundle elements must be messages or bundles, "
                    f"not {type(element).__name__}"
                )
        object.__setattr__(self, "elements", elements)


Packet = Union[Message, Bundle]