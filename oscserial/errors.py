"""Exceptions raised while encoding or decoding OSC packets."""


class OscError(Exception):
    """Base class of every OSC encoding or decoding error."""

    default_message = "OSC error"

    def __init__(self, message=None):
        if message is None:
            message = self.default_message
        super().__init__(message)
        self.message = message


class UnsupportedTypeError(OscError, TypeError):
    """A value or type tag has no OSC 1.0 representation."""

    default_message = "Unsupported OSC type"


class BadFormatError(OscError):
    """The packet does not follow the OSC layout (lengths, element counts)."""

    default_message = "Bad OSC packet format"


class BadPaddingError(OscError):
    """Data that must be padded with zeros to a 4-byte boundary is not."""

    default_message = "OSC data not padded to 4-byte boundary"


class TruncatedError(OscError, EOFError):
    """The input ended before a complete value could be read."""

    default_message = "unexpected end of OSC data"


class BadCastError(OscError, ValueError):
    """A number does not fit the integer width the format requires."""

    default_message = "out of range integral type conversion attempted"


class StrParseError(OscError, ValueError):
    """An OSC string is not valid UTF-8."""

    default_message = "OSC string contains illegal (non-ascii) characters"