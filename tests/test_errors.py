import pytest

from oscserial.errors import (
    BadCastError,
    BadFormatError,
    BadPaddingError,
    OscError,
    StrParseError,
    TruncatedError,
    UnsupportedTypeError,
)


@pytest.mark.parametrize(
    "cls, text",
    [
        (UnsupportedTypeError, "Unsupported OSC type"),
        (BadFormatError, "Bad OSC packet format"),
        (BadPaddingError, "OSC data not padded to 4-byte boundary"),
        (StrParseError, "OSC string contains illegal (non-ascii) characters"),
    ],
)
def test_default_messages(cls, text):
    assert str(cls()) == text
    assert cls().message == text


def test_custom_message_replaces_default():
    error = BadFormatError("argument count mismatch")
    assert str(error) == "argument count mismatch"
    assert error.message == "argument count mismatch"


def test_base_error_carries_custom_message():
    assert str(OscError("boom")) == "boom"


@pytest.mark.parametrize(
    "cls",
    [
        UnsupportedTypeError,
        BadFormatError,
        BadPaddingError,
        TruncatedError,
        BadCastError,
        StrParseError,
    ],
)
def test_all_errors_are_osc_errors(cls):
    error = cls("detail")
    with pytest.raises(OscError) as excinfo:
        raise error
    assert excinfo.value is error
    assert str(excinfo.value) == "detail"
    assert excinfo.value.message == "detail"


@pytest.mark.parametrize(
    "cls, builtin",
    [
        (TruncatedError, EOFError),
        (UnsupportedTypeError, TypeError),
        (BadCastError, ValueError),
        (StrParseError, ValueError),
    ],
)
def test_errors_match_builtin_categories(cls, builtin):
    error = cls("detail")
    with pytest.raises(builtin) as excinfo:
        raise error
    assert excinfo.value is error
    assert str(excinfo.value) == "detail"