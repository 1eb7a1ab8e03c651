import dataclasses

import pytest

from oscserial.errors import BadCastError, BadFormatError, UnsupportedTypeError
from oscserial.packet import Bundle, Message, TimeTag


def test_timetag_iterates_as_pair():
    tag = TimeTag(0x01020304, 0x05060708)
    assert tuple(tag) == (0x01020304, 0x05060708)
    seconds, fraction = tag
    assert seconds == tag.seconds
    assert fraction == tag.fraction


def test_timetag_fraction_defaults_to_zero():
    assert TimeTag(7).fraction == 0


def test_timetag_accepts_full_u32_range():
    tag = TimeTag(0xFFFFFFFF, 0)
    assert tag.seconds == 0xFFFFFFFF


@pytest.mark.parametrize("seconds, fraction", [(-1, 0), (0, -1), (2**32, 0), (0, 2**32)])
def test_timetag_out_of_range(seconds, fraction):
    with pytest.raises(BadCastError):
        TimeTag(seconds, fraction)


@pytest.mark.parametrize("seconds", [1.5, "1", True, None])
def test_timetag_non_integer(seconds):
    with pytest.raises(UnsupportedTypeError):
        TimeTag(seconds, 0)


def test_timetag_is_frozen():
    tag = TimeTag(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tag.seconds = 3
    assert tag.seconds == 1
    assert tuple(tag) == (1, 2)


def test_message_args_become_tuple():
    message = Message("/example/path", [0x01020304, 440.0, b"\xde\xad\xbe\xef\xff"])
    assert message.args == (0x01020304, 440.0, b"\xde\xad\xbe\xef\xff")


def test_message_without_args():
    assert Message("/ts").args == ()


def test_message_equality_ignores_sequence_type():
    assert Message("/m1", (0x5EEEEEED,)) == Message("/m1", [0x5EEEEEED])


def test_message_address_must_be_string():
    with pytest.raises(UnsupportedTypeError):
        Message(b"/m1")


def test_bundle_coerces_timetag_and_elements():
    first = Message("/m1", (0x5EEEEEED,))
    second = Message("/m2", (440.0,))
    bundle = Bundle((0x01020304, 0x05060708), [first, second])
    assert bundle.timetag == TimeTag(0x01020304, 0x05060708)
    assert bundle.elements == (first, second)


def test_bundle_accepts_nested_bundle():
    inner = Bundle(TimeTag(1, 2), [Message("/ts")])
    outer = Bundle(TimeTag(3, 4), [inner])
    assert outer.elements[0] is inner


@pytest.mark.parametrize("timetag", [(1,), (1, 2, 3), 5, None])
def test_bundle_timetag_needs_two_parts(timetag):
    with pytest.raises(BadFormatError):
        Bundle(timetag)


def test_bundle_timetag_values_are_checked():
    with pytest.raises(BadCastError):
        Bundle((-1, 0))


def test_bundle_rejects_non_packet_elements():
    with pytest.raises(UnsupportedTypeError):
        Bundle(TimeTag(1, 2), ["/m1"])