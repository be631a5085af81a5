"""
Tests for the Identifier model

Identifiers are immutable two-half values with structural equality,
hashing and 128-bit ordering.
"""

import uuid

import pytest
from pydantic import ValidationError

from message_ids.uuid.models import MAX_U64, NIL_IDENTIFIER, Identifier, Version


def test_default_identifier_is_nil():
    """Test no-argument construction gives the all-zero sentinel"""
    assert Identifier() == NIL_IDENTIFIER
    assert NIL_IDENTIFIER.is_nil
    assert not Identifier(low=1).is_nil


def test_equality_and_hash_are_structural():
    """Test identifiers compare and hash by their halves"""
    a = Identifier(high=1, low=2)
    b = Identifier(high=1, low=2)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, Identifier(high=2, low=1)}) == 2


def test_identifier_is_immutable():
    """Test assignment to a field is refused"""
    identifier = Identifier(high=1, low=2)
    with pytest.raises(ValidationError):
        identifier.high = 3


@pytest.mark.parametrize(
    "fields",
    [{"high": -1}, {"low": -1}, {"high": MAX_U64 + 1}, {"low": MAX_U64 + 1}],
)
def test_halves_must_fit_in_64_bits(fields):
    """Test out-of-range halves are rejected"""
    with pytest.raises(ValidationError):
        Identifier(**fields)


def test_ordering_follows_128_bit_value():
    """Test high half dominates ordering, low half breaks ties"""
    assert Identifier(high=1, low=MAX_U64) < Identifier(high=2, low=0)
    assert Identifier(high=1, low=1) < Identifier(high=1, low=2)
    assert Identifier(high=2) >= Identifier(high=1, low=MAX_U64)


def test_int_and_uuid_conversions():
    """Test conversion to and from 128-bit ints and stdlib UUIDs"""
    value = (0x0123_4567_89AB_CDEF << 64) | 0xFEDC_BA98_7654_3210
    identifier = Identifier.from_int(value)

    assert identifier.high == 0x0123_4567_89AB_CDEF
    assert identifier.low == 0xFEDC_BA98_7654_3210
    assert identifier.value == value
    assert identifier.as_uuid() == uuid.UUID(int=value)
    assert Identifier.from_uuid(uuid.UUID(int=value)) == identifier


def test_version_from_value_falls_back_to_unknown():
    """Test unrecognized nibbles map to UNKNOWN"""
    assert Version.from_value(7) == Version.COUNTER_BASED
    assert Version.from_value(15) == Version.UNKNOWN
