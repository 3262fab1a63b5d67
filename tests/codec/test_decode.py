import pytest
from result import Err, Ok

from serhex.codec import decode, decode_int, strip_prefix
from serhex.conf import COMPACT_CAP_PFX, STRICT_PFX, Mode
from serhex.exceptions import (
    CodecError,
    EmptyInputError,
    HexOverflowError,
    InvalidCharacterError,
    LengthMismatchError,
)
from serhex.types import VARIABLE


def test_strict_decode():
    assert decode('000f', 2, Mode.STRICT) == Ok(b'\x00\x0f')
    assert decode('0123456789abcdef', 8, Mode.STRICT) == Ok(b'\x01\x23\x45\x67\x89\xab\xcd\xef')
    assert decode('0123456789ABCDEF', VARIABLE, Mode.STRICT) == Ok(b'\x01\x23\x45\x67\x89\xab\xcd\xef')


def test_prefix_tolerance():
    expected = Ok(b'\xff')
    assert decode('0xFF', 1, Mode.STRICT) == expected
    assert decode('0Xff', 1, Mode.STRICT) == expected
    assert decode('ff', 1, Mode.STRICT) == expected
    assert decode('0xff', 1, Mode.COMPACT) == expected


def test_decoration_of_conf_does_not_matter_for_decoding():
    assert decode('00ff', 2, STRICT_PFX) == Ok(b'\x00\xff')
    assert decode('0x00FF', 2, STRICT_PFX) == Ok(b'\x00\xff')
    assert decode('ff', 2, COMPACT_CAP_PFX) == Ok(b'\x00\xff')


def test_strict_rejects_short_and_long_input():
    result = decode('abc', 2, Mode.STRICT)
    assert isinstance(result, Err)
    error = result.err_value
    assert isinstance(error, LengthMismatchError)
    assert (error.expected, error.actual) == (4, 3)

    error = decode('0xabcdef', 2, Mode.STRICT).err_value
    assert isinstance(error, LengthMismatchError)
    assert (error.expected, error.actual) == (4, 6)


def test_strict_variable_requires_whole_bytes():
    error = decode('abc', VARIABLE, Mode.STRICT).err_value
    assert isinstance(error, LengthMismatchError)
    assert (error.expected, error.actual) == (4, 3)


def test_compact_accepts_short_input():
    assert decode('f', 1, Mode.COMPACT) == Ok(b'\x0f')
    assert decode('0', 4, Mode.COMPACT) == Ok(b'\x00\x00\x00\x00')
    assert decode('1234', 4, Mode.COMPACT) == Ok(b'\x00\x00\x12\x34')
    assert decode('abcd', 2, Mode.COMPACT) == Ok(b'\xab\xcd')


def test_compact_variable_has_minimal_byte_count():
    assert decode('f', VARIABLE, Mode.COMPACT) == Ok(b'\x0f')
    assert decode('100', VARIABLE, Mode.COMPACT) == Ok(b'\x01\x00')
    assert decode('000f', VARIABLE, Mode.COMPACT) == Ok(b'\x00\x0f')


def test_compact_overflow():
    error = decode('abcdef', 2, Mode.COMPACT).err_value
    assert isinstance(error, HexOverflowError)
    assert (error.max_digits, error.actual) == (4, 6)

    # leading zeros beyond capacity are not dropped
    error = decode('00001', 2, Mode.COMPACT).err_value
    assert isinstance(error, HexOverflowError)
    assert (error.max_digits, error.actual) == (4, 5)


def test_invalid_character_reporting():
    error = decode('12g4', 2, Mode.STRICT).err_value
    assert isinstance(error, InvalidCharacterError)
    assert error.position == 2
    assert error.char == 'g'

    # position is relative to the text after the prefix
    error = decode('0x12g4', 2, Mode.STRICT).err_value
    assert isinstance(error, InvalidCharacterError)
    assert error.position == 2


@pytest.mark.parametrize('token, position', [
    (' ff', 0),
    ('ff ', 2),
    ('f-f', 1),
    ('0x0x', 1),
    ('xyz', 0),
])
def test_invalid_character_is_found_before_length_checks(token, position):
    for mode in Mode:
        error = decode(token, 1, mode).err_value
        assert isinstance(error, InvalidCharacterError)
        assert error.position == position


@pytest.mark.parametrize('token', ['', '0x', '0X'])
def test_empty_input(token):
    for mode in Mode:
        for width in (1, 8, VARIABLE):
            error = decode(token, width, mode).err_value
            assert isinstance(error, EmptyInputError)


def test_errors_are_codec_errors():
    for token in ['', 'zz', 'abc', '123456']:
        error = decode(token, 2, Mode.STRICT).err_value
        assert isinstance(error, CodecError)
        assert isinstance(error, ValueError)


def test_decode_ascii_bytes_token():
    assert decode(b'0x00ff', 2, Mode.STRICT) == Ok(b'\x00\xff')
    assert decode(bytearray(b'ff'), 2, Mode.COMPACT) == Ok(b'\x00\xff')
    error = decode(b'0\xe9', 1, Mode.STRICT).err_value
    assert isinstance(error, InvalidCharacterError)
    assert error.position == 1


def test_decode_rejects_non_text_token():
    with pytest.raises(TypeError):
        decode(255, 1, Mode.STRICT)


def test_decode_int():
    assert decode_int('04d2', length=2) == Ok(1234)
    assert decode_int('fb2e', length=2, signed=True) == Ok(-1234)
    assert decode_int('0xff', length=8, conf=Mode.COMPACT) == Ok(255)
    # compact padding does not sign-extend
    assert decode_int('ff', length=2, signed=True, conf=Mode.COMPACT) == Ok(255)
    assert isinstance(decode_int('ff', length=2).err_value, LengthMismatchError)


def test_strip_prefix():
    assert strip_prefix('0xab') == 'ab'
    assert strip_prefix('0Xab') == 'ab'
    assert strip_prefix('ab') == 'ab'
    assert strip_prefix('x0ab') == 'x0ab'
    assert strip_prefix('0x') == ''
