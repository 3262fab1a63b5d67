import random

import pytest
from result import Err, Ok

from serhex.codec import decode, decode_int, encode, encode_int
from serhex.conf import COMPACT_CAP_PFX, STRICT_CAP_PFX, HexConf, Mode
from serhex.exceptions import EmptyInputError
from serhex.types import VARIABLE

SEED = 0x5e7e4
WIDTHS = [1, 2, 4, 8, 20, 32]


def _random_values(rng: random.Random, width: int) -> list[bytes]:
    values = [bytes(width), b'\xff' * width, b'\x00' * (width - 1) + b'\x01', b'\x0f' + b'\x00' * (width - 1)]
    values.extend(rng.randbytes(width) for _ in range(20))
    return values


@pytest.mark.parametrize('width', WIDTHS)
def test_strict_round_trip(width):
    rng = random.Random(SEED + width)
    for conf in (Mode.STRICT, STRICT_CAP_PFX):
        for data in _random_values(rng, width):
            token = encode(data, width, conf)
            assert decode(token, width, conf) == Ok(data)


@pytest.mark.parametrize('width', WIDTHS)
def test_compact_round_trip_fixed_width(width):
    rng = random.Random(SEED - width)
    for conf in (Mode.COMPACT, COMPACT_CAP_PFX):
        for data in _random_values(rng, width):
            token = encode(data, width, conf)
            assert decode(token, width, conf) == Ok(data)


def test_compact_round_trip_variable_width_keeps_numeric_value():
    rng = random.Random(SEED)
    for _ in range(50):
        data = rng.randbytes(rng.randint(0, 40))
        decoded = decode(encode(data, VARIABLE, Mode.COMPACT), VARIABLE, Mode.COMPACT).unwrap()
        assert int.from_bytes(decoded, 'big') == int.from_bytes(data, 'big')
        # only the leading zero bytes may be lost
        assert data.lstrip(b'\x00') == decoded.lstrip(b'\x00')


@pytest.mark.parametrize('token, width, mode, canonical', [
    ('0xABCD', 2, Mode.STRICT, 'abcd'),
    ('00FF', 2, Mode.STRICT, '00ff'),
    ('0X0a0B', VARIABLE, Mode.STRICT, '0a0b'),
    ('0xF', 1, Mode.COMPACT, 'f'),
    ('ABC', 2, Mode.COMPACT, 'abc'),
    ('0x0', 8, Mode.COMPACT, '0'),
    ('1aBcD', VARIABLE, Mode.COMPACT, '1abcd'),
])
def test_re_encoding_gives_canonical_token(token, width, mode, canonical):
    data = decode(token, width, mode).unwrap()
    assert encode(data, width, mode) == canonical
    assert decode(canonical, width, mode) == Ok(data)


def test_int_round_trip():
    rng = random.Random(SEED)
    for length in (1, 2, 4, 8):
        for signed in (False, True):
            lower = -(1 << (8 * length - 1)) if signed else 0
            upper = (1 << (8 * length - 1)) - 1 if signed else (1 << (8 * length)) - 1
            numbers = [lower, upper, 0] + [rng.randint(lower, upper) for _ in range(20)]
            for number in numbers:
                token = encode_int(number, length=length, signed=signed)
                assert len(token) == 2 * length
                assert decode_int(token, length=length, signed=signed) == Ok(number)
                if number >= 0:
                    conf = HexConf(mode=Mode.COMPACT, prefix=True)
                    token = encode_int(number, length=length, signed=signed, conf=conf)
                    assert decode_int(token, length=length, signed=signed, conf=conf) == Ok(number)


def test_empty_variable_buffer_does_not_round_trip():
    assert encode(b'', VARIABLE, Mode.STRICT) == ''
    result = decode(encode(b'', VARIABLE, Mode.STRICT), VARIABLE, Mode.STRICT)
    assert isinstance(result, Err)
    assert isinstance(result.err_value, EmptyInputError)

    assert encode(b'', VARIABLE, Mode.COMPACT) == '0'
    assert decode(encode(b'', VARIABLE, Mode.COMPACT), VARIABLE, Mode.COMPACT) == Ok(b'\x00')
