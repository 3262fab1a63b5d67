# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This module implements the hexadecimal codec core: conversion between byte sequences and hex tokens.

Every byte is written as two digits, most significant nibble first, and multi-byte values are presented big-endian.
Decoding accepts an optional `0x`/`0X` prefix and digits in any case, and reports malformed input as an `Err` value
instead of raising.

>>> encode(b'\x00\x0f', 2, Mode.STRICT)
'000f'
>>> encode(b'\x00\x0f', 2, Mode.COMPACT)
'f'
>>> encode(b'\x00\x00', VARIABLE, Mode.COMPACT)
'0'
>>> encode(b'\xca\xfe', 2, HexConf(prefix=True, uppercase=True))
'0xCAFE'

>>> decode('0xFF', 1, Mode.STRICT)
Ok(b'\xff')
>>> decode('f', 1, Mode.COMPACT)
Ok(b'\x0f')
>>> decode('12g4', 2, Mode.STRICT)
Err(InvalidCharacterError("invalid hex character 'g' at position 2"))
>>> decode('abcdef', 2, Mode.COMPACT)
Err(HexOverflowError('at most 4 hex digits fit, got 6'))

>>> encode_int(1234, length=4)
'000004d2'
>>> encode_int(-1234, length=2, signed=True)
'fb2e'
>>> decode_int('0x4d2', length=8, conf=Mode.COMPACT)
Ok(1234)
"""

from result import Err, Result

from serhex.conf import STRICT, HexConf, Mode, as_conf
from serhex.exceptions import CodecError, EmptyInputError, InvalidCharacterError
from serhex.policy import get_policy
from serhex.types import VARIABLE, Buffer, HexString, Width, check_width

__all__ = [
    'VARIABLE',
    'Mode',
    'decode',
    'decode_int',
    'encode',
    'encode_int',
    'strip_prefix',
]

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_PREFIXES = ('0x', '0X')


def strip_prefix(text: str) -> str:
    """Remove a leading `0x` or `0X`, if any."""
    if text.startswith(_PREFIXES):
        return text[2:]
    return text


def _as_text(token: HexString | Buffer) -> str:
    if isinstance(token, str):
        return token
    if isinstance(token, (bytes, bytearray, memoryview)):
        # latin-1 maps each byte to exactly one char, non-ascii bytes end up as invalid characters
        return bytes(token).decode('latin-1')
    raise TypeError(f'expected str or bytes-like token, not {type(token).__name__}')


def _decorate(digits: str, conf: HexConf) -> HexString:
    if conf.uppercase:
        digits = digits.upper()
    if conf.prefix:
        digits = '0x' + digits
    return digits


def encode(data: Buffer, width: Width, conf: HexConf | Mode = STRICT) -> HexString:
    """ Encode a byte sequence as a hex token.

    A fixed `width` must match the length of `data`, otherwise it is a usage error and ValueError is raised. This
    module's docstring has more details and examples.

    Encoding never fails on a well-formed buffer, including the empty one: in strict mode an empty variable width
    buffer encodes as `''`, which `decode` rejects with EmptyInputError, so it is the one buffer that does not
    survive a strict round trip. Compact mode encodes it as `'0'`, which decodes back to a single zero byte.
    """
    check_width(width)
    conf = as_conf(conf)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f'expected bytes-like value, not {type(data).__name__}')
    data = bytes(data)
    if width is not VARIABLE and len(data) != width:
        raise ValueError(f'expected {width} bytes, got {len(data)}')
    digits = get_policy(conf.mode).trim(data.hex())
    return _decorate(digits, conf)


def decode(token: HexString | Buffer, width: Width, conf: HexConf | Mode = STRICT) -> Result[bytes, CodecError]:
    """ Decode a hex token into a byte sequence.

    For a fixed `width` a successful result always has exactly `width` bytes. This module's docstring has more
    details and examples.
    """
    check_width(width)
    conf = as_conf(conf)
    digits = strip_prefix(_as_text(token))
    if not digits:
        return Err(EmptyInputError())
    for position, char in enumerate(digits):
        if char not in _HEX_DIGITS:
            return Err(InvalidCharacterError(position, char))
    return get_policy(conf.mode).fit(digits, width).map(bytes.fromhex)


def encode_int(number: int, *, length: int, signed: bool = False, conf: HexConf | Mode = STRICT) -> HexString:
    """ Encode an int using the given byte-length and signedness.

    This module's docstring has more details and examples.
    """
    if not isinstance(number, int):
        raise TypeError(f'expected int, not {type(number).__name__}')
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=signed)
    except OverflowError:
        raise ValueError('too big to encode')
    return encode(data, length, conf)


def decode_int(
    token: HexString | Buffer,
    *,
    length: int,
    signed: bool = False,
    conf: HexConf | Mode = STRICT,
) -> Result[int, CodecError]:
    """ Decode an int using the given byte-length and signedness.

    Compact tokens are padded with zero nibbles, so a short token always decodes to a non-negative number. This
    module's docstring has more details and examples.
    """
    return decode(token, length, conf).map(lambda data: int.from_bytes(data, byteorder='big', signed=signed))
