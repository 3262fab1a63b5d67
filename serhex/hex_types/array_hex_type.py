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
An array is a fixed number of values of the same fixed-width type, encoded as the concatenation of their big-endian
bytes, so a strict token has `2 * length * inner.width` digits and no separators.

>>> from serhex.conf import Mode
>>> from serhex.hex_types.sized_int_hex_type import Uint16HexType
>>> array = ArrayHexType(Uint16HexType(), 3)
>>> array.serialize_field((1, 0xabc, 0xffff))
'00010abcffff'
>>> array.deserialize_field('0x00010ABCFFFF')
Ok((1, 2748, 65535))

In compact mode the leading zero nibbles of the whole array are elided, not the ones of each element:

>>> array.serialize_field((0, 0, 0x10), Mode.COMPACT)
'10'
>>> array.deserialize_field('10', Mode.COMPACT)
Ok((0, 0, 16))
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from typing_extensions import override

from serhex.hex_types.hex_type import HexType
from serhex.types import VARIABLE, check_width

T = TypeVar('T')


class ArrayHexType(HexType[tuple[T, ...]]):
    __slots__ = ('_inner', '_length')

    _inner: HexType[T]
    _length: int

    def __init__(self, inner: HexType[T], length: int) -> None:
        if inner.width is VARIABLE:
            raise ValueError('array elements must have a fixed width')
        if length is VARIABLE:
            raise ValueError('array length must be fixed')
        check_width(length)
        self._inner = inner
        self._length = length

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._inner!r}, {self._length})'

    @property
    @override
    def width(self) -> int:
        assert self._inner.width is not VARIABLE
        return self._inner.width * self._length

    @override
    def _check_value(self, value: tuple[T, ...], /) -> None:
        if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
            raise TypeError(f'expected a sequence, not {type(value).__name__}')
        if len(value) != self._length:
            raise ValueError(f'expected {self._length} items, got {len(value)}')
        for item in value:
            self._inner.check_value(item)

    @override
    def _to_bytes(self, value: tuple[T, ...], /) -> bytes:
        return b''.join(self._inner.to_bytes(item) for item in value)

    @override
    def _from_bytes(self, data: bytes, /) -> tuple[T, ...]:
        step = self._inner.width
        assert step is not VARIABLE
        return tuple(self._inner.from_bytes(data[i:i + step]) for i in range(0, len(data), step))
