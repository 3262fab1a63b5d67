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

from __future__ import annotations

from typing import TypeVar

from typing_extensions import override

from serhex.hex_types.hex_type import HexType
from serhex.types import VARIABLE, Width, check_width

B = TypeVar('B', bound=bytes)

_BYTES_LIKE = (bytes, bytearray, memoryview)


class BytesHexType(HexType[bytes]):
    """ Byte sequences of any length.

    In compact mode leading zero bytes are not preserved, only the numeric value of the sequence is.
    """

    __slots__ = ()

    @property
    @override
    def width(self) -> Width:
        return VARIABLE

    @override
    def _check_value(self, value: bytes, /) -> None:
        if not isinstance(value, _BYTES_LIKE):
            raise TypeError(f'expected bytes type, not {type(value).__name__}')

    @override
    def _to_bytes(self, value: bytes, /) -> bytes:
        return bytes(value)

    @override
    def _from_bytes(self, data: bytes, /) -> bytes:
        return data


class FixedSizeBytesHexType(HexType[B]):
    """ Byte sequences that always have exactly `size` bytes.

    Decoded values are built with `actual_type`, which lets byte-array newtypes round-trip as themselves.
    """

    __slots__ = ('_size', '_actual_type')

    _size: int
    _actual_type: type[B]

    def __init__(self, size: int, actual_type: type[B] = bytes) -> None:  # type: ignore[assignment]
        if size is VARIABLE:
            raise ValueError('size must be fixed, use BytesHexType for variable length')
        check_width(size)
        self._size = size
        self._actual_type = actual_type

    def __repr__(self) -> str:
        return f'{type(self).__name__}(size={self._size}, actual_type={self._actual_type.__name__})'

    @property
    @override
    def width(self) -> int:
        return self._size

    @override
    def _check_value(self, value: B, /) -> None:
        if not isinstance(value, _BYTES_LIKE):
            raise TypeError(f'expected bytes type, not {type(value).__name__}')
        if len(value) != self._size:
            raise ValueError(f'value has {len(value)} bytes, expected {self._size}')

    @override
    def _to_bytes(self, value: B, /) -> bytes:
        return bytes(value)

    @override
    def _from_bytes(self, data: bytes, /) -> B:
        return self._actual_type(data)
