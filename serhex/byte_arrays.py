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
Fixed-size byte-array newtypes.

>>> class Hash4(ByteArray):
...     _size = 4
>>> h = Hash4.fromhex('00ff10ab')
>>> h
Hash4(b'\x00\xff\x10\xab')
>>> f'{h:x} {h:X}'
'00ff10ab 00FF10AB'
>>> Hash4.hex_type().deserialize_field('0x00FF10AB').unwrap() == h
True
>>> Hash4(b'\x00')
Traceback (most recent call last):
...
ValueError: Hash4 must have 4 bytes, got 1
"""

from __future__ import annotations

from typing import ClassVar

from typing_extensions import Self

from serhex.hex_types.bytes_hex_type import FixedSizeBytesHexType
from serhex.types import Buffer, check_width


class ByteArray(bytes):
    """ Base class for `bytes` newtypes that always have exactly `_size` bytes.
    """

    # XXX: subclass must define this value:
    _size: ClassVar[int]

    def __new__(cls, data: Buffer) -> Self:
        size = getattr(cls, '_size', None)
        if size is None:
            raise TypeError(f'{cls.__name__} must define _size')
        self = super().__new__(cls, data)
        if len(self) != size:
            raise ValueError(f'{cls.__name__} must have {size} bytes, got {len(self)}')
        return self

    @classmethod
    def zero(cls) -> Self:
        return cls(bytes(cls._size))

    @classmethod
    def hex_type(cls) -> FixedSizeBytesHexType[Self]:
        return FixedSizeBytesHexType(cls._size, cls)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({bytes(self)!r})'

    def __format__(self, format_spec: str) -> str:
        if format_spec == 'x':
            return self.hex()
        if format_spec == 'X':
            return self.hex().upper()
        return super().__format__(format_spec)


def byte_array(name: str, size: int) -> type[ByteArray]:
    """ Create a ByteArray subclass named `name` with `size` bytes.
    """
    check_width(size)
    if size is None:
        raise ValueError('size must be fixed')
    return type(name, (ByteArray,), {'_size': size, '__slots__': ()})
