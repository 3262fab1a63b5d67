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

from typing import ClassVar

from typing_extensions import override

from serhex.hex_types.hex_type import HexType


class _SizedIntHexType(HexType[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.

    Values are presented big-endian, signed values in two's complement.
    """

    __slots__ = ()

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @property
    @override
    def width(self) -> int:
        return self._byte_size

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    def _check_value(self, value: int, /) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'expected integer, not {type(value).__name__}')
        if value > self._upper_bound_value():
            raise ValueError('above upper bound')
        if value < self._lower_bound_value():
            raise ValueError('below lower bound')

    @override
    def _to_bytes(self, value: int, /) -> bytes:
        return int.to_bytes(value, self._byte_size, byteorder='big', signed=self._signed)

    @override
    def _from_bytes(self, data: bytes, /) -> int:
        return int.from_bytes(data, byteorder='big', signed=self._signed)


class Uint8HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = False
    _byte_size = 1


class Uint16HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = False
    _byte_size = 2


class Uint32HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = False
    _byte_size = 4  # 4-bytes -> 32-bits


class Uint64HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = False
    _byte_size = 8


class Int8HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = True
    _byte_size = 1


class Int16HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = True
    _byte_size = 2


class Int32HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = True
    _byte_size = 4  # 4-bytes -> 32-bits


class Int64HexType(_SizedIntHexType):
    __slots__ = ()
    _signed = True
    _byte_size = 8
