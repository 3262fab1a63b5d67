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

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from result import Result

from serhex.codec import decode, encode
from serhex.conf import STRICT, HexConf, Mode
from serhex.exceptions import CodecError
from serhex.types import VARIABLE, Buffer, HexString, TextWriter, Width

T = TypeVar('T')


class HexType(ABC, Generic[T]):
    """ This class models a value type with a known byte width and how it is represented in hexadecimal.

    It is the converter a serialization framework calls for each field: `serialize_field` produces the token to emit
    and `deserialize_field` rebuilds the value from a token. Subclasses only describe how a value maps to and from
    its big-endian bytes; prefix handling, digit pairing and the strict/compact rules all live in the codec core.

    Instances are immutable, so a single instance can be shared by any number of fields and threads.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @property
    @abstractmethod
    def width(self) -> Width:
        """Byte width of every value of this type, or VARIABLE."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise TypeError if the value has an incompatible type, or ValueError if it does not fit the width.
        """
        # XXX: subclasses must implement HexType._check_value, not HexType.check_value
        self._check_value(value)

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Convert a value into its big-endian bytes, checking it first.
        """
        self._check_value(value)
        data = self._to_bytes(value)
        assert self.width is VARIABLE or len(data) == self.width  # XXX: double check
        return data

    @final
    def from_bytes(self, data: Buffer, /) -> T:
        """ Build a value from exactly `width` bytes (any amount when VARIABLE).
        """
        data = bytes(data)
        if self.width is not VARIABLE and len(data) != self.width:
            raise ValueError(f'expected {self.width} bytes, got {len(data)}')
        return self._from_bytes(data)

    @final
    def serialize_field(self, value: T, /, conf: HexConf | Mode = STRICT) -> HexString:
        """ Produce the token a serialization framework should emit for this value.
        """
        return encode(self.to_bytes(value), self.width, conf)

    @final
    def deserialize_field(self, token: HexString | Buffer, /, conf: HexConf | Mode = STRICT) -> Result[T, CodecError]:
        """ Rebuild a value from a token, malformed tokens result in an `Err` with the reason.
        """
        return decode(token, self.width, conf).map(self._from_bytes)

    @final
    def write_field(self, dst: TextWriter, value: T, /, conf: HexConf | Mode = STRICT) -> None:
        """ Write the token for this value into a text stream.
        """
        dst.write(self.serialize_field(value, conf))

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Inner implementation of `HexType.check_value`."""
        raise NotImplementedError

    @abstractmethod
    def _to_bytes(self, value: T, /) -> bytes:
        """ Inner implementation of `to_bytes`, you can assume that the given value has been checked.
        """
        raise NotImplementedError

    @abstractmethod
    def _from_bytes(self, data: bytes, /) -> T:
        """ Inner implementation of `from_bytes`, `data` always has the right length for a fixed width.
        """
        raise NotImplementedError
