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

"""
Padding, truncation and length validation rules for each representation mode.

Policies work on bare digit strings (no prefix, already validated as hexadecimal), so the codec core can share the
prefix stripping and digit pairing between every width.

>>> get_policy(Mode.COMPACT).trim('000f0a')
'f0a'
>>> get_policy(Mode.COMPACT).fit('f', 2)
Ok('000f')
>>> get_policy(Mode.STRICT).fit('abc', 2)
Err(LengthMismatchError('expected 4 hex digits, got 3'))
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from result import Err, Ok, Result
from typing_extensions import override

from serhex.conf import Mode
from serhex.exceptions import CodecError, HexOverflowError, LengthMismatchError
from serhex.types import VARIABLE, Width


class ModePolicy(ABC):
    __slots__ = ()

    # XXX: subclasses must define this value
    mode: ClassVar[Mode]

    @abstractmethod
    def trim(self, digits: str) -> str:
        """Shape the full-width digits of an encoded value into the representation of this mode."""
        raise NotImplementedError

    @abstractmethod
    def fit(self, digits: str, width: Width) -> Result[str, CodecError]:
        """Validate decoded digits against the target width and return an even-length digit string.

        For a fixed width the returned string always has exactly `2 * width` digits.
        """
        raise NotImplementedError


class StrictPolicy(ModePolicy):
    __slots__ = ()

    mode = Mode.STRICT

    @override
    def trim(self, digits: str) -> str:
        return digits

    @override
    def fit(self, digits: str, width: Width) -> Result[str, CodecError]:
        actual = len(digits)
        if width is VARIABLE:
            expected = actual + actual % 2
        else:
            expected = 2 * width
        if actual != expected:
            return Err(LengthMismatchError(expected, actual))
        return Ok(digits)


class CompactPolicy(ModePolicy):
    __slots__ = ()

    mode = Mode.COMPACT

    @override
    def trim(self, digits: str) -> str:
        # zero is still one digit
        return digits.lstrip('0') or '0'

    @override
    def fit(self, digits: str, width: Width) -> Result[str, CodecError]:
        actual = len(digits)
        if width is VARIABLE:
            return Ok('0' + digits if actual % 2 else digits)
        max_digits = 2 * width
        if actual > max_digits:
            return Err(HexOverflowError(max_digits, actual))
        return Ok(digits.rjust(max_digits, '0'))


_POLICIES: dict[Mode, ModePolicy] = {
    Mode.STRICT: StrictPolicy(),
    Mode.COMPACT: CompactPolicy(),
}


def get_policy(mode: Mode) -> ModePolicy:
    return _POLICIES[mode]
