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


class CodecError(ValueError):
    """Base class for every failure to decode a hexadecimal token.

    Instances are returned wrapped in `result.Err` by the codec, they are only raised at the framework boundary.
    """


class EmptyInputError(CodecError):
    """There are no digits left after stripping the optional `0x` prefix."""

    def __init__(self) -> None:
        super().__init__('empty hex string')


class InvalidCharacterError(CodecError):
    def __init__(self, position: int, char: str) -> None:
        super().__init__(f'invalid hex character {char!r} at position {position}')
        self.position = position
        self.char = char


class LengthMismatchError(CodecError):
    """The digit count does not match what a strict representation requires."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f'expected {expected} hex digits, got {actual}')
        self.expected = expected
        self.actual = actual


class HexOverflowError(CodecError):
    """A compact representation has more digits than the target width can hold."""

    def __init__(self, max_digits: int, actual: int) -> None:
        super().__init__(f'at most {max_digits} hex digits fit, got {actual}')
        self.max_digits = max_digits
        self.actual = actual
