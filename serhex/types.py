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

from typing import Final, Protocol, TypeAlias

HexString: TypeAlias = str
Buffer: TypeAlias = bytes | bytearray | memoryview

# A width is either a fixed byte count or VARIABLE for buffers of any length.
Width: TypeAlias = int | None
VARIABLE: Final[Width] = None


def check_width(width: Width) -> None:
    """Raise TypeError or ValueError if `width` is not VARIABLE or a positive byte count."""
    if width is VARIABLE:
        return
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f'width must be an int or VARIABLE, not {type(width).__name__}')
    if width < 1:
        raise ValueError('width must be positive')


class TextWriter(Protocol):
    def write(self, data: str, /) -> object:
        ...
