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
Hexadecimal (de)serialization of fixed and variable width binary values.

The codec core lives in `serhex.codec`, per-type converters in `serhex.hex_types` and the pydantic integration in
`serhex.serde`; the most used names are re-exported here.
"""

from serhex.byte_arrays import ByteArray, byte_array
from serhex.codec import decode, decode_int, encode, encode_int
from serhex.conf import (
    COMPACT,
    COMPACT_CAP,
    COMPACT_CAP_PFX,
    COMPACT_PFX,
    STRICT,
    STRICT_CAP,
    STRICT_CAP_PFX,
    STRICT_PFX,
    HexConf,
    Mode,
)
from serhex.exceptions import CodecError, EmptyInputError, HexOverflowError, InvalidCharacterError, LengthMismatchError
from serhex.serde import SerHex
from serhex.types import VARIABLE
from serhex.version import __version__

__all__ = [
    'ByteArray',
    'byte_array',
    'decode',
    'decode_int',
    'encode',
    'encode_int',
    'COMPACT',
    'COMPACT_CAP',
    'COMPACT_CAP_PFX',
    'COMPACT_PFX',
    'STRICT',
    'STRICT_CAP',
    'STRICT_CAP_PFX',
    'STRICT_PFX',
    'HexConf',
    'Mode',
    'CodecError',
    'EmptyInputError',
    'HexOverflowError',
    'InvalidCharacterError',
    'LengthMismatchError',
    'SerHex',
    'VARIABLE',
    '__version__',
]
