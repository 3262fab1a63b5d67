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
Per-type hexadecimal converters.

Each `HexType` subclass deals with a single family of values and only knows how a value maps to and from its
big-endian bytes; the representation itself is always delegated to `serhex.codec`. The singletons below are
immutable and can be shared freely.
"""

from serhex.hex_types.array_hex_type import ArrayHexType
from serhex.hex_types.bytes_hex_type import BytesHexType, FixedSizeBytesHexType
from serhex.hex_types.hex_type import HexType
from serhex.hex_types.sized_int_hex_type import (
    Int8HexType,
    Int16HexType,
    Int32HexType,
    Int64HexType,
    Uint8HexType,
    Uint16HexType,
    Uint32HexType,
    Uint64HexType,
)

UINT8 = Uint8HexType()
UINT16 = Uint16HexType()
UINT32 = Uint32HexType()
UINT64 = Uint64HexType()
INT8 = Int8HexType()
INT16 = Int16HexType()
INT32 = Int32HexType()
INT64 = Int64HexType()
BYTES = BytesHexType()

__all__ = [
    'HexType',
    'ArrayHexType',
    'BytesHexType',
    'FixedSizeBytesHexType',
    'Int8HexType',
    'Int16HexType',
    'Int32HexType',
    'Int64HexType',
    'Uint8HexType',
    'Uint16HexType',
    'Uint32HexType',
    'Uint64HexType',
    'UINT8',
    'UINT16',
    'UINT32',
    'UINT64',
    'INT8',
    'INT16',
    'INT32',
    'INT64',
    'BYTES',
]
