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
Integration of hex types with pydantic models.

A field opts into hexadecimal (de)serialization by carrying a `SerHex` annotation with the hex type and the
configuration to use:

>>> from typing import Annotated
>>> from serhex.conf import COMPACT_PFX, STRICT_PFX
>>> from serhex.hex_types import UINT64, FixedSizeBytesHexType
>>> class Foo(BaseModel):
...     bar: Annotated[bytes, SerHex(FixedSizeBytesHexType(4), STRICT_PFX)]
...     bin: Annotated[int, SerHex(UINT64, COMPACT_PFX)]
>>> Foo(bar=bytes(4), bin=0xff).model_dump_json()
'{"bar":"0x00000000","bin":"0xff"}'
>>> Foo.model_validate_json('{"bar": "0xaaaaaaaa", "bin": "0x1234"}')
Foo(bar=b'\xaa\xaa\xaa\xaa', bin=4660)

Tokens are only recognized as `str`, any other input is taken as an already decoded value, checked and normalized
through the hex type. A malformed token aborts validation of the whole model with a `ValidationError`.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema
from result import Err, Ok
from structlog import get_logger

from serhex.conf import STRICT, HexConf, Mode, as_conf
from serhex.hex_types import HexType
from serhex.types import HexString
from serhex.utils.pydantic import BaseModel

__all__ = [
    'BaseModel',
    'SerHex',
]

logger = get_logger()

T = TypeVar('T')

HEX_TOKEN_PATTERN = r'^(0[xX])?[0-9a-fA-F]+$'


@dataclass(frozen=True)
class SerHex(Generic[T]):
    """Field annotation that makes pydantic use `hex_type` to (de)serialize the field."""

    hex_type: HexType[T]
    conf: HexConf | Mode = STRICT

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self.deserialize,
            serialization=core_schema.plain_serializer_function_ser_schema(self.serialize),
        )

    def __get_pydantic_json_schema__(self, schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {'type': 'string', 'pattern': HEX_TOKEN_PATTERN}

    def serialize(self, value: T) -> HexString:
        return self.hex_type.serialize_field(value, as_conf(self.conf))

    def deserialize(self, value: Any) -> T:
        """Convert a token into a value, or normalize a value that was given directly."""
        if isinstance(value, str):
            match self.hex_type.deserialize_field(value, as_conf(self.conf)):
                case Ok(decoded):
                    return decoded
                case Err(error):
                    logger.debug('hex field rejected', hex_type=repr(self.hex_type), token=value, error=str(error))
                    raise error
        try:
            return self.hex_type.from_bytes(self.hex_type.to_bytes(value))
        except TypeError as e:
            raise ValueError(str(e)) from e
