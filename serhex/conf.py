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
Configuration of the hexadecimal representation.

A `HexConf` combines the representation mode with how tokens are decorated on output. Decoding accepts every
decoration regardless of the configuration, so the decoration flags only ever affect encoding.

>>> STRICT
HexConf(mode=<Mode.STRICT: 'strict'>, prefix=False, uppercase=False)
>>> COMPACT_CAP_PFX.compact
True
>>> as_conf(Mode.COMPACT) is COMPACT
True
"""

from enum import Enum, unique

from serhex.utils.pydantic import BaseModel


@unique
class Mode(str, Enum):
    # fixed width, zero-padded, exact length required
    STRICT = 'strict'
    # variable width, leading zeros elided, shorter input accepted
    COMPACT = 'compact'


class HexConf(BaseModel):
    mode: Mode = Mode.STRICT

    # emit a `0x` prefix on output
    prefix: bool = False

    # emit `A-F` instead of `a-f` on output
    uppercase: bool = False

    @property
    def compact(self) -> bool:
        return self.mode is Mode.COMPACT


STRICT = HexConf(mode=Mode.STRICT)
STRICT_PFX = HexConf(mode=Mode.STRICT, prefix=True)
STRICT_CAP = HexConf(mode=Mode.STRICT, uppercase=True)
STRICT_CAP_PFX = HexConf(mode=Mode.STRICT, prefix=True, uppercase=True)

COMPACT = HexConf(mode=Mode.COMPACT)
COMPACT_PFX = HexConf(mode=Mode.COMPACT, prefix=True)
COMPACT_CAP = HexConf(mode=Mode.COMPACT, uppercase=True)
COMPACT_CAP_PFX = HexConf(mode=Mode.COMPACT, prefix=True, uppercase=True)

_DEFAULT_CONFS: dict[Mode, HexConf] = {
    Mode.STRICT: STRICT,
    Mode.COMPACT: COMPACT,
}


def as_conf(conf: HexConf | Mode) -> HexConf:
    """Normalize a bare `Mode` into its undecorated `HexConf`."""
    if isinstance(conf, HexConf):
        return conf
    if isinstance(conf, Mode):
        return _DEFAULT_CONFS[conf]
    raise TypeError(f'expected HexConf or Mode, not {type(conf).__name__}')
