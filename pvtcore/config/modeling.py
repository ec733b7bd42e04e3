# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Physical and Atmospherical Modeling Flags
=========================================

Selects which corrections are applied while resolving a candidate:

1. SV_CLOCK_BIAS - satellite clock offset on the transmission time
2. TROPO_DELAY - tropospheric slant delay
3. IONO_DELAY - ionospheric delay (applied by the solver)
4. SV_TOTAL_GROUP_DELAY - broadcast TGD on the transmission time
5. EARTH_ROTATION - Sagnac correction (applied by the solver)
6. RELATIVISTIC_CLOCK_CORR - relativistic clock term (applied by the solver)

The flags are always passed explicitly; there is no module level state.
"""

import logging
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Mapping

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Solving modes"""
    SPP = 0       # Single point positioning
    LSQ_SPP = 1   # Recursive least squares SPP
    PPP = 2       # Precise point positioning


@dataclass(frozen=True)
class Modeling:
    """Which physical corrections are active"""
    sv_clock_bias: bool = True
    tropo_delay: bool = True
    iono_delay: bool = True
    sv_total_group_delay: bool = True
    earth_rotation: bool = False
    relativistic_clock_corr: bool = False

    @classmethod
    def from_mode(cls, mode: Mode) -> 'Modeling':
        """Default modeling for a solving mode.

        Every mode uses the defaults for now.
        """
        # TODO: enable earth_rotation and relativistic_clock_corr for Mode.PPP
        # once the solver applies both terms.
        if not isinstance(mode, Mode):
            raise TypeError(f"Expected a Mode, got {type(mode).__name__}")
        return cls()

    @classmethod
    def from_dict(cls, config: Mapping[str, bool]) -> 'Modeling':
        """Build from a mapping; missing flags keep their default"""
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown modeling flags: {sorted(unknown)}")
        for name, value in config.items():
            if not isinstance(value, bool):
                raise ValueError(f"Modeling flag '{name}' must be a bool, got {value!r}")
        modeling = cls(**config)
        logger.debug(f"modeling: {modeling.to_dict()}")
        return modeling

    def to_dict(self) -> dict:
        return asdict(self)


def resolve_modeling(cfg) -> Modeling:
    """Accept either a Modeling or a solver config carrying ``.modeling``"""
    if isinstance(cfg, Modeling):
        return cfg
    modeling = getattr(cfg, 'modeling', None)
    if isinstance(modeling, Modeling):
        return modeling
    raise TypeError(f"Expected Modeling or a config with a 'modeling' attribute, got {type(cfg).__name__}")
