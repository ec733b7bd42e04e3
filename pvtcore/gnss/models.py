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

"""Per satellite environmental delay models.

:class:`Models` holds the tropospheric delay of every satellite visible at
the current epoch. The table is rebuilt from scratch by each
:meth:`Models.modelize` call and read back with :meth:`Models.sum_up`, so a
value from a previous epoch can never leak into the current one.
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from ..config.modeling import resolve_modeling
from ..core.errors import MissingModelEntry
from ..core.satellite_numbering import sat2id
from . import troposphere
from .troposphere import TropoComponents

logger = logging.getLogger(__name__)


class Models:
    """Delay table: satellite number -> delay in meters"""

    def __init__(self):
        self._delays: Dict[int, float] = {}

    def __len__(self):
        return len(self._delays)

    def __contains__(self, sv):
        return sv in self._delays

    def __iter__(self):
        return iter(self._delays)

    def __repr__(self):
        content = ", ".join(f"{sat2id(sv)}: {v:.3f}" for sv, v in self._delays.items())
        return f"Models({{{content}}})"

    def items(self):
        return self._delays.items()

    def modelize(self, t, sv: Iterable[Tuple[int, float]], lat_ddeg: float,
                 alt_above_sea_m: float, cfg,
                 tropo_components: Optional[TropoComponents] = None):
        """Modelize environmental effects and atmospherical biases.

        Parameters
        ----------
        t : GNSSTime
            Current epoch
        sv : iterable of (int, float)
            (satellite, elevation in degrees) for every visible satellite
        lat_ddeg : float
            Receiver latitude in decimal degrees
        alt_above_sea_m : float
            Receiver altitude above sea level in meters
        cfg : Modeling
            Modeling flags, or a solver config exposing ``.modeling``
        tropo_components : TropoComponents, optional
            Zenith delays overriding the UNB3 model
        """
        modeling = resolve_modeling(cfg)
        # a failing call leaves an empty table, never a partial one
        self._delays = {}
        delays = {}

        for sat, elev in sv:
            delays[sat] = 0.0

            if modeling.tropo_delay:
                if tropo_components is not None:
                    components = tropo_components
                    logger.trace(
                        f"tropo delay (overridden): zwd: {components.zwd}, zdd: {components.zdd}")
                else:
                    zdd, zwd = troposphere.unb3_delay_components(t, lat_ddeg, alt_above_sea_m)
                    logger.trace(f"unb3 model: zwd: {zwd}, zdd: {zdd}")
                    components = TropoComponents(zwd=zwd, zdd=zdd)

                tropo = float(troposphere.tropo_delay(float(elev), components.zwd, components.zdd))
                logger.debug(f"{t}: {sat2id(sat)}(e={elev:.3f}) tropo delay {tropo} [m]")
                delays[sat] = tropo

        self._delays = delays

    def sum_up(self, sv: int) -> float:
        """Total modeled delay for ``sv`` in meters.

        Raises
        ------
        MissingModelEntry
            If ``sv`` was not part of the last modelize call
        """
        try:
            return self._delays[sv]
        except KeyError:
            raise MissingModelEntry(sv) from None

    def get(self, sv: int, default: Optional[float] = None) -> Optional[float]:
        """Modeled delay for ``sv``, or ``default`` when it was not modeled"""
        return self._delays.get(sv, default)
