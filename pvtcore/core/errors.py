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

"""Exceptions raised by pvtcore"""

import numpy as np

from .satellite_numbering import sat2id


class PvtError(Exception):
    """Base class of every pvtcore error"""


class NeedsAtLeastOnePseudoRange(PvtError, ValueError):
    """A candidate was built without any pseudo range observation"""

    def __init__(self, sv=None):
        self.sv = sv
        if sv is None:
            msg = "candidate needs at least one pseudo range observation"
        else:
            msg = f"{sat2id(sv)}: candidate needs at least one pseudo range observation"
        super().__init__(msg)


class PhysicallyImplausibleTransmissionTime(PvtError, ValueError):
    """Resolved transmission time is not within (0, 1) s of the sampling time

    The sampling epoch, pseudo range or time scale fed to the candidate is
    wrong. The solver should drop this satellite for the epoch.

    Attributes
    ----------
    sv : int
        Satellite number
    t : GNSSTime
        Sampling instant
    dt : float
        Resolved sampling - transmission gap in seconds
    """

    def __init__(self, sv, t, dt):
        self.sv = sv
        self.t = t
        self.dt = dt
        if not np.isfinite(dt):
            reason = "resolved t_tx is not finite"
        elif dt <= 0.0:
            reason = "resolved t_tx is physically impossible"
        else:
            reason = "|t - t_tx| >= 1 s is physically impossible"
        super().__init__(f"{t}: {sat2id(sv)} {reason} (dt={dt:.9f} s)")


class MissingModelEntry(PvtError, KeyError):
    """Delay queried for a satellite that was not modeled this epoch"""

    def __init__(self, sv):
        self.sv = sv
        super().__init__(sv)

    def __str__(self):
        return f"{sat2id(self.sv)} was not modeled in the current epoch"
