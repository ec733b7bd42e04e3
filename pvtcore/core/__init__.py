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

"""Core building blocks.

- **Constants**: speed of light, carrier frequencies, system ids, WGS84 and
  neutral atmosphere constants
- **Satellite numbering**: unified satellite numbers and RINEX ids
- **Time**: :class:`GNSSTime`, week/tow epochs bound to a time scale
- **Errors**: typed exceptions raised across the package

Example Usage:
    >>> from pvtcore.core import GNSSTime, prn2sat, SYS_GAL, sat2id
    >>> t = GNSSTime(2300, 345600.0, 'GPS')
    >>> sat2id(prn2sat(5, SYS_GAL))
    'E05'
"""

from .constants import *
from .errors import (
    MissingModelEntry,
    NeedsAtLeastOnePseudoRange,
    PhysicallyImplausibleTransmissionTime,
    PvtError,
)
from .satellite_numbering import id2sat, sat2id
from .time import GNSSTime
