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

"""GNSS epochs tagged with their time scale"""

from datetime import datetime, timedelta
from typing import Union

from .constants import BDT0, GPST0, GST0, SECONDS_PER_WEEK

VALID_TIME_SYSTEMS = ('GPS', 'GAL', 'BDS', 'GLO', 'UTC')

# Week counting origin of each scale. GLO and UTC epochs are counted from
# the GPS origin, expressed in their own scale.
_REFERENCE_EPOCHS = {
    'GPS': datetime(*GPST0),
    'GAL': datetime(*GST0),
    'BDS': datetime(*BDT0),
    'GLO': datetime(*GPST0),
    'UTC': datetime(*GPST0),
}


class GNSSTime:
    """GNSS epoch as week number + time of week, in a given time scale

    Time scales are never mixed silently: subtracting or comparing epochs
    from two different scales raises ValueError. Arithmetic with seconds
    works on the time of week, which keeps sub-nanosecond offsets intact
    (a single float of seconds since 1980 would not).
    """

    def __init__(self, week: int = 0, tow: float = 0.0, time_sys: str = 'GPS'):
        """
        Initialize GNSS time

        Parameters:
        -----------
        week : int
            Week number
        tow : float
            Time of week in seconds
        time_sys : str
            Time system ('GPS', 'GAL', 'BDS', 'GLO', 'UTC')
        """
        self.week = int(week)
        self.tow = float(tow)
        self.time_sys = time_sys.upper()

        if self.time_sys not in VALID_TIME_SYSTEMS:
            raise ValueError(f"Invalid time system: {time_sys}. Must be one of {list(VALID_TIME_SYSTEMS)}")

        # Normalize TOW to [0, 604800)
        if not 0.0 <= self.tow < SECONDS_PER_WEEK:
            weeks, self.tow = divmod(self.tow, SECONDS_PER_WEEK)
            self.week += int(weeks)
            # divmod can round a tiny negative remainder up to a full week
            if self.tow >= SECONDS_PER_WEEK:
                self.week += 1
                self.tow = 0.0

    @classmethod
    def from_datetime(cls, dt: datetime, time_sys: str = 'GPS') -> 'GNSSTime':
        """Create GNSSTime from a naive datetime already expressed in time_sys"""
        time_sys = time_sys.upper()
        if time_sys not in _REFERENCE_EPOCHS:
            raise ValueError(f"Unknown time system: {time_sys}")

        delta = dt - _REFERENCE_EPOCHS[time_sys]
        weeks = delta.days // 7
        tow = (delta.days % 7) * 86400 + delta.seconds + delta.microseconds * 1e-6

        return cls(weeks, tow, time_sys)

    @classmethod
    def from_gps_seconds(cls, gps_seconds: float, time_sys: str = 'GPS') -> 'GNSSTime':
        """Create GNSSTime from seconds elapsed since the scale origin"""
        week, tow = divmod(gps_seconds, SECONDS_PER_WEEK)
        return cls(int(week), tow, time_sys)

    def to_datetime(self) -> datetime:
        """Convert to a naive datetime in the same time scale"""
        return _REFERENCE_EPOCHS[self.time_sys] + timedelta(weeks=self.week, seconds=self.tow)

    def to_gps_seconds(self) -> float:
        """Seconds elapsed since the scale origin"""
        return self.week * SECONDS_PER_WEEK + self.tow

    def day_of_year(self) -> float:
        """Fractional day of year, 1.0 at January 1st 00:00"""
        dt = self.to_datetime()
        start = datetime(dt.year, 1, 1)
        return 1.0 + (dt - start).total_seconds() / 86400.0

    def add_seconds(self, seconds: float) -> 'GNSSTime':
        """Add seconds to time"""
        return GNSSTime(self.week, self.tow + seconds, self.time_sys)

    def __add__(self, seconds: float) -> 'GNSSTime':
        if isinstance(seconds, (int, float)):
            return self.add_seconds(seconds)
        return NotImplemented

    def __sub__(self, other: Union['GNSSTime', float]) -> Union[float, 'GNSSTime']:
        """Subtract an epoch (-> seconds) or a number of seconds (-> epoch)"""
        if isinstance(other, GNSSTime):
            if self.time_sys != other.time_sys:
                raise ValueError(f"Cannot subtract times with different systems: {self.time_sys} and {other.time_sys}")
            return (self.week - other.week) * SECONDS_PER_WEEK + (self.tow - other.tow)
        elif isinstance(other, (int, float)):
            return self.add_seconds(-other)
        return NotImplemented

    def _check_comparable(self, other: 'GNSSTime'):
        if self.time_sys != other.time_sys:
            raise ValueError(f"Cannot compare times with different systems: {self.time_sys} and {other.time_sys}")

    def __lt__(self, other: 'GNSSTime') -> bool:
        if not isinstance(other, GNSSTime):
            return NotImplemented
        self._check_comparable(other)
        return (self.week, self.tow) < (other.week, other.tow)

    def __le__(self, other: 'GNSSTime') -> bool:
        if not isinstance(other, GNSSTime):
            return NotImplemented
        self._check_comparable(other)
        return (self.week, self.tow) <= (other.week, other.tow)

    def __gt__(self, other: 'GNSSTime') -> bool:
        if not isinstance(other, GNSSTime):
            return NotImplemented
        self._check_comparable(other)
        return (self.week, self.tow) > (other.week, other.tow)

    def __ge__(self, other: 'GNSSTime') -> bool:
        if not isinstance(other, GNSSTime):
            return NotImplemented
        self._check_comparable(other)
        return (self.week, self.tow) >= (other.week, other.tow)

    def __eq__(self, other: 'GNSSTime') -> bool:
        """Equality within 1 ns"""
        if not isinstance(other, GNSSTime):
            return NotImplemented
        return self.time_sys == other.time_sys and abs(self - other) < 1e-9

    __hash__ = None

    def __str__(self):
        return f"{self.time_sys} Week: {self.week}, TOW: {self.tow:.9f}"

    def __repr__(self):
        return f"GNSSTime({self.week}, {self.tow!r}, '{self.time_sys}')"

    def copy(self) -> 'GNSSTime':
        """Create a copy of this time instance"""
        return GNSSTime(self.week, self.tow, self.time_sys)
