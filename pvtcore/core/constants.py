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

"""GNSS Constants and System Parameters"""

import numpy as np

# Physical Constants
CLIGHT = 299792458.0  # speed of light (m/s)

# GPS frequencies
FREQ_L1 = 1.57542E9   # L1 frequency (Hz)
FREQ_L2 = 1.22760E9   # L2 frequency (Hz)
FREQ_L5 = 1.17645E9   # L5 frequency (Hz)

# GNSS System IDs
SYS_NONE = 0x00   # invalid / unknown
SYS_GPS = 0x01    # GPS
SYS_GLO = 0x02    # GLONASS
SYS_GAL = 0x04    # Galileo
SYS_BDS = 0x08    # BeiDou
SYS_QZS = 0x10    # QZSS
SYS_SBS = 0x20    # SBAS
SYS_IRN = 0x40    # IRNSS

# Time System Parameters
GPST0 = [1980, 1, 6, 0, 0, 0]  # GPS time reference epoch
GST0 = [1999, 8, 22, 0, 0, 0]  # Galileo time reference epoch
BDT0 = [2006, 1, 1, 0, 0, 0]   # BeiDou time reference epoch
SECONDS_PER_WEEK = 604800.0

# Unit conversions
D2R = np.pi / 180.0            # degrees to radians

# Gravity constant
G_GRAVITY = 9.80665            # Earth's gravity constant (m/s^2)

# Neutral atmosphere (UNB3)
K1_REFRAC = 77.604             # K/hPa
K2_REFRAC = 382000.0           # K^2/hPa
RD_GAS = 287.054               # dry air gas constant (J/kg/K)
GM_ACCEL = 9.784               # gravity at the atmosphere mass centroid (m/s^2)


def sat2sys(sat):
    """Get satellite system from satellite number

    Uses unified satellite numbering from satellite_numbering.py
    """
    from .satellite_numbering import SATELLITE_RANGES

    if sat <= 0 or sat > 255:
        return SYS_NONE

    for sys_id, ranges in SATELLITE_RANGES.items():
        for start, end in ranges:
            if start <= sat <= end:
                return sys_id

    return SYS_NONE


def sat2prn(sat):
    """Get PRN number from satellite number"""
    from .satellite_numbering import sat_to_prn
    return sat_to_prn(sat)


def prn2sat(prn, sys):
    """Get satellite number from PRN and system

    Parameters:
    -----------
    prn : int
        PRN number
    sys : int
        Satellite system (SYS_GPS, SYS_GLO, etc.)

    Returns:
    --------
    int
        Satellite number, 0 when the pair is invalid
    """
    from .satellite_numbering import SYS_TO_CHAR, prn_to_sat

    sys_char = SYS_TO_CHAR.get(sys, None)
    if sys_char is None:
        return 0

    return prn_to_sat(sys_char, prn)


def sys2char(sys):
    """Convert system ID to character"""
    from .satellite_numbering import SYS_TO_CHAR
    return SYS_TO_CHAR.get(sys, ' ')


def char2sys(c):
    """Convert character to system ID"""
    from .satellite_numbering import CHAR_TO_SYS
    return CHAR_TO_SYS.get(c.upper(), SYS_NONE)
