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

"""Position solving candidates.

A candidate gathers, for one satellite and one sampling epoch, the pseudo
range observations and the satellite state resolved by the orbit/clock
interpolation. It resolves the signal transmission time the solver needs
to evaluate the satellite position.

Example Usage:
    >>> from pvtcore import Candidate, PseudoRange, GNSSTime, Modeling, FREQ_L1
    >>> t = GNSSTime(2300, 345600.0, 'GPS')
    >>> cd = Candidate(1, t, [0.0, 0.0, 0.0], 1.0e-4, 42.0,
    ...                [PseudoRange(20.0e6, FREQ_L1)])
    >>> t_tx = cd.transmission_time(Modeling())
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..config.modeling import resolve_modeling
from ..core.constants import CLIGHT
from ..core.errors import NeedsAtLeastOnePseudoRange, PhysicallyImplausibleTransmissionTime
from ..core.satellite_numbering import sat2id
from ..core.time import GNSSTime

logger = logging.getLogger(__name__)


@dataclass
class PseudoRange:
    """Pseudo range observation on a specific carrier frequency

    Attributes
    ----------
    value : float
        Pseudo range in meters
    frequency : float
        Carrier frequency in Hz
    """
    value: float
    frequency: float


class Candidate:
    """Position solving candidate

    Attributes
    ----------
    sv : int
        Satellite number (unified numbering)
    t : GNSSTime
        Signal sampling instant
    state : np.ndarray or None
        Satellite position (3,), resolved by the orbit interpolation
    elevation : float or None
        Satellite elevation angle in degrees
    azimuth : float or None
        Satellite azimuth angle in degrees
    tgd : float or None
        Total group delay in seconds
    clock_state : np.ndarray
        Satellite clock bias, drift and drift rate, shape (3,)
    clock_corr : float
        Satellite clock correction in seconds
    snr : float or None
        SNR at sampling instant in dB
    pseudo_range : list of PseudoRange
        Pseudo range observations at ``t``, never empty
    """

    def __init__(self, sv: int, t: GNSSTime, clock_state, clock_corr: float,
                 snr: Optional[float], pseudo_range: List[PseudoRange]):
        """
        Parameters:
        -----------
        sv : int
            Satellite number
        t : GNSSTime
            Epoch at which the signals were sampled
        clock_state : array_like, shape (3,)
            Satellite clock state
        clock_corr : float
            Satellite clock correction to apply, in seconds
        snr : float or None
            SNR at sampling instant in dB. Ideally the worst SNR over all
            considered carriers.
        pseudo_range : list of PseudoRange
            Observations on as many carriers as available

        Raises:
        -------
        NeedsAtLeastOnePseudoRange
            If ``pseudo_range`` is empty
        """
        pseudo_range = list(pseudo_range)
        if len(pseudo_range) == 0:
            raise NeedsAtLeastOnePseudoRange(sv)

        clock_state = np.asarray(clock_state, dtype=float)
        if clock_state.shape != (3,):
            raise ValueError(f"clock_state must have shape (3,), got {clock_state.shape}")

        self.sv = sv
        self.t = t
        self.clock_state = clock_state
        self.clock_corr = float(clock_corr)
        self.snr = snr
        self.pseudo_range = pseudo_range
        self.state = None
        self.elevation = None
        self.azimuth = None
        self.tgd = None

    def __repr__(self):
        return (f"Candidate(sv={sat2id(self.sv)}, t={self.t!r}, "
                f"n_pr={len(self.pseudo_range)}, interpolated={self.interpolated()})")

    def set_state(self, state):
        """Store the interpolated satellite position"""
        state = np.asarray(state, dtype=float)
        if state.shape != (3,):
            raise ValueError(f"state must have shape (3,), got {state.shape}")
        self.state = state

    def set_elevation_azimuth(self, elevation: float, azimuth: float):
        """Store elevation and azimuth as seen from the receiver, in degrees"""
        self.elevation = float(elevation)
        self.azimuth = float(azimuth)

    def set_group_delay(self, tgd: Optional[float]):
        """Store the total group delay in seconds (None to clear it)"""
        self.tgd = None if tgd is None else float(tgd)

    def interpolated(self) -> bool:
        """True once state, elevation and azimuth have all been resolved"""
        return (self.state is not None
                and self.elevation is not None
                and self.azimuth is not None)

    def pseudo_range_value(self) -> float:
        """One pseudo range observation [m], disregarding its frequency.

        Always the first observation given at construction. Look into
        ``pseudo_range`` directly for frequency dependent processing.
        """
        return self.pseudo_range[0].value

    def transmission_time(self, cfg) -> GNSSTime:
        """Signal transmission epoch, in the time scale of ``t``

        Parameters:
        -----------
        cfg : Modeling
            Modeling flags, or a solver config exposing ``.modeling``

        Returns:
        --------
        GNSSTime
            ``t - pr/c``, minus the satellite clock correction and the total
            group delay when enabled

        Raises:
        -------
        PhysicallyImplausibleTransmissionTime
            If the resolved epoch is not within (0, 1) s before ``t``
        """
        modeling = resolve_modeling(cfg)
        t = self.t

        # light time of flight
        dt = self.pseudo_range_value() / CLIGHT

        if modeling.sv_clock_bias:
            logger.debug(f"{t}: {sat2id(self.sv)} dt_sat {self.clock_corr:.12e} s")
            dt += self.clock_corr

        if modeling.sv_total_group_delay and self.tgd is not None:
            logger.debug(f"{t}: {sat2id(self.sv)} tgd {self.tgd:.12e} s")
            dt += self.tgd

        # also rejects nan and inf
        if not 0.0 < dt < 1.0:
            raise PhysicallyImplausibleTransmissionTime(self.sv, t, dt)

        return t - dt
