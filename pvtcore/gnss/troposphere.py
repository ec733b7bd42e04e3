"""Tropospheric delay models for GNSS.

This module implements the UNB3 neutral atmosphere model used to predict
zenith delays from the receiver position and the day of year, and the
elevation mapping function turning zenith delays into slant delays.
"""

from dataclasses import dataclass

import numpy as np
from numba import njit

from ..core.constants import D2R, G_GRAVITY, GM_ACCEL, K1_REFRAC, K2_REFRAC, RD_GAS

# UNB3 look-up table, rows at 15/30/45/60/75 deg of latitude.
# Columns: pressure [hPa], temperature [K], relative humidity [%],
# temperature lapse rate beta [K/m], water vapour lapse rate lambda.
UNB3_LATITUDES = np.array([15.0, 30.0, 45.0, 60.0, 75.0])

UNB3_AVERAGE = np.array([
    [1013.25, 299.65, 75.0, 6.30e-3, 2.77],
    [1017.25, 294.15, 80.0, 6.05e-3, 3.15],
    [1015.75, 283.15, 76.0, 5.58e-3, 2.57],
    [1011.75, 272.15, 77.5, 5.39e-3, 1.81],
    [1013.00, 263.65, 82.5, 4.53e-3, 1.55],
])

UNB3_AMPLITUDE = np.array([
    [0.00, 0.00, 0.0, 0.00e-3, 0.00],
    [-3.75, 7.00, 0.0, 0.25e-3, 0.33],
    [-2.25, 11.00, -1.0, 0.32e-3, 0.46],
    [-1.75, 15.00, -2.5, 0.81e-3, 0.74],
    [-0.50, 14.50, 2.5, 0.62e-3, 0.30],
])

# Day of year of minimum temperature, northern / southern hemisphere
DMIN_NORTH = 28.0
DMIN_SOUTH = 211.0


@dataclass
class TropoComponents:
    """Zenith tropospheric delay components

    Attributes
    ----------
    zwd : float
        Zenith wet delay in meters
    zdd : float
        Zenith dry (hydrostatic) delay in meters
    """
    zwd: float
    zdd: float

    @property
    def ztd(self):
        """Zenith total delay in meters"""
        return self.zwd + self.zdd


def unb3_meteo(t, lat_ddeg):
    """UNB3 meteorological parameters at the receiver latitude.

    Parameters
    ----------
    t : GNSSTime
        Epoch, only its day of year is used
    lat_ddeg : float
        Receiver latitude in decimal degrees

    Returns
    -------
    tuple
        (pressure [hPa], temperature [K], water vapour pressure [hPa],
        beta [K/m], lambda) at sea level
    """
    abs_lat = abs(lat_ddeg)
    # np.interp clamps below 15 and above 75 degrees
    avg = np.array([np.interp(abs_lat, UNB3_LATITUDES, UNB3_AVERAGE[:, i]) for i in range(5)])
    amp = np.array([np.interp(abs_lat, UNB3_LATITUDES, UNB3_AMPLITUDE[:, i]) for i in range(5)])

    dmin = DMIN_NORTH if lat_ddeg >= 0.0 else DMIN_SOUTH
    cos_term = np.cos(2.0 * np.pi * (t.day_of_year() - dmin) / 365.25)
    P, T, rh, beta, lambda_ = avg - amp * cos_term

    # Water vapour pressure from relative humidity
    es = 0.01 * np.exp(1.2378847e-5 * T**2 - 1.9121316e-2 * T + 33.93711047 - 6.3431645e3 / T)
    fw = 1.00062 + 3.14e-6 * P + 5.6e-7 * (T - 273.15)**2
    e = rh / 100.0 * es * fw

    return P, T, e, beta, lambda_


def unb3_delay_components(t, lat_ddeg, alt_above_sea_m):
    """UNB3 zenith delays at the receiver.

    Parameters
    ----------
    t : GNSSTime
        Epoch
    lat_ddeg : float
        Receiver latitude in decimal degrees
    alt_above_sea_m : float
        Receiver altitude above mean sea level in meters, negative values
        are treated as sea level

    Returns
    -------
    tuple
        (zdd, zwd) zenith dry and wet delays in meters

    References
    ----------
    Leandro, R., Santos, M., Langley, R. (2006), "UNB Neutral Atmosphere
    Models: Development and Performance", ION NTM 2006.
    """
    P, T, e, beta, lambda_ = unb3_meteo(t, lat_ddeg)
    H = max(float(alt_above_sea_m), 0.0)

    # Sea level zenith delays
    zdd0 = 1e-6 * K1_REFRAC * RD_GAS * P / GM_ACCEL
    zwd0 = 1e-6 * K2_REFRAC * RD_GAS / (GM_ACCEL * (lambda_ + 1.0) - beta * RD_GAS) * e / T

    base = 1.0 - beta * H / T
    if base <= 0.0:
        # above the model atmosphere
        return 0.0, 0.0

    zdd = zdd0 * base ** (G_GRAVITY / (RD_GAS * beta))
    zwd = zwd0 * base ** ((lambda_ + 1.0) * G_GRAVITY / (RD_GAS * beta) - 1.0)
    return float(zdd), float(zwd)


@njit(cache=True, fastmath=True)
def mapping_function(elevation_deg):
    """Elevation mapping function, 1 at zenith.

    m(el) = 1.001 / sqrt(0.002001 + sin(el)^2), valid above ~4 deg.
    """
    s = np.sin(elevation_deg * D2R)
    return 1.001 / np.sqrt(0.002001 + s * s)


@njit(cache=True, fastmath=True)
def tropo_delay(elevation_deg, zwd, zdd):
    """Slant tropospheric delay in meters.

    Parameters
    ----------
    elevation_deg : float
        Satellite elevation angle in degrees
    zwd : float
        Zenith wet delay in meters
    zdd : float
        Zenith dry delay in meters
    """
    return mapping_function(elevation_deg) * (zwd + zdd)
