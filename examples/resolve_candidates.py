#!/usr/bin/env python3
"""
Candidate Correction Example using pvtcore

This example demonstrates:
1. Building one candidate per visible satellite for a sampling epoch
2. Filling in the interpolated state, elevation and group delay
3. Resolving transmission times, skipping implausible candidates
4. Modeling the tropospheric delay of every visible satellite
"""

from datetime import datetime

from pvtcore import (
    Candidate, GNSSTime, Modeling, Models, PseudoRange,
    PhysicallyImplausibleTransmissionTime, FREQ_L1, FREQ_L2, sat2id,
)
from pvtcore.logger import setup_logger

# (sat, pseudo range L1, pseudo range L2, clock corr, tgd, elevation, azimuth)
EPOCH_DATA = [
    (5, 21_312_554.3, 21_312_558.9, 1.21e-4, -4.6e-9, 62.1, 41.0),
    (12, 23_901_002.7, 23_901_007.1, -3.40e-5, 2.3e-9, 24.7, 210.5),
    (25, 20_450_871.9, 20_450_875.0, 5.06e-4, None, 81.3, 300.2),
    (29, 0.0, 0.0, 0.0, None, 8.4, 95.0),  # corrupted observation
]

RECEIVER_LAT = 48.85  # degrees
RECEIVER_ALT = 35.0   # meters above sea level


def main():
    logger = setup_logger("pvtcore", "DEBUG")
    cfg = Modeling()
    t = GNSSTime.from_datetime(datetime(2024, 3, 15, 6, 0, 0))

    candidates = []
    for sat, pr1, pr2, clock_corr, tgd, elev, azim in EPOCH_DATA:
        cd = Candidate(sat, t, [clock_corr, 0.0, 0.0], clock_corr, 45.0,
                       [PseudoRange(pr1, FREQ_L1), PseudoRange(pr2, FREQ_L2)])
        cd.set_group_delay(tgd)
        cd.set_elevation_azimuth(elev, azim)
        candidates.append(cd)

    resolved = []
    for cd in candidates:
        try:
            t_tx = cd.transmission_time(cfg)
        except PhysicallyImplausibleTransmissionTime as e:
            logger.warning(f"skipping candidate: {e}")
            continue
        logger.info(f"{sat2id(cd.sv)}: t_tx = {t_tx} (dt = {t - t_tx:.9f} s)")
        resolved.append(cd)

    models = Models()
    models.modelize(t, [(cd.sv, cd.elevation) for cd in resolved],
                    RECEIVER_LAT, RECEIVER_ALT, cfg)
    for cd in resolved:
        logger.info(f"{sat2id(cd.sv)}: tropo = {models.sum_up(cd.sv):.3f} m")


if __name__ == "__main__":
    main()
