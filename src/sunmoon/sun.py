"""
sunmoon.sun — Solar Ephemeris, Position & Daily Events
=======================================================

Low-precision analytical solar position (accurate to roughly a minute of
time for rise/set) and the closed-form solver for the instants at which the
Sun crosses a given altitude.

Capabilities
------------
- Solar mean anomaly, ecliptic longitude and equatorial coordinates
- Sun azimuth / altitude for an observer
- Solar noon, nadir, sunrise/sunset, civil/nautical/astronomical twilight
  and golden hour for a day
- Morning/evening pair for any custom threshold altitude

Event instants are obtained from the solar transit and the hour angle of
the threshold altitude.  The morning instant is the evening instant
reflected about solar noon.  A threshold the Sun never reaches yields NaN
inside the solver and ``None`` in the result.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 25.
"""

import logging
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

import numpy as np

from .frames import (
    Observer, EquatorialCoordinates,
    right_ascension, declination, sidereal_time,
    azimuth, altitude, hour_angle,
)
from .utils import (
    PI, RAD, TWO_PI,
    to_days, from_julian, julian_cycle, approx_transit, solar_transit_j,
)

LOGGER = logging.getLogger(__name__)

# ── Constants ───────────────────────────────────────────────────────────────
PERIHELION = RAD * 102.9372     # longitude of perihelion of the Earth [rad]

# (threshold altitude [deg], morning event, evening event)
SUN_TIMES = (
    (-0.83, "sunrise", "sunset"),
    (-0.3, "sunrise_end", "sunset_start"),
    (-6.0, "dawn", "dusk"),
    (-12.0, "nautical_dawn", "nautical_dusk"),
    (-18.0, "night_end", "night"),
    (6.0, "golden_hour_end", "golden_hour"),
)


# ════════════════════════════════════════════════════════════════════════════
#  Result Types
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class SunPosition:
    """Sun azimuth (from South, westward) and altitude [rad]."""
    azimuth: float
    altitude: float


@dataclass(frozen=True)
class SunTimes:
    """Solar events of one day (UTC instants).

    ``solar_noon`` and ``nadir`` are always present.  Any other field is
    ``None`` when the Sun does not reach its threshold altitude that day
    (polar day, polar night, or high-latitude twilight).
    """
    sunrise: Optional[datetime] = None
    sunrise_end: Optional[datetime] = None
    golden_hour_end: Optional[datetime] = None
    solar_noon: Optional[datetime] = None
    golden_hour: Optional[datetime] = None
    sunset_start: Optional[datetime] = None
    sunset: Optional[datetime] = None
    dusk: Optional[datetime] = None
    nautical_dusk: Optional[datetime] = None
    night: Optional[datetime] = None
    nadir: Optional[datetime] = None
    night_end: Optional[datetime] = None
    nautical_dawn: Optional[datetime] = None
    dawn: Optional[datetime] = None

    def events(self) -> list[tuple[str, datetime]]:
        """Defined events as ``(name, instant)`` pairs in time order."""
        pairs = [(f.name, getattr(self, f.name)) for f in fields(self)]
        return sorted(((name, t) for name, t in pairs if t is not None),
                      key=lambda item: item[1])


# ════════════════════════════════════════════════════════════════════════════
#  Solar Ephemeris
# ════════════════════════════════════════════════════════════════════════════

def solar_mean_anomaly(d: float) -> float:
    """Solar mean anomaly [rad, 0..2π] for *d* days since J2000."""
    return (RAD * (357.5291 + 0.98560028 * d)) % TWO_PI


def ecliptic_longitude(M: float) -> float:
    """Ecliptic longitude of the Sun [rad, 0..2π] from its mean anomaly."""
    # equation of center
    C = RAD * (1.9148 * np.sin(M) + 0.02 * np.sin(2 * M) + 0.0003 * np.sin(3 * M))
    return (M + C + PERIHELION + PI) % TWO_PI


def sun_coords(d: float) -> EquatorialCoordinates:
    """Geocentric equatorial coordinates of the Sun."""
    L = ecliptic_longitude(solar_mean_anomaly(d))
    return EquatorialCoordinates(
        right_ascension=float(right_ascension(L, 0.0)),
        declination=float(declination(L, 0.0)),
    )


# ════════════════════════════════════════════════════════════════════════════
#  Sun Position
# ════════════════════════════════════════════════════════════════════════════

def get_sun_position(instant: datetime, latitude: float, longitude: float) -> SunPosition:
    """Sun azimuth and altitude seen from (*latitude*, *longitude*) [deg].

    Parameters
    ----------
    instant : datetime — absolute instant (naive = UTC)
    latitude, longitude : float — observer position [deg], east positive

    Returns
    -------
    SunPosition — azimuth from South (westward positive) and altitude [rad]
    """
    obs = Observer(latitude, longitude)
    d = to_days(instant)
    c = sun_coords(d)
    H = sidereal_time(d, obs.lw) - c.right_ascension
    return SunPosition(
        azimuth=float(azimuth(H, obs.phi, c.declination)),
        altitude=float(altitude(H, obs.phi, c.declination)),
    )


# ════════════════════════════════════════════════════════════════════════════
#  Sun Event Solver
# ════════════════════════════════════════════════════════════════════════════

def get_set_j(h: float, phi: float, dec: float, lw: float,
              n: float, M: float, L: float) -> float:
    """Julian day at which the Sun descends through altitude *h* [rad].

    NaN when the Sun never reaches *h* on that day.

    Parameters
    ----------
    h : float — threshold altitude [rad]
    phi : float — observer latitude [rad]
    dec : float — solar declination at transit [rad]
    lw : float — west-positive longitude [rad]
    n : float — Julian cycle number
    M, L : float — solar mean anomaly and ecliptic longitude at transit [rad]
    """
    w = hour_angle(h, phi, dec)
    a = approx_transit(w, lw, n)
    return solar_transit_j(a, M, L)


def _solar_day(instant: datetime, obs: Observer) -> tuple[float, float, float, float, float]:
    """Transit quantities for the solar day nearest *instant*.

    Returns
    -------
    (n, M, L, dec, j_noon)
    """
    d = to_days(instant)
    n = julian_cycle(d, obs.lw)
    ds = approx_transit(0.0, obs.lw, n)

    M = solar_mean_anomaly(ds)
    L = ecliptic_longitude(M)
    dec = declination(L, 0.0)
    j_noon = solar_transit_j(ds, M, L)
    return n, M, L, dec, j_noon


def _event_pair(h: float, obs: Observer, n: float, M: float, L: float,
                dec: float, j_noon: float) -> tuple[Optional[datetime], Optional[datetime]]:
    j_set = get_set_j(h, obs.phi, dec, obs.lw, n, M, L)
    j_rise = j_noon - (j_set - j_noon)
    return from_julian(j_rise), from_julian(j_set)


def get_times(instant: datetime, latitude: float, longitude: float) -> SunTimes:
    """Sunlight phases of the day containing *instant*.

    Parameters
    ----------
    instant : datetime — any instant of the wanted day (naive = UTC)
    latitude, longitude : float — observer position [deg], east positive

    Returns
    -------
    SunTimes — 14 event instants in UTC; unreachable thresholds are ``None``
    """
    obs = Observer(latitude, longitude)
    n, M, L, dec, j_noon = _solar_day(instant, obs)

    times = {
        "solar_noon": from_julian(j_noon),
        "nadir": from_julian(j_noon - 0.5),
    }
    for angle, rise_name, set_name in SUN_TIMES:
        rise, set_ = _event_pair(angle * RAD, obs, n, M, L, dec, j_noon)
        if rise is None:
            LOGGER.debug("Sun does not reach %.2f° at (%s, %s): no %s/%s",
                         angle, latitude, longitude, rise_name, set_name)
        times[rise_name] = rise
        times[set_name] = set_
    return SunTimes(**times)


def sun_event_times(instant: datetime, latitude: float, longitude: float,
                    altitude_deg: float) -> tuple[Optional[datetime], Optional[datetime]]:
    """Morning and evening instants at which the Sun is at *altitude_deg*.

    Uses the same solver as :func:`get_times`, for thresholds outside the
    standard table (e.g. −4° for the start of the photographers' blue hour).

    Returns
    -------
    (morning, evening) — UTC instants, both ``None`` if never reached
    """
    obs = Observer(latitude, longitude)
    n, M, L, dec, j_noon = _solar_day(instant, obs)
    return _event_pair(altitude_deg * RAD, obs, n, M, L, dec, j_noon)
