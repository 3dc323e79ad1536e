"""
sunmoon.moon — Lunar Ephemeris, Illumination & Rise/Set
========================================================

Low-precision analytical lunar position (a handful of principal terms,
good to a fraction of a degree) and the quantities built on it.

Capabilities
------------
- Moon geocentric equatorial coordinates and distance
- Moon azimuth / altitude (refraction corrected) and parallactic angle
- Illuminated fraction, phase and bright-limb position angle
- Moonrise / moonset, or the always-up / always-down verdict, for a day

Moonrise and moonset have no closed form at this level of approximation.
The day is scanned in 2-hour windows; in each window a parabola through
three altitude samples is solved for its horizon crossings.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell,
Ch. 14, 47, 48.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import numpy as np

from .frames import (
    Observer, right_ascension, declination, sidereal_time,
    azimuth, altitude, parallactic_angle,
)
from .sun import sun_coords
from .utils import PI, RAD, SUN_DISTANCE_KM, to_days, hours_later

LOGGER = logging.getLogger(__name__)

# ── Constants ───────────────────────────────────────────────────────────────
MEAN_EARTH_MOON_DIST = 385_001.0    # mean Earth–Moon distance of the model [km]
HORIZON_CORRECTION = 0.133 * RAD    # parallax + refraction + semi-diameter [rad]
WINDOW_HOURS = 2                    # rise/set scan step [h]

PHASE_NAMES = (
    "New Moon", "Waxing Crescent", "First Quarter", "Waxing Gibbous",
    "Full Moon", "Waning Gibbous", "Last Quarter", "Waning Crescent",
)


# ════════════════════════════════════════════════════════════════════════════
#  Result Types
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class GeocentricCoordinates:
    """Right ascension, declination [rad] and Earth–Moon distance [km]."""
    right_ascension: float
    declination: float
    distance: float


@dataclass(frozen=True)
class MoonPosition:
    """Moon as seen by an observer.

    azimuth : float — from South, westward positive [rad]
    altitude : float — refraction-corrected altitude [rad]
    distance : float — Earth–Moon distance [km]
    parallactic_angle : float — [rad]
    """
    azimuth: float
    altitude: float
    distance: float
    parallactic_angle: float


@dataclass(frozen=True)
class MoonIllumination:
    """Illuminated fraction [0..1], phase [0..1) and bright-limb angle [rad].

    Phase runs 0 (new) → 0.25 (first quarter) → 0.5 (full) → 0.75 (last
    quarter) and wraps back to 0.
    """
    fraction: float
    phase: float
    angle: float


@dataclass(frozen=True)
class MoonTimes:
    """Moonrise/moonset of a 24-hour period.

    When neither rise nor set happens exactly one of ``always_up`` /
    ``always_down`` is true; otherwise both flags are false.
    """
    rise: Optional[datetime] = None
    set: Optional[datetime] = None
    always_up: bool = False
    always_down: bool = False


# ════════════════════════════════════════════════════════════════════════════
#  Lunar Ephemeris
# ════════════════════════════════════════════════════════════════════════════

def moon_coords(d: float) -> GeocentricCoordinates:
    """Geocentric equatorial coordinates of the Moon.

    Parameters
    ----------
    d : float — days since J2000

    Returns
    -------
    GeocentricCoordinates — α, δ [rad] and distance [km]
    """
    L = RAD * (218.316 + 13.176396 * d)   # mean longitude
    M = RAD * (134.963 + 13.064993 * d)   # mean anomaly
    F = RAD * (93.272 + 13.229350 * d)    # mean distance from ascending node

    l = L + RAD * 6.289 * np.sin(M)       # ecliptic longitude
    b = RAD * 5.128 * np.sin(F)           # ecliptic latitude
    dt = MEAN_EARTH_MOON_DIST - 20905.0 * np.cos(M)

    return GeocentricCoordinates(
        right_ascension=float(right_ascension(l, b)),
        declination=float(declination(l, b)),
        distance=float(dt),
    )


# ════════════════════════════════════════════════════════════════════════════
#  Moon Position
# ════════════════════════════════════════════════════════════════════════════

def _refraction(h: float) -> float:
    """Altitude correction for atmospheric refraction [rad]."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return RAD * 0.017 / np.tan(h + RAD * 10.26 / (h + RAD * 5.10))


def get_moon_position(instant: datetime, latitude: float, longitude: float) -> MoonPosition:
    """Moon azimuth, altitude, distance and parallactic angle.

    Parameters
    ----------
    instant : datetime — absolute instant (naive = UTC)
    latitude, longitude : float — observer position [deg], east positive
    """
    obs = Observer(latitude, longitude)
    d = to_days(instant)
    c = moon_coords(d)
    H = sidereal_time(d, obs.lw) - c.right_ascension
    h = altitude(H, obs.phi, c.declination)
    h = h + _refraction(h)

    return MoonPosition(
        azimuth=float(azimuth(H, obs.phi, c.declination)),
        altitude=float(h),
        distance=c.distance,
        parallactic_angle=float(parallactic_angle(H, obs.phi, c.declination)),
    )


# ════════════════════════════════════════════════════════════════════════════
#  Moon Illumination & Phase
# ════════════════════════════════════════════════════════════════════════════

def get_moon_illumination(instant: datetime) -> MoonIllumination:
    """Illumination of the lunar disk at *instant* (geocentric, no observer).

    The phase angle comes from the Sun–Moon elongation and the two
    distances; the sign of the bright-limb angle tells waxing from waning.
    """
    d = to_days(instant)
    s = sun_coords(d)
    m = moon_coords(d)

    d_ra = s.right_ascension - m.right_ascension
    # geocentric elongation
    phi = np.arccos(np.clip(
        np.sin(s.declination) * np.sin(m.declination)
        + np.cos(s.declination) * np.cos(m.declination) * np.cos(d_ra),
        -1.0, 1.0))
    inc = np.arctan2(SUN_DISTANCE_KM * np.sin(phi), m.distance - SUN_DISTANCE_KM * np.cos(phi))
    angle = np.arctan2(
        np.cos(s.declination) * np.sin(d_ra),
        np.sin(s.declination) * np.cos(m.declination)
        - np.cos(s.declination) * np.sin(m.declination) * np.cos(d_ra),
    )

    sign = -1.0 if angle < 0 else 1.0
    return MoonIllumination(
        fraction=float((1.0 + np.cos(inc)) / 2.0),
        phase=float(0.5 + 0.5 * inc * sign / PI),
        angle=float(angle),
    )


def moon_phase_name(phase: float) -> str:
    """Human-readable lunar phase name for a phase in [0, 1)."""
    return PHASE_NAMES[int(np.floor(phase * 8.0 + 0.5)) % 8]


# ════════════════════════════════════════════════════════════════════════════
#  Moonrise / Moonset
# ════════════════════════════════════════════════════════════════════════════

def _quadratic_window(h0: float, h1: float, h2: float) -> tuple[int, float, float, float]:
    """Horizon crossings of the parabola through (−1, h0), (0, h1), (1, h2).

    Returns
    -------
    roots : int — number of crossings with |x| ≤ 1
    x1, x2 : float — crossings, earlier first; with one root inside the
        window ``x1`` holds it
    ye : float — value of the parabola at its vertex
    """
    h0, h1, h2 = np.float64(h0), np.float64(h1), np.float64(h2)
    with np.errstate(divide="ignore", invalid="ignore"):
        a = (h0 + h2) / 2.0 - h1
        b = (h2 - h0) / 2.0
        xe = -b / (2.0 * a)
        ye = (a * xe + b) * xe + h1
        d = b * b - 4.0 * a * h1

        roots = 0
        x1 = x2 = np.nan
        if d >= 0:
            dx = np.sqrt(d) / (np.abs(a) * 2.0)
            x1 = xe - dx
            x2 = xe + dx
            if np.abs(x1) <= 1:
                roots += 1
            if np.abs(x2) <= 1:
                roots += 1
            if x1 < -1:
                x1 = x2
    return roots, float(x1), float(x2), float(ye)


def get_moon_times(instant: datetime, latitude: float, longitude: float) -> MoonTimes:
    """Moonrise and moonset in the 24 hours following *instant*.

    Pass the start of the wanted day (in whatever timezone the caller uses)
    as *instant*.

    Parameters
    ----------
    instant : datetime — start of the 24-hour search period (naive = UTC)
    latitude, longitude : float — observer position [deg], east positive

    Returns
    -------
    MoonTimes — rise/set instants in UTC, or the always-up/always-down flag
    """
    def moon_altitude(hours: float) -> float:
        t = hours_later(instant, hours)
        return get_moon_position(t, latitude, longitude).altitude - HORIZON_CORRECTION

    h0 = moon_altitude(0)
    rise = set_ = None
    ye = 0.0

    # 3-point parabola over each 2-hour window; a zero crossing is a rise or a set
    for i in range(1, 25, WINDOW_HOURS):
        h1 = moon_altitude(i)
        h2 = moon_altitude(i + 1)
        roots, x1, x2, ye = _quadratic_window(h0, h1, h2)

        if roots == 1:
            if h0 < 0:
                rise = i + x1
            else:
                set_ = i + x1
        elif roots == 2:
            rise = i + (x2 if ye < 0 else x1)
            set_ = i + (x1 if ye < 0 else x2)

        if rise is not None and set_ is not None:
            break
        h0 = h2

    if rise is None and set_ is None:
        always_up = ye > 0
        LOGGER.debug("Moon %s all day at (%s, %s) from %s",
                     "up" if always_up else "down", latitude, longitude, instant)
        return MoonTimes(always_up=always_up, always_down=not always_up)

    return MoonTimes(
        rise=hours_later(instant, rise) if rise is not None else None,
        set=hours_later(instant, set_) if set_ is not None else None,
    )
