"""
sunmoon — Sun & Moon Positions, Phases and Daily Events
========================================================

A small NumPy library answering "where is the Sun / Moon" and "when does
event X happen here" to roughly a minute, for scheduling, photography,
mapping and lighting applications.

Public queries (inputs in degrees and ``datetime`` instants, outputs in
radians, km and UTC instants)::

    get_times(instant, lat, lng)             →  SunTimes
    get_sun_position(instant, lat, lng)      →  SunPosition
    get_moon_position(instant, lat, lng)     →  MoonPosition
    get_moon_illumination(instant)           →  MoonIllumination
    get_moon_times(instant, lat, lng)        →  MoonTimes

Conventions
-----------
- Longitude is east positive.
- Azimuth is measured from South, increasing westward.
- Naive datetimes are read as UTC; returned instants are aware UTC.
- An event that does not occur (polar day/night, high-latitude twilight)
  is ``None``, never an exception.
"""

from .utils import (
    PI, RAD, J1970, J2000, J0, E_OBLIQUITY, SUN_DISTANCE_KM, DAY_SECONDS,
    to_julian, from_julian, to_days, hours_later,
    julian_cycle, approx_transit, solar_transit_j,
)

from .frames import (
    Observer, EquatorialCoordinates,
    right_ascension, declination,
    sidereal_time, azimuth, altitude, hour_angle, parallactic_angle,
)

from .sun import (
    SunPosition, SunTimes, SUN_TIMES,
    solar_mean_anomaly, ecliptic_longitude, sun_coords,
    get_set_j, get_sun_position, get_times, sun_event_times,
)

from .moon import (
    GeocentricCoordinates, MoonPosition, MoonIllumination, MoonTimes,
    moon_coords, get_moon_position, get_moon_illumination,
    get_moon_times, moon_phase_name,
)

__version__ = "1.0.0"
__all__ = [
    # ── Constants ──
    "PI", "RAD", "J1970", "J2000", "J0", "E_OBLIQUITY", "SUN_DISTANCE_KM",
    "DAY_SECONDS", "SUN_TIMES",
    # ── Public queries ──
    "get_times", "get_sun_position", "get_moon_position",
    "get_moon_illumination", "get_moon_times",
    "sun_event_times", "moon_phase_name",
    # ── Result types ──
    "Observer", "EquatorialCoordinates", "GeocentricCoordinates",
    "SunPosition", "SunTimes",
    "MoonPosition", "MoonIllumination", "MoonTimes",
    # ── Time conversion ──
    "to_julian", "from_julian", "to_days", "hours_later",
    "julian_cycle", "approx_transit", "solar_transit_j",
    # ── Ephemerides ──
    "solar_mean_anomaly", "ecliptic_longitude", "sun_coords", "moon_coords",
    # ── Coordinate transforms ──
    "right_ascension", "declination",
    "sidereal_time", "azimuth", "altitude", "hour_angle", "parallactic_angle",
    # ── Solvers ──
    "get_set_j",
]
