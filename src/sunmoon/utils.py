"""
sunmoon.utils — Constants & Time Conversion
============================================

Fixed constants shared by the solar and lunar models, and conversions
between absolute instants (``datetime``), Julian days and days since the
J2000 epoch, plus the solar-transit helpers built on them.

Instants are timezone-aware ``datetime`` objects.  A naive ``datetime``
is taken to be UTC.  Every instant produced here is in UTC.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import numpy as np

LOGGER = logging.getLogger(__name__)

# ── Constants ───────────────────────────────────────────────────────────────
PI = np.pi
RAD = PI / 180.0                # radians per degree
TWO_PI = 2.0 * PI

DAY_SECONDS = 86400.0
J1970 = 2440588.0               # Julian day of the Unix epoch (noon-based)
J2000 = 2451545.0               # Julian day of the J2000.0 epoch
J0 = 0.0009                     # mean solar transit correction [days]

E_OBLIQUITY = RAD * 23.4397     # obliquity of the ecliptic [rad]
SUN_DISTANCE_KM = 149_598_000.0  # Earth–Sun reference distance [km]

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ── Instants ────────────────────────────────────────────────────────────────

def as_utc(instant: datetime) -> datetime:
    """Return *instant* as an aware UTC datetime (naive is read as UTC)."""
    if not isinstance(instant, datetime):
        raise TypeError(f"Expected a datetime instant, got {type(instant).__name__}.")
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def hours_later(instant: datetime, hours: float) -> datetime:
    """Instant shifted forward by a (fractional) number of hours."""
    return as_utc(instant) + timedelta(hours=float(hours))


# ── Julian Days ─────────────────────────────────────────────────────────────

def to_julian(instant: datetime) -> float:
    """Julian day of an instant.

    Day boundaries fall at noon in the Julian count, hence the ``-0.5``
    against the midnight-based Unix clock.
    """
    seconds = (as_utc(instant) - _UNIX_EPOCH).total_seconds()
    return seconds / DAY_SECONDS - 0.5 + J1970


def from_julian(j: float) -> Optional[datetime]:
    """Instant of a Julian day, or ``None`` when *j* has no instant.

    This is the single place where a NaN produced by the solvers (an event
    that never happens on that day) becomes an absent value.  Infinite days
    and days outside the ``datetime`` range are absent too.
    """
    if not np.isfinite(j):
        LOGGER.debug("Julian day %r has no instant", j)
        return None
    try:
        return _UNIX_EPOCH + timedelta(days=float(j) + 0.5 - J1970)
    except OverflowError:
        LOGGER.debug("Julian day %r is outside the datetime range", j)
        return None


def to_days(instant: datetime) -> float:
    """Days (fractional) elapsed since J2000.0."""
    return to_julian(instant) - J2000


# ── Solar Transit ───────────────────────────────────────────────────────────

def julian_cycle(d: float, lw: float) -> float:
    """Number of the solar day (cycle since J2000) nearest to *d*.

    Parameters
    ----------
    d : float — days since J2000
    lw : float — west-positive observer longitude [rad]
    """
    # half-up rounding, not numpy's round-half-to-even
    return float(np.floor(d - J0 - lw / TWO_PI + 0.5))


def approx_transit(ht: float, lw: float, n: float) -> float:
    """Approximate days since J2000 at which hour angle *ht* is reached."""
    return J0 + (ht + lw) / TWO_PI + n


def solar_transit_j(ds: float, M: float, L: float) -> float:
    """Julian day of the transit, corrected by the equation of time.

    Parameters
    ----------
    ds : float — approximate transit [days since J2000]
    M : float — solar mean anomaly [rad]
    L : float — ecliptic longitude of the Sun [rad]
    """
    return J2000 + ds + 0.0053 * np.sin(M) - 0.0069 * np.sin(2.0 * L)
