"""
sunmoon.frames — Ecliptic, Equatorial & Horizontal Coordinates
===============================================================

Coordinate transforms shared by the Sun and Moon models:

    Ecliptic (λ, β)  →  Equatorial (α, δ)  →  Horizontal (A, h)

**Ecliptic**
  - λ: longitude along the ecliptic, β: latitude from it.

**Equatorial**
  - α: right ascension, δ: declination.  Fixed to the celestial sphere.

**Horizontal**
  - A: azimuth measured from due South, increasing westward
    (so A = 0 is South, A = π/2 is West, A = −π/2 is East).
  - h: altitude above the geometric horizon.

Hour angles increase westward, which is why the observer longitude enters
every formula west-positive (``lw``).

All functions accept scalars or NumPy arrays.
"""

from dataclasses import dataclass

import numpy as np

from .utils import RAD, E_OBLIQUITY


# ════════════════════════════════════════════════════════════════════════════
#  Value Types
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Observer:
    """Observer on the Earth's surface.

    Parameters
    ----------
    latitude : float — geographic latitude [deg], north positive
    longitude : float — geographic longitude [deg], east positive

    Out-of-range values are not rejected; the formulas decide the outcome.
    """
    latitude: float
    longitude: float

    @property
    def phi(self) -> float:
        """Latitude [rad]."""
        return RAD * self.latitude

    @property
    def lw(self) -> float:
        """Longitude [rad], west positive."""
        return RAD * -self.longitude


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Right ascension and declination [rad]."""
    right_ascension: float
    declination: float


# ════════════════════════════════════════════════════════════════════════════
#  Ecliptic → Equatorial
# ════════════════════════════════════════════════════════════════════════════

def right_ascension(l: float, b: float = 0.0) -> float:
    """Right ascension [rad] of ecliptic longitude *l*, latitude *b* [rad]."""
    return np.arctan2(np.sin(l) * np.cos(E_OBLIQUITY) - np.tan(b) * np.sin(E_OBLIQUITY),
                      np.cos(l))


def declination(l: float, b: float = 0.0) -> float:
    """Declination [rad] of ecliptic longitude *l*, latitude *b* [rad]."""
    return np.arcsin(np.sin(b) * np.cos(E_OBLIQUITY)
                     + np.cos(b) * np.sin(E_OBLIQUITY) * np.sin(l))


# ════════════════════════════════════════════════════════════════════════════
#  Equatorial → Horizontal
# ════════════════════════════════════════════════════════════════════════════

def sidereal_time(d: float, lw: float) -> float:
    """Local sidereal time [rad].

    Parameters
    ----------
    d : float — days since J2000
    lw : float — west-positive longitude [rad]
    """
    return RAD * (280.16 + 360.9856235 * d) - lw


def azimuth(H: float, phi: float, dec: float) -> float:
    """Azimuth [rad] from South, westward positive.

    Parameters
    ----------
    H : float — hour angle [rad]
    phi : float — observer latitude [rad]
    dec : float — declination [rad]
    """
    return np.arctan2(np.sin(H), np.cos(H) * np.sin(phi) - np.tan(dec) * np.cos(phi))


def altitude(H: float, phi: float, dec: float) -> float:
    """Altitude above the horizon [rad]."""
    return np.arcsin(np.sin(phi) * np.sin(dec) + np.cos(phi) * np.cos(dec) * np.cos(H))


def hour_angle(h: float, phi: float, dec: float) -> float:
    """Hour angle [rad] at which a body of declination *dec* reaches altitude *h*.

    When the body never reaches *h* at this latitude the ``arccos`` argument
    leaves [−1, 1] and the result is NaN.  Callers let the NaN flow through
    the arithmetic; it becomes ``None`` in :func:`sunmoon.utils.from_julian`.
    """
    with np.errstate(invalid="ignore", divide="ignore"):
        return np.arccos((np.sin(h) - np.sin(phi) * np.sin(dec))
                         / (np.cos(phi) * np.cos(dec)))


def parallactic_angle(H: float, phi: float, dec: float) -> float:
    """Parallactic angle [rad] (Meeus 1998, eq. 14.1)."""
    return np.arctan2(np.sin(H), np.tan(phi) * np.cos(dec) - np.sin(dec) * np.cos(H))
