"""
example_sun_moon.py — Demonstration of the sunmoon Library
===========================================================

Prints the solar events, Sun and Moon positions, lunar illumination and
moonrise/moonset for one observer and one day.

Run:  python -m sunmoon.example_sun_moon
"""

from datetime import datetime, timezone

import numpy as np

from sunmoon import (
    get_times, get_sun_position, get_moon_position,
    get_moon_illumination, get_moon_times,
    sun_event_times, moon_phase_name,
)


def _fmt(t):
    return t.strftime("%Y-%m-%d %H:%M:%S UTC") if t is not None else "—"


def main(when=None, lat=50.5, lng=30.5):
    when = when or datetime(2013, 3, 5, tzinfo=timezone.utc)

    print("=" * 70)
    print("  sunmoon — Sun & Moon Calculator Demo")
    print("=" * 70)
    print(f"  Observer: {lat:.4f}°, {lng:.4f}°   Date: {when:%Y-%m-%d}")

    # ── 1. Solar Events ─────────────────────────────────────────────────
    print("\n1. SOLAR EVENTS")
    print("-" * 40)
    times = get_times(when, lat, lng)
    for name, t in times.events():
        print(f"  {name:<16} {_fmt(t)}")

    blue_start, blue_end = sun_event_times(when, lat, lng, -4.0)
    print(f"\n  Sun at -4° (morning): {_fmt(blue_start)}")
    print(f"  Sun at -4° (evening): {_fmt(blue_end)}")

    # ── 2. Positions ────────────────────────────────────────────────────
    print("\n2. POSITIONS")
    print("-" * 40)
    sun = get_sun_position(when, lat, lng)
    moon = get_moon_position(when, lat, lng)
    print(f"  Sun   azimuth {np.rad2deg(sun.azimuth):+8.2f}°  altitude {np.rad2deg(sun.altitude):+7.2f}°")
    print(f"  Moon  azimuth {np.rad2deg(moon.azimuth):+8.2f}°  altitude {np.rad2deg(moon.altitude):+7.2f}°")
    print(f"  Moon  distance {moon.distance:,.0f} km  parallactic angle "
          f"{np.rad2deg(moon.parallactic_angle):+.2f}°")

    # ── 3. Moon Illumination ────────────────────────────────────────────
    print("\n3. MOON ILLUMINATION")
    print("-" * 40)
    illum = get_moon_illumination(when)
    print(f"  Fraction lit:  {illum.fraction * 100:.1f}%")
    print(f"  Phase:         {illum.phase:.3f} ({moon_phase_name(illum.phase)})")
    print(f"  Limb angle:    {np.rad2deg(illum.angle):+.2f}°")

    # ── 4. Moonrise / Moonset ───────────────────────────────────────────
    print("\n4. MOONRISE / MOONSET")
    print("-" * 40)
    mt = get_moon_times(when, lat, lng)
    if mt.always_up:
        print("  Moon is up all day")
    elif mt.always_down:
        print("  Moon is down all day")
    else:
        print(f"  Moonrise: {_fmt(mt.rise)}")
        print(f"  Moonset:  {_fmt(mt.set)}")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()
