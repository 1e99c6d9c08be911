# aerocalc/geodesy.py

"""
Geodetic (latitude, longitude, height on the WGS84 ellipsoid) <-> ECEF conversions.

ECEF axes: X through (0°N, 0°E), Y through (0°N, 90°E), Z through the North Pole.
"""

import math

# WGS84 ellipsoid
WGS84_A = 6378137.0                    # semi-major axis (m)
WGS84_F = 1 / 298.257223563            # flattening
WGS84_B = WGS84_A * (1 - WGS84_F)      # semi-minor axis (m)
WGS84_E2 = WGS84_F * (2 - WGS84_F)     # first eccentricity squared
WGS84_EP2 = (WGS84_A ** 2 - WGS84_B ** 2) / WGS84_B ** 2   # second eccentricity squared

POLE_TOLERANCE = 1e-9  # m from the Z axis


def prime_vertical_radius(latitude_rad):
    """N(φ) = a / sqrt(1 - e² sin²φ)"""
    return WGS84_A / math.sqrt(1 - WGS84_E2 * math.sin(latitude_rad) ** 2)


def geodetic_to_ecef(latitude, longitude, altitude):
    """Latitude/longitude in degrees, altitude in m above the ellipsoid -> ECEF x, y, z (m)."""
    if not -90 <= latitude <= 90:
        raise ValueError("Latitude must be between -90° and 90°.")
    if not -180 <= longitude <= 180:
        raise ValueError("Longitude must be between -180° and 180°.")

    lat = math.radians(latitude)
    lon = math.radians(longitude)
    n = prime_vertical_radius(lat)

    return {
        "x": (n + altitude) * math.cos(lat) * math.cos(lon),
        "y": (n + altitude) * math.cos(lat) * math.sin(lon),
        "z": (n * (1 - WGS84_E2) + altitude) * math.sin(lat),
        "latitude": latitude,
        "longitude": longitude,
        "altitude": altitude,
    }


def ecef_to_geodetic(x, y, z):
    """
    ECEF x, y, z (m) -> latitude/longitude (degrees) and height (m),
    using Bowring's closed-form approximation (sub-millimetre near the surface).
    """
    p = math.hypot(x, y)

    if p < POLE_TOLERANCE:
        latitude = 90.0 if z >= 0 else -90.0
        altitude = abs(z) - WGS84_B
        return {"x": x, "y": y, "z": z, "latitude": latitude, "longitude": 0.0, "altitude": altitude}

    theta = math.atan2(z * WGS84_A, p * WGS84_B)
    lat = math.atan2(
        z + WGS84_EP2 * WGS84_B * math.sin(theta) ** 3,
        p - WGS84_E2 * WGS84_A * math.cos(theta) ** 3,
    )
    lon = math.atan2(y, x)
    altitude = p / math.cos(lat) - prime_vertical_radius(lat)

    return {
        "x": x,
        "y": y,
        "z": z,
        "latitude": math.degrees(lat),
        "longitude": math.degrees(lon),
        "altitude": altitude,
    }


def degrees_to_dms(degrees):
    """Decimal degrees -> (degrees, minutes, seconds); the sign rides on the degrees."""
    magnitude = abs(degrees)
    whole = math.floor(magnitude)
    minutes_float = (magnitude - whole) * 60
    minutes = math.floor(minutes_float)
    seconds = (minutes_float - minutes) * 60
    return (-whole if degrees < 0 else whole), minutes, seconds


def dms_to_degrees(degrees, minutes=0, seconds=0):
    if not 0 <= minutes < 60 or not 0 <= seconds < 60:
        raise ValueError("Minutes and seconds must be between 0 and 60.")
    sign = -1 if degrees < 0 else 1
    return sign * (abs(degrees) + minutes / 60 + seconds / 3600)


def format_dms(degrees, positive="N", negative="S"):
    """e.g. 51°28'40.12"N"""
    d, m, s = degrees_to_dms(degrees)
    hemisphere = negative if degrees < 0 else positive
    return f"{abs(d)}°{m:02d}'{s:05.2f}\"{hemisphere}"
