# aerocalc/orbital.py

"""
Two-body orbital mechanics around Earth: circular orbits and Hohmann transfers.
"""

import math
import numpy as np

from .preset_loader import dprint

G = 6.6743e-11           # m³/(kg·s²)
M_EARTH = 5.972e24       # kg
R_EARTH_KM = 6371.0      # mean radius
R_EARTH = R_EARTH_KM * 1000.0
MU_EARTH = G * M_EARTH   # m³/s²

# Altitudes within this band below the surface are treated as 0 km
SURFACE_TOLERANCE_KM = 1e-6


def _normalize_altitude(altitude_km, label="Altitude"):
    if altitude_km < -R_EARTH_KM:
        raise ValueError("Altitude cannot be below the center of the Earth.")
    if altitude_km < -SURFACE_TOLERANCE_KM:
        dprint(f"[WARN] {label} is negative, treating as near surface level.")
        return 0.0
    return max(altitude_km, 0.0)


def circular_velocity(radius, mu=MU_EARTH):
    """v = sqrt(μ / r)"""
    return math.sqrt(mu / radius)


def vis_viva(radius, semi_major_axis, mu=MU_EARTH):
    """v = sqrt(μ (2/r - 1/a))"""
    return math.sqrt(mu * (2.0 / radius - 1.0 / semi_major_axis))


def orbital_period(semi_major_axis, mu=MU_EARTH):
    """T = 2π sqrt(a³ / μ)"""
    return 2.0 * math.pi * math.sqrt(semi_major_axis ** 3 / mu)


def calculate_orbital_properties(altitude_km):
    """Velocity and period of a circular orbit at an altitude above mean Earth radius."""
    altitude_km = _normalize_altitude(altitude_km)
    radius = R_EARTH + altitude_km * 1000.0
    return {
        "altitude_km": altitude_km,
        "orbital_radius": radius,
        "velocity": circular_velocity(radius),
        "period": orbital_period(radius),
    }


def calculate_hohmann_transfer(initial_altitude_km, final_altitude_km):
    """
    Two-impulse Hohmann transfer between coplanar circular orbits.

    Burn 1 puts the vehicle on the transfer ellipse, burn 2 circularizes
    at the target radius. Works for raising and lowering orbits.

    Returns:
        Dict with radii (m), transfer semi-major axis (m), delta_v1,
        delta_v2, total_delta_v (m/s) and transfer_time (s)
    """
    initial_altitude_km = _normalize_altitude(initial_altitude_km, "Initial altitude")
    final_altitude_km = _normalize_altitude(final_altitude_km, "Final altitude")

    r1 = R_EARTH + initial_altitude_km * 1000.0
    r2 = R_EARTH + final_altitude_km * 1000.0
    if abs(r1 - r2) < 1e-6:
        raise ValueError("Initial and final altitudes cannot be the same for a Hohmann transfer.")

    a_transfer = (r1 + r2) / 2.0
    v1 = circular_velocity(r1)
    v2 = circular_velocity(r2)
    v_transfer1 = vis_viva(r1, a_transfer)
    v_transfer2 = vis_viva(r2, a_transfer)

    delta_v1 = abs(v_transfer1 - v1)
    delta_v2 = abs(v2 - v_transfer2)

    return {
        "initial_altitude_km": initial_altitude_km,
        "final_altitude_km": final_altitude_km,
        "initial_radius": r1,
        "final_radius": r2,
        "initial_velocity": v1,
        "final_velocity": v2,
        "transfer_semi_major_axis": a_transfer,
        "transfer_eccentricity": abs(r2 - r1) / (r1 + r2),
        "delta_v1": delta_v1,
        "delta_v2": delta_v2,
        "total_delta_v": delta_v1 + delta_v2,
        "transfer_time": orbital_period(a_transfer) / 2.0,
    }


def transfer_orbit_points(initial_radius, final_radius, points=361):
    """
    Sampled x/y coordinates (m) for plotting both circular orbits and the
    half transfer ellipse. The departure burn sits on the +x axis.
    """
    angles = np.linspace(0.0, 2.0 * np.pi, points)
    a = (initial_radius + final_radius) / 2.0
    e = abs(final_radius - initial_radius) / (initial_radius + final_radius)
    half = np.linspace(0.0, np.pi, points // 2 + 1)

    # Raising: departure is periapsis; lowering: departure is apoapsis
    if final_radius >= initial_radius:
        r_half = a * (1 - e ** 2) / (1 + e * np.cos(half))
    else:
        r_half = a * (1 - e ** 2) / (1 - e * np.cos(half))

    return {
        "initial": (initial_radius * np.cos(angles), initial_radius * np.sin(angles)),
        "final": (final_radius * np.cos(angles), final_radius * np.sin(angles)),
        "transfer": (r_half * np.cos(half), r_half * np.sin(half)),
    }
