# aerocalc/isentropic.py

"""
Isentropic flow relations for a calorically perfect gas.

Forward relations take a Mach number; the inverse solvers recover Mach
from a ratio. Temperature, pressure and density ratios invert in closed
form. The area ratio is double valued, so the subsonic or supersonic
branch is bracketed and solved with Brent's method.
"""

import math
import numpy as np
from scipy.optimize import brentq

SUBSONIC_MACH_FLOOR = 1e-9
SUPERSONIC_MACH_CEILING = 1e4
SOLVER_XTOL = 1e-12


def _check_gamma(gamma):
    if gamma <= 1:
        raise ValueError("Specific heat ratio must be greater than 1")


def temperature_ratio(mach, gamma=1.4):
    """T/T0 = 1 / (1 + (γ-1)/2 M²)"""
    return 1.0 / (1.0 + 0.5 * (gamma - 1.0) * mach * mach)


def pressure_ratio(mach, gamma=1.4):
    """p/p0 = (T/T0) ** (γ/(γ-1))"""
    return temperature_ratio(mach, gamma) ** (gamma / (gamma - 1.0))


def density_ratio(mach, gamma=1.4):
    """ρ/ρ0 = (T/T0) ** (1/(γ-1))"""
    return temperature_ratio(mach, gamma) ** (1.0 / (gamma - 1.0))


def area_ratio(mach, gamma=1.4):
    """A/A* = (1/M) * [2/(γ+1) * (1 + (γ-1)/2 M²)] ** ((γ+1)/(2(γ-1)))"""
    if mach == 0:
        return math.inf
    term = (2.0 / (gamma + 1.0)) * (1.0 + 0.5 * (gamma - 1.0) * mach * mach)
    return term ** ((gamma + 1.0) / (2.0 * (gamma - 1.0))) / mach


def mach_angle(mach):
    """μ = asin(1/M) in degrees, None for subsonic flow."""
    if mach < 1:
        return None
    return math.degrees(math.asin(1.0 / mach))


def prandtl_meyer_angle(mach, gamma=1.4):
    """ν(M) in degrees, 0 for subsonic flow."""
    if mach < 1:
        return 0.0
    k = math.sqrt((gamma + 1.0) / (gamma - 1.0))
    m2 = mach * mach - 1.0
    nu = k * math.atan(math.sqrt(m2 / (k * k))) - math.atan(math.sqrt(m2))
    return math.degrees(nu)


def pitot_pressure_ratio(mach, gamma=1.4):
    """
    Stagnation pressure behind a normal shock over freestream stagnation
    pressure (p02/p01). No loss for subsonic flow.
    """
    if mach <= 1:
        return 1.0
    m2 = mach * mach
    term1 = ((gamma + 1.0) * m2 / ((gamma - 1.0) * m2 + 2.0)) ** (gamma / (gamma - 1.0))
    term2 = ((gamma + 1.0) / (2.0 * gamma * m2 - (gamma - 1.0))) ** (1.0 / (gamma - 1.0))
    return term1 * term2


def calculate_isentropic_flow(mach, gamma=1.4):
    """All isentropic ratios for one Mach number."""
    if mach < 0:
        raise ValueError("Mach number must be positive")
    _check_gamma(gamma)

    return {
        "mach": mach,
        "temperature_ratio": temperature_ratio(mach, gamma),
        "pressure_ratio": pressure_ratio(mach, gamma),
        "density_ratio": density_ratio(mach, gamma),
        "area_ratio": area_ratio(mach, gamma),
        "mach_angle": mach_angle(mach),
        "prandtl_meyer_angle": prandtl_meyer_angle(mach, gamma),
        "pitot_pressure_ratio": pitot_pressure_ratio(mach, gamma),
        "gamma": gamma,
    }


# =============================================================================
# INVERSE SOLVERS
# =============================================================================

def mach_from_temperature_ratio(ratio, gamma=1.4):
    """M = sqrt(2 (1 - T/T0) / ((γ-1) T/T0))"""
    if ratio <= 0 or ratio > 1:
        raise ValueError("Temperature ratio must be between 0 and 1")
    _check_gamma(gamma)
    return math.sqrt(2.0 * (1.0 - ratio) / ((gamma - 1.0) * ratio))


def mach_from_pressure_ratio(ratio, gamma=1.4):
    """Invert p/p0 through the equivalent temperature ratio."""
    if ratio <= 0 or ratio > 1:
        raise ValueError("Pressure ratio must be between 0 and 1")
    _check_gamma(gamma)
    return mach_from_temperature_ratio(ratio ** ((gamma - 1.0) / gamma), gamma)


def mach_from_density_ratio(ratio, gamma=1.4):
    """Invert ρ/ρ0 through the equivalent temperature ratio."""
    if ratio <= 0 or ratio > 1:
        raise ValueError("Density ratio must be between 0 and 1")
    _check_gamma(gamma)
    return mach_from_temperature_ratio(ratio ** (gamma - 1.0), gamma)


def mach_from_area_ratio(ratio, gamma=1.4, supersonic=False):
    """
    Mach number for a given A/A* on the requested branch.

    A/A* falls monotonically from infinity to 1 on (0, 1] and rises from 1
    on [1, inf), so each branch has exactly one root.
    """
    if ratio < 1:
        raise ValueError("Area ratio must be greater than or equal to 1")
    _check_gamma(gamma)
    if ratio == 1:
        return 1.0

    def residual(m):
        return area_ratio(m, gamma) - ratio

    if supersonic:
        low, high = 1.0, 2.0
        while residual(high) < 0:
            high *= 2.0
            if high > SUPERSONIC_MACH_CEILING:
                raise ValueError("Area ratio is too large to solve for a supersonic Mach number.")
    else:
        low, high = SUBSONIC_MACH_FLOOR, 1.0
        if residual(low) < 0:
            raise ValueError("Area ratio is too large to solve for a subsonic Mach number.")

    return brentq(residual, low, high, xtol=SOLVER_XTOL)


def generate_isentropic_table(min_mach=0.1, max_mach=5.0, steps=20, gamma=1.4):
    """Evenly spaced table of isentropic ratios, for plots and tables."""
    if steps < 2:
        raise ValueError("A table needs at least two rows.")
    min_mach = max(min_mach, 0.0)
    if max_mach <= min_mach:
        raise ValueError("Maximum Mach number must exceed the minimum.")
    return [calculate_isentropic_flow(float(m), gamma) for m in np.linspace(min_mach, max_mach, steps)]
