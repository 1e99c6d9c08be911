# aerocalc/shocks.py

"""
Normal and oblique shock relations (Rankine-Hugoniot, calorically perfect gas).
"""

import math
import numpy as np
from scipy.optimize import brentq, minimize_scalar

from .isentropic import pitot_pressure_ratio, pressure_ratio as isentropic_pressure_ratio

SOLVER_XTOL = 1e-12
ANGLE_TOL = 1e-9
MAX_SOLVE_MACH = 1e3


def _check_gamma(gamma):
    if gamma <= 1:
        raise ValueError("Specific heat ratio must be greater than 1")


# =============================================================================
# NORMAL SHOCK
# =============================================================================

def _normal_shock_relations(m1, gamma):
    m1_sq = m1 * m1
    mach2 = math.sqrt((1.0 + 0.5 * (gamma - 1.0) * m1_sq) / (gamma * m1_sq - 0.5 * (gamma - 1.0)))
    p_ratio = 1.0 + (2.0 * gamma / (gamma + 1.0)) * (m1_sq - 1.0)
    rho_ratio = (gamma + 1.0) * m1_sq / ((gamma - 1.0) * m1_sq + 2.0)
    p0_ratio = pitot_pressure_ratio(m1, gamma)
    return {
        "mach1": m1,
        "mach2": mach2,
        "pressure_ratio": p_ratio,
        "density_ratio": rho_ratio,
        "temperature_ratio": p_ratio / rho_ratio,
        "total_pressure_ratio": p0_ratio,
        # Rayleigh pitot ratio p02/p1 (pitot reading over freestream static pressure)
        "pitot_static_ratio": p0_ratio / isentropic_pressure_ratio(m1, gamma),
        # Δs/R = -ln(p02/p01), always >= 0 across a shock
        "entropy_change": -math.log(p0_ratio),
        "gamma": gamma,
    }


def calculate_normal_shock(m1, gamma=1.4):
    """
    Downstream state behind a normal shock.

    Args:
        m1: Upstream Mach number, must be supersonic
        gamma: Ratio of specific heats

    Returns:
        Dict with mach2, p2/p1, T2/T1, rho2/rho1, p02/p01, p02/p1 and Δs/R
    """
    if m1 <= 1:
        raise ValueError("Upstream Mach number must be greater than 1 (supersonic)")
    _check_gamma(gamma)
    return _normal_shock_relations(m1, gamma)


def sonic_pitot_ratio(gamma=1.4):
    """p02/p1 at M1 = 1, the lowest pitot ratio a normal shock can produce."""
    return ((gamma + 1.0) / 2.0) ** (gamma / (gamma - 1.0))


def calculate_from_pitot_ratio(pitot_ratio, gamma=1.4):
    """
    Solve the Rayleigh pitot formula for M1 given p02/p1, then return the
    normal shock relations at that Mach number.
    """
    _check_gamma(gamma)
    minimum = sonic_pitot_ratio(gamma)
    if pitot_ratio <= minimum:
        raise ValueError(f"Pitot pressure ratio must be greater than {minimum:.4f} for supersonic flow")

    def residual(m):
        return _normal_shock_relations(m, gamma)["pitot_static_ratio"] - pitot_ratio

    high = 2.0
    while residual(high) < 0:
        high *= 2.0
        if high > MAX_SOLVE_MACH:
            raise ValueError("Pitot pressure ratio is too large to solve for a Mach number.")

    m1 = brentq(residual, 1.0 + 1e-12, high, xtol=SOLVER_XTOL)
    return calculate_normal_shock(m1, gamma)


def generate_shock_table(min_mach=1.05, max_mach=10.0, steps=20, gamma=1.4):
    """Evenly spaced normal shock table for plots and tables."""
    if steps < 2:
        raise ValueError("A table needs at least two rows.")
    if min_mach <= 1:
        min_mach = 1.05
    if max_mach <= min_mach:
        raise ValueError("Maximum Mach number must exceed the minimum.")
    return [calculate_normal_shock(float(m), gamma) for m in np.linspace(min_mach, max_mach, steps)]


def find_critical_mach(gamma=1.4, target_ratio=0.01):
    """
    Upstream Mach number at which the total pressure ratio p02/p01 falls to
    ``target_ratio`` (default: 99 % stagnation pressure loss).
    """
    _check_gamma(gamma)
    if not 0 < target_ratio < 1:
        raise ValueError("Target total pressure ratio must be between 0 and 1")

    def residual(m):
        return pitot_pressure_ratio(m, gamma) - target_ratio

    return brentq(residual, 1.0, 100.0, xtol=1e-8)


# =============================================================================
# OBLIQUE SHOCK
# =============================================================================

def theta_from_beta(m1, beta, gamma=1.4):
    """
    θ-β-M relation, angles in radians:
    tan θ = 2 cot β (M1² sin²β - 1) / (M1² (γ + cos 2β) + 2)
    """
    sin_beta = math.sin(beta)
    if abs(sin_beta) < ANGLE_TOL:
        return math.nan
    numerator = 2.0 * (math.cos(beta) / sin_beta) * (m1 * m1 * sin_beta * sin_beta - 1.0)
    denominator = m1 * m1 * (gamma + math.cos(2.0 * beta)) + 2.0
    return math.atan(numerator / denominator)


def max_deflection_angle(m1, gamma=1.4):
    """
    Largest attached-shock deflection for M1.

    Returns:
        (theta_max, beta_at_theta_max), both in degrees
    """
    if m1 <= 1:
        raise ValueError("Upstream Mach number must be supersonic (M1 > 1)")
    _check_gamma(gamma)

    mu = math.asin(1.0 / m1)
    result = minimize_scalar(
        lambda b: -theta_from_beta(m1, b, gamma),
        bounds=(mu, math.pi / 2),
        method="bounded",
        options={"xatol": 1e-10},
    )
    return math.degrees(-result.fun), math.degrees(result.x)


def _solve_wave_angle(m1, theta, gamma, weak, beta_max):
    mu = math.asin(1.0 / m1)
    if weak:
        low, high = mu, beta_max
    else:
        low, high = beta_max, math.pi / 2

    def residual(b):
        if abs(b - math.pi / 2) < ANGLE_TOL:
            return -theta
        return theta_from_beta(m1, b, gamma) - theta

    return brentq(residual, low, high, xtol=SOLVER_XTOL)


def calculate_oblique_shock(m1, theta, gamma=1.4, weak=True):
    """
    Oblique shock for upstream Mach m1 and flow deflection theta (degrees).

    The weak solution is the one normally observed on wedges; the strong
    solution has a subsonic downstream state. At zero deflection the weak
    branch degenerates to a Mach wave and the strong branch to a normal shock.
    """
    if m1 <= 1:
        raise ValueError("Upstream Mach number must be supersonic (M1 > 1)")
    if theta < 0:
        raise ValueError("Deflection angle cannot be negative.")
    _check_gamma(gamma)

    theta_max, beta_max_deg = max_deflection_angle(m1, gamma)
    if theta > theta_max + 1e-6:
        raise ValueError(
            f"Deflection angle ({theta:.2f}°) exceeds maximum possible ({theta_max:.2f}°) "
            f"for M1={m1:g}. Shock detached."
        )

    mu = math.asin(1.0 / m1)
    theta_rad = math.radians(theta)
    beta_max = math.radians(beta_max_deg)

    if theta_rad < ANGLE_TOL:
        beta = mu if weak else math.pi / 2
    elif theta >= theta_max - 1e-6:
        beta = beta_max
    else:
        beta = _solve_wave_angle(m1, theta_rad, gamma, weak, beta_max)

    m1n = m1 * math.sin(beta)
    if m1n <= 1.0 + 1e-12:
        # Mach wave: infinitesimally weak, no change across it
        normal = {
            "mach2": 1.0,
            "pressure_ratio": 1.0,
            "density_ratio": 1.0,
            "temperature_ratio": 1.0,
            "total_pressure_ratio": 1.0,
        }
        mach2 = m1
    else:
        normal = _normal_shock_relations(m1n, gamma)
        mach2 = normal["mach2"] / math.sin(beta - theta_rad)

    return {
        "upstream_mach": m1,
        "downstream_mach": mach2,
        "wave_angle": math.degrees(beta),
        "deflection_angle": theta,
        "normal_mach1": m1n,
        "normal_mach2": normal["mach2"],
        "pressure_ratio": normal["pressure_ratio"],
        "density_ratio": normal["density_ratio"],
        "temperature_ratio": normal["temperature_ratio"],
        "total_pressure_ratio": normal["total_pressure_ratio"],
        "mach_angle": math.degrees(mu),
        "max_deflection_angle": theta_max,
        "weak": weak,
        "gamma": gamma,
    }
