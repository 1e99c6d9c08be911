# aerocalc/propulsion.py

"""
Rocket propulsion calculations.
Tsiolkovsky rocket equation, propellant mass fraction, thrust-to-weight
ratio and specific impulse conversions all live here.
"""

import math

from .preset_loader import SPECIFIC_IMPULSE_REFERENCE

G0 = 9.80665  # m/s², standard gravity
M_TO_FT = 1 / 0.3048


# =============================================================================
# ROCKET EQUATION
# =============================================================================

def _effective_exhaust_velocity(specific_impulse=None, exhaust_velocity=None):
    """
    Resolve (ve, Isp) from whichever one was supplied.
    Exhaust velocity wins when both are given.
    """
    if exhaust_velocity is not None and exhaust_velocity > 0:
        return exhaust_velocity, exhaust_velocity / G0
    if specific_impulse is not None and specific_impulse > 0:
        return specific_impulse * G0, specific_impulse
    raise ValueError("Either specific impulse or exhaust velocity must be provided.")


def _check_masses(initial_mass, final_mass):
    if initial_mass <= 0:
        raise ValueError("Initial mass must be positive.")
    if final_mass <= 0:
        raise ValueError("Final mass must be positive.")
    if final_mass > initial_mass:
        raise ValueError("Final mass cannot be greater than initial mass.")


def _rocket_result(delta_v, exhaust_velocity, specific_impulse, initial_mass, final_mass, mass_ratio):
    propellant_mass = initial_mass - final_mass
    return {
        "delta_v": delta_v,
        "exhaust_velocity": exhaust_velocity,
        "specific_impulse": specific_impulse,
        "initial_mass": initial_mass,
        "final_mass": final_mass,
        "mass_ratio": mass_ratio,
        "propellant_mass": propellant_mass,
        "propellant_mass_fraction": propellant_mass / initial_mass,
    }


def calculate_delta_v(initial_mass, final_mass, specific_impulse=None, exhaust_velocity=None):
    """
    Δv = ve * ln(m0 / mf)

    Masses in kg, Isp in seconds, exhaust velocity in m/s.
    """
    _check_masses(initial_mass, final_mass)
    ve, isp = _effective_exhaust_velocity(specific_impulse, exhaust_velocity)

    mass_ratio = initial_mass / final_mass
    delta_v = ve * math.log(mass_ratio)
    return _rocket_result(delta_v, ve, isp, initial_mass, final_mass, mass_ratio)


def calculate_initial_mass(final_mass, delta_v, specific_impulse=None, exhaust_velocity=None):
    """m0 = mf * exp(Δv / ve)"""
    if final_mass <= 0:
        raise ValueError("Final mass must be positive.")
    if delta_v < 0:
        raise ValueError("Delta-v cannot be negative.")
    ve, isp = _effective_exhaust_velocity(specific_impulse, exhaust_velocity)

    mass_ratio = math.exp(delta_v / ve)
    initial_mass = final_mass * mass_ratio
    return _rocket_result(delta_v, ve, isp, initial_mass, final_mass, mass_ratio)


def calculate_required_specific_impulse(initial_mass, final_mass, delta_v):
    """ve = Δv / ln(m0 / mf), Isp = ve / g0"""
    _check_masses(initial_mass, final_mass)
    if delta_v <= 0:
        raise ValueError("Delta-v must be positive.")
    if final_mass == initial_mass:
        raise ValueError("Initial and final mass must differ to produce any delta-v.")

    mass_ratio = initial_mass / final_mass
    ve = delta_v / math.log(mass_ratio)
    return _rocket_result(delta_v, ve, ve / G0, initial_mass, final_mass, mass_ratio)


# =============================================================================
# PROPELLANT MASS FRACTION
# =============================================================================

def calculate_propellant_mass_fraction(initial_mass, final_mass):
    """
    PMF = (m0 - mf) / m0, structural fraction = mf / m0.
    The final mass is the dry (structural) mass and may be zero.
    """
    if initial_mass is None or final_mass is None or math.isnan(initial_mass) or math.isnan(final_mass):
        raise ValueError("Initial mass must be positive, and final mass cannot be negative.")
    if initial_mass <= 0 or final_mass < 0:
        raise ValueError("Initial mass must be positive, and final mass cannot be negative.")
    if final_mass >= initial_mass:
        raise ValueError("Final mass (dry mass) must be less than the initial mass.")

    propellant_mass = initial_mass - final_mass
    return {
        "propellant_mass_fraction": propellant_mass / initial_mass,
        "structural_mass_fraction": final_mass / initial_mass,
        "initial_mass": initial_mass,
        "propellant_mass": propellant_mass,
        "structural_mass": final_mass,
    }


# =============================================================================
# THRUST-TO-WEIGHT RATIO
# =============================================================================

TWR_CAPABILITY = [
    (0.5, "Very low thrust - suitable for horizontal flight only"),
    (1.0, "Low thrust - horizontal flight, gliding capability"),
    (1.5, "Moderate thrust - capable of vertical takeoff"),
    (2.0, "Good thrust - excellent vertical performance"),
    (3.0, "High thrust - rocket-like performance"),
]


def describe_twr(twr):
    for upper, text in TWR_CAPABILITY:
        if twr < upper:
            return text
    return "Very high thrust - ballistic flight capability"


def _twr_result(twr, thrust, mass):
    weight = mass * G0
    return {
        "twr": twr,
        "thrust": thrust,
        "weight": weight,
        "mass": mass,
        "thrust_per_mass": thrust / mass,
        "can_lift_off": twr > 1,
        "flight_capability": describe_twr(twr),
    }


def calculate_twr(thrust, mass):
    """TWR = T / (m g0), thrust in N, mass in kg."""
    if thrust <= 0:
        raise ValueError("Thrust must be positive.")
    if mass <= 0:
        raise ValueError("Mass must be positive.")
    return _twr_result(thrust / (mass * G0), thrust, mass)


def calculate_required_thrust(twr, mass):
    """T = TWR * m g0"""
    if twr <= 0:
        raise ValueError("TWR must be positive.")
    if mass <= 0:
        raise ValueError("Mass must be positive.")
    return _twr_result(twr, twr * mass * G0, mass)


def calculate_maximum_mass(thrust, twr):
    """m = T / (TWR g0)"""
    if thrust <= 0:
        raise ValueError("Thrust must be positive.")
    if twr <= 0:
        raise ValueError("TWR must be positive.")
    return _twr_result(twr, thrust, thrust / (twr * G0))


# =============================================================================
# SPECIFIC IMPULSE
# =============================================================================

ISP_UNITS = ("seconds", "m/s", "ft/s", "km/s")

ISP_PERFORMANCE = [
    (200, "Low Performance", ["Cold gas thrusters", "Some monopropellants"]),
    (300, "Moderate Performance", ["Hydrazine monopropellant", "Some bipropellants"]),
    (400, "Good Performance", ["LOX/RP-1", "LOX/LH2", "Most bipropellants"]),
    (500, "High Performance", ["LOX/LH2 (optimized)", "Advanced bipropellants"]),
    (1000, "Very High Performance", ["Electric propulsion", "Ion engines", "Hall thrusters"]),
]


def classify_specific_impulse(seconds):
    """Return (category, typical applications) for an Isp in seconds."""
    for upper, category, applications in ISP_PERFORMANCE:
        if seconds < upper:
            return category, list(applications)
    return "Exceptional Performance", ["Advanced electric propulsion", "Nuclear thermal", "Fusion concepts"]


def convert_specific_impulse(value, unit):
    """
    Express a specific impulse in seconds, m/s, ft/s and km/s.
    Velocity forms are the effective exhaust velocity ve = Isp * g0.
    """
    if value is None or math.isnan(value):
        raise ValueError("Please enter a valid number.")
    if value <= 0:
        raise ValueError("Specific impulse must be positive.")

    if unit == "seconds":
        seconds = value
    elif unit == "m/s":
        seconds = value / G0
    elif unit == "ft/s":
        seconds = value / (G0 * M_TO_FT)
    elif unit == "km/s":
        seconds = value * 1000 / G0
    else:
        raise ValueError(f"Invalid specific impulse unit: {unit}")

    meters_per_second = seconds * G0
    category, applications = classify_specific_impulse(seconds)
    return {
        "input_value": value,
        "input_unit": unit,
        "seconds": seconds,
        "meters_per_second": meters_per_second,
        "feet_per_second": meters_per_second * M_TO_FT,
        "kilometers_per_second": meters_per_second / 1000,
        "effective_exhaust_velocity": meters_per_second,
        "performance_category": category,
        "typical_applications": applications,
    }


def common_specific_impulse_values():
    """Reference engines from the presets, lowest Isp first."""
    return sorted(SPECIFIC_IMPULSE_REFERENCE, key=lambda entry: entry["value"])
