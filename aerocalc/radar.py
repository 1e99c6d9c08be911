# aerocalc/radar.py

"""
Monostatic radar range equation and the unit helpers feeding it.

R_max = [ Pt G² λ² σ / ((4π)³ S_min) ] ** (1/4)
"""

import math
import numpy as np

C = 299792458.0  # m/s

POWER_UNITS = {"W": 1.0, "kW": 1e3, "MW": 1e6}
FREQUENCY_UNITS = {"MHz": 1e6, "GHz": 1e9}
GAIN_UNITS = ("dBi", "linear")
RCS_UNITS = ("m²", "dBsm")
SIGNAL_UNITS = ("W", "mW", "dBm")


def db_to_linear(value_db):
    return 10 ** (value_db / 10.0)


def convert_power_to_w(value, unit):
    if unit not in POWER_UNITS:
        raise ValueError(f"Invalid power unit: {unit}")
    return value * POWER_UNITS[unit]


def convert_gain_to_linear(value, unit):
    """Antenna gain (same antenna transmits and receives)."""
    if unit == "linear":
        return value
    if unit == "dBi":
        return db_to_linear(value)
    raise ValueError(f"Invalid gain unit: {unit}")


def convert_frequency_to_hz(value, unit):
    if unit not in FREQUENCY_UNITS:
        raise ValueError(f"Invalid frequency unit: {unit}")
    return value * FREQUENCY_UNITS[unit]


def convert_rcs_to_m2(value, unit):
    """dBsm = 10 log10(σ / 1 m²)"""
    if unit == "m²":
        return value
    if unit == "dBsm":
        return db_to_linear(value)
    raise ValueError(f"Invalid RCS unit: {unit}")


def convert_signal_to_w(value, unit):
    """dBm = 10 log10(P / 1 mW)"""
    if unit == "W":
        return value
    if unit == "mW":
        return value * 1e-3
    if unit == "dBm":
        return db_to_linear(value - 30.0)
    raise ValueError(f"Invalid signal unit: {unit}")


def _range_term(power_w, gain_linear, wavelength, min_signal_w):
    return power_w * gain_linear ** 2 * wavelength ** 2 / ((4.0 * math.pi) ** 3 * min_signal_w)


def calculate_radar_range(power_w, gain_linear, frequency_hz, rcs_m2, min_signal_w):
    """
    Maximum detection range of a monostatic radar, all inputs in SI units.

    Returns:
        Dict with max_range (m), wavelength (m) and the SI inputs
    """
    if power_w <= 0:
        raise ValueError("Transmit power must be positive.")
    if gain_linear <= 0:
        raise ValueError("Antenna gain must be positive.")
    if frequency_hz <= 0:
        raise ValueError("Frequency must be positive.")
    if rcs_m2 <= 0:
        raise ValueError("Target RCS must be positive.")
    if min_signal_w <= 0:
        raise ValueError("Minimum detectable signal must be positive.")

    wavelength = C / frequency_hz
    max_range = (_range_term(power_w, gain_linear, wavelength, min_signal_w) * rcs_m2) ** 0.25

    return {
        "max_range": max_range,
        "wavelength": wavelength,
        "power_w": power_w,
        "gain_linear": gain_linear,
        "frequency_hz": frequency_hz,
        "rcs_m2": rcs_m2,
        "min_signal_w": min_signal_w,
    }


def range_vs_rcs(power_w, gain_linear, frequency_hz, min_signal_w,
                 rcs_min=0.01, rcs_max=1000.0, points=100):
    """Maximum range over a log-spaced sweep of target RCS values (for the plot)."""
    if rcs_min <= 0 or rcs_max <= rcs_min:
        raise ValueError("RCS sweep bounds must be positive and increasing.")
    calculate_radar_range(power_w, gain_linear, frequency_hz, rcs_min, min_signal_w)

    rcs = np.logspace(np.log10(rcs_min), np.log10(rcs_max), points)
    term = _range_term(power_w, gain_linear, C / frequency_hz, min_signal_w)
    return rcs, (term * rcs) ** 0.25
