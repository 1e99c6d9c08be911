# aerocalc/atmosphere.py

"""
International Standard Atmosphere (ISA) model, 0 - 86 km.

The atmosphere is split into layers with a constant temperature lapse rate.
Only the sea-level state and the lapse rates are tabulated; the base
temperature and pressure of every higher layer are integrated from the
layer below, which keeps the model continuous at each boundary.
"""

import math
import numpy as np

T0 = 288.15        # K, sea level standard temperature
P0 = 101325.0      # Pa, sea level standard pressure
R = 287.05         # J/(kg·K), specific gas constant of dry air
G0 = 9.80665       # m/s²
GAMMA_AIR = 1.4
RHO0 = P0 / (R * T0)  # ≈ 1.225 kg/m³

MAX_ALTITUDE = 86000.0  # m, upper validity limit of the tables
ISOTHERMAL_EPS = 1e-10

# (name, base altitude m, lapse rate K/m); positive lapse = cooling with height
_LAYER_TABLE = [
    ("Troposphere", 0.0, 0.0065),
    ("Tropopause", 11000.0, 0.0),
    ("Stratosphere I", 20000.0, -0.0010),
    ("Stratosphere II", 32000.0, -0.0028),
    ("Stratopause", 47000.0, 0.0),
    ("Mesosphere I", 51000.0, 0.0028),
    ("Mesosphere II", 71000.0, 0.0020),
    ("Mesopause", 84852.0, 0.0),
]


def _is_isothermal(lapse_rate):
    return abs(lapse_rate) < ISOTHERMAL_EPS


def _temperature_in_layer(layer, altitude):
    return layer["base_temperature"] - layer["lapse_rate"] * (altitude - layer["base_altitude"])


def _pressure_in_layer(layer, altitude):
    """
    Hydrostatic pressure inside one layer.
    Isothermal:  p = pb * exp(-g0 Δh / (R Tb))
    Gradient:    p = pb * (T / Tb) ** (g0 / (R L))
    """
    dh = altitude - layer["base_altitude"]
    if _is_isothermal(layer["lapse_rate"]):
        return layer["base_pressure"] * math.exp(-G0 * dh / (R * layer["base_temperature"]))
    temperature = _temperature_in_layer(layer, altitude)
    exponent = G0 / (R * layer["lapse_rate"])
    return layer["base_pressure"] * (temperature / layer["base_temperature"]) ** exponent


def _build_layers():
    layers = []
    temperature, pressure = T0, P0
    for i, (name, base_altitude, lapse_rate) in enumerate(_LAYER_TABLE):
        if i > 0:
            below = layers[-1]
            temperature = _temperature_in_layer(below, base_altitude)
            pressure = _pressure_in_layer(below, base_altitude)
        top = _LAYER_TABLE[i + 1][1] if i + 1 < len(_LAYER_TABLE) else MAX_ALTITUDE
        layers.append({
            "name": name,
            "base_altitude": base_altitude,
            "top_altitude": top,
            "lapse_rate": lapse_rate,
            "base_temperature": temperature,
            "base_pressure": pressure,
            "base_density": pressure / (R * temperature),
        })
    return layers


ISA_LAYERS = _build_layers()
MIN_PRESSURE = _pressure_in_layer(ISA_LAYERS[-1], MAX_ALTITUDE)


def speed_of_sound(temperature, gamma=GAMMA_AIR):
    """a = sqrt(γ R T)"""
    if temperature < 0:
        raise ValueError("Temperature cannot be below absolute zero (0 K).")
    return math.sqrt(gamma * R * temperature)


def find_layer(altitude):
    """Atmospheric layer containing a geopotential altitude in metres."""
    for layer in reversed(ISA_LAYERS):
        if altitude >= layer["base_altitude"]:
            return layer
    return ISA_LAYERS[0]


def _isa_result(altitude, temperature, pressure, layer):
    if pressure <= 0:
        raise ValueError("Calculated pressure is non-positive.")
    density = pressure / (R * temperature)
    return {
        "altitude": altitude,
        "temperature": temperature,
        "temperature_c": temperature - 273.15,
        "pressure": pressure,
        "density": density,
        "speed_of_sound": speed_of_sound(temperature),
        "pressure_ratio": pressure / P0,
        "density_ratio": density / RHO0,
        "layer": layer["name"],
    }


def isa_temperature(altitude):
    """Temperature (K) at an altitude, without the range check."""
    return _temperature_in_layer(find_layer(altitude), altitude)


def isa_from_altitude(altitude):
    """
    ISA state at a given altitude (m).

    Raises:
        ValueError: altitude below sea level or above 86 km
    """
    if altitude < 0:
        raise ValueError("Altitude cannot be negative.")
    if altitude > MAX_ALTITUDE:
        raise ValueError("Calculations are valid up to 86,000 meters based on standard ISA tables.")

    layer = find_layer(altitude)
    temperature = _temperature_in_layer(layer, altitude)
    pressure = _pressure_in_layer(layer, altitude)
    return _isa_result(altitude, temperature, pressure, layer)


def isa_from_pressure(pressure):
    """
    Invert the pressure profile: altitude and state for a static pressure (Pa).
    """
    if pressure <= 0:
        raise ValueError("Pressure must be positive.")
    if pressure > P0:
        raise ValueError("Pressure cannot be greater than sea level standard pressure (P0).")
    if pressure < MIN_PRESSURE:
        raise ValueError("Pressure is below the 86,000 m limit of the standard atmosphere tables.")

    layer = ISA_LAYERS[-1]
    for candidate in ISA_LAYERS:
        top_pressure = _pressure_in_layer(candidate, candidate["top_altitude"])
        if pressure >= top_pressure:
            layer = candidate
            break

    ratio = pressure / layer["base_pressure"]
    if _is_isothermal(layer["lapse_rate"]):
        temperature = layer["base_temperature"]
        altitude = layer["base_altitude"] - (R * temperature / G0) * math.log(ratio)
    else:
        temperature = layer["base_temperature"] * ratio ** (R * layer["lapse_rate"] / G0)
        altitude = layer["base_altitude"] + (layer["base_temperature"] - temperature) / layer["lapse_rate"]

    # p = P0 lands exactly on 0 but rounding can push it a hair negative
    altitude = max(altitude, 0.0)
    return _isa_result(altitude, temperature, pressure, layer)


def isa_from_temperature(temperature):
    """
    Altitude and state for a temperature (K).

    Isothermal layers cannot be inverted; when the temperature occurs in
    several layers the lowest one is used.
    """
    if temperature <= 0:
        raise ValueError("Temperature must be positive (in Kelvin).")

    for layer in ISA_LAYERS:
        if _is_isothermal(layer["lapse_rate"]):
            continue
        t_base = layer["base_temperature"]
        t_top = _temperature_in_layer(layer, layer["top_altitude"])
        if min(t_base, t_top) <= temperature <= max(t_base, t_top):
            altitude = layer["base_altitude"] + (t_base - temperature) / layer["lapse_rate"]
            pressure = _pressure_in_layer(layer, altitude)
            return _isa_result(altitude, temperature, pressure, layer)

    raise ValueError(f"Temperature {temperature:.2f} K is not in a layer with variable temperature.")


def isa_profile(max_altitude=MAX_ALTITUDE, points=200):
    """
    Sampled ISA profile for plotting.

    Returns:
        Dict of numpy arrays: altitude, temperature, pressure, density
    """
    max_altitude = min(max(max_altitude, 0.0), MAX_ALTITUDE)
    altitudes = np.linspace(0.0, max_altitude, points)
    states = [isa_from_altitude(float(h)) for h in altitudes]
    return {
        "altitude": altitudes,
        "temperature": np.array([s["temperature"] for s in states]),
        "pressure": np.array([s["pressure"] for s in states]),
        "density": np.array([s["density"] for s in states]),
    }
