# aerocalc/mach.py

"""
Mach number <-> true airspeed at an ISA altitude.
"""

from .atmosphere import MAX_ALTITUDE, isa_temperature, speed_of_sound

# (upper Mach bound, regime name)
FLIGHT_REGIMES = [
    (0.8, "Subsonic"),
    (1.0, "Transonic"),
    (3.0, "Supersonic"),
    (5.0, "High Supersonic"),
    (10.0, "Hypersonic"),
]


def flight_regime(mach):
    for upper, name in FLIGHT_REGIMES:
        if mach < upper:
            return name
    return "High Hypersonic"


def _check_altitude(altitude):
    if altitude < 0:
        raise ValueError("Altitude cannot be negative.")
    if altitude > MAX_ALTITUDE:
        raise ValueError("Altitude must not exceed 86,000 meters.")


def _mach_result(mach, airspeed, temperature, a):
    temperature_c = temperature - 273.15
    return {
        "mach": mach,
        "speed_of_sound": a,
        "airspeed": airspeed,
        "temperature": temperature,
        "temperature_c": temperature_c,
        "temperature_f": temperature_c * 9 / 5 + 32,
        "is_subsonic": mach < 1,
        "is_supersonic": mach >= 1,
        "is_hypersonic": mach >= 5,
        "regime": flight_regime(mach),
    }


def calculate_mach_number(airspeed, altitude):
    """M = V / a(h), airspeed in m/s, altitude in m."""
    if airspeed < 0:
        raise ValueError("Airspeed cannot be negative.")
    _check_altitude(altitude)

    temperature = isa_temperature(altitude)
    a = speed_of_sound(temperature)
    return _mach_result(airspeed / a, airspeed, temperature, a)


def calculate_airspeed(mach, altitude):
    """V = M * a(h)"""
    if mach < 0:
        raise ValueError("Mach number cannot be negative.")
    _check_altitude(altitude)

    temperature = isa_temperature(altitude)
    a = speed_of_sound(temperature)
    return _mach_result(mach, mach * a, temperature, a)
