# aerocalc/astronomy.py

"""
Astronomical distance units and spectral redshift.
"""

SPEED_OF_LIGHT = 299792458.0  # m/s

# Metres per unit
DISTANCE_UNITS = {
    "m": 1.0,
    "km": 1e3,
    "LD": 384_400_000.0,                 # mean Earth-Moon distance
    "AU": 149_597_870_700.0,             # IAU 2012
    "ly": 9_460_730_472_580_800.0,       # Julian year at c
    "pc": 3.0856775814913673e16,
}

DISTANCE_UNIT_NAMES = {
    "m": "Metres",
    "km": "Kilometres",
    "LD": "Lunar distances",
    "AU": "Astronomical units",
    "ly": "Light-years",
    "pc": "Parsecs",
}

WAVELENGTH_UNITS = {"m": 1.0, "cm": 1e-2, "mm": 1e-3, "μm": 1e-6, "nm": 1e-9, "Å": 1e-10}
FREQUENCY_UNITS = {"Hz": 1.0, "kHz": 1e3, "MHz": 1e6, "GHz": 1e9, "THz": 1e12}


def convert_distance(value, from_unit, to_unit):
    for unit in (from_unit, to_unit):
        if unit not in DISTANCE_UNITS:
            raise ValueError(f"Unknown distance unit: {unit}")
    if from_unit == to_unit:
        return value
    return value * DISTANCE_UNITS[from_unit] / DISTANCE_UNITS[to_unit]


def light_travel_time(distance_m):
    """Seconds for light to cover a distance."""
    return abs(distance_m) / SPEED_OF_LIGHT


def wavelength_to_m(value, unit):
    if unit not in WAVELENGTH_UNITS:
        raise ValueError(f"Unknown wavelength unit: {unit}")
    return value * WAVELENGTH_UNITS[unit]


def frequency_to_hz(value, unit):
    if unit not in FREQUENCY_UNITS:
        raise ValueError(f"Unknown frequency unit: {unit}")
    return value * FREQUENCY_UNITS[unit]


def frequency_to_wavelength(frequency_hz):
    """λ = c / f"""
    if frequency_hz <= 0:
        raise ValueError("Frequency must be positive.")
    return SPEED_OF_LIGHT / frequency_hz


def wavelength_to_frequency(wavelength_m):
    """f = c / λ"""
    if wavelength_m <= 0:
        raise ValueError("Wavelength must be positive.")
    return SPEED_OF_LIGHT / wavelength_m


def redshift_from_wavelength(observed_m, emitted_m):
    """z = (λ_obs - λ_emit) / λ_emit"""
    if observed_m <= 0 or emitted_m <= 0:
        raise ValueError("Wavelengths must be positive.")
    return (observed_m - emitted_m) / emitted_m


def redshift_from_frequency(observed_hz, emitted_hz):
    return redshift_from_wavelength(frequency_to_wavelength(observed_hz), frequency_to_wavelength(emitted_hz))


def radial_velocity(z):
    """Relativistic Doppler line-of-sight velocity (m/s); negative means approaching."""
    stretch = (1 + z) ** 2
    return SPEED_OF_LIGHT * (stretch - 1) / (stretch + 1)


def calculate_redshift(observed_m, emitted_m):
    """
    Redshift of a spectral line from its observed and rest wavelengths (m).
    Negative z is a blueshift.
    """
    z = redshift_from_wavelength(observed_m, emitted_m)
    velocity = radial_velocity(z)
    if z > 0:
        shift = "Redshift (receding)"
    elif z < 0:
        shift = "Blueshift (approaching)"
    else:
        shift = "No shift"

    return {
        "z": z,
        "stretch_factor": 1 + z,
        "observed_wavelength": observed_m,
        "emitted_wavelength": emitted_m,
        "observed_frequency": wavelength_to_frequency(observed_m),
        "emitted_frequency": wavelength_to_frequency(emitted_m),
        "radial_velocity": velocity,
        "velocity_fraction": velocity / SPEED_OF_LIGHT,
        "shift": shift,
    }
