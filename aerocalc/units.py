# aerocalc/units.py

"""
Unit conversion tables shared by every calculator page.
Factors convert a value in the given unit to the category's base unit.
"""

BASE_UNITS = {
    "Length": "m",
    "Mass": "kg",
    "Temperature": "K",
    "Velocity": "m/s",
    "Pressure": "Pa",
    "Force": "N",
    "Area": "m2",
    "Volume": "m3",
}

FACTORS = {
    "Length": {
        "m": 1,
        "km": 1000,
        "cm": 0.01,
        "mm": 0.001,
        "mi": 1609.344,
        "yd": 0.9144,
        "ft": 0.3048,
        "in": 0.0254,
        "nmi": 1852,
    },
    "Mass": {
        "kg": 1,
        "g": 0.001,
        "mg": 0.000001,
        "tonne": 1000,
        "lb": 0.45359237,
        "oz": 0.028349523125,
        "slug": 14.5939029,
    },
    # Temperature uses offsets, see convert_unit. Scale factors only.
    "Temperature": {
        "K": 1,
        "C": 1,
        "F": 5 / 9,
    },
    "Velocity": {
        "m/s": 1,
        "km/h": 1 / 3.6,
        "mph": 0.44704,
        "kn": 1852 / 3600,
        "fps": 0.3048,
    },
    "Pressure": {
        "Pa": 1,
        "hPa": 100,
        "kPa": 1000,
        "MPa": 1000000,
        "bar": 100000,
        "mbar": 100,
        "psi": 6894.757,
        "atm": 101325,
        "mmHg": 133.322,
    },
    "Force": {
        "N": 1,
        "kN": 1000,
        "lbf": 4.4482216,
    },
    "Area": {
        "m2": 1,
        "km2": 1000000,
        "cm2": 0.0001,
        "mm2": 0.000001,
        "ha": 10000,
        "acre": 4046.8564,
        "ft2": 0.09290304,
        "in2": 0.00064516,
    },
    "Volume": {
        "m3": 1,
        "L": 0.001,
        "mL": 0.000001,
        "gal": 0.003785411784,  # US gallon
        "qt": 0.000946352946,  # US quart
        "ft3": 0.028316846592,
        "in3": 0.000016387064,
    },
}

ABSOLUTE_ZERO_C = -273.15

# Delta-v / velocity units used by the mission planning pages
DELTA_V_FACTORS = {
    "m/s": 1,
    "km/s": 1000,
    "ft/s": 0.3048,
}


def get_units_for_category(category):
    """List the units available in a category."""
    if category not in FACTORS:
        raise ValueError(f"Unknown category: {category}")
    return list(FACTORS[category].keys())


ALL_CATEGORIES = {category: get_units_for_category(category) for category in BASE_UNITS}


def _to_kelvin(value, unit):
    if unit == "C":
        return value - ABSOLUTE_ZERO_C
    if unit == "F":
        return (value - 32) * 5 / 9 - ABSOLUTE_ZERO_C
    return value


def _from_kelvin(kelvin, unit):
    if unit == "C":
        return kelvin + ABSOLUTE_ZERO_C
    if unit == "F":
        return (kelvin + ABSOLUTE_ZERO_C) * 9 / 5 + 32
    return kelvin


def convert_unit(value, from_unit, to_unit, category):
    """
    Convert a value between two units of the same category.

    Args:
        value: Numeric value expressed in ``from_unit``
        from_unit: Unit to convert from (e.g. "ft")
        to_unit: Unit to convert to (e.g. "m")
        category: Measurement category (e.g. "Length")

    Returns:
        The value expressed in ``to_unit``

    Raises:
        ValueError: unknown category or unit, or a temperature below absolute zero
    """
    category_factors = FACTORS.get(category)
    if category_factors is None:
        raise ValueError(f"Unknown or unsupported category: {category}")

    for unit in (from_unit, to_unit):
        if unit not in category_factors:
            raise ValueError(f"Unknown unit in category {category}: {unit}")

    if category == "Temperature":
        kelvin = _to_kelvin(value, from_unit)
        if kelvin < 0:
            raise ValueError("Temperature cannot be below absolute zero (0 K).")
        if from_unit == to_unit:
            return value
        return _from_kelvin(kelvin, to_unit)

    if from_unit == to_unit:
        return value

    value_in_base = value * category_factors[from_unit]
    return value_in_base / category_factors[to_unit]


def convert_delta_v(value, from_unit, to_unit):
    """Convert a velocity change between m/s, km/s and ft/s."""
    if from_unit not in DELTA_V_FACTORS or to_unit not in DELTA_V_FACTORS:
        raise ValueError(f"Unknown velocity unit: {from_unit if from_unit not in DELTA_V_FACTORS else to_unit}")
    return value * DELTA_V_FACTORS[from_unit] / DELTA_V_FACTORS[to_unit]


def to_si(value, unit, category):
    """Shortcut used by the page callbacks: convert a form value to the base unit."""
    return convert_unit(value, unit, BASE_UNITS[category], category)


def from_si(value, unit, category):
    """Convert a base-unit result to the unit picked in the form."""
    return convert_unit(value, BASE_UNITS[category], unit, category)
