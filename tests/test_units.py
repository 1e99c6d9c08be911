# test_units.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from aerocalc.units import (
    ALL_CATEGORIES,
    BASE_UNITS,
    convert_unit,
    convert_delta_v,
    get_units_for_category,
    to_si,
    from_si,
)
from aerocalc.formatting import format_number, format_duration


def test_length_and_pressure():
    print("\n=== TEST: Length / Pressure ===")
    ft = convert_unit(1, "ft", "m", "Length")
    print("1 ft in m:", ft)
    assert ft == pytest.approx(0.3048)
    assert convert_unit(1, "nmi", "km", "Length") == pytest.approx(1.852)

    psi = convert_unit(1, "atm", "psi", "Pressure")
    print("1 atm in psi:", psi)
    assert psi == pytest.approx(14.6959, rel=1e-4)


def test_temperature_offsets():
    print("\n=== TEST: Temperature ===")
    assert convert_unit(100, "C", "F", "Temperature") == pytest.approx(212)
    assert convert_unit(0, "C", "K", "Temperature") == pytest.approx(273.15)
    assert convert_unit(-40, "F", "C", "Temperature") == pytest.approx(-40)
    # Same unit still goes through the absolute zero check
    assert convert_unit(10, "K", "K", "Temperature") == 10

    with pytest.raises(ValueError, match="absolute zero"):
        convert_unit(-300, "C", "K", "Temperature")
    with pytest.raises(ValueError, match="absolute zero"):
        convert_unit(-1, "K", "K", "Temperature")


def test_round_trip_every_unit():
    print("\n=== TEST: Round trip ===")
    for category, units in ALL_CATEGORIES.items():
        for unit in units:
            value = 123.456
            back = from_si(to_si(value, unit, category), unit, category)
            assert back == pytest.approx(value), f"{category} {unit}"


def test_bad_category_and_unit():
    with pytest.raises(ValueError, match="Unknown or unsupported category"):
        convert_unit(1, "m", "ft", "Luminosity")
    with pytest.raises(ValueError, match="Unknown unit"):
        convert_unit(1, "m", "furlong", "Length")
    with pytest.raises(ValueError):
        get_units_for_category("Luminosity")


def test_categories_have_base_units():
    for category, base in BASE_UNITS.items():
        assert base in get_units_for_category(category)


def test_delta_v_units():
    assert convert_delta_v(1, "km/s", "m/s") == pytest.approx(1000)
    assert convert_delta_v(1000, "ft/s", "m/s") == pytest.approx(304.8)
    with pytest.raises(ValueError):
        convert_delta_v(1, "mph", "m/s")


def test_format_number():
    print("\n=== TEST: Number formatting ===")
    assert format_number(None) == "N/A"
    assert format_number(float("nan")) == "N/A"
    assert format_number(float("inf")) == "∞"
    assert format_number(0) == "0"
    assert format_number(1.5) == "1.50"
    assert format_number(0.0001) == "1.00e-04"
    assert format_number(12345.678, 1) == "1.2e+04"
    assert format_number(True) == "Yes"


def test_format_duration():
    assert format_duration(59) == "59 s"
    assert format_duration(3661) == "1 h 1 min 1 s"
    assert format_duration(90061) == "1 d 1 h 1 min 1 s"
    with pytest.raises(ValueError):
        format_duration(-1)



if __name__ == "__main__":
    test_length_and_pressure()
    test_temperature_offsets()
    test_round_trip_every_unit()
    test_bad_category_and_unit()
    test_categories_have_base_units()
    test_delta_v_units()
    test_format_number()
    test_format_duration()
    print("\n✓ All unit tests passed!")
