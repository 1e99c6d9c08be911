# test_propulsion.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math
import pytest

from aerocalc.propulsion import (
    G0,
    calculate_delta_v,
    calculate_initial_mass,
    calculate_required_specific_impulse,
    calculate_propellant_mass_fraction,
    calculate_twr,
    calculate_required_thrust,
    calculate_maximum_mass,
    convert_specific_impulse,
    classify_specific_impulse,
    common_specific_impulse_values,
)


def test_delta_v():
    print("\n=== TEST: Rocket equation ===")
    result = calculate_delta_v(550000, 150000, specific_impulse=300)
    print("Delta-v:", result["delta_v"])
    assert result["delta_v"] == pytest.approx(300 * G0 * math.log(550000 / 150000))
    assert result["mass_ratio"] == pytest.approx(550000 / 150000)
    assert result["propellant_mass"] == pytest.approx(400000)
    assert result["exhaust_velocity"] == pytest.approx(300 * G0)


def test_exhaust_velocity_instead_of_isp():
    by_isp = calculate_delta_v(1000, 500, specific_impulse=450)
    by_ve = calculate_delta_v(1000, 500, exhaust_velocity=450 * G0)
    assert by_ve["delta_v"] == pytest.approx(by_isp["delta_v"])
    assert by_ve["specific_impulse"] == pytest.approx(450)


def test_inverse_solutions_agree():
    print("\n=== TEST: Inverse consistency ===")
    forward = calculate_delta_v(550000, 150000, specific_impulse=300)

    initial = calculate_initial_mass(150000, forward["delta_v"], specific_impulse=300)
    print("Recovered m0:", initial["initial_mass"])
    assert initial["initial_mass"] == pytest.approx(550000)

    isp = calculate_required_specific_impulse(550000, 150000, forward["delta_v"])
    print("Recovered Isp:", isp["specific_impulse"])
    assert isp["specific_impulse"] == pytest.approx(300)


def test_rocket_equation_errors():
    with pytest.raises(ValueError, match="Final mass cannot be greater than initial mass."):
        calculate_delta_v(100, 200, specific_impulse=300)
    with pytest.raises(ValueError, match="Either specific impulse or exhaust velocity"):
        calculate_delta_v(200, 100)
    with pytest.raises(ValueError):
        calculate_initial_mass(100, -5, specific_impulse=300)
    with pytest.raises(ValueError, match="must differ"):
        calculate_required_specific_impulse(100, 100, 1000)


def test_propellant_mass_fraction():
    print("\n=== TEST: Propellant mass fraction ===")
    result = calculate_propellant_mass_fraction(1000, 100)
    assert result["propellant_mass_fraction"] == pytest.approx(0.9)
    assert result["structural_mass_fraction"] == pytest.approx(0.1)
    assert result["propellant_mass"] == pytest.approx(900)

    # All-propellant vehicle is allowed
    assert calculate_propellant_mass_fraction(10, 0)["propellant_mass_fraction"] == 1.0

    with pytest.raises(ValueError, match="less than the initial mass"):
        calculate_propellant_mass_fraction(100, 100)
    with pytest.raises(ValueError):
        calculate_propellant_mass_fraction(0, 0)


def test_twr_modes():
    print("\n=== TEST: Thrust-to-weight ===")
    result = calculate_twr(7.6e6, 549000)
    print("TWR:", result["twr"])
    assert result["twr"] == pytest.approx(7.6e6 / (549000 * G0))
    assert result["can_lift_off"] is True

    thrust = calculate_required_thrust(result["twr"], 549000)
    assert thrust["thrust"] == pytest.approx(7.6e6)

    mass = calculate_maximum_mass(7.6e6, result["twr"])
    assert mass["mass"] == pytest.approx(549000)

    low = calculate_twr(1000, 1000)
    assert low["can_lift_off"] is False
    assert "horizontal flight" in low["flight_capability"]

    with pytest.raises(ValueError):
        calculate_twr(0, 100)


def test_specific_impulse_conversion():
    print("\n=== TEST: Specific impulse ===")
    result = convert_specific_impulse(300, "seconds")
    assert result["meters_per_second"] == pytest.approx(2941.995)
    assert result["kilometers_per_second"] == pytest.approx(2.941995)
    assert result["feet_per_second"] == pytest.approx(2941.995 / 0.3048)
    assert result["performance_category"] == "Good Performance"

    from_kms = convert_specific_impulse(3, "km/s")
    assert from_kms["seconds"] == pytest.approx(3000 / G0)

    with pytest.raises(ValueError):
        convert_specific_impulse(-1, "seconds")
    with pytest.raises(ValueError, match="Invalid specific impulse unit"):
        convert_specific_impulse(300, "furlongs")


def test_isp_classification():
    assert classify_specific_impulse(70)[0] == "Low Performance"
    assert classify_specific_impulse(3000)[0] == "Exceptional Performance"


def test_reference_values_sorted():
    values = [entry["value"] for entry in common_specific_impulse_values()]
    assert values
    assert values == sorted(values)


if __name__ == "__main__":
    test_delta_v()
    test_exhaust_velocity_instead_of_isp()
    test_inverse_solutions_agree()
    test_rocket_equation_errors()
    test_propellant_mass_fraction()
    test_twr_modes()
    test_specific_impulse_conversion()
    test_isp_classification()
    test_reference_values_sorted()
    print("\n✓ All propulsion tests passed!")
