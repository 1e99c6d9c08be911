# test_aero_tools.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math
import pytest

from aerocalc.lift_drag import (
    get_airfoil,
    lift_coefficient,
    calculate_lift_and_drag,
    lift_drag_curve,
)
from aerocalc.sphere import (
    air_properties,
    sphere_drag_coefficient,
    separation_angle,
    sphere_flow_regime,
    pressure_distribution,
    wake_length,
    boundary_layer_thickness,
    calculate_sphere_flow,
)
from aerocalc.aircraft_weight import (
    calculate_aircraft_weight,
    cruise_fraction_for_range,
    loiter_fraction,
)
from aerocalc.geodesy import (
    WGS84_A,
    WGS84_B,
    geodetic_to_ecef,
    ecef_to_geodetic,
    degrees_to_dms,
    dms_to_degrees,
    format_dms,
)
from aerocalc.astronomy import (
    SPEED_OF_LIGHT,
    convert_distance,
    light_travel_time,
    redshift_from_frequency,
    radial_velocity,
    calculate_redshift,
)


# =============================================================================
# LIFT & DRAG
# =============================================================================

def test_lift_and_drag_at_sea_level():
    print("\n=== TEST: Lift and drag, NACA 2412 at 5° ===")
    result = calculate_lift_and_drag(60, 0, 5, 16.2, 11, "naca-2412", weight=10000)
    print(result)

    cl = 0.25 + 2 * math.pi * math.radians(5)
    aspect_ratio = 11 ** 2 / 16.2
    cd = 0.006 + cl ** 2 / (math.pi * aspect_ratio * 0.85)
    q = 0.5 * 1.225 * 60 ** 2

    assert result["density"] == pytest.approx(1.225, rel=1e-4)
    assert result["aspect_ratio"] == pytest.approx(aspect_ratio)
    assert result["cl"] == pytest.approx(cl)
    assert result["cd"] == pytest.approx(cd)
    assert result["lift"] == pytest.approx(cl * q * 16.2, rel=1e-4)
    assert result["drag"] == pytest.approx(cd * q * 16.2, rel=1e-4)
    assert result["max_lift_to_drag"] == pytest.approx(0.5 * math.sqrt(math.pi * aspect_ratio * 0.85 / 0.006))
    assert result["stall_speed"] == pytest.approx(math.sqrt(2 * 10000 / (1.225 * 16.2 * 1.4)), rel=1e-4)
    assert not result["is_stalled"]
    assert result["warnings"] == []


def test_lift_curve_cap_and_stall():
    naca = get_airfoil("naca-2412")
    # Linear curve would pass CLmax before the stall angle
    assert lift_coefficient(15, naca) == pytest.approx(1.4)
    assert lift_coefficient(20, naca) == pytest.approx(1.0)
    assert lift_coefficient(40, naca) == pytest.approx(0.3)

    stalled = calculate_lift_and_drag(60, 0, 30, 16.2, 11, "naca-2412")
    assert stalled["is_stalled"]
    assert stalled["stall_speed"] is None
    assert len(stalled["warnings"]) == 2


def test_airfoil_overrides_and_errors():
    custom = get_airfoil("custom", cl_max=1.8, oswald_efficiency=0.95)
    assert custom["cl_max"] == 1.8
    assert custom["oswald_efficiency"] == 0.95
    assert custom["cd0"] == 0.008

    with pytest.raises(ValueError, match="Unknown airfoil"):
        get_airfoil("naca-0000")
    with pytest.raises(ValueError, match="Oswald"):
        get_airfoil("naca-2412", oswald_efficiency=1.5)
    with pytest.raises(ValueError, match="Velocity"):
        calculate_lift_and_drag(0, 0, 5, 16.2, 11)
    with pytest.raises(ValueError, match="Wing span"):
        calculate_lift_and_drag(60, 0, 5, 16.2, 0)
    with pytest.raises(ValueError, match="Weight"):
        calculate_lift_and_drag(60, 0, 5, 16.2, 11, weight=-1)


def test_lift_drag_sweep():
    sweep = lift_drag_curve(60, 1000, 16.2, 11, "clark-y", steps=11)
    assert len(sweep) == 11
    assert sweep[0]["angle_of_attack"] == pytest.approx(-5)
    assert sweep[-1]["angle_of_attack"] == pytest.approx(20)
    assert all(row["cd"] > 0 for row in sweep)


# =============================================================================
# SPHERE FLOW
# =============================================================================

def test_sphere_drag_coefficient_regimes():
    assert sphere_drag_coefficient(0.05) == pytest.approx(480)
    assert sphere_drag_coefficient(0.5) == pytest.approx(48 * (1 + 3 * 0.5 / 16))
    assert sphere_drag_coefficient(1e4) == pytest.approx(0.4)
    assert sphere_drag_coefficient(10 ** 4.75) == pytest.approx(0.3)
    assert sphere_drag_coefficient(3e5) == pytest.approx(0.2)
    with pytest.raises(ValueError):
        sphere_drag_coefficient(0)


def test_separation_and_wake():
    assert separation_angle(0.5) == 180.0
    assert separation_angle(100) == pytest.approx(100.0)
    assert separation_angle(1e4) == pytest.approx(80.0)
    assert separation_angle(1e6) == 80.0

    assert sphere_flow_regime(0.5)[0] == "Stokes Flow (Creeping Flow)"
    assert sphere_flow_regime(5e4)[0] == "Critical Flow"
    assert sphere_flow_regime(1e6)[0] == "Supercritical Flow"

    assert wake_length(0.5, 1.0) == 10.0
    assert boundary_layer_thickness(1e4, 1.0) == pytest.approx(0.01)


def test_pressure_distribution():
    angles, cp = pressure_distribution(0.5)
    assert cp[0] == pytest.approx(1.0)
    assert angles[90] == pytest.approx(90.0)
    assert cp[90] == pytest.approx(-1.25)

    _, cp = pressure_distribution(1e4)
    # Separated wake past 80°
    assert cp[120] == pytest.approx(-0.5)
    assert cp[45] == pytest.approx(1 - 2.25 * 0.5)


def test_sphere_flow_in_air():
    print("\n=== TEST: Sphere in air ===")
    props = air_properties(288.15)
    assert props["dynamic_viscosity"] == pytest.approx(1.789e-5)
    assert props["density"] == pytest.approx(1.225, rel=1e-3)

    result = calculate_sphere_flow(0.1, 10, "air")
    print(result)
    q = 0.5 * result["density"] * 100
    assert result["reynolds_number"] == pytest.approx(props["density"] * 10 * 0.1 / 1.789e-5)
    assert result["drag_force"] == pytest.approx(result["drag_coefficient"] * q * math.pi * 0.0025)
    assert result["flow_regime"] == "Critical Flow"
    assert not result["past_drag_crisis"]


def test_sphere_flow_other_fluids():
    water = calculate_sphere_flow(0.01, 0.5, "water")
    assert water["density"] == 998.2
    assert water["temperature"] is None

    syrup = calculate_sphere_flow(0.01, 0.001, "custom", density=1000, dynamic_viscosity=1e-3)
    assert syrup["reynolds_number"] == pytest.approx(10)

    with pytest.raises(ValueError, match="Density"):
        calculate_sphere_flow(0.01, 0.5, "custom")
    with pytest.raises(ValueError, match="Unknown fluid"):
        calculate_sphere_flow(0.01, 0.5, "mercury")
    with pytest.raises(ValueError, match="diameter"):
        calculate_sphere_flow(0, 1)
    with pytest.raises(ValueError, match="velocity"):
        calculate_sphere_flow(0.1, 0)


# =============================================================================
# AIRCRAFT WEIGHT
# =============================================================================

def test_weight_breakdown_from_fractions():
    print("\n=== TEST: Airliner weight breakdown ===")
    result = calculate_aircraft_weight("commercial-airliner", "medium-range", takeoff_weight=100000)
    print(result)
    assert result["empty_weight"] == pytest.approx(47000)
    assert result["fuel_weight"] == pytest.approx(25000)
    assert result["payload_weight"] == pytest.approx(23000)
    assert result["crew_weight"] == pytest.approx(5000)
    assert result["takeoff_weight"] == pytest.approx(100000)
    assert result["warnings"] == []

    f_reserve = loiter_fraction(45, 0.6, 17)
    f_cruise = 0.75 / (0.98 * 0.99 * f_reserve)
    assert result["range"] == pytest.approx(900 / 0.6 * 17 * math.log(1 / f_cruise))
    assert result["endurance"] == pytest.approx(result["range"] / 900 + 0.75)


def test_fuel_sized_for_range():
    sized = calculate_aircraft_weight("commercial-airliner", "medium-range",
                                      takeoff_weight=100000, range_km=3000)
    overall = 0.98 * cruise_fraction_for_range(3000, 250, 0.6, 17) * 0.99 * loiter_fraction(45, 0.6, 17)
    assert sized["fuel_weight"] == pytest.approx(100000 * (1 - overall))
    assert sized["range"] == 3000

    free = calculate_aircraft_weight("commercial-airliner", "medium-range", takeoff_weight=100000)
    back = calculate_aircraft_weight("commercial-airliner", "medium-range",
                                     takeoff_weight=100000, range_km=free["range"])
    assert back["fuel_weight"] == pytest.approx(25000, rel=1e-6)


def test_weight_limits():
    capped = calculate_aircraft_weight("commercial-airliner", "medium-range",
                                       takeoff_weight=100000, mtow=90000)
    assert capped["fuel_weight"] == pytest.approx(15000)
    assert capped["takeoff_weight"] == pytest.approx(90000)
    assert any("MTOW" in w for w in capped["warnings"])

    # Fuel runs out before the excess does
    starved = calculate_aircraft_weight("commercial-airliner", "medium-range",
                                        takeoff_weight=100000, mtow=70000)
    assert starved["fuel_weight"] == 0
    assert starved["payload_weight"] == pytest.approx(18000)
    assert "Payload reduced to meet MTOW." in starved["warnings"]

    zero_fuel = calculate_aircraft_weight("commercial-airliner", "medium-range",
                                          takeoff_weight=100000, mzfw=60000)
    assert zero_fuel["payload_weight"] == pytest.approx(13000)

    tanks = calculate_aircraft_weight("commercial-airliner", "medium-range",
                                      takeoff_weight=100000, max_fuel=20000)
    assert tanks["fuel_weight"] == 20000
    assert tanks["takeoff_weight"] == pytest.approx(95000)


def test_weight_defaults_and_errors():
    assert calculate_aircraft_weight("uav", "training")["takeoff_weight"] == pytest.approx(
        10000 * (0.7 + 0.2 + 0.05 * 0.8 + 0.05))
    from_empty = calculate_aircraft_weight("commercial-airliner", "medium-range", empty_weight=47000)
    assert from_empty["fuel_weight"] == pytest.approx(25000)
    assert from_empty["takeoff_weight"] == pytest.approx(100000)
    assert calculate_aircraft_weight("helicopter", "short-range")["wing_loading"] is None

    with pytest.raises(ValueError, match="Unknown aircraft type"):
        calculate_aircraft_weight("airship", "ferry")
    with pytest.raises(ValueError, match="Unknown mission type"):
        calculate_aircraft_weight("uav", "orbital")
    with pytest.raises(ValueError, match="negative"):
        calculate_aircraft_weight("uav", "ferry", payload_weight=-5)


def test_range_payload_corners():
    result = calculate_aircraft_weight("commercial-airliner", "medium-range", takeoff_weight=100000)
    points = result["range_payload"]
    print(points)
    # Full tanks at MTOW coincide with max payload at MTOW here
    assert len(points) == 3
    assert points[0] == (0.0, pytest.approx(23000))
    assert points[1][0] == pytest.approx(result["range"])
    assert points[-1][1] == 0.0
    assert points[-1][0] > points[1][0]


# =============================================================================
# GEODESY
# =============================================================================

def test_geodetic_to_ecef_reference_points():
    print("\n=== TEST: WGS84 reference points ===")
    origin = geodetic_to_ecef(0, 0, 0)
    assert origin["x"] == pytest.approx(WGS84_A)
    assert origin["y"] == pytest.approx(0, abs=1e-6)
    assert origin["z"] == pytest.approx(0, abs=1e-6)

    east = geodetic_to_ecef(0, 90, 0)
    assert east["y"] == pytest.approx(WGS84_A)

    pole = geodetic_to_ecef(90, 0, 0)
    assert pole["z"] == pytest.approx(WGS84_B)
    assert pole["x"] == pytest.approx(0, abs=1e-6)

    with pytest.raises(ValueError, match="Latitude"):
        geodetic_to_ecef(91, 0, 0)
    with pytest.raises(ValueError, match="Longitude"):
        geodetic_to_ecef(0, 181, 0)


def test_ecef_back_to_geodetic():
    greenwich = geodetic_to_ecef(51.4779, -0.0015, 45)
    back = ecef_to_geodetic(greenwich["x"], greenwich["y"], greenwich["z"])
    print(back)
    assert back["latitude"] == pytest.approx(51.4779, abs=1e-8)
    assert back["longitude"] == pytest.approx(-0.0015, abs=1e-8)
    assert back["altitude"] == pytest.approx(45, abs=1e-3)

    south_pole = ecef_to_geodetic(0, 0, -(WGS84_B + 100))
    assert south_pole["latitude"] == -90.0
    assert south_pole["altitude"] == pytest.approx(100)


def test_dms_conversions():
    d, m, s = degrees_to_dms(-33.8568)
    assert (d, m) == (-33, 51)
    assert s == pytest.approx(24.48, abs=1e-6)
    assert dms_to_degrees(-33, 51, 24.48) == pytest.approx(-33.8568)
    assert format_dms(51.5) == "51°30'00.00\"N"
    assert format_dms(-0.5, "E", "W") == "0°30'00.00\"W"
    with pytest.raises(ValueError):
        dms_to_degrees(10, 60, 0)


# =============================================================================
# ASTRONOMY
# =============================================================================

def test_distance_units():
    assert convert_distance(1, "AU", "km") == pytest.approx(149597870.7)
    assert convert_distance(1, "pc", "ly") == pytest.approx(3.26156, rel=1e-5)
    assert convert_distance(1, "ly", "AU") == pytest.approx(63241.08, rel=1e-5)
    assert convert_distance(5, "LD", "LD") == 5
    assert light_travel_time(convert_distance(1, "AU", "m")) == pytest.approx(499.004784, rel=1e-8)
    with pytest.raises(ValueError, match="Unknown distance unit"):
        convert_distance(1, "furlong", "km")


def test_redshift():
    print("\n=== TEST: H-alpha redshift ===")
    result = calculate_redshift(700e-9, 656.28e-9)
    print(result)
    z = (700 - 656.28) / 656.28
    assert result["z"] == pytest.approx(z)
    assert result["shift"] == "Redshift (receding)"
    assert 0 < result["radial_velocity"] < SPEED_OF_LIGHT * z

    assert calculate_redshift(600e-9, 656.28e-9)["shift"] == "Blueshift (approaching)"
    assert calculate_redshift(500e-9, 500e-9)["radial_velocity"] == 0
    assert redshift_from_frequency(1e9, 2e9) == pytest.approx(1.0)
    assert radial_velocity(1.0) == pytest.approx(0.6 * SPEED_OF_LIGHT)

    with pytest.raises(ValueError, match="Wavelengths must be positive"):
        calculate_redshift(0, 656.28e-9)


if __name__ == "__main__":
    test_lift_and_drag_at_sea_level()
    test_lift_curve_cap_and_stall()
    test_airfoil_overrides_and_errors()
    test_lift_drag_sweep()
    test_sphere_drag_coefficient_regimes()
    test_separation_and_wake()
    test_pressure_distribution()
    test_sphere_flow_in_air()
    test_sphere_flow_other_fluids()
    test_weight_breakdown_from_fractions()
    test_fuel_sized_for_range()
    test_weight_limits()
    test_weight_defaults_and_errors()
    test_range_payload_corners()
    test_geodetic_to_ecef_reference_points()
    test_ecef_back_to_geodetic()
    test_dms_conversions()
    test_distance_units()
    test_redshift()
    print("\n✓ All aero tool tests passed!")
