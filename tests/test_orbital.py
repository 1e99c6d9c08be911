# test_orbital.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math
import numpy as np
import pytest

from aerocalc.orbital import (
    MU_EARTH,
    R_EARTH,
    circular_velocity,
    orbital_period,
    calculate_orbital_properties,
    calculate_hohmann_transfer,
    transfer_orbit_points,
)
from aerocalc import radar
from aerocalc import mission


# =============================================================================
# ORBITS
# =============================================================================

def test_circular_orbit():
    print("\n=== TEST: Circular orbit at 400 km ===")
    result = calculate_orbital_properties(400)
    print(result)
    assert result["orbital_radius"] == pytest.approx(R_EARTH + 400e3)
    assert 7600 < result["velocity"] < 7750
    assert 90 < result["period"] / 60 < 95
    assert result["period"] == pytest.approx(2 * math.pi * result["orbital_radius"] / result["velocity"])


def test_negative_altitude_clamps_to_surface():
    result = calculate_orbital_properties(-5)
    assert result["altitude_km"] == 0.0
    assert result["orbital_radius"] == pytest.approx(R_EARTH)
    with pytest.raises(ValueError):
        calculate_orbital_properties(-10000)


def test_hohmann_leo_to_geo():
    print("\n=== TEST: Hohmann LEO -> GEO ===")
    result = calculate_hohmann_transfer(200, 35786)
    print(f"dv1={result['delta_v1']:.1f} dv2={result['delta_v2']:.1f} "
          f"total={result['total_delta_v']:.1f} m/s, t={result['transfer_time'] / 3600:.2f} h")
    assert 3800 < result["total_delta_v"] < 4000
    assert result["delta_v1"] > result["delta_v2"]
    assert 5.0 < result["transfer_time"] / 3600 < 5.5
    assert result["total_delta_v"] == pytest.approx(result["delta_v1"] + result["delta_v2"])
    assert result["transfer_semi_major_axis"] == pytest.approx(
        (result["initial_radius"] + result["final_radius"]) / 2
    )


def test_hohmann_lowering_is_symmetric():
    up = calculate_hohmann_transfer(300, 1000)
    down = calculate_hohmann_transfer(1000, 300)
    assert down["total_delta_v"] == pytest.approx(up["total_delta_v"])
    assert down["transfer_time"] == pytest.approx(up["transfer_time"])


def test_hohmann_same_altitude():
    with pytest.raises(ValueError, match="cannot be the same"):
        calculate_hohmann_transfer(500, 500)


def test_transfer_orbit_points():
    r1, r2 = R_EARTH + 200e3, R_EARTH + 35786e3
    points = transfer_orbit_points(r1, r2, points=181)
    x, y = points["transfer"]
    radii = np.hypot(x, y)
    assert radii[0] == pytest.approx(r1)
    assert radii[-1] == pytest.approx(r2)
    assert len(points["initial"][0]) == 181


def test_vis_viva_helpers():
    assert circular_velocity(R_EARTH) == pytest.approx(math.sqrt(MU_EARTH / R_EARTH))
    assert orbital_period(R_EARTH) == pytest.approx(2 * math.pi * math.sqrt(R_EARTH ** 3 / MU_EARTH))


# =============================================================================
# RADAR RANGE
# =============================================================================

def test_radar_unit_conversions():
    assert radar.convert_power_to_w(1, "MW") == 1e6
    assert radar.convert_gain_to_linear(40, "dBi") == pytest.approx(1e4)
    assert radar.convert_frequency_to_hz(3, "GHz") == 3e9
    assert radar.convert_rcs_to_m2(10, "dBsm") == pytest.approx(10)
    assert radar.convert_signal_to_w(-100, "dBm") == pytest.approx(1e-13)
    assert radar.convert_signal_to_w(1, "mW") == pytest.approx(1e-3)
    with pytest.raises(ValueError):
        radar.convert_power_to_w(1, "hp")


def test_radar_range():
    print("\n=== TEST: Radar range ===")
    result = radar.calculate_radar_range(1e6, 1e4, 3e9, 1.0, 1e-13)
    wavelength = radar.C / 3e9
    expected = (1e6 * 1e8 * wavelength ** 2 * 1.0 / ((4 * math.pi) ** 3 * 1e-13)) ** 0.25
    print(f"R_max = {result['max_range'] / 1000:.1f} km")
    assert result["wavelength"] == pytest.approx(wavelength)
    assert result["max_range"] == pytest.approx(expected)


def test_radar_range_fourth_root_of_rcs():
    small = radar.calculate_radar_range(1e6, 1e4, 3e9, 1.0, 1e-13)["max_range"]
    big = radar.calculate_radar_range(1e6, 1e4, 3e9, 16.0, 1e-13)["max_range"]
    assert big / small == pytest.approx(2.0)

    rcs, ranges = radar.range_vs_rcs(1e6, 1e4, 3e9, 1e-13, rcs_min=1, rcs_max=16, points=5)
    assert rcs[0] == pytest.approx(1)
    assert ranges[-1] / ranges[0] == pytest.approx(2.0)


def test_radar_errors():
    with pytest.raises(ValueError, match="Transmit power must be positive."):
        radar.calculate_radar_range(0, 1e4, 3e9, 1, 1e-13)
    with pytest.raises(ValueError):
        radar.calculate_radar_range(1e6, 1e4, 3e9, 0, 1e-13)
    with pytest.raises(ValueError):
        radar.range_vs_rcs(1e6, 1e4, 3e9, 1e-13, rcs_min=10, rcs_max=1)


# =============================================================================
# DELTA-V BUDGET
# =============================================================================

def _lunar_mission():
    return [
        mission.create_mission_phase("Launch to LEO", 9400, "launch"),
        mission.create_mission_phase("LEO to Moon", 3200, "transfer"),
        mission.create_mission_phase("Moon Landing", 1800, "landing"),
    ]


def test_budget_totals_and_breakdown():
    print("\n=== TEST: Delta-v budget ===")
    budget = mission.calculate_delta_v_budget(_lunar_mission())
    print(budget["enabled_total_delta_v"], budget["complexity"])
    assert budget["total_delta_v"] == pytest.approx(14400)
    assert budget["enabled_total_delta_v_km"] == pytest.approx(14.4)
    assert budget["breakdown"]["launch"] == pytest.approx(9400)
    assert budget["breakdown"]["orbital"] == 0
    assert budget["complexity"] == "Very High Complexity"


def test_disabled_phases_only_count_in_total():
    phases = _lunar_mission()
    phases = mission.set_enabled(phases, [phases[0]["id"]])
    budget = mission.calculate_delta_v_budget(phases)
    assert len(budget["enabled_phases"]) == 1
    assert budget["enabled_total_delta_v"] == pytest.approx(9400)
    assert budget["total_delta_v"] == pytest.approx(14400)
    assert budget["breakdown"]["transfer"] == 0
    assert budget["complexity"] == "High Complexity"


def test_empty_mission():
    budget = mission.calculate_delta_v_budget([])
    assert budget["complexity"] == "No Mission Defined"
    assert budget["enabled_total_delta_v"] == 0
    assert budget["recommendations"] == ["Add mission phases to calculate delta-v budget"]


def test_phase_list_helpers():
    phases = _lunar_mission()
    assert len({phase["id"] for phase in phases}) == 3
    assert all(phase["id"].startswith("phase-") for phase in phases)

    fewer = mission.remove_phase(phases, phases[1]["id"])
    assert [phase["name"] for phase in fewer] == ["Launch to LEO", "Moon Landing"]
    assert mission.remove_phase(phases, "phase-missing") == phases

    extra = mission.create_mission_phase("Deorbit", 100, "other")
    assert mission.add_phase(phases, extra)[-1] is extra
    assert len(phases) == 3


def test_phase_validation():
    with pytest.raises(ValueError, match="Unknown phase category"):
        mission.create_mission_phase("Hop", 10, "teleport")
    with pytest.raises(ValueError):
        mission.create_mission_phase("Hop", -10, "other")


def test_complexity_levels_and_mass_ratio():
    assert mission.assess_complexity(1500)[0] == "Low Complexity"
    assert mission.assess_complexity(25000)[0] == "Extreme Complexity"
    assert mission.required_mass_ratio(9400, 300) == pytest.approx(math.exp(9400 / (300 * 9.80665)))
    assert mission.common_delta_v_values()


if __name__ == "__main__":
    test_circular_orbit()
    test_negative_altitude_clamps_to_surface()
    test_hohmann_leo_to_geo()
    test_hohmann_lowering_is_symmetric()
    test_hohmann_same_altitude()
    test_transfer_orbit_points()
    test_vis_viva_helpers()
    test_radar_unit_conversions()
    test_radar_range()
    test_radar_range_fourth_root_of_rcs()
    test_radar_errors()
    test_budget_totals_and_breakdown()
    test_disabled_phases_only_count_in_total()
    test_empty_mission()
    test_phase_list_helpers()
    test_phase_validation()
    test_complexity_levels_and_mass_ratio()
    print("\n✓ All orbital, radar and mission tests passed!")
