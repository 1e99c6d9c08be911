# test_flow.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math
import pytest

from aerocalc.isentropic import (
    calculate_isentropic_flow,
    mach_from_temperature_ratio,
    mach_from_pressure_ratio,
    mach_from_density_ratio,
    mach_from_area_ratio,
    generate_isentropic_table,
)
from aerocalc.shocks import (
    calculate_normal_shock,
    calculate_from_pitot_ratio,
    sonic_pitot_ratio,
    generate_shock_table,
    find_critical_mach,
    theta_from_beta,
    max_deflection_angle,
    calculate_oblique_shock,
)
from aerocalc.reynolds import (
    determine_flow_regime,
    calculate_reynolds_number,
    calculate_reynolds_number_kinematic,
    calculate_kinematic_viscosity,
    calculate_dynamic_viscosity,
    get_fluid,
)


# =============================================================================
# ISENTROPIC FLOW
# =============================================================================

def test_isentropic_at_mach_2():
    print("\n=== TEST: Isentropic ratios at M=2 ===")
    result = calculate_isentropic_flow(2.0)
    print(result)
    assert result["temperature_ratio"] == pytest.approx(1 / 1.8)
    assert result["pressure_ratio"] == pytest.approx(0.12780, rel=1e-4)
    assert result["density_ratio"] == pytest.approx(0.23005, rel=1e-4)
    assert result["area_ratio"] == pytest.approx(1.6875, rel=1e-4)
    assert result["mach_angle"] == pytest.approx(30.0)
    assert result["prandtl_meyer_angle"] == pytest.approx(26.3798, rel=1e-4)


def test_isentropic_edge_cases():
    still = calculate_isentropic_flow(0)
    assert still["temperature_ratio"] == 1.0
    assert math.isinf(still["area_ratio"])
    assert still["mach_angle"] is None
    assert still["prandtl_meyer_angle"] == 0.0

    sonic = calculate_isentropic_flow(1.0)
    assert sonic["area_ratio"] == pytest.approx(1.0)
    assert sonic["mach_angle"] == pytest.approx(90.0)

    with pytest.raises(ValueError):
        calculate_isentropic_flow(-0.5)
    with pytest.raises(ValueError):
        calculate_isentropic_flow(2.0, gamma=1.0)


def test_ratio_inverses_recover_mach():
    print("\n=== TEST: Mach from ratios ===")
    for mach in (0.3, 0.8, 1.5, 3.0):
        flow = calculate_isentropic_flow(mach)
        assert mach_from_temperature_ratio(flow["temperature_ratio"]) == pytest.approx(mach)
        assert mach_from_pressure_ratio(flow["pressure_ratio"]) == pytest.approx(mach)
        assert mach_from_density_ratio(flow["density_ratio"]) == pytest.approx(mach)
        supersonic = mach > 1
        recovered = mach_from_area_ratio(flow["area_ratio"], supersonic=supersonic)
        print(f"M={mach}: A/A*={flow['area_ratio']:.5f} -> M={recovered:.6f}")
        assert recovered == pytest.approx(mach, rel=1e-8)


def test_area_ratio_branches():
    sub = mach_from_area_ratio(1.6875, supersonic=False)
    sup = mach_from_area_ratio(1.6875, supersonic=True)
    assert sub < 1 < sup
    assert sup == pytest.approx(2.0, rel=1e-6)
    assert mach_from_area_ratio(1.0) == 1.0

    with pytest.raises(ValueError, match="greater than or equal to 1"):
        mach_from_area_ratio(0.5)
    with pytest.raises(ValueError):
        mach_from_temperature_ratio(1.2)
    with pytest.raises(ValueError):
        mach_from_pressure_ratio(0)


def test_isentropic_table():
    table = generate_isentropic_table(0.5, 2.5, steps=5)
    assert [row["mach"] for row in table] == pytest.approx([0.5, 1.0, 1.5, 2.0, 2.5])
    with pytest.raises(ValueError):
        generate_isentropic_table(steps=1)


# =============================================================================
# NORMAL SHOCK
# =============================================================================

def test_normal_shock_mach_2():
    print("\n=== TEST: Normal shock at M1=2 ===")
    result = calculate_normal_shock(2.0)
    print(result)
    assert result["mach2"] == pytest.approx(0.57735, rel=1e-4)
    assert result["pressure_ratio"] == pytest.approx(4.5)
    assert result["density_ratio"] == pytest.approx(8 / 3)
    assert result["temperature_ratio"] == pytest.approx(1.6875)
    assert result["total_pressure_ratio"] == pytest.approx(0.72087, rel=1e-4)
    assert result["pitot_static_ratio"] == pytest.approx(5.6404, rel=1e-4)
    assert result["entropy_change"] == pytest.approx(-math.log(result["total_pressure_ratio"]))
    assert result["entropy_change"] > 0


def test_weak_shock_is_nearly_identity():
    result = calculate_normal_shock(1.0 + 1e-7)
    for key in ("mach2", "pressure_ratio", "density_ratio", "temperature_ratio", "total_pressure_ratio"):
        assert result[key] == pytest.approx(1.0, abs=1e-5), key


def test_normal_shock_errors():
    with pytest.raises(ValueError, match="supersonic"):
        calculate_normal_shock(0.8)
    with pytest.raises(ValueError):
        calculate_normal_shock(2.0, gamma=0.9)


def test_mach_from_pitot_ratio():
    print("\n=== TEST: Mach from pitot ratio ===")
    pitot = calculate_normal_shock(2.5)["pitot_static_ratio"]
    result = calculate_from_pitot_ratio(pitot)
    print(f"p02/p1={pitot:.4f} -> M1={result['mach1']:.6f}")
    assert result["mach1"] == pytest.approx(2.5, rel=1e-8)

    assert sonic_pitot_ratio() == pytest.approx(1.2 ** 3.5)
    with pytest.raises(ValueError, match="greater than"):
        calculate_from_pitot_ratio(1.5)


def test_shock_table_and_critical_mach():
    table = generate_shock_table(0.5, 3.0, steps=4)
    assert table[0]["mach1"] == pytest.approx(1.05)
    assert all(row["mach2"] < 1 for row in table)

    critical = find_critical_mach()
    print("Critical Mach (p02/p01 = 0.01):", critical)
    assert 7 < critical < 9
    assert calculate_normal_shock(critical)["total_pressure_ratio"] == pytest.approx(0.01, rel=1e-6)


# =============================================================================
# OBLIQUE SHOCK
# =============================================================================

def test_oblique_weak_and_strong():
    print("\n=== TEST: Oblique shock M1=2, θ=10° ===")
    weak = calculate_oblique_shock(2.0, 10.0)
    strong = calculate_oblique_shock(2.0, 10.0, weak=False)
    print("weak:", weak["wave_angle"], weak["downstream_mach"])
    print("strong:", strong["wave_angle"], strong["downstream_mach"])

    assert weak["wave_angle"] == pytest.approx(39.31, abs=0.05)
    assert weak["downstream_mach"] == pytest.approx(1.64, abs=0.01)
    assert strong["wave_angle"] > 80
    assert strong["downstream_mach"] < 1
    assert strong["pressure_ratio"] > weak["pressure_ratio"]

    # Both solutions satisfy the θ-β-M relation
    for result in (weak, strong):
        theta = math.degrees(theta_from_beta(2.0, math.radians(result["wave_angle"])))
        assert theta == pytest.approx(10.0, abs=1e-6)


def test_oblique_zero_deflection():
    wave = calculate_oblique_shock(2.0, 0.0)
    assert wave["wave_angle"] == pytest.approx(30.0)
    assert wave["pressure_ratio"] == 1.0
    assert wave["downstream_mach"] == pytest.approx(2.0)

    normal = calculate_oblique_shock(2.0, 0.0, weak=False)
    assert normal["wave_angle"] == pytest.approx(90.0)
    assert normal["downstream_mach"] == pytest.approx(calculate_normal_shock(2.0)["mach2"])


def test_max_deflection_and_detachment():
    theta_max, beta = max_deflection_angle(2.0)
    print(f"θmax at M1=2: {theta_max:.3f}° (β={beta:.2f}°)")
    assert theta_max == pytest.approx(22.97, abs=0.05)
    assert 60 < beta < 70

    with pytest.raises(ValueError, match="Shock detached"):
        calculate_oblique_shock(2.0, 30.0)
    with pytest.raises(ValueError):
        calculate_oblique_shock(0.9, 5.0)
    with pytest.raises(ValueError):
        calculate_oblique_shock(2.0, -1.0)


# =============================================================================
# REYNOLDS NUMBER
# =============================================================================

def test_reynolds_air():
    print("\n=== TEST: Reynolds number ===")
    air = get_fluid("air")
    result = calculate_reynolds_number(50, 1, air["density"], air["dynamic_viscosity"], fluid_name="Air")
    print(result)
    assert result["reynolds_number"] == pytest.approx(1.225 * 50 / 1.789e-5)
    assert result["flow_regime"] == "Turbulent"
    assert result["used_kinematic_formula"] is False

    kinematic = calculate_reynolds_number_kinematic(50, 1, air["kinematic_viscosity"])
    assert kinematic["reynolds_number"] == pytest.approx(50 / 1.46e-5)
    assert kinematic["used_kinematic_formula"] is True


def test_flow_regimes():
    assert determine_flow_regime(1e5) == "Laminar"
    assert determine_flow_regime(4e5) == "Transitional"
    assert determine_flow_regime(3000, internal=True) == "Transitional"
    assert determine_flow_regime(5000, internal=True) == "Turbulent"


def test_viscosity_helpers_and_errors():
    assert calculate_kinematic_viscosity(1000, 1e-3) == pytest.approx(1e-6)
    assert calculate_dynamic_viscosity(1000, 1e-6) == pytest.approx(1e-3)
    with pytest.raises(ValueError, match="Velocity must be positive."):
        calculate_reynolds_number(0, 1, 1.225, 1.8e-5)
    with pytest.raises(ValueError):
        calculate_reynolds_number_kinematic(1, 1, 0)
    with pytest.raises(ValueError, match="Unknown fluid"):
        get_fluid("mercury")


if __name__ == "__main__":
    test_isentropic_at_mach_2()
    test_isentropic_edge_cases()
    test_ratio_inverses_recover_mach()
    test_area_ratio_branches()
    test_isentropic_table()
    test_normal_shock_mach_2()
    test_weak_shock_is_nearly_identity()
    test_normal_shock_errors()
    test_mach_from_pitot_ratio()
    test_shock_table_and_critical_mach()
    test_oblique_weak_and_strong()
    test_oblique_zero_deflection()
    test_max_deflection_and_detachment()
    test_reynolds_air()
    test_flow_regimes()
    test_viscosity_helpers_and_errors()
    print("\n✓ All flow tests passed!")
