# test_presets.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aerocalc import catalogue
from aerocalc.preset_loader import (
    FLUID_PROPERTIES,
    DELTA_V_REFERENCE,
    SPECIFIC_IMPULSE_REFERENCE,
    AIRFOILS,
    AIRCRAFT_TYPES,
    MISSION_PROFILES,
    PresetTable,
    load_preset,
)


def test_boot_presets_loaded():
    print("\n=== TEST: Presets ===")
    print(f"{len(FLUID_PROPERTIES)} fluids, {len(DELTA_V_REFERENCE)} delta-v refs, "
          f"{len(SPECIFIC_IMPULSE_REFERENCE)} Isp refs")
    assert "air" in FLUID_PROPERTIES
    assert FLUID_PROPERTIES["air"]["density"] == 1.225
    for fluid in FLUID_PROPERTIES.keys():
        props = FLUID_PROPERTIES[fluid]
        assert props["kinematic_viscosity"] > 0, fluid
    assert all({"name", "delta_v", "category"} <= set(entry) for entry in DELTA_V_REFERENCE)
    assert all(entry["value"] > 0 for entry in SPECIFIC_IMPULSE_REFERENCE)


def test_aircraft_presets():
    assert AIRFOILS["naca-2412"]["cl_max"] == 1.4
    assert all(0 < entry["oswald_efficiency"] <= 1 for _, entry in AIRFOILS.items())

    for key, entry in AIRCRAFT_TYPES.items():
        fractions = (entry["empty_fraction"] + entry["fuel_fraction"]
                     + entry["payload_fraction"] + entry["crew_fraction"])
        assert abs(fractions - 1) < 1e-9, key
    assert AIRCRAFT_TYPES["helicopter"]["wing_loading"] is None

    assert all(0 < entry["pre_cruise_fraction"] <= 1 for _, entry in MISSION_PROFILES.items())
    assert {"label": "Ferry Flight", "value": "ferry"} in MISSION_PROFILES.options()


def test_fluid_options():
    options = FLUID_PROPERTIES.options()
    assert {"label": "Air", "value": "air"} in options
    assert len(options) == len(FLUID_PROPERTIES)


def test_missing_and_broken_preset_files(tmp_path):
    assert load_preset("does_not_exist.json", default={}) == {}

    (tmp_path / "broken.json").write_text("{not json")
    assert load_preset("broken.json", default=[], folder_name=str(tmp_path)) == []

    (tmp_path / "ok.json").write_text('{"a": {"name": "A"}}')
    table = PresetTable(load_preset("ok.json", folder_name=str(tmp_path)))
    assert table.get("a") == {"name": "A"}
    assert table.get("b") is None


def test_catalogue():
    print("\n=== TEST: Catalogue ===")
    keys = [tool["key"] for tool in catalogue.TOOLS]
    assert len(keys) == len(set(keys))
    assert catalogue.get_tool("hohmann-transfer")["status"] == catalogue.ACTIVE
    assert catalogue.get_tool("nozzle-design")["status"] == catalogue.COMING_SOON
    assert catalogue.get_tool("redshift-calculator")["category"] == "Astronomy"
    assert catalogue.get_tool("coordinate-system-converter")["status"] == catalogue.ACTIVE
    assert catalogue.get_tool("warp-drive") is None
    assert catalogue.tool_path("radar-range") == "/tools/radar-range"

    active_only = catalogue.tools_by_category(include_coming_soon=False)
    assert "Structures" not in active_only
    assert all(tool["status"] == catalogue.ACTIVE for tools in active_only.values() for tool in tools)
    assert list(catalogue.tools_by_category())[0] == "General Utilities"


if __name__ == "__main__":
    import pytest
    sys.exit(pytest.main([__file__, "-v"]))
