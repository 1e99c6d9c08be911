# tool_pages/__init__.py

"""
One layout function per active calculator, keyed by the URL key in the catalogue.
"""

from .components import (
    home_layout, coming_soon_layout, not_found_layout, error_alert, result_table, data_table,
)
from .unit_converter_page import unit_converter_layout
from .isa_page import isa_layout
from .mach_page import mach_layout
from .reynolds_page import reynolds_layout
from .isentropic_page import isentropic_layout
from .normal_shock_page import normal_shock_layout
from .oblique_shock_page import oblique_shock_layout
from .rocket_equation_page import rocket_equation_layout
from .propellant_mass_fraction_page import propellant_mass_fraction_layout
from .twr_page import twr_layout
from .specific_impulse_page import specific_impulse_layout
from .orbital_page import orbital_layout
from .hohmann_page import hohmann_layout
from .radar_page import radar_layout
from .delta_v_budget_page import delta_v_budget_layout
from .lift_drag_page import lift_drag_layout
from .sphere_flow_page import sphere_flow_layout
from .aircraft_weight_page import aircraft_weight_layout
from .coordinate_converter_page import coordinate_converter_layout
from .astronomical_units_page import astronomical_units_layout
from .redshift_page import redshift_layout

PAGE_LAYOUTS = {
    "unit-converter": unit_converter_layout,
    "isa-calculator": isa_layout,
    "mach-calculator": mach_layout,
    "reynolds-calculator": reynolds_layout,
    "isentropic-flow": isentropic_layout,
    "normal-shock": normal_shock_layout,
    "oblique-shock": oblique_shock_layout,
    "rocket-equation": rocket_equation_layout,
    "propellant-mass-fraction": propellant_mass_fraction_layout,
    "twr-calculator": twr_layout,
    "specific-impulse-converter": specific_impulse_layout,
    "orbital-calculator": orbital_layout,
    "hohmann-transfer": hohmann_layout,
    "radar-range": radar_layout,
    "delta-v-budget-tool": delta_v_budget_layout,
    "lift-drag-calculator": lift_drag_layout,
    "sphere-flow-calculator": sphere_flow_layout,
    "aircraft-weight-calculator": aircraft_weight_layout,
    "coordinate-system-converter": coordinate_converter_layout,
    "astronomical-unit-converter": astronomical_units_layout,
    "redshift-calculator": redshift_layout,
}
