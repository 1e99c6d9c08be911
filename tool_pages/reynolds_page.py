from dash import dcc, html
import dash_bootstrap_components as dbc

from aerocalc.preset_loader import FLUID_PROPERTIES
from aerocalc.units import ALL_CATEGORIES
from .components import (
    create_field_row, mode_selector, value_with_unit, number_input, results_card, page_shell,
)

FORMULAS = [
    ("dynamic", "ρVL/μ"),
    ("kinematic", "VL/ν"),
]


def reynolds_layout():
    air = FLUID_PROPERTIES.get("air", {})
    form = html.Div([
        create_field_row("Fluid", dcc.Dropdown(
            id="rey-fluid", options=FLUID_PROPERTIES.options(), value="air", clearable=False,
        )),
        create_field_row("Formula", mode_selector("rey-formula", FORMULAS, "dynamic")),
        value_with_unit("Velocity", "rey-velocity", "rey-velocity-unit", ALL_CATEGORIES["Velocity"],
                        50, "m/s", min=0),
        value_with_unit("Characteristic length", "rey-length", "rey-length-unit", ALL_CATEGORIES["Length"],
                        1, "m", min=0),
        html.Div([
            create_field_row("Density (kg/m³)", number_input("rey-density", value=air.get("density"), min=0)),
            create_field_row("Dynamic viscosity (Pa·s)",
                             number_input("rey-mu", value=air.get("dynamic_viscosity"), min=0)),
        ], id="rey-dynamic-row"),
        html.Div(
            create_field_row("Kinematic viscosity (m²/s)",
                             number_input("rey-nu", value=air.get("kinematic_viscosity"), min=0)),
            id="rey-kinematic-row",
        ),
        dbc.Checklist(
            id="rey-internal",
            options=[{"label": "Internal flow (pipe / duct)", "value": "internal"}],
            value=[],
            switch=True,
        ),
    ])
    return page_shell("reynolds-calculator", form, results_card("rey-results"))
