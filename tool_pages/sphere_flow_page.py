from dash import html

from aerocalc import constants
from aerocalc.units import ALL_CATEGORIES
from .components import (
    create_field_row, create_inline_fields, mode_selector, number_input, value_with_unit,
    results_card, graph_card, page_shell,
)

FLUIDS = [
    ("air", "Air"),
    ("water", "Water"),
    ("custom", "Custom"),
]


def sphere_flow_layout():
    form = html.Div([
        create_field_row("Fluid", mode_selector("sph-fluid", FLUIDS, "air")),
        value_with_unit("Diameter", "sph-diameter", "sph-diameter-unit", ALL_CATEGORIES["Length"],
                        constants.DEFAULT_SPHERE_DIAMETER_M, "m", min=0),
        value_with_unit("Velocity", "sph-velocity", "sph-velocity-unit", ALL_CATEGORIES["Velocity"],
                        constants.DEFAULT_SPHERE_VELOCITY_MS, "m/s", min=0),
        html.Div(
            create_field_row("Air temperature (K)", number_input("sph-temperature", value=288.15, min=0)),
            id="sph-temperature-row",
        ),
        html.Div(create_inline_fields([
            ("Density (kg/m³)", number_input("sph-density", value=1000, min=0), "48%"),
            ("Dynamic viscosity (Pa·s)", number_input("sph-mu", value=1e-3, min=0), "48%"),
        ]), id="sph-custom-row"),
    ])
    return page_shell(
        "sphere-flow-calculator", form, results_card("sph-results"),
        extra=[
            graph_card("sph-cp-graph", "Surface pressure distribution"),
            graph_card("sph-cd-graph", "Drag coefficient vs Reynolds number"),
        ],
    )
