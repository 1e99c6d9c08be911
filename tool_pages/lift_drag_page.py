from dash import dcc, html

from aerocalc import constants
from aerocalc.preset_loader import AIRFOILS
from aerocalc.units import ALL_CATEGORIES
from .components import (
    create_field_row, create_inline_fields, number_input, value_with_unit,
    results_card, graph_card, page_shell,
)


def lift_drag_layout():
    naca = AIRFOILS.get("naca-2412", {})
    form = html.Div([
        create_field_row("Airfoil", dcc.Dropdown(
            id="ld-airfoil", options=AIRFOILS.options(), value="naca-2412", clearable=False,
        )),
        value_with_unit("Velocity", "ld-velocity", "ld-velocity-unit", ALL_CATEGORIES["Velocity"],
                        60, "m/s", min=0),
        value_with_unit("Altitude", "ld-altitude", "ld-altitude-unit", ALL_CATEGORIES["Length"],
                        constants.DEFAULT_ALTITUDE_M, "m"),
        create_field_row("Angle of attack (°)",
                         number_input("ld-alpha", value=constants.DEFAULT_ANGLE_OF_ATTACK_DEG, min=-20, max=40)),
        create_inline_fields([
            ("Wing area (m²)", number_input("ld-area", value=constants.DEFAULT_WING_AREA_M2, min=0), "48%"),
            ("Wing span (m)", number_input("ld-span", value=constants.DEFAULT_WING_SPAN_M, min=0), "48%"),
        ]),
        create_field_row("Aircraft weight (N, optional)", number_input("ld-weight", min=0)),
        html.Hr(),
        create_inline_fields([
            ("CLmax", number_input("ld-clmax", value=naca.get("cl_max"), min=0), "30%"),
            ("CD0", number_input("ld-cd0", value=naca.get("cd0"), min=0), "30%"),
            ("Oswald e", number_input("ld-oswald", value=naca.get("oswald_efficiency"), min=0, max=1), "30%"),
        ]),
    ])
    return page_shell(
        "lift-drag-calculator", form, results_card("ld-results"),
        extra=[graph_card("ld-graph", "Lift and drag vs angle of attack")],
    )
