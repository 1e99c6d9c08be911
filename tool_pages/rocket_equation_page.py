from dash import html

from aerocalc import constants
from aerocalc.units import ALL_CATEGORIES
from .components import (
    create_field_row, value_with_unit, mode_selector, number_input, unit_dropdown,
    create_inline_fields, results_card, graph_card, page_shell,
)

MODES = [
    ("delta-v", "Delta-v"),
    ("initial-mass", "Initial mass"),
    ("isp", "Required Isp"),
]

EFFICIENCY_KINDS = ["Isp (s)", "Exhaust velocity (m/s)"]
DELTA_V_UNITS = ["m/s", "km/s", "ft/s"]


def rocket_equation_layout():
    mass_units = ALL_CATEGORIES["Mass"]
    form = html.Div([
        create_field_row("Solve for", mode_selector("re-mode", MODES, "delta-v")),
        html.Div(
            value_with_unit("Initial mass (m0)", "re-m0", "re-m0-unit", mass_units,
                            constants.DEFAULT_INITIAL_MASS_KG, "kg", min=0),
            id="re-m0-row",
        ),
        value_with_unit("Final mass (mf)", "re-mf", "re-mf-unit", mass_units,
                        constants.DEFAULT_FINAL_MASS_KG, "kg", min=0),
        html.Div(create_inline_fields([
            ("Engine efficiency", number_input("re-isp", value=constants.DEFAULT_ISP_S, min=0), "65%"),
            ("Given as", unit_dropdown("re-isp-kind", EFFICIENCY_KINDS), "30%"),
        ]), id="re-isp-row"),
        html.Div(
            value_with_unit("Delta-v", "re-dv", "re-dv-unit", DELTA_V_UNITS, 9000, "m/s", min=0),
            id="re-dv-row",
        ),
    ])

    return page_shell(
        "rocket-equation", form, results_card("re-results"),
        extra=[graph_card("re-graph", "Delta-v vs mass ratio")],
    )
