from dash import dcc, html

from aerocalc import constants
from .components import (
    create_field_row, create_inline_fields, number_input, results_card, graph_card, mach_table_card, page_shell,
)

INPUT_KINDS = [
    ("mach", "Mach number M"),
    ("temperature", "Temperature ratio T/T0"),
    ("pressure", "Pressure ratio p/p0"),
    ("density", "Density ratio ρ/ρ0"),
    ("area-subsonic", "Area ratio A/A* (subsonic)"),
    ("area-supersonic", "Area ratio A/A* (supersonic)"),
]


def isentropic_layout():
    form = html.Div([
        create_field_row("Input", dcc.Dropdown(
            id="isen-input",
            options=[{"label": label, "value": key} for key, label in INPUT_KINDS],
            value="mach",
            clearable=False,
        )),
        create_inline_fields([
            ("Value", number_input("isen-value", value=constants.DEFAULT_MACH, min=0), "60%"),
            ("γ", number_input("isen-gamma", value=constants.DEFAULT_GAMMA, min=1), "35%"),
        ]),
    ])
    return page_shell(
        "isentropic-flow", form, results_card("isen-results"),
        extra=[
            graph_card("isen-graph", "Isentropic ratios vs Mach number"),
            mach_table_card("isen"),
        ],
    )
