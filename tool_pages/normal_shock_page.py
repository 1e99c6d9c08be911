from dash import html

from aerocalc import constants
from .components import (
    create_field_row, create_inline_fields, mode_selector, number_input,
    results_card, graph_card, mach_table_card, page_shell,
)

MODES = [
    ("mach", "Upstream Mach M1"),
    ("pitot", "Pitot ratio p02/p1"),
]


def normal_shock_layout():
    form = html.Div([
        create_field_row("Known quantity", mode_selector("ns-mode", MODES, "mach")),
        create_inline_fields([
            ("Value", number_input("ns-value", value=constants.DEFAULT_MACH, min=1), "60%"),
            ("γ", number_input("ns-gamma", value=constants.DEFAULT_GAMMA, min=1), "35%"),
        ]),
    ])
    return page_shell(
        "normal-shock", form, results_card("ns-results"),
        extra=[
            graph_card("ns-graph", "Normal shock relations vs upstream Mach number"),
            mach_table_card("ns"),
        ],
    )
