from dash import html

from aerocalc.units import ALL_CATEGORIES
from .components import create_field_row, value_with_unit, mode_selector, number_input, results_card, page_shell

MODES = [
    ("twr", "TWR"),
    ("thrust", "Required thrust"),
    ("mass", "Maximum mass"),
]


def twr_layout():
    form = html.Div([
        create_field_row("Solve for", mode_selector("twr-mode", MODES, "twr")),
        html.Div(value_with_unit("Thrust", "twr-thrust", "twr-thrust-unit", ALL_CATEGORIES["Force"],
                                 7600, "kN", min=0), id="twr-thrust-row"),
        html.Div(value_with_unit("Mass", "twr-mass", "twr-mass-unit", ALL_CATEGORIES["Mass"],
                                 549000, "kg", min=0), id="twr-mass-row"),
        html.Div(create_field_row("Thrust-to-weight ratio", number_input("twr-ratio", value=1.4, min=0)),
                 id="twr-ratio-row"),
    ])
    return page_shell("twr-calculator", form, results_card("twr-results"))
