from dash import html

from aerocalc import constants
from .components import create_field_row, number_input, unit_dropdown, results_card, graph_card, page_shell

ALTITUDE_UNITS = ["km", "m", "mi", "nmi"]


def hohmann_layout():
    form = html.Div([
        create_field_row("Initial orbit altitude",
                         number_input("hoh-alt1", value=constants.DEFAULT_LEO_ALTITUDE_KM, min=0)),
        create_field_row("Final orbit altitude",
                         number_input("hoh-alt2", value=constants.DEFAULT_GEO_ALTITUDE_KM, min=0)),
        create_field_row("Altitude unit", unit_dropdown("hoh-unit", ALTITUDE_UNITS, "km")),
    ])
    return page_shell(
        "hohmann-transfer", form, results_card("hoh-results"),
        extra=[graph_card("hoh-graph", "Transfer geometry")],
    )
