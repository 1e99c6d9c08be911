from dash import html

from .components import (
    create_field_row, mode_selector, value_with_unit, results_card, graph_card, page_shell,
)

MODES = [
    ("altitude", "Altitude"),
    ("pressure", "Pressure"),
    ("temperature", "Temperature"),
]

# Units offered for each input mode, first entry is the default
MODE_UNITS = {
    "altitude": ["m", "km", "ft"],
    "pressure": ["Pa", "hPa", "kPa", "psi", "atm", "mmHg"],
    "temperature": ["K", "C", "F"],
}

MODE_DEFAULTS = {
    "altitude": 11000,
    "pressure": 50000,
    "temperature": 250,
}


def isa_layout():
    form = html.Div([
        create_field_row("Known quantity", mode_selector("isa-mode", MODES, "altitude")),
        value_with_unit("Value", "isa-value", "isa-unit", MODE_UNITS["altitude"],
                        MODE_DEFAULTS["altitude"], "m"),
    ])
    return page_shell(
        "isa-calculator", form, results_card("isa-results"),
        extra=[graph_card("isa-graph", "Standard atmosphere profile")],
    )
