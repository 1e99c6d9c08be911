from dash import html

from aerocalc import constants
from aerocalc.units import ALL_CATEGORIES
from .components import (
    create_field_row, mode_selector, value_with_unit, number_input, results_card, page_shell,
)

MODES = [
    ("airspeed", "Mach from airspeed"),
    ("mach", "Airspeed from Mach"),
]

ALTITUDE_UNITS = ["m", "km", "ft"]


def mach_layout():
    form = html.Div([
        create_field_row("Mode", mode_selector("mach-mode", MODES, "airspeed")),
        html.Div(value_with_unit("True airspeed", "mach-speed", "mach-speed-unit", ALL_CATEGORIES["Velocity"],
                                 constants.DEFAULT_AIRSPEED_MS, "m/s", min=0), id="mach-speed-row"),
        html.Div(create_field_row("Mach number", number_input("mach-number", value=0.85, min=0)),
                 id="mach-number-row"),
        value_with_unit("Altitude", "mach-alt", "mach-alt-unit", ALTITUDE_UNITS,
                        constants.DEFAULT_ALTITUDE_M, "m", min=0),
    ])
    return page_shell("mach-calculator", form, results_card("mach-results"))
