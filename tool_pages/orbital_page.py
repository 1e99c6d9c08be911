from dash import html

from aerocalc import constants
from .components import value_with_unit, results_card, page_shell

ALTITUDE_UNITS = ["km", "m", "mi", "nmi"]


def orbital_layout():
    form = html.Div([
        value_with_unit("Orbit altitude", "orb-alt", "orb-alt-unit", ALTITUDE_UNITS,
                        constants.DEFAULT_LEO_ALTITUDE_KM, "km", min=0),
        html.P("Circular orbit around a spherical Earth (R = 6371 km).", className="form-note"),
    ])
    return page_shell("orbital-calculator", form, results_card("orb-results"))
