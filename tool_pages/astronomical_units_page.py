from dash import html
import dash_bootstrap_components as dbc

from aerocalc.astronomy import DISTANCE_UNITS
from .components import create_field_row, number_input, unit_dropdown, results_card, page_shell


def astronomical_units_layout():
    units = list(DISTANCE_UNITS.keys())
    form = html.Div([
        create_field_row("Distance", number_input("au-value", value=1, min=0)),
        dbc.Row([
            dbc.Col(create_field_row("From", unit_dropdown("au-from", units, "AU")), width=6),
            dbc.Col(create_field_row("To", unit_dropdown("au-to", units, "km")), width=6),
        ]),
    ])
    return page_shell("astronomical-unit-converter", form, results_card("au-results"))
