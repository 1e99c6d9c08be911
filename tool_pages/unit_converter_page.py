from dash import dcc, html
import dash_bootstrap_components as dbc

from aerocalc.units import ALL_CATEGORIES
from .components import create_field_row, number_input, unit_dropdown, results_card, page_shell


def unit_converter_layout():
    categories = list(ALL_CATEGORIES.keys())
    first = categories[0]
    units = ALL_CATEGORIES[first]

    form = html.Div([
        create_field_row("Category", dcc.Dropdown(
            id="uc-category",
            options=[{"label": c, "value": c} for c in categories],
            value=first,
            clearable=False,
        )),
        create_field_row("Value", number_input("uc-value", value=1)),
        dbc.Row([
            dbc.Col(create_field_row("From", unit_dropdown("uc-from", units, units[0])), width=6),
            dbc.Col(create_field_row("To", unit_dropdown("uc-to", units, units[1])), width=6),
        ]),
    ])

    return page_shell("unit-converter", form, results_card("uc-results"))
