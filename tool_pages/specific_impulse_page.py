from dash import html
import dash_bootstrap_components as dbc

from aerocalc.propulsion import ISP_UNITS, common_specific_impulse_values
from .components import value_with_unit, results_card, page_shell


def reference_table():
    rows = [
        html.Tr([
            html.Td(entry["application"]),
            html.Td(f"{entry['value']:g} s"),
            html.Td(entry["description"]),
        ])
        for entry in common_specific_impulse_values()
    ]
    return dbc.Card([
        dbc.CardHeader("Typical values"),
        dbc.CardBody(dbc.Table([
            html.Thead(html.Tr([html.Th("System"), html.Th("Isp"), html.Th("Notes")])),
            html.Tbody(rows),
        ], size="sm", striped=True)),
    ], className="reference-card")


def specific_impulse_layout():
    form = html.Div([
        value_with_unit("Specific impulse", "isp-value", "isp-unit", list(ISP_UNITS), 300, "seconds", min=0),
    ])
    return page_shell(
        "specific-impulse-converter", form, results_card("isp-results"),
        extra=[reference_table()],
    )
