from dash import dcc, html
import dash_bootstrap_components as dbc

from aerocalc import constants, mission
from .components import (
    create_field_row, create_inline_fields, number_input, unit_dropdown,
    results_card, graph_card, page_shell,
)

DISPLAY_UNITS = ["m/s", "km/s"]


def phase_list(phases):
    """Phase table with a remove button per row."""
    if not phases:
        return html.P("No phases yet. Add one above or pick a preset.", className="form-note")
    rows = []
    for phase in phases:
        rows.append(html.Tr([
            html.Td(phase["name"]),
            html.Td(phase["category"]),
            html.Td(f"{phase['delta_v']:.0f} m/s"),
            html.Td(dbc.Button("Remove", id={"type": "dvb-remove", "index": phase["id"]},
                               color="link", size="sm")),
        ]))
    return dbc.Table([
        html.Thead(html.Tr([html.Th("Phase"), html.Th("Category"), html.Th("Delta-v"), html.Th("")])),
        html.Tbody(rows),
    ], size="sm", className="phase-table")


def enabled_options(phases):
    return [{"label": phase["name"], "value": phase["id"]} for phase in phases]


def delta_v_budget_layout():
    presets = [{"label": f"{entry['name']} ({entry['delta_v']} m/s)", "value": index}
               for index, entry in enumerate(mission.common_delta_v_values())]

    form = html.Div([
        dcc.Store(id="dvb-phases", data=[]),
        create_field_row("Add from reference", dcc.Dropdown(
            id="dvb-preset", options=presets, placeholder="Common mission phases",
        )),
        create_field_row("Phase name", dcc.Input(
            id="dvb-name", type="text", list="dvb-name-options", placeholder="e.g. Launch to LEO",
            style={"width": "100%"},
        )),
        html.Datalist(id="dvb-name-options", children=[
            html.Option(value=name) for name in mission.COMMON_MISSION_PHASES
        ]),
        create_inline_fields([
            ("Delta-v (m/s)", number_input("dvb-dv", value=1000, min=0), "45%"),
            ("Category", unit_dropdown("dvb-category", list(mission.PHASE_CATEGORIES), "other"), "50%"),
        ]),
        html.Div([
            dbc.Button("Add phase", id="dvb-add", color="primary", size="sm", className="me-2"),
            dbc.Button("Clear all", id="dvb-clear", color="secondary", size="sm", outline=True),
        ], className="button-row"),
        html.Hr(),
        html.Div(phase_list([]), id="dvb-phase-list"),
        create_field_row("Enabled phases", dbc.Checklist(id="dvb-enabled", options=[], value=[])),
        create_inline_fields([
            ("Display unit", unit_dropdown("dvb-unit", DISPLAY_UNITS, "m/s"), "45%"),
            ("Engine Isp (s)", number_input("dvb-isp", value=constants.DEFAULT_ISP_S, min=0), "50%"),
        ]),
    ])
    return page_shell(
        "delta-v-budget-tool", form, results_card("dvb-results"),
        extra=[graph_card("dvb-graph", "Delta-v by category")],
    )
