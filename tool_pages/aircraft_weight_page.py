from dash import dcc, html
import dash_bootstrap_components as dbc

from aerocalc.preset_loader import AIRCRAFT_TYPES, MISSION_PROFILES
from .components import (
    create_field_row, create_inline_fields, number_input, unit_dropdown,
    results_card, graph_card, page_shell,
)

WEIGHT_UNITS = ["kg", "lb"]
DISTANCE_UNITS = ["km", "nmi", "mi"]


def _weight(label, input_id):
    return create_field_row(label, number_input(input_id, min=0))


def aircraft_weight_layout():
    form = html.Div([
        create_field_row("Aircraft type", dcc.Dropdown(
            id="aw-type", options=AIRCRAFT_TYPES.options(), value="commercial-airliner", clearable=False,
        )),
        create_field_row("Mission", dcc.Dropdown(
            id="aw-mission", options=MISSION_PROFILES.options(), value="medium-range", clearable=False,
        )),
        create_inline_fields([
            ("Weight unit", unit_dropdown("aw-weight-unit", WEIGHT_UNITS, "kg"), "48%"),
            ("Distance unit", unit_dropdown("aw-distance-unit", DISTANCE_UNITS, "km"), "48%"),
        ]),
        html.P("Leave a weight empty to estimate it from typical fractions.", className="field-hint"),
        _weight("Takeoff weight", "aw-takeoff"),
        create_inline_fields([
            ("Empty", number_input("aw-empty", min=0), "48%"),
            ("Fuel", number_input("aw-fuel", min=0), "48%"),
        ]),
        create_inline_fields([
            ("Payload", number_input("aw-payload", min=0), "48%"),
            ("Crew", number_input("aw-crew", min=0), "48%"),
        ]),
        create_inline_fields([
            ("Range", number_input("aw-range", min=0), "48%"),
            ("Cruise speed (m/s)", number_input("aw-speed", min=0), "48%"),
        ]),
        dbc.Accordion([
            dbc.AccordionItem([
                _weight("MTOW", "aw-mtow"),
                _weight("MZFW", "aw-mzfw"),
                _weight("Max fuel capacity", "aw-max-fuel"),
            ], title="Limits"),
        ], start_collapsed=True),
    ])
    return page_shell(
        "aircraft-weight-calculator", form, results_card("aw-results"),
        extra=[
            graph_card("aw-breakdown-graph", "Takeoff weight breakdown"),
            graph_card("aw-range-payload-graph", "Range-payload diagram"),
        ],
    )
