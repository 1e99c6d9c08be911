from dash import html

from .components import create_field_row, mode_selector, number_input, results_card, page_shell

DIRECTIONS = [
    ("geodetic", "Geodetic to ECEF"),
    ("ecef", "ECEF to geodetic"),
]


def coordinate_converter_layout():
    form = html.Div([
        create_field_row("Conversion", mode_selector("coord-direction", DIRECTIONS, "geodetic")),
        html.Div([
            create_field_row("Latitude (°)", number_input("coord-lat", value=51.4779, min=-90, max=90)),
            create_field_row("Longitude (°)", number_input("coord-lon", value=-0.0015, min=-180, max=180)),
            create_field_row("Ellipsoid height (m)", number_input("coord-alt", value=45)),
        ], id="coord-geodetic-rows"),
        html.Div([
            create_field_row("X (m)", number_input("coord-x", value=3980608.0)),
            create_field_row("Y (m)", number_input("coord-y", value=-102.0)),
            create_field_row("Z (m)", number_input("coord-z", value=4966861.0)),
        ], id="coord-ecef-rows"),
    ])
    return page_shell("coordinate-system-converter", form, results_card("coord-results"))
