from dash import html

from aerocalc import radar
from .components import value_with_unit, results_card, graph_card, page_shell


def radar_layout():
    form = html.Div([
        value_with_unit("Transmit power", "rad-power", "rad-power-unit",
                        list(radar.POWER_UNITS), 1, "MW", min=0),
        value_with_unit("Antenna gain", "rad-gain", "rad-gain-unit",
                        list(radar.GAIN_UNITS), 40, "dBi"),
        value_with_unit("Frequency", "rad-freq", "rad-freq-unit",
                        list(radar.FREQUENCY_UNITS), 3, "GHz", min=0),
        value_with_unit("Radar cross section", "rad-rcs", "rad-rcs-unit",
                        list(radar.RCS_UNITS), 1, "m²"),
        value_with_unit("Minimum detectable signal", "rad-signal", "rad-signal-unit",
                        list(radar.SIGNAL_UNITS), -100, "dBm"),
    ])
    return page_shell(
        "radar-range", form, results_card("rad-results"),
        extra=[graph_card("rad-graph", "Maximum range vs radar cross section")],
    )
