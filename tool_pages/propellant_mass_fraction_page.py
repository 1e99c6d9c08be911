from dash import html

from aerocalc import constants
from aerocalc.units import ALL_CATEGORIES
from .components import value_with_unit, results_card, graph_card, page_shell


def propellant_mass_fraction_layout():
    mass_units = ALL_CATEGORIES["Mass"]
    form = html.Div([
        value_with_unit("Initial (wet) mass", "pmf-m0", "pmf-m0-unit", mass_units,
                        constants.DEFAULT_INITIAL_MASS_KG, "kg", min=0),
        value_with_unit("Final (dry) mass", "pmf-mf", "pmf-mf-unit", mass_units,
                        constants.DEFAULT_FINAL_MASS_KG, "kg", min=0),
    ])
    return page_shell(
        "propellant-mass-fraction", form, results_card("pmf-results"),
        extra=[graph_card("pmf-graph", "Mass breakdown")],
    )
