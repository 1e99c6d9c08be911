from dash import html

from aerocalc import constants
from .components import create_field_row, mode_selector, number_input, results_card, graph_card, page_shell

SOLUTIONS = [
    ("weak", "Weak"),
    ("strong", "Strong"),
]


def oblique_shock_layout():
    form = html.Div([
        create_field_row("Upstream Mach M1", number_input("os-mach", value=constants.DEFAULT_MACH, min=1)),
        create_field_row("Deflection angle θ (deg)", number_input("os-theta", value=10, min=0)),
        create_field_row("γ", number_input("os-gamma", value=constants.DEFAULT_GAMMA, min=1)),
        create_field_row("Solution", mode_selector("os-solution", SOLUTIONS, "weak")),
    ])
    return page_shell(
        "oblique-shock", form, results_card("os-results"),
        extra=[graph_card("os-graph", "θ-β-M curve")],
    )
