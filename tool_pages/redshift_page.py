from dash import html

from aerocalc.astronomy import WAVELENGTH_UNITS
from .components import (
    create_field_row, create_inline_fields, mode_selector, number_input, unit_dropdown,
    results_card, page_shell,
)

MODES = [
    ("wavelength", "Wavelengths"),
    ("frequency", "Frequencies"),
]

# H-alpha rest line
DEFAULT_EMITTED_NM = 656.28


def redshift_layout():
    units = list(WAVELENGTH_UNITS)
    form = html.Div([
        create_field_row("Measured as", mode_selector("rs-mode", MODES, "wavelength")),
        create_inline_fields([
            ("Observed", number_input("rs-observed", value=700.0, min=0), "65%"),
            ("Unit", unit_dropdown("rs-observed-unit", units, "nm"), "30%"),
        ]),
        create_inline_fields([
            ("Emitted (rest)", number_input("rs-emitted", value=DEFAULT_EMITTED_NM, min=0), "65%"),
            ("Unit", unit_dropdown("rs-emitted-unit", units, "nm"), "30%"),
        ]),
    ])
    return page_shell("redshift-calculator", form, results_card("rs-results"))
