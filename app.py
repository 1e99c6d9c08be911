import dash
from dash import dcc, html, Input, Output, State, ctx, ALL
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc
import webbrowser
import math
import os

from aerocalc import catalogue, constants, mission, radar
from aerocalc.preset_loader import dprint, FLUID_PROPERTIES
from aerocalc.units import ALL_CATEGORIES, convert_unit, convert_delta_v, to_si, from_si
from aerocalc.formatting import format_number, format_duration
from aerocalc.propulsion import (
    calculate_delta_v,
    calculate_initial_mass,
    calculate_required_specific_impulse,
    calculate_propellant_mass_fraction,
    calculate_twr,
    calculate_required_thrust,
    calculate_maximum_mass,
    convert_specific_impulse,
)
from aerocalc.atmosphere import isa_from_altitude, isa_from_pressure, isa_from_temperature
from aerocalc.mach import calculate_mach_number, calculate_airspeed
from aerocalc.reynolds import calculate_reynolds_number, calculate_reynolds_number_kinematic, get_fluid
from aerocalc.isentropic import (
    calculate_isentropic_flow,
    mach_from_temperature_ratio,
    mach_from_pressure_ratio,
    mach_from_density_ratio,
    mach_from_area_ratio,
    generate_isentropic_table,
)
from aerocalc.shocks import (
    calculate_normal_shock,
    calculate_from_pitot_ratio,
    calculate_oblique_shock,
    find_critical_mach,
    generate_shock_table,
)
from aerocalc.orbital import calculate_orbital_properties, calculate_hohmann_transfer
from aerocalc.lift_drag import get_airfoil, calculate_lift_and_drag, lift_drag_curve
from aerocalc.sphere import calculate_sphere_flow
from aerocalc.aircraft_weight import calculate_aircraft_weight
from aerocalc.geodesy import geodetic_to_ecef, ecef_to_geodetic, format_dms
from aerocalc.astronomy import (
    DISTANCE_UNITS,
    DISTANCE_UNIT_NAMES,
    WAVELENGTH_UNITS,
    FREQUENCY_UNITS,
    convert_distance,
    light_travel_time,
    calculate_redshift,
    wavelength_to_m,
    frequency_to_hz,
    frequency_to_wavelength,
)
from tool_pages import (
    PAGE_LAYOUTS,
    home_layout,
    coming_soon_layout,
    not_found_layout,
    error_alert,
    result_table,
    data_table,
)
from tool_pages import figures
from tool_pages.isa_page import MODE_UNITS as ISA_MODE_UNITS, MODE_DEFAULTS as ISA_MODE_DEFAULTS
from tool_pages.delta_v_budget_page import phase_list, enabled_options
from usage_tracker import init_tracking, log_feature


# ✅ Initialize Dash app
app = dash.Dash(
    __name__,
    suppress_callback_exceptions=True,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
)
app.title = "Aerospace Calculators"
server = app.server
init_tracking(server)

app.index_string = """
<!DOCTYPE html>
<html>
    <head>
        {%metas%}
        <title>Aerospace Calculators</title>
        <meta name="description" content="Aerospace engineering calculators: standard atmosphere, Mach and Reynolds numbers, isentropic flow, normal and oblique shocks, rocket equation, Hohmann transfers, delta-v budgets, radar range, lift and drag, sphere flow, aircraft weights, WGS84 coordinates, astronomical distances and redshift.">
        <meta name="robots" content="index, follow">
        {%favicon%}
        {%css%}
    </head>
    <body>
        {%app_entry%}
        <footer>
            {%config%}
            {%scripts%}
            {%renderer%}
        </footer>
    </body>
</html>
"""

app.layout = html.Div([
    dcc.Location(id="url"),
    dcc.Store(id="screen-width"),
    html.Div(id="page-content"),
])

# Define clientside JS callback to detect screen width
app.clientside_callback(
    """
    function(_) {
        return window.innerWidth;
    }
    """,
    Output("screen-width", "data"),
    Input("url", "pathname")
)

print(f"[BOOT] {len(PAGE_LAYOUTS)} calculator pages registered")


# =============================================================================
# HELPERS
# =============================================================================

def require(*values):
    """Hold the callback until every form value is filled in."""
    if any(v is None for v in values):
        raise PreventUpdate


def calc_error(tool_key, error):
    dprint(f"[CALC ERROR] {tool_key}: {error}")
    return error_alert(str(error))


def shown(visible):
    return {} if visible else {"display": "none"}


def note(text):
    return html.P(text, className="result-note")


# ✅ Automatically open the browser when the app starts
def open_browser():
    webbrowser.open("http://127.0.0.1:8050/")


# =============================================================================
# ROUTING
# =============================================================================

@app.callback(
    Output("page-content", "children"),
    Input("url", "pathname")
)
def display_page(pathname):
    if pathname in (None, "", "/"):
        return home_layout()

    if pathname.startswith("/tools/"):
        key = pathname[len("/tools/"):].strip("/")
        tool = catalogue.get_tool(key)
        if tool is None:
            dprint(f"[ROUTE] Unknown tool: {key}")
            return not_found_layout()
        layout = PAGE_LAYOUTS.get(key)
        if tool["status"] != catalogue.ACTIVE or layout is None:
            return coming_soon_layout(tool)
        return layout()

    return not_found_layout()


# =============================================================================
# UNIT CONVERTER
# =============================================================================

@app.callback(
    Output("uc-from", "options"),
    Output("uc-from", "value"),
    Output("uc-to", "options"),
    Output("uc-to", "value"),
    Input("uc-category", "value"),
    prevent_initial_call=True
)
def update_unit_options(category):
    if category not in ALL_CATEGORIES:
        raise PreventUpdate
    units = ALL_CATEGORIES[category]
    options = [{"label": u, "value": u} for u in units]
    return options, units[0], options, units[1] if len(units) > 1 else units[0]


@app.callback(
    Output("uc-results", "children"),
    Input("uc-value", "value"),
    Input("uc-from", "value"),
    Input("uc-to", "value"),
    State("uc-category", "value"),
)
def update_unit_conversion(value, from_unit, to_unit, category):
    require(value, from_unit, to_unit, category)
    try:
        result = convert_unit(value, from_unit, to_unit, category)
        every_unit = [
            (unit, convert_unit(value, from_unit, unit, category), "")
            for unit in ALL_CATEGORIES[category]
        ]
    except ValueError as e:
        return calc_error("unit-converter", e)

    log_feature("unit_converter", {"category": category})
    return html.Div([
        html.H4(f"{format_number(value, 4)} {from_unit} = {format_number(result, 6)} {to_unit}",
                className="result-headline"),
        html.H6(f"{format_number(value, 4)} {from_unit} in every {category.lower()} unit"),
        result_table(every_unit, decimals=6),
    ])


# =============================================================================
# ISA CALCULATOR
# =============================================================================

@app.callback(
    Output("isa-unit", "options"),
    Output("isa-unit", "value"),
    Output("isa-value", "value"),
    Input("isa-mode", "value"),
    prevent_initial_call=True
)
def update_isa_mode(mode):
    if mode not in ISA_MODE_UNITS:
        raise PreventUpdate
    units = ISA_MODE_UNITS[mode]
    return [{"label": u, "value": u} for u in units], units[0], ISA_MODE_DEFAULTS[mode]


@app.callback(
    Output("isa-results", "children"),
    Output("isa-graph", "figure"),
    Input("isa-mode", "value"),
    Input("isa-value", "value"),
    Input("isa-unit", "value"),
    State("screen-width", "data"),
)
def update_isa(mode, value, unit, screen_width=None):
    require(mode, value, unit)
    # Mode just changed and the unit dropdown has not caught up yet
    if unit not in ISA_MODE_UNITS.get(mode, []):
        raise PreventUpdate
    try:
        if mode == "altitude":
            state = isa_from_altitude(to_si(value, unit, "Length"))
        elif mode == "pressure":
            state = isa_from_pressure(to_si(value, unit, "Pressure"))
        elif mode == "temperature":
            state = isa_from_temperature(to_si(value, unit, "Temperature"))
        else:
            raise PreventUpdate
    except ValueError as e:
        return calc_error("isa-calculator", e), figures.isa_profile_figure(screen_width=screen_width)

    log_feature("isa_calculator", {"mode": mode})
    rows = [
        ("Geopotential altitude", state["altitude"], "m"),
        ("Altitude", convert_unit(state["altitude"], "m", "ft", "Length"), "ft"),
        ("Temperature", state["temperature"], "K"),
        ("Temperature", state["temperature_c"], "°C"),
        ("Pressure", state["pressure"], "Pa"),
        ("Pressure ratio p/p0", state["pressure_ratio"], ""),
        ("Density", state["density"], "kg/m³"),
        ("Density ratio ρ/ρ0", state["density_ratio"], ""),
        ("Speed of sound", state["speed_of_sound"], "m/s"),
        ("Layer", state["layer"], ""),
    ]
    return result_table(rows), figures.isa_profile_figure(state, screen_width=screen_width)


# =============================================================================
# MACH NUMBER
# =============================================================================

@app.callback(
    Output("mach-speed-row", "style"),
    Output("mach-number-row", "style"),
    Input("mach-mode", "value"),
)
def toggle_mach_inputs(mode):
    return shown(mode == "airspeed"), shown(mode == "mach")


@app.callback(
    Output("mach-results", "children"),
    Input("mach-mode", "value"),
    Input("mach-speed", "value"),
    Input("mach-speed-unit", "value"),
    Input("mach-number", "value"),
    Input("mach-alt", "value"),
    Input("mach-alt-unit", "value"),
)
def update_mach(mode, speed, speed_unit, mach, altitude, altitude_unit):
    require(mode, altitude, altitude_unit)
    try:
        h = to_si(altitude, altitude_unit, "Length")
        if mode == "airspeed":
            require(speed, speed_unit)
            result = calculate_mach_number(to_si(speed, speed_unit, "Velocity"), h)
        else:
            require(mach)
            result = calculate_airspeed(mach, h)
    except ValueError as e:
        return calc_error("mach-calculator", e)

    log_feature("mach_calculator", {"mode": mode})
    rows = [
        ("Mach number", result["mach"], ""),
        ("True airspeed", result["airspeed"], "m/s"),
        ("True airspeed", convert_unit(result["airspeed"], "m/s", "km/h", "Velocity"), "km/h"),
        ("True airspeed", convert_unit(result["airspeed"], "m/s", "kn", "Velocity"), "kn"),
        ("Speed of sound", result["speed_of_sound"], "m/s"),
        ("Temperature", result["temperature"], "K"),
        ("Temperature", result["temperature_c"], "°C"),
        ("Temperature", result["temperature_f"], "°F"),
        ("Flight regime", result["regime"], ""),
    ]
    return result_table(rows)


# =============================================================================
# REYNOLDS NUMBER
# =============================================================================

@app.callback(
    Output("rey-density", "value"),
    Output("rey-mu", "value"),
    Output("rey-nu", "value"),
    Input("rey-fluid", "value"),
    prevent_initial_call=True
)
def fill_fluid_properties(fluid_key):
    try:
        fluid = get_fluid(fluid_key)
    except ValueError:
        raise PreventUpdate
    return fluid["density"], fluid["dynamic_viscosity"], fluid["kinematic_viscosity"]


@app.callback(
    Output("rey-dynamic-row", "style"),
    Output("rey-kinematic-row", "style"),
    Input("rey-formula", "value"),
)
def toggle_reynolds_inputs(formula):
    return shown(formula == "dynamic"), shown(formula == "kinematic")


@app.callback(
    Output("rey-results", "children"),
    Input("rey-formula", "value"),
    Input("rey-velocity", "value"),
    Input("rey-velocity-unit", "value"),
    Input("rey-length", "value"),
    Input("rey-length-unit", "value"),
    Input("rey-density", "value"),
    Input("rey-mu", "value"),
    Input("rey-nu", "value"),
    Input("rey-internal", "value"),
    State("rey-fluid", "value"),
)
def update_reynolds(formula, velocity, velocity_unit, length, length_unit,
                    density, mu, nu, internal, fluid_key):
    require(formula, velocity, velocity_unit, length, length_unit)
    fluid_name = FLUID_PROPERTIES.get(fluid_key, {}).get("name", "Custom")
    is_internal = "internal" in (internal or [])
    try:
        v = to_si(velocity, velocity_unit, "Velocity")
        l = to_si(length, length_unit, "Length")
        if formula == "kinematic":
            require(nu)
            result = calculate_reynolds_number_kinematic(
                v, l, nu, fluid_name=fluid_name, density=density,
                dynamic_viscosity=mu, internal=is_internal,
            )
        else:
            require(density, mu)
            result = calculate_reynolds_number(v, l, density, mu, internal=is_internal, fluid_name=fluid_name)
    except ValueError as e:
        return calc_error("reynolds-calculator", e)

    log_feature("reynolds_calculator", {"fluid": fluid_key, "formula": formula})
    rows = [
        ("Reynolds number", result["reynolds_number"], ""),
        ("Flow regime", result["flow_regime"], ""),
        ("Fluid", result["fluid_name"], ""),
        ("Velocity", result["velocity"], "m/s"),
        ("Characteristic length", result["characteristic_length"], "m"),
        ("Kinematic viscosity", result["kinematic_viscosity"], "m²/s"),
    ]
    if not result["used_kinematic_formula"]:
        rows.insert(5, ("Density", result["density"], "kg/m³"))
        rows.insert(6, ("Dynamic viscosity", result["dynamic_viscosity"], "Pa·s"))
    regime_note = ("Internal flow: transition between Re 2300 and 4000."
                   if is_internal else "External flow: transition between Re 3×10⁵ and 5×10⁵.")
    return html.Div([result_table(rows), note(regime_note)])


# =============================================================================
# ISENTROPIC FLOW
# =============================================================================

ISENTROPIC_SOLVERS = {
    "temperature": mach_from_temperature_ratio,
    "pressure": mach_from_pressure_ratio,
    "density": mach_from_density_ratio,
    "area-subsonic": lambda ratio, gamma: mach_from_area_ratio(ratio, gamma, supersonic=False),
    "area-supersonic": lambda ratio, gamma: mach_from_area_ratio(ratio, gamma, supersonic=True),
}


@app.callback(
    Output("isen-results", "children"),
    Output("isen-graph", "figure"),
    Input("isen-input", "value"),
    Input("isen-value", "value"),
    Input("isen-gamma", "value"),
    State("screen-width", "data"),
)
def update_isentropic(kind, value, gamma, screen_width=None):
    require(kind, value, gamma)
    try:
        mach = value if kind == "mach" else ISENTROPIC_SOLVERS[kind](value, gamma)
        result = calculate_isentropic_flow(mach, gamma)
        figure = figures.isentropic_figure(mach, gamma, screen_width=screen_width)
    except ValueError as e:
        return calc_error("isentropic-flow", e), figures.empty_figure()

    log_feature("isentropic_flow", {"input": kind})
    rows = [
        ("Mach number", result["mach"], ""),
        ("T/T0", result["temperature_ratio"], ""),
        ("p/p0", result["pressure_ratio"], ""),
        ("ρ/ρ0", result["density_ratio"], ""),
        ("A/A*", result["area_ratio"], ""),
        ("Mach angle μ", result["mach_angle"], "deg") if result["mach_angle"] is not None
        else ("Mach angle μ", "N/A (subsonic)", ""),
        ("Prandtl-Meyer angle ν", result["prandtl_meyer_angle"], "deg"),
        ("p0/p (pitot, isentropic)", 1.0 / result["pressure_ratio"], ""),
        ("γ", result["gamma"], ""),
    ]
    return result_table(rows), figure


# =============================================================================
# NORMAL SHOCK
# =============================================================================

@app.callback(
    Output("ns-results", "children"),
    Output("ns-graph", "figure"),
    Input("ns-mode", "value"),
    Input("ns-value", "value"),
    Input("ns-gamma", "value"),
    State("screen-width", "data"),
)
def update_normal_shock(mode, value, gamma, screen_width=None):
    require(mode, value, gamma)
    try:
        if mode == "pitot":
            result = calculate_from_pitot_ratio(value, gamma)
        else:
            result = calculate_normal_shock(value, gamma)
        critical_mach = find_critical_mach(gamma)
        figure = figures.normal_shock_figure(result["mach1"], gamma, screen_width=screen_width)
    except ValueError as e:
        return calc_error("normal-shock", e), figures.empty_figure()

    log_feature("normal_shock", {"mode": mode})
    rows = [
        ("Upstream Mach M1", result["mach1"], ""),
        ("Downstream Mach M2", result["mach2"], ""),
        ("p2/p1", result["pressure_ratio"], ""),
        ("ρ2/ρ1", result["density_ratio"], ""),
        ("T2/T1", result["temperature_ratio"], ""),
        ("p02/p01", result["total_pressure_ratio"], ""),
        ("p02/p1 (pitot)", result["pitot_static_ratio"], ""),
        ("Entropy rise Δs/R", result["entropy_change"], ""),
        ("Critical Mach (p02/p01 = 0.01)", critical_mach, ""),
    ]
    return result_table(rows), figure


# =============================================================================
# MACH TABLES (isentropic and normal shock pages)
# =============================================================================

ISENTROPIC_TABLE_COLUMNS = [
    ("mach", "M"),
    ("temperature_ratio", "T/T0"),
    ("pressure_ratio", "p/p0"),
    ("density_ratio", "ρ/ρ0"),
    ("area_ratio", "A/A*"),
    ("mach_angle", "μ (deg)"),
    ("prandtl_meyer_angle", "ν (deg)"),
]

SHOCK_TABLE_COLUMNS = [
    ("mach1", "M1"),
    ("mach2", "M2"),
    ("pressure_ratio", "p2/p1"),
    ("density_ratio", "ρ2/ρ1"),
    ("temperature_ratio", "T2/T1"),
    ("total_pressure_ratio", "p02/p01"),
    ("pitot_static_ratio", "p02/p1"),
]


def toggle_table(n_clicks, is_open):
    if not n_clicks:
        raise PreventUpdate
    opened = not is_open
    return opened, "Hide Mach Table" if opened else "Show Mach Table"


@app.callback(
    Output("isen-table-collapse", "is_open"),
    Output("isen-table-toggle", "children"),
    Input("isen-table-toggle", "n_clicks"),
    State("isen-table-collapse", "is_open"),
    prevent_initial_call=True
)
def toggle_isentropic_table(n_clicks, is_open):
    return toggle_table(n_clicks, is_open)


@app.callback(
    Output("ns-table-collapse", "is_open"),
    Output("ns-table-toggle", "children"),
    Input("ns-table-toggle", "n_clicks"),
    State("ns-table-collapse", "is_open"),
    prevent_initial_call=True
)
def toggle_shock_table(n_clicks, is_open):
    return toggle_table(n_clicks, is_open)


@app.callback(
    Output("isen-table", "children"),
    Input("isen-table-collapse", "is_open"),
    Input("isen-gamma", "value"),
)
def render_isentropic_table(is_open, gamma):
    # Built on first open, then kept in step with γ
    if not is_open:
        raise PreventUpdate
    require(gamma)
    first, last, rows = constants.ISENTROPIC_TABLE_RANGE
    try:
        table = generate_isentropic_table(first, last, rows, gamma)
    except ValueError as e:
        return calc_error("isentropic-flow", e)
    log_feature("mach_table", {"table": "isentropic"})
    return data_table(ISENTROPIC_TABLE_COLUMNS, table)


@app.callback(
    Output("ns-table", "children"),
    Input("ns-table-collapse", "is_open"),
    Input("ns-gamma", "value"),
)
def render_shock_table(is_open, gamma):
    if not is_open:
        raise PreventUpdate
    require(gamma)
    first, last, rows = constants.SHOCK_TABLE_RANGE
    try:
        table = generate_shock_table(first, last, rows, gamma)
    except ValueError as e:
        return calc_error("normal-shock", e)
    log_feature("mach_table", {"table": "normal_shock"})
    return data_table(SHOCK_TABLE_COLUMNS, table)


# =============================================================================
# OBLIQUE SHOCK
# =============================================================================

@app.callback(
    Output("os-results", "children"),
    Output("os-graph", "figure"),
    Input("os-mach", "value"),
    Input("os-theta", "value"),
    Input("os-gamma", "value"),
    Input("os-solution", "value"),
    State("screen-width", "data"),
)
def update_oblique_shock(mach1, theta, gamma, solution, screen_width=None):
    require(mach1, theta, gamma, solution)
    try:
        result = calculate_oblique_shock(mach1, theta, gamma, weak=solution == "weak")
    except ValueError as e:
        # Still draw the θ-β curve so a detached shock can be seen against θmax
        if mach1 > 1 and gamma > 1:
            figure = figures.theta_beta_figure(mach1, gamma, screen_width=screen_width)
        else:
            figure = figures.empty_figure()
        return calc_error("oblique-shock", e), figure

    log_feature("oblique_shock", {"solution": solution})
    rows = [
        ("Wave angle β", result["wave_angle"], "deg"),
        ("Downstream Mach M2", result["downstream_mach"], ""),
        ("Normal Mach M1n", result["normal_mach1"], ""),
        ("Normal Mach M2n", result["normal_mach2"], ""),
        ("p2/p1", result["pressure_ratio"], ""),
        ("ρ2/ρ1", result["density_ratio"], ""),
        ("T2/T1", result["temperature_ratio"], ""),
        ("p02/p01", result["total_pressure_ratio"], ""),
        ("Mach angle μ", result["mach_angle"], "deg"),
        ("Maximum deflection θmax", result["max_deflection_angle"], "deg"),
    ]
    return result_table(rows), figures.theta_beta_figure(mach1, gamma, result, screen_width=screen_width)


# =============================================================================
# ROCKET EQUATION
# =============================================================================

@app.callback(
    Output("re-m0-row", "style"),
    Output("re-isp-row", "style"),
    Output("re-dv-row", "style"),
    Input("re-mode", "value"),
)
def toggle_rocket_inputs(mode):
    return shown(mode != "initial-mass"), shown(mode != "isp"), shown(mode != "delta-v")


def _efficiency_kwargs(value, kind):
    if kind == "Exhaust velocity (m/s)":
        return {"exhaust_velocity": value}
    return {"specific_impulse": value}


@app.callback(
    Output("re-results", "children"),
    Output("re-graph", "figure"),
    Input("re-mode", "value"),
    Input("re-m0", "value"),
    Input("re-m0-unit", "value"),
    Input("re-mf", "value"),
    Input("re-mf-unit", "value"),
    Input("re-isp", "value"),
    Input("re-isp-kind", "value"),
    Input("re-dv", "value"),
    Input("re-dv-unit", "value"),
    State("screen-width", "data"),
)
def update_rocket_equation(mode, m0, m0_unit, mf, mf_unit, efficiency, efficiency_kind,
                           delta_v, delta_v_unit, screen_width=None):
    require(mode, mf, mf_unit)
    try:
        final_mass = to_si(mf, mf_unit, "Mass")
        if mode == "delta-v":
            require(m0, efficiency)
            result = calculate_delta_v(to_si(m0, m0_unit, "Mass"), final_mass,
                                       **_efficiency_kwargs(efficiency, efficiency_kind))
        elif mode == "initial-mass":
            require(delta_v, efficiency)
            result = calculate_initial_mass(final_mass, convert_delta_v(delta_v, delta_v_unit, "m/s"),
                                            **_efficiency_kwargs(efficiency, efficiency_kind))
        else:
            require(m0, delta_v)
            result = calculate_required_specific_impulse(to_si(m0, m0_unit, "Mass"), final_mass,
                                                         convert_delta_v(delta_v, delta_v_unit, "m/s"))
    except ValueError as e:
        return calc_error("rocket-equation", e), figures.empty_figure()

    log_feature("rocket_equation", {"mode": mode})
    rows = [
        ("Delta-v", result["delta_v"], "m/s"),
        ("Delta-v", result["delta_v"] / 1000.0, "km/s"),
        ("Initial mass m0", result["initial_mass"], "kg"),
        ("Final mass mf", result["final_mass"], "kg"),
        ("Propellant mass", result["propellant_mass"], "kg"),
        ("Mass ratio m0/mf", result["mass_ratio"], ""),
        ("Propellant mass fraction", result["propellant_mass_fraction"], ""),
        ("Specific impulse", result["specific_impulse"], "s"),
        ("Exhaust velocity", result["exhaust_velocity"], "m/s"),
    ]
    figure = figures.rocket_equation_figure(result["specific_impulse"], result["mass_ratio"],
                                            screen_width=screen_width)
    return result_table(rows), figure


# =============================================================================
# PROPELLANT MASS FRACTION
# =============================================================================

@app.callback(
    Output("pmf-results", "children"),
    Output("pmf-graph", "figure"),
    Input("pmf-m0", "value"),
    Input("pmf-m0-unit", "value"),
    Input("pmf-mf", "value"),
    Input("pmf-mf-unit", "value"),
    State("screen-width", "data"),
)
def update_mass_fraction(m0, m0_unit, mf, mf_unit, screen_width=None):
    require(m0, m0_unit, mf, mf_unit)
    try:
        result = calculate_propellant_mass_fraction(to_si(m0, m0_unit, "Mass"), to_si(mf, mf_unit, "Mass"))
    except ValueError as e:
        return calc_error("propellant-mass-fraction", e), figures.empty_figure()

    log_feature("propellant_mass_fraction")
    rows = [
        ("Propellant mass fraction", result["propellant_mass_fraction"], ""),
        ("Propellant mass fraction", result["propellant_mass_fraction"] * 100.0, "%"),
        ("Structural mass fraction", result["structural_mass_fraction"], ""),
        ("Propellant mass", result["propellant_mass"], "kg"),
        ("Structural mass", result["structural_mass"], "kg"),
    ]
    return result_table(rows), figures.mass_fraction_figure(result, screen_width=screen_width)


# =============================================================================
# THRUST-TO-WEIGHT RATIO
# =============================================================================

@app.callback(
    Output("twr-thrust-row", "style"),
    Output("twr-mass-row", "style"),
    Output("twr-ratio-row", "style"),
    Input("twr-mode", "value"),
)
def toggle_twr_inputs(mode):
    return shown(mode != "thrust"), shown(mode != "mass"), shown(mode != "twr")


@app.callback(
    Output("twr-results", "children"),
    Input("twr-mode", "value"),
    Input("twr-thrust", "value"),
    Input("twr-thrust-unit", "value"),
    Input("twr-mass", "value"),
    Input("twr-mass-unit", "value"),
    Input("twr-ratio", "value"),
)
def update_twr(mode, thrust, thrust_unit, mass, mass_unit, ratio):
    require(mode)
    try:
        if mode == "twr":
            require(thrust, mass)
            result = calculate_twr(to_si(thrust, thrust_unit, "Force"), to_si(mass, mass_unit, "Mass"))
        elif mode == "thrust":
            require(ratio, mass)
            result = calculate_required_thrust(ratio, to_si(mass, mass_unit, "Mass"))
        else:
            require(thrust, ratio)
            result = calculate_maximum_mass(to_si(thrust, thrust_unit, "Force"), ratio)
    except ValueError as e:
        return calc_error("twr-calculator", e)

    log_feature("twr_calculator", {"mode": mode})
    rows = [
        ("Thrust-to-weight ratio", result["twr"], ""),
        ("Thrust", result["thrust"], "N"),
        ("Thrust", result["thrust"] / 1000.0, "kN"),
        ("Mass", result["mass"], "kg"),
        ("Weight", result["weight"], "N"),
        ("Thrust per unit mass", result["thrust_per_mass"], "m/s²"),
        ("Can lift off vertically", result["can_lift_off"], ""),
    ]
    return html.Div([result_table(rows), note(result["flight_capability"])])


# =============================================================================
# SPECIFIC IMPULSE
# =============================================================================

@app.callback(
    Output("isp-results", "children"),
    Input("isp-value", "value"),
    Input("isp-unit", "value"),
)
def update_specific_impulse(value, unit):
    require(value, unit)
    try:
        result = convert_specific_impulse(value, unit)
    except ValueError as e:
        return calc_error("specific-impulse-converter", e)

    log_feature("specific_impulse_converter", {"unit": unit})
    rows = [
        ("Specific impulse", result["seconds"], "s"),
        ("Exhaust velocity", result["meters_per_second"], "m/s"),
        ("Exhaust velocity", result["feet_per_second"], "ft/s"),
        ("Exhaust velocity", result["kilometers_per_second"], "km/s"),
        ("Performance", result["performance_category"], ""),
    ]
    return html.Div([
        result_table(rows),
        html.H6("Typical applications"),
        html.Ul([html.Li(app_name) for app_name in result["typical_applications"]]),
    ])


# =============================================================================
# ORBITAL MECHANICS
# =============================================================================

@app.callback(
    Output("orb-results", "children"),
    Input("orb-alt", "value"),
    Input("orb-alt-unit", "value"),
)
def update_orbit(altitude, unit):
    require(altitude, unit)
    try:
        result = calculate_orbital_properties(to_si(altitude, unit, "Length") / 1000.0)
    except ValueError as e:
        return calc_error("orbital-calculator", e)

    log_feature("orbital_calculator")
    rows = [
        ("Altitude", result["altitude_km"], "km"),
        ("Orbital radius", result["orbital_radius"] / 1000.0, "km"),
        ("Orbital velocity", result["velocity"], "m/s"),
        ("Orbital velocity", result["velocity"] / 1000.0, "km/s"),
        ("Orbital period", result["period"] / 60.0, "min"),
        ("Orbital period", format_duration(result["period"]), ""),
    ]
    return result_table(rows)


@app.callback(
    Output("hoh-results", "children"),
    Output("hoh-graph", "figure"),
    Input("hoh-alt1", "value"),
    Input("hoh-alt2", "value"),
    Input("hoh-unit", "value"),
    State("screen-width", "data"),
)
def update_hohmann(alt1, alt2, unit, screen_width=None):
    require(alt1, alt2, unit)
    try:
        result = calculate_hohmann_transfer(
            to_si(alt1, unit, "Length") / 1000.0,
            to_si(alt2, unit, "Length") / 1000.0,
        )
    except ValueError as e:
        return calc_error("hohmann-transfer", e), figures.empty_figure()

    log_feature("hohmann_transfer")
    rows = [
        ("First burn Δv1", result["delta_v1"], "m/s"),
        ("Second burn Δv2", result["delta_v2"], "m/s"),
        ("Total Δv", result["total_delta_v"], "m/s"),
        ("Total Δv", result["total_delta_v"] / 1000.0, "km/s"),
        ("Transfer time", result["transfer_time"] / 3600.0, "h"),
        ("Transfer time", format_duration(result["transfer_time"]), ""),
        ("Initial orbit velocity", result["initial_velocity"], "m/s"),
        ("Final orbit velocity", result["final_velocity"], "m/s"),
        ("Transfer semi-major axis", result["transfer_semi_major_axis"] / 1000.0, "km"),
        ("Transfer eccentricity", result["transfer_eccentricity"], ""),
    ]
    return result_table(rows), figures.hohmann_figure(result, screen_width=screen_width)


# =============================================================================
# RADAR RANGE
# =============================================================================

@app.callback(
    Output("rad-results", "children"),
    Output("rad-graph", "figure"),
    Input("rad-power", "value"),
    Input("rad-power-unit", "value"),
    Input("rad-gain", "value"),
    Input("rad-gain-unit", "value"),
    Input("rad-freq", "value"),
    Input("rad-freq-unit", "value"),
    Input("rad-rcs", "value"),
    Input("rad-rcs-unit", "value"),
    Input("rad-signal", "value"),
    Input("rad-signal-unit", "value"),
    State("screen-width", "data"),
)
def update_radar(power, power_unit, gain, gain_unit, freq, freq_unit,
                 rcs, rcs_unit, signal, signal_unit, screen_width=None):
    require(power, gain, freq, rcs, signal)
    try:
        power_w = radar.convert_power_to_w(power, power_unit)
        gain_linear = radar.convert_gain_to_linear(gain, gain_unit)
        frequency_hz = radar.convert_frequency_to_hz(freq, freq_unit)
        rcs_m2 = radar.convert_rcs_to_m2(rcs, rcs_unit)
        signal_w = radar.convert_signal_to_w(signal, signal_unit)
        result = radar.calculate_radar_range(power_w, gain_linear, frequency_hz, rcs_m2, signal_w)
        rcs_sweep, ranges = radar.range_vs_rcs(
            power_w, gain_linear, frequency_hz, signal_w,
            rcs_min=min(0.01, rcs_m2 / 10.0), rcs_max=max(1000.0, rcs_m2 * 10.0),
        )
    except ValueError as e:
        return calc_error("radar-range", e), figures.empty_figure()

    log_feature("radar_range")
    rows = [
        ("Maximum range", result["max_range"] / 1000.0, "km"),
        ("Maximum range", convert_unit(result["max_range"], "m", "nmi", "Length"), "nmi"),
        ("Wavelength", result["wavelength"], "m"),
        ("Transmit power", result["power_w"], "W"),
        ("Antenna gain", result["gain_linear"], "(linear)"),
        ("Radar cross section", result["rcs_m2"], "m²"),
        ("Minimum detectable signal", result["min_signal_w"], "W"),
    ]
    return result_table(rows), figures.radar_figure(rcs_sweep, ranges, result, screen_width=screen_width)


# =============================================================================
# DELTA-V BUDGET
# =============================================================================

@app.callback(
    Output("dvb-name", "value"),
    Output("dvb-dv", "value"),
    Output("dvb-category", "value"),
    Input("dvb-preset", "value"),
    prevent_initial_call=True
)
def fill_phase_from_reference(index):
    references = mission.common_delta_v_values()
    if index is None or not 0 <= index < len(references):
        raise PreventUpdate
    entry = references[index]
    category = entry["category"] if entry["category"] in mission.PHASE_CATEGORIES else "other"
    return entry["name"], entry["delta_v"], category


@app.callback(
    Output("dvb-phases", "data"),
    Output("dvb-enabled", "value"),
    Input("dvb-add", "n_clicks"),
    Input("dvb-clear", "n_clicks"),
    Input({"type": "dvb-remove", "index": ALL}, "n_clicks"),
    Input("dvb-enabled", "value"),
    State("dvb-phases", "data"),
    State("dvb-name", "value"),
    State("dvb-dv", "value"),
    State("dvb-category", "value"),
    prevent_initial_call=True
)
def update_mission_phases(add_clicks, clear_clicks, remove_clicks, enabled_ids,
                          phases, name, delta_v, category):
    trigger = ctx.triggered_id
    phases = phases or []

    if trigger == "dvb-add":
        if not add_clicks or delta_v is None:
            raise PreventUpdate
        try:
            phase = mission.create_mission_phase((name or "").strip() or "Unnamed phase", delta_v, category)
        except ValueError as e:
            dprint(f"[CALC ERROR] delta-v-budget-tool: {e}")
            raise PreventUpdate
        phases = mission.add_phase(phases, phase)
    elif trigger == "dvb-clear":
        phases = []
    elif isinstance(trigger, dict) and trigger.get("type") == "dvb-remove":
        # Freshly rendered remove buttons fire with n_clicks None
        if not ctx.triggered[0]["value"]:
            raise PreventUpdate
        phases = mission.remove_phase(phases, trigger["index"])
    elif trigger == "dvb-enabled":
        phases = mission.set_enabled(phases, enabled_ids)
    else:
        raise PreventUpdate

    dprint(f"[DVB] {trigger}: {len(phases)} phases")
    return phases, [phase["id"] for phase in phases if phase.get("enabled", True)]


@app.callback(
    Output("dvb-phase-list", "children"),
    Output("dvb-enabled", "options"),
    Input("dvb-phases", "data"),
)
def render_mission_phases(phases):
    phases = phases or []
    return phase_list(phases), enabled_options(phases)


@app.callback(
    Output("dvb-results", "children"),
    Output("dvb-graph", "figure"),
    Input("dvb-phases", "data"),
    Input("dvb-unit", "value"),
    Input("dvb-isp", "value"),
    State("screen-width", "data"),
)
def update_delta_v_budget(phases, unit, isp, screen_width=None):
    unit = unit or "m/s"
    budget = mission.calculate_delta_v_budget(phases or [])

    def in_unit(value):
        return convert_delta_v(value, "m/s", unit)

    rows = [
        ("Enabled phases", f"{len(budget['enabled_phases'])} of {len(budget['phases'])}", ""),
        ("Mission delta-v (enabled)", in_unit(budget["enabled_total_delta_v"]), unit),
        ("All phases", in_unit(budget["total_delta_v"]), unit),
        ("Complexity", budget["complexity"], ""),
    ]
    rows += [
        (f"{category.capitalize()} phases", in_unit(value), unit)
        for category, value in budget["breakdown"].items() if value > 0
    ]
    if isp and isp > 0 and budget["enabled_total_delta_v"] > 0:
        rows.append((f"Required mass ratio at Isp {isp:g} s",
                     mission.required_mass_ratio(budget["enabled_total_delta_v"], isp), ""))

    if budget["phases"]:
        log_feature("delta_v_budget", {"phases": len(budget["phases"])})
        figure = figures.delta_v_budget_figure(budget, unit, screen_width=screen_width)
    else:
        figure = figures.empty_figure("Add mission phases to see the breakdown.")

    return html.Div([
        result_table(rows),
        html.H6("Recommendations"),
        html.Ul([html.Li(text) for text in budget["recommendations"]]),
    ]), figure


# =============================================================================
# LIFT & DRAG
# =============================================================================

@app.callback(
    Output("ld-clmax", "value"),
    Output("ld-cd0", "value"),
    Output("ld-oswald", "value"),
    Input("ld-airfoil", "value"),
    prevent_initial_call=True
)
def fill_airfoil_properties(airfoil_key):
    try:
        airfoil = get_airfoil(airfoil_key)
    except ValueError:
        raise PreventUpdate
    return airfoil["cl_max"], airfoil["cd0"], airfoil["oswald_efficiency"]


@app.callback(
    Output("ld-results", "children"),
    Output("ld-graph", "figure"),
    Input("ld-airfoil", "value"),
    Input("ld-velocity", "value"),
    Input("ld-velocity-unit", "value"),
    Input("ld-altitude", "value"),
    Input("ld-altitude-unit", "value"),
    Input("ld-alpha", "value"),
    Input("ld-area", "value"),
    Input("ld-span", "value"),
    Input("ld-weight", "value"),
    Input("ld-clmax", "value"),
    Input("ld-cd0", "value"),
    Input("ld-oswald", "value"),
    State("screen-width", "data"),
)
def update_lift_drag(airfoil, velocity, velocity_unit, altitude, altitude_unit, alpha, area, span,
                     weight, cl_max, cd0, oswald, screen_width=None):
    require(airfoil, velocity, velocity_unit, altitude, altitude_unit, alpha, area, span)
    overrides = {"cl_max": cl_max, "cd0": cd0, "oswald_efficiency": oswald}
    try:
        v = to_si(velocity, velocity_unit, "Velocity")
        h = to_si(altitude, altitude_unit, "Length")
        result = calculate_lift_and_drag(v, h, alpha, area, span, airfoil, weight=weight, **overrides)
        sweep = lift_drag_curve(
            v, h, area, span, airfoil,
            alpha_min=min(-5.0, alpha), alpha_max=max(20.0, alpha + 5.0),
            steps=constants.LIFT_DRAG_SWEEP_POINTS, **overrides,
        )
    except ValueError as e:
        return calc_error("lift-drag-calculator", e), figures.empty_figure()

    log_feature("lift_drag_calculator", {"airfoil": airfoil})
    rows = [
        ("Lift", result["lift"], "N"),
        ("Drag", result["drag"], "N"),
        ("Lift coefficient CL", result["cl"], ""),
        ("Drag coefficient CD", result["cd"], ""),
        ("Lift-to-drag ratio L/D", result["lift_to_drag"], ""),
        ("Dynamic pressure", result["dynamic_pressure"], "Pa"),
        ("Air density", result["density"], "kg/m³"),
        ("Aspect ratio", result["aspect_ratio"], ""),
        ("Maximum L/D", result["max_lift_to_drag"], ""),
        ("Angle for maximum L/D", result["optimal_angle_of_attack"], "deg"),
        ("Stall angle", result["stall_angle"], "deg"),
        ("Stall speed", result["stall_speed"], "m/s") if result["stall_speed"] is not None
        else ("Stall speed", "Enter the aircraft weight", ""),
        ("Stalled", result["is_stalled"], ""),
    ]
    figure = figures.lift_drag_figure(sweep, result, screen_width=screen_width)
    return html.Div([result_table(rows)] + [note(text) for text in result["warnings"]]), figure


# =============================================================================
# SPHERE FLOW
# =============================================================================

@app.callback(
    Output("sph-temperature-row", "style"),
    Output("sph-custom-row", "style"),
    Input("sph-fluid", "value"),
)
def toggle_sphere_inputs(fluid):
    return shown(fluid == "air"), shown(fluid == "custom")


@app.callback(
    Output("sph-results", "children"),
    Output("sph-cp-graph", "figure"),
    Output("sph-cd-graph", "figure"),
    Input("sph-fluid", "value"),
    Input("sph-diameter", "value"),
    Input("sph-diameter-unit", "value"),
    Input("sph-velocity", "value"),
    Input("sph-velocity-unit", "value"),
    Input("sph-temperature", "value"),
    Input("sph-density", "value"),
    Input("sph-mu", "value"),
    State("screen-width", "data"),
)
def update_sphere_flow(fluid, diameter, diameter_unit, velocity, velocity_unit,
                       temperature, density, mu, screen_width=None):
    require(fluid, diameter, diameter_unit, velocity, velocity_unit)
    if fluid == "air":
        require(temperature)
    try:
        result = calculate_sphere_flow(
            to_si(diameter, diameter_unit, "Length"),
            to_si(velocity, velocity_unit, "Velocity"),
            fluid, temperature=temperature, density=density, dynamic_viscosity=mu,
        )
    except ValueError as e:
        return (calc_error("sphere-flow-calculator", e), figures.empty_figure(),
                figures.sphere_drag_figure(screen_width=screen_width))

    log_feature("sphere_flow_calculator", {"fluid": fluid})
    rows = [
        ("Reynolds number", result["reynolds_number"], ""),
        ("Flow regime", result["flow_regime"], ""),
        ("Drag coefficient CD", result["drag_coefficient"], ""),
        ("Drag force", result["drag_force"], "N"),
        ("Dynamic pressure", result["dynamic_pressure"], "Pa"),
        ("Frontal area", result["frontal_area"], "m²"),
        ("Separation angle", result["separation_angle"], "deg"),
        ("Wake length", result["wake_length"], "m"),
        ("Boundary layer thickness", result["boundary_layer_thickness"], "m"),
        ("Density", result["density"], "kg/m³"),
        ("Dynamic viscosity", result["dynamic_viscosity"], "Pa·s"),
        ("Past the drag crisis", result["past_drag_crisis"], ""),
    ]
    return (
        html.Div([result_table(rows), note(result["regime_description"])]),
        figures.sphere_pressure_figure(result, screen_width=screen_width),
        figures.sphere_drag_figure(result, screen_width=screen_width),
    )


# =============================================================================
# AIRCRAFT WEIGHT
# =============================================================================

@app.callback(
    Output("aw-results", "children"),
    Output("aw-breakdown-graph", "figure"),
    Output("aw-range-payload-graph", "figure"),
    Input("aw-type", "value"),
    Input("aw-mission", "value"),
    Input("aw-weight-unit", "value"),
    Input("aw-distance-unit", "value"),
    Input("aw-takeoff", "value"),
    Input("aw-empty", "value"),
    Input("aw-fuel", "value"),
    Input("aw-payload", "value"),
    Input("aw-crew", "value"),
    Input("aw-range", "value"),
    Input("aw-speed", "value"),
    Input("aw-mtow", "value"),
    Input("aw-mzfw", "value"),
    Input("aw-max-fuel", "value"),
    State("screen-width", "data"),
)
def update_aircraft_weight(aircraft_type, mission_type, weight_unit, distance_unit, takeoff, empty,
                           fuel, payload, crew, range_value, speed, mtow, mzfw, max_fuel, screen_width=None):
    require(aircraft_type, mission_type, weight_unit, distance_unit)

    def kg(value):
        return None if value is None else to_si(value, weight_unit, "Mass")

    def in_weight_unit(value):
        return from_si(value, weight_unit, "Mass")

    def in_distance_unit(km):
        return from_si(km * 1000.0, distance_unit, "Length")

    try:
        result = calculate_aircraft_weight(
            aircraft_type, mission_type,
            takeoff_weight=kg(takeoff), empty_weight=kg(empty), fuel_weight=kg(fuel),
            payload_weight=kg(payload), crew_weight=kg(crew),
            range_km=None if range_value is None else to_si(range_value, distance_unit, "Length") / 1000.0,
            cruise_speed=speed, mtow=kg(mtow), mzfw=kg(mzfw), max_fuel=kg(max_fuel),
        )
    except ValueError as e:
        return calc_error("aircraft-weight-calculator", e), figures.empty_figure(), figures.empty_figure()

    log_feature("aircraft_weight_calculator", {"aircraft": aircraft_type, "mission": mission_type})
    rows = [
        ("Aircraft", result["aircraft_name"], ""),
        ("Mission", result["mission_name"], ""),
        ("Takeoff weight", in_weight_unit(result["takeoff_weight"]), weight_unit),
        ("Empty weight", in_weight_unit(result["empty_weight"]), weight_unit),
        ("Fuel weight", in_weight_unit(result["fuel_weight"]), weight_unit),
        ("Payload weight", in_weight_unit(result["payload_weight"]), weight_unit),
        ("Crew weight", in_weight_unit(result["crew_weight"]), weight_unit),
        ("Empty weight fraction", result["empty_fraction"] * 100.0, "%"),
        ("Fuel fraction", result["fuel_fraction"] * 100.0, "%"),
        ("Payload fraction", result["payload_fraction"] * 100.0, "%"),
        ("Range", in_distance_unit(result["range"]), distance_unit),
        ("Endurance", result["endurance"], "h"),
        ("Cruise speed", result["cruise_speed"], "m/s"),
        ("Lift-to-drag ratio", result["lift_to_drag"], ""),
        ("Wing loading", result["wing_loading"], "N/m²") if result["wing_loading"] is not None
        else ("Wing loading", "N/A (rotorcraft)", ""),
        ("Thrust-to-weight ratio", result["thrust_to_weight"], ""),
        ("Average fuel burn", in_weight_unit(result["fuel_consumption"]), f"{weight_unit}/h"),
    ]
    breakdown = figures.weight_breakdown_figure(result, weight_unit, scale=to_si(1.0, weight_unit, "Mass"),
                                                screen_width=screen_width)
    range_payload = figures.range_payload_figure(
        result["range_payload"], weight_unit, distance_unit,
        weight_scale=to_si(1.0, weight_unit, "Mass"),
        distance_scale=to_si(1.0, distance_unit, "Length") / 1000.0,
        screen_width=screen_width,
    )
    results = html.Div([result_table(rows, decimals=2)] + [note(text) for text in result["warnings"]])
    return results, breakdown, range_payload


# =============================================================================
# COORDINATE SYSTEM CONVERTER
# =============================================================================

@app.callback(
    Output("coord-geodetic-rows", "style"),
    Output("coord-ecef-rows", "style"),
    Input("coord-direction", "value"),
)
def toggle_coordinate_inputs(direction):
    return shown(direction == "geodetic"), shown(direction == "ecef")


@app.callback(
    Output("coord-results", "children"),
    Input("coord-direction", "value"),
    Input("coord-lat", "value"),
    Input("coord-lon", "value"),
    Input("coord-alt", "value"),
    Input("coord-x", "value"),
    Input("coord-y", "value"),
    Input("coord-z", "value"),
)
def update_coordinates(direction, latitude, longitude, altitude, x, y, z):
    require(direction)
    try:
        if direction == "geodetic":
            require(latitude, longitude, altitude)
            result = geodetic_to_ecef(latitude, longitude, altitude)
        else:
            require(x, y, z)
            result = ecef_to_geodetic(x, y, z)
    except ValueError as e:
        return calc_error("coordinate-system-converter", e)

    log_feature("coordinate_converter", {"direction": direction})
    rows = [
        ("X", result["x"], "m"),
        ("Y", result["y"], "m"),
        ("Z", result["z"], "m"),
        ("Latitude", result["latitude"], "deg"),
        ("Longitude", result["longitude"], "deg"),
        ("Latitude", format_dms(result["latitude"], "N", "S"), ""),
        ("Longitude", format_dms(result["longitude"], "E", "W"), ""),
        ("Ellipsoid height", result["altitude"], "m"),
        ("Distance from Earth's centre", math.sqrt(result["x"] ** 2 + result["y"] ** 2 + result["z"] ** 2) / 1000.0,
         "km"),
    ]
    return html.Div([result_table(rows, decimals=6), note("WGS84 ellipsoid.")])


# =============================================================================
# ASTRONOMICAL UNIT CONVERTER
# =============================================================================

@app.callback(
    Output("au-results", "children"),
    Input("au-value", "value"),
    Input("au-from", "value"),
    Input("au-to", "value"),
)
def update_astronomical_units(value, from_unit, to_unit):
    require(value, from_unit, to_unit)
    try:
        result = convert_distance(value, from_unit, to_unit)
        metres = convert_distance(value, from_unit, "m")
        every_unit = [
            (DISTANCE_UNIT_NAMES[unit], convert_distance(value, from_unit, unit), unit)
            for unit in DISTANCE_UNITS
        ]
    except ValueError as e:
        return calc_error("astronomical-unit-converter", e)

    log_feature("astronomical_unit_converter", {"from": from_unit, "to": to_unit})
    seconds = light_travel_time(metres)
    every_unit += [
        ("Light travel time", seconds, "s"),
        ("Light travel time", format_duration(seconds), ""),
    ]
    return html.Div([
        html.H4(f"{format_number(value, 4)} {from_unit} = {format_number(result, 6)} {to_unit}",
                className="result-headline"),
        result_table(every_unit, decimals=6),
    ])


# =============================================================================
# REDSHIFT
# =============================================================================

REDSHIFT_UNITS = {
    "wavelength": (list(WAVELENGTH_UNITS), "nm"),
    "frequency": (list(FREQUENCY_UNITS), "THz"),
}


@app.callback(
    Output("rs-observed-unit", "options"),
    Output("rs-observed-unit", "value"),
    Output("rs-emitted-unit", "options"),
    Output("rs-emitted-unit", "value"),
    Input("rs-mode", "value"),
    prevent_initial_call=True
)
def update_redshift_units(mode):
    if mode not in REDSHIFT_UNITS:
        raise PreventUpdate
    units, default = REDSHIFT_UNITS[mode]
    options = [{"label": u, "value": u} for u in units]
    return options, default, options, default


@app.callback(
    Output("rs-results", "children"),
    Input("rs-mode", "value"),
    Input("rs-observed", "value"),
    Input("rs-observed-unit", "value"),
    Input("rs-emitted", "value"),
    Input("rs-emitted-unit", "value"),
)
def update_redshift(mode, observed, observed_unit, emitted, emitted_unit):
    require(mode, observed, observed_unit, emitted, emitted_unit)
    # Mode just changed and the unit dropdowns have not caught up yet
    units, _ = REDSHIFT_UNITS.get(mode, ([], None))
    if observed_unit not in units or emitted_unit not in units:
        raise PreventUpdate
    try:
        if mode == "frequency":
            observed_m = frequency_to_wavelength(frequency_to_hz(observed, observed_unit))
            emitted_m = frequency_to_wavelength(frequency_to_hz(emitted, emitted_unit))
        else:
            observed_m = wavelength_to_m(observed, observed_unit)
            emitted_m = wavelength_to_m(emitted, emitted_unit)
        result = calculate_redshift(observed_m, emitted_m)
    except ValueError as e:
        return calc_error("redshift-calculator", e)

    log_feature("redshift_calculator", {"mode": mode})
    rows = [
        ("Redshift z", result["z"], ""),
        ("Shift", result["shift"], ""),
        ("Stretch factor 1 + z", result["stretch_factor"], ""),
        ("Radial velocity", result["radial_velocity"] / 1000.0, "km/s"),
        ("Velocity / c", result["velocity_fraction"], ""),
        ("Observed wavelength", result["observed_wavelength"] * 1e9, "nm"),
        ("Emitted wavelength", result["emitted_wavelength"] * 1e9, "nm"),
        ("Observed frequency", result["observed_frequency"] / 1e12, "THz"),
        ("Emitted frequency", result["emitted_frequency"] / 1e12, "THz"),
    ]
    return html.Div([result_table(rows, decimals=6), note("Relativistic Doppler velocity along the line of sight.")])


if __name__ == "__main__":
    # Use env var to control debug (1 = on, 0 = off)
    debug_mode = os.environ.get("AEROCALC_DEBUG", "1") == "1"

    if not debug_mode:
        open_browser()

    app.run(debug=debug_mode, host="127.0.0.1", port=8050)
