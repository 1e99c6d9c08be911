from dash import dcc, html
import dash_bootstrap_components as dbc

from aerocalc import catalogue
from aerocalc.formatting import format_number


def create_field_row(label, component, width="100%"):
    """Helper to create a consistent field row"""
    return html.Div([
        html.Label(label, className="field-label"),
        component
    ], className="field-row", style={"width": width})


def create_inline_fields(fields):
    """Helper to create inline fields - list of (label, component, width) tuples"""
    return html.Div([
        html.Div([
            html.Label(label, className="field-label-inline"),
            component
        ], style={"width": width, "marginRight": "12px"})
        for label, component, width in fields
    ], className="inline-row")


def number_input(id, value=None, min=None, max=None, step="any"):
    return dcc.Input(
        id=id, type="number", value=value, min=min, max=max, step=step,
        debounce=True, className="number-input", style={"width": "100%"},
    )


def unit_dropdown(id, units, value=None):
    return dcc.Dropdown(
        id=id,
        options=[{"label": u, "value": u} for u in units],
        value=value if value is not None else units[0],
        clearable=False,
        className="unit-dropdown",
    )


def value_with_unit(label, input_id, unit_id, units, value=None, unit=None, min=None):
    """Number box plus unit dropdown on one row."""
    return create_inline_fields([
        (label, number_input(input_id, value=value, min=min), "65%"),
        ("Unit", unit_dropdown(unit_id, units, unit), "30%"),
    ])


def mode_selector(id, options, value):
    return dbc.RadioItems(
        id=id,
        options=[{"label": label, "value": key} for key, label in options],
        value=value,
        inline=True,
        className="mode-selector",
    )


def result_table(rows, decimals=4):
    """
    Results as a two-column table.
    rows: (label, value, unit) tuples; string values are shown verbatim.
    """
    body = []
    for label, value, unit in rows:
        text = value if isinstance(value, str) else format_number(value, decimals)
        body.append(html.Tr([
            html.Td(label, className="result-label"),
            html.Td(f"{text} {unit}".rstrip(), className="result-value"),
        ]))
    return dbc.Table(html.Tbody(body), bordered=False, hover=True, size="sm", className="result-table")


def data_table(columns, rows, decimals=4):
    """
    Multi-column table.
    columns: (key, header) pairs; rows: dicts holding those keys.
    """
    header = html.Thead(html.Tr([html.Th(title) for _, title in columns]))
    body = html.Tbody([
        html.Tr([html.Td(format_number(row[key], decimals)) for key, _ in columns])
        for row in rows
    ])
    return dbc.Table([header, body], bordered=True, striped=True, hover=True, size="sm",
                     responsive=True, className="mach-table")


def mach_table_card(prefix):
    """Collapsible Mach table, filled by the page callback when opened."""
    return dbc.Card([
        dbc.CardHeader(dbc.Button(
            "Show Mach Table", id=f"{prefix}-table-toggle", color="secondary", outline=True, size="sm",
        )),
        dbc.Collapse(dbc.CardBody(html.Div(id=f"{prefix}-table")), id=f"{prefix}-table-collapse", is_open=False),
    ], className="table-card")


def error_alert(message):
    return dbc.Alert(message, color="danger", className="calc-error")


def results_card(results_id, title="Results"):
    """Card with a copy-to-clipboard button bound to the results container."""
    return dbc.Card([
        dbc.CardHeader(html.Div([
            html.Span(title, className="card-title-text"),
            dcc.Clipboard(target_id=results_id, title="Copy results", className="copy-button"),
        ], className="card-header-row")),
        dbc.CardBody(html.Div(id=results_id, className="results-body")),
    ], className="results-card")


def graph_card(graph_id, title):
    return dbc.Card([
        dbc.CardHeader(title),
        dbc.CardBody(dcc.Graph(id=graph_id, config={"displaylogo": False})),
    ], className="graph-card")


def banner():
    return html.Div([
        html.Div([
            html.A("Aerospace Calculators", href="/", className="banner-title"),
        ], className="banner-inner")
    ], className="banner-header")


def page_shell(tool_key, form, results, extra=None):
    """
    Standard tool page: banner, title, form on the left, results on the right,
    optional full-width content (plots) underneath.
    """
    tool = catalogue.get_tool(tool_key)
    return html.Div([
        banner(),
        html.Div([
            html.A("< All tools", href="/", className="back-link"),
            html.H2(tool["title"], className="tool-title"),
            html.P(tool["description"], className="tool-description"),
        ], className="tool-header"),
        dbc.Row([
            dbc.Col(dbc.Card(dbc.CardBody(form), className="form-card"), xs=12, md=5),
            dbc.Col(results, xs=12, md=7),
        ], className="g-3"),
        html.Div(extra or [], className="tool-extra"),
    ], className="tool-page")


def home_layout():
    sections = []
    for category, tools in catalogue.tools_by_category().items():
        cards = []
        for tool in tools:
            active = tool["status"] == catalogue.ACTIVE
            cards.append(dbc.Col(dbc.Card(dbc.CardBody([
                html.H5(
                    html.A(tool["title"], href=catalogue.tool_path(tool["key"])) if active else tool["title"],
                    className="tool-card-title",
                ),
                html.P(tool["description"], className="tool-card-text"),
                dbc.Badge("Coming soon", color="secondary") if not active else None,
            ]), className="tool-card" if active else "tool-card tool-card-disabled"), xs=12, sm=6, lg=4))
        sections.append(html.Div([
            html.H3(category, className="category-title"),
            dbc.Row(cards, className="g-3"),
        ], className="category-section"))

    return html.Div([
        banner(),
        html.Div(
            "These calculators use idealized textbook models and are for educational use only.",
            className="disclaimer-banner-small",
        ),
        html.Div(sections, className="catalogue"),
    ], className="home-page")


def coming_soon_layout(tool):
    return html.Div([
        banner(),
        html.Div([
            html.A("< All tools", href="/", className="back-link"),
            html.H2(tool["title"], className="tool-title"),
            html.P(tool["description"], className="tool-description"),
            dbc.Alert("This tool is under development. Check back soon.", color="info"),
        ], className="tool-header"),
    ], className="tool-page")


def not_found_layout():
    return html.Div([
        banner(),
        html.H1("404 - Page not found"),
        html.A("Back to all tools", href="/"),
    ], className="tool-page")
