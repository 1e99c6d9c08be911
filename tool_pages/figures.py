import math

import numpy as np
import plotly.graph_objects as go

from aerocalc import constants
from aerocalc.atmosphere import isa_profile
from aerocalc.isentropic import generate_isentropic_table
from aerocalc.orbital import R_EARTH, transfer_orbit_points
from aerocalc.propulsion import G0
from aerocalc.shocks import generate_shock_table, theta_from_beta, max_deflection_angle
from aerocalc.sphere import CRITICAL_REYNOLDS, pressure_distribution, drag_curve

COLORS = constants.COLORS


def base_layout(fig, title=None, x_title=None, y_title=None, screen_width=None):
    """Shared look for every calculator plot."""
    is_mobile = bool(screen_width) and screen_width < constants.MOBILE_SCREEN_WIDTH
    fig.update_layout(
        title=dict(
            text=title,
            font=dict(size=14 if is_mobile else 18, color="#005F8C"),
            x=0.5,
            xanchor="center",
        ) if title else None,
        xaxis=dict(title=x_title, showgrid=True),
        yaxis=dict(title=y_title, showgrid=True),
        legend=dict(orientation="h", yanchor="top", y=-0.2, xanchor="center", x=0.5,
                    font=dict(size=10 if is_mobile else 12)),
        margin=dict(l=40, r=40, t=60 if title else 30, b=80),
        paper_bgcolor="#f7f9fc",
        plot_bgcolor="#f7f9fc",
        font=dict(color="#1b1e23"),
        dragmode=False,
        hovermode="closest",
    )
    return fig


def empty_figure(message="Enter valid inputs to see the plot."):
    fig = go.Figure()
    fig.add_annotation(text=message, x=0.5, y=0.5, xref="paper", yref="paper",
                       showarrow=False, font=dict(size=14, color="#6c757d"))
    base_layout(fig)
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    return fig


def isa_profile_figure(current=None, points=constants.ISA_PROFILE_POINTS, screen_width=None):
    """
    Temperature, pressure and density against altitude (km), each normalised
    by its sea-level value so they share one axis.
    """
    profile = isa_profile(points=points)
    altitude_km = profile["altitude"] / 1000.0

    fig = go.Figure()
    for key, label in (("temperature", "T/T0"), ("pressure", "p/p0"), ("density", "ρ/ρ0")):
        values = profile[key] / profile[key][0]
        fig.add_trace(go.Scatter(
            x=values, y=altitude_km, mode="lines", name=label,
            line=dict(color=COLORS[key], width=3),
        ))

    if current is not None:
        fig.add_trace(go.Scatter(
            x=[current["temperature"] / profile["temperature"][0],
               current["pressure"] / profile["pressure"][0],
               current["density"] / profile["density"][0]],
            y=[current["altitude"] / 1000.0] * 3,
            mode="markers", name=f"{current['altitude'] / 1000.0:.2f} km",
            marker=dict(color=COLORS["marker"], size=9, symbol="x"),
        ))

    return base_layout(fig, x_title="Ratio to sea level", y_title="Altitude (km)", screen_width=screen_width)


def isentropic_figure(mach=None, gamma=constants.DEFAULT_GAMMA, screen_width=None):
    table = generate_isentropic_table(
        min_mach=0.05, max_mach=constants.ISENTROPIC_PLOT_MACH_MAX,
        steps=constants.FLOW_CURVE_POINTS, gamma=gamma,
    )
    machs = [row["mach"] for row in table]

    fig = go.Figure()
    for key, label, color in (
        ("temperature_ratio", "T/T0", COLORS["temperature"]),
        ("pressure_ratio", "p/p0", COLORS["pressure"]),
        ("density_ratio", "ρ/ρ0", COLORS["density"]),
    ):
        fig.add_trace(go.Scatter(x=machs, y=[row[key] for row in table], mode="lines",
                                 name=label, line=dict(color=color, width=3)))
    fig.add_trace(go.Scatter(
        x=machs, y=[row["area_ratio"] for row in table], mode="lines", name="A/A*",
        line=dict(color=COLORS["area"], width=3, dash="dash"), yaxis="y2",
    ))

    if mach is not None and mach <= constants.ISENTROPIC_PLOT_MACH_MAX:
        fig.add_vline(x=mach, line=dict(color=COLORS["marker"], width=1, dash="dot"))

    base_layout(fig, x_title="Mach number", y_title="Static / stagnation ratio", screen_width=screen_width)
    fig.update_layout(yaxis2=dict(title="A/A*", overlaying="y", side="right", range=[0, 12], showgrid=False))
    return fig


def normal_shock_figure(mach1=None, gamma=constants.DEFAULT_GAMMA, screen_width=None):
    table = generate_shock_table(
        min_mach=1.0001, max_mach=constants.SHOCK_PLOT_MACH_MAX,
        steps=constants.FLOW_CURVE_POINTS, gamma=gamma,
    )
    machs = [row["mach1"] for row in table]

    fig = go.Figure()
    for key, label, color in (
        ("mach2", "M2", COLORS["area"]),
        ("total_pressure_ratio", "p02/p01", COLORS["pitot"]),
        ("temperature_ratio", "T2/T1", COLORS["temperature"]),
        ("density_ratio", "ρ2/ρ1", COLORS["density"]),
    ):
        fig.add_trace(go.Scatter(x=machs, y=[row[key] for row in table], mode="lines",
                                 name=label, line=dict(color=color, width=3)))
    fig.add_trace(go.Scatter(
        x=machs, y=[row["pressure_ratio"] for row in table], mode="lines", name="p2/p1",
        line=dict(color=COLORS["pressure"], width=3, dash="dash"), yaxis="y2",
    ))

    if mach1 is not None and mach1 <= constants.SHOCK_PLOT_MACH_MAX:
        fig.add_vline(x=mach1, line=dict(color=COLORS["marker"], width=1, dash="dot"))

    base_layout(fig, x_title="Upstream Mach number M1", y_title="Ratio", screen_width=screen_width)
    fig.update_layout(yaxis2=dict(title="p2/p1", overlaying="y", side="right", showgrid=False))
    return fig


def theta_beta_figure(mach1, gamma=constants.DEFAULT_GAMMA, solution=None, screen_width=None):
    """θ-β curve for one upstream Mach number, with the chosen solution marked."""
    mu = math.asin(1.0 / mach1)
    betas = np.linspace(mu, math.pi / 2, constants.FLOW_CURVE_POINTS)
    thetas = [math.degrees(theta_from_beta(mach1, float(b), gamma)) for b in betas]
    theta_max, beta_at_max = max_deflection_angle(mach1, gamma)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=thetas, y=np.degrees(betas), mode="lines", name=f"M1 = {mach1:g}",
        line=dict(color=COLORS["pressure"], width=3),
    ))
    fig.add_trace(go.Scatter(
        x=[theta_max], y=[beta_at_max], mode="markers", name=f"θmax = {theta_max:.2f}°",
        marker=dict(color=COLORS["temperature"], size=9),
    ))
    if solution is not None:
        fig.add_trace(go.Scatter(
            x=[solution["deflection_angle"]], y=[solution["wave_angle"]], mode="markers",
            name="Weak solution" if solution["weak"] else "Strong solution",
            marker=dict(color=COLORS["marker"], size=10, symbol="x"),
        ))

    return base_layout(fig, x_title="Deflection angle θ (deg)", y_title="Wave angle β (deg)",
                       screen_width=screen_width)


def hohmann_figure(transfer, points=constants.ORBIT_POINTS, screen_width=None):
    orbits = transfer_orbit_points(transfer["initial_radius"], transfer["final_radius"], points)
    earth = np.linspace(0.0, 2.0 * np.pi, 121)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=R_EARTH / 1000.0 * np.cos(earth), y=R_EARTH / 1000.0 * np.sin(earth),
        fill="toself", mode="lines", name="Earth",
        line=dict(color=COLORS["earth"]), hoverinfo="skip",
    ))
    for key, label, dash in (
        ("initial", "Initial orbit", "solid"),
        ("final", "Final orbit", "solid"),
        ("transfer", "Transfer orbit", "dash"),
    ):
        x, y = orbits[key]
        fig.add_trace(go.Scatter(
            x=x / 1000.0, y=y / 1000.0, mode="lines", name=label,
            line=dict(color=COLORS[f"{key}_orbit"], width=3 if key == "transfer" else 2, dash=dash),
        ))

    base_layout(fig, x_title="x (km)", y_title="y (km)", screen_width=screen_width)
    fig.update_yaxes(scaleanchor="x", scaleratio=1)
    return fig


def rocket_equation_figure(specific_impulse, current_ratio=None, screen_width=None):
    """Delta-v against mass ratio for the given Isp."""
    upper = max(10.0, (current_ratio or 0) * 1.2)
    ratios = np.linspace(1.0, upper, constants.FLOW_CURVE_POINTS)
    delta_v = specific_impulse * G0 * np.log(ratios)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=ratios, y=delta_v / 1000.0, mode="lines", name=f"Isp = {specific_impulse:.0f} s",
        line=dict(color=COLORS["pressure"], width=3),
    ))
    if current_ratio is not None:
        fig.add_trace(go.Scatter(
            x=[current_ratio], y=[specific_impulse * G0 * math.log(current_ratio) / 1000.0],
            mode="markers", name="This vehicle",
            marker=dict(color=COLORS["marker"], size=10, symbol="x"),
        ))
    return base_layout(fig, x_title="Mass ratio m0/mf", y_title="Delta-v (km/s)", screen_width=screen_width)


def mass_fraction_figure(result, screen_width=None):
    fig = go.Figure(go.Pie(
        labels=["Propellant", "Structure + payload"],
        values=[result["propellant_mass"], result["structural_mass"]],
        marker=dict(colors=[COLORS["propellant"], COLORS["structure"]]),
        hole=0.4,
        sort=False,
    ))
    return base_layout(fig, screen_width=screen_width)


def radar_figure(rcs, ranges, current=None, screen_width=None):
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=rcs, y=np.asarray(ranges) / 1000.0, mode="lines", name="Maximum range",
        line=dict(color=COLORS["pressure"], width=3),
    ))
    if current is not None:
        fig.add_trace(go.Scatter(
            x=[current["rcs_m2"]], y=[current["max_range"] / 1000.0], mode="markers",
            name="Target", marker=dict(color=COLORS["marker"], size=10, symbol="x"),
        ))
    base_layout(fig, x_title="Radar cross section (m²)", y_title="Range (km)", screen_width=screen_width)
    fig.update_xaxes(type="log")
    return fig


def delta_v_budget_figure(budget, unit="m/s", screen_width=None):
    scale = 1000.0 if unit == "km/s" else 1.0
    categories = list(budget["breakdown"].keys())
    values = [budget["breakdown"][c] / scale for c in categories]

    fig = go.Figure(go.Bar(
        x=[c.capitalize() for c in categories], y=values,
        marker=dict(color=COLORS["budget_bars"][:len(categories)]),
    ))
    return base_layout(fig, y_title=f"Delta-v ({unit})", screen_width=screen_width)


def lift_drag_figure(sweep, current=None, screen_width=None):
    """CL and CD against angle of attack, L/D on a second axis."""
    alphas = [row["angle_of_attack"] for row in sweep]

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=alphas, y=[row["cl"] for row in sweep], mode="lines", name="CL",
                             line=dict(color=COLORS["lift"], width=3)))
    fig.add_trace(go.Scatter(x=alphas, y=[row["cd"] for row in sweep], mode="lines", name="CD",
                             line=dict(color=COLORS["drag"], width=3)))
    fig.add_trace(go.Scatter(
        x=alphas, y=[row["lift_to_drag"] for row in sweep], mode="lines", name="L/D",
        line=dict(color=COLORS["lift_to_drag"], width=3, dash="dash"), yaxis="y2",
    ))
    if current is not None:
        fig.add_vline(x=current["angle_of_attack"], line=dict(color=COLORS["marker"], width=1, dash="dot"))
        fig.add_vline(x=current["stall_angle"], line=dict(color=COLORS["drag"], width=1, dash="dash"),
                      annotation_text="Stall")

    base_layout(fig, x_title="Angle of attack (deg)", y_title="Coefficient", screen_width=screen_width)
    fig.update_layout(yaxis2=dict(title="L/D", overlaying="y", side="right", showgrid=False))
    return fig


def sphere_pressure_figure(result, screen_width=None):
    angles, cp = pressure_distribution(result["reynolds_number"])

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=angles, y=cp, mode="lines", name="Cp",
                             line=dict(color=COLORS["cp"], width=3)))
    fig.add_vline(x=result["separation_angle"], line=dict(color=COLORS["marker"], width=1, dash="dot"),
                  annotation_text="Separation")
    base_layout(fig, x_title="Angle from front stagnation point (deg)", y_title="Cp",
                screen_width=screen_width)
    fig.update_yaxes(autorange="reversed")
    return fig


def sphere_drag_figure(result=None, screen_width=None):
    reynolds, cd = drag_curve(points=constants.SPHERE_CURVE_POINTS)

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=reynolds, y=cd, mode="lines", name="Smooth sphere",
                             line=dict(color=COLORS["pressure"], width=3)))
    fig.add_vline(x=CRITICAL_REYNOLDS, line=dict(color=COLORS["drag"], width=1, dash="dash"),
                  annotation_text="Drag crisis")
    if result is not None:
        fig.add_trace(go.Scatter(
            x=[result["reynolds_number"]], y=[result["drag_coefficient"]], mode="markers",
            name="This flow", marker=dict(color=COLORS["marker"], size=10, symbol="x"),
        ))
    base_layout(fig, x_title="Reynolds number", y_title="CD", screen_width=screen_width)
    fig.update_xaxes(type="log")
    fig.update_yaxes(type="log")
    return fig


def weight_breakdown_figure(result, unit="kg", scale=1.0, screen_width=None):
    labels = ["Empty", "Fuel", "Payload", "Crew"]
    keys = ["empty_weight", "fuel_weight", "payload_weight", "crew_weight"]
    fig = go.Figure(go.Pie(
        labels=labels,
        values=[result[k] / scale for k in keys],
        marker=dict(colors=COLORS["weights"]),
        hole=0.4,
        sort=False,
        hovertemplate=f"%{{label}}: %{{value:,.0f}} {unit}<extra></extra>",
    ))
    return base_layout(fig, screen_width=screen_width)


def range_payload_figure(points, weight_unit="kg", distance_unit="km", weight_scale=1.0,
                         distance_scale=1.0, screen_width=None):
    """Range-payload envelope from (range km, payload kg) corner points."""
    fig = go.Figure(go.Scatter(
        x=[r / distance_scale for r, _ in points], y=[p / weight_scale for _, p in points],
        mode="lines+markers", name="Envelope", fill="tozeroy",
        line=dict(color=COLORS["payload_range"], width=3),
    ))
    return base_layout(fig, x_title=f"Range ({distance_unit})", y_title=f"Payload ({weight_unit})",
                       screen_width=screen_width)
