# aerocalc/lift_drag.py

"""
Wing lift and drag from a thin-airfoil lift curve and a parabolic drag polar.

    CL = CL0 + 2π α           (capped at CLmax, linear decay past stall)
    CD = CD0 + CL² / (π AR e)
    L  = CL q S,  D = CD q S,  q = ½ ρ V²

Air density comes from the ISA model at the given altitude.
"""

import math

import numpy as np

from .atmosphere import isa_from_altitude
from .preset_loader import AIRFOILS

LIFT_CURVE_SLOPE = 2.0 * math.pi   # per radian
POST_STALL_DROP = 0.1              # CL lost per degree beyond stall
POST_STALL_MIN_CL = 0.3
HIGH_ALPHA_WARNING = 25.0          # degrees
STALL_SPEED_MARGIN = 1.1


def get_airfoil(key, cl_max=None, cl0=None, cd0=None, oswald_efficiency=None):
    """Preset airfoil data with any user overrides applied."""
    if key not in AIRFOILS:
        raise ValueError(f"Unknown airfoil: {key}")
    airfoil = dict(AIRFOILS[key])
    overrides = {
        "cl_max": cl_max,
        "cl0": cl0,
        "cd0": cd0,
        "oswald_efficiency": oswald_efficiency,
    }
    airfoil.update({k: v for k, v in overrides.items() if v is not None})

    if airfoil["cl_max"] <= 0:
        raise ValueError("Maximum lift coefficient must be positive.")
    if airfoil["cd0"] <= 0:
        raise ValueError("Zero-lift drag coefficient must be positive.")
    if not 0 < airfoil["oswald_efficiency"] <= 1:
        raise ValueError("Oswald efficiency must be between 0 and 1.")
    return airfoil


def lift_coefficient(angle_of_attack, airfoil):
    """CL at an angle of attack (degrees)."""
    stall_angle = airfoil["stall_angle"]
    if angle_of_attack <= stall_angle:
        cl = airfoil["cl0"] + LIFT_CURVE_SLOPE * math.radians(angle_of_attack)
        return min(cl, airfoil["cl_max"])
    stall_cl = min(airfoil["cl0"] + LIFT_CURVE_SLOPE * math.radians(stall_angle), airfoil["cl_max"])
    return max(stall_cl - POST_STALL_DROP * (angle_of_attack - stall_angle), POST_STALL_MIN_CL)


def drag_coefficient(cl, airfoil, aspect_ratio):
    """Drag polar: CD = CD0 + CL² / (π AR e)"""
    return airfoil["cd0"] + cl * cl / (math.pi * aspect_ratio * airfoil["oswald_efficiency"])


def max_lift_to_drag(airfoil, aspect_ratio):
    """(L/D)max = ½ sqrt(π AR e / CD0)"""
    return 0.5 * math.sqrt(math.pi * aspect_ratio * airfoil["oswald_efficiency"] / airfoil["cd0"])


def optimal_angle_of_attack(airfoil, aspect_ratio):
    """Angle of attack (degrees) where CL = sqrt(CD0 π AR e), i.e. best L/D."""
    cl_opt = math.sqrt(airfoil["cd0"] * math.pi * aspect_ratio * airfoil["oswald_efficiency"])
    return math.degrees((cl_opt - airfoil["cl0"]) / LIFT_CURVE_SLOPE)


def stall_speed(weight, density, wing_area, cl_max):
    """V_stall = sqrt(2 W / (ρ S CLmax))"""
    return math.sqrt(2.0 * weight / (density * wing_area * cl_max))


def _check_wing(velocity, wing_area, wing_span):
    if velocity <= 0:
        raise ValueError("Velocity must be positive.")
    if wing_area <= 0:
        raise ValueError("Wing area must be positive.")
    if wing_span <= 0:
        raise ValueError("Wing span must be positive.")


def calculate_lift_and_drag(velocity, altitude, angle_of_attack, wing_area, wing_span,
                            airfoil="naca-2412", weight=None, cl_max=None, cl0=None,
                            cd0=None, oswald_efficiency=None):
    """
    Lift, drag and wing performance at one flight condition (SI units,
    angle in degrees). ``weight`` (N) is only needed for the stall speed.
    """
    _check_wing(velocity, wing_area, wing_span)
    if weight is not None and weight <= 0:
        raise ValueError("Weight must be positive.")
    data = get_airfoil(airfoil, cl_max, cl0, cd0, oswald_efficiency)

    density = isa_from_altitude(altitude)["density"]
    dynamic_pressure = 0.5 * density * velocity ** 2
    aspect_ratio = wing_span ** 2 / wing_area

    cl = lift_coefficient(angle_of_attack, data)
    cd = drag_coefficient(cl, data, aspect_ratio)
    lift = cl * dynamic_pressure * wing_area
    drag = cd * dynamic_pressure * wing_area

    v_stall = stall_speed(weight, density, wing_area, data["cl_max"]) if weight else None
    is_stalled = angle_of_attack > data["stall_angle"]

    warnings = []
    if is_stalled:
        warnings.append("Wing is stalled - lift coefficient is a rough estimate.")
    if v_stall is not None and velocity < STALL_SPEED_MARGIN * v_stall:
        warnings.append("Velocity is close to or below the stall speed.")
    if angle_of_attack > HIGH_ALPHA_WARNING:
        warnings.append("Angle of attack is very high - results may be inaccurate.")

    return {
        "velocity": velocity,
        "altitude": altitude,
        "density": density,
        "dynamic_pressure": dynamic_pressure,
        "wing_area": wing_area,
        "wing_span": wing_span,
        "aspect_ratio": aspect_ratio,
        "angle_of_attack": angle_of_attack,
        "cl": cl,
        "cd": cd,
        "lift_to_drag": cl / cd,
        "lift": lift,
        "drag": drag,
        "weight": weight,
        "stall_speed": v_stall,
        "max_lift_to_drag": max_lift_to_drag(data, aspect_ratio),
        "optimal_angle_of_attack": optimal_angle_of_attack(data, aspect_ratio),
        "airfoil_name": data["name"],
        "cl_max": data["cl_max"],
        "cd0": data["cd0"],
        "oswald_efficiency": data["oswald_efficiency"],
        "stall_angle": data["stall_angle"],
        "is_stalled": is_stalled,
        "warnings": warnings,
    }


def lift_drag_curve(velocity, altitude, wing_area, wing_span, airfoil="naca-2412",
                    alpha_min=-5.0, alpha_max=20.0, steps=26, **overrides):
    """CL, CD, L/D, lift and drag over a sweep of angles of attack."""
    if steps < 2:
        raise ValueError("A sweep needs at least two points.")
    rows = []
    for alpha in np.linspace(alpha_min, alpha_max, steps):
        result = calculate_lift_and_drag(velocity, altitude, float(alpha), wing_area, wing_span,
                                         airfoil, **overrides)
        rows.append({key: result[key] for key in ("angle_of_attack", "cl", "cd", "lift_to_drag", "lift", "drag")})
    return rows
