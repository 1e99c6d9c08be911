# aerocalc/sphere.py

"""
Flow past a smooth sphere: Reynolds number, empirical drag coefficient,
separation angle, surface pressure distribution and wake estimates.
"""

import math

import numpy as np

from .preset_loader import FLUID_PROPERTIES

# Sutherland's law for air
SUTHERLAND_T0 = 288.15     # K
SUTHERLAND_MU0 = 1.789e-5  # Pa·s at T0
SUTHERLAND_S = 110.4       # K
R_AIR = 287.05             # J/(kg·K)
P_ATM = 101325.0           # Pa

CRITICAL_REYNOLDS = 2e5    # drag crisis
WAKE_CP = -0.5

SPHERE_FLUIDS = ("air", "water", "custom")

FLOW_REGIMES = [
    (1, "Stokes Flow (Creeping Flow)", "Creeping flow, no separation"),
    (10, "Low Reynolds Number", "Gradual separation begins"),
    (100, "Transitional Flow", "Separation point moves forward"),
    (1000, "Subcritical Flow", "Laminar separation"),
    (CRITICAL_REYNOLDS, "Critical Flow", "Drag crisis region"),
]
SUPERCRITICAL = ("Supercritical Flow", "Turbulent separation")


def air_properties(temperature):
    """Density (ideal gas at 1 atm) and viscosity (Sutherland) of air at T (K)."""
    if temperature <= 0:
        raise ValueError("Temperature must be positive.")
    mu = (SUTHERLAND_MU0 * (temperature / SUTHERLAND_T0) ** 1.5
          * (SUTHERLAND_T0 + SUTHERLAND_S) / (temperature + SUTHERLAND_S))
    density = P_ATM / (R_AIR * temperature)
    return {"density": density, "dynamic_viscosity": mu, "kinematic_viscosity": mu / density}


def fluid_properties(fluid, temperature=288.15, density=None, dynamic_viscosity=None):
    if fluid == "air":
        return air_properties(temperature)
    if fluid == "water":
        water = FLUID_PROPERTIES["water"]
        return {
            "density": water["density"],
            "dynamic_viscosity": water["dynamic_viscosity"],
            "kinematic_viscosity": water["kinematic_viscosity"],
        }
    if fluid == "custom":
        if density is None or density <= 0:
            raise ValueError("Density must be positive.")
        if dynamic_viscosity is None or dynamic_viscosity <= 0:
            raise ValueError("Dynamic viscosity must be positive.")
        return {"density": density, "dynamic_viscosity": dynamic_viscosity,
                "kinematic_viscosity": dynamic_viscosity / density}
    raise ValueError(f"Unknown fluid: {fluid}")


def sphere_drag_coefficient(re):
    """Piecewise empirical CD(Re) for a smooth sphere."""
    if re <= 0:
        raise ValueError("Reynolds number must be positive.")
    if re < 0.1:
        return 24 / re                                   # Stokes
    if re < 1:
        return 24 / re * (1 + 3 * re / 16)               # Oseen
    if re < 10:
        return 24 / re * (1 + 0.15 * re ** 0.687)        # Schiller-Naumann
    if re < 1000:
        return 24 / re * (1 + 0.15 * re ** 0.687) + 0.42 / (1 + 42500 / re ** 1.16)
    log_re = math.log10(re)
    if log_re < 4.5:
        return 0.4
    if log_re < 5.0:
        return 0.4 - 0.2 * (log_re - 4.5) / 0.5
    return 0.2


def separation_angle(re):
    """Separation angle from the front stagnation point (degrees)."""
    if re < 1:
        return 180.0
    if re < 10:
        return 180 - 10 * math.log10(re)
    if re < 1000:
        return 120 - 20 * math.log10(re / 10)
    if re < CRITICAL_REYNOLDS:
        return 100 - 20 * math.log10(re / 1000)
    return 80.0


def pressure_distribution(re, points=181):
    """
    Surface Cp from 0° (front stagnation) to 180°: potential flow
    Cp = 1 - 9/4 sin²θ up to separation, then a model of the wake.
    """
    angles = np.linspace(0.0, 180.0, points)
    potential = 1 - 2.25 * np.sin(np.radians(angles)) ** 2
    sep = separation_angle(re)
    if re < 1:
        cp = potential
    elif re < 1000:
        cp = potential * np.exp(-((angles - sep) ** 2) / 100)
    else:
        cp = np.where(angles < sep, potential, WAKE_CP)
    return angles, cp


def wake_length(re, diameter):
    if re < 1:
        return 10 * diameter
    if re < 1000:
        return diameter * (5 + 2 * math.log10(re))
    return diameter * (2 + 1 / math.log10(re))


def boundary_layer_thickness(re, diameter):
    if re < 1:
        return 0.5 * diameter
    return diameter / math.sqrt(re)


def sphere_flow_regime(re):
    for upper, name, description in FLOW_REGIMES:
        if re < upper:
            return name, description
    return SUPERCRITICAL


def calculate_sphere_flow(diameter, velocity, fluid="air", temperature=288.15,
                          density=None, dynamic_viscosity=None):
    """Sphere drag and flow features for a diameter (m), free-stream velocity (m/s) and fluid."""
    if diameter <= 0:
        raise ValueError("Sphere diameter must be positive.")
    if velocity <= 0:
        raise ValueError("Flow velocity must be positive.")
    props = fluid_properties(fluid, temperature, density, dynamic_viscosity)

    re = props["density"] * velocity * diameter / props["dynamic_viscosity"]
    cd = sphere_drag_coefficient(re)
    frontal_area = math.pi * diameter ** 2 / 4
    dynamic_pressure = 0.5 * props["density"] * velocity ** 2
    regime, description = sphere_flow_regime(re)

    return {
        "diameter": diameter,
        "velocity": velocity,
        "fluid": fluid,
        "temperature": temperature if fluid == "air" else None,
        "density": props["density"],
        "dynamic_viscosity": props["dynamic_viscosity"],
        "kinematic_viscosity": props["kinematic_viscosity"],
        "reynolds_number": re,
        "drag_coefficient": cd,
        "frontal_area": frontal_area,
        "dynamic_pressure": dynamic_pressure,
        "drag_force": cd * dynamic_pressure * frontal_area,
        "separation_angle": separation_angle(re),
        "wake_length": wake_length(re, diameter),
        "boundary_layer_thickness": boundary_layer_thickness(re, diameter),
        "flow_regime": regime,
        "regime_description": description,
        "past_drag_crisis": re >= CRITICAL_REYNOLDS,
    }


def drag_curve(re_min=0.1, re_max=1e6, points=300):
    """Log-spaced (Re, CD) arrays for the drag curve plot."""
    reynolds = np.logspace(math.log10(re_min), math.log10(re_max), points)
    return reynolds, np.array([sphere_drag_coefficient(float(r)) for r in reynolds])
