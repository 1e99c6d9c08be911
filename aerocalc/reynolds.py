# aerocalc/reynolds.py

"""
Reynolds number and viscosity helpers.
Re = ρ V L / μ = V L / ν
"""

from .preset_loader import FLUID_PROPERTIES

# Transition bounds (laminar below the first, turbulent above the second)
INTERNAL_TRANSITION = (2300, 4000)     # pipes, ducts
EXTERNAL_TRANSITION = (3e5, 5e5)       # flat plates, airfoils


def determine_flow_regime(re, internal=False):
    """Laminar / Transitional / Turbulent label for a Reynolds number."""
    low, high = INTERNAL_TRANSITION if internal else EXTERNAL_TRANSITION
    if re < low:
        return "Laminar"
    if re < high:
        return "Transitional"
    return "Turbulent"


def _check_flow(velocity, length):
    if velocity <= 0:
        raise ValueError("Velocity must be positive.")
    if length <= 0:
        raise ValueError("Characteristic length must be positive.")


def calculate_reynolds_number(velocity, length, density, dynamic_viscosity,
                              internal=False, fluid_name="Custom"):
    """Re = ρ V L / μ (SI units)."""
    _check_flow(velocity, length)
    if density <= 0:
        raise ValueError("Density must be positive.")
    if dynamic_viscosity <= 0:
        raise ValueError("Dynamic viscosity must be positive.")

    re = density * velocity * length / dynamic_viscosity
    return {
        "reynolds_number": re,
        "flow_regime": determine_flow_regime(re, internal),
        "velocity": velocity,
        "characteristic_length": length,
        "density": density,
        "dynamic_viscosity": dynamic_viscosity,
        "kinematic_viscosity": dynamic_viscosity / density,
        "fluid_name": fluid_name,
        "used_kinematic_formula": False,
    }


def calculate_reynolds_number_kinematic(velocity, length, kinematic_viscosity,
                                        fluid_name="Custom", density=None,
                                        dynamic_viscosity=None, internal=False):
    """Re = V L / ν. Density and μ are carried along for display only."""
    _check_flow(velocity, length)
    if kinematic_viscosity <= 0:
        raise ValueError("Kinematic viscosity must be positive.")

    re = velocity * length / kinematic_viscosity
    return {
        "reynolds_number": re,
        "flow_regime": determine_flow_regime(re, internal),
        "velocity": velocity,
        "characteristic_length": length,
        "density": density,
        "dynamic_viscosity": dynamic_viscosity,
        "kinematic_viscosity": kinematic_viscosity,
        "fluid_name": fluid_name,
        "used_kinematic_formula": True,
    }


def calculate_kinematic_viscosity(density, dynamic_viscosity):
    """ν = μ / ρ"""
    if density <= 0:
        raise ValueError("Density must be positive.")
    if dynamic_viscosity <= 0:
        raise ValueError("Dynamic viscosity must be positive.")
    return dynamic_viscosity / density


def calculate_dynamic_viscosity(density, kinematic_viscosity):
    """μ = ν ρ"""
    if density <= 0:
        raise ValueError("Density must be positive.")
    if kinematic_viscosity <= 0:
        raise ValueError("Kinematic viscosity must be positive.")
    return kinematic_viscosity * density


def get_fluid(key):
    """Preset fluid properties by key (e.g. "air")."""
    if key not in FLUID_PROPERTIES:
        raise ValueError(f"Unknown fluid: {key}")
    return FLUID_PROPERTIES[key]
