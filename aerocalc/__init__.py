# aerocalc/__init__.py

"""
Calculation package for the aerospace calculator pages.
Pure functions only - nothing in here imports Dash.
"""

from .constants import (
    DEBUG_LOG,
    DEFAULT_GAMMA,
    COLORS,
    RESULT_DECIMALS,
)

from .preset_loader import (
    dprint,
    load_preset,
    PresetTable,
    FLUID_PROPERTIES,
    DELTA_V_REFERENCE,
    SPECIFIC_IMPULSE_REFERENCE,
    AIRFOILS,
    AIRCRAFT_TYPES,
    MISSION_PROFILES,
)

from .units import (
    BASE_UNITS,
    ALL_CATEGORIES,
    get_units_for_category,
    convert_unit,
    convert_delta_v,
    to_si,
    from_si,
)

from .propulsion import (
    G0,
    calculate_delta_v,
    calculate_initial_mass,
    calculate_required_specific_impulse,
    calculate_propellant_mass_fraction,
    calculate_twr,
    calculate_required_thrust,
    calculate_maximum_mass,
    convert_specific_impulse,
    common_specific_impulse_values,
)

from .atmosphere import (
    ISA_LAYERS,
    speed_of_sound,
    find_layer,
    isa_from_altitude,
    isa_from_pressure,
    isa_from_temperature,
    isa_profile,
)

from .mach import (
    flight_regime,
    calculate_mach_number,
    calculate_airspeed,
)

from .reynolds import (
    determine_flow_regime,
    calculate_reynolds_number,
    calculate_reynolds_number_kinematic,
    calculate_kinematic_viscosity,
    calculate_dynamic_viscosity,
)

from .isentropic import (
    calculate_isentropic_flow,
    mach_from_temperature_ratio,
    mach_from_pressure_ratio,
    mach_from_density_ratio,
    mach_from_area_ratio,
    generate_isentropic_table,
)

from .shocks import (
    calculate_normal_shock,
    calculate_from_pitot_ratio,
    generate_shock_table,
    find_critical_mach,
    theta_from_beta,
    max_deflection_angle,
    calculate_oblique_shock,
)

from .orbital import (
    MU_EARTH,
    R_EARTH,
    calculate_orbital_properties,
    calculate_hohmann_transfer,
    transfer_orbit_points,
)

from .radar import (
    calculate_radar_range,
    range_vs_rcs,
)

from .mission import (
    create_mission_phase,
    add_phase,
    remove_phase,
    set_enabled,
    calculate_delta_v_budget,
    common_delta_v_values,
    required_mass_ratio,
)

from .lift_drag import (
    get_airfoil,
    lift_coefficient,
    drag_coefficient,
    stall_speed,
    calculate_lift_and_drag,
    lift_drag_curve,
)

from .sphere import (
    CRITICAL_REYNOLDS,
    sphere_drag_coefficient,
    separation_angle,
    pressure_distribution,
    calculate_sphere_flow,
    drag_curve,
)

from .aircraft_weight import (
    calculate_aircraft_weight,
    range_payload_points,
)

from .geodesy import (
    geodetic_to_ecef,
    ecef_to_geodetic,
    degrees_to_dms,
    dms_to_degrees,
    format_dms,
)

from .astronomy import (
    SPEED_OF_LIGHT,
    DISTANCE_UNITS,
    convert_distance,
    light_travel_time,
    calculate_redshift,
    radial_velocity,
)

from .catalogue import (
    TOOLS,
    get_tool,
    active_tools,
    tools_by_category,
)

from .formatting import (
    format_number,
    format_duration,
)
