# aerocalc/constants.py

"""
Application-wide constants for the Aerospace Calculators app.
Physical constants live next to the formulas that use them - this file is for app config constants.
"""

import os

# =============================================================================
# DEBUG SETTINGS
# =============================================================================
DEBUG_LOG = os.environ.get("AEROCALC_DEBUG_LOG", "0") == "1"  # keep off when deployed

# =============================================================================
# DEFAULT VALUES
# =============================================================================
DEFAULT_GAMMA = 1.4
DEFAULT_ALTITUDE_M = 0
DEFAULT_AIRSPEED_MS = 250
DEFAULT_MACH = 2.0
DEFAULT_INITIAL_MASS_KG = 550000
DEFAULT_FINAL_MASS_KG = 150000
DEFAULT_ISP_S = 300
DEFAULT_LEO_ALTITUDE_KM = 200
DEFAULT_GEO_ALTITUDE_KM = 35786
DEFAULT_ANGLE_OF_ATTACK_DEG = 5
DEFAULT_WING_AREA_M2 = 16.2
DEFAULT_WING_SPAN_M = 11.0
DEFAULT_SPHERE_DIAMETER_M = 0.1
DEFAULT_SPHERE_VELOCITY_MS = 10

# =============================================================================
# RESOLUTION SETTINGS (for graph rendering)
# =============================================================================
ISA_PROFILE_POINTS = 200
FLOW_CURVE_POINTS = 200
ORBIT_POINTS = 361
RADAR_CURVE_POINTS = 100
LIFT_DRAG_SWEEP_POINTS = 51
SPHERE_CURVE_POINTS = 300

# Mach range plotted on the isentropic and normal shock pages
ISENTROPIC_PLOT_MACH_MAX = 5.0
SHOCK_PLOT_MACH_MAX = 6.0

# Mach tables on the isentropic and normal shock pages: (first, last, rows)
ISENTROPIC_TABLE_RANGE = (0.1, 5.0, 25)
SHOCK_TABLE_RANGE = (1.1, 10.0, 20)

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
RESULT_DECIMALS = 4
MOBILE_SCREEN_WIDTH = 768  # pixels
DEFAULT_SCREEN_WIDTH = 1024  # fallback for server-side calls

# =============================================================================
# STYLING CONSTANTS
# =============================================================================
COLORS = {
    "temperature": "#d62728",
    "pressure": "#1f77b4",
    "density": "#2ca02c",
    "area": "#9467bd",
    "pitot": "#ff7f0e",
    "marker": "black",
    "initial_orbit": "#1f77b4",
    "final_orbit": "#2ca02c",
    "transfer_orbit": "#ff7f0e",
    "earth": "#4a90d9",
    "propellant": "#ff7f0e",
    "structure": "#7f7f7f",
    "lift": "#1f77b4",
    "drag": "#d62728",
    "lift_to_drag": "#2ca02c",
    "cp": "#9467bd",
    "payload_range": "#1f77b4",
    "weights": ["#7f7f7f", "#ff7f0e", "#2ca02c", "#1f77b4"],
    "budget_bars": ["#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd"],
}
