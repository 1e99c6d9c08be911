# aerocalc/catalogue.py

"""
Tool catalogue shown on the home page.
"active" tools have a calculator page; "coming-soon" tools get a placeholder.
"""

ACTIVE = "active"
COMING_SOON = "coming-soon"

CATEGORIES = [
    "General Utilities",
    "Atmospheric & Flight",
    "Aerodynamics",
    "Propulsion",
    "Orbital Mechanics",
    "Structures",
    "Communications",
    "Mission Planning",
    "Astronomy",
]


def _tool(key, title, description, category, status=ACTIVE):
    return {
        "key": key,
        "title": title,
        "description": description,
        "category": category,
        "status": status,
    }


TOOLS = [
    # General Utilities
    _tool("unit-converter", "Unit Converter",
          "Convert between common units frequently used in aerospace engineering calculations.",
          "General Utilities"),
    _tool("coordinate-system-converter", "Coordinate System Converter",
          "Convert between geodetic (latitude, longitude, altitude) and Earth-centred ECEF coordinates.",
          "General Utilities"),
    _tool("astronomical-unit-converter", "Astronomical Unit Converter",
          "Convert between AU, km, m, light-years, parsecs and lunar distance.",
          "General Utilities"),

    # Atmospheric & Flight
    _tool("isa-calculator", "ISA Calculator",
          "International Standard Atmosphere properties from altitude, pressure or temperature.",
          "Atmospheric & Flight"),
    _tool("climb-descent-performance", "Climb & Descent Performance",
          "Rate of climb, climb gradient and descent planning.",
          "Atmospheric & Flight", COMING_SOON),
    _tool("range-endurance-analysis", "Range & Endurance Analysis",
          "Breguet range and endurance for jet and propeller aircraft.",
          "Atmospheric & Flight", COMING_SOON),
    _tool("aircraft-weight-calculator", "Aircraft Weight Calculator",
          "Weight breakdown, fuel fractions, payload capacity and range-payload trade for common aircraft types.",
          "Atmospheric & Flight"),

    # Aerodynamics
    _tool("mach-calculator", "Mach Number Calculator",
          "Convert between true airspeed and Mach number at any ISA altitude.",
          "Aerodynamics"),
    _tool("reynolds-calculator", "Reynolds Number Calculator",
          "Reynolds number and flow regime for common fluids or custom properties.",
          "Aerodynamics"),
    _tool("isentropic-flow", "Isentropic Flow Calculator",
          "Isentropic ratios from Mach number, or Mach number from any ratio.",
          "Aerodynamics"),
    _tool("normal-shock", "Normal Shock Calculator",
          "Property changes across a normal shock, from Mach number or pitot pressure.",
          "Aerodynamics"),
    _tool("oblique-shock", "Oblique Shock Calculator",
          "Weak and strong oblique shock solutions from the θ-β-M relation.",
          "Aerodynamics"),
    _tool("lift-drag-calculator", "Lift & Drag Calculator",
          "Lift and drag forces, coefficients, stall speed and basic aerodynamic performance.",
          "Aerodynamics"),
    _tool("sphere-flow-calculator", "Sphere Flow Calculator",
          "Drag coefficient, pressure distribution and flow features around a sphere across Reynolds numbers.",
          "Aerodynamics"),
    _tool("prandtl-meyer-expansion", "Prandtl-Meyer Expansion",
          "Supersonic expansion fan turning angles.",
          "Aerodynamics", COMING_SOON),

    # Propulsion
    _tool("rocket-equation", "Rocket Equation Calculator",
          "Tsiolkovsky rocket equation: solve for delta-v, initial mass or specific impulse.",
          "Propulsion"),
    _tool("propellant-mass-fraction", "Propellant Mass Fraction",
          "Propellant and structural mass fractions of a vehicle or stage.",
          "Propulsion"),
    _tool("twr-calculator", "TWR Calculator",
          "Calculate Thrust-to-Weight Ratio for aircraft or rockets.",
          "Propulsion"),
    _tool("specific-impulse-converter", "Specific Impulse Converter",
          "Convert specific impulse between seconds and exhaust velocity units.",
          "Propulsion"),
    _tool("nozzle-design", "Nozzle Design (C-D)",
          "Converging-diverging nozzle sizing.",
          "Propulsion", COMING_SOON),

    # Orbital Mechanics
    _tool("orbital-calculator", "Orbital Period & Velocity",
          "Velocity and period of a circular orbit around Earth.",
          "Orbital Mechanics"),
    _tool("hohmann-transfer", "Hohmann Transfer Calculator",
          "Delta-v and transfer time between two circular orbits.",
          "Orbital Mechanics"),
    _tool("delta-v-budget-tool", "Delta-V Budget Tool",
          "Sum mission phases into a delta-v budget with a complexity assessment.",
          "Orbital Mechanics"),
    _tool("keplers-equation-solver", "Kepler's Equation Solver",
          "Mean, eccentric and true anomaly conversions.",
          "Orbital Mechanics", COMING_SOON),
    _tool("orbit-propagation-tool", "Orbit Propagation Tool",
          "Propagate an orbit forward in time.",
          "Orbital Mechanics", COMING_SOON),

    # Structures
    _tool("structural-analysis-tool", "Structural Analysis Tool",
          "Basic stress and deflection checks.",
          "Structures", COMING_SOON),
    _tool("column-buckling-calculator", "Column Buckling Calculator",
          "Euler buckling loads for common end conditions.",
          "Structures", COMING_SOON),

    # Communications
    _tool("radar-range", "Radar Range Equation",
          "Maximum detection range from transmit power, gain, frequency and target RCS.",
          "Communications"),
    _tool("rf-link-budget", "RF Link Budget",
          "Received power and margin for a radio link.",
          "Communications", COMING_SOON),

    # Mission Planning
    _tool("payload-mass-budget", "Payload Mass Budget",
          "Track subsystem masses against the launch allocation.",
          "Mission Planning", COMING_SOON),

    # Astronomy
    _tool("redshift-calculator", "Redshift Calculator",
          "Redshift, radial velocity and frequency shift of a spectral line.",
          "Astronomy"),
]

_TOOLS_BY_KEY = {tool["key"]: tool for tool in TOOLS}


def get_tool(key):
    """Tool entry by URL key, or None."""
    return _TOOLS_BY_KEY.get(key)


def active_tools():
    return [tool for tool in TOOLS if tool["status"] == ACTIVE]


def tools_by_category(include_coming_soon=True):
    """Ordered mapping of category -> tools, empty categories dropped."""
    grouped = {}
    for category in CATEGORIES:
        tools = [
            tool for tool in TOOLS
            if tool["category"] == category and (include_coming_soon or tool["status"] == ACTIVE)
        ]
        if tools:
            grouped[category] = tools
    return grouped


def tool_path(key):
    return f"/tools/{key}"
