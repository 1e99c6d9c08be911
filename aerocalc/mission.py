# aerocalc/mission.py

"""
Delta-v budgeting for multi-phase missions.
A mission is a list of phase dicts; totals and the per-category breakdown
only count enabled phases, except ``total_delta_v`` which counts all.
"""

import math
import uuid

from .preset_loader import DELTA_V_REFERENCE
from .propulsion import G0

PHASE_CATEGORIES = ("launch", "transfer", "orbital", "landing", "other")

COMMON_MISSION_PHASES = [
    "Launch to LEO",
    "LEO to GTO",
    "GTO to GEO",
    "LEO to Moon",
    "Moon Landing",
    "Moon to Earth",
    "LEO to Mars",
    "Mars Landing",
    "Mars to Earth",
    "Deep Space Maneuver",
    "Station Keeping",
    "Deorbit",
    "Orbit Insertion",
    "Plane Change",
    "Altitude Change",
    "Attitude Control",
    "Rendezvous",
    "Docking",
    "Undocking",
    "Emergency Maneuver",
]

# (upper total delta-v in m/s, label, recommendations)
COMPLEXITY_LEVELS = [
    (2000, "Low Complexity", [
        "Simple mission with low delta-v requirements",
        "Consider single-stage or simple multi-stage design",
        "Minimal propellant mass fraction needed",
    ]),
    (5000, "Moderate Complexity", [
        "Moderate delta-v requirements",
        "Consider multi-stage rocket or efficient propulsion",
        "Plan for adequate propellant margins (10-20%)",
    ]),
    (10000, "High Complexity", [
        "High delta-v requirements",
        "Requires advanced propulsion systems",
        "Consider electric propulsion for deep space phases",
        "Plan for significant propellant margins (20-30%)",
    ]),
    (20000, "Very High Complexity", [
        "Very high delta-v requirements",
        "Requires multiple propulsion systems",
        "Consider nuclear or advanced electric propulsion",
        "Plan for large propellant margins (30-50%)",
        "May require gravity assists or aerobraking",
    ]),
]

EXTREME_COMPLEXITY = ("Extreme Complexity", [
    "Extreme delta-v requirements",
    "Requires revolutionary propulsion technology",
    "Consider nuclear thermal or fusion propulsion",
    "Plan for massive propellant margins (50%+)",
    "Gravity assists and aerobraking essential",
    "May require in-situ resource utilization",
])


def create_mission_phase(name, delta_v, category, description=None, enabled=True):
    """New phase dict with a unique id."""
    if category not in PHASE_CATEGORIES:
        raise ValueError(f"Unknown phase category: {category}")
    if delta_v is None or math.isnan(delta_v) or delta_v < 0:
        raise ValueError("Phase delta-v must be a non-negative number.")
    return {
        "id": f"phase-{uuid.uuid4().hex[:12]}",
        "name": name,
        "delta_v": float(delta_v),
        "category": category,
        "description": description,
        "enabled": enabled,
    }


def assess_complexity(total_delta_v):
    """(label, recommendations) for an enabled delta-v total in m/s."""
    for upper, label, recommendations in COMPLEXITY_LEVELS:
        if total_delta_v < upper:
            return label, list(recommendations)
    label, recommendations = EXTREME_COMPLEXITY
    return label, list(recommendations)


def calculate_delta_v_budget(phases):
    """
    Totals, per-category breakdown and complexity for a list of phases.
    An empty mission returns zeros and a hint to add phases.
    """
    breakdown = {category: 0.0 for category in PHASE_CATEGORIES}

    if not phases:
        return {
            "phases": [],
            "total_delta_v": 0.0,
            "total_delta_v_km": 0.0,
            "enabled_phases": [],
            "enabled_total_delta_v": 0.0,
            "enabled_total_delta_v_km": 0.0,
            "breakdown": breakdown,
            "complexity": "No Mission Defined",
            "recommendations": ["Add mission phases to calculate delta-v budget"],
        }

    total = sum(phase["delta_v"] for phase in phases)
    enabled = [phase for phase in phases if phase.get("enabled", True)]
    enabled_total = sum(phase["delta_v"] for phase in enabled)

    for phase in enabled:
        category = phase.get("category", "other")
        if category not in breakdown:
            category = "other"
        breakdown[category] += phase["delta_v"]

    complexity, recommendations = assess_complexity(enabled_total)

    return {
        "phases": list(phases),
        "total_delta_v": total,
        "total_delta_v_km": total / 1000.0,
        "enabled_phases": enabled,
        "enabled_total_delta_v": enabled_total,
        "enabled_total_delta_v_km": enabled_total / 1000.0,
        "breakdown": breakdown,
        "complexity": complexity,
        "recommendations": recommendations,
    }


def common_delta_v_values():
    """Reference delta-v figures from the presets."""
    return [dict(entry) for entry in DELTA_V_REFERENCE]


def required_mass_ratio(delta_v, specific_impulse):
    """m0/mf needed to fly ``delta_v`` (m/s) on an engine of ``specific_impulse`` (s)."""
    if delta_v < 0:
        raise ValueError("Delta-v cannot be negative.")
    if specific_impulse <= 0:
        raise ValueError("Specific impulse must be positive.")
    return math.exp(delta_v / (specific_impulse * G0))


def add_phase(phases, phase):
    return list(phases or []) + [phase]


def remove_phase(phases, phase_id):
    """Phases without the one carrying ``phase_id``; unknown ids are ignored."""
    return [phase for phase in phases or [] if phase["id"] != phase_id]


def set_enabled(phases, enabled_ids):
    """Copy of ``phases`` with ``enabled`` set from a collection of ids."""
    enabled_ids = set(enabled_ids or [])
    return [dict(phase, enabled=phase["id"] in enabled_ids) for phase in phases or []]
