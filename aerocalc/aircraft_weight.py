# aerocalc/aircraft_weight.py

"""
Aircraft weight breakdown and fuel-limited range.

Missing weights are filled from typical fractions for the aircraft type.
Fuel and range are tied together with the Breguet range equation and
fixed pre/post-cruise weight fractions from the mission profile:

    W_final / W_takeoff = f_pre * exp(-c R / (V L/D)) * f_post * f_reserve

Weights are in kg, distances in km, speeds in m/s, TSFC in 1/h.
"""

import math

from .preset_loader import AIRCRAFT_TYPES, MISSION_PROFILES

DEFAULT_TAKEOFF_WEIGHT = 10000.0   # kg, when neither TOW nor empty weight is given
FRACTION_SUM_TOLERANCE = 0.01
TINY = 1e-6


def get_aircraft_type(key):
    if key not in AIRCRAFT_TYPES:
        raise ValueError(f"Unknown aircraft type: {key}")
    return AIRCRAFT_TYPES[key]


def get_mission_profile(key):
    if key not in MISSION_PROFILES:
        raise ValueError(f"Unknown mission type: {key}")
    return MISSION_PROFILES[key]


def cruise_fraction_for_range(range_km, cruise_speed, tsfc, lift_to_drag):
    """Breguet: W_end/W_start = exp(-c R / (V L/D)) with V in km/h."""
    speed_kmh = max(TINY, cruise_speed * 3.6)
    return math.exp(-tsfc * range_km / (speed_kmh * max(TINY, lift_to_drag)))


def range_for_cruise_fraction(fraction, cruise_speed, tsfc, lift_to_drag):
    """Breguet range (km) for a cruise weight fraction."""
    speed_kmh = max(TINY, cruise_speed * 3.6)
    fraction = min(max(fraction, TINY), 0.999999)
    return speed_kmh / tsfc * lift_to_drag * math.log(1 / fraction)


def loiter_fraction(minutes, tsfc, lift_to_drag):
    """Breguet endurance: W_end/W_start = exp(-c t / (L/D))."""
    hours = max(0.0, minutes) / 60
    return math.exp(-tsfc * hours / max(TINY, lift_to_drag))


class _MissionModel:
    """Fuel <-> range for one aircraft type flying one mission profile."""

    def __init__(self, aircraft, mission, cruise_speed):
        self.cruise_speed = cruise_speed
        self.lift_to_drag = aircraft["lift_to_drag"]
        self.tsfc = aircraft["tsfc_per_hour"] * mission["fuel_multiplier"]
        self.f_pre = mission["pre_cruise_fraction"]
        self.f_post = mission["post_cruise_fraction"]
        self.f_reserve = loiter_fraction(mission["reserve_minutes"], self.tsfc, self.lift_to_drag)

    def fuel_for_range(self, takeoff_weight, range_km):
        f_cruise = cruise_fraction_for_range(range_km, self.cruise_speed, self.tsfc, self.lift_to_drag)
        overall = self.f_pre * f_cruise * self.f_post * self.f_reserve
        return max(0.0, takeoff_weight * (1 - overall))

    def range_for_fuel(self, takeoff_weight, fuel):
        overall = max(TINY, 1 - fuel / max(TINY, takeoff_weight))
        f_cruise = overall / max(TINY, self.f_pre * self.f_post * self.f_reserve)
        return range_for_cruise_fraction(f_cruise, self.cruise_speed, self.tsfc, self.lift_to_drag)


def _given(value):
    return value is not None and value > 0


def range_payload_points(model, empty, crew, payload, fuel, mtow=None, mzfw=None, max_fuel=None):
    """
    Corners of the range-payload diagram as (range km, payload kg) pairs:
    max payload at zero range, max payload at MTOW, full tanks at MTOW,
    and the zero-payload ferry range.
    """
    operating_empty = empty + crew
    mtow_ref = mtow if mtow is not None else operating_empty + payload + fuel
    tank = max_fuel if max_fuel is not None else fuel

    payload_max = payload if mzfw is None else min(payload, mzfw - empty)
    payload_max = max(0.0, payload_max)

    fuel_b = max(0.0, min(max(0.0, mtow_ref - operating_empty - payload_max), tank))
    range_b = model.range_for_fuel(operating_empty + payload_max + fuel_b, fuel_b)

    fuel_full = max(0.0, min(tank, mtow_ref - operating_empty))
    payload_c = max(0.0, mtow_ref - operating_empty - fuel_full)
    if mzfw is not None:
        payload_c = max(0.0, min(payload_c, mzfw - empty))
    range_c = model.range_for_fuel(operating_empty + payload_c + fuel_full, fuel_full)

    range_d = model.range_for_fuel(operating_empty + fuel_full, fuel_full)

    points = []
    for point in [(0.0, payload_max), (range_b, payload_max), (range_c, payload_c), (range_d, 0.0)]:
        if not any(abs(point[0] - p[0]) < TINY and abs(point[1] - p[1]) < TINY for p in points):
            points.append(point)
    return sorted(points)


def calculate_aircraft_weight(aircraft_type, mission_type, takeoff_weight=None, empty_weight=None,
                              fuel_weight=None, payload_weight=None, crew_weight=None,
                              range_km=None, endurance=None, cruise_speed=None, cruise_altitude=None,
                              mtow=None, mzfw=None, max_fuel=None):
    """
    Weight breakdown, fractions, range and endurance for an aircraft type
    and mission. Any weight left empty is estimated from the type's
    typical fractions. With ``range_km`` the fuel is sized for that range,
    otherwise the range follows from the fuel load. ``mtow``, ``mzfw`` and
    ``max_fuel`` cap the result (fuel is cut before payload).
    """
    aircraft = get_aircraft_type(aircraft_type)
    mission = get_mission_profile(mission_type)
    for label, value in (("Takeoff weight", takeoff_weight), ("Empty weight", empty_weight),
                         ("Fuel weight", fuel_weight), ("Payload weight", payload_weight),
                         ("Crew weight", crew_weight), ("Range", range_km), ("Cruise speed", cruise_speed)):
        if value is not None and value < 0:
            raise ValueError(f"{label} cannot be negative.")

    warnings = []

    if _given(takeoff_weight):
        tow = takeoff_weight
    elif _given(empty_weight):
        tow = empty_weight / max(TINY, aircraft["empty_fraction"])
    else:
        tow = DEFAULT_TAKEOFF_WEIGHT

    empty = empty_weight if _given(empty_weight) else tow * aircraft["empty_fraction"]
    crew = crew_weight if _given(crew_weight) else tow * aircraft["crew_fraction"]
    if _given(payload_weight):
        payload = payload_weight
    else:
        payload = tow * aircraft["payload_fraction"] * mission["payload_multiplier"]
    fuel = fuel_weight if _given(fuel_weight) else tow * aircraft["fuel_fraction"]

    if mzfw is not None:
        if empty + payload > mzfw:
            payload = max(0.0, mzfw - empty)
            warnings.append("Payload capped by MZFW (empty + payload exceeds MZFW).")
        if mzfw < empty:
            warnings.append("MZFW is below empty weight; payload forced to 0.")

    speed = cruise_speed if _given(cruise_speed) else aircraft["cruise_speed"]
    altitude = cruise_altitude if _given(cruise_altitude) else aircraft["cruise_altitude"]
    model = _MissionModel(aircraft, mission, speed)

    if _given(range_km):
        fuel = model.fuel_for_range(tow, range_km)

    if max_fuel is not None and fuel > max_fuel:
        fuel = max_fuel
        warnings.append("Fuel capped by maximum fuel capacity.")

    total = empty + crew + payload + fuel
    if mtow is not None and total > mtow:
        warnings.append("Takeoff weight exceeds MTOW; reducing fuel then payload.")
        excess = total - mtow
        cut = min(fuel, excess)
        fuel -= cut
        excess -= cut
        if cut > 0:
            warnings.append("Fuel reduced to meet MTOW.")
        if excess > 0:
            cut = min(payload, excess)
            payload -= cut
            if cut > 0:
                warnings.append("Payload reduced to meet MTOW.")
        total = empty + crew + payload + fuel

    mission_range = range_km if _given(range_km) else model.range_for_fuel(total, fuel)
    cruise_hours = max(0.0, mission_range) / max(TINY, speed * 3.6)
    reserve_hours = mission["reserve_minutes"] / 60
    hours = endurance if _given(endurance) else cruise_hours + reserve_hours

    denominator = max(TINY, total)
    fractions = {
        "empty_fraction": empty / denominator,
        "fuel_fraction": fuel / denominator,
        "payload_fraction": payload / denominator,
        "crew_fraction": crew / denominator,
    }
    fraction_sum = sum(fractions.values())
    if abs(fraction_sum - 1) > FRACTION_SUM_TOLERANCE:
        warnings.append(f"Weight fractions sum to {fraction_sum * 100:.1f}% instead of 100%.")

    result = {
        "aircraft_name": aircraft["name"],
        "mission_name": mission["name"],
        "takeoff_weight": total,
        "empty_weight": empty,
        "fuel_weight": fuel,
        "payload_weight": payload,
        "crew_weight": crew,
        "range": mission_range,
        "endurance": hours,
        "cruise_speed": speed,
        "cruise_altitude": altitude,
        "lift_to_drag": model.lift_to_drag,
        "tsfc": model.tsfc,
        "wing_loading": aircraft["wing_loading"],
        "thrust_to_weight": aircraft["thrust_to_weight"],
        "fuel_consumption": fuel / hours if hours > 0 else 0.0,
        "range_payload": range_payload_points(model, empty, crew, payload, fuel, mtow, mzfw, max_fuel),
        "warnings": warnings,
    }
    result.update(fractions)
    return result
