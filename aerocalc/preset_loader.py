# aerocalc/preset_loader.py

"""
Reference data loading.
Handles loading the JSON preset files (fluids, reference delta-v values,
reference specific impulses) from the presets folder once at boot.
"""

import os
import json
from .constants import DEBUG_LOG


def dprint(*args, **kwargs):
    """Debug print that can be globally toggled."""
    if DEBUG_LOG:
        print(*args, **kwargs)


def presets_dir(folder_name="presets"):
    """Folder holding the preset JSON files (next to this module)."""
    base_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_dir, folder_name)


def load_preset(filename, default=None, folder_name="presets"):
    """
    Load one preset JSON file.

    Args:
        filename: File name inside the presets folder (e.g. "fluids.json")
        default: Value returned when the file is missing or unreadable
        folder_name: Name of the presets folder

    Returns:
        Parsed JSON content, or ``default``
    """
    filepath = os.path.join(presets_dir(folder_name), filename)

    if not os.path.exists(filepath):
        print(f"[WARNING] Preset file not found: {filepath}")
        return default

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"[ERROR] Failed to load {filename}: {e}")
        return default

    dprint(f"[DEBUG] Loaded preset {filename}")
    return data


def get_option_list(presets, label_key="name"):
    """
    Convert a preset mapping to dropdown options format.
    Format: {"label": <name>, "value": <key>}
    """
    return [
        {"label": entry.get(label_key, key), "value": key}
        for key, entry in presets.items()
    ]


class PresetTable:
    """
    Wrapper around a boot-time preset dict.
    Provides dict-like, read-mostly access without disk I/O on access.
    """
    def __init__(self, data_dict):
        self._data = data_dict

    def __getitem__(self, key):
        return self._data[key]

    def get(self, key, default=None):
        return self._data.get(key, default)

    def __contains__(self, key):
        return key in self._data

    def keys(self):
        return self._data.keys()

    def items(self):
        return self._data.items()

    def __len__(self):
        return len(self._data)

    def options(self, label_key="name"):
        """Dropdown options for dcc.Dropdown."""
        return get_option_list(self._data, label_key)


# =============================================================================
# BOOT-TIME LOADING
# =============================================================================
print("[BOOT] Loading calculator presets...")
FLUID_PROPERTIES = PresetTable(load_preset("fluids.json", default={}))
DELTA_V_REFERENCE = load_preset("delta_v_reference.json", default=[])
SPECIFIC_IMPULSE_REFERENCE = load_preset("specific_impulse_reference.json", default=[])
AIRFOILS = PresetTable(load_preset("airfoils.json", default={}))
AIRCRAFT_TYPES = PresetTable(load_preset("aircraft_types.json", default={}))
MISSION_PROFILES = PresetTable(load_preset("mission_profiles.json", default={}))
print(f"[BOOT] Loaded {len(FLUID_PROPERTIES)} fluids, "
      f"{len(DELTA_V_REFERENCE)} delta-v references, "
      f"{len(SPECIFIC_IMPULSE_REFERENCE)} Isp references, "
      f"{len(AIRFOILS)} airfoils, {len(AIRCRAFT_TYPES)} aircraft types")
