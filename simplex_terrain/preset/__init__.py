# ========================
# file: simplex_terrain/preset/__init__.py
# ========================
from .model import FbmPreset
from .loader import load_preset, deep_merge
from .defaults import DEFAULT_PRESET
from .validators import validate_dict

__all__ = [
    "FbmPreset",
    "load_preset",
    "deep_merge",
    "DEFAULT_PRESET",
    "validate_dict",
]
