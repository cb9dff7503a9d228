# ==============================================================================
# Файл: simplex_terrain/__init__.py
# Назначение: Детерминированный 2D simplex-шум, fBm-карты высот,
#             нормализация и смешивание полей.
# ==============================================================================
from __future__ import annotations

from .numerics import PERM, evaluate, evaluate_grid, synthesize, octave_schedule
from .core import (
    NoiseError,
    InvalidInputError,
    DegenerateRangeError,
    PresetError,
    PresetValidationError,
    normalize,
    blend,
)
from .preset import FbmPreset, load_preset
from .pipeline import generate_fbm_heightmap, apply_fbm_to_heightmap

__all__ = [
    "PERM",
    "evaluate",
    "evaluate_grid",
    "synthesize",
    "octave_schedule",
    "normalize",
    "blend",
    "NoiseError",
    "InvalidInputError",
    "DegenerateRangeError",
    "PresetError",
    "PresetValidationError",
    "FbmPreset",
    "load_preset",
    "generate_fbm_heightmap",
    "apply_fbm_to_heightmap",
]
