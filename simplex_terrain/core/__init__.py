# ==============================================================================
# Файл: simplex_terrain/core/__init__.py
# Назначение: Операции над полями (нормализация, смешивание) и ошибки.
# ==============================================================================
from __future__ import annotations

from .errors import (
    NoiseError,
    InvalidInputError,
    DegenerateRangeError,
    PresetError,
    PresetValidationError,
)
from .normalization import normalize, field_bounds
from .composition import blend

__all__ = [
    "NoiseError",
    "InvalidInputError",
    "DegenerateRangeError",
    "PresetError",
    "PresetValidationError",
    "normalize",
    "field_bounds",
    "blend",
]
