# ========================
# file: simplex_terrain/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

# Значения по умолчанию компонента "Simplex Noise" на террейне.
DEFAULT_PRESET: Dict[str, Any] = {
    "id": "fbm/default",
    "fbm": {
        "octaves": 8,
        "base_frequency": 4.0,
        "base_amplitude": 1.0,
    },
    # 1.0 = новая карта целиком заменяет старую
    "blend": 1.0,
    "normalize": {
        "min": 0.0,
        "max": 1.0,
        "legacy_bounds": False,
    },
}
