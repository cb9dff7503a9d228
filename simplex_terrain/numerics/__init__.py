# ==============================================================================
# Файл: simplex_terrain/numerics/__init__.py
# Назначение: Ядро шума: таблица перестановок, simplex 2D, fBm.
# ==============================================================================
from __future__ import annotations

from .perm_table import PERM, PERM_BASE, perm_at
from .simplex_2d import F2, G2, evaluate, evaluate_grid
from .fbm import synthesize, octave_schedule, fbm_amplitude_sum

__all__ = [
    "PERM",
    "PERM_BASE",
    "perm_at",
    "F2",
    "G2",
    "evaluate",
    "evaluate_grid",
    "synthesize",
    "octave_schedule",
    "fbm_amplitude_sum",
]
