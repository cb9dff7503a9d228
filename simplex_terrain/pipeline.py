# ==============================================================================
# Файл: simplex_terrain/pipeline.py
# Назначение: Полный проход fBm -> нормализация -> смешивание со старой картой.
#             Хост даёт существующую карту высот и получает новую того же размера.
# ==============================================================================
from __future__ import annotations
import logging
import time

import numpy as np

from .core.composition import blend
from .core.normalization import normalize
from .core.validate import as_field
from .numerics.fbm import synthesize
from .preset import FbmPreset, load_preset
from .utils.diag import diag_array

logger = logging.getLogger(__name__)


def generate_fbm_heightmap(width: int, height: int, preset: FbmPreset | None = None) -> np.ndarray:
    """Нормированная fBm-карта формы (height, width)."""
    p = preset or load_preset()

    t0 = time.perf_counter()
    raw = synthesize(width, height, p.octaves, p.base_frequency, p.base_amplitude)
    diag_array(raw, "fbm_raw")

    field = normalize(raw, p.normalize_min, p.normalize_max, legacy_bounds=p.legacy_bounds)
    diag_array(field, "fbm_normalized")

    logger.info(
        f"fBm heightmap {width}x{height} ({p.octaves} octaves) "
        f"generated in {(time.perf_counter() - t0) * 1000:.1f} ms"
    )
    return field


def apply_fbm_to_heightmap(existing: np.ndarray, preset: FbmPreset | None = None) -> np.ndarray:
    """
    Генерирует fBm по размеру existing и смешивает поверх:
    result = fbm * blend + existing * (1 - blend).
    """
    old = as_field(existing, "existing")
    p = preset or load_preset()
    height, width = old.shape

    logger.info(f"--- Simplex fBm on heightmap {width}x{height}, preset '{p.id}' ---")
    generated = generate_fbm_heightmap(width, height, p)

    result = blend(generated, old, p.blend)
    diag_array(result, "blended")
    return result
