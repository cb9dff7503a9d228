# simplex_terrain/core/composition.py
from __future__ import annotations
import logging

import numpy as np

from .errors import InvalidInputError
from .validate import as_field, require_finite_number

logger = logging.getLogger(__name__)


def blend(field_a: np.ndarray, field_b: np.ndarray, factor: float) -> np.ndarray:
    """
    Линейная интерполяция двух полей: A * factor + B * (1 - factor).
    factor не клипуется: вне [0, 1] получаем экстраполяцию.
    """
    A = as_field(field_a, "field_a")
    B = as_field(field_b, "field_b")
    t = require_finite_number(factor, "factor")

    if A.shape != B.shape:
        raise InvalidInputError(f"blend: shape mismatch {A.shape} vs {B.shape}")

    if not 0.0 <= t <= 1.0:
        logger.debug("blend: factor %.4f outside [0, 1], extrapolating", t)

    with np.errstate(over="ignore", invalid="ignore"):
        out = A * t + B * (1.0 - t)
    if not np.isfinite(out).all():
        raise InvalidInputError(f"blend: result overflows float64 (factor={t})")
    return out
