# ======================================================================
# Файл: simplex_terrain/core/normalization.py
# Назначение: Перенос диапазона поля [min..max] -> [target_min..target_max].
# ======================================================================
from __future__ import annotations
import logging
import math
from typing import Tuple

import numpy as np
from numba import njit, prange

from .errors import DegenerateRangeError, InvalidInputError
from .validate import as_field, require_finite_number

logger = logging.getLogger(__name__)

# Начальные "пол" и "потолок" для поиска min/max в режиме legacy_bounds
LEGACY_SEED_MIN = 0.0
LEGACY_SEED_MAX = 1.0


@njit(cache=True, parallel=True)
def _rescale_inplace(a: np.ndarray, lo: float, hi: float, t_min: float, t_max: float) -> None:
    den = hi - lo
    span = t_max - t_min
    H, W = a.shape
    for j in prange(H):
        for i in range(W):
            # для v == hi отношение ровно 1.0
            v = t_min + ((a[j, i] - lo) / den) * span
            if v < t_min:
                v = t_min
            elif v > t_max:
                v = t_max
            a[j, i] = v


def field_bounds(field: np.ndarray, legacy_bounds: bool = False) -> Tuple[float, float]:
    """
    Минимум и максимум поля за один проход.
    legacy_bounds=True: поиск начинается с min=0, max=1, т.е. диапазон
    может только расширяться наружу от [0, 1].
    """
    a = as_field(field)
    lo = float(np.min(a))
    hi = float(np.max(a))
    if legacy_bounds:
        lo = min(lo, LEGACY_SEED_MIN)
        hi = max(hi, LEGACY_SEED_MAX)
    return lo, hi


def normalize(
    field: np.ndarray,
    target_min: float = 0.0,
    target_max: float = 1.0,
    *,
    legacy_bounds: bool = False,
) -> np.ndarray:
    """
    Линейно переносит значения поля в [target_min, target_max].

    Минимум поля уходит в target_min, максимум в target_max. Вход не
    изменяется: результат всегда новый массив float64.

    Raises:
        InvalidInputError: поле не 2D / есть NaN/Inf / target_min >= target_max.
        DegenerateRangeError: у поля нулевой диапазон (константа).
    """
    t_min = require_finite_number(target_min, "target_min")
    t_max = require_finite_number(target_max, "target_max")
    if not t_min < t_max:
        raise InvalidInputError(f"normalize: target_min ({t_min}) must be < target_max ({t_max})")

    a = np.array(as_field(field), dtype=np.float64, copy=True)
    lo, hi = field_bounds(a, legacy_bounds=legacy_bounds)

    rng = hi - lo
    if not math.isfinite(rng):
        raise InvalidInputError(f"normalize: value range overflows float64 ({lo}..{hi})")
    if not rng > 0.0:
        raise DegenerateRangeError(
            f"normalize: field has zero value range (min == max == {lo}), cannot rescale"
        )

    logger.debug(
        "normalize: [%.6f..%.6f] -> [%.6f..%.6f]%s",
        lo, hi, t_min, t_max, " (legacy bounds)" if legacy_bounds else "",
    )
    _rescale_inplace(a, lo, hi, t_min, t_max)
    return a
