# ==============================================================================
# Файл: simplex_terrain/numerics/fbm.py
# Назначение: fBm, сумма октав simplex-шума по сетке (width x height).
#             Частота удваивается, амплитуда делится пополам на каждой октаве.
# ==============================================================================
from __future__ import annotations
import logging
import math
from typing import List, Tuple

import numpy as np
from numba import njit, prange

from .simplex_2d import simplex_2d, F64
from ..core.errors import InvalidInputError
from ..core.validate import require_positive_int, require_positive_number

logger = logging.getLogger(__name__)

LACUNARITY = 2.0
GAIN = 0.5


def fbm_amplitude(gain: float, octaves: int) -> float:
    if gain == 1.0:
        return float(octaves)
    return (1.0 - gain ** octaves) / (1.0 - gain)


def octave_schedule(octave_count: int, base_frequency: float, base_amplitude: float) -> List[Tuple[float, float]]:
    """Пары (frequency_k, amplitude_k) для k = 0..octave_count-1."""
    octaves = require_positive_int(octave_count, "octave_count")
    freq = require_positive_number(base_frequency, "base_frequency")
    amp = require_positive_number(base_amplitude, "base_amplitude")

    schedule = []
    for k in range(octaves):
        # амплитуда только убывает, переполниться может лишь частота
        if not math.isfinite(freq):
            raise InvalidInputError(
                f"octave {k}: frequency overflows float64 "
                f"(base_frequency={base_frequency}, octaves={octaves})"
            )
        schedule.append((freq, amp))
        freq *= LACUNARITY
        amp *= GAIN
    return schedule


def fbm_amplitude_sum(octave_count: int, base_amplitude: float) -> float:
    """Сумма амплитуд всех октав: предельный масштаб сырого поля."""
    octaves = require_positive_int(octave_count, "octave_count")
    amp = require_positive_number(base_amplitude, "base_amplitude")
    return amp * fbm_amplitude(GAIN, octaves)


@njit(cache=True, parallel=True)
def _fbm_grid_kernel(out: np.ndarray, freqs: np.ndarray, amps: np.ndarray) -> None:
    H, W = out.shape
    n = freqs.shape[0]
    for j in prange(H):
        for i in range(W):
            total = 0.0
            for o in range(n):
                # сетка всегда покрывает freq периодов решётки, независимо от разрешения
                x_ratio = freqs[o] / W
                y_ratio = freqs[o] / H
                total += simplex_2d(i * x_ratio, j * y_ratio) * amps[o]
            out[j, i] = total


def synthesize(
    width: int,
    height: int,
    octave_count: int,
    base_frequency: float,
    base_amplitude: float,
) -> np.ndarray:
    """
    Сырое (ненормированное) fBm-поле формы (height, width).

    Ячейка (x, y) на октаве k берёт шум в точке
    (x * freq_k / width, y * freq_k / height) с весом amp_k.
    """
    w = require_positive_int(width, "width")
    h = require_positive_int(height, "height")
    schedule = octave_schedule(octave_count, base_frequency, base_amplitude)

    freqs = np.array([f for f, _ in schedule], dtype=F64)
    amps = np.array([a for _, a in schedule], dtype=F64)

    logger.debug(
        "fBm: %dx%d, octaves=%d, base_freq=%.4f, base_amp=%.4f",
        w, h, len(schedule), freqs[0], amps[0],
    )

    out = np.empty((h, w), dtype=F64)
    _fbm_grid_kernel(out, freqs, amps)
    return out
