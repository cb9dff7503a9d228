# ==============================================================================
# Файл: simplex_terrain/numerics/simplex_2d.py
# Назначение: 2D Simplex noise (Gustavson, "Simplex noise demystified")
#             на фиксированной таблице перестановок. Без сидов: один и тот же
#             вход всегда даёт один и тот же выход.
# ==============================================================================
from __future__ import annotations
import math

import numpy as np
from numba import njit, prange

from .perm_table import PERM, PERM_MASK
from ..core.errors import InvalidInputError

F64 = np.float64

F2 = 0.5 * (math.sqrt(3.0) - 1.0)    # skew
G2 = (3.0 - math.sqrt(3.0)) / 6.0    # unskew

# Начиная с 2^52 у float64 нет дробной части: точка в skew-пространстве
# всегда лежит в вершине решётки, где шум равен нулю.
LATTICE_LIMIT = 2.0 ** 52


@njit(inline='always', cache=True)
def _fast_floor(v: float) -> int:
    # Округление к -inf: int() режет к нулю, поэтому для отрицательных
    # дробных значений вычитаем единицу. |v| < LATTICE_LIMIT.
    i = int(v)
    return i - 1 if v < i else i


@njit(inline='always', cache=True)
def _grad(h: int, x: float, y: float) -> float:
    # Младшие 3 бита хеша -> одно из 8 направлений градиента.
    g = h & 7
    u = x if g < 4 else y
    v = y if g < 4 else x
    a = -u if (g & 1) != 0 else u
    b = -2.0 * v if (g & 2) != 0 else 2.0 * v
    return a + b


@njit(inline='always', cache=True)
def _corner(h: int, dx: float, dy: float) -> float:
    t = 0.5 - dx * dx - dy * dy
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * _grad(h, dx, dy)


@njit(cache=True)
def simplex_2d(x: float, y: float) -> float:
    # 1) skew -> номер ячейки
    s = (x + y) * F2
    xs = x + s
    ys = y + s
    # сюда же попадает inf от переполнения x + y
    if not (abs(xs) < LATTICE_LIMIT and abs(ys) < LATTICE_LIMIT):
        return 0.0
    i = _fast_floor(xs)
    j = _fast_floor(ys)

    # 2) unskew начала ячейки и смещение точки от него
    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # 3) какой из двух треугольников
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    # 4) смещения до средней и дальней вершин
    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    # 5) хеш вершин; маска вместо % держит индексы неотрицательными
    ii = i & PERM_MASK
    jj = j & PERM_MASK
    h0 = PERM[ii + PERM[jj]]
    h1 = PERM[ii + i1 + PERM[jj + j1]]
    h2 = PERM[ii + 1 + PERM[jj + 1]]

    # 6) сумма вкладов
    return _corner(h0, x0, y0) + _corner(h1, x1, y1) + _corner(h2, x2, y2)


@njit(cache=True, parallel=True)
def _simplex_grid_kernel(xs: np.ndarray, ys: np.ndarray, out: np.ndarray) -> None:
    H, W = xs.shape
    for j in prange(H):
        for i in range(W):
            out[j, i] = simplex_2d(xs[j, i], ys[j, i])


def evaluate(x: float, y: float) -> float:
    """
    Значение шума в точке (x, y). Детерминировано, непрерывно,
    на практике лежит заметно внутри [-1, 1].
    """
    fx = float(x)
    fy = float(y)
    if not (math.isfinite(fx) and math.isfinite(fy)):
        raise InvalidInputError(f"evaluate: coordinates must be finite, got ({x}, {y})")
    return float(simplex_2d(fx, fy))


def evaluate_grid(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Поэлементный evaluate для двух массивов координат одной формы."""
    ax = np.asarray(xs, dtype=F64)
    ay = np.asarray(ys, dtype=F64)
    if ax.shape != ay.shape:
        raise InvalidInputError(f"evaluate_grid: shape mismatch {ax.shape} vs {ay.shape}")
    if not (np.isfinite(ax).all() and np.isfinite(ay).all()):
        raise InvalidInputError("evaluate_grid: coordinates must be finite")

    shape = ax.shape
    ax2 = np.ascontiguousarray(ax.reshape(1, -1) if ax.ndim != 2 else ax)
    ay2 = np.ascontiguousarray(ay.reshape(1, -1) if ay.ndim != 2 else ay)
    out = np.empty(ax2.shape, dtype=F64)
    if out.size:
        _simplex_grid_kernel(ax2, ay2, out)
    return out.reshape(shape)
