# ==============================================================================
# Файл: simplex_terrain/core/validate.py
# Назначение: Проверки входных данных, общие для всех стадий.
# ==============================================================================
from __future__ import annotations
import math
from typing import Any

import numpy as np

from .errors import InvalidInputError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidInputError(msg)


def require_positive_int(value: Any, name: str) -> int:
    _require(
        isinstance(value, (int, np.integer)) and not isinstance(value, bool),
        f"{name} must be an integer, got {type(value).__name__}",
    )
    _require(value > 0, f"{name} must be > 0, got {value}")
    return int(value)


def require_positive_number(value: Any, name: str) -> float:
    _require(
        isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool),
        f"{name} must be a number, got {type(value).__name__}",
    )
    v = float(value)
    _require(math.isfinite(v) and v > 0.0, f"{name} must be finite and > 0, got {value}")
    return v


def require_finite_number(value: Any, name: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number, got {type(value).__name__}") from None
    _require(math.isfinite(v), f"{name} must be finite, got {value}")
    return v


def as_field(arr: Any, name: str = "field") -> np.ndarray:
    """
    Приводит вход к 2D float64 массиву (H, W) без NaN/Inf.
    Копию не делает, если вход уже подходящий.
    """
    _require(arr is not None, f"{name} is None")
    a = np.asarray(arr, dtype=np.float64)
    _require(a.ndim == 2, f"{name} must be 2D (height, width), got ndim={a.ndim}")
    _require(a.size > 0, f"{name} must not be empty, got shape={a.shape}")
    _require(bool(np.isfinite(a).all()), f"{name} contains NaN/Inf samples")
    return a
