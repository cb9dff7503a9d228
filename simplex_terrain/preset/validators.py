# ========================
# file: simplex_terrain/preset/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Dict

from ..core.errors import PresetValidationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise PresetValidationError(msg)


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validate a merged preset dict.

    Raises PresetValidationError on the first failing check.
    """
    _require(
        isinstance(cfg.get("id"), str) and bool(cfg["id"]),
        "Preset.id must be non-empty string",
    )

    fbm = cfg.get("fbm")
    _require(isinstance(fbm, dict), "fbm section must be an object")
    octaves = fbm.get("octaves")
    _require(
        isinstance(octaves, int) and not isinstance(octaves, bool) and octaves >= 1,
        "fbm.octaves must be an integer >= 1",
    )
    for key in ("base_frequency", "base_amplitude"):
        v = _as_float(fbm.get(key))
        _require(math.isfinite(v) and v > 0.0, f"fbm.{key} must be > 0")

    # blend не ограничиваем [0,1]: вне диапазона это экстраполяция
    _require(math.isfinite(_as_float(cfg.get("blend"))), "blend must be a finite number")

    norm = cfg.get("normalize")
    _require(isinstance(norm, dict), "normalize section must be an object")
    lo = _as_float(norm.get("min"))
    hi = _as_float(norm.get("max"))
    _require(math.isfinite(lo) and math.isfinite(hi), "normalize.min/max must be finite numbers")
    _require(lo < hi, "normalize.min must be < normalize.max")
    _require(
        isinstance(norm.get("legacy_bounds", False), bool),
        "normalize.legacy_bounds must be a boolean",
    )
