# ========================
# file: simplex_terrain/preset/loader.py
# ========================
from __future__ import annotations
import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Union

from ..core.errors import PresetError
from .defaults import DEFAULT_PRESET
from .model import FbmPreset
from .validators import validate_dict

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise PresetError(f"preset file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise PresetError(f"preset file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PresetError(f"preset file {path} must contain a JSON object")
    return data


def _warn_unknown_keys(data: Mapping[str, Any], reference: Mapping[str, Any], prefix: str = "") -> None:
    for k, v in data.items():
        if k not in reference:
            logger.warning(f"Unknown preset key '{prefix}{k}' ignored")
        elif isinstance(v, Mapping) and isinstance(reference[k], dict):
            _warn_unknown_keys(v, reference[k], prefix=f"{prefix}{k}.")


def load_preset(
    source: Union[str, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> FbmPreset:
    """Load a preset from path/dict, merge with defaults and apply overrides.

    Args:
        source: None (defaults only), path to a JSON file, or raw dict
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        FbmPreset (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if not os.path.isfile(source):
            raise PresetError(f"preset file not found: {source}")
        data = _load_json_file(source)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be None, str path or dict")

    _warn_unknown_keys(data, DEFAULT_PRESET)
    merged = deep_merge(DEFAULT_PRESET, data)
    if overrides:
        _warn_unknown_keys(overrides, DEFAULT_PRESET)
        merged = deep_merge(merged, overrides)

    validate_dict(merged)
    preset = FbmPreset.from_dict(merged)
    logger.info(
        f"Preset '{preset.id}' loaded: octaves={preset.octaves}, "
        f"base_frequency={preset.base_frequency}, base_amplitude={preset.base_amplitude}, "
        f"blend={preset.blend}"
    )
    return preset
