# ==============================================================================
# Файл: simplex_terrain/export/image_exporters.py
# Назначение: Серое превью карты высот в PNG.
# ==============================================================================
from __future__ import annotations
import logging
import os
from pathlib import Path

import numpy as np
from PIL import Image

from ..core.validate import as_field

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    """Убеждается, что директория для файла существует."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def field_to_gray8(field: np.ndarray) -> np.ndarray:
    """
    Поле -> uint8 (H, W) для просмотра. Значения вне [0, 1] клипуются,
    поэтому нормализуйте поле заранее.
    """
    a = as_field(field)
    return np.round(np.clip(a, 0.0, 1.0) * 255.0).astype(np.uint8)


def write_height_preview(path: str, field: np.ndarray, scale: int = 1) -> None:
    """Сохраняет поле как 8-битный PNG (строка 0 сверху)."""
    gray = field_to_gray8(field)
    h, w = gray.shape

    img = Image.fromarray(gray)  # uint8 2D -> режим "L"
    if scale > 1:
        img = img.resize((w * scale, h * scale), Image.Resampling.NEAREST)

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    img.save(tmp_path, format="PNG")
    os.replace(tmp_path, path)
    logger.info(f"Preview image saved: {path} ({w}x{h}, scale={scale})")
